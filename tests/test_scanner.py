"""Integration tests for the scanning pipeline on the sample project."""

import os
from pathlib import Path

import pytest

from tagscope.analyzer.discovery import DEFAULT_EXTENSIONS
from tagscope.analyzer.scanner import FileReport, collect_files, scan_file, scan_files


# Fixture directory
SAMPLE_APP = Path(__file__).parent / 'fixtures' / 'sample_app'
SRC = SAMPLE_APP / 'src'


@pytest.fixture
def app_report():
    """Scan result for src/App.tsx."""
    return scan_file(str(SRC / 'App.tsx'))


def _relative(paths):
    return [os.path.relpath(p, SAMPLE_APP).replace(os.sep, '/') for p in paths]


class TestCollectFiles:
    """Test extension and ignore filtering on a real tree."""

    def test_default_extensions_without_ignores(self):
        files = collect_files(SAMPLE_APP, DEFAULT_EXTENSIONS, [])

        assert 'src/README.txt' not in _relative(files)
        assert 'node_modules/ui-kit/index.js' in _relative(files)

    def test_ignore_patterns(self):
        files = collect_files(SAMPLE_APP, DEFAULT_EXTENSIONS, ['**/node_modules/**', '*test*'])

        assert sorted(_relative(files)) == [
            'src/App.tsx',
            'src/components/Widget.jsx',
            'src/main.tsx',
            'src/types.ts',
        ]

    def test_relative_root_keeps_relative_paths(self, monkeypatch):
        monkeypatch.chdir(SAMPLE_APP)
        files = collect_files('.', ['.tsx'], ['src/*.test.tsx'])

        assert sorted(f.replace(os.sep, '/') for f in files) == ['src/App.tsx', 'src/main.tsx']


class TestScanFile:
    """Test per-file extraction."""

    def test_usages_in_discovery_order(self, app_report):
        assert app_report.error is None
        assert list(app_report.usages) == ['Header', 'Widget', 'Card', 'PageFooter']

    def test_line_numbers(self, app_report):
        assert [u.line_number for u in app_report.usages['Header']] == [7]
        assert [u.line_number for u in app_report.usages['Widget']] == [8, 8]
        assert [u.line_number for u in app_report.usages['PageFooter']] == [10]

    def test_origin_statements(self, app_report):
        named = "import { Header, Footer as PageFooter } from './layout';"
        assert app_report.usages['Header'][0].origin_statement == named
        assert app_report.usages['PageFooter'][0].origin_statement == named
        assert app_report.usages['Widget'][1].origin_statement == "import Widget from './components/Widget';"
        assert app_report.usages['Card'][0].origin_statement is None

    def test_bindings_are_reported(self, app_report):
        assert set(app_report.bindings) == {'Header', 'PageFooter', 'Widget'}

    def test_usage_count(self, app_report):
        assert app_report.usage_count == 5

    def test_generic_type_reported_as_usage(self):
        report = scan_file(str(SRC / 'types.ts'))
        assert [u.line_number for u in report.usages['Character']] == [3]

    def test_undecodable_bytes_are_replaced(self, tmp_path):
        source = tmp_path / 'broken.tsx'
        source.write_bytes(b'const s = "\xff\xfe";\n<Panel />\n')

        report = scan_file(str(source))

        assert report.error is None
        assert report.usages['Panel'][0].line_number == 2

    def test_missing_file_is_reported_not_raised(self, tmp_path):
        report = scan_file(str(tmp_path / 'missing.tsx'))

        assert report.error
        assert report.usages == {}
        assert report.bindings == {}


class TestScanFiles:
    """Test failure isolation across files."""

    def test_read_failure_does_not_stop_scan(self, tmp_path):
        paths = [str(tmp_path / 'missing.tsx'), str(SRC / 'main.tsx')]

        reports = list(scan_files(paths))

        assert [r.path for r in reports] == paths
        assert reports[0].error is not None
        assert reports[1].error is None
        assert reports[1].usages['StrictMode'][0].line_number == 6
        assert reports[1].usages['App'][0].origin_statement == 'import App from "./App.tsx";'

    def test_empty_input(self):
        assert list(scan_files([])) == []

    def test_report_defaults(self):
        report = FileReport(path='x.tsx')
        assert report.usages == {} and report.bindings == {} and report.error is None
        assert report.usage_count == 0
