"""Per-file scanning pipeline.

Collects candidate files, then runs binding and usage extraction on each one.
A file that cannot be read is reported on its own FileReport and does not
stop the scan.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional

from .bindings import extract_bindings
from .discovery import filter_by_extension, filter_ignored_files, get_all_files
from .usages import Usage, extract_usages


@dataclass
class FileReport:
    """Scan result for a single file."""
    path: str
    usages: Dict[str, List[Usage]] = field(default_factory=dict)
    bindings: Dict[str, str] = field(default_factory=dict)
    error: Optional[str] = None  # Read failure reason, if any

    @property
    def usage_count(self) -> int:
        return sum(len(items) for items in self.usages.values())


def collect_files(root: str | Path, extensions: Iterable[str],
                  ignore_patterns: Iterable[str]) -> List[str]:
    """Walk `root` and apply the extension and ignore filters, in that order.

    Args:
        root: Directory to scan
        extensions: Allowed dot-prefixed extensions
        ignore_patterns: Wildcard ignore patterns

    Returns:
        Candidate file paths
    """
    files = get_all_files(root)
    files = filter_by_extension(files, extensions)
    return filter_ignored_files(files, ignore_patterns)


def scan_file(path: str, encoding: str = 'utf-8') -> FileReport:
    """Read one file and extract its bindings and component usages.

    Undecodable bytes are replaced rather than treated as errors. OS-level
    read failures are captured in the report's `error` field.
    """
    try:
        text = Path(path).read_text(encoding=encoding, errors='replace')
    except OSError as e:
        return FileReport(path=path, error=str(e))

    bindings = extract_bindings(text)
    return FileReport(
        path=path,
        usages=extract_usages(text, bindings),
        bindings=bindings,
    )


def scan_files(paths: Iterable[str], encoding: str = 'utf-8') -> Iterator[FileReport]:
    """Scan files in order, yielding one report per path."""
    for path in paths:
        yield scan_file(path, encoding)
