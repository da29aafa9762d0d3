"""tagscope CLI - Locate JSX component usages and the imports behind them."""
import re
from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
)
from rich.table import Table

from .analyzer.bindings import extract_bindings
from .analyzer.discovery import parse_ignore_patterns
from .analyzer.glob_matcher import matches
from .analyzer.scanner import FileReport, collect_files, scan_files
from .config import __version__, get_config
from .utils.safe_console import SafeConsole

app = typer.Typer(
    name="tagscope",
    help="Locate JSX component usages and the import statements behind them",
    add_completion=False
)
console = SafeConsole()
err_console = SafeConsole(stderr=True)

SEPARATOR = "-" * 20


def _load_config():
    """Load configuration, exiting with an error message if it is invalid."""
    try:
        return get_config()
    except ValueError as e:
        err_console.error(str(e))
        raise typer.Exit(1)


def _normalize_extensions(extensions: List[str]) -> List[str]:
    return [ext if ext.startswith(".") else "." + ext for ext in extensions]


def print_report(report: FileReport):
    """Print the component usages of one file."""
    console.print(f"[bold]File:[/bold] {escape(report.path)}")
    console.print("React Component Instances:")
    for name, usages in report.usages.items():
        console.print(f"  [cyan]Component:[/cyan] {escape(name)}")
        for usage in usages:
            console.print(f"    Line {usage.line_number}: {escape(usage.line_text)}")
            if usage.origin_statement:
                console.print(f"      [dim]imported from[/dim] {escape(usage.origin_statement)}")
    console.print(SEPARATOR)


@app.command()
def scan(
    root: str = typer.Argument(..., help="Root directory to scan"),
    ignore: str = typer.Argument("", help="Comma-separated ignore patterns (e.g. '**/node_modules/**, *test*')"),
    ext: Optional[List[str]] = typer.Option(None, "--ext", "-e", help="Allowed file extension (repeatable; default .js .ts .jsx .tsx)"),
    show_files: bool = typer.Option(True, "--show-files/--hide-files", help="List the scanned files at the end"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Disable the progress bar"),
):
    """Scan a directory for component usages."""
    config = _load_config()

    if not Path(root).is_dir():
        err_console.error(f"Not a directory: {root}")
        raise typer.Exit(1)

    extensions = _normalize_extensions(ext) if ext else config.extensions
    ignore_patterns = config.ignore_patterns + parse_ignore_patterns(ignore)

    try:
        files = collect_files(root, extensions, ignore_patterns)
    except re.error as e:
        err_console.error(f"Invalid ignore pattern: {e}")
        raise typer.Exit(1)

    if not files:
        err_console.warn(f"No files with extensions {', '.join(extensions)} found in {root}")

    reports = []
    show_progress = not quiet and err_console.is_terminal
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=err_console,
        transient=True,
        disable=not show_progress,
    ) as progress:
        task = progress.add_task("[cyan]Scanning files...", total=len(files))
        for report in scan_files(files, config.encoding):
            reports.append(report)
            progress.advance(task)

    for report in reports:
        if report.error:
            err_console.print(f"[bold red]Error reading file {escape(report.path)}:[/bold red] {escape(report.error)}")
        elif report.usages:
            print_report(report)

    if show_files:
        console.print(f"[bold]Scanned Files ({len(files)}):[/bold]")
        for path in files:
            console.print(f"  {escape(path)}")


@app.command()
def imports(
    file: str = typer.Argument(..., help="Source file to inspect"),
):
    """Show the import bindings recognised in a file."""
    config = _load_config()

    try:
        text = Path(file).read_text(encoding=config.encoding, errors="replace")
    except OSError as e:
        err_console.error(f"Cannot read {file}: {e}")
        raise typer.Exit(1)

    bindings = extract_bindings(text)
    if not bindings:
        console.print(f"No import bindings found in {escape(file)}")
        return

    table = Table(title=f"Import Bindings: {escape(file)}")
    table.add_column("Local Name", style="cyan")
    table.add_column("Statement", style="green", overflow="fold")
    for name, statement in bindings.items():
        table.add_row(escape(name), escape(statement))

    console.print(table)


@app.command()
def match(
    path: str = typer.Argument(..., help="Path to test"),
    pattern: str = typer.Argument(..., help="Wildcard pattern ('*' and '**' supported)"),
):
    """Check whether a path matches an ignore pattern.

    Exits with 0 on a match and 1 otherwise.
    """
    try:
        matched = matches(path, pattern)
    except re.error as e:
        err_console.error(f"Invalid pattern {pattern!r}: {e}")
        raise typer.Exit(2)

    if matched:
        console.print(f"[green]✓[/green] {escape(path)} matches {escape(pattern)}")
    else:
        console.print(f"[red]✗[/red] {escape(path)} does not match {escape(pattern)}")
        raise typer.Exit(1)


def _version_callback(value: bool):
    if value:
        console.print(f"tagscope {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True,
                                 help="Show the version and exit"),
):
    """tagscope - Locate JSX component usages and the imports behind them."""
    pass


if __name__ == "__main__":
    app()
