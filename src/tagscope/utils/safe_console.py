"""Encoding-safe Console wrapper for Rich.

Wraps Rich's Console to sanitize Unicode glyphs on terminals that don't
support UTF-8, and adds helpers for diagnostics.
"""
from typing import Any

from rich.console import Console
from rich.markup import escape

from .logger import is_utf8_capable, sanitize_for_terminal


class SafeConsole(Console):
    """Console that sanitizes Unicode output on non-UTF-8 terminals.

    Line wrapping and automatic highlighting are off by default so that source
    lines and import statements are printed verbatim.
    """

    def __init__(self, *args, **kwargs):
        self._needs_sanitization = not is_utf8_capable()

        kwargs.setdefault('soft_wrap', True)
        kwargs.setdefault('highlight', False)
        if self._needs_sanitization:
            kwargs['legacy_windows'] = True

        super().__init__(*args, **kwargs)

    def print(self, *objects: Any, **kwargs) -> None:
        """Print with automatic Unicode sanitization.

        Args:
            *objects: Objects to print (same as Rich Console.print)
            **kwargs: Keyword arguments (same as Rich Console.print)
        """
        if self._needs_sanitization:
            objects = tuple(
                sanitize_for_terminal(obj, force=True) if isinstance(obj, str) else obj
                for obj in objects
            )
        super().print(*objects, **kwargs)

    def error(self, message: str) -> None:
        """Print an error line. `message` is escaped, not parsed as markup."""
        self.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def warn(self, message: str) -> None:
        """Print a warning line. `message` is escaped, not parsed as markup."""
        self.print(f"[bold yellow]⚠ Warning:[/bold yellow] {escape(message)}")
