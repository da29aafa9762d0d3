"""Terminal-safe text output with ASCII fallback for non-UTF-8 terminals.

Detects the terminal encoding and replaces the Unicode glyphs tagscope prints
with ASCII equivalents where they cannot be displayed.
"""
import locale
import sys


# Unicode to ASCII glyph mapping
ICON_MAP = {
    '✓': 'ok',
    '✗': 'x',
    '⚠': '!',
}

UTF8_ENCODINGS = {'utf-8', 'utf8', 'utf_8'}


def detect_terminal_encoding() -> str:
    """Detect the terminal's encoding.

    Returns:
        str: Lower-cased encoding name ('utf-8', 'cp1252', 'ascii', etc.)
    """
    encoding = getattr(sys.stdout, 'encoding', None)
    if encoding:
        return encoding.lower()

    try:
        return locale.getpreferredencoding().lower()
    except (LookupError, ValueError):
        return 'ascii'


def is_utf8_capable() -> bool:
    """Check if the terminal can display UTF-8 glyphs."""
    return detect_terminal_encoding() in UTF8_ENCODINGS


def sanitize_for_terminal(text: str, force: bool = False) -> str:
    """Replace Unicode glyphs with ASCII equivalents if the terminal needs it.

    Args:
        text: Text potentially containing Unicode glyphs
        force: Sanitize even on UTF-8 capable terminals

    Returns:
        str: Text safe for the current terminal
    """
    if not force and is_utf8_capable():
        return text

    for glyph, replacement in ICON_MAP.items():
        text = text.replace(glyph, replacement)
    return text
