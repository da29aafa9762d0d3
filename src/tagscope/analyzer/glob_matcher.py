"""Wildcard path matching for ignore patterns.

Supported syntax:
- '*'   matches any run of characters except '/'
- '**'  matches any run of characters including '/'
- '**/' at the start of a pattern optionally skips any leading directories

Everything else is literal. Patterns are compiled to anchored regular
expressions that must consume the whole candidate path.
"""
import re
from typing import Callable

# NUL never appears in a path, so the placeholder cannot collide with input
DOUBLE_STAR_PLACEHOLDER = '\x00DS\x00'
GLOBSTAR_PREFIX = '**/'

REGEX_SPECIAL_CHARS = re.compile(r'([.+^${}()|\[\]\\])')


def glob_to_regex(pattern: str) -> str:
    """Translate a wildcard pattern into regular expression source.

    Args:
        pattern: Wildcard pattern (e.g., 'src/**/*.tsx')

    Returns:
        Regex source anchored at both ends
    """
    prefix = '^'
    if pattern.startswith(GLOBSTAR_PREFIX):
        prefix = '^(?:.*/)?'
        pattern = pattern[len(GLOBSTAR_PREFIX):]

    pattern = pattern.replace('**', DOUBLE_STAR_PLACEHOLDER)
    pattern = REGEX_SPECIAL_CHARS.sub(r'\\\1', pattern)
    pattern = pattern.replace('*', '[^/]*')
    pattern = pattern.replace(DOUBLE_STAR_PLACEHOLDER, '.*')

    return prefix + pattern + r'\Z'


def compile_glob(pattern: str) -> Callable[[str], bool]:
    """Compile a wildcard pattern into a path predicate.

    Args:
        pattern: Wildcard pattern

    Returns:
        Function returning True when a path matches the whole pattern

    Raises:
        re.error: If the pattern does not translate to a valid expression
            (e.g., a leading '?', which is passed through unescaped)
    """
    regex = re.compile(glob_to_regex(pattern))

    def predicate(path: str) -> bool:
        return regex.match(path) is not None

    return predicate


def matches(path: str, pattern: str) -> bool:
    """Check if a path matches a wildcard pattern."""
    return compile_glob(pattern)(path)
