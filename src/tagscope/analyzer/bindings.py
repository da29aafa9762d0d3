"""Regex-based import binding extraction for JavaScript/TypeScript sources.

Maps every locally visible name introduced by an ESM import statement to the
full text of that statement. Two statement shapes are recognised:

- Default imports:  import App from "./App";
- Named imports:    import { StrictMode, Foo as Bar } from "react";

No syntax tree is built. Namespace imports, mixed default + named imports,
re-exports and dynamic imports are not recognised.
"""
import re
from typing import Dict, List

# import App from "./App.tsx";
DEFAULT_IMPORT_PATTERN = re.compile(
    r"""import\s+([A-Za-z0-9_$]+)\s+from\s+['"]([^'"]+)['"];?"""
)

# import { StrictMode, Foo as Bar } from "react";
NAMED_IMPORT_PATTERN = re.compile(
    r"""import\s+\{([^}]+)\}\s+from\s+['"]([^'"]+)['"];?"""
)

ALIAS_SEPARATOR = ' as '


def extract_bindings(text: str) -> Dict[str, str]:
    """Extract import bindings from source text.

    Default imports are collected first, then named imports. A name bound more
    than once keeps the statement of the last match processed.

    Args:
        text: Raw file content

    Returns:
        Dict mapping local names to the full import statement text
    """
    bindings: Dict[str, str] = {}

    for match in DEFAULT_IMPORT_PATTERN.finditer(text):
        bindings[match.group(1)] = match.group(0)

    for match in NAMED_IMPORT_PATTERN.finditer(text):
        statement = match.group(0)
        for local_name in _local_names(match.group(1)):
            bindings[local_name] = statement

    return bindings


def _local_names(specifiers: str) -> List[str]:
    """Resolve the local names of a named import list.

    'Foo as Bar' binds 'Bar'; a plain 'Foo' binds 'Foo'. Empty items left by
    trailing commas are dropped.
    """
    names = []
    for item in specifiers.split(','):
        item = item.strip()
        if ALIAS_SEPARATOR in item:
            item = item.split(ALIAS_SEPARATOR)[1].strip()
        if item:
            names.append(item)
    return names
