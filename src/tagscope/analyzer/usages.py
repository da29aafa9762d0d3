"""Component usage extraction from JSX/TSX source text."""
import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from .bindings import extract_bindings

# '<' followed by a capitalised identifier. The '<' is not required to follow a
# non-identifier character, so generic arguments such as Promise<Character>
# are reported as usages too.
TAG_PATTERN = re.compile(r'<([A-Z][a-zA-Z0-9_]*)\b', re.ASCII)


@dataclass
class Usage:
    """Represents one tag occurrence of a component."""
    name: str
    line_number: int  # 1-indexed
    line_text: str  # Stripped line content
    origin_statement: Optional[str] = None  # Import statement that bound `name`


def extract_usages(text: str, bindings: Optional[Dict[str, str]] = None) -> Dict[str, List[Usage]]:
    """Find capitalised tag openings line by line.

    Every non-overlapping match on a line is a separate usage. When a binding
    map is supplied, usages whose name is bound get the import statement
    attached as origin_statement.

    Args:
        text: Raw file content
        bindings: Optional mapping of local names to import statements
            (see extract_bindings)

    Returns:
        Dict mapping component names to their usages, in discovery order
    """
    if bindings is None:
        bindings = {}

    usages: Dict[str, List[Usage]] = {}

    for index, line in enumerate(text.split('\n')):
        line_text = None
        for match in TAG_PATTERN.finditer(line):
            if line_text is None:
                line_text = line.strip()

            name = match.group(1)
            usages.setdefault(name, []).append(Usage(
                name=name,
                line_number=index + 1,
                line_text=line_text,
                origin_statement=bindings.get(name),
            ))

    return usages


def scan_source(text: str) -> Dict[str, List[Usage]]:
    """Extract usages decorated with the file's own import bindings."""
    return extract_usages(text, extract_bindings(text))
