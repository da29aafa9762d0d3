"""Source file discovery and filtering."""
import os
from pathlib import Path
from typing import Iterable, List, Optional

from .glob_matcher import compile_glob

# Extensions of files that may contain JSX tags
DEFAULT_EXTENSIONS = ['.js', '.ts', '.jsx', '.tsx']


def get_all_files(root: str | Path) -> List[str]:
    """Recursively collect all file paths below a directory.

    Paths are joined onto `root` as given (not resolved), so a relative root
    yields relative paths. Entries are visited in sorted order. Directories
    that cannot be listed are skipped.

    Args:
        root: Directory to walk

    Returns:
        List of file path strings
    """
    results: List[str] = []
    _walk(Path(root), results)
    return results


def _walk(directory: Path, results: List[str]):
    try:
        entries = sorted(directory.iterdir())
    except PermissionError:
        return

    for entry in entries:
        if entry.is_dir():
            _walk(entry, results)
        else:
            results.append(str(entry))


def filter_by_extension(file_paths: Iterable[str], extensions: Iterable[str]) -> List[str]:
    """Keep only paths whose extension is exactly one of `extensions`.

    Args:
        file_paths: Candidate paths
        extensions: Allowed dot-prefixed extensions (e.g., ['.ts', '.tsx'])

    Returns:
        Matching paths in their original order
    """
    allowed = set(extensions)
    return [path for path in file_paths if os.path.splitext(path)[1] in allowed]


def parse_ignore_patterns(raw: Optional[str]) -> List[str]:
    """Parse a comma-separated string of ignore patterns.

    Example: 'node_modules/*, src/ignore.ts' -> ['node_modules/*', 'src/ignore.ts']
    """
    if not raw:
        return []
    return [piece.strip() for piece in raw.split(',') if piece.strip()]


def filter_ignored_files(file_paths: Iterable[str], ignore_patterns: Iterable[str]) -> List[str]:
    """Drop paths matching any ignore pattern.

    Each pattern is tried against the full path and against its basename; a
    match on either excludes the path.

    Args:
        file_paths: Candidate paths
        ignore_patterns: Wildcard patterns (see glob_matcher)

    Returns:
        Surviving paths in their original order
    """
    predicates = [compile_glob(pattern) for pattern in ignore_patterns]

    kept = []
    for path in file_paths:
        base_name = os.path.basename(path)
        if not any(is_match(path) or is_match(base_name) for is_match in predicates):
            kept.append(path)
    return kept
