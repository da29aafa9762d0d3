"""Configuration management for tagscope.

Loads environment variables (optionally from a .env file) and provides
centralized config access.
"""
import codecs
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .analyzer.discovery import DEFAULT_EXTENSIONS, parse_ignore_patterns

__version__ = "1.0.0"


class Config:
    """Configuration loader with environment variable support."""

    def __init__(self, env_file: Optional[Path] = None):
        """Initialize config by loading a .env file.

        Args:
            env_file: Path to a .env file. Defaults to .env in the current
                working directory. Variables already set in the environment
                take precedence.
        """
        if env_file is None:
            env_file = Path.cwd() / ".env"
        load_dotenv(env_file)

        self._validate()

    def _validate(self):
        """Validate configured values.

        Raises:
            ValueError: If an extension lacks its leading dot or the encoding
                is unknown
        """
        bad = [ext for ext in self.extensions if not ext.startswith(".")]
        if bad:
            raise ValueError(
                f"TAGSCOPE_EXTENSIONS entries must start with '.': {', '.join(bad)}"
            )

        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"TAGSCOPE_ENCODING is not a known encoding: {self.encoding}")

    @property
    def extensions(self) -> List[str]:
        """Get the allowed file extensions.

        Returns:
            List of dot-prefixed extensions from TAGSCOPE_EXTENSIONS, or the
            defaults (.js, .ts, .jsx, .tsx)
        """
        raw = os.getenv("TAGSCOPE_EXTENSIONS")
        if not raw:
            return list(DEFAULT_EXTENSIONS)
        return parse_ignore_patterns(raw)

    @property
    def ignore_patterns(self) -> List[str]:
        """Get ignore patterns applied to every scan.

        Returns:
            List of wildcard patterns from TAGSCOPE_IGNORE (empty by default)
        """
        return parse_ignore_patterns(os.getenv("TAGSCOPE_IGNORE", ""))

    @property
    def encoding(self) -> str:
        """Get the text encoding used to read source files."""
        return os.getenv("TAGSCOPE_ENCODING", "utf-8")


# Singleton instance
_config = None


def get_config() -> Config:
    """Get or create singleton Config instance.

    Returns:
        Config instance
    """
    global _config
    if _config is None:
        _config = Config()
    return _config
