"""Errors raised by the content store.

A missing entry is never an error: lookups return None.
"""

from __future__ import annotations

from pathlib import Path


class ContentError(Exception):
    """Base class for content store errors."""


class ContentDirectoryError(ContentError, OSError):
    """The content directory could not be listed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read content directory {path}: {reason}")
        self.path = path


class ContentParseError(ContentError, ValueError):
    """A content file has unreadable frontmatter or no usable day number."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot parse {path.name}: {reason}")
        self.path = path
