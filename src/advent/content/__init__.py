"""Markdown content store: day entries, index entry, progress."""

from advent.content.errors import ContentDirectoryError, ContentError, ContentParseError
from advent.content.images import ImageResolver, advent_image_path
from advent.content.models import DayEntry, IndexEntry, Progress
from advent.content.store import INDEX_SLUG, TOTAL_DAYS, ContentStore

__all__ = [
    "INDEX_SLUG",
    "TOTAL_DAYS",
    "ContentDirectoryError",
    "ContentError",
    "ContentParseError",
    "ContentStore",
    "DayEntry",
    "ImageResolver",
    "IndexEntry",
    "Progress",
    "advent_image_path",
]
