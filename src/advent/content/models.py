"""Entry types built from markdown frontmatter."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

# Frontmatter keys mapped onto typed fields; anything else lands in `extra`.
DAY_FIELDS = (
    "title",
    "day",
    "excerpt",
    "description",
    "category",
    "difficulty",
    "publishedAt",
    "updatedAt",
    "image",
    "tags",
)
INDEX_FIELDS = ("title", "excerpt", "description", "publishedAt", "updatedAt", "tags")


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _timestamp(value: Any) -> str | None:
    """YAML turns bare dates into date/datetime objects; hand back ISO-8601 text."""
    if value is None:
        return None
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _tags(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, (list, tuple, set)):
        return tuple(str(t) for t in value)
    return (str(value),)


def _extra(metadata: dict[str, Any], known: tuple[str, ...]) -> dict[str, Any]:
    return {k: v for k, v in metadata.items() if k not in known}


@dataclass(frozen=True)
class DayEntry:
    """One daily challenge article."""

    slug: str
    day: int
    content: str
    image: str
    title: str = ""
    excerpt: str | None = None
    description: str | None = None
    category: str | None = None
    difficulty: str | None = None
    published_at: str | None = None
    updated_at: str | None = None
    tags: tuple[str, ...] = ()
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_metadata(
        cls, metadata: dict[str, Any], *, slug: str, day: int, content: str, image: str
    ) -> DayEntry:
        """Pick known keys out of parsed frontmatter; computed fields are passed explicitly."""
        return cls(
            slug=slug,
            day=day,
            content=content,
            image=image,
            title=str(metadata.get("title") or ""),
            excerpt=_optional_str(metadata.get("excerpt")),
            description=_optional_str(metadata.get("description")),
            category=_optional_str(metadata.get("category")),
            difficulty=_optional_str(metadata.get("difficulty")),
            published_at=_timestamp(metadata.get("publishedAt")),
            updated_at=_timestamp(metadata.get("updatedAt")),
            tags=_tags(metadata.get("tags")),
            extra=_extra(metadata, DAY_FIELDS),
        )

    def to_dict(self) -> dict[str, Any]:
        """Flat camelCase mapping; unknown frontmatter keys first, computed keys win."""
        data: dict[str, Any] = dict(self.extra)
        data.update(
            {
                "title": self.title,
                "slug": self.slug,
                "day": self.day,
                "excerpt": self.excerpt,
                "description": self.description,
                "content": self.content,
                "category": self.category,
                "difficulty": self.difficulty,
                "publishedAt": self.published_at,
                "updatedAt": self.updated_at,
                "image": self.image,
                "tags": list(self.tags),
            }
        )
        return data


@dataclass(frozen=True)
class IndexEntry:
    """The overview page."""

    slug: str
    content: str
    title: str = ""
    excerpt: str | None = None
    description: str | None = None
    published_at: str | None = None
    updated_at: str | None = None
    tags: tuple[str, ...] = ()
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_metadata(cls, metadata: dict[str, Any], *, slug: str, content: str) -> IndexEntry:
        return cls(
            slug=slug,
            content=content,
            title=str(metadata.get("title") or ""),
            excerpt=_optional_str(metadata.get("excerpt")),
            description=_optional_str(metadata.get("description")),
            published_at=_timestamp(metadata.get("publishedAt")),
            updated_at=_timestamp(metadata.get("updatedAt")),
            tags=_tags(metadata.get("tags")),
            extra=_extra(metadata, INDEX_FIELDS),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.extra)
        data.update(
            {
                "title": self.title,
                "slug": self.slug,
                "excerpt": self.excerpt,
                "description": self.description,
                "content": self.content,
                "publishedAt": self.published_at,
                "updatedAt": self.updated_at,
                "tags": list(self.tags),
            }
        )
        return data


@dataclass(frozen=True)
class Progress:
    """How much of the calendar is unlocked."""

    total_days: int
    completed_days: int
    percent_complete: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalDays": self.total_days,
            "completedDays": self.completed_days,
            "percentComplete": self.percent_complete,
        }
