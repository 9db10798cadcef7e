"""Read-only, time-cached view over the advent content directory.

Markdown files are the source of truth. Day files are named ``day-<N>.md``
and carry YAML frontmatter; ``index.md`` holds the overview page. Parsed
entries are kept in a single snapshot (day list + index + one timestamp)
that is swapped wholesale when it expires, so readers never observe a
half-built cache.
"""

from __future__ import annotations

import dataclasses
import logging
import math
import re
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, Any

import frontmatter
import yaml

from advent.content.errors import ContentDirectoryError, ContentParseError
from advent.content.images import ImageResolver, advent_image_path, make_image_resolver
from advent.content.models import DayEntry, IndexEntry, Progress

if TYPE_CHECKING:
    from advent.config import AdventConfig

logger = logging.getLogger(__name__)

TOTAL_DAYS = 25
INDEX_SLUG = "advent-of-devops"
INDEX_FILENAME = "index.md"

_DAY_PREFIX = "day-"
_DAY_NUMBER = re.compile(r"^day-(\d+)")


@dataclass(frozen=True)
class _Snapshot:
    created_at: float
    days: tuple[DayEntry, ...] | None = None
    index: IndexEntry | None = None


def day_number_from_slug(slug: str) -> int | None:
    """``day-7`` -> 7. Leading digits only, so ``day-07-intro`` also gives 7."""
    match = _DAY_NUMBER.match(slug)
    if not match:
        return None
    return int(match.group(1))


class ContentStore:
    """Lookups over day entries and the index page, cached for ``cache_duration`` seconds."""

    def __init__(
        self,
        content_dir: Path,
        *,
        cache_duration: float = math.inf,
        image_resolver: ImageResolver = advent_image_path,
        clock: Callable[[], float] = time.monotonic,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.content_dir = Path(content_dir)
        self.cache_duration = cache_duration
        self._resolve_image = image_resolver
        self._clock = clock
        self._today = today
        self._snapshot: _Snapshot | None = None

    @classmethod
    def from_config(cls, config: AdventConfig) -> ContentStore:
        return cls(
            config.content_dir,
            cache_duration=config.cache.duration,
            image_resolver=make_image_resolver(config.image_prefix),
        )

    # ── Cache ─────────────────────────────────────────────────

    def _fresh_snapshot(self, now: float) -> _Snapshot | None:
        snap = self._snapshot
        if snap is not None and now - snap.created_at < self.cache_duration:
            return snap
        return None

    def _store_index(self, now: float, index: IndexEntry) -> None:
        """Add the index to the current snapshot, or start a new one if it expired.

        A rebuilt day list always starts its own snapshot, so the shared
        timestamp is the day list load time whenever both are cached.
        """
        snap = self._fresh_snapshot(now)
        if snap is None:
            snap = _Snapshot(created_at=now)
        self._snapshot = dataclasses.replace(snap, index=index)

    def clear_cache(self) -> None:
        """Drop cached entries; the next read goes to disk."""
        self._snapshot = None

    # ── Parsing ───────────────────────────────────────────────

    def _read(self, path: Path) -> tuple[dict[str, Any], str]:
        """Split a file into (frontmatter dict, markdown body)."""
        try:
            metadata, body = frontmatter.parse(path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, ValueError, TypeError) as exc:
            raise ContentParseError(path, str(exc)) from exc
        return dict(metadata), body

    def _build_day(self, path: Path) -> DayEntry:
        metadata, body = self._read(path)
        slug = path.stem

        day = metadata.get("day") or day_number_from_slug(slug)
        try:
            day = int(day)
        except (TypeError, ValueError) as exc:
            raise ContentParseError(path, f"no usable day number (got {day!r})") from exc

        try:
            return DayEntry.from_metadata(
                metadata,
                slug=slug,
                day=day,
                content=body,
                image=str(metadata.get("image") or self._resolve_image(slug)),
            )
        except (TypeError, ValueError) as exc:
            raise ContentParseError(path, str(exc)) from exc

    def _day_files(self) -> list[Path]:
        try:
            names = [p.name for p in self.content_dir.iterdir()]
        except OSError as exc:
            raise ContentDirectoryError(self.content_dir, exc.strerror or str(exc)) from exc
        return [
            self.content_dir / name
            for name in names
            if name.startswith(_DAY_PREFIX) and name.endswith(".md")
        ]

    # ── Public read API ───────────────────────────────────────

    def list_days(self) -> tuple[DayEntry, ...]:
        """All day entries sorted by day.

        Within the cache window the same tuple object is returned. Any file
        that fails to parse aborts the whole listing.
        """
        now = self._clock()
        snap = self._fresh_snapshot(now)
        if snap is not None and snap.days is not None:
            logger.debug("Day list cache hit (%d entries)", len(snap.days))
            return snap.days

        entries = [self._build_day(path) for path in self._day_files()]
        days = tuple(sorted(entries, key=lambda e: (e.day, e.slug)))
        self._snapshot = _Snapshot(created_at=now, days=days)
        logger.info("Loaded %d day entries from %s", len(days), self.content_dir)
        return days

    def get_day(self, slug: str) -> DayEntry | None:
        """Cached lookup first, then a direct read in case the file is newer than the cache."""
        for entry in self.list_days():
            if entry.slug == slug:
                return entry

        if not slug or "/" in slug or "\\" in slug or ".." in slug:
            return None

        path = self.content_dir / f"{slug}.md"
        if not path.is_file():
            return None
        try:
            return self._build_day(path)
        except (OSError, ContentParseError) as exc:
            logger.warning("Direct read of %s failed: %s", path.name, exc)
            return None

    def get_day_by_number(self, day: int) -> DayEntry | None:
        return self.get_day(f"{_DAY_PREFIX}{day}")

    def get_index(self) -> IndexEntry | None:
        """The overview page, or None if index.md is missing or malformed."""
        now = self._clock()
        snap = self._fresh_snapshot(now)
        if snap is not None and snap.index is not None:
            return snap.index

        path = self.content_dir / INDEX_FILENAME
        try:
            metadata, body = self._read(path)
        except FileNotFoundError:
            logger.warning("No %s in %s", INDEX_FILENAME, self.content_dir)
            return None
        except (OSError, ContentParseError) as exc:
            logger.warning("Cannot load %s: %s", INDEX_FILENAME, exc)
            return None

        try:
            index = IndexEntry.from_metadata(metadata, slug=INDEX_SLUG, content=body)
        except (TypeError, ValueError) as exc:
            logger.warning("Cannot load %s: %s", INDEX_FILENAME, exc)
            return None
        self._store_index(now, index)
        return index

    def get_next_day(self, day: int) -> DayEntry | None:
        if day >= TOTAL_DAYS:
            return None
        return self.get_day_by_number(day + 1)

    def get_previous_day(self, day: int) -> DayEntry | None:
        if day <= 1:
            return None
        return self.get_day_by_number(day - 1)

    def get_progress(self) -> Progress:
        """Unlocked days by calendar date: one per day in December, all of them otherwise."""
        today = self._today()
        if today.month == 12 and today.day <= TOTAL_DAYS:
            completed = today.day
        else:
            completed = TOTAL_DAYS
        return Progress(
            total_days=TOTAL_DAYS,
            completed_days=completed,
            percent_complete=completed / TOTAL_DAYS * 100,
        )
