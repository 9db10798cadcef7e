"""Text-returning wrappers over the content store.

These functions back the command line and can be registered as tools for
anything that wants plain-text answers instead of entry objects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from advent.content.models import DayEntry
    from advent.content.store import ContentStore


def _summary_line(entry: DayEntry) -> str:
    line = f"Day {entry.day:>2}  {entry.title or entry.slug}"
    if entry.difficulty:
        line += f" [{entry.difficulty}]"
    return line


def _render_day(entry: DayEntry) -> str:
    header = [f"# Day {entry.day}: {entry.title or entry.slug}"]
    if entry.category:
        header.append(f"Category: {entry.category}")
    if entry.tags:
        header.append(f"Tags: {', '.join(entry.tags)}")
    header.append(f"Image: {entry.image}")
    return "\n".join(header) + "\n\n" + entry.content.strip() + "\n"


def get_content_tools(store: ContentStore) -> dict[str, Callable[..., str]]:
    """Return a dict of tool_name -> callable for content lookups."""

    def list_days() -> str:
        """One line per available day."""
        days = store.list_days()
        if not days:
            return "(no days published yet)"
        return "\n".join(_summary_line(d) for d in days)

    def read_day(day: int) -> str:
        """Full article for a day number."""
        entry = store.get_day_by_number(day)
        if entry is None:
            return f"(day {day} not found)"
        return _render_day(entry)

    def read_index() -> str:
        """The overview page."""
        index = store.get_index()
        if index is None:
            return "(no index page)"
        return f"# {index.title}\n\n{index.content.strip()}\n"

    def next_day(day: int) -> str:
        entry = store.get_next_day(day)
        return _summary_line(entry) if entry else f"(nothing after day {day})"

    def previous_day(day: int) -> str:
        entry = store.get_previous_day(day)
        return _summary_line(entry) if entry else f"(nothing before day {day})"

    def progress() -> str:
        p = store.get_progress()
        return f"{p.completed_days}/{p.total_days} days unlocked ({p.percent_complete:.0f}%)"

    return {
        "list_days": list_days,
        "read_day": read_day,
        "read_index": read_index,
        "next_day": next_day,
        "previous_day": previous_day,
        "progress": progress,
    }
