"""Default display image paths for day entries."""

from __future__ import annotations

from collections.abc import Callable

# slug -> public image path
ImageResolver = Callable[[str], str]

DEFAULT_IMAGE_PREFIX = "/images/advent-of-devops"


def advent_image_path(slug: str, prefix: str = DEFAULT_IMAGE_PREFIX) -> str:
    """Return the conventional image path for a slug, e.g. /images/advent-of-devops/day-3.png."""
    return f"{prefix.rstrip('/')}/{slug}.png"


def make_image_resolver(prefix: str = DEFAULT_IMAGE_PREFIX) -> ImageResolver:
    """Bind a prefix, returning a pure slug -> path function."""

    def resolve(slug: str) -> str:
        return advent_image_path(slug, prefix)

    return resolve
