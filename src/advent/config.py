"""Configuration loading from environment variables and advent.toml."""

from __future__ import annotations

import math
import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

from advent.content.images import DEFAULT_IMAGE_PREFIX

_DEFAULT_CONTENT_DIR = Path("content") / "advent-of-devops"
_CONFIG_FILENAME = "advent.toml"

DEV_CACHE_SECONDS = 5 * 60


@dataclass
class CacheConfig:
    """In-memory content cache settings."""

    # Seconds; math.inf keeps the first read for the life of the process.
    duration: float = DEV_CACHE_SECONDS


@dataclass
class AdventConfig:
    """Top-level configuration."""

    content_dir: Path = _DEFAULT_CONTENT_DIR
    cache: CacheConfig = field(default_factory=CacheConfig)
    environment: str = "development"
    image_prefix: str = DEFAULT_IMAGE_PREFIX
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


def _default_cache_duration(environment: str) -> float:
    if environment.lower() == "production":
        return math.inf
    return DEV_CACHE_SECONDS


def _parse_duration(value: str | float | int) -> float:
    """Accept seconds, or "inf"/"infinite"/"forever" for no expiry."""
    if isinstance(value, str) and value.strip().lower() in ("inf", "infinite", "forever"):
        return math.inf
    return float(value)


def load_config(config_path: Path | None = None) -> AdventConfig:
    """Load configuration from environment variables and optional advent.toml.

    Priority: environment variables > advent.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.advent/
        for candidate in [Path.cwd() / _CONFIG_FILENAME, Path.home() / ".advent" / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    cache_data = file_data.get("cache", {})

    environment = os.getenv("ADVENT_ENV", file_data.get("environment", "development"))
    duration = os.getenv("ADVENT_CACHE_SECONDS", cache_data.get("duration"))

    config = AdventConfig(
        content_dir=Path(
            os.getenv("ADVENT_CONTENT_DIR", file_data.get("content_dir", str(_DEFAULT_CONTENT_DIR)))
        ),
        cache=CacheConfig(
            duration=(
                _parse_duration(duration)
                if duration is not None
                else _default_cache_duration(environment)
            ),
        ),
        environment=environment,
        image_prefix=os.getenv(
            "ADVENT_IMAGE_PREFIX", file_data.get("image_prefix", DEFAULT_IMAGE_PREFIX)
        ),
        log_level=os.getenv("ADVENT_LOG_LEVEL", file_data.get("log_level", "INFO")),
    )
    return config
