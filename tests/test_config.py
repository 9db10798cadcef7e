"""Tests for configuration loading."""

import math

import pytest
from pathlib import Path

from advent.config import DEV_CACHE_SECONDS, load_config

_ENV_KEYS = [
    "ADVENT_CONTENT_DIR",
    "ADVENT_CACHE_SECONDS",
    "ADVENT_ENV",
    "ADVENT_IMAGE_PREFIX",
    "ADVENT_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestConfig:
    def test_defaults(self):
        config = load_config()
        assert config.content_dir == Path("content") / "advent-of-devops"
        assert config.environment == "development"
        assert config.cache.duration == DEV_CACHE_SECONDS
        assert config.image_prefix == "/images/advent-of-devops"
        assert config.log_level == "INFO"
        assert not config.is_production

    def test_production_caches_forever(self, monkeypatch):
        monkeypatch.setenv("ADVENT_ENV", "production")

        config = load_config()
        assert config.is_production
        assert math.isinf(config.cache.duration)

    def test_env_override(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("ADVENT_CONTENT_DIR", str(tmp_path / "posts"))
        monkeypatch.setenv("ADVENT_CACHE_SECONDS", "30")

        config = load_config()
        assert config.content_dir == tmp_path / "posts"
        assert config.cache.duration == 30.0

    def test_explicit_duration_beats_production_default(self, monkeypatch):
        monkeypatch.setenv("ADVENT_ENV", "production")
        monkeypatch.setenv("ADVENT_CACHE_SECONDS", "10")

        assert load_config().cache.duration == 10.0

    def test_infinite_duration_keyword(self, monkeypatch):
        monkeypatch.setenv("ADVENT_CACHE_SECONDS", "forever")

        assert math.isinf(load_config().cache.duration)

    def test_toml_file(self, tmp_path: Path):
        toml_path = tmp_path / "advent.toml"
        toml_path.write_text("""
content_dir = "site/advent"
environment = "staging"
image_prefix = "/static/img"
log_level = "DEBUG"

[cache]
duration = 60
""")
        config = load_config(toml_path)
        assert config.content_dir == Path("site/advent")
        assert config.environment == "staging"
        assert config.cache.duration == 60.0
        assert config.image_prefix == "/static/img"
        assert config.log_level == "DEBUG"

    def test_toml_discovered_in_cwd(self, tmp_path: Path):
        (tmp_path / "advent.toml").write_text('environment = "production"\n')

        config = load_config()
        assert math.isinf(config.cache.duration)

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("ADVENT_ENV", "development")

        toml_path = tmp_path / "advent.toml"
        toml_path.write_text('environment = "production"\n')
        config = load_config(toml_path)
        assert config.environment == "development"  # env wins
        assert config.cache.duration == DEV_CACHE_SECONDS
