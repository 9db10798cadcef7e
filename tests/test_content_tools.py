"""Tests for the text-returning content tools."""

from datetime import date
from pathlib import Path

import pytest

from advent.content.store import ContentStore
from advent.tools.content_tools import get_content_tools


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    d = tmp_path / "advent-of-devops"
    d.mkdir()
    (d / "index.md").write_text("---\ntitle: Advent of DevOps\n---\n\n25 days of tooling.\n")
    (d / "day-1.md").write_text(
        "---\ntitle: Docker\ndifficulty: Beginner\ncategory: Containers\ntags: [docker]\n---\n\nBuild an image.\n"
    )
    (d / "day-2.md").write_text("---\ntitle: Kubernetes\n---\n\nDeploy a pod.\n")
    return d


@pytest.fixture
def tools(content_dir: Path) -> dict:
    store = ContentStore(content_dir, today=lambda: date(2025, 12, 2))
    return get_content_tools(store)


class TestContentTools:
    def test_names(self, tools: dict):
        assert set(tools) == {
            "list_days",
            "read_day",
            "read_index",
            "next_day",
            "previous_day",
            "progress",
        }

    def test_list_days(self, tools: dict):
        lines = tools["list_days"]().splitlines()
        assert lines == ["Day  1  Docker [Beginner]", "Day  2  Kubernetes"]

    def test_list_days_empty(self, tmp_path: Path):
        tools = get_content_tools(ContentStore(tmp_path))
        assert "no days" in tools["list_days"]()

    def test_read_day(self, tools: dict):
        text = tools["read_day"](1)
        assert text.startswith("# Day 1: Docker")
        assert "Category: Containers" in text
        assert "Tags: docker" in text
        assert "Image: /images/advent-of-devops/day-1.png" in text
        assert "Build an image." in text

    def test_read_missing_day(self, tools: dict):
        assert tools["read_day"](9) == "(day 9 not found)"

    def test_read_index(self, tools: dict):
        text = tools["read_index"]()
        assert text.startswith("# Advent of DevOps")
        assert "25 days of tooling." in text

    def test_read_missing_index(self, content_dir: Path, tools: dict):
        (content_dir / "index.md").unlink()
        assert tools["read_index"]() == "(no index page)"

    def test_neighbours(self, tools: dict):
        assert "Kubernetes" in tools["next_day"](1)
        assert tools["next_day"](2) == "(nothing after day 2)"
        assert "Docker" in tools["previous_day"](2)
        assert tools["previous_day"](1) == "(nothing before day 1)"

    def test_progress(self, tools: dict):
        assert tools["progress"]() == "2/25 days unlocked (8%)"
