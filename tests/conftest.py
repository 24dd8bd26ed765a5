"""Shared test fixtures for GoalPad tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
import yaml

from core.goals import GoalStore
from core.session import GoalSession


@pytest.fixture
def store() -> GoalStore:
    return GoalStore()


@pytest.fixture
def session() -> GoalSession:
    return GoalSession()


@pytest.fixture
def populated_store() -> GoalStore:
    """Store with three goals, the middle one done."""
    s = GoalStore()
    s.add("Buy milk")
    s.add("Read book")
    s.add("Call mom")
    s.toggle(s.list()[1].id)
    return s


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a goalpad.yaml and point GOALPAD_CONFIG at it."""
    path = tmp_path / "goalpad.yaml"
    config = {
        "title": "Weekend goals",
        "max_goal_length": 40,
        "log_level": "info",
    }
    path.write_text(yaml.dump(config, default_flow_style=False), encoding="utf-8")

    os.environ["GOALPAD_CONFIG"] = str(path)
    yield path
    # Cleanup
    if "GOALPAD_CONFIG" in os.environ:
        del os.environ["GOALPAD_CONFIG"]
