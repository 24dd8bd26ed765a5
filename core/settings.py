"""Optional settings for GoalPad, read from YAML and the environment.

Lookup order:
    1. explicit path passed to load_settings()
    2. $GOALPAD_CONFIG
Then $GOALPAD_LOG_LEVEL overrides log_level. Nothing is ever written back.

Example goalpad.yaml:

    title: Weekend goals
    max_goal_length: 80
    log_level: INFO
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from core.fileio import read_yaml
from core.models import MAX_GOAL_LENGTH

logger = logging.getLogger(__name__)


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Settings:
    max_goal_length: int = MAX_GOAL_LENGTH
    title: str = "My Goals"
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Settings:
        if not d or not isinstance(d, dict):
            return cls()
        defaults = cls()

        max_len = d.get("max_goal_length", defaults.max_goal_length)
        if isinstance(max_len, bool) or not isinstance(max_len, int) or max_len < 1:
            logger.warning("Invalid max_goal_length %r, using %d", max_len, defaults.max_goal_length)
            max_len = defaults.max_goal_length

        title = str(d.get("title") or defaults.title).strip() or defaults.title

        level = str(d.get("log_level") or defaults.log_level).strip().upper()
        if level not in VALID_LOG_LEVELS:
            logger.warning("Invalid log_level %r, using %s", level, defaults.log_level)
            level = defaults.log_level

        return cls(max_goal_length=max_len, title=title, log_level=level)


def config_path() -> Path | None:
    """Config file named by $GOALPAD_CONFIG, if set."""
    value = os.environ.get("GOALPAD_CONFIG", "").strip()
    if not value:
        return None
    return Path(value).expanduser().resolve()


def load_settings(path: Path | None = None) -> Settings:
    """Load settings, falling back to defaults when no file is configured."""
    if path is None:
        path = config_path()

    data: dict[str, Any] = {}
    if path is not None:
        try:
            data = read_yaml(path)
        except yaml.YAMLError as e:
            logger.warning("Could not parse %s: %s", path, e)
            data = {}

    env_level = os.environ.get("GOALPAD_LOG_LEVEL", "").strip()
    if env_level:
        data = {**data, "log_level": env_level}

    return Settings.from_dict(data)
