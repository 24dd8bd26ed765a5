"""Tests for core/settings.py — YAML + env configuration."""

import os

from core.settings import Settings, config_path, load_settings


def test_defaults_without_config():
    os.environ.pop("GOALPAD_CONFIG", None)
    settings = load_settings()
    assert settings == Settings()
    assert settings.max_goal_length == 100


def test_load_from_env_config(config_file):
    assert config_path() == config_file.resolve()
    settings = load_settings()
    assert settings.title == "Weekend goals"
    assert settings.max_goal_length == 40
    assert settings.log_level == "INFO"


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(tmp_path / "nope.yaml")
    assert settings == Settings()


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "goalpad.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings(path) == Settings()


def test_invalid_yaml_gives_defaults(tmp_path):
    path = tmp_path / "goalpad.yaml"
    path.write_text("title: [unclosed\n", encoding="utf-8")
    assert load_settings(path) == Settings()


def test_invalid_values_fall_back():
    settings = Settings.from_dict({"max_goal_length": -3, "log_level": "loud", "title": "  "})
    assert settings.max_goal_length == 100
    assert settings.log_level == "WARNING"
    assert settings.title == "My Goals"


def test_non_integer_length_falls_back():
    assert Settings.from_dict({"max_goal_length": "50"}).max_goal_length == 100
    assert Settings.from_dict({"max_goal_length": True}).max_goal_length == 100


def test_unknown_keys_ignored():
    assert Settings.from_dict({"theme": "dark"}) == Settings()


def test_env_log_level_override(tmp_path):
    os.environ["GOALPAD_LOG_LEVEL"] = "debug"
    try:
        settings = load_settings(tmp_path / "nope.yaml")
    finally:
        del os.environ["GOALPAD_LOG_LEVEL"]
    assert settings.log_level == "DEBUG"
