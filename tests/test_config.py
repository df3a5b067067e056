"""Tests for engine configuration loading and saving."""

import json
import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from debate_setup.config import setup_logging
from debate_setup.config.settings import (
    PersonalityConfig,
    SelectionConfig,
    SetupConfig,
    TopicConfig,
    get_default_config,
)
from debate_setup.types import ModerationLevel, TopicMode


def test_defaults() -> None:
    config = get_default_config()
    assert config.selection.required_debaters == 2
    assert config.topic.blocked_terms == ["hate", "kill", "murder", "violent"]
    assert config.durations.complex == 25
    assert config.defaults.moderation_level is ModerationLevel.LIGHT
    assert config.default_topic_mode is TopicMode.PRESET


def test_inconsistent_limits_rejected() -> None:
    with pytest.raises(ValidationError):
        SelectionConfig(min_debaters=3, required_debaters=2)
    with pytest.raises(ValidationError):
        TopicConfig(min_length=50, max_length=20)
    with pytest.raises(ValidationError):
        PersonalityConfig(default_id="brody")


def test_blocked_terms_normalized() -> None:
    assert TopicConfig(blocked_terms=[" Spam ", ""]).blocked_terms == ["spam"]


def test_load_json(tmp_path: Path) -> None:
    path = tmp_path / "setup.json"
    path.write_text(json.dumps({"selection": {"max_recommended_pairs": 3}, "log_level": "DEBUG"}))
    config = SetupConfig.load_from_file(path)
    assert config.selection.max_recommended_pairs == 3
    assert config.log_level == "DEBUG"


def test_save_and_load_yaml(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "setup.yaml"
    original = SetupConfig(topic=TopicConfig(history_limit=4), default_topic_mode=TopicMode.CUSTOM)
    original.save_to_file(path)
    loaded = SetupConfig.load_from_file(path)
    assert loaded.topic.history_limit == 4
    assert loaded.default_topic_mode is TopicMode.CUSTOM
    assert loaded == original


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        SetupConfig.load_from_file(tmp_path / "missing.json")


def test_load_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "setup.yml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        SetupConfig.load_from_file(path)


def test_setup_logging_uses_configured_level(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    setup_logging(SetupConfig(log_level="WARNING"))
    assert calls[0]["level"] == logging.WARNING
    assert "%(name)s" in calls[0]["format"]
