"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from quickstart_context.config import Settings, load_settings
from quickstart_context.data import ConfigError


def test_defaults(tmp_path):
    settings = load_settings(tmp_path / ".env")

    assert settings.model == "gpt-4o"
    assert settings.max_file_context == 5
    assert settings.time_back_hours == 5
    assert settings.enable_openai is False
    assert settings.api_key == ""
    assert settings.base_url is None
    assert settings.history_path == Path.home() / ".zsh_history"


def test_reads_dotenv_file(tmp_path):
    env = tmp_path / ".env"
    env.write_text(
        "OPENAI_API_KEY=sk-test\n"
        "OPENAI_MODEL=gpt-4o-mini\n"
        "MAX_FILE_CONTEXT=2\n"
        "TIME_BACK_HOURS=12\n"
        "ENABLE_OPENAI=TRUE\n"
        f"HISTFILE={tmp_path / 'hist'}\n"
    )

    settings = load_settings(env)

    assert settings.api_key == "sk-test"
    assert settings.model == "gpt-4o-mini"
    assert settings.max_file_context == 2
    assert settings.time_back_hours == 12
    assert settings.enable_openai is True
    assert settings.history_path == tmp_path / "hist"


def test_environment_wins_over_dotenv(tmp_path, monkeypatch):
    env = tmp_path / ".env"
    env.write_text("TIME_BACK_HOURS=12\n")
    monkeypatch.setenv("TIME_BACK_HOURS", "3")

    assert load_settings(env).time_back_hours == 3


@pytest.mark.parametrize("value", ["five", "1.5", "-1"])
def test_invalid_max_file_context(tmp_path, monkeypatch, value):
    monkeypatch.setenv("MAX_FILE_CONTEXT", value)

    with pytest.raises(ConfigError) as excinfo:
        load_settings(tmp_path / ".env")
    assert excinfo.value.variable == "MAX_FILE_CONTEXT"


def test_invalid_time_back_hours(tmp_path, monkeypatch):
    monkeypatch.setenv("TIME_BACK_HOURS", "soon")

    with pytest.raises(ConfigError):
        load_settings(tmp_path / ".env")


def test_is_complete():
    assert Settings(enable_openai=False).is_complete()
    assert not Settings(enable_openai=True).is_complete()
    assert Settings(enable_openai=True, api_key="sk").is_complete()
