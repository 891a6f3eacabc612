"""Settings loaded from the environment and the project's .env file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from quickstart_context.data.errors import ConfigError
from quickstart_context.utils.paths import get_env_path, get_history_path

DEFAULT_MODEL = "gpt-4o"
DEFAULT_MAX_FILE_CONTEXT = 5
DEFAULT_TIME_BACK_HOURS = 5


@dataclass
class Settings:
    """Runtime configuration for one run."""

    api_key: str = ""
    base_url: Optional[str] = None
    model: str = DEFAULT_MODEL
    max_file_context: int = DEFAULT_MAX_FILE_CONTEXT
    time_back_hours: int = DEFAULT_TIME_BACK_HOURS
    enable_openai: bool = False
    history_path: Optional[Path] = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.history_path is None:
            self.history_path = get_history_path()

    def is_complete(self) -> bool:
        """An API key is only needed when the request will actually be sent."""
        return bool(self.api_key) or not self.enable_openai


def _int_from_env(name: str, default: int, minimum: Optional[int] = None) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ConfigError(name, raw, "an integer") from None
    if minimum is not None and value < minimum:
        raise ConfigError(name, raw, f"an integer >= {minimum}")
    return value


def load_settings(env_file: Optional[Union[str, Path]] = None) -> Settings:
    """Load .env into the process environment and build Settings from it.

    Variables already set in the environment take precedence over .env,
    which defaults to the one in the current directory.

    Raises:
        ConfigError: If a numeric variable cannot be parsed.
    """
    load_dotenv(dotenv_path=env_file if env_file is not None else get_env_path())

    return Settings(
        api_key=os.getenv("OPENAI_API_KEY", ""),
        base_url=os.getenv("OPENAI_BASE_URL") or None,
        model=os.getenv("OPENAI_MODEL", DEFAULT_MODEL),
        max_file_context=_int_from_env("MAX_FILE_CONTEXT", DEFAULT_MAX_FILE_CONTEXT, minimum=0),
        time_back_hours=_int_from_env("TIME_BACK_HOURS", DEFAULT_TIME_BACK_HOURS),
        enable_openai=os.getenv("ENABLE_OPENAI", "false").strip().lower() == "true",
        history_path=get_history_path(os.getenv("HISTFILE")),
        log_level=os.getenv("LOG_LEVEL", "WARNING"),
    )
