"""Shared fixtures: isolate environment variables and logging between tests."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

import pytest

_ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "OPENAI_MODEL",
    "MAX_FILE_CONTEXT",
    "TIME_BACK_HOURS",
    "ENABLE_OPENAI",
    "HISTFILE",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """load_dotenv writes straight into os.environ, so restore it afterwards."""
    saved = dict(os.environ)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    os.environ.clear()
    os.environ.update(saved)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def write_lines(path: Path, lines: Iterable[str], trailing_newline: bool = True) -> Path:
    text = "\n".join(lines)
    if trailing_newline:
        text += "\n"
    path.write_bytes(text.encode("utf-8"))
    return path


@pytest.fixture
def history_file(tmp_path):
    """Return a writer that creates a history file with lines in chronological order."""

    def _write(lines, name=".zsh_history"):
        return write_lines(tmp_path / name, lines)

    return _write
