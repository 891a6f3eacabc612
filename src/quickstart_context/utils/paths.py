"""Path utilities for locating input files and debug output."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

HISTORY_FILE = ".zsh_history"
ENV_FILE = ".env"

COMMAND_HISTORY_FILE = "command_history.json"
PROJECT_FILES_CONTENT_FILE = "project_files_content.json"
ENV_FILE_KEYS_FILE = "env_file_keys.json"
REQUEST_FILE = "request.json"
QUICKSTART_FILE = "README_TMP.md"


def get_history_path(histfile: Optional[str] = None) -> Path:
    """Return the zsh history path. Honors HISTFILE, defaults to ~/.zsh_history."""
    value = histfile if histfile is not None else os.environ.get("HISTFILE")
    if value:
        return Path(value).expanduser()
    return Path.home() / HISTORY_FILE


def get_env_path(root: Optional[Path] = None) -> Path:
    """Return the project's .env path."""
    base = Path.cwd() if root is None else Path(root)
    return base / ENV_FILE
