"""Data models for the quickstart context bundle."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class HistoryEntry:
    """One parsed zsh extended-history line, before any window filtering."""

    timestamp: int
    exit_code: str
    command: str


@dataclass(frozen=True)
class CommandRecord:
    """A shell command that falls inside the observation window."""

    timestamp: int
    exit_code: str  # raw second field, kept as written by the shell
    command: str
    formatted_time: str
    relative_time: str


@dataclass(frozen=True)
class ProjectFile:
    """A sampled project file and its text content."""

    file_path: Path
    content: str
