"""Data layer: shell history, project files and dotenv keys."""

from quickstart_context.data.env import get_env_file_keys
from quickstart_context.data.errors import CompletionError, ConfigError, ContextError, MissingInputError
from quickstart_context.data.history import (
    HistoryScan,
    ScanState,
    cutoff_from_hours,
    load_recent_commands,
    parse_history_line,
    select_recent_commands,
)
from quickstart_context.data.models import CommandRecord, HistoryEntry, ProjectFile
from quickstart_context.data.project import (
    ECOSYSTEMS,
    Ecosystem,
    detect_ecosystems,
    find_project_files,
    find_source_files,
    read_project_files_content,
)

__all__ = [
    "CommandRecord",
    "CompletionError",
    "ConfigError",
    "ContextError",
    "ECOSYSTEMS",
    "Ecosystem",
    "HistoryEntry",
    "HistoryScan",
    "MissingInputError",
    "ProjectFile",
    "ScanState",
    "cutoff_from_hours",
    "detect_ecosystems",
    "find_project_files",
    "find_source_files",
    "get_env_file_keys",
    "load_recent_commands",
    "parse_history_line",
    "read_project_files_content",
    "select_recent_commands",
]
