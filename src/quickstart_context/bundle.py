"""Assemble the context bundle and the chat-completion request built from it.

Gathers the three context sources (recent commands, sampled project files,
dotenv key names), turns them into the request payload, and writes the
intermediate JSON files that make each run inspectable.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from quickstart_context.config import Settings
from quickstart_context.data.env import get_env_file_keys
from quickstart_context.data.errors import MissingInputError
from quickstart_context.data.history import cutoff_from_hours, load_recent_commands
from quickstart_context.data.models import CommandRecord, ProjectFile
from quickstart_context.data.project import find_project_files, read_project_files_content
from quickstart_context.utils.paths import (
    COMMAND_HISTORY_FILE,
    ENV_FILE_KEYS_FILE,
    PROJECT_FILES_CONTENT_FILE,
    REQUEST_FILE,
    get_env_path,
)

logger = logging.getLogger(__name__)

SYSTEM_ROLE = (
    "You are a helpful assistant who is excellent at building projects from the ground up "
    "and understanding how a user would need a readable quickstart section to get started. "
    "Ensure that the guide is strictly relevant to the detected project type."
)
USER_GOAL = (
    "I'm building a project and I want to build a quickstart guide. The commands that I ran "
    "are included, but could also contain commands that don't apply to this project. Using "
    "these files as reference, build the quickstart guide to my README.md that would just "
    "list the commands to get started on this project."
)
RELEVANCE_RULE = (
    "Only consider relevant commands and files for the detected project type. If it is a "
    "Rust project, do not include Node.js or npm-related instructions. If it is a Python "
    "project, do not include Rust-related instructions."
)
OUTPUT_RULE = (
    "Only output the Markdown content without any explanation, preamble, or additional "
    "context. Do not include triple backticks before or after the output. If an environment "
    "structure was provided, also include instructions on setting up the environment. If a "
    "project description was included in any TOML file, include that under the heading."
)


@dataclass
class ContextBundle:
    """Everything gathered for one quickstart request."""

    commands: List[CommandRecord]
    project_files: List[Path]
    file_contents: List[ProjectFile]
    env_keys: List[str]
    time_back_hours: int
    cutoff_timestamp: int = 0


def build_context_bundle(
    settings: Settings,
    root: Optional[Path] = None,
    history_path: Optional[Path] = None,
    env_path: Optional[Path] = None,
    now: Optional[float] = None,
) -> ContextBundle:
    """Collect commands, project files and env keys for one run.

    A missing history file is fatal; a missing .env only drops the env
    section.

    Raises:
        MissingInputError: If the history file cannot be opened.
    """
    base = Path.cwd() if root is None else Path(root)

    project_files = find_project_files(settings.max_file_context, root=base)
    file_contents = read_project_files_content(project_files, root=base)

    cutoff = cutoff_from_hours(settings.time_back_hours, now=now)
    commands = load_recent_commands(history_path or settings.history_path, cutoff, now=now)

    try:
        env_keys = get_env_file_keys(env_path or get_env_path(base))
    except MissingInputError as exc:
        logger.warning("Continuing without env structure: %s", exc)
        env_keys = []

    return ContextBundle(
        commands=commands,
        project_files=project_files,
        file_contents=file_contents,
        env_keys=env_keys,
        time_back_hours=settings.time_back_hours,
        cutoff_timestamp=cutoff,
    )


def command_to_dict(record: CommandRecord) -> Dict[str, str]:
    return {
        "timestamp": record.formatted_time,
        "relative_time": record.relative_time,
        "exit_code": record.exit_code,
        "command": record.command,
    }


def file_to_dict(project_file: ProjectFile) -> Dict[str, str]:
    return {
        "file_path": project_file.file_path.as_posix(),
        "content": project_file.content,
    }


def _message(role: str, content: str) -> Dict[str, str]:
    return {"role": role, "content": content}


def build_request_body(bundle: ContextBundle, model: str) -> Dict[str, Any]:
    """Build the chat-completion payload for the quickstart prompt."""
    history = json.dumps([command_to_dict(c) for c in bundle.commands])
    files = json.dumps([p.as_posix() for p in bundle.project_files])
    contents = json.dumps([file_to_dict(f) for f in bundle.file_contents])
    env_keys = json.dumps(bundle.env_keys)

    return {
        "model": model,
        "messages": [
            _message("system", SYSTEM_ROLE),
            _message("user", USER_GOAL),
            _message("system", RELEVANCE_RULE),
            _message("user", f"My shell history contained this for {bundle.time_back_hours} hours: {history}"),
            _message("user", f"My files include: {files}"),
            _message("user", f"File contents: {contents}"),
            _message("user", f"Environment file structure if it exists: {env_keys}"),
            _message("system", OUTPUT_RULE),
        ],
    }


def write_debug_files(bundle: ContextBundle, request_body: Dict[str, Any], output_dir: Path) -> List[Path]:
    """Write the intermediate JSON files for a run into output_dir.

    Returns:
        Paths written, in write order.
    """
    output_dir = Path(output_dir)
    payloads = (
        (COMMAND_HISTORY_FILE, [command_to_dict(c) for c in bundle.commands]),
        (PROJECT_FILES_CONTENT_FILE, [file_to_dict(f) for f in bundle.file_contents]),
        (ENV_FILE_KEYS_FILE, bundle.env_keys),
        (REQUEST_FILE, request_body),
    )

    written: List[Path] = []
    for name, payload in payloads:
        path = output_dir / name
        with open(path, "w", encoding="utf-8") as file:
            json.dump(payload, file)
        written.append(path)

    return written
