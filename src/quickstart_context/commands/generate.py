"""Handler for the 'generate' subcommand.

Gathers recent shell history, a sample of project files and the .env key
names, writes them as JSON next to the request payload, and (when
ENABLE_OPENAI=true) asks the model for a README quickstart that is saved
to README_TMP.md.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from quickstart_context.bundle import build_context_bundle, build_request_body, write_debug_files
from quickstart_context.client import generate_quickstart, write_quickstart
from quickstart_context.config import load_settings
from quickstart_context.data import ContextError
from quickstart_context.utils.formatting import format_timestamp
from quickstart_context.utils.logging_config import setup_logging


def run(root: Optional[Path] = None) -> None:
    """Build the context bundle for the project in root and request a quickstart.

    Args:
        root: Project directory. Defaults to the current directory; all
            output files are written there.
    """
    project_dir = Path.cwd() if root is None else Path(root)

    try:
        settings = load_settings(project_dir / ".env")
    except ContextError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    setup_logging(settings.log_level)

    try:
        bundle = build_context_bundle(settings, root=project_dir)
    except ContextError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"Relevant project files: {[p.as_posix() for p in bundle.project_files]}")
    print(f"Cutoff time: {format_timestamp(bundle.cutoff_timestamp)} UTC")
    print(f"History path is: {settings.history_path}")
    print(f"Commands in window: {len(bundle.commands)}")

    request_body = build_request_body(bundle, settings.model)
    write_debug_files(bundle, request_body, project_dir)

    if not settings.enable_openai:
        print("ENABLE_OPENAI is not set to true. Exiting early.")
        return

    if not settings.is_complete():
        print("Error: OPENAI_API_KEY is not set.", file=sys.stderr)
        sys.exit(1)

    try:
        markdown = generate_quickstart(request_body, settings)
    except ContextError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    path = write_quickstart(markdown, project_dir)
    print(f"Quickstart written to {path}")


if __name__ == "__main__":
    run()
