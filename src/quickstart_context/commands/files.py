"""Handler for the 'files' subcommand.

Shows which project types were detected in the current directory and the
files that would be sent as context.
"""

from __future__ import annotations

import sys

from quickstart_context.config import load_settings
from quickstart_context.data import ContextError, detect_ecosystems, find_project_files


def run() -> None:
    """Print detected ecosystems and the sampled file list."""
    try:
        settings = load_settings()
    except ContextError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    ecosystems = detect_ecosystems()
    if not ecosystems:
        print("No known project marker found (Cargo.toml, pyproject.toml, package.json, go.mod).",
              file=sys.stderr)
        return

    print(f"Detected: {', '.join(eco.name for eco in ecosystems)}")
    for path in find_project_files(settings.max_file_context):
        print(f"  {path.as_posix()}")


if __name__ == "__main__":
    run()
