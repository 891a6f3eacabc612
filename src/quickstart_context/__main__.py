"""Command-line entry point: quickstart-context [generate|history|files]."""

from __future__ import annotations

import sys
from typing import List, Optional

from quickstart_context.commands import files, generate, history

USAGE = "Usage: quickstart-context [generate|history|files]"

_COMMANDS = {
    "generate": generate.run,
    "history": history.run,
    "files": files.run,
}


def main(argv: Optional[List[str]] = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    name = args[0] if args else "generate"

    if name in ("-h", "--help"):
        print(USAGE)
        return

    command = _COMMANDS.get(name)
    if command is None:
        print(f"Error: unknown command '{name}'.", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        sys.exit(2)

    command()


if __name__ == "__main__":
    main()
