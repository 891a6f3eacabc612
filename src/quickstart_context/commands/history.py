"""Handler for the 'history' subcommand.

Prints the commands inside the TIME_BACK_HOURS window as an aligned,
tab-separated table, most recent first.
"""

from __future__ import annotations

import sys

from quickstart_context.config import load_settings
from quickstart_context.data import ContextError, cutoff_from_hours, load_recent_commands
from quickstart_context.utils.formatting import truncate
from quickstart_context.utils.logging_config import setup_logging


def run() -> None:
    """Print the recent command window to stdout."""
    try:
        settings = load_settings()
        setup_logging(settings.log_level)
        cutoff = cutoff_from_hours(settings.time_back_hours)
        records = load_recent_commands(settings.history_path, cutoff)
    except ContextError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if not records:
        print(f"No commands in the last {settings.time_back_hours} hours.", file=sys.stderr)
        return

    headers = ["Time (UTC)", "Ago", "Status", "Command"]

    rows = []
    for record in records:
        rows.append([
            record.formatted_time,
            record.relative_time,
            record.exit_code,
            truncate(record.command, 60),
        ])

    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    fmt = "\t".join(f"{{:<{w}}}" for w in col_widths)
    print(fmt.format(*headers))
    for row in rows:
        print(fmt.format(*row))


if __name__ == "__main__":
    run()
