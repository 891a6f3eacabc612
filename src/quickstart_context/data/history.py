"""Parse zsh extended history and select the recent command window.

History lines look like ``: 1700000000:0;git status``. The log is scanned
from the newest line backwards; the first line that does not parse is
taken as the edge of the usable history and ends the scan.

Known limitation: a single corrupt or non-extended line hides every older
entry, even ones that would otherwise fall inside the window.
"""

from __future__ import annotations

import enum
import logging
import re
import time
from pathlib import Path
from typing import Iterable, List, Optional, Union

from quickstart_context.data.errors import MissingInputError
from quickstart_context.data.models import CommandRecord, HistoryEntry
from quickstart_context.data.reverse import iter_lines_reversed
from quickstart_context.utils.formatting import format_relative, format_timestamp

logger = logging.getLogger(__name__)

SENTINEL = ":"
_TIMESTAMP_RE = re.compile(r"[+-]?[0-9]+")


def parse_history_line(line: str) -> Optional[HistoryEntry]:
    """Parse one extended-history line.

    Returns None for anything that is not ``:<timestamp>:<field>;<command>``.
    Rejection is an expected outcome (continuation lines, plain history),
    not an error.
    """
    if not line.startswith(SENTINEL):
        return None

    parts = line.split(":", 2)
    if len(parts) < 3:
        return None

    timestamp_text = parts[1].strip()
    if not _TIMESTAMP_RE.fullmatch(timestamp_text):
        logger.warning("Failed to parse timestamp: %s", timestamp_text)
        return None
    timestamp = int(timestamp_text)

    field, sep, command = parts[2].partition(";")
    if not sep:
        return None

    return HistoryEntry(timestamp=timestamp, exit_code=field.strip(), command=command.strip())


def cutoff_from_hours(hours: int, now: Optional[float] = None) -> int:
    """Return the Unix timestamp `hours` before `now`."""
    current = time.time() if now is None else now
    return int(current) - int(hours) * 3600


class ScanState(enum.Enum):
    SCANNING = "scanning"
    STOPPED = "stopped"


class HistoryScan:
    """Reverse-order history scan, fed one raw line at a time.

    SCANNING stays SCANNING on an accepted line, on a line older than the
    cutoff, and on a line that cannot be decoded. The first rejected line
    moves the scan to STOPPED, after which input is ignored.
    """

    def __init__(self, cutoff_timestamp: int, now: Optional[float] = None) -> None:
        self.cutoff_timestamp = cutoff_timestamp
        self.now = int(time.time() if now is None else now)
        self.state = ScanState.SCANNING
        self.records: List[CommandRecord] = []

    @property
    def stopped(self) -> bool:
        return self.state is ScanState.STOPPED

    def feed(self, raw: Union[bytes, str]) -> ScanState:
        """Consume one line and return the resulting state."""
        if self.stopped:
            return self.state

        if isinstance(raw, bytes):
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError:
                logger.warning("Skipping invalid UTF-8 sequence")
                return self.state
        else:
            line = raw

        entry = parse_history_line(line)
        if entry is None:
            self.state = ScanState.STOPPED
            return self.state

        if entry.timestamp >= self.cutoff_timestamp:
            self.records.append(self._to_record(entry))
        return self.state

    def _to_record(self, entry: HistoryEntry) -> CommandRecord:
        return CommandRecord(
            timestamp=entry.timestamp,
            exit_code=entry.exit_code,
            command=entry.command,
            formatted_time=format_timestamp(entry.timestamp),
            relative_time=format_relative(self.now - entry.timestamp),
        )


def select_recent_commands(
    lines: Iterable[Union[bytes, str]],
    cutoff_timestamp: int,
    now: Optional[float] = None,
) -> List[CommandRecord]:
    """Return records at or after the cutoff from lines given newest first.

    Output keeps scan order (most recent first).
    """
    scan = HistoryScan(cutoff_timestamp, now=now)
    for raw in lines:
        if scan.feed(raw) is ScanState.STOPPED:
            break
    return scan.records


def load_recent_commands(
    history_path: Union[str, Path],
    cutoff_timestamp: int,
    now: Optional[float] = None,
) -> List[CommandRecord]:
    """Read a history file backwards and return the recent command window.

    Raises:
        MissingInputError: If the history file is missing or unreadable.
    """
    path = Path(history_path)
    try:
        file = open(path, "rb")
    except FileNotFoundError:
        raise MissingInputError("history file", path) from None
    except OSError as exc:
        raise MissingInputError("history file", path, f"cannot be read: {exc.strerror}") from exc

    with file:
        records = select_recent_commands(iter_lines_reversed(file), cutoff_timestamp, now=now)

    logger.debug("Collected %d commands from %s", len(records), path)
    return records
