"""Formatting helpers for timestamps and text display."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Tuple

# Unit lengths follow the humantime convention (Julian year, 1/12 of it per month)
_YEAR = 31_557_600
_MONTH = 2_630_016
_DAY = 86_400

_UNITS: Tuple[Tuple[str, str, int], ...] = (
    ("year", "years", _YEAR),
    ("month", "months", _MONTH),
    ("day", "days", _DAY),
    ("h", "h", 3600),
    ("m", "m", 60),
    ("s", "s", 1),
)


def format_timestamp(timestamp: int) -> str:
    """Format Unix seconds as 'YYYY-MM-DD HH:MM:SS' in UTC."""
    try:
        return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
    except (OverflowError, OSError, ValueError):
        return str(timestamp)


def format_relative(seconds: int) -> str:
    """Render a duration as whole-unit components, e.g. '2h 14m 3s'.

    Zero components are omitted; a zero or negative duration renders as '0s'.
    """
    remaining = max(int(seconds), 0)
    if remaining == 0:
        return "0s"

    parts: List[str] = []
    for singular, plural, length in _UNITS:
        count, remaining = divmod(remaining, length)
        if not count:
            continue
        suffix = singular if count == 1 else plural
        parts.append(f"{count}{suffix}")
    return " ".join(parts)


def truncate(text: str, max_length: int) -> str:
    """Truncate text to max_length, appending '…' if truncated."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 1] + "…"
