"""Timestamp parsing for the monitored application's logs.

The planner log and the update log stamp their lines differently:

    Planner.log        23.10.2025 10:30:15
    update_*.log       23.10.25 10:31:02.417

The caller always chooses the format explicitly; content is never sniffed.
Sub-second precision is discarded.
"""

import re
from datetime import datetime
from enum import Enum


class TimestampFormat(Enum):
    """Line timestamp layouts."""

    PLANNER = "planner"
    UPDATE_LOG = "update_log"


_PATTERNS: dict[TimestampFormat, re.Pattern[str]] = {
    TimestampFormat.PLANNER: re.compile(
        r"(?<!\d)(?P<day>\d{2})\.(?P<month>\d{2})\.(?P<year>\d{4})"
        r"\s+(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})(?!\d)"
    ),
    TimestampFormat.UPDATE_LOG: re.compile(
        r"(?<!\d)(?P<day>\d{2})\.(?P<month>\d{2})\.(?P<year>\d{2})"
        r"\s+(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
        r"\.\d{3}(?!\d)"
    ),
}


def _current_century() -> int:
    return datetime.now().year // 100 * 100


def parse_timestamp(
    line: str, fmt: TimestampFormat, century: int | None = None
) -> datetime | None:
    """Parse the first timestamp of the given format found in a line.

    Args:
        line: A single log line (or any text fragment)
        fmt: Which layout to look for
        century: Base added to two-digit years; defaults to the current
            century

    Returns:
        Naive datetime with second precision, or None when the line holds
        no valid timestamp of that format

    """
    match = _PATTERNS[fmt].search(line)
    if match is None:
        return None

    year = int(match["year"])
    if fmt is TimestampFormat.UPDATE_LOG:
        year += _current_century() if century is None else century

    try:
        return datetime(
            year,
            int(match["month"]),
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
        )
    except ValueError:
        # Shaped like a timestamp but not a real date (e.g. 31.02)
        return None


def iter_timestamps(text: str, fmt: TimestampFormat):
    """Yield the parsed timestamp of every line that carries one."""
    century = _current_century()
    for line in text.splitlines():
        stamp = parse_timestamp(line, fmt, century=century)
        if stamp is not None:
            yield stamp


def timestamp_span(
    text: str, fmt: TimestampFormat
) -> tuple[datetime | None, datetime | None]:
    """Return the earliest and latest line timestamps in text.

    Logs are written in order, so these are the first and last stamped
    lines; taking min/max keeps start <= end even if a clock jumped back.
    """
    stamps = list(iter_timestamps(text, fmt))
    if not stamps:
        return None, None
    return min(stamps), max(stamps)
