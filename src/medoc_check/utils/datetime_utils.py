"""Datetime utilities for consistent timestamp handling.

Log timestamps of the monitored application are naive local times, so
values produced here are local as well.
"""

from datetime import datetime


def get_current_datetime_local_iso() -> str:
    """Get current datetime in local timezone as ISO format string.

    Returns:
        ISO 8601 formatted datetime string with local timezone offset.
        Example: "2026-02-04T14:02:04.556063+03:00"

    """
    return datetime.now().astimezone().isoformat()


def parse_checkpoint_argument(value: str) -> datetime:
    """Parse a user-supplied checkpoint such as ``2025-10-23T10:30:15``.

    Also accepts the planner's own ``23.10.2025 10:30:15`` layout so an
    operator can paste a timestamp straight from Planner.log.

    Raises:
        ValueError: If the value matches neither layout

    """
    text = value.strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    return datetime.strptime(text, "%d.%m.%Y %H:%M:%S")
