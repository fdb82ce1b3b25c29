"""Human-readable rendering of update outcomes.

Used for console output, the project's log file and Telegram messages.
"""

import logging
from datetime import datetime

from medoc_check.constants import ISO_DATETIME_FORMAT
from medoc_check.domain.types import UpdateOutcome, UpdateStatus

_HEADLINES: dict[UpdateStatus, str] = {
    UpdateStatus.SUCCESS: "✅ M.E.Doc update succeeded",
    UpdateStatus.FAILED: "❌ M.E.Doc update failed",
    UpdateStatus.NO_UPDATE: "ℹ️ No new M.E.Doc update",
    UpdateStatus.ERROR: "⚠️ M.E.Doc update check error",
}

_LOG_LEVELS: dict[UpdateStatus, int] = {
    UpdateStatus.SUCCESS: logging.INFO,
    UpdateStatus.NO_UPDATE: logging.INFO,
    UpdateStatus.FAILED: logging.WARNING,
    UpdateStatus.ERROR: logging.ERROR,
}


def outcome_log_level(outcome: UpdateOutcome) -> int:
    """Map an outcome to the logging level it should be reported at."""
    return _LOG_LEVELS[outcome.status]


def format_duration(seconds: int | None) -> str:
    """Format whole seconds as ``1h 02m 03s`` / ``2m 38s`` / ``9s``."""
    if seconds is None:
        return "unknown"
    hours, remainder = divmod(max(seconds, 0), 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}h {minutes:02d}m {secs:02d}s"
    if minutes:
        return f"{minutes}m {secs:02d}s"
    return f"{secs}s"


def _fmt_time(value: datetime | None) -> str:
    return value.strftime(ISO_DATETIME_FORMAT) if value else "-"


def _yes_no(flag: bool) -> str:  # noqa: FBT001
    return "yes" if flag else "no"


def format_outcome_message(
    outcome: UpdateOutcome, host: str | None = None
) -> str:
    """Render an outcome as multi-line notification text.

    Args:
        outcome: Classified update outcome
        host: Optional machine label shown under the headline

    Returns:
        Message text

    """
    lines = [_HEADLINES[outcome.status]]
    if host:
        lines.append(f"Host: {host}")

    if outcome.to_version:
        lines.append(f"Version: {outcome.from_version} → {outcome.to_version}")

    if outcome.trigger_time:
        lines.append(f"Triggered: {_fmt_time(outcome.trigger_time)}")

    if outcome.update_start_time or outcome.update_end_time:
        lines.append(f"Started: {_fmt_time(outcome.update_start_time)}")
        lines.append(f"Finished: {_fmt_time(outcome.update_end_time)}")
        lines.append(
            f"Duration: {format_duration(outcome.update_duration_seconds)}"
        )

    if outcome.status is UpdateStatus.FAILED:
        lines.append(f"Operation found: {_yes_no(outcome.operation_found)}")
        lines.append(
            "Version confirmed: "
            f"{_yes_no(outcome.marker_version_confirm)}"
        )
        lines.append(
            "Completion marker: "
            f"{_yes_no(outcome.marker_completion_marker)}"
        )

    if outcome.status is not UpdateStatus.SUCCESS:
        lines.append(
            f"Reason: {outcome.reason} (code {int(outcome.error_id)})"
        )

    return "\n".join(lines)
