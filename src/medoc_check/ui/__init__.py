"""User-facing rendering of outcomes."""

from medoc_check.ui.formatters import (
    format_duration,
    format_outcome_message,
    outcome_log_level,
)

__all__ = ["format_duration", "format_outcome_message", "outcome_log_level"]
