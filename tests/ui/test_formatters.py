"""Tests for outcome message rendering."""

import logging
from datetime import datetime
from pathlib import Path

import pytest

from medoc_check.domain.types import (
    ErrorId,
    UpdateOutcome,
    UpdateStatus,
    VersionInfo,
)
from medoc_check.ui.formatters import (
    format_duration,
    format_outcome_message,
    outcome_log_level,
)

VERSIONS = VersionInfo("11.02.185", "11.02.186")
TRIGGER = datetime(2025, 10, 23, 10, 30, 15)


@pytest.fixture
def success_outcome() -> UpdateOutcome:
    return UpdateOutcome.build(
        UpdateStatus.SUCCESS,
        ErrorId.SUCCESS,
        versions=VERSIONS,
        trigger_time=TRIGGER,
        update_start_time=datetime(2025, 10, 23, 10, 31, 2),
        update_end_time=datetime(2025, 10, 23, 10, 33, 41),
        operation_found=True,
        marker_version_confirm=True,
        marker_completion_marker=True,
        update_log_path=Path("update_2025-10-23.log"),
    )


class TestFormatDuration:
    """Tests for format_duration."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (None, "unknown"),
            (0, "0s"),
            (9, "9s"),
            (158, "2m 38s"),
            (3723, "1h 02m 03s"),
        ],
    )
    def test_format_duration(self, seconds, expected):
        """Test compact duration rendering."""
        assert format_duration(seconds) == expected


class TestOutcomeLogLevel:
    """Tests for outcome_log_level."""

    @pytest.mark.parametrize(
        ("status", "error_id", "level"),
        [
            (UpdateStatus.NO_UPDATE, ErrorId.NO_UPDATE, logging.INFO),
            (
                UpdateStatus.FAILED,
                ErrorId.UPDATE_LOG_MISSING,
                logging.WARNING,
            ),
            (
                UpdateStatus.ERROR,
                ErrorId.PLANNER_LOG_MISSING,
                logging.ERROR,
            ),
        ],
    )
    def test_levels(self, status, error_id, level):
        """Test failures are louder than routine outcomes."""
        outcome = UpdateOutcome.build(status, error_id)
        assert outcome_log_level(outcome) == level

    def test_success_is_info(self, success_outcome):
        """Test success is reported at INFO."""
        assert outcome_log_level(success_outcome) == logging.INFO


class TestFormatOutcomeMessage:
    """Tests for format_outcome_message."""

    def test_success_message(self, success_outcome):
        """Test the success message lists versions and timing."""
        message = format_outcome_message(success_outcome, host="ACC-01")
        assert message.splitlines() == [
            "✅ M.E.Doc update succeeded",
            "Host: ACC-01",
            "Version: 11.02.185 → 11.02.186",
            "Triggered: 2025-10-23 10:30:15",
            "Started: 2025-10-23 10:31:02",
            "Finished: 2025-10-23 10:33:41",
            "Duration: 2m 39s",
        ]

    def test_failed_message_lists_markers(self):
        """Test failed outcomes show marker flags and the reason."""
        outcome = UpdateOutcome.build(
            UpdateStatus.FAILED,
            ErrorId.UPDATE_VALIDATION_FAILED,
            versions=VERSIONS,
            trigger_time=TRIGGER,
            operation_found=True,
            marker_completion_marker=True,
            reason="Missing marker: version confirmation '186'",
        )
        message = format_outcome_message(outcome)
        assert message.startswith("❌ M.E.Doc update failed")
        assert "Host:" not in message
        assert "Operation found: yes" in message
        assert "Version confirmed: no" in message
        assert "Completion marker: yes" in message
        assert message.endswith(
            "Reason: Missing marker: version confirmation '186' (code 1101)"
        )
        assert "Duration:" not in message

    def test_error_message(self):
        """Test error outcomes show only headline and reason."""
        outcome = UpdateOutcome.build(
            UpdateStatus.ERROR,
            ErrorId.LOGS_DIRECTORY_MISSING,
            reason="Logs directory not found: D:\\MEDOC\\LOG",
        )
        assert format_outcome_message(outcome).splitlines() == [
            "⚠️ M.E.Doc update check error",
            "Reason: Logs directory not found: D:\\MEDOC\\LOG (code 1001)",
        ]

    def test_partial_timing(self):
        """Test a missing endpoint renders as a dash."""
        outcome = UpdateOutcome.build(
            UpdateStatus.FAILED,
            ErrorId.UPDATE_VALIDATION_FAILED,
            update_start_time=datetime(2025, 10, 23, 10, 31, 2),
        )
        message = format_outcome_message(outcome)
        assert "Finished: -" in message
        assert "Duration: unknown" in message
