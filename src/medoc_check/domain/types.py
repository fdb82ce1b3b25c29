"""Domain types for update-run classification.

This module contains pure value types without any IO dependencies. The
only record visible outside the core is UpdateOutcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum
from pathlib import Path
from typing import Any


class UpdateStatus(Enum):
    """Terminal classification of an update run."""

    SUCCESS = "Success"
    FAILED = "Failed"
    NO_UPDATE = "NoUpdate"
    ERROR = "Error"


class ErrorId(IntEnum):
    """Numeric identifiers reported alongside UpdateStatus."""

    SUCCESS = 0
    NO_UPDATE = 1
    LOGS_DIRECTORY_MISSING = 1001
    PLANNER_LOG_MISSING = 1002
    UPDATE_LOG_MISSING = 1003
    ENCODING_ERROR = 1004
    UPDATE_VALIDATION_FAILED = 1101


_EXIT_CODES: dict[UpdateStatus, int] = {
    UpdateStatus.SUCCESS: 0,
    UpdateStatus.NO_UPDATE: 0,
    UpdateStatus.ERROR: 1,
    UpdateStatus.FAILED: 2,
}


def exit_code_for(status: UpdateStatus) -> int:
    """Map an outcome status to the process exit code."""
    return _EXIT_CODES[status]


@dataclass(frozen=True)
class OperationBlock:
    """Text span of the most recent update attempt in an update log.

    ``end_offset`` is also set when only the completion marker was found;
    ``found`` stays False in that case.
    """

    found: bool
    text: str = ""
    start_offset: int = -1
    end_offset: int = -1


@dataclass(frozen=True)
class MarkerResult:
    """Presence of the two required markers inside an operation block."""

    version_confirm: bool
    completion_marker: bool

    @property
    def all_present(self) -> bool:
        return self.version_confirm and self.completion_marker


@dataclass(frozen=True)
class VersionInfo:
    """Version transition announced by an update package name."""

    from_version: str
    to_version: str

    @property
    def target_version(self) -> str:
        """Build number confirmed in the update log (``11.02.186`` -> ``186``)."""
        return self.to_version.rsplit(".", 1)[-1].strip()

    @property
    def is_upgrade(self) -> bool | None:
        """Whether to_version is newer than from_version, None if unknown."""
        from medoc_check.domain.version import compare_versions  # noqa: PLC0415

        result = compare_versions(self.from_version, self.to_version)
        if result is None:
            return None
        return result < 0


@dataclass(frozen=True)
class TriggerInfo:
    """Last update trigger found in the planner log."""

    found: bool
    timestamp: datetime | None = None
    raw_version_token: str = ""


@dataclass(frozen=True)
class UpdateOutcome:
    """Result of classifying one update run.

    Instances are immutable and validated on construction; use
    ``UpdateOutcome.build`` so the duration is derived from the timestamps.

    Attributes:
        status: Terminal classification.
        error_id: Numeric identifier for the status.
        from_version: Version before the update ("previous" when unknown).
        to_version: Version the update package installs.
        target_version: Build number expected in the version marker.
        trigger_time: When the planner triggered the update.
        update_start_time: First timestamp of the update attempt.
        update_end_time: Last timestamp of the update attempt.
        update_duration_seconds: Whole seconds between start and end.
        marker_version_confirm: Version-confirmation marker present.
        marker_completion_marker: Completion marker present.
        operation_found: An operation block was located.
        update_log_path: Update log consulted, if any.
        reason: Short explanation for operators.

    """

    status: UpdateStatus
    error_id: ErrorId
    from_version: str = ""
    to_version: str = ""
    target_version: str = ""
    trigger_time: datetime | None = None
    update_start_time: datetime | None = None
    update_end_time: datetime | None = None
    update_duration_seconds: int | None = None
    marker_version_confirm: bool = False
    marker_completion_marker: bool = False
    operation_found: bool = False
    update_log_path: Path | None = None
    reason: str = ""

    def __post_init__(self) -> None:
        """Reject records that break the classification invariants."""
        if self.status is UpdateStatus.SUCCESS and not (
            self.operation_found
            and self.marker_version_confirm
            and self.marker_completion_marker
        ):
            msg = "Success requires an operation block with both markers"
            raise ValueError(msg)

        if (
            self.status is UpdateStatus.NO_UPDATE
            and self.update_log_path is not None
        ):
            msg = "NoUpdate outcome must not reference an update log"
            raise ValueError(msg)

        start, end = self.update_start_time, self.update_end_time
        if start is not None and end is not None:
            if end < start:
                msg = "update_end_time precedes update_start_time"
                raise ValueError(msg)
        elif self.update_duration_seconds is not None:
            msg = "duration requires both start and end times"
            raise ValueError(msg)

    @classmethod
    def build(
        cls,
        status: UpdateStatus,
        error_id: ErrorId,
        *,
        versions: VersionInfo | None = None,
        update_start_time: datetime | None = None,
        update_end_time: datetime | None = None,
        **fields: Any,
    ) -> UpdateOutcome:
        """Create an outcome, deriving version and duration fields."""
        if versions is not None:
            fields.setdefault("from_version", versions.from_version)
            fields.setdefault("to_version", versions.to_version)
            fields.setdefault("target_version", versions.target_version)

        duration = None
        if update_start_time is not None and update_end_time is not None:
            duration = int(
                (update_end_time - update_start_time).total_seconds()
            )

        return cls(
            status=status,
            error_id=error_id,
            update_start_time=update_start_time,
            update_end_time=update_end_time,
            update_duration_seconds=duration,
            **fields,
        )

    @property
    def success(self) -> bool:
        return self.status is UpdateStatus.SUCCESS

    def to_dict(self) -> dict[str, Any]:
        """Plain representation for JSON output and checkpoint records."""

        def _iso(value: datetime | None) -> str | None:
            return value.isoformat() if value is not None else None

        return {
            "status": self.status.value,
            "error_id": int(self.error_id),
            "success": self.success,
            "from_version": self.from_version,
            "to_version": self.to_version,
            "target_version": self.target_version,
            "trigger_time": _iso(self.trigger_time),
            "update_start_time": _iso(self.update_start_time),
            "update_end_time": _iso(self.update_end_time),
            "update_duration_seconds": self.update_duration_seconds,
            "marker_version_confirm": self.marker_version_confirm,
            "marker_completion_marker": self.marker_completion_marker,
            "operation_found": self.operation_found,
            "update_log_path": (
                str(self.update_log_path) if self.update_log_path else None
            ),
            "reason": self.reason,
        }

    def __repr__(self) -> str:
        """Short representation for logs."""
        if self.to_version:
            return (
                f"UpdateOutcome({self.status.value}/{int(self.error_id)}: "
                f"{self.from_version} -> {self.to_version})"
            )
        return f"UpdateOutcome({self.status.value}/{int(self.error_id)})"
