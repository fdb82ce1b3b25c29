"""Update operation classifier.

Reduces the planner log and the day's update log to a single
UpdateOutcome:

    Planner.log ──► last trigger ──► checkpoint check
                                          │
                     update_<date>.log ◄──┘
                            │
                 last operation block ──► markers ──► outcome

Operator errors (unknown encoding, no logs directory given) raise
ConfigurationError from the constructor. Every other condition, including
missing or undecodable files, is returned as an outcome and never raised.
"""

from datetime import datetime
from pathlib import Path

from medoc_check.constants import (
    DEFAULT_LOG_ENCODING,
    PLANNER_LOG_NAME,
    UPDATE_LOG_DATE_FORMAT,
    UPDATE_LOG_TEMPLATE,
)
from medoc_check.core.locator import locate_last_operation, validate_markers
from medoc_check.core.reader import read_log_text, validate_encoding
from medoc_check.core.trigger import scan_trigger
from medoc_check.domain.timestamps import TimestampFormat, timestamp_span
from medoc_check.domain.types import (
    ErrorId,
    UpdateOutcome,
    UpdateStatus,
    VersionInfo,
)
from medoc_check.domain.version import parse_version_string
from medoc_check.exceptions import ConfigurationError
from medoc_check.logger import get_logger

logger = get_logger(__name__)


def _normalize_checkpoint(checkpoint: datetime | None) -> datetime | None:
    """Convert an aware checkpoint to naive local time like log stamps."""
    if checkpoint is None or checkpoint.tzinfo is None:
        return checkpoint
    return checkpoint.astimezone().replace(tzinfo=None)


def update_log_path_for(logs_dir: Path, trigger_time: datetime) -> Path:
    """Resolve the per-day update log for a trigger timestamp."""
    date = trigger_time.strftime(UPDATE_LOG_DATE_FORMAT)
    return logs_dir / UPDATE_LOG_TEMPLATE.format(date=date)


class UpdateOperationClassifier:
    """Classify the most recent update run found in a logs directory.

    The classifier holds only its validated configuration; every call to
    classify() reads the files afresh and builds a new outcome.

    Usage:
        classifier = UpdateOperationClassifier(r"D:\\MEDOC\\LOG")
        outcome = classifier.classify(checkpoint=last_seen)
        if not outcome.success:
            ...

    """

    def __init__(
        self,
        logs_dir: str | Path | None,
        encoding: str = DEFAULT_LOG_ENCODING,
    ) -> None:
        """Validate configuration before any file is touched.

        Args:
            logs_dir: Directory holding Planner.log and update_*.log
            encoding: Text encoding of the logs

        Raises:
            ConfigurationError: If logs_dir is missing or the encoding
                is unknown

        """
        if logs_dir is None or not str(logs_dir).strip():
            msg = "Logs directory is required"
            raise ConfigurationError(msg, target="logs_dir")

        self.logs_dir = Path(logs_dir).expanduser()
        self.encoding = validate_encoding(encoding)

    @property
    def planner_log_path(self) -> Path:
        return self.logs_dir / PLANNER_LOG_NAME

    def classify(self, checkpoint: datetime | None = None) -> UpdateOutcome:
        """Classify the latest update run.

        Args:
            checkpoint: Trigger time of the last evaluated run; a trigger
                at or before it yields NoUpdate

        Returns:
            A fresh UpdateOutcome

        """
        if not self.logs_dir.is_dir():
            logger.warning("Logs directory not found: %s", self.logs_dir)
            return UpdateOutcome.build(
                UpdateStatus.ERROR,
                ErrorId.LOGS_DIRECTORY_MISSING,
                reason=f"Logs directory not found: {self.logs_dir}",
            )

        try:
            planner_text = read_log_text(self.planner_log_path, self.encoding)
        except UnicodeDecodeError as e:
            logger.warning(
                "Cannot decode %s as %s: %s",
                self.planner_log_path,
                self.encoding,
                e,
            )
            return UpdateOutcome.build(
                UpdateStatus.ERROR,
                ErrorId.ENCODING_ERROR,
                reason=f"Planner log is not valid {self.encoding}",
            )
        except OSError as e:
            logger.warning(
                "Planner log unreadable: %s (%s)", self.planner_log_path, e
            )
            return UpdateOutcome.build(
                UpdateStatus.ERROR,
                ErrorId.PLANNER_LOG_MISSING,
                reason=f"Planner log missing or unreadable: "
                f"{self.planner_log_path}",
            )

        trigger = scan_trigger(planner_text)
        if not trigger.found or trigger.timestamp is None:
            logger.debug("No update trigger in %s", self.planner_log_path)
            return UpdateOutcome.build(
                UpdateStatus.NO_UPDATE,
                ErrorId.NO_UPDATE,
                reason="No update trigger found in planner log",
            )

        versions = parse_version_string(trigger.raw_version_token)
        logger.debug(
            "Last trigger at %s: %s -> %s",
            trigger.timestamp,
            versions.from_version,
            versions.to_version,
        )
        if versions.is_upgrade is False:
            logger.warning(
                "Update package does not raise the version: %s -> %s",
                versions.from_version,
                versions.to_version,
            )

        checkpoint = _normalize_checkpoint(checkpoint)
        if checkpoint is not None and trigger.timestamp <= checkpoint:
            logger.debug(
                "Trigger %s already processed (checkpoint %s)",
                trigger.timestamp,
                checkpoint,
            )
            return UpdateOutcome.build(
                UpdateStatus.NO_UPDATE,
                ErrorId.NO_UPDATE,
                versions=versions,
                trigger_time=trigger.timestamp,
                reason="Latest update trigger was already processed",
            )

        return self._classify_update_log(
            update_log_path_for(self.logs_dir, trigger.timestamp),
            versions,
            trigger.timestamp,
        )

    def _classify_update_log(
        self, path: Path, versions: VersionInfo, trigger_time: datetime
    ) -> UpdateOutcome:
        """Evaluate the update log resolved from the trigger date."""
        common = {
            "versions": versions,
            "trigger_time": trigger_time,
            "update_log_path": path,
        }

        if not path.is_file():
            logger.warning("Update log not found: %s", path)
            return UpdateOutcome.build(
                UpdateStatus.FAILED,
                ErrorId.UPDATE_LOG_MISSING,
                reason=f"Update log not found: {path.name}",
                **common,
            )

        try:
            text = read_log_text(path, self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read %s as %s: %s", path, self.encoding, e)
            return UpdateOutcome.build(
                UpdateStatus.ERROR,
                ErrorId.ENCODING_ERROR,
                reason=f"Update log unreadable as {self.encoding}",
                **common,
            )

        block = locate_last_operation(text)
        # Without a block the whole log is the best timing source left
        start, end = timestamp_span(
            block.text if block.found else text, TimestampFormat.UPDATE_LOG
        )
        timing = {"update_start_time": start, "update_end_time": end}

        if not block.found:
            return UpdateOutcome.build(
                UpdateStatus.FAILED,
                ErrorId.UPDATE_VALIDATION_FAILED,
                operation_found=False,
                reason="No complete update operation in update log",
                **timing,
                **common,
            )

        markers = validate_markers(block.text, versions.target_version)
        marker_fields = {
            "operation_found": True,
            "marker_version_confirm": markers.version_confirm,
            "marker_completion_marker": markers.completion_marker,
        }

        if not markers.all_present:
            missing = []
            if not markers.version_confirm:
                missing.append(
                    f"version confirmation {versions.target_version!r}"
                )
            if not markers.completion_marker:
                missing.append("completion")
            return UpdateOutcome.build(
                UpdateStatus.FAILED,
                ErrorId.UPDATE_VALIDATION_FAILED,
                reason="Missing marker: " + ", ".join(missing),
                **marker_fields,
                **timing,
                **common,
            )

        return UpdateOutcome.build(
            UpdateStatus.SUCCESS,
            ErrorId.SUCCESS,
            reason="Update completed and version confirmed",
            **marker_fields,
            **timing,
            **common,
        )


def classify_update(
    logs_dir: str | Path | None,
    encoding: str = DEFAULT_LOG_ENCODING,
    checkpoint: datetime | None = None,
) -> UpdateOutcome:
    """Classify the latest update run in ``logs_dir``.

    Raises:
        ConfigurationError: If logs_dir is missing or encoding is unknown

    """
    return UpdateOperationClassifier(logs_dir, encoding).classify(checkpoint)
