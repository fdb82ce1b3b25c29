"""Domain layer - pure types and parsers with no IO.

- types: outcome record, status/error enums, intermediate results
- timestamps: planner and update-log timestamp formats
- version: update package version parsing
"""

from medoc_check.domain.timestamps import (
    TimestampFormat,
    parse_timestamp,
    timestamp_span,
)
from medoc_check.domain.types import (
    ErrorId,
    MarkerResult,
    OperationBlock,
    TriggerInfo,
    UpdateOutcome,
    UpdateStatus,
    VersionInfo,
    exit_code_for,
)
from medoc_check.domain.version import compare_versions, parse_version_string

__all__ = [
    "ErrorId",
    "MarkerResult",
    "OperationBlock",
    "TimestampFormat",
    "TriggerInfo",
    "UpdateOutcome",
    "UpdateStatus",
    "VersionInfo",
    "compare_versions",
    "exit_code_for",
    "parse_timestamp",
    "parse_version_string",
    "timestamp_span",
]
