"""Operation block location and marker validation for update logs.

An update log accumulates every attempt of the day. Each attempt opens
with a start marker line and closes with a completion marker line:

    23.10.25 10:31:02.417 Початок роботи, операція "Оновлення"
    23.10.25 10:33:40.002 Версія програми - 186
    23.10.25 10:33:41.118 Завершення роботи, операція "Оновлення"

Only the last attempt matters. Both functions here are pure: they read
immutable text and return offsets and flags, never slicing the input in
place.
"""

import re

from medoc_check.constants import (
    COMPLETION_MARKER,
    START_MARKER,
    VERSION_MARKER_PHRASE,
)
from medoc_check.domain.types import MarkerResult, OperationBlock
from medoc_check.logger import get_logger

logger = get_logger(__name__)


def locate_last_operation(text: str) -> OperationBlock:
    """Isolate the text span of the most recent update attempt.

    The search runs backward: find the last completion marker, then the
    last start marker before it. The block runs from the beginning of the
    start marker's line through the end of the completion marker, so the
    timestamp of the opening line belongs to the block.

    Args:
        text: Whole update log text

    Returns:
        OperationBlock; ``found`` is False when either marker is missing.
        When only the completion marker exists, ``end_offset`` still
        records where it ends.

    """
    completion_at = text.rfind(COMPLETION_MARKER)
    if completion_at == -1:
        return OperationBlock(found=False)

    end_offset = completion_at + len(COMPLETION_MARKER)

    start_at = text.rfind(START_MARKER, 0, completion_at)
    if start_at == -1:
        logger.debug(
            "Completion marker at offset %d has no preceding start marker",
            completion_at,
        )
        return OperationBlock(found=False, end_offset=end_offset)

    line_start = text.rfind("\n", 0, start_at) + 1
    return OperationBlock(
        found=True,
        text=text[line_start:end_offset],
        start_offset=line_start,
        end_offset=end_offset,
    )


def _version_marker_pattern(target_version: str) -> re.Pattern[str]:
    return re.compile(
        re.escape(VERSION_MARKER_PHRASE)
        + r"\s*"
        + re.escape(target_version)
        + r"(?!\w)"
    )


def validate_markers(block_text: str, target_version: str) -> MarkerResult:
    """Check the two required markers inside an operation block.

    The version marker must carry exactly ``target_version``: ``186`` does
    not match ``1860``, and the phrase anchor keeps ``2186`` out as well.

    Args:
        block_text: Text of the operation block
        target_version: Build number expected in the version marker

    Returns:
        MarkerResult with independent flags

    """
    target = target_version.strip()
    version_confirm = bool(target) and (
        _version_marker_pattern(target).search(block_text) is not None
    )
    completion = COMPLETION_MARKER in block_text
    return MarkerResult(
        version_confirm=version_confirm, completion_marker=completion
    )
