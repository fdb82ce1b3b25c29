"""Planner log scanning for the most recent update trigger."""

import re

from medoc_check.constants import TRIGGER_PHRASE
from medoc_check.domain.timestamps import TimestampFormat, parse_timestamp
from medoc_check.domain.types import TriggerInfo

# Package token: [ezvit.]<from>[-<to>][.upd], digits and dots only
_TRIGGER_RE = re.compile(
    re.escape(TRIGGER_PHRASE)
    + r"\s+(?P<token>(?:ezvit\.)?\d[\d.]*(?:-\d[\d.]*)?(?:\.upd)?)(?!\S)",
    re.IGNORECASE,
)


def scan_trigger(text: str) -> TriggerInfo:
    """Find the last update-trigger line in planner log text.

    A line counts only when it holds the trigger phrase followed by a
    package token (``[ezvit.]<from>[-<to>][.upd]``) and a planner-format
    timestamp. Earlier triggers are discarded; only the latest run is
    evaluated.

    Example line:
        23.10.2025 10:30:15 Завантаження оновлення ezvit.11.02.185-11.02.186.upd

    Args:
        text: Whole planner log text

    Returns:
        TriggerInfo; ``found`` is False when no line qualifies

    """
    last = TriggerInfo(found=False)
    for line in text.splitlines():
        match = _TRIGGER_RE.search(line)
        if match is None:
            continue
        stamp = parse_timestamp(line, TimestampFormat.PLANNER)
        if stamp is None:
            continue
        last = TriggerInfo(
            found=True, timestamp=stamp, raw_version_token=match["token"]
        )
    return last
