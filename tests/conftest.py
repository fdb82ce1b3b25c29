"""Pytest configuration and fixtures for medoc-check tests."""

import logging
import os
import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest
from log_samples import (
    LOG_ENCODING,
    PLANNER_TEXT,
    UPDATE_LOG_SUCCESS,
)

# Keep test runs out of the operator's log file; must happen before any
# medoc_check module creates its logger.
os.environ.setdefault(
    "MEDOC_CHECK_LOG_DIR",
    str(Path(tempfile.gettempdir()) / "medoc-check-pytest-logs"),
)


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation so caplog sees medoc_check records.

    The root medoc_check logger is created with propagate=False.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("medoc_check"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logging.getLogger(name).propagate = propagate_value


@pytest.fixture
def make_logs_dir(tmp_path: Path) -> Callable[..., Path]:
    """Build a logs directory with cp1251-encoded Planner/update logs.

    Passing None for a log skips creating that file.
    """

    def _make(
        planner: str | None = PLANNER_TEXT,
        update: str | None = UPDATE_LOG_SUCCESS,
        date: str = "2025-10-23",
    ) -> Path:
        logs_dir = tmp_path / "LOG"
        logs_dir.mkdir(exist_ok=True)
        if planner is not None:
            (logs_dir / "Planner.log").write_bytes(
                planner.encode(LOG_ENCODING)
            )
        if update is not None:
            (logs_dir / f"update_{date}.log").write_bytes(
                update.encode(LOG_ENCODING)
            )
        return logs_dir

    return _make
