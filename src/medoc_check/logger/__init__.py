"""Logging for medoc-check.

Every module logs through a child of the ``medoc_check`` root logger:

    Application → QueueHandler → Queue → QueueListener thread
                                              ↓
                                  stderr console + rotating file

Usage:
    >>> from medoc_check.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Classified %s as %s", logs_dir, status)

Environment Variables:
    MEDOC_CHECK_LOG_DIR: Relocate the log file (used by the test suite).

Rules for contributors:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Use %-formatting in log calls, not f-strings
"""

from medoc_check.logger.config import (
    update_logger_from_config as _update_config,
)
from medoc_check.logger.formatters import HybridConsoleFormatter
from medoc_check.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from medoc_check.logger.state import get_state

__all__ = [
    "HybridConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config(global_config=None) -> None:
    """Apply settings.conf levels to the running handlers."""
    _update_config(get_state(), global_config)
