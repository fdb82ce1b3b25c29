"""Handler construction for the medoc_check root logger.

Records flow through a QueueHandler to a QueueListener thread that owns
the real handlers:

    medoc_check.* ─► QueueHandler ─► queue ─► QueueListener
                                                ├─ console (stderr)
                                                └─ rotating file

The console writes to stderr so ``check --json`` keeps stdout clean.
"""

import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path

from medoc_check.constants import (
    LOG_BACKUP_COUNT,
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_ROTATION_THRESHOLD_BYTES,
)
from medoc_check.logger.formatters import HybridConsoleFormatter

ROOT_LOGGER_NAME = "medoc_check"


def _level(name: str, fallback: int) -> int:
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else fallback


def build_console_handler(level: str) -> logging.StreamHandler:
    """Create the stderr handler; colors only when attached to a terminal."""
    stream = sys.stderr
    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        HybridConsoleFormatter(
            LOG_CONSOLE_FORMAT,
            datefmt=LOG_CONSOLE_DATE_FORMAT,
            use_color=stream.isatty(),
        )
    )
    handler.setLevel(_level(level, logging.WARNING))
    return handler


def build_file_handler(log_file: Path, level: str) -> RotatingFileHandler:
    """Create the rotating file handler for the project's own log.

    Raises:
        OSError: If the log directory or file cannot be opened

    """
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_ROTATION_THRESHOLD_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_FILE_DATE_FORMAT)
    )
    handler.setLevel(_level(level, logging.INFO))
    return handler


def setup_root_logger(
    state,
    console_level: str,
    file_level: str,
    log_file: Path | None,
) -> None:
    """Attach the queue to the root logger and start the listener.

    A log file that cannot be opened (read-only profile, locked file)
    leaves the console as the only handler; classification must still
    run and report.

    Args:
        state: Logger state object (from logger.state module)
        console_level: Console level name
        file_level: File level name
        log_file: Log file path, or None to disable file logging

    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)
    root_logger.propagate = False
    for old in root_logger.handlers[:]:
        old.close()
        root_logger.removeHandler(old)

    handlers: list[logging.Handler] = [build_console_handler(console_level)]
    file_error: OSError | None = None
    if log_file is not None:
        try:
            handlers.append(build_file_handler(log_file, file_level))
        except OSError as e:
            file_error = e

    state.log_queue = queue.Queue(-1)
    state.queue_listener = QueueListener(
        state.log_queue, *handlers, respect_handler_level=True
    )
    state.queue_listener.start()
    root_logger.addHandler(QueueHandler(state.log_queue))
    state.root_initialized = True

    if file_error is not None:
        root_logger.warning(
            "File logging disabled, cannot open %s: %s", log_file, file_error
        )
