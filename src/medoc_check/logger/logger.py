"""Public logger API.

- get_logger(): the entry point for every module
- setup_logging(): explicit setup with custom levels or file (tests)
- flush_all_handlers(): drain the queue so the log file is complete
- clear_logger_state(): forget all medoc_check loggers (tests)
"""

import atexit
import logging
from pathlib import Path

from medoc_check.logger.config import load_log_settings
from medoc_check.logger.handlers import ROOT_LOGGER_NAME, setup_root_logger
from medoc_check.logger.state import get_state


def flush_all_handlers() -> None:
    """Write out every queued record.

    QueueListener.stop() processes the queue up to its sentinel and joins
    the thread, so stopping and restarting the listener is a complete
    flush.
    """
    state = get_state()
    with state.lock:
        listener = state.queue_listener
        if listener is None:
            return
        listener.stop()
        for handler in listener.handlers:
            handler.flush()
        listener.start()


def _shutdown() -> None:
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            state.queue_listener.stop()
            for handler in state.queue_listener.handlers:
                handler.close()
            state.queue_listener = None


atexit.register(_shutdown)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    *,
    enable_file_logging: bool = True,
) -> logging.Logger:
    """Initialize the root logger once and return the named logger.

    Arguments only take effect on the first call (or the first call after
    clear_logger_state()); later calls just return loggers.

    Args:
        name: Logger name, typically __name__
        console_level: Console level name (default WARNING)
        file_level: File level name (default INFO)
        log_file: Log file path
            (default: ~/.config/medoc-check/logs/medoc-check.log)
        enable_file_logging: Whether to write the log file at all

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            default_console, default_file, default_path = load_log_settings()
            setup_root_logger(
                state,
                console_level or default_console,
                file_level or default_file,
                (log_file or default_path) if enable_file_logging else None,
            )
    return logging.getLogger(name)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger below the medoc_check root.

    Example:
        >>> from medoc_check.logger import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Planner trigger at %s", trigger_time)

    """
    return setup_logging(name)


def clear_logger_state() -> None:
    """Stop the listener and forget every ``medoc_check`` logger.

    The next get_logger() call sets logging up from scratch.
    """
    _shutdown()
    state = get_state()
    with state.lock:
        state.log_queue = None
        state.root_initialized = False
        state.config_applied = False

        manager = logging.Logger.manager
        for logger_name in list(manager.loggerDict):
            if logger_name == ROOT_LOGGER_NAME or logger_name.startswith(
                f"{ROOT_LOGGER_NAME}."
            ):
                instance = manager.loggerDict.pop(logger_name)
                if isinstance(instance, logging.Logger):
                    for handler in instance.handlers[:]:
                        handler.close()
                        instance.removeHandler(handler)
