"""Configuration loading and updating for the logging system.

Bootstrap values are hardcoded so importing the logger never depends on
the config package; update_logger_from_config() applies settings.conf
levels once configuration is available.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from medoc_check.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_LOG_LEVEL,
    LOG_DIR_ENV_VAR,
    LOG_FILE_NAME,
)
from medoc_check.exceptions import MedocCheckError

if TYPE_CHECKING:
    from medoc_check.config import GlobalConfig
    from medoc_check.logger.state import _LoggerState


def load_log_settings() -> tuple[str, str, Path]:
    """Load default console level, file level, and file path.

    Environment Variable Override:
        MEDOC_CHECK_LOG_DIR: Overrides the log directory. The test suite
        sets it so test runs never write to the operator's log file.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    env_log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if env_log_dir:
        default_path = Path(env_log_dir).expanduser() / LOG_FILE_NAME
    else:
        default_path = (
            Path.home()
            / CONFIG_DIR_NAME
            / DEFAULT_CONFIG_SUBDIR
            / "logs"
            / LOG_FILE_NAME
        )

    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, default_path


def update_logger_from_config(
    state: "_LoggerState", global_config: "GlobalConfig | None" = None
) -> None:
    """Update logger handler levels from settings.conf.

    Only updates handler levels, never adds or removes handlers.

    Args:
        state: Logger state object (from logger.state module)
        global_config: Already loaded settings; loaded from the default
            location when omitted

    Note:
        Errors while loading configuration are ignored so that a broken
        settings file never prevents logging from working. Sets
        state.config_applied = True on success.

    """
    try:
        config = global_config
        if config is None:
            from medoc_check.config import GlobalConfigManager  # noqa: PLC0415

            config = GlobalConfigManager().load_global_config()

        console_level = getattr(
            logging, config["console_log_level"], logging.WARNING
        )
        file_level = getattr(logging, config["log_level"], logging.INFO)

        if state.queue_listener is not None:
            for handler in state.queue_listener.handlers:
                if isinstance(handler, RotatingFileHandler):
                    handler.setLevel(file_level)
                elif isinstance(handler, logging.StreamHandler):
                    handler.setLevel(console_level)

        state.config_applied = True

    except (
        ImportError,
        KeyError,
        AttributeError,
        ValueError,
        OSError,
        MedocCheckError,
    ):
        # Keep bootstrap defaults
        pass
