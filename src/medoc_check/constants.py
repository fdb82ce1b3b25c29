"""Centralized constants module for medoc-check.

This module serves as the single source of truth for shared constants:
log markers of the monitored application, file naming, configuration keys
and logging formats. Constants use typing.Final annotations.

Usage:
    from medoc_check.constants import COMPLETION_MARKER
"""

from typing import Final

# =============================================================================
# Monitored application log layout
# =============================================================================

# Scheduler log recording when an update was triggered
PLANNER_LOG_NAME: Final[str] = "Planner.log"

# Per-day update log, formatted with the trigger date (YYYY-MM-DD)
UPDATE_LOG_TEMPLATE: Final[str] = "update_{date}.log"
UPDATE_LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d"

# Single-byte Cyrillic codepage the application writes its logs in
DEFAULT_LOG_ENCODING: Final[str] = "cp1251"

# Planner line announcing that an update was initiated
TRIGGER_PHRASE: Final[str] = "Завантаження оновлення"

# Update log line opening an update attempt
START_MARKER: Final[str] = 'Початок роботи, операція "Оновлення"'

# Update log line closing an update attempt (marker C)
COMPLETION_MARKER: Final[str] = 'Завершення роботи, операція "Оновлення"'

# Phrase followed by the applied build number (marker V)
VERSION_MARKER_PHRASE: Final[str] = "Версія програми - "

# =============================================================================
# Version token constants
# =============================================================================

UPDATE_PACKAGE_PREFIX: Final[str] = "ezvit."
UPDATE_PACKAGE_EXTENSION: Final[str] = ".upd"

# FromVersion used when the update package carries no version range
PREVIOUS_VERSION_SENTINEL: Final[str] = "previous"

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_VERSION: Final[str] = "1.0.0"
CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "medoc-check"
CHECKPOINT_FILE_NAME: Final[str] = "checkpoint.json"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_RETRY_ATTEMPTS: Final[int] = 3
DEFAULT_TIMEOUT_SECONDS: Final[int] = 10

ISO_DATETIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Config section and key names
SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_MEDOC: Final[str] = "medoc"
SECTION_CHECKPOINT: Final[str] = "checkpoint"
SECTION_TELEGRAM: Final[str] = "telegram"
SECTION_NETWORK: Final[str] = "network"

KEY_CONFIG_VERSION: Final[str] = "config_version"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"

# =============================================================================
# Telegram / keyring constants
# =============================================================================

TELEGRAM_API_URL: Final[str] = "https://api.telegram.org"
KEYRING_SERVICE_NAME: Final[str] = "medoc-check-telegram-token"
TOKEN_ENV_VAR: Final[str] = "MEDOC_CHECK_TELEGRAM_TOKEN"

# Telegram rejects messages longer than this
TELEGRAM_MAX_MESSAGE_LENGTH: Final[int] = 4096

# =============================================================================
# Logging Constants
# =============================================================================

LOG_FILE_NAME: Final[str] = "medoc-check.log"
LOG_DIR_ENV_VAR: Final[str] = "MEDOC_CHECK_LOG_DIR"

# Maximum size for rotated log files (bytes)
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB

LOG_BACKUP_COUNT: Final[int] = 3

# Console and file format strings used by the logger
LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Color mapping for console output levels
LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
