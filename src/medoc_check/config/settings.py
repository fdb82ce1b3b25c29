"""Global configuration manager for INI settings.

settings.conf layout:

    [DEFAULT]
    config_version = 1.0.0
    log_level = INFO
    console_log_level = WARNING

    [medoc]
    logs_dir = D:\\MEDOC\\LOG
    encoding = cp1251

    [checkpoint]
    enabled = true
    file = ~/.config/medoc-check/checkpoint.json

    [telegram]
    enabled = false
    chat_id =
    notify_on_no_update = false

    [network]
    retry_attempts = 3
    timeout_seconds = 10
"""

import configparser
from datetime import UTC, datetime
from pathlib import Path
from typing import TypedDict

from medoc_check.config.paths import Paths
from medoc_check.constants import (
    CHECKPOINT_FILE_NAME,
    CONFIG_FILE_NAME,
    CONFIG_VERSION,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_ENCODING,
    DEFAULT_LOG_LEVEL,
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_TIMEOUT_SECONDS,
    ISO_DATETIME_FORMAT,
    KEY_CONFIG_VERSION,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_LOG_LEVEL,
    SECTION_CHECKPOINT,
    SECTION_DEFAULT,
    SECTION_MEDOC,
    SECTION_NETWORK,
    SECTION_TELEGRAM,
)
from medoc_check.exceptions import ConfigurationError
from medoc_check.logger import get_logger

logger = get_logger(__name__)

# Type alias for raw INI config dictionary
RawConfigDict = dict[str, str | dict[str, str]]


class MedocConfig(TypedDict):
    """Monitored application settings."""

    logs_dir: Path | None
    encoding: str


class CheckpointConfig(TypedDict):
    """Checkpoint persistence settings."""

    enabled: bool
    file: Path


class TelegramConfig(TypedDict):
    """Notification settings (the bot token lives in the keyring)."""

    enabled: bool
    chat_id: str
    notify_on_no_update: bool


class NetworkConfig(TypedDict):
    """Network configuration options."""

    retry_attempts: int
    timeout_seconds: int


class GlobalConfig(TypedDict):
    """Typed view of settings.conf."""

    config_version: str
    log_level: str
    console_log_level: str
    medoc: MedocConfig
    checkpoint: CheckpointConfig
    telegram: TelegramConfig
    network: NetworkConfig


def _new_parser() -> configparser.ConfigParser:
    return configparser.ConfigParser(
        inline_comment_prefixes=("#", ";"),
        interpolation=None,
    )


class GlobalConfigManager:
    """Manages global INI configuration."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize global config manager.

        Args:
            config_dir: Configuration directory path
                (defaults to Paths.CONFIG_DIR)

        """
        self.config_dir = config_dir or Paths.CONFIG_DIR
        self.settings_file = self.config_dir / CONFIG_FILE_NAME

    def get_default_global_config(self) -> RawConfigDict:
        """Get default global configuration values."""
        return {
            KEY_CONFIG_VERSION: CONFIG_VERSION,
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            SECTION_MEDOC: {"logs_dir": "", "encoding": DEFAULT_LOG_ENCODING},
            SECTION_CHECKPOINT: {
                "enabled": "true",
                "file": str(self.config_dir / CHECKPOINT_FILE_NAME),
            },
            SECTION_TELEGRAM: {
                "enabled": "false",
                "chat_id": "",
                "notify_on_no_update": "false",
            },
            SECTION_NETWORK: {
                "retry_attempts": str(DEFAULT_RETRY_ATTEMPTS),
                "timeout_seconds": str(DEFAULT_TIMEOUT_SECONDS),
            },
        }

    def _create_config_from_defaults(
        self, defaults: RawConfigDict
    ) -> configparser.ConfigParser:
        """Create ConfigParser populated with defaults."""
        config = _new_parser()

        flat_defaults = {
            key: str(value)
            for key, value in defaults.items()
            if not isinstance(value, dict)
        }
        config.read_dict({SECTION_DEFAULT: flat_defaults})

        for key, value in defaults.items():
            if isinstance(value, dict):
                config.add_section(key)
                for subkey, subvalue in value.items():
                    config.set(key, subkey, str(subvalue))

        return config

    def load_global_config(self) -> GlobalConfig:
        """Load global configuration, creating settings.conf if missing.

        Returns:
            Loaded global configuration

        Raises:
            ConfigurationError: If the file holds values of the wrong type

        """
        defaults = self.get_default_global_config()
        config = self._create_config_from_defaults(defaults)

        if self.settings_file.exists():
            try:
                config.read(self.settings_file, encoding="utf-8")
            except configparser.Error as e:
                raise ConfigurationError(
                    str(e), target=str(self.settings_file)
                ) from e
            return self._convert_to_global_config(config)

        global_config = self._convert_to_global_config(config)
        try:
            self.save_global_config(global_config)
        except OSError as e:
            # Read-only profile: run with defaults
            logger.warning(
                "Cannot create %s: %s", self.settings_file, e
            )
        return global_config

    def _convert_to_global_config(
        self, config: configparser.ConfigParser
    ) -> GlobalConfig:
        """Coerce raw INI strings into GlobalConfig."""
        try:
            logs_dir = config.get(SECTION_MEDOC, "logs_dir").strip()
            return GlobalConfig(
                config_version=config.get(SECTION_DEFAULT, KEY_CONFIG_VERSION),
                log_level=config.get(SECTION_DEFAULT, KEY_LOG_LEVEL).upper(),
                console_log_level=config.get(
                    SECTION_DEFAULT, KEY_CONSOLE_LOG_LEVEL
                ).upper(),
                medoc=MedocConfig(
                    logs_dir=Path(logs_dir).expanduser() if logs_dir else None,
                    encoding=config.get(SECTION_MEDOC, "encoding").strip(),
                ),
                checkpoint=CheckpointConfig(
                    enabled=config.getboolean(SECTION_CHECKPOINT, "enabled"),
                    file=Paths.expand_path(
                        config.get(SECTION_CHECKPOINT, "file")
                    ),
                ),
                telegram=TelegramConfig(
                    enabled=config.getboolean(SECTION_TELEGRAM, "enabled"),
                    chat_id=config.get(SECTION_TELEGRAM, "chat_id").strip(),
                    notify_on_no_update=config.getboolean(
                        SECTION_TELEGRAM, "notify_on_no_update"
                    ),
                ),
                network=NetworkConfig(
                    retry_attempts=config.getint(
                        SECTION_NETWORK, "retry_attempts"
                    ),
                    timeout_seconds=config.getint(
                        SECTION_NETWORK, "timeout_seconds"
                    ),
                ),
            )
        except (ValueError, configparser.Error) as e:
            raise ConfigurationError(
                str(e), target=str(self.settings_file)
            ) from e

    def save_global_config(self, config: GlobalConfig) -> None:
        """Save global configuration to settings.conf.

        Args:
            config: Global configuration to save

        """
        parser = _new_parser()
        parser.read_dict(
            {
                SECTION_DEFAULT: {
                    KEY_CONFIG_VERSION: config["config_version"],
                    KEY_LOG_LEVEL: config["log_level"],
                    KEY_CONSOLE_LOG_LEVEL: config["console_log_level"],
                },
                SECTION_MEDOC: {
                    "logs_dir": str(config["medoc"]["logs_dir"] or ""),
                    "encoding": config["medoc"]["encoding"],
                },
                SECTION_CHECKPOINT: {
                    "enabled": str(config["checkpoint"]["enabled"]).lower(),
                    "file": str(config["checkpoint"]["file"]),
                },
                SECTION_TELEGRAM: {
                    "enabled": str(config["telegram"]["enabled"]).lower(),
                    "chat_id": config["telegram"]["chat_id"],
                    "notify_on_no_update": str(
                        config["telegram"]["notify_on_no_update"]
                    ).lower(),
                },
                SECTION_NETWORK: {
                    "retry_attempts": str(
                        config["network"]["retry_attempts"]
                    ),
                    "timeout_seconds": str(
                        config["network"]["timeout_seconds"]
                    ),
                },
            }
        )

        self.config_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now(tz=UTC).strftime(ISO_DATETIME_FORMAT)
        with self.settings_file.open("w", encoding="utf-8") as f:
            f.write(
                "# medoc-check configuration\n"
                f"# Last updated: {timestamp}\n"
                "# The Telegram bot token is kept in the system keyring "
                "(medoc-check auth --save-token).\n\n"
            )
            parser.write(f)
        logger.debug("Saved configuration to %s", self.settings_file)
