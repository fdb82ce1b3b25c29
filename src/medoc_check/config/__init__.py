"""Configuration management - INI settings and path utilities.

This package provides:
- GlobalConfigManager: settings.conf loading and saving
- GlobalConfig and its section TypedDicts
- Paths: Path constants and utilities
"""

from medoc_check.config.paths import Paths
from medoc_check.config.settings import (
    CheckpointConfig,
    GlobalConfig,
    GlobalConfigManager,
    MedocConfig,
    NetworkConfig,
    TelegramConfig,
)

__all__ = [
    "CheckpointConfig",
    "GlobalConfig",
    "GlobalConfigManager",
    "MedocConfig",
    "NetworkConfig",
    "Paths",
    "TelegramConfig",
]
