"""Configuration module for filedispatch."""

from .manager import ConfigManager, get_config_manager
from .models import BatchSettings, CompressionSettings, DispatchConfig, LoggingSettings

__all__ = [
    "DispatchConfig",
    "CompressionSettings",
    "BatchSettings",
    "LoggingSettings",
    "ConfigManager",
    "get_config_manager",
]
