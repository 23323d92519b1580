"""Configuration and logging for content-permissions."""

from .settings import ContentPermissionsSettings, get_settings
from .logging_config import (
    LoggingConfig,
    LogLevel,
    LogVerbosity,
    LogFormat,
    setup_logging,
)

__all__ = [
    "ContentPermissionsSettings",
    "get_settings",
    "LoggingConfig",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "setup_logging",
]
