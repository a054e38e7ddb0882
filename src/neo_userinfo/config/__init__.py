"""Configuration for neo-userinfo."""

from .logging_config import LogFormat, LoggingConfig, LogLevel, LogVerbosity, setup_logging
from .settings import (
    CACHE_MAX_ENTRIES,
    DEFAULT_CACHE_EXPIRE_AFTER_ACCESS,
    DEFAULT_EMAIL_SUFFIX,
    UserInfoSettings,
    get_settings,
)

__all__ = [
    "CACHE_MAX_ENTRIES",
    "DEFAULT_CACHE_EXPIRE_AFTER_ACCESS",
    "DEFAULT_EMAIL_SUFFIX",
    "UserInfoSettings",
    "get_settings",
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "LoggingConfig",
    "setup_logging",
]
