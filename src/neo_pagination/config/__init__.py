"""Configuration for neo-pagination."""

from .settings import PaginationSettings, get_pagination_settings
from .logging_config import (
    LoggingConfig,
    LogFormat,
    LogLevel,
    LogVerbosity,
    setup_logging,
    get_logger,
)

__all__ = [
    "PaginationSettings",
    "get_pagination_settings",
    "LoggingConfig",
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "setup_logging",
    "get_logger",
]
