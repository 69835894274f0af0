"""Configuration and logging for discovery search."""

from .exceptions import ConfigurationError
from .logging import configure_logging, get_logger
from .settings import LoggingConfig, SearchConfig, Settings, load_settings

__all__ = [
    "ConfigurationError",
    "LoggingConfig",
    "SearchConfig",
    "Settings",
    "configure_logging",
    "get_logger",
    "load_settings",
]
