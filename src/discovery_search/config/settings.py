"""Application configuration settings."""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class LoggingConfig(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = Field(default="WARNING", description="Log level")
    file_path: Optional[str] = Field(default=None, description="Log file path")
    json_format: bool = Field(default=False, description="Use JSON log format")


class SearchConfig(BaseSettings):
    """Search configuration settings."""

    model_config = SettingsConfigDict(env_prefix="SEARCH_")

    max_results: int = Field(
        default=50, ge=1, description="Maximum search results displayed"
    )
    suggestion_limit: int = Field(
        default=10, ge=1, description="Maximum keyword completions offered"
    )


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)

    def get_log_file_path(self) -> Optional[Path]:
        """Get the log file path if configured."""
        if self.logging.file_path:
            return Path(self.logging.file_path)
        return None


def _read_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read configuration file: {e}",
            {"path": str(config_path)},
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            "Invalid configuration file, check YAML syntax",
            {"path": str(config_path), "error": str(e)},
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            "Configuration file must contain a mapping",
            {"path": str(config_path)},
        )
    return data


def load_settings(config_file: Optional[Union[str, Path]] = None) -> Settings:
    """Load settings from environment variables and an optional YAML file.

    Values in the YAML file take precedence over environment variables.

    Raises:
        ConfigurationError: If the file is unreadable or values are invalid
    """
    overrides = _read_config_file(config_file) if config_file else {}

    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid configuration values",
            {"errors": [err["msg"] for err in e.errors()]},
        ) from e
