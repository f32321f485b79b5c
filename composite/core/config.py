"""Application configuration management."""

import logging
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


LOG_FORMATS = ("console", "json")


class Config(BaseSettings):
    """Configuration with environment variable support (COMPOSITE_ prefix)."""

    model_config = SettingsConfigDict(env_prefix="COMPOSITE_", case_sensitive=False)

    # Logging
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="console")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        fmt = value.strip().lower()
        if fmt not in LOG_FORMATS:
            raise ValueError(f"Log format must be one of {', '.join(LOG_FORMATS)}")
        return fmt


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        try:
            _config = Config()
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid composite configuration",
                details=[err["msg"] for err in e.errors()]
            ) from e
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment."""
    global _config
    _config = None
