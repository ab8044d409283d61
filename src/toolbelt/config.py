"""Toolbelt configuration using pydantic-settings.

All configuration is strongly typed and supports environment variables
(prefixed with ``TOOLBELT_``) and .env files.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigError(Exception):
    """Raised when a configuration value is present but unusable.

    Example:
        >>> raise ConfigError("LOG_FORMAT", "expected 'console' or 'json'")
        Traceback (most recent call last):
        ...
        toolbelt.config.ConfigError: Invalid LOG_FORMAT: expected 'console' or 'json'
    """

    def __init__(self, key_name: str, reason: str) -> None:
        """Initialize configuration error.

        Args:
            key_name: Name of the offending setting.
            reason: Why the value cannot be used.
        """
        self.key_name = key_name
        self.reason = reason
        super().__init__(f"Invalid {key_name}: {reason}")


class Settings(BaseSettings):
    """Library settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_prefix="TOOLBELT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "console" or "json"

    # Raise on contract violations instead of only logging them
    DEBUG_ASSERTIONS: bool = False

    # Navigation
    TRANSITION_RETRY_DELAY: float = Field(default=0.1, gt=0)  # seconds
    RETRO_TRANSITION_DURATION: float = Field(default=0.25, gt=0)  # seconds

    # Well-known directories live under this root
    APP_HOME: Path = Path.home() / ".toolbelt"

    # Text formatting
    PHONE_COUNTRY_PREFIX: str = "+7"
    CURRENCY_SYMBOL: str = "₽"

    @field_validator("LOG_FORMAT")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        if value not in ("console", "json"):
            raise ValueError("LOG_FORMAT must be 'console' or 'json'")
        return value

    def require_log_level(self) -> int:
        """Resolve LOG_LEVEL to a stdlib logging level number.

        Returns:
            The numeric logging level.

        Raises:
            ConfigError: If LOG_LEVEL does not name a logging level.
        """
        return resolve_log_level(self.LOG_LEVEL)


def resolve_log_level(name: str) -> int:
    """Resolve a level name such as ``"debug"`` to its logging level number.

    Raises:
        ConfigError: If `name` does not name a logging level.
    """
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ConfigError("LOG_LEVEL", f"unknown level {name!r}")
    return level


# Singleton instance for import convenience
settings = Settings()
