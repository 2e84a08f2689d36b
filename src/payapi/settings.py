"""Centralized configuration using pydantic-settings.

All configuration is loaded from environment variables and .env files.
Variables are prefixed with ``PAYAPI_``, e.g. ``PAYAPI_API_KEY``.
"""

from enum import Enum
from typing import Literal, TypeAlias

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


LogFormat: TypeAlias = Literal["json", "console"]


class BodyEncoding(str, Enum):
    """Wire encoding of POST bodies."""

    FORM = "form"
    JSON = "json"


class Settings(BaseSettings):
    """Client settings.

    All settings can be overridden via environment variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="PAYAPI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API access
    api_key: str | None = Field(None, description="Secret API key sent as a bearer token")
    api_base: str = Field("https://api.stripe.com/v1", description="Base URL of the remote API")
    api_version: str | None = Field(None, description="Pinned remote API version header")

    # Transport
    timeout_seconds: float = Field(80.0, description="Request timeout in seconds")
    body_encoding: BodyEncoding = Field(BodyEncoding.FORM, description="POST body encoding")

    # Logging
    log_level: LogLevel = Field(LogLevel.INFO, description="Log level")
    log_format: LogFormat = Field("json", description="Log format (json or console)")

    @field_validator("api_base")
    def validate_api_base(cls, v: str) -> str:
        """Strip the trailing slash so paths can be appended directly."""
        return v.rstrip("/")

    @field_validator("timeout_seconds")
    def validate_timeout(cls, v: float) -> float:
        """Validate timeout."""
        if v <= 0:
            raise ValueError("timeout_seconds must be positive")
        return v


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get global settings instance (singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()  # type: ignore
    return _settings


def reset_settings() -> None:
    """Reset settings (mainly for testing)."""
    global _settings
    _settings = None
