"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files and nested configuration.

Example:
    >>> from lichess_mcp.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.api_url
    'https://lichess.org/api'
    >>> settings.logging.level
    'INFO'

    # Or with environment variables:
    # LICHESS_TOKEN=lip_xxx
    # LICHESS_HTTP_TIMEOUT=60
    # LICHESS_LOG_FORMAT=json
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveFloat, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LICHESS_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class HttpSettings(BaseSettings):
    """HTTP client configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LICHESS_HTTP_",
        extra="ignore",
    )

    timeout: PositiveFloat = Field(default=30.0, description="Request timeout in seconds")
    verify_ssl: bool = True
    follow_redirects: bool = True
    user_agent: str = "lichess-mcp/0.1.0"


class LichessSettings(BaseSettings):
    """Root settings for the Lichess gateway.

    Loads configuration from environment variables with LICHESS_ prefix.

    Example environment variables:
        LICHESS_TOKEN=lip_xxx
        LICHESS_API_URL=https://lichess.dev/api
        LICHESS_HTTP_TIMEOUT=60
        LICHESS_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="LICHESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    token: SecretStr | None = Field(default=None, description="Initial bearer token")
    api_url: str = Field(default="https://lichess.org/api", description="Base URL of the Lichess API")
    server_name: str = "lichess-mcp"
    server_version: str = "0.1.0"

    http: HttpSettings = Field(default_factory=HttpSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("token", mode="before")
    @classmethod
    def _blank_token_is_absent(cls, v: object) -> object:
        """An empty LICHESS_TOKEN means no token."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("api_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @computed_field
    @property
    def has_token(self) -> bool:
        """Whether an initial token was configured."""
        return self.token is not None


@lru_cache(maxsize=1)
def get_settings() -> LichessSettings:
    """Get the global settings instance (cached)."""
    return LichessSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
