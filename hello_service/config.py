# =============================================================================
# hello_service/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from hello_service.config import settings
#   print(settings.PORT)
#
# Environment variables are prefixed with HELLO_ (e.g. HELLO_PORT=8080) and
# are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# The defaults reproduce the service's fixed contract: 0.0.0.0:3000 and
# the "Hello, World!" greeting.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance, or
    passed explicitly to `create_app()` in tests.
    """

    # -------------------------------------------------------------------------
    # Listener
    # -------------------------------------------------------------------------

    HOST: str = Field(
        default="0.0.0.0",
        description="Address to bind the listener to"
    )

    PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port to bind the listener to"
    )

    # -------------------------------------------------------------------------
    # Response
    # -------------------------------------------------------------------------

    GREETING: str = Field(
        default="Hello, World!",
        min_length=1,
        description="Fixed body returned by GET /hello"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root logging level"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_prefix="HELLO_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        # Unrelated keys in a shared .env file are not an error
        extra="ignore",
        case_sensitive=True,
    )

    @property
    def bind_address(self) -> str:
        """Human-readable host:port, e.g. "0.0.0.0:3000"."""
        return f"{self.HOST}:{self.PORT}"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from hello_service.config import settings
settings = get_settings()
