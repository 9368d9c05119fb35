# =============================================================================
# frontend/config.py - Frontend Settings
# =============================================================================
# Configuration for the web UI, loaded with pydantic-settings from
# environment variables and the optional .env file.
#
# Usage:
#   from frontend.config import frontend_settings
#   print(frontend_settings.API_URL)
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FrontendSettings(BaseSettings):
    """Web UI settings."""

    # -------------------------------------------------------------------------
    # Backend Connection
    # -------------------------------------------------------------------------

    API_URL: str = Field(
        default="http://localhost:4000",
        description="Base URL of the backend API"
    )

    HEALTH_CHECK_INTERVAL: float = Field(
        default=30.0,
        gt=0,
        description="Seconds between backend health polls"
    )

    HEALTH_CHECK_TIMEOUT: float = Field(
        default=5.0,
        gt=0,
        description="Timeout in seconds for one health poll"
    )

    # -------------------------------------------------------------------------
    # Server
    # -------------------------------------------------------------------------

    FRONTEND_HOST: str = Field(default="0.0.0.0")

    FRONTEND_PORT: int = Field(default=3000, ge=1, le=65535)

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development"
    )

    DEBUG: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_frontend_settings() -> FrontendSettings:
    """Get cached FrontendSettings instance."""
    return FrontendSettings()


frontend_settings = get_frontend_settings()
