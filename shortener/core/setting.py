"""
Configuration Settings

This module defines application configuration using Pydantic Settings.
All configuration is loaded from environment variables or .env file.

Design Decisions:
- Uses pydantic-settings for type-safe configuration
- Supports multiple environments (production, staging, dev)
- Only web-server concerns are configurable; mappings live in process memory
"""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings", "settings"]


class EnvSettingsOptions(Enum):
    """Environment options for deployment."""
    production = "production"
    staging = "staging"
    development = "dev"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Project Configuration
    ENV_SETTING: EnvSettingsOptions = Field(
        default=EnvSettingsOptions.development,
        description="Environment setting (production, staging, dev)"
    )

    # Routing Configuration
    SERVICE_ROOT: str = Field(
        default="/UrlShortener",
        description="Path prefix under which the create/resolve endpoints are mounted"
    )

    # Server Configuration
    HOST: str = Field(
        default="0.0.0.0",
        description="Interface uvicorn binds to"
    )
    PORT: int = Field(
        default=8000,
        description="Port uvicorn listens on"
    )

    # Observability
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    # CORS
    CORS_ALLOW_ORIGINS: List[str] = Field(
        default=["*"],
        description="Origins allowed to call the API from a browser"
    )


settings = Settings()
