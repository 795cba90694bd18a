"""Base configuration settings."""

import os
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """Application settings.

    Values are read from environment variables (case-insensitive) and from an
    optional ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Multi-Calendar API"
    app_version: str = "1.0.0"
    environment: str = Field(
        default_factory=lambda: os.getenv("ENVIRONMENT", "development"),
        description="Deployment environment name",
    )
    debug: bool = False
    log_level: str = "INFO"
    log_format: str = "console"

    # API
    api_v1_prefix: str = "/api/v1"
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    allowed_origins: List[str] = ["*"]
    cache_max_age: int = Field(
        default=86400,
        description="Cache-Control max-age (seconds) for conversion responses",
    )

    # Calendar engine
    default_locale: str = Field(
        default="en", description="Locale used for Gregorian month names"
    )
    boundary_scan_limit: int = Field(
        default=62,
        description="Maximum days scanned in each direction for native month boundaries",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {v!r}"
            )
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Only console and json renderers are supported."""
        if v not in ("console", "json"):
            raise ValueError(f"log_format must be 'console' or 'json', got {v!r}")
        return v

    @field_validator("boundary_scan_limit", "cache_max_age")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Scan limits and cache lifetimes must be positive."""
        if v <= 0:
            raise ValueError("value must be a positive integer")
        return v
