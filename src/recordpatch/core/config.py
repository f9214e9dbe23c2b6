"""Configuration management for RecordPatch.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded once and is
immutable during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RECORDPATCH_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "RecordPatch"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Update Service Settings
    update_service_backend: Literal["http", "sql"] = "http"
    update_service_url: str = Field(
        default="http://localhost:8000/api/v1/records",
        description="Base URL that PATCH requests are sent to",
    )
    update_service_api_key: str | None = Field(
        default=None,
        description="API key sent with every update request (optional)",
    )
    update_service_api_key_header: str = "X-API-Key"
    update_service_timeout_seconds: float = 30.0

    # Database Settings (sql backend)
    database_url: str = "sqlite:///./rp_data/records.db"
    db_echo: bool = False

    @field_validator("update_service_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate that the update timeout is positive."""
        if v <= 0:
            raise ValueError("update_service_timeout_seconds must be greater than 0")
        return v

    @field_validator("update_service_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so paths can be appended."""
        return v.rstrip("/")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    This function caches the settings instance to avoid reloading
    configuration on every call.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
