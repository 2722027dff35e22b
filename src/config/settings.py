"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.ports import FailurePolicy


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Availability endpoint
    availability_base_url: str = "http://127.0.0.1:8080"
    availability_path: str = "/isUserNameAvailable"
    availability_timeout_seconds: float = 10.0
    availability_transport: Literal["http", "threaded", "memory"] = "http"
    taken_usernames: list[str] = []  # Only used by the memory transport

    # Pipeline behaviour
    debounce_seconds: float = 0.5  # Quiet period before a username is checked
    availability_failure_policy: FailurePolicy = FailurePolicy.SURFACE


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
