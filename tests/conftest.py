"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Availability checker test doubles
- Settings isolated from the environment and .env files
"""

from collections.abc import Generator

import pytest

from src.config.settings import Settings, get_settings
from tests.support import DEBOUNCE, ControlledChecker, StaticChecker


@pytest.fixture
def controlled_checker() -> ControlledChecker:
    return ControlledChecker()


@pytest.fixture
def static_checker() -> StaticChecker:
    return StaticChecker()


@pytest.fixture
def settings() -> Settings:
    """Settings with a short debounce window and the in-memory transport."""
    return Settings(
        _env_file=None,
        debounce_seconds=DEBOUNCE,
        availability_transport="memory",
        taken_usernames=["admin", "root"],
    )


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Drop cached settings so environment changes in one test do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
