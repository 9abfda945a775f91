"""Shared fixtures."""

import pytest

from sncf_departures.adapters.config import AppConfig


@pytest.fixture
def config() -> AppConfig:
    """Configuration isolated from the environment and any .env file."""
    return AppConfig(_env_file=None, sncf_api_key="test-key", search_debounce_ms=20)
