"""Pytest configuration for all tests."""

import pytest

from securetoken.core.config import get_settings


@pytest.fixture(autouse=True)
def _testing_settings(monkeypatch):
    """Run every test against fresh settings in the testing environment."""
    monkeypatch.setenv("SECURETOKEN_ENVIRONMENT", "testing")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
