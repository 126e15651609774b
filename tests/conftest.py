"""Shared fixtures for the test suite."""

import pytest

from figma_cli.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run each test away from any local .env and with fresh settings."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("FIGMA_PERSONAL_ACCESS_TOKEN", "test_token")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
