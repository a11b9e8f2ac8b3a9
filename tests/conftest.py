"""Shared pytest fixtures for odds engine tests."""

import pytest

from odds_engine.config import get_settings
from odds_engine.monitoring import configure_logging
from odds_engine.preferences.store import PreferenceStore


@pytest.fixture(autouse=True)
def setup_test_logging():
    """Configure structlog for test output."""
    configure_logging("development")


@pytest.fixture
def preference_store(tmp_path):
    """Provide a fresh preference store in an isolated directory."""
    store = PreferenceStore(directory=str(tmp_path / "prefs"))
    yield store
    store.close()


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    """Point settings at a temporary preference directory.

    Clears the cached Settings before and after so each test reads its own
    environment.
    """
    monkeypatch.setenv("ODDS_PREFERENCES_DIR", str(tmp_path / "cli_prefs"))
    monkeypatch.delenv("ODDS_DEFAULT_NOTATION", raising=False)
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()
