"""Tests for the persisted display preference."""

import pytest

from odds_engine.conversion.models import OddsNotation
from odds_engine.display.formatters import format_odds
from odds_engine.preferences.store import ODDS_FORMAT_KEY, PreferenceStore


def test_default_when_unset(preference_store):
    """Unset preference falls back to decimal."""
    assert preference_store.get_notation() is OddsNotation.DECIMAL


def test_custom_default(tmp_path):
    with PreferenceStore(str(tmp_path / "prefs"), default_notation="moneyline") as store:
        assert store.get_notation() is OddsNotation.MONEYLINE


def test_set_and_get(preference_store):
    stored = preference_store.set_notation("fractional")

    assert stored is OddsNotation.FRACTIONAL
    assert preference_store.get_notation() is OddsNotation.FRACTIONAL


def test_persists_across_instances(tmp_path):
    """A new store on the same directory sees the saved notation."""
    directory = str(tmp_path / "prefs")
    with PreferenceStore(directory) as store:
        store.set_notation(OddsNotation.MONEYLINE)

    with PreferenceStore(directory) as reopened:
        assert reopened.get_notation() is OddsNotation.MONEYLINE


def test_invalid_notation_rejected(preference_store):
    with pytest.raises(ValueError):
        preference_store.set_notation("hongkong")

    assert preference_store.get_notation() is OddsNotation.DECIMAL


def test_corrupt_stored_value_uses_default(preference_store):
    """A value written by something else is treated as unset."""
    preference_store._cache.set(ODDS_FORMAT_KEY, "malay")

    assert preference_store.get_notation() is OddsNotation.DECIMAL


def test_clear(preference_store):
    preference_store.set_notation("fractional")
    preference_store.clear()

    assert preference_store.get_notation() is OddsNotation.DECIMAL


def test_invalid_default_rejected(tmp_path):
    with pytest.raises(ValueError):
        PreferenceStore(str(tmp_path / "prefs"), default_notation="american")


def test_preference_feeds_formatter(preference_store):
    """The stored notation is read once and passed to the formatter."""
    preference_store.set_notation("moneyline")

    assert format_odds(1.5, preference_store.get_notation()) == "-200"
