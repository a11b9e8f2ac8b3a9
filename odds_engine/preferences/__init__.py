"""Persisted user display preference."""

from odds_engine.preferences.store import ODDS_FORMAT_KEY, PreferenceStore

__all__ = ["ODDS_FORMAT_KEY", "PreferenceStore"]
