"""CLI package for the odds engine."""

from odds_engine.cli.main import cli

__all__ = ["cli"]
