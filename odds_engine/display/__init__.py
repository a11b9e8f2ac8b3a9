"""Odds display formatting for the user's chosen notation."""

from odds_engine.display.formatters import (
    convert_odds,
    format_odds,
    format_odds_table,
    format_quote_detail,
    render_odds,
)

__all__ = [
    "convert_odds",
    "format_odds",
    "format_odds_table",
    "format_quote_detail",
    "render_odds",
]
