"""Odds notation models, conversion formulas and the raw-odds parser."""

from odds_engine.conversion.converter import (
    decimal_to_fractional,
    decimal_to_moneyline,
    fractional_to_decimal,
    moneyline_to_decimal,
)
from odds_engine.conversion.models import (
    NOTATION_EXAMPLES,
    NOTATION_NAMES,
    FractionalOdds,
    OddsNotation,
    OddsQuote,
)
from odds_engine.conversion.parser import parse_odds

__all__ = [
    "decimal_to_fractional",
    "decimal_to_moneyline",
    "fractional_to_decimal",
    "moneyline_to_decimal",
    "parse_odds",
    "OddsNotation",
    "FractionalOdds",
    "OddsQuote",
    "NOTATION_NAMES",
    "NOTATION_EXAMPLES",
]
