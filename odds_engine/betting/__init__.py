"""Stake, total return and profit calculations."""

from odds_engine.betting.returns import (
    BettingReturn,
    calculate_betting_return,
    calculate_betting_return_from_odds,
    validate_consistent_betting,
)

__all__ = [
    "BettingReturn",
    "calculate_betting_return",
    "calculate_betting_return_from_odds",
    "validate_consistent_betting",
]
