"""Stake and payout calculations on canonical decimal odds.

Total return = stake x decimal odds; profit = total return - stake. Every
caller computes payouts here so the same odds always yield the same profit,
whatever notation the price arrived in.
"""

import math
from dataclasses import dataclass

from odds_engine.conversion.converter import check_decimal_odds
from odds_engine.conversion.parser import parse_odds

# Tolerance for validate_consistent_betting, in currency units
CONSISTENCY_TOLERANCE = 0.01


@dataclass(frozen=True)
class BettingReturn:
    """Payout breakdown for a single bet.

    Attributes:
        stake: Amount wagered
        odds: Decimal odds the bet was placed at
        total_return: Amount paid back on a win, stake included
        profit: total_return minus stake
    """

    stake: float
    odds: float
    total_return: float
    profit: float


def calculate_betting_return(stake: float, decimal_odds: float) -> BettingReturn:
    """Calculate total return and profit at decimal odds.

    Args:
        stake: Amount wagered (>= 0)
        decimal_odds: Decimal odds (>= 1.0)

    Returns:
        BettingReturn

    Raises:
        ValueError: If stake is negative or not finite, or decimal_odds is
            below 1.0 or not finite

    Examples:
        >>> calculate_betting_return(10, 2.5).profit
        15.0
    """
    if not math.isfinite(stake):
        raise ValueError(f"Stake must be finite (got {stake}).")
    if stake < 0:
        raise ValueError(f"Stake cannot be negative (got {stake}).")
    check_decimal_odds(decimal_odds)
    total_return = stake * decimal_odds
    return BettingReturn(
        stake=stake,
        odds=decimal_odds,
        total_return=total_return,
        profit=total_return - stake,
    )


def calculate_betting_return_from_odds(stake: float, raw_odds: str | int | float | None) -> BettingReturn:
    """Calculate returns from odds in any notation ("+150", "3/2", "2.50").

    Unreadable odds are priced at 1.0, i.e. stake back with zero profit.
    """
    return calculate_betting_return(stake, parse_odds(raw_odds))


def validate_consistent_betting(stake: float, decimal_odds: float) -> tuple[bool, BettingReturn, str]:
    """Check that profit equals stake x (odds - 1).

    Returns:
        (is_valid, calculation, message)
    """
    calculation = calculate_betting_return(stake, decimal_odds)
    expected_profit = stake * (decimal_odds - 1)
    is_valid = abs(calculation.profit - expected_profit) < CONSISTENCY_TOLERANCE

    if is_valid:
        message = f"Consistent: {stake:.2f} at {decimal_odds} odds = {calculation.profit:.2f} profit"
    else:
        message = f"Inconsistent: expected {expected_profit:.2f}, got {calculation.profit:.2f}"
    return is_valid, calculation, message
