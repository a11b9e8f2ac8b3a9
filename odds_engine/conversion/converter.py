"""Odds format conversion between decimal, moneyline and fractional notations.

Converts between the three supported notations:
- Moneyline (American): +150, -200 (US betting standard)
- Decimal: 2.50, 1.50 (European/Australian standard)
- Fractional: 3/2, 1/2 (UK standard)

Decimal odds are the canonical form. Every function here is pure: no I/O,
no logging. Contract violations raise ValueError.
"""

import math

# Relative tolerance for the continued-fraction expansion
FRACTIONAL_TOLERANCE = 1e-6

# Upper bound on continued-fraction terms
_MAX_FRACTION_TERMS = 64

# Moneyline returned for decimal 1.0, where the favorite formula divides by zero.
# moneyline_to_decimal(0) maps back to 1.0.
NO_EDGE_MONEYLINE = 0


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return math.floor(value + 0.5)


def check_decimal_odds(decimal_odds: float) -> None:
    """Raise ValueError unless decimal_odds is finite and >= 1.0."""
    if not math.isfinite(decimal_odds):
        raise ValueError(f"Decimal odds must be finite (got {decimal_odds}).")
    if decimal_odds < 1.0:
        raise ValueError(
            f"Decimal odds must be >= 1.0 (got {decimal_odds}). "
            "Decimal odds represent total payout, so minimum is 1.0 (break even)."
        )


def moneyline_to_decimal(moneyline: float) -> float:
    """Convert moneyline (American) odds to decimal odds.

    Moneyline odds use positive and negative values:
    - Positive (+150): Amount won on a 100 stake
    - Negative (-200): Stake needed to win 100
    - Zero: treated as no edge

    Args:
        moneyline: Moneyline odds (e.g., 150, -200)

    Returns:
        Decimal odds (always >= 1.0)

    Examples:
        >>> moneyline_to_decimal(150)
        2.5
        >>> moneyline_to_decimal(-200)
        1.5
        >>> moneyline_to_decimal(0)
        1.0
    """
    if not math.isfinite(moneyline):
        raise ValueError(f"Moneyline odds must be finite (got {moneyline}).")
    if moneyline > 0:
        # +150 means win 150 on 100 = 250 total on 100 = 2.5
        return moneyline / 100 + 1
    if moneyline < 0:
        # -200 means risk 200 to win 100 = 300 total on 200 = 1.5
        return 100 / abs(moneyline) + 1
    return 1.0


def decimal_to_moneyline(decimal_odds: float) -> int:
    """Convert decimal odds to the nearest moneyline integer.

    Decimal odds >= 2.0 give a positive (underdog) line, below 2.0 a
    negative (favorite) line. Decimal 1.0 has no finite favorite line and
    returns NO_EDGE_MONEYLINE (0).

    Args:
        decimal_odds: Decimal odds (>= 1.0)

    Returns:
        Moneyline odds integer

    Raises:
        ValueError: If decimal_odds is below 1.0, not finite, or too large
            for a finite moneyline

    Examples:
        >>> decimal_to_moneyline(2.5)
        150
        >>> decimal_to_moneyline(1.5)
        -200
        >>> decimal_to_moneyline(1.0)
        0
    """
    check_decimal_odds(decimal_odds)
    if decimal_odds >= 2.0:
        underdog = (decimal_odds - 1) * 100
        if not math.isfinite(underdog):
            raise ValueError(f"Decimal odds too large for a moneyline (got {decimal_odds}).")
        return _round_half_up(underdog)
    if decimal_odds == 1.0:
        return NO_EDGE_MONEYLINE
    return _round_half_up(-100 / (decimal_odds - 1))


def decimal_to_fractional(decimal_odds: float) -> tuple[int, int]:
    """Convert decimal odds to the simplest fractional approximation.

    Expands decimal_odds - 1 as a continued fraction and stops at the first
    convergent h/k within FRACTIONAL_TOLERANCE (relative) of it. This gives
    the simplest fraction, e.g. 1.92 -> 23/25 rather than 92/100.

    Args:
        decimal_odds: Decimal odds (>= 1.0)

    Returns:
        (numerator, denominator); (0, 1) for decimal 1.0

    Raises:
        ValueError: If decimal_odds is below 1.0 or not finite

    Examples:
        >>> decimal_to_fractional(2.5)
        (3, 2)
        >>> decimal_to_fractional(1.92)
        (23, 25)
        >>> decimal_to_fractional(1.0)
        (0, 1)
    """
    check_decimal_odds(decimal_odds)
    fractional = decimal_odds - 1
    if fractional == 0:
        return 0, 1

    # Convergent recurrences: h_n = a_n * h_{n-1} + h_{n-2}, same for k
    h1, h2 = 1, 0
    k1, k2 = 0, 1
    remainder = fractional
    for _ in range(_MAX_FRACTION_TERMS):
        term = math.floor(remainder)
        h1, h2 = term * h1 + h2, h1
        k1, k2 = term * k1 + k2, k1
        if abs(fractional - h1 / k1) <= fractional * FRACTIONAL_TOLERANCE:
            break
        tail = remainder - term
        if tail == 0:
            break
        remainder = 1 / tail
    return h1, k1


def fractional_to_decimal(numerator: float, denominator: float) -> float:
    """Convert fractional odds to decimal odds.

    Args:
        numerator: Profit units (e.g., 3 in 3/2)
        denominator: Stake units (e.g., 2 in 3/2)

    Returns:
        Decimal odds (1 + numerator / denominator)

    Raises:
        ValueError: If denominator is zero

    Examples:
        >>> fractional_to_decimal(3, 2)
        2.5
        >>> fractional_to_decimal(23, 25)
        1.92
    """
    if denominator == 0:
        raise ValueError("Fractional odds denominator cannot be zero.")
    return 1 + numerator / denominator
