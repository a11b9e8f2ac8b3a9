"""Resolve odds of unknown notation to canonical decimal odds.

Odds arrive from upstream feeds as display strings ("2.10", "23/25", "+150",
"-200") or bare numbers, without saying which notation they use. The parser
picks a notation from syntactic cues, in this order:

1. Blank input                  -> 1.0
2. Contains "."                 -> decimal literal
3. Contains "/"                 -> fractional "num/den"
4. Leading "+" or "-"           -> moneyline with that sign
5. Unsigned number > 100        -> moneyline
6. Unsigned number in [1, 10]   -> decimal
7. Any other unsigned number    -> moneyline

Rules 5-7 are a policy for ambiguous feeds: a bare "150" could be a decimal
outlier or a moneyline price, and it is read as moneyline +150. The 100 and
[1, 10] thresholds are fixed.

parse_odds never raises. Anything it cannot read resolves to 1.0 (no edge)
so a rendering path fed dirty data still shows a value.
"""

import math

from odds_engine.conversion.converter import fractional_to_decimal, moneyline_to_decimal
from odds_engine.monitoring import get_logger

logger = get_logger(__name__)

# Returned for blank, malformed or out-of-range input
DEFAULT_DECIMAL_ODDS = 1.0

# Unsigned numbers above this are read as moneyline
MONEYLINE_THRESHOLD = 100.0

# Unsigned numbers inside this window are read as decimal
DECIMAL_WINDOW = (1.0, 10.0)


def _to_float(text: str) -> float | None:
    try:
        return float(text)
    except ValueError:
        return None


def _fallback(raw: object, reason: str) -> float:
    logger.debug("odds_parse_fallback", raw=repr(raw), reason=reason)
    return DEFAULT_DECIMAL_ODDS


def _number_to_text(value: int | float) -> str:
    """Render a bare number the way an odds feed would display it.

    Integral floats drop the trailing ".0", so 150.0 is read like "150"
    (moneyline) and 2.5 like "2.5" (decimal).
    """
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def _parse_text(text: str) -> float | None:
    """Apply the resolution rules. Returns None when the text is unreadable."""
    if "." in text:
        return _to_float(text)

    if "/" in text:
        parts = text.split("/")
        if len(parts) != 2:
            return None
        numerator = _to_float(parts[0].strip())
        denominator = _to_float(parts[1].strip())
        if numerator is None or denominator is None or denominator == 0:
            return None
        return fractional_to_decimal(numerator, denominator)

    sign = text[0] if text[0] in "+-" else ""
    magnitude = _to_float(text[len(sign):])
    if magnitude is None or not math.isfinite(magnitude) or magnitude < 0:
        return None

    if sign == "+":
        return moneyline_to_decimal(magnitude)
    if sign == "-":
        return moneyline_to_decimal(-magnitude)
    if magnitude > MONEYLINE_THRESHOLD:
        return moneyline_to_decimal(magnitude)
    low, high = DECIMAL_WINDOW
    if low <= magnitude <= high:
        return magnitude
    return moneyline_to_decimal(magnitude)


def parse_odds(raw: str | int | float | None) -> float:
    """Parse odds of any notation into canonical decimal odds.

    Args:
        raw: Display string or bare number of unknown notation

    Returns:
        Decimal odds (always finite, >= 1.0, with a finite moneyline). 1.0
        for blank, malformed or out-of-range input.

    Examples:
        >>> parse_odds("2.10")
        2.1
        >>> parse_odds("+150")
        2.5
        >>> parse_odds("-200")
        1.5
        >>> parse_odds("150")
        2.5
        >>> parse_odds("1/0")
        1.0
    """
    if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
        return _fallback(raw, "unsupported_type")

    try:
        text = raw.strip() if isinstance(raw, str) else _number_to_text(raw)
    except ValueError:
        # int too long for str() under the interpreter digit limit; repr() fails too
        logger.debug("odds_parse_fallback", raw=type(raw).__name__, reason="unsupported_number")
        return DEFAULT_DECIMAL_ODDS
    if not text:
        return DEFAULT_DECIMAL_ODDS

    decimal_odds = _parse_text(text)
    if decimal_odds is None:
        return _fallback(raw, "malformed")
    if not math.isfinite(decimal_odds) or decimal_odds < 1.0:
        return _fallback(raw, "out_of_range")
    # Every notation must render, moneyline included
    if not math.isfinite((decimal_odds - 1) * 100):
        return _fallback(raw, "out_of_range")
    return decimal_odds
