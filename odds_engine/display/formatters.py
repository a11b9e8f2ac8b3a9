"""Odds display formatting.

Turns canonical decimal odds into the string for the user's chosen notation,
converts numeric values between notations, and builds Rich tables/panels for
terminal output.

The chosen notation is always an explicit argument. Callers read the stored
preference once (see odds_engine.preferences) and pass it in.
"""

from typing import Sequence

from rich.panel import Panel
from rich.table import Table

from odds_engine.betting.returns import calculate_betting_return
from odds_engine.conversion.converter import (
    check_decimal_odds,
    decimal_to_fractional,
    decimal_to_moneyline,
    fractional_to_decimal,
    moneyline_to_decimal,
)
from odds_engine.conversion.models import NOTATION_NAMES, OddsNotation, OddsQuote
from odds_engine.conversion.parser import parse_odds


def format_odds(decimal_odds: float, notation: OddsNotation | str) -> str:
    """Format canonical decimal odds in the given notation.

    Args:
        decimal_odds: Decimal odds (>= 1.0)
        notation: Target notation (enum member or tag string)

    Returns:
        Display string: "+150" / "-200" (moneyline), "2.50" (decimal),
        "3/2" (fractional)

    Raises:
        ValueError: If notation is unknown or decimal_odds is below 1.0
    """
    notation = OddsNotation.coerce(notation)

    if notation is OddsNotation.MONEYLINE:
        moneyline = decimal_to_moneyline(decimal_odds)
        return f"+{moneyline}" if moneyline > 0 else f"{moneyline}"

    if notation is OddsNotation.FRACTIONAL:
        numerator, denominator = decimal_to_fractional(decimal_odds)
        return f"{numerator}/{denominator}"

    check_decimal_odds(decimal_odds)
    return f"{decimal_odds:.2f}"


def render_odds(raw: str | int | float | None, notation: OddsNotation | str) -> str:
    """Parse raw odds of unknown notation and format them.

    Never raises for any raw value: unreadable odds render as 1.0 in the
    target notation ("0", "1.00" or "0/1").

    Raises:
        ValueError: If notation is unknown
    """
    return format_odds(parse_odds(raw), notation)


def convert_odds(
    value: float,
    from_notation: OddsNotation | str,
    to_notation: OddsNotation | str,
) -> float:
    """Convert a numeric odds value between notations.

    The value is normalized to decimal odds, then projected:
    - moneyline: the rounded moneyline integer
    - decimal: the decimal odds
    - fractional: the decimal odds (a fraction is a display-only pair)

    A fractional input is the net profit ratio as one number
    (numerator / denominator, e.g. 1.5 for 3/2).

    Args:
        value: Odds in from_notation's numeric form
        from_notation: Notation of value
        to_notation: Target notation

    Returns:
        Numeric odds in to_notation's domain

    Raises:
        ValueError: If a notation is unknown or the value is out of range

    Examples:
        >>> convert_odds(-200, "moneyline", "decimal")
        1.5
        >>> convert_odds(2.5, "decimal", "moneyline")
        150
        >>> convert_odds(1.5, "fractional", "decimal")
        2.5
    """
    from_notation = OddsNotation.coerce(from_notation)
    to_notation = OddsNotation.coerce(to_notation)

    if from_notation is OddsNotation.MONEYLINE:
        decimal_odds = moneyline_to_decimal(value)
    elif from_notation is OddsNotation.FRACTIONAL:
        decimal_odds = fractional_to_decimal(value, 1)
    else:
        decimal_odds = float(value)
    check_decimal_odds(decimal_odds)

    if to_notation is OddsNotation.MONEYLINE:
        return decimal_to_moneyline(decimal_odds)
    return decimal_odds


def format_odds_table(
    quotes: Sequence[tuple[str, OddsQuote]],
    highlight: OddsNotation | str | None = None,
) -> Table:
    """Format quotes as a Rich table with one column per notation.

    Args:
        quotes: (raw input, parsed quote) pairs in display order
        highlight: Notation column to emphasize (usually the stored preference)

    Returns:
        Rich Table
    """
    highlight = OddsNotation.coerce(highlight) if highlight is not None else None

    table = Table(
        title="Odds",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Input", justify="left", style="white", no_wrap=True)
    for notation in OddsNotation:
        style = "bold green" if notation is highlight else "magenta"
        table.add_column(NOTATION_NAMES[notation], justify="right", style=style)

    if not quotes:
        table.add_row("[dim]No odds given[/dim]", "", "", "")
        return table

    for raw, quote in quotes:
        table.add_row(raw, *(quote.display(notation) for notation in OddsNotation))

    return table


def format_quote_detail(quote: OddsQuote, stake: float | None = None) -> Panel:
    """Format a single quote as a Rich panel.

    Args:
        quote: Parsed quote
        stake: Optional stake for a payout line

    Returns:
        Rich Panel
    """
    lines = [
        f"{NOTATION_NAMES[notation]}: [magenta]{quote.display(notation)}[/magenta]"
        for notation in OddsNotation
    ]
    if stake is not None:
        payout = calculate_betting_return(stake, quote.decimal)
        lines.append("")
        lines.append(f"Stake: {payout.stake:.2f}")
        lines.append(f"Total return: [green]{payout.total_return:.2f}[/green]")
        lines.append(f"Profit: [bold green]{payout.profit:.2f}[/bold green]")

    return Panel("\n".join(lines), title="Odds Detail", border_style="cyan")
