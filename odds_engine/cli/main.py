"""Typer CLI entry point for the odds engine.

Examples:
- odds-engine convert "+150" --to fractional
- odds-engine table 2.10 23/25 +150
- odds-engine prefs set moneyline
"""

import os

from dotenv import load_dotenv

# Load .env file before settings are read
load_dotenv()

import typer
from rich.console import Console
from rich.table import Table

from odds_engine import __version__
from odds_engine.betting.returns import calculate_betting_return_from_odds
from odds_engine.config import get_settings
from odds_engine.conversion.models import NOTATION_EXAMPLES, NOTATION_NAMES, OddsNotation, OddsQuote
from odds_engine.conversion.parser import parse_odds
from odds_engine.display.formatters import format_odds_table, format_quote_detail, render_odds
from odds_engine.monitoring import configure_logging
from odds_engine.preferences.store import PreferenceStore

cli = typer.Typer(
    name="odds-engine",
    help="""Betting odds converter - decimal, fractional and moneyline.

Reads odds in any notation ("2.10", "23/25", "+150", "-200", "150") and
shows them in the notation you choose. The chosen notation is remembered
between runs (see 'prefs').
""",
    add_completion=False,
)
prefs_cli = typer.Typer(help="Show or change the remembered display notation.")
cli.add_typer(prefs_cli, name="prefs")

# Disable colors if NO_COLOR env var is set (standard convention)
console = Console(no_color=os.getenv("NO_COLOR") is not None)


def _open_store() -> PreferenceStore:
    settings = get_settings()
    return PreferenceStore(settings.preferences_dir, default_notation=settings.default_notation)


def _resolve_notation(notation: OddsNotation | None) -> OddsNotation:
    """CLI flag wins over the stored preference."""
    if notation is not None:
        return notation
    with _open_store() as store:
        return store.get_notation()


@cli.command()
def convert(
    raw: str = typer.Argument(..., help="Odds in any notation, e.g. '2.10', '23/25', '+150'"),
    to: OddsNotation = typer.Option(None, "--to", "-t", help="Target notation. Default: remembered preference"),
):
    """Show odds in the chosen notation.

    \b
    EXAMPLES:
      odds-engine convert 2.50 --to fractional    # 3/2
      odds-engine convert --to decimal -- -200    # 1.50 (use -- before negative odds)
      odds-engine convert 23/25 --to moneyline    # -109
    """
    console.print(render_odds(raw, _resolve_notation(to)))


@cli.command()
def table(
    raws: list[str] = typer.Argument(..., help="One or more odds values in any notation"),
):
    """Show each odds value in every notation."""
    with _open_store() as store:
        preferred = store.get_notation()
    quotes = [(raw, OddsQuote.from_decimal(parse_odds(raw))) for raw in raws]
    console.print(format_odds_table(quotes, highlight=preferred))


@cli.command()
def returns(
    stake: float = typer.Argument(..., help="Amount wagered"),
    raw: str = typer.Argument(..., help="Odds in any notation"),
):
    """Show total return and profit for a stake."""
    try:
        payout = calculate_betting_return_from_odds(stake, raw)
    except ValueError as e:
        console.print(f"[bold red]Error:[/bold red] {e}", style="red")
        raise typer.Exit(code=1)

    console.print(format_quote_detail(OddsQuote.from_decimal(payout.odds), stake=payout.stake))


@prefs_cli.command("show")
def prefs_show():
    """Show the remembered notation."""
    with _open_store() as store:
        notation = store.get_notation()
    console.print(f"{NOTATION_NAMES[notation]} {NOTATION_EXAMPLES[notation]}")


@prefs_cli.command("set")
def prefs_set(
    notation: str = typer.Argument(..., help="moneyline, decimal or fractional"),
):
    """Remember a display notation."""
    try:
        with _open_store() as store:
            stored = store.set_notation(notation)
    except ValueError as e:
        console.print(f"[bold red]Error:[/bold red] {e}", style="red")
        raise typer.Exit(code=1)

    console.print(f"Odds will be shown as [bold cyan]{NOTATION_NAMES[stored]}[/bold cyan] {NOTATION_EXAMPLES[stored]}")


@prefs_cli.command("clear")
def prefs_clear():
    """Forget the remembered notation."""
    with _open_store() as store:
        store.clear()
        notation = store.default_notation
    console.print(f"Preference cleared. Default: {NOTATION_NAMES[notation]}")


@cli.command()
def version():
    """Show version and configuration."""
    settings = get_settings()
    console.print(f"[bold cyan]Odds Engine[/bold cyan] v{__version__}")
    console.print()
    console.print("[bold]Configuration:[/bold]")
    console.print(f"  Default notation: {settings.default_notation.value}")
    console.print(f"  Preferences dir: {settings.preferences_dir}")
    console.print(f"  Log mode: {settings.log_mode}")


@cli.command()
def notations():
    """List supported notations with an example of each."""
    summary = Table(show_header=False, box=None)
    summary.add_column("Notation", style="bold")
    summary.add_column("Example")
    for notation in OddsNotation:
        summary.add_row(NOTATION_NAMES[notation], NOTATION_EXAMPLES[notation])
    console.print(summary)


def main():
    """Entry point for CLI."""
    configure_logging(get_settings().log_mode)
    cli()


if __name__ == "__main__":
    main()
