"""Pydantic models and enums for odds notations.

Canonical odds are always decimal (payout multiplier including stake, >= 1.0).
Moneyline and fractional values are display projections computed on demand.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from odds_engine.conversion.converter import (
    check_decimal_odds,
    decimal_to_fractional,
    decimal_to_moneyline,
)


class OddsNotation(str, Enum):
    """Display notation selector.

    Carries no data; it picks which formatting or conversion branch to use.
    """

    MONEYLINE = "moneyline"
    DECIMAL = "decimal"
    FRACTIONAL = "fractional"

    @classmethod
    def coerce(cls, value: "OddsNotation | str") -> "OddsNotation":
        """Resolve an enum member or tag string to an OddsNotation.

        Args:
            value: OddsNotation member or tag such as "fractional" or " Decimal "

        Returns:
            Matching OddsNotation

        Raises:
            ValueError: If value is not a known notation
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            tag = value.strip().lower()
            for member in cls:
                if member.value == tag:
                    return member
        supported = ", ".join(f"'{m.value}'" for m in cls)
        raise ValueError(f"Unknown odds notation: {value!r}. Supported notations: {supported}")


# Human-readable names for notation pickers
NOTATION_NAMES: dict[OddsNotation, str] = {
    OddsNotation.MONEYLINE: "Money Line Odds",
    OddsNotation.DECIMAL: "Decimal Odds",
    OddsNotation.FRACTIONAL: "Fractional Odds",
}

# The same price (-200 / 1.50 / 1/2) shown in each notation
NOTATION_EXAMPLES: dict[OddsNotation, str] = {
    OddsNotation.MONEYLINE: "(-200)",
    OddsNotation.DECIMAL: "(1.50)",
    OddsNotation.FRACTIONAL: "(1/2)",
}


class FractionalOdds(BaseModel):
    """Fractional odds pair where decimal = 1 + numerator / denominator.

    Attributes:
        numerator: Net profit units (0 only for the 1.0 no-edge case)
        denominator: Stake units (always >= 1)
    """

    model_config = ConfigDict(frozen=True)

    numerator: int = Field(ge=0)
    denominator: int = Field(ge=1)

    def to_decimal(self) -> float:
        """Canonical decimal odds for this pair."""
        return 1 + self.numerator / self.denominator

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


class OddsQuote(BaseModel):
    """A single price projected into every notation.

    Attributes:
        decimal: Canonical decimal odds (>= 1.0)
        moneyline: Rounded moneyline integer (0 for decimal 1.0)
        fractional: Simplest fractional approximation
    """

    model_config = ConfigDict(frozen=True)

    decimal: float
    moneyline: int
    fractional: FractionalOdds

    @field_validator("decimal")
    @classmethod
    def validate_decimal_odds(cls, v: float) -> float:
        """Reject non-finite decimal odds and odds below 1.0."""
        check_decimal_odds(v)
        return v

    @classmethod
    def from_decimal(cls, decimal_odds: float) -> "OddsQuote":
        """Build a quote from canonical decimal odds.

        Raises:
            ValueError: If decimal_odds is below 1.0 or not finite
        """
        numerator, denominator = decimal_to_fractional(decimal_odds)
        return cls(
            decimal=decimal_odds,
            moneyline=decimal_to_moneyline(decimal_odds),
            fractional=FractionalOdds(numerator=numerator, denominator=denominator),
        )

    def display(self, notation: OddsNotation | str) -> str:
        """Render this quote in the given notation."""
        from odds_engine.display.formatters import format_odds

        return format_odds(self.decimal, notation)
