"""Tests for notation enums and odds quote models."""

import math

import pytest
from pydantic import ValidationError

from odds_engine.conversion.models import (
    NOTATION_EXAMPLES,
    NOTATION_NAMES,
    FractionalOdds,
    OddsNotation,
    OddsQuote,
)
from odds_engine.conversion.parser import parse_odds


class TestOddsNotation:
    """Tests for OddsNotation coercion."""

    def test_values(self):
        assert [n.value for n in OddsNotation] == ["moneyline", "decimal", "fractional"]

    def test_coerce_member(self):
        assert OddsNotation.coerce(OddsNotation.DECIMAL) is OddsNotation.DECIMAL

    def test_coerce_tag(self):
        assert OddsNotation.coerce("fractional") is OddsNotation.FRACTIONAL
        assert OddsNotation.coerce("  MONEYLINE ") is OddsNotation.MONEYLINE

    @pytest.mark.parametrize("value", ["american", "", None, 1])
    def test_coerce_rejects_unknown(self, value):
        with pytest.raises(ValueError, match="Unknown odds notation"):
            OddsNotation.coerce(value)

    def test_every_notation_has_name_and_example(self):
        for notation in OddsNotation:
            assert notation in NOTATION_NAMES
            assert notation in NOTATION_EXAMPLES

    def test_examples_describe_the_same_price(self):
        """(-200), (1.50) and (1/2) all parse to decimal 1.5."""
        for example in NOTATION_EXAMPLES.values():
            assert parse_odds(example.strip("()")) == pytest.approx(1.5)


class TestFractionalOdds:
    """Tests for the FractionalOdds pair."""

    def test_str(self):
        assert str(FractionalOdds(numerator=3, denominator=2)) == "3/2"

    def test_to_decimal(self):
        assert FractionalOdds(numerator=23, denominator=25).to_decimal() == pytest.approx(1.92)

    def test_zero_denominator_rejected(self):
        with pytest.raises(ValidationError):
            FractionalOdds(numerator=1, denominator=0)

    def test_negative_numerator_rejected(self):
        with pytest.raises(ValidationError):
            FractionalOdds(numerator=-1, denominator=2)

    def test_frozen(self):
        fraction = FractionalOdds(numerator=1, denominator=2)
        with pytest.raises(ValidationError):
            fraction.numerator = 5


class TestOddsQuote:
    """Tests for OddsQuote projections."""

    def test_from_decimal(self):
        quote = OddsQuote.from_decimal(1.5)

        assert quote.decimal == 1.5
        assert quote.moneyline == -200
        assert quote.fractional == FractionalOdds(numerator=1, denominator=2)

    def test_from_decimal_no_edge(self):
        quote = OddsQuote.from_decimal(1.0)

        assert quote.moneyline == 0
        assert str(quote.fractional) == "0/1"

    def test_display(self):
        quote = OddsQuote.from_decimal(2.5)

        assert quote.display("moneyline") == "+150"
        assert quote.display(OddsNotation.DECIMAL) == "2.50"
        assert quote.display("fractional") == "3/2"

    def test_decimal_below_one_rejected(self):
        with pytest.raises(ValidationError):
            OddsQuote(decimal=0.5, moneyline=0, fractional=FractionalOdds(numerator=0, denominator=1))

    def test_from_decimal_below_one_rejected(self):
        with pytest.raises(ValueError):
            OddsQuote.from_decimal(0.5)

    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_non_finite_decimal_rejected(self, value):
        with pytest.raises(ValidationError):
            OddsQuote(decimal=value, moneyline=0, fractional=FractionalOdds(numerator=0, denominator=1))

    def test_from_decimal_too_large_rejected(self):
        with pytest.raises(ValueError):
            OddsQuote.from_decimal(1.7e308)
