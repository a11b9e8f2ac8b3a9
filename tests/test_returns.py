"""Tests for stake and payout calculations."""

import math

import pytest

from odds_engine.betting.returns import (
    BettingReturn,
    calculate_betting_return,
    calculate_betting_return_from_odds,
    validate_consistent_betting,
)


class TestCalculateBettingReturn:
    """Tests for calculate_betting_return."""

    def test_basic(self):
        """10 at 2.5 returns 25 total, 15 profit."""
        result = calculate_betting_return(10, 2.5)

        assert result == BettingReturn(stake=10, odds=2.5, total_return=25.0, profit=15.0)

    def test_same_odds_scale_with_stake(self):
        small = calculate_betting_return(10, 2.5)
        large = calculate_betting_return(20, 2.5)

        assert large.profit == pytest.approx(2 * small.profit)

    def test_no_edge_odds(self):
        result = calculate_betting_return(10, 1.0)

        assert result.total_return == 10
        assert result.profit == 0

    def test_zero_stake(self):
        assert calculate_betting_return(0, 3.0).profit == 0

    def test_negative_stake_rejected(self):
        with pytest.raises(ValueError, match="Stake"):
            calculate_betting_return(-10, 2.0)

    @pytest.mark.parametrize("stake", [math.nan, math.inf, -math.inf])
    def test_non_finite_stake_rejected(self, stake):
        with pytest.raises(ValueError, match="Stake"):
            calculate_betting_return(stake, 2.0)

    def test_non_finite_odds_rejected(self):
        with pytest.raises(ValueError):
            calculate_betting_return(10, math.nan)

    def test_odds_below_one_rejected(self):
        with pytest.raises(ValueError):
            calculate_betting_return(10, 0.9)


class TestReturnsFromOdds:
    """Any notation yields the same payout for the same price."""

    @pytest.mark.parametrize("raw", ["+150", "3/2", "2.50", "150", 150, 2.5])
    def test_same_price_any_notation(self, raw):
        assert calculate_betting_return_from_odds(10, raw).profit == pytest.approx(15.0)

    def test_favorite(self):
        assert calculate_betting_return_from_odds(10, "-200").total_return == pytest.approx(15.0)

    def test_unreadable_odds_return_stake(self):
        result = calculate_betting_return_from_odds(10, "n/a")

        assert result.odds == 1.0
        assert result.profit == 0


class TestValidateConsistentBetting:
    """Tests for validate_consistent_betting."""

    def test_consistent(self):
        is_valid, calculation, message = validate_consistent_betting(10, 2.5)

        assert is_valid
        assert calculation.profit == 15.0
        assert message.startswith("Consistent")
        assert "15.00" in message
