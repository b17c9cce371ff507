"""
Unit Tests for Bet Validation Service

Tests form input parsing for new bets.
"""

import pytest

from src.domain.entities.bet import BetResult
from src.domain.exceptions import BetValidationError
from src.domain.services.bet_validation_service import BetValidationService


@pytest.fixture
def validator():
    return BetValidationService()


class TestBuildBet:
    """Tests for BetValidationService.build_bet."""

    def test_full_input(self, validator):
        bet = validator.build_bet(1001, "Over 2.5 goals", "25.50", line="2.5", odds="-110")

        assert bet.id is None
        assert bet.match_id == 1001
        assert bet.name == "Over 2.5 goals"
        assert bet.amount == 25.5
        assert bet.line == 2.5
        assert bet.odds == -110
        assert bet.result == BetResult.PENDING

    def test_optional_fields_default_to_zero(self, validator):
        bet = validator.build_bet(1001, "Arsenal ML", "10", line="", odds=None)

        assert bet.line == 0.0
        assert bet.odds == 0

    def test_name_is_trimmed(self, validator):
        bet = validator.build_bet(1001, "  BTTS  ", "10")
        assert bet.name == "BTTS"

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_name_required(self, validator, name):
        with pytest.raises(BetValidationError, match="name is required"):
            validator.build_bet(1001, name, "10")

    @pytest.mark.parametrize("amount", [None, "", " "])
    def test_amount_required(self, validator, amount):
        with pytest.raises(BetValidationError, match="amount is required"):
            validator.build_bet(1001, "BTTS", amount)

    def test_amount_not_numeric(self, validator):
        with pytest.raises(BetValidationError, match="invalid amount value"):
            validator.build_bet(1001, "BTTS", "ten")

    @pytest.mark.parametrize("amount", ["0", "-5", "nan", "inf"])
    def test_amount_must_be_positive(self, validator, amount):
        with pytest.raises(BetValidationError, match="must be a positive number"):
            validator.build_bet(1001, "BTTS", amount)

    def test_invalid_line(self, validator):
        with pytest.raises(BetValidationError, match="invalid line value"):
            validator.build_bet(1001, "BTTS", "10", line="two")

    @pytest.mark.parametrize("odds", ["abc", "-110.5"])
    def test_invalid_odds(self, validator, odds):
        with pytest.raises(BetValidationError, match="invalid odds value"):
            validator.build_bet(1001, "BTTS", "10", odds=odds)

    def test_fails_on_first_invalid_field(self, validator):
        with pytest.raises(BetValidationError, match="amount"):
            validator.build_bet(1001, "BTTS", "x", line="y", odds="z")
