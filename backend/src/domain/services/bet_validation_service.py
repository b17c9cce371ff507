"""
Bet Validation Service

Fail-fast parsing of raw bet form input before a Bet is constructed.
"""

import math
from typing import Optional

from src.domain.entities.bet import Bet, BetResult
from src.domain.exceptions import BetValidationError


class BetValidationService:
    """
    Turns user-entered strings into a pending Bet.

    Line and odds are optional and default to 0 when left blank.
    """

    def build_bet(
        self,
        match_id: int,
        name: Optional[str],
        amount: Optional[str],
        line: Optional[str] = None,
        odds: Optional[str] = None,
    ) -> Bet:
        """
        Validate form input and build a new pending bet.

        Raises:
            BetValidationError: Naming the first invalid field.
        """
        name = (name or "").strip()
        if not name:
            raise BetValidationError("bet name is required")

        amount_value = self._parse_amount(amount)
        line_value = self._parse_line(line)
        odds_value = self._parse_odds(odds)

        return Bet(
            id=None,
            match_id=match_id,
            name=name,
            amount=amount_value,
            line=line_value,
            odds=odds_value,
            result=BetResult.PENDING,
        )

    @staticmethod
    def _parse_amount(raw: Optional[str]) -> float:
        raw = (raw or "").strip()
        if not raw:
            raise BetValidationError("bet amount is required")
        try:
            value = float(raw)
        except ValueError:
            raise BetValidationError(f"invalid amount value: {raw!r}")
        if not math.isfinite(value) or value <= 0:
            raise BetValidationError(f"bet amount must be a positive number, got {raw!r}")
        return value

    @staticmethod
    def _parse_line(raw: Optional[str]) -> float:
        raw = (raw or "").strip()
        if not raw:
            return 0.0
        try:
            value = float(raw)
        except ValueError:
            raise BetValidationError(f"invalid line value: {raw!r}")
        if not math.isfinite(value):
            raise BetValidationError(f"invalid line value: {raw!r}")
        return value

    @staticmethod
    def _parse_odds(raw: Optional[str]) -> int:
        raw = (raw or "").strip()
        if not raw:
            return 0
        try:
            return int(raw)
        except ValueError:
            raise BetValidationError(f"invalid odds value: {raw!r}")
