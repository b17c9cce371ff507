"""
Domain Value Objects Module

Value objects are immutable objects that are defined by their attributes rather than identity.
They encapsulate validation logic and provide type safety.
"""

from dataclasses import dataclass

from src.domain.exceptions import InvalidOddsError


@dataclass(frozen=True)
class AmericanOdds:
    """
    Represents American (moneyline) odds.

    Positive values quote the profit on a 100 stake (underdog),
    negative values quote the stake needed to profit 100 (favorite).
    Zero means the bet was recorded without odds.
    """
    value: int

    @property
    def is_set(self) -> bool:
        return self.value != 0

    def payout(self, stake: float) -> float:
        """
        Total return of a winning bet, stake included.

        Examples:
            +150 on 100 returns 250.0
            -150 on 100 returns 166.67

        Raises:
            InvalidOddsError: If the odds are unset.
        """
        if self.value > 0:
            return stake + stake * self.value / 100
        if self.value < 0:
            return stake + stake * 100 / abs(self.value)
        raise InvalidOddsError("Cannot compute a payout without odds")

    def to_decimal(self) -> float:
        """Convert to decimal odds (total return per unit staked)."""
        return self.payout(1.0)

    def __str__(self) -> str:
        if not self.is_set:
            return "-"
        return f"{self.value:+d}"
