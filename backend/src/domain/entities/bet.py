"""
Bet Entity Module

Contains the entities for recorded wagers and the portfolio summary derived from them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class BetResult(str, Enum):
    """Possible states of a recorded bet."""
    PENDING = "pending"
    WIN = "win"
    LOSE = "lose"
    PUSH = "push"

    @property
    def is_settled(self) -> bool:
        return self is not BetResult.PENDING


SETTLED_RESULTS = (BetResult.WIN, BetResult.LOSE, BetResult.PUSH)


@dataclass(frozen=True)
class Bet:
    """
    Represents a wager recorded by the user on a match.

    Attributes:
        id: Unique identifier (None until persisted)
        match_id: ID of the match the bet was placed on
        name: Free-text description (e.g., "Over 2.5 goals")
        amount: Stake, always positive
        line: Point line of the bet (0 when not applicable)
        odds: American odds (0 when not specified)
        result: Current state of the bet
    """
    id: Optional[int]
    match_id: int
    name: str
    amount: float
    line: float = 0.0
    odds: int = 0
    result: BetResult = BetResult.PENDING

    def __post_init__(self):
        if self.amount <= 0:
            raise ValueError(f"Bet amount must be positive, got {self.amount}")

    @property
    def has_odds(self) -> bool:
        return self.odds != 0


@dataclass(frozen=True)
class BettingPerformance:
    """
    Portfolio-level summary of all recorded bets.

    Attributes:
        total_bets: Number of bets
        total_wagered: Sum of all stakes regardless of result
        total_winnings: Profit of winning bets (stake excluded)
        total_losses: Stakes of losing bets
        net_profit: total_winnings - total_losses
        roi: Net profit as a percentage of total wagered
        win_rate: Wins as a percentage of settled bets
        pending_bets: Bets still awaiting a result
    """
    total_bets: int = 0
    total_wagered: float = 0.0
    total_winnings: float = 0.0
    total_losses: float = 0.0
    net_profit: float = 0.0
    roi: float = 0.0
    win_rate: float = 0.0
    pending_bets: int = 0

    @property
    def settled_bets(self) -> int:
        return self.total_bets - self.pending_bets
