"""
Domain Repository Interfaces Module

These are abstract interfaces that define how the domain layer accesses data.
Concrete implementations are provided in the infrastructure layer.
This follows the Dependency Inversion Principle (DIP).
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.entities import League, Match
from src.domain.entities.bet import Bet, BetResult


class LeagueRepository(ABC):
    """Abstract repository for league operations."""

    @abstractmethod
    def get_all_leagues(self) -> list[League]:
        """Get all available leagues."""
        pass

    @abstractmethod
    def get_league_by_id(self, league_id: int) -> Optional[League]:
        """Get a specific league by ID."""
        pass

    @abstractmethod
    def save_league(self, league: League) -> League:
        """Insert or update a league."""
        pass


class MatchRepository(ABC):
    """Abstract repository for match operations."""

    @abstractmethod
    def get_match_by_id(self, match_id: int) -> Optional[Match]:
        """Get a specific match by ID."""
        pass

    @abstractmethod
    def get_matches_by_league(self, league_id: int) -> list[Match]:
        """Get all matches of a league, most recent first."""
        pass

    @abstractmethod
    def get_finished_matches_for_team(self, team_id: int) -> list[Match]:
        """Get all full-time matches where the team played home or away."""
        pass

    @abstractmethod
    def save_matches(self, matches: list[Match]) -> int:
        """Insert or update matches. Returns the number of rows written."""
        pass


class BetRepository(ABC):
    """Abstract repository for bet operations."""

    @abstractmethod
    def get_bet_by_id(self, bet_id: int) -> Optional[Bet]:
        """Get a specific bet by ID."""
        pass

    @abstractmethod
    def get_all_bets(self) -> list[Bet]:
        """Get every recorded bet."""
        pass

    @abstractmethod
    def get_bets_by_match(self, match_id: int) -> list[Bet]:
        """Get bets placed on a match."""
        pass

    @abstractmethod
    def add_bet(self, bet: Bet) -> Bet:
        """Persist a new bet and return it with its assigned id."""
        pass

    @abstractmethod
    def update_bet_result(self, bet_id: int, result: BetResult) -> Optional[Bet]:
        """Set the result of a bet. Returns None if the bet does not exist."""
        pass

    @abstractmethod
    def delete_bet(self, bet_id: int) -> bool:
        """Delete a bet. Returns False if the bet does not exist."""
        pass
