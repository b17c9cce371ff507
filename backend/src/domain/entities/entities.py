"""
Domain Entities Module

This module contains the core domain entities for the betting tracker.
These entities represent the core business concepts and are independent of any infrastructure.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


# Fixture status short codes used by the fixture provider
STATUS_NOT_STARTED = "NS"
STATUS_FULL_TIME = "FT"


@dataclass(frozen=True)
class Team:
    """
    Represents a football team.

    Attributes:
        id: Unique identifier for the team
        name: Display name of the team
    """
    id: int
    name: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("Team name cannot be empty")


@dataclass(frozen=True)
class League:
    """
    Represents a football league or competition.

    Attributes:
        id: Unique identifier for the league
        name: Full name of the league (e.g., "Premier League")
        code: Short code (e.g., "EPL")
    """
    id: int
    name: str
    code: str = ""

    def __post_init__(self):
        if not self.name:
            raise ValueError("League name cannot be empty")


@dataclass(frozen=True)
class Match:
    """
    Represents a fixture between two teams.

    Matches are created by the fixture import job and only read afterwards.

    Attributes:
        id: Unique identifier for the match
        match_date: Day the fixture is played
        league_id: League the fixture belongs to
        status: Short status code (NS=Not Started, FT=Full Time, others passed through)
        home_team_id / away_team_id: Team identifiers
        home_team_name / away_team_name: Team display names
        home_goals / away_goals: Goals scored (0 for unplayed fixtures)
        winner_id: Id of the winning team, None on draws or unplayed matches
    """
    id: int
    match_date: date
    league_id: int
    home_team_id: int
    away_team_id: int
    home_team_name: str
    away_team_name: str
    status: str = STATUS_NOT_STARTED
    home_goals: int = 0
    away_goals: int = 0
    winner_id: Optional[int] = None

    @property
    def is_finished(self) -> bool:
        """Check if the match reached full time."""
        return self.status == STATUS_FULL_TIME

    @property
    def home_team(self) -> Team:
        return Team(id=self.home_team_id, name=self.home_team_name)

    @property
    def away_team(self) -> Team:
        return Team(id=self.away_team_id, name=self.away_team_name)

    @property
    def title(self) -> str:
        """Fixture label, e.g. "Arsenal vs Chelsea"."""
        return f"{self.home_team_name} vs {self.away_team_name}"

    @property
    def score(self) -> str:
        """Scoreline for played matches, kick-off marker otherwise."""
        if self.status == STATUS_NOT_STARTED:
            return "Not started"
        return f"{self.home_goals} - {self.away_goals}"

    def involves(self, team_id: int) -> bool:
        return team_id in (self.home_team_id, self.away_team_id)


@dataclass(frozen=True)
class TeamSnapshot:
    """
    Form metrics for one team across its finished matches.

    Attributes:
        team_id: ID of the team
        team_name: Display name of the team
        games_played: Finished matches involving the team
        wins: Matches the team won
        draws: Matches without a winner
        goals_for: Goals scored by the team
        goals_against: Goals conceded by the team
        clean_sheets: Matches with zero goals conceded
        one_conceded: Matches with exactly one goal conceded
        two_plus_conceded: Matches with two or more goals conceded
        clean_sheet_wins, clean_sheet_draws: Outcomes of the clean sheets
        one_conceded_wins, one_conceded_draws, one_conceded_losses:
            Outcomes of the one-conceded matches
        two_plus_conceded_wins, two_plus_conceded_draws, two_plus_conceded_losses:
            Outcomes of the two-plus-conceded matches
    """
    team_id: int
    team_name: str
    games_played: int = 0
    wins: int = 0
    draws: int = 0
    goals_for: int = 0
    goals_against: int = 0
    clean_sheets: int = 0
    one_conceded: int = 0
    two_plus_conceded: int = 0
    clean_sheet_wins: int = 0
    clean_sheet_draws: int = 0
    one_conceded_wins: int = 0
    one_conceded_draws: int = 0
    one_conceded_losses: int = 0
    two_plus_conceded_wins: int = 0
    two_plus_conceded_draws: int = 0
    two_plus_conceded_losses: int = 0

    @property
    def losses(self) -> int:
        """Losses are whatever is neither a win nor a draw."""
        return self.games_played - self.wins - self.draws

    @property
    def avg_goals_for(self) -> float:
        """Calculate average goals scored per game."""
        if self.games_played == 0:
            return 0.0
        return self.goals_for / self.games_played

    @property
    def avg_goals_against(self) -> float:
        """Calculate average goals conceded per game."""
        if self.games_played == 0:
            return 0.0
        return self.goals_against / self.games_played

    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against

    @property
    def clean_sheet_ratio(self) -> float:
        if self.games_played == 0:
            return 0.0
        return self.clean_sheets / self.games_played

    @property
    def dirty_sheet_ratio(self) -> float:
        """Share of games in which the team conceded at least once."""
        if self.games_played == 0:
            return 0.0
        return 1 - self.clean_sheet_ratio

    @property
    def two_plus_conceded_ratio(self) -> float:
        if self.games_played == 0:
            return 0.0
        return self.two_plus_conceded / self.games_played

    @property
    def x_over_two(self) -> float:
        """
        Share of games with two or more goals conceded, taken as the
        dirty-sheet ratio weighted by how many dirty sheets were 2+.
        """
        dirty_sheets = self.one_conceded + self.two_plus_conceded
        if dirty_sheets == 0:
            return 0.0
        return self.dirty_sheet_ratio * self.two_plus_conceded / dirty_sheets

    @property
    def record(self) -> str:
        """Win-draw-loss record, e.g. "5-3-2"."""
        return f"{self.wins}-{self.draws}-{self.losses}"

    @property
    def goals(self) -> str:
        """Goals for and against, e.g. "15:10"."""
        return f"{self.goals_for}:{self.goals_against}"


@dataclass(frozen=True)
class HeadToHeadStats:
    """
    Comparative form of the two teams of a fixture.

    Derived on demand from finished matches; never persisted.
    """
    home: TeamSnapshot
    away: TeamSnapshot

    @property
    def home_team_name(self) -> str:
        return self.home.team_name

    @property
    def away_team_name(self) -> str:
        return self.away.team_name
