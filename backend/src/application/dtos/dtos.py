"""
Data Transfer Objects (DTOs) Module

DTOs are used to transfer data between layers and to/from the API.
They use Pydantic for validation and serialization.
"""

from datetime import date, datetime
from typing import Optional, Union
from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr

from src.domain.entities.bet import BetResult
from src.utils.time_utils import get_current_time


# ============================================================
# Request DTOs
# ============================================================

class BetCreateRequestDTO(BaseModel):
    """
    Request for recording a bet.

    Values are accepted as typed in the bet form and validated by the
    bet validation service.
    """
    match_id: int = Field(..., description="Match the bet is placed on")
    name: str = Field(default="", description="Bet description, e.g. 'Over 2.5 goals'")
    line: Optional[Union[StrictStr, StrictInt, StrictFloat]] = Field(default=None, description="Point line, e.g. 2.5")
    amount: Optional[Union[StrictStr, StrictInt, StrictFloat]] = Field(default=None, description="Stake, e.g. 100.00")
    odds: Optional[Union[StrictStr, StrictInt]] = Field(default=None, description="American odds, e.g. -110")


class BetSettleRequestDTO(BaseModel):
    """Request for settling a bet."""
    result: BetResult = Field(..., description="One of win, lose, push")


class FixtureImportRequestDTO(BaseModel):
    """Request for importing fixtures of a league day."""
    league_id: int = Field(..., description="API-Football league id")
    fixture_date: Optional[date] = Field(default=None, description="Day to import, defaults to today")
    season: Optional[int] = Field(default=None, description="Season year (YYYY)")


# ============================================================
# Response DTOs
# ============================================================

class TeamDTO(BaseModel):
    """Team data transfer object."""
    id: int
    name: str

    class Config:
        from_attributes = True


class LeagueDTO(BaseModel):
    """League data transfer object."""
    id: int
    name: str
    code: str = ""

    class Config:
        from_attributes = True


class MatchDTO(BaseModel):
    """Match data transfer object."""
    id: int
    match_date: date
    league_id: int
    status: str = "NS"
    home_team: TeamDTO
    away_team: TeamDTO
    home_goals: int = 0
    away_goals: int = 0
    winner_id: Optional[int] = None
    score: str

    class Config:
        from_attributes = True


class LeaguesResponseDTO(BaseModel):
    """Response containing all stored leagues."""
    leagues: list[LeagueDTO]
    total_leagues: int


class LeagueMatchesResponseDTO(BaseModel):
    """Response containing the matches of a league."""
    league: LeagueDTO
    matches: list[MatchDTO]


class TeamSnapshotDTO(BaseModel):
    """Form metrics of one side of a head-to-head."""
    team_id: int
    team_name: str
    games_played: int
    wins: int
    draws: int
    losses: int
    goals_for: int
    goals_against: int
    avg_goals_for: float
    avg_goals_against: float
    goal_difference: int
    clean_sheets: int
    one_conceded: int
    two_plus_conceded: int
    clean_sheet_ratio: float
    dirty_sheet_ratio: float
    two_plus_conceded_ratio: float
    x_over_two: float = Field(..., description="Dirty-sheet ratio weighted by the share of 2+ conceded")
    clean_sheet_wins: int = 0
    clean_sheet_draws: int = 0
    one_conceded_wins: int = 0
    one_conceded_draws: int = 0
    one_conceded_losses: int = 0
    two_plus_conceded_wins: int = 0
    two_plus_conceded_draws: int = 0
    two_plus_conceded_losses: int = 0
    record: str
    goals: str

    class Config:
        from_attributes = True


class HeadToHeadStatsDTO(BaseModel):
    """Head-to-head comparison for a match."""
    match_id: int
    home_team_name: str
    away_team_name: str
    home: TeamSnapshotDTO
    away: TeamSnapshotDTO


class BetDTO(BaseModel):
    """Bet data transfer object with its profit/loss."""
    id: int
    match_id: int
    name: str
    line: float
    amount: float
    odds: int
    result: BetResult
    profit: Optional[float] = Field(default=None, description="None while the bet is pending")
    profit_loss: str = Field(..., description="Formatted P&L, '-' while pending")


class BettingPerformanceDTO(BaseModel):
    """Portfolio performance summary."""
    total_bets: int
    total_wagered: float
    total_winnings: float
    total_losses: float
    net_profit: float
    roi: float
    win_rate: float
    pending_bets: int
    settled_bets: int

    class Config:
        from_attributes = True


class BetHistoryRowDTO(BaseModel):
    """One row of the bet history table."""
    bet_id: int
    match_id: int
    match_date: str
    match: str
    bet: str
    odds: str
    wager: str
    result: BetResult
    pnl: str


class BettingDashboardDTO(BaseModel):
    """Performance overview plus bet history."""
    performance: BettingPerformanceDTO
    history: list[BetHistoryRowDTO]
    generated_at: datetime = Field(default_factory=get_current_time)


class FixtureImportResponseDTO(BaseModel):
    """Result of a fixture import."""
    league_id: int
    fixture_date: date
    imported: int


class PredictionAdviceDTO(BaseModel):
    """Provider advice for a fixture."""
    match_id: int
    advice: str


class HealthResponseDTO(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=get_current_time)


class ErrorResponseDTO(BaseModel):
    """Error response."""
    error: str
    message: str
    details: Optional[dict] = None
