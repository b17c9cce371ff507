"""
Domain to DTO mapping helpers.
"""

from typing import Optional

from src.application.dtos.dtos import (
    BetDTO,
    BetHistoryRowDTO,
    BettingPerformanceDTO,
    HeadToHeadStatsDTO,
    LeagueDTO,
    MatchDTO,
    TeamDTO,
    TeamSnapshotDTO,
)
from src.domain.entities.bet import Bet, BettingPerformance
from src.domain.entities.entities import HeadToHeadStats, League, Match, TeamSnapshot
from src.domain.services.bet_ledger_service import BetLedgerService


def map_league_to_dto(league: League) -> LeagueDTO:
    return LeagueDTO(id=league.id, name=league.name, code=league.code)


def map_match_to_dto(match: Match) -> MatchDTO:
    """Convert domain Match object to MatchDTO."""
    return MatchDTO(
        id=match.id,
        match_date=match.match_date,
        league_id=match.league_id,
        status=match.status,
        home_team=TeamDTO(id=match.home_team_id, name=match.home_team_name),
        away_team=TeamDTO(id=match.away_team_id, name=match.away_team_name),
        home_goals=match.home_goals,
        away_goals=match.away_goals,
        winner_id=match.winner_id,
        score=match.score,
    )


def map_snapshot_to_dto(snapshot: TeamSnapshot) -> TeamSnapshotDTO:
    return TeamSnapshotDTO(
        team_id=snapshot.team_id,
        team_name=snapshot.team_name,
        games_played=snapshot.games_played,
        wins=snapshot.wins,
        draws=snapshot.draws,
        losses=snapshot.losses,
        goals_for=snapshot.goals_for,
        goals_against=snapshot.goals_against,
        avg_goals_for=snapshot.avg_goals_for,
        avg_goals_against=snapshot.avg_goals_against,
        goal_difference=snapshot.goal_difference,
        clean_sheets=snapshot.clean_sheets,
        one_conceded=snapshot.one_conceded,
        two_plus_conceded=snapshot.two_plus_conceded,
        clean_sheet_ratio=snapshot.clean_sheet_ratio,
        dirty_sheet_ratio=snapshot.dirty_sheet_ratio,
        two_plus_conceded_ratio=snapshot.two_plus_conceded_ratio,
        x_over_two=snapshot.x_over_two,
        clean_sheet_wins=snapshot.clean_sheet_wins,
        clean_sheet_draws=snapshot.clean_sheet_draws,
        one_conceded_wins=snapshot.one_conceded_wins,
        one_conceded_draws=snapshot.one_conceded_draws,
        one_conceded_losses=snapshot.one_conceded_losses,
        two_plus_conceded_wins=snapshot.two_plus_conceded_wins,
        two_plus_conceded_draws=snapshot.two_plus_conceded_draws,
        two_plus_conceded_losses=snapshot.two_plus_conceded_losses,
        record=snapshot.record,
        goals=snapshot.goals,
    )


def map_head_to_head_to_dto(match_id: int, stats: HeadToHeadStats) -> HeadToHeadStatsDTO:
    return HeadToHeadStatsDTO(
        match_id=match_id,
        home_team_name=stats.home_team_name,
        away_team_name=stats.away_team_name,
        home=map_snapshot_to_dto(stats.home),
        away=map_snapshot_to_dto(stats.away),
    )


def map_bet_to_dto(bet: Bet, ledger: BetLedgerService) -> BetDTO:
    return BetDTO(
        id=bet.id,
        match_id=bet.match_id,
        name=bet.name,
        line=bet.line,
        amount=bet.amount,
        odds=bet.odds,
        result=bet.result,
        profit=ledger.calculate_profit(bet),
        profit_loss=ledger.format_profit_loss(bet),
    )


def map_performance_to_dto(performance: BettingPerformance) -> BettingPerformanceDTO:
    return BettingPerformanceDTO(
        total_bets=performance.total_bets,
        total_wagered=performance.total_wagered,
        total_winnings=performance.total_winnings,
        total_losses=performance.total_losses,
        net_profit=performance.net_profit,
        roi=performance.roi,
        win_rate=performance.win_rate,
        pending_bets=performance.pending_bets,
        settled_bets=performance.settled_bets,
    )


def map_bet_to_history_row(
    bet: Bet,
    match: Optional[Match],
    ledger: BetLedgerService,
) -> BetHistoryRowDTO:
    return BetHistoryRowDTO(
        bet_id=bet.id,
        match_id=bet.match_id,
        match_date=match.match_date.isoformat() if match else "-",
        match=match.title if match else "Unknown match",
        bet=bet.name,
        odds=ledger.format_odds(bet.odds),
        wager=ledger.format_currency(bet.amount),
        result=bet.result,
        pnl=ledger.format_profit_loss(bet),
    )
