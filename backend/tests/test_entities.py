"""
Unit Tests for Domain Entities

Tests the core domain entities and their validation logic.
"""

import pytest
from datetime import date

from src.domain.entities.entities import (
    Team,
    League,
    Match,
    TeamSnapshot,
    HeadToHeadStats,
    STATUS_FULL_TIME,
)
from src.domain.entities.bet import Bet, BetResult, BettingPerformance


class TestTeam:
    """Tests for Team entity."""

    def test_create_team_valid(self):
        """Test creating a valid team."""
        team = Team(id=42, name="Arsenal")
        assert team.id == 42
        assert team.name == "Arsenal"

    def test_team_is_frozen(self):
        """Test that Team is immutable."""
        team = Team(id=42, name="Arsenal")
        with pytest.raises(AttributeError):
            team.name = "New Name"

    def test_team_empty_name_raises_error(self):
        """Test that empty name raises ValueError."""
        with pytest.raises(ValueError, match="Team name cannot be empty"):
            Team(id=42, name="")


class TestLeague:
    """Tests for League entity."""

    def test_create_league_valid(self):
        league = League(id=39, name="Premier League", code="GB")
        assert league.id == 39
        assert league.name == "Premier League"
        assert league.code == "GB"

    def test_league_requires_name(self):
        with pytest.raises(ValueError, match="League name cannot be empty"):
            League(id=39, name="")


class TestMatch:
    """Tests for Match entity."""

    @pytest.fixture
    def sample_match(self):
        """Create a sample unplayed match for testing."""
        return Match(
            id=1001,
            match_date=date(2025, 1, 15),
            league_id=39,
            home_team_id=42,
            away_team_id=49,
            home_team_name="Arsenal",
            away_team_name="Chelsea",
        )

    def test_match_not_started(self, sample_match):
        """Test unplayed match properties."""
        assert sample_match.is_finished is False
        assert sample_match.winner_id is None
        assert sample_match.score == "Not started"

    def test_match_full_time(self, sample_match):
        """Test played match properties."""
        from dataclasses import replace
        played = replace(sample_match, status=STATUS_FULL_TIME, home_goals=2, away_goals=1, winner_id=42)

        assert played.is_finished is True
        assert played.score == "2 - 1"

    def test_other_statuses_pass_through(self, sample_match):
        from dataclasses import replace
        postponed = replace(sample_match, status="PST")

        assert postponed.status == "PST"
        assert postponed.is_finished is False

    def test_match_title_and_teams(self, sample_match):
        assert sample_match.title == "Arsenal vs Chelsea"
        assert sample_match.home_team == Team(id=42, name="Arsenal")
        assert sample_match.away_team == Team(id=49, name="Chelsea")

    def test_involves(self, sample_match):
        assert sample_match.involves(42)
        assert sample_match.involves(49)
        assert not sample_match.involves(47)


class TestTeamSnapshot:
    """Tests for TeamSnapshot entity."""

    def test_snapshot_calculations(self):
        """Test calculated properties."""
        snapshot = TeamSnapshot(
            team_id=42,
            team_name="Arsenal",
            games_played=10,
            wins=5,
            draws=3,
            goals_for=15,
            goals_against=10,
            clean_sheets=4,
            one_conceded=4,
            two_plus_conceded=2,
        )

        assert snapshot.losses == 2
        assert snapshot.avg_goals_for == 1.5
        assert snapshot.avg_goals_against == 1.0
        assert snapshot.goal_difference == 5
        assert snapshot.clean_sheet_ratio == 0.4
        assert snapshot.dirty_sheet_ratio == pytest.approx(0.6)
        assert snapshot.two_plus_conceded_ratio == 0.2
        assert snapshot.record == "5-3-2"
        assert snapshot.goals == "15:10"
        assert snapshot.x_over_two == pytest.approx(0.2)

    def test_snapshot_zero_games(self):
        """Test calculations with zero games are zero, not errors."""
        snapshot = TeamSnapshot(team_id=42, team_name="Arsenal")

        assert snapshot.losses == 0
        assert snapshot.avg_goals_for == 0.0
        assert snapshot.avg_goals_against == 0.0
        assert snapshot.clean_sheet_ratio == 0.0
        assert snapshot.dirty_sheet_ratio == 0.0
        assert snapshot.two_plus_conceded_ratio == 0.0
        assert snapshot.record == "0-0-0"
        assert snapshot.x_over_two == 0.0

    def test_x_over_two_without_dirty_sheets(self):
        snapshot = TeamSnapshot(team_id=42, team_name="Arsenal", games_played=3, wins=3, clean_sheets=3)

        assert snapshot.dirty_sheet_ratio == 0.0
        assert snapshot.x_over_two == 0.0

    def test_head_to_head_names(self):
        stats = HeadToHeadStats(
            home=TeamSnapshot(team_id=42, team_name="Arsenal"),
            away=TeamSnapshot(team_id=49, team_name="Chelsea"),
        )
        assert stats.home_team_name == "Arsenal"
        assert stats.away_team_name == "Chelsea"


class TestBet:
    """Tests for Bet entity."""

    def test_new_bet_defaults(self):
        bet = Bet(id=None, match_id=1001, name="Over 2.5 goals", amount=100.0)

        assert bet.result == BetResult.PENDING
        assert bet.line == 0.0
        assert bet.odds == 0
        assert bet.has_odds is False

    @pytest.mark.parametrize("amount", [0, -10.0])
    def test_amount_must_be_positive(self, amount):
        with pytest.raises(ValueError, match="Bet amount must be positive"):
            Bet(id=None, match_id=1001, name="Over 2.5 goals", amount=amount)

    def test_result_is_settled(self):
        assert BetResult.PENDING.is_settled is False
        assert BetResult.WIN.is_settled is True
        assert BetResult.LOSE.is_settled is True
        assert BetResult.PUSH.is_settled is True

    def test_result_values(self):
        assert BetResult("push") is BetResult.PUSH
        assert BetResult.LOSE.value == "lose"


class TestBettingPerformance:

    def test_settled_bets(self):
        performance = BettingPerformance(total_bets=7, pending_bets=2)
        assert performance.settled_bets == 5
