"""
Shared fixtures for the backend tests.
"""

from datetime import date

import pytest

from src.domain.entities.entities import League, Match, STATUS_FULL_TIME, STATUS_NOT_STARTED
from src.infrastructure.database.database_service import DatabaseService
from src.infrastructure.repositories.sql_repositories import (
    SqlBetRepository,
    SqlLeagueRepository,
    SqlMatchRepository,
)


ARSENAL = 42
CHELSEA = 49
SPURS = 47
PREMIER_LEAGUE = 39


def make_match(
    match_id,
    home_team_id,
    away_team_id,
    home_goals=0,
    away_goals=0,
    status=STATUS_FULL_TIME,
    match_date=date(2025, 1, 1),
    names=None,
):
    """Build a Match, deriving the winner from the score for finished matches."""
    names = names or {ARSENAL: "Arsenal", CHELSEA: "Chelsea", SPURS: "Tottenham"}
    winner_id = None
    if status == STATUS_FULL_TIME:
        if home_goals > away_goals:
            winner_id = home_team_id
        elif away_goals > home_goals:
            winner_id = away_team_id
    return Match(
        id=match_id,
        match_date=match_date,
        league_id=PREMIER_LEAGUE,
        status=status,
        home_team_id=home_team_id,
        away_team_id=away_team_id,
        home_team_name=names.get(home_team_id, f"Team {home_team_id}"),
        away_team_name=names.get(away_team_id, f"Team {away_team_id}"),
        home_goals=home_goals,
        away_goals=away_goals,
        winner_id=winner_id,
    )


@pytest.fixture
def db_service():
    """In-memory database with all tables created."""
    service = DatabaseService("sqlite://")
    service.create_tables()
    yield service
    service.dispose()


@pytest.fixture
def league_repository(db_service):
    return SqlLeagueRepository(db_service)


@pytest.fixture
def match_repository(db_service):
    return SqlMatchRepository(db_service)


@pytest.fixture
def bet_repository(db_service):
    return SqlBetRepository(db_service)


@pytest.fixture
def seeded_matches(league_repository, match_repository):
    """A small Premier League history plus one upcoming fixture."""
    league_repository.save_league(League(id=PREMIER_LEAGUE, name="Premier League", code="GB"))
    matches = [
        make_match(1, ARSENAL, CHELSEA, 3, 1, match_date=date(2024, 9, 1)),
        make_match(2, CHELSEA, SPURS, 2, 2, match_date=date(2024, 9, 8)),
        make_match(3, SPURS, ARSENAL, 0, 1, match_date=date(2024, 9, 15)),
        make_match(4, CHELSEA, ARSENAL, 0, 0, match_date=date(2024, 9, 22)),
        make_match(5, ARSENAL, CHELSEA, status=STATUS_NOT_STARTED, match_date=date(2024, 10, 1)),
    ]
    match_repository.save_matches(matches)
    return matches
