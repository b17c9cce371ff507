"""
API Dependencies Module

Provides dependency injection for FastAPI routes.
Contains factory functions for creating use case dependencies.
"""

from functools import lru_cache

from fastapi import Depends

from src.infrastructure.database.database_service import DatabaseService
from src.infrastructure.data_sources.api_football import APIFootballSource
from src.infrastructure.repositories.sql_repositories import (
    SqlBetRepository,
    SqlLeagueRepository,
    SqlMatchRepository,
)
from src.domain.repositories.repositories import BetRepository, LeagueRepository, MatchRepository
from src.domain.services.head_to_head_service import HeadToHeadService
from src.domain.services.bet_ledger_service import BetLedgerService
from src.domain.services.bet_validation_service import BetValidationService


@lru_cache()
def get_database_service() -> DatabaseService:
    """Get database service (cached)."""
    return DatabaseService()


@lru_cache()
def get_api_football() -> APIFootballSource:
    """Get API-Football data source (cached)."""
    return APIFootballSource()


def get_league_repository(
    db_service: DatabaseService = Depends(get_database_service),
) -> LeagueRepository:
    return SqlLeagueRepository(db_service)


def get_match_repository(
    db_service: DatabaseService = Depends(get_database_service),
) -> MatchRepository:
    return SqlMatchRepository(db_service)


def get_bet_repository(
    db_service: DatabaseService = Depends(get_database_service),
) -> BetRepository:
    return SqlBetRepository(db_service)


@lru_cache()
def get_head_to_head_service() -> HeadToHeadService:
    """Get head-to-head service (cached)."""
    return HeadToHeadService()


@lru_cache()
def get_bet_ledger_service() -> BetLedgerService:
    """Get bet ledger service (cached)."""
    return BetLedgerService()


@lru_cache()
def get_bet_validation_service() -> BetValidationService:
    """Get bet validation service (cached)."""
    return BetValidationService()
