"""
Application Use Cases Module

Use cases represent application-specific business rules and orchestrate
the flow of data between the domain layer and the infrastructure layer.
"""

from datetime import date
from typing import Optional
import logging

from src.domain.entities.entities import League
from src.domain.exceptions import MatchNotFoundError
from src.domain.repositories.repositories import LeagueRepository, MatchRepository
from src.domain.services.head_to_head_service import HeadToHeadService
from src.infrastructure.data_sources.api_football import APIFootballSource, current_season
from src.application.dtos.dtos import (
    FixtureImportResponseDTO,
    HeadToHeadStatsDTO,
    LeagueMatchesResponseDTO,
    LeaguesResponseDTO,
    MatchDTO,
    PredictionAdviceDTO,
)
from src.application.dtos.mappers import (
    map_head_to_head_to_dto,
    map_league_to_dto,
    map_match_to_dto,
)
from src.utils.time_utils import get_current_time


logger = logging.getLogger(__name__)


class GetLeaguesUseCase:
    """Use case for getting stored leagues."""

    def __init__(self, league_repository: LeagueRepository):
        self.league_repository = league_repository

    async def execute(self) -> LeaguesResponseDTO:
        leagues = self.league_repository.get_all_leagues()
        return LeaguesResponseDTO(
            leagues=[map_league_to_dto(league) for league in leagues],
            total_leagues=len(leagues),
        )


class GetLeagueMatchesUseCase:
    """Use case for listing the matches of a league."""

    def __init__(self, league_repository: LeagueRepository, match_repository: MatchRepository):
        self.league_repository = league_repository
        self.match_repository = match_repository

    async def execute(self, league_id: int) -> Optional[LeagueMatchesResponseDTO]:
        """Returns None when the league is unknown."""
        league = self.league_repository.get_league_by_id(league_id)
        if league is None:
            return None

        matches = self.match_repository.get_matches_by_league(league_id)
        return LeagueMatchesResponseDTO(
            league=map_league_to_dto(league),
            matches=[map_match_to_dto(m) for m in matches],
        )


class GetMatchUseCase:
    """Use case for fetching a single match."""

    def __init__(self, match_repository: MatchRepository):
        self.match_repository = match_repository

    async def execute(self, match_id: int) -> MatchDTO:
        match = self.match_repository.get_match_by_id(match_id)
        if match is None:
            raise MatchNotFoundError(f"Match not found: {match_id}")
        return map_match_to_dto(match)


class GetHeadToHeadUseCase:
    """
    Use case for comparing the form of the two teams of a match.

    Re-run on every request; nothing is cached between selections.
    """

    def __init__(
        self,
        match_repository: MatchRepository,
        head_to_head_service: HeadToHeadService,
    ):
        self.match_repository = match_repository
        self.head_to_head_service = head_to_head_service

    async def execute(self, match_id: int) -> HeadToHeadStatsDTO:
        match = self.match_repository.get_match_by_id(match_id)
        if match is None:
            raise MatchNotFoundError(f"Match not found: {match_id}")

        # One query per team; a fixture between the two teams appears in both
        home_history = self.match_repository.get_finished_matches_for_team(match.home_team_id)
        away_history = self.match_repository.get_finished_matches_for_team(match.away_team_id)

        stats = self.head_to_head_service.compute_head_to_head(
            home_team_id=match.home_team_id,
            away_team_id=match.away_team_id,
            home_team_name=match.home_team_name,
            away_team_name=match.away_team_name,
            matches=self._merge(home_history, away_history),
        )
        return map_head_to_head_to_dto(match_id, stats)

    @staticmethod
    def _merge(*histories):
        seen = {}
        for history in histories:
            for match in history:
                seen.setdefault(match.id, match)
        return list(seen.values())


class ImportFixturesUseCase:
    """
    Use case for importing a league's fixtures of one day into the store.
    """

    def __init__(
        self,
        api_football: APIFootballSource,
        league_repository: LeagueRepository,
        match_repository: MatchRepository,
    ):
        self.api_football = api_football
        self.league_repository = league_repository
        self.match_repository = match_repository

    async def execute(
        self,
        league_id: int,
        fixture_date: Optional[date] = None,
        season: Optional[int] = None,
    ) -> FixtureImportResponseDTO:
        fixture_date = fixture_date or get_current_time().date()
        season = season or current_season(fixture_date)

        if self.league_repository.get_league_by_id(league_id) is None:
            league = await self.api_football.get_league(league_id)
            if league is None:
                league = League(id=league_id, name=f"League {league_id}")
            self.league_repository.save_league(league)
            logger.info(f"Registered league {league.id} ({league.name})")

        matches = await self.api_football.get_fixtures(league_id, fixture_date, season)
        imported = self.match_repository.save_matches(matches) if matches else 0

        logger.info(f"Imported {imported} fixtures for league {league_id} on {fixture_date}")
        return FixtureImportResponseDTO(
            league_id=league_id,
            fixture_date=fixture_date,
            imported=imported,
        )


class GetPredictionAdviceUseCase:
    """Use case for reading the provider's advice on a match."""

    def __init__(self, match_repository: MatchRepository, api_football: APIFootballSource):
        self.match_repository = match_repository
        self.api_football = api_football

    async def execute(self, match_id: int) -> Optional[PredictionAdviceDTO]:
        """Returns None when the provider has no advice for the match."""
        if self.match_repository.get_match_by_id(match_id) is None:
            raise MatchNotFoundError(f"Match not found: {match_id}")

        advice = await self.api_football.get_prediction_advice(match_id)
        if not advice:
            return None
        return PredictionAdviceDTO(match_id=match_id, advice=advice)
