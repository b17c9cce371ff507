"""
Leagues Router

API endpoints for browsing stored leagues and their matches.
"""

from fastapi import APIRouter, Depends, HTTPException, Path

from src.application.dtos.dtos import (
    ErrorResponseDTO,
    LeagueMatchesResponseDTO,
    LeaguesResponseDTO,
)
from src.application.use_cases.use_cases import GetLeaguesUseCase, GetLeagueMatchesUseCase
from src.api.dependencies import get_league_repository, get_match_repository
from src.domain.repositories.repositories import LeagueRepository, MatchRepository


router = APIRouter(prefix="/leagues", tags=["Leagues"])


@router.get(
    "",
    response_model=LeaguesResponseDTO,
    responses={
        503: {"model": ErrorResponseDTO, "description": "Data unavailable"},
    },
    summary="Get all leagues",
    description="Returns every league stored locally.",
)
async def get_leagues(
    league_repository: LeagueRepository = Depends(get_league_repository),
) -> LeaguesResponseDTO:
    """Get all stored leagues."""
    use_case = GetLeaguesUseCase(league_repository)
    return await use_case.execute()


@router.get(
    "/{league_id}/matches",
    response_model=LeagueMatchesResponseDTO,
    responses={
        404: {"model": ErrorResponseDTO, "description": "League not found"},
        503: {"model": ErrorResponseDTO, "description": "Data unavailable"},
    },
    summary="Get matches of a league",
    description="Returns the stored matches of a league, most recent first.",
)
async def get_league_matches(
    league_id: int = Path(..., description="League identifier"),
    league_repository: LeagueRepository = Depends(get_league_repository),
    match_repository: MatchRepository = Depends(get_match_repository),
) -> LeagueMatchesResponseDTO:
    """Get the matches of one league."""
    use_case = GetLeagueMatchesUseCase(league_repository, match_repository)
    result = await use_case.execute(league_id)
    if result is None:
        raise HTTPException(status_code=404, detail=f"League not found: {league_id}")
    return result
