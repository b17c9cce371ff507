"""
Matches API Routes

Single-match views (details, head-to-head form, provider advice,
per-match betting performance) and the fixture import trigger.
"""
from fastapi import APIRouter, Depends, HTTPException, Path

from src.application.dtos.dtos import (
    BettingPerformanceDTO,
    ErrorResponseDTO,
    FixtureImportRequestDTO,
    FixtureImportResponseDTO,
    HeadToHeadStatsDTO,
    MatchDTO,
    PredictionAdviceDTO,
)
from src.application.use_cases.use_cases import (
    GetHeadToHeadUseCase,
    GetMatchUseCase,
    GetPredictionAdviceUseCase,
    ImportFixturesUseCase,
)
from src.application.use_cases.bet_use_cases import GetBettingPerformanceUseCase
from src.api.dependencies import (
    get_api_football,
    get_bet_ledger_service,
    get_bet_repository,
    get_head_to_head_service,
    get_league_repository,
    get_match_repository,
)
from src.domain.repositories.repositories import BetRepository, LeagueRepository, MatchRepository
from src.domain.services.bet_ledger_service import BetLedgerService
from src.domain.services.head_to_head_service import HeadToHeadService
from src.infrastructure.data_sources.api_football import APIFootballSource

router = APIRouter(tags=["Matches"])


@router.post(
    "/import",
    response_model=FixtureImportResponseDTO,
    responses={
        503: {"model": ErrorResponseDTO, "description": "Fixture provider unavailable"},
    },
    summary="Import fixtures",
    description="Fetches a league's fixtures for one day from API-Football and stores them.",
)
async def import_fixtures(
    request: FixtureImportRequestDTO,
    api_football: APIFootballSource = Depends(get_api_football),
    league_repository: LeagueRepository = Depends(get_league_repository),
    match_repository: MatchRepository = Depends(get_match_repository),
) -> FixtureImportResponseDTO:
    use_case = ImportFixturesUseCase(api_football, league_repository, match_repository)
    return await use_case.execute(
        league_id=request.league_id,
        fixture_date=request.fixture_date,
        season=request.season,
    )


@router.get(
    "/{match_id}",
    response_model=MatchDTO,
    responses={
        404: {"model": ErrorResponseDTO, "description": "Match not found"},
    },
    summary="Get a match",
)
async def get_match(
    match_id: int = Path(..., description="Match identifier"),
    match_repository: MatchRepository = Depends(get_match_repository),
) -> MatchDTO:
    use_case = GetMatchUseCase(match_repository)
    return await use_case.execute(match_id)


@router.get(
    "/{match_id}/head-to-head",
    response_model=HeadToHeadStatsDTO,
    responses={
        404: {"model": ErrorResponseDTO, "description": "Match not found"},
        503: {"model": ErrorResponseDTO, "description": "Data unavailable"},
    },
    summary="Head-to-head form",
    description="""
    Compares the two teams of a match using every finished match stored for each team:
    record, goals, per-game averages and goals-conceded buckets.
    """,
)
async def get_head_to_head(
    match_id: int = Path(..., description="Match identifier"),
    match_repository: MatchRepository = Depends(get_match_repository),
    head_to_head_service: HeadToHeadService = Depends(get_head_to_head_service),
) -> HeadToHeadStatsDTO:
    use_case = GetHeadToHeadUseCase(match_repository, head_to_head_service)
    return await use_case.execute(match_id)


@router.get(
    "/{match_id}/advice",
    response_model=PredictionAdviceDTO,
    responses={
        404: {"model": ErrorResponseDTO, "description": "Match or advice not found"},
        503: {"model": ErrorResponseDTO, "description": "Fixture provider unavailable"},
    },
    summary="Provider advice",
    description="Returns API-Football's prediction advice for the match.",
)
async def get_prediction_advice(
    match_id: int = Path(..., description="Match identifier"),
    match_repository: MatchRepository = Depends(get_match_repository),
    api_football: APIFootballSource = Depends(get_api_football),
) -> PredictionAdviceDTO:
    use_case = GetPredictionAdviceUseCase(match_repository, api_football)
    result = await use_case.execute(match_id)
    if result is None:
        raise HTTPException(status_code=404, detail=f"No prediction available for match {match_id}")
    return result


@router.get(
    "/{match_id}/bets/performance",
    response_model=BettingPerformanceDTO,
    responses={
        503: {"model": ErrorResponseDTO, "description": "Data unavailable"},
    },
    summary="Betting performance of a match",
)
async def get_match_betting_performance(
    match_id: int = Path(..., description="Match identifier"),
    bet_repository: BetRepository = Depends(get_bet_repository),
    ledger_service: BetLedgerService = Depends(get_bet_ledger_service),
) -> BettingPerformanceDTO:
    use_case = GetBettingPerformanceUseCase(bet_repository, ledger_service)
    return await use_case.execute(match_id)
