"""
Bets Router

API endpoints for recording, settling and deleting bets,
and for the betting performance dashboard.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response

from src.application.dtos.dtos import (
    BetCreateRequestDTO,
    BetDTO,
    BetSettleRequestDTO,
    BettingDashboardDTO,
    BettingPerformanceDTO,
    ErrorResponseDTO,
)
from src.application.use_cases.bet_use_cases import (
    DeleteBetUseCase,
    GetBetsUseCase,
    GetBettingDashboardUseCase,
    GetBettingPerformanceUseCase,
    RecordBetUseCase,
    SettleBetUseCase,
)
from src.api.dependencies import (
    get_bet_ledger_service,
    get_bet_repository,
    get_bet_validation_service,
    get_match_repository,
)
from src.domain.repositories.repositories import BetRepository, MatchRepository
from src.domain.services.bet_ledger_service import BetLedgerService
from src.domain.services.bet_validation_service import BetValidationService


router = APIRouter(prefix="/bets", tags=["Bets"])


@router.get(
    "",
    response_model=List[BetDTO],
    summary="List bets",
    description="Returns all bets, or the bets of one match, with their profit/loss.",
)
async def list_bets(
    match_id: Optional[int] = Query(default=None, description="Only bets on this match"),
    bet_repository: BetRepository = Depends(get_bet_repository),
    ledger_service: BetLedgerService = Depends(get_bet_ledger_service),
) -> List[BetDTO]:
    use_case = GetBetsUseCase(bet_repository, ledger_service)
    return await use_case.execute(match_id)


@router.post(
    "",
    response_model=BetDTO,
    status_code=201,
    responses={
        404: {"model": ErrorResponseDTO, "description": "Match not found"},
        422: {"model": ErrorResponseDTO, "description": "Invalid bet input"},
    },
    summary="Record a bet",
    description="Validates the bet form and records a new pending bet.",
)
async def record_bet(
    request: BetCreateRequestDTO,
    bet_repository: BetRepository = Depends(get_bet_repository),
    match_repository: MatchRepository = Depends(get_match_repository),
    validation_service: BetValidationService = Depends(get_bet_validation_service),
    ledger_service: BetLedgerService = Depends(get_bet_ledger_service),
) -> BetDTO:
    use_case = RecordBetUseCase(bet_repository, match_repository, validation_service, ledger_service)
    return await use_case.execute(request)


@router.get(
    "/performance",
    response_model=BettingPerformanceDTO,
    summary="Betting performance",
    description="Totals, net profit, ROI and win rate over every recorded bet.",
)
async def get_performance(
    bet_repository: BetRepository = Depends(get_bet_repository),
    ledger_service: BetLedgerService = Depends(get_bet_ledger_service),
) -> BettingPerformanceDTO:
    use_case = GetBettingPerformanceUseCase(bet_repository, ledger_service)
    return await use_case.execute()


@router.get(
    "/dashboard",
    response_model=BettingDashboardDTO,
    summary="Betting dashboard",
    description="Performance overview together with the formatted bet history.",
)
async def get_dashboard(
    bet_repository: BetRepository = Depends(get_bet_repository),
    match_repository: MatchRepository = Depends(get_match_repository),
    ledger_service: BetLedgerService = Depends(get_bet_ledger_service),
) -> BettingDashboardDTO:
    use_case = GetBettingDashboardUseCase(bet_repository, match_repository, ledger_service)
    return await use_case.execute()


@router.put(
    "/{bet_id}/result",
    response_model=BetDTO,
    responses={
        404: {"model": ErrorResponseDTO, "description": "Bet not found"},
        422: {"model": ErrorResponseDTO, "description": "Result is not final"},
    },
    summary="Settle a bet",
)
async def settle_bet(
    request: BetSettleRequestDTO,
    bet_id: int = Path(..., description="Bet identifier"),
    bet_repository: BetRepository = Depends(get_bet_repository),
    ledger_service: BetLedgerService = Depends(get_bet_ledger_service),
) -> BetDTO:
    use_case = SettleBetUseCase(bet_repository, ledger_service)
    return await use_case.execute(bet_id, request.result)


@router.delete(
    "/{bet_id}",
    status_code=204,
    responses={
        404: {"model": ErrorResponseDTO, "description": "Bet not found"},
    },
    summary="Delete a bet",
    description="Permanently removes a bet. Confirmation is the client's responsibility.",
)
async def delete_bet(
    bet_id: int = Path(..., description="Bet identifier"),
    bet_repository: BetRepository = Depends(get_bet_repository),
) -> Response:
    use_case = DeleteBetUseCase(bet_repository)
    await use_case.execute(bet_id)
    return Response(status_code=204)
