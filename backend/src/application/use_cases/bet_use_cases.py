"""
Bet Use Cases Module

Record, settle and delete bets, and report on them through the bet ledger.
"""

from typing import Optional
import logging

from src.domain.entities.bet import BetResult
from src.domain.exceptions import (
    BetNotFoundError,
    InvalidBetResultError,
    MatchNotFoundError,
)
from src.domain.repositories.repositories import BetRepository, MatchRepository
from src.domain.services.bet_ledger_service import BetLedgerService
from src.domain.services.bet_validation_service import BetValidationService
from src.application.dtos.dtos import (
    BetCreateRequestDTO,
    BetDTO,
    BettingDashboardDTO,
    BettingPerformanceDTO,
)
from src.application.dtos.mappers import (
    map_bet_to_dto,
    map_bet_to_history_row,
    map_performance_to_dto,
)


logger = logging.getLogger(__name__)


def _as_text(value) -> Optional[str]:
    """Form values may arrive as numbers from JSON clients."""
    if value is None:
        return None
    return str(value)


class RecordBetUseCase:
    """Use case for recording a new pending bet."""

    def __init__(
        self,
        bet_repository: BetRepository,
        match_repository: MatchRepository,
        validation_service: BetValidationService,
        ledger_service: BetLedgerService,
    ):
        self.bet_repository = bet_repository
        self.match_repository = match_repository
        self.validation_service = validation_service
        self.ledger_service = ledger_service

    async def execute(self, request: BetCreateRequestDTO) -> BetDTO:
        bet = self.validation_service.build_bet(
            match_id=request.match_id,
            name=request.name,
            amount=_as_text(request.amount),
            line=_as_text(request.line),
            odds=_as_text(request.odds),
        )

        if self.match_repository.get_match_by_id(request.match_id) is None:
            raise MatchNotFoundError(f"Match not found: {request.match_id}")

        saved = self.bet_repository.add_bet(bet)
        logger.info(f"Recorded bet {saved.id} on match {saved.match_id}: {saved.name}")
        return map_bet_to_dto(saved, self.ledger_service)


class SettleBetUseCase:
    """
    Use case for setting the result of a bet.

    Any settled result may be applied, repeatedly; a bet is never moved
    back to pending.
    """

    def __init__(self, bet_repository: BetRepository, ledger_service: BetLedgerService):
        self.bet_repository = bet_repository
        self.ledger_service = ledger_service

    async def execute(self, bet_id: int, result: BetResult) -> BetDTO:
        if not result.is_settled:
            raise InvalidBetResultError("A bet can only be settled as win, lose or push")

        updated = self.bet_repository.update_bet_result(bet_id, result)
        if updated is None:
            raise BetNotFoundError(f"Bet not found: {bet_id}")

        logger.info(f"Bet {bet_id} settled as {result.value}")
        return map_bet_to_dto(updated, self.ledger_service)


class DeleteBetUseCase:
    """Use case for permanently removing a bet."""

    def __init__(self, bet_repository: BetRepository):
        self.bet_repository = bet_repository

    async def execute(self, bet_id: int) -> None:
        if not self.bet_repository.delete_bet(bet_id):
            raise BetNotFoundError(f"Bet not found: {bet_id}")
        logger.info(f"Deleted bet {bet_id}")


class GetBetsUseCase:
    """Use case for listing bets with their profit/loss."""

    def __init__(self, bet_repository: BetRepository, ledger_service: BetLedgerService):
        self.bet_repository = bet_repository
        self.ledger_service = ledger_service

    async def execute(self, match_id: Optional[int] = None) -> list[BetDTO]:
        if match_id is None:
            bets = self.bet_repository.get_all_bets()
        else:
            bets = self.bet_repository.get_bets_by_match(match_id)
        return [map_bet_to_dto(bet, self.ledger_service) for bet in bets]


class GetBettingPerformanceUseCase:
    """Use case for the performance summary of all bets or of one match."""

    def __init__(self, bet_repository: BetRepository, ledger_service: BetLedgerService):
        self.bet_repository = bet_repository
        self.ledger_service = ledger_service

    async def execute(self, match_id: Optional[int] = None) -> BettingPerformanceDTO:
        if match_id is None:
            bets = self.bet_repository.get_all_bets()
        else:
            bets = self.bet_repository.get_bets_by_match(match_id)
        return map_performance_to_dto(self.ledger_service.compute_performance(bets))


class GetBettingDashboardUseCase:
    """Use case for the performance overview together with the bet history."""

    def __init__(
        self,
        bet_repository: BetRepository,
        match_repository: MatchRepository,
        ledger_service: BetLedgerService,
    ):
        self.bet_repository = bet_repository
        self.match_repository = match_repository
        self.ledger_service = ledger_service

    async def execute(self) -> BettingDashboardDTO:
        bets = self.bet_repository.get_all_bets()

        matches = {}
        for match_id in {bet.match_id for bet in bets}:
            matches[match_id] = self.match_repository.get_match_by_id(match_id)

        performance = self.ledger_service.compute_performance(bets)
        return BettingDashboardDTO(
            performance=map_performance_to_dto(performance),
            history=[
                map_bet_to_history_row(bet, matches.get(bet.match_id), self.ledger_service)
                for bet in bets
            ],
        )
