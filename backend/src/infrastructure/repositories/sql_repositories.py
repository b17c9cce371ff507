import logging
from typing import Optional

from sqlalchemy import Column, Date, Float, ForeignKey, Integer, String, or_
from sqlalchemy.exc import SQLAlchemyError

from src.domain.entities.entities import League, Match, STATUS_FULL_TIME, STATUS_NOT_STARTED
from src.domain.entities.bet import Bet, BetResult
from src.domain.exceptions import DataUnavailableError
from src.domain.repositories.repositories import BetRepository, LeagueRepository, MatchRepository
from src.infrastructure.database.database_service import Base, DatabaseService

logger = logging.getLogger(__name__)


class LeagueModel(Base):
    """
    SQLAlchemy model for leagues.
    """
    __tablename__ = "leagues"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    code = Column(String, nullable=False, default="")


class MatchModel(Base):
    """
    SQLAlchemy model for imported fixtures.
    """
    __tablename__ = "matches"

    id = Column(Integer, primary_key=True)
    date = Column(Date, nullable=False, index=True)
    league_id = Column(Integer, index=True, nullable=False)
    status = Column(String, nullable=False, default=STATUS_NOT_STARTED)
    home_team_id = Column(Integer, index=True, nullable=False)
    away_team_id = Column(Integer, index=True, nullable=False)
    home_team_name = Column(String, nullable=False)
    away_team_name = Column(String, nullable=False)
    home_goals = Column(Integer, nullable=False, default=0)
    away_goals = Column(Integer, nullable=False, default=0)
    winner_id = Column(Integer, nullable=True)  # NULL on draws and unplayed matches


class BetModel(Base):
    """
    SQLAlchemy model for recorded bets.
    """
    __tablename__ = "bets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    match_id = Column(Integer, ForeignKey("matches.id"), index=True, nullable=False)
    name = Column(String, nullable=False)
    line = Column(Float, nullable=False, default=0.0)
    amount = Column(Float, nullable=False)
    odds = Column(Integer, nullable=False, default=0)
    result = Column(String, nullable=False, default=BetResult.PENDING.value)


def _to_league(record: LeagueModel) -> League:
    return League(id=record.id, name=record.name, code=record.code or "")


def _to_match(record: MatchModel) -> Match:
    return Match(
        id=record.id,
        match_date=record.date,
        league_id=record.league_id,
        status=record.status,
        home_team_id=record.home_team_id,
        away_team_id=record.away_team_id,
        home_team_name=record.home_team_name,
        away_team_name=record.away_team_name,
        home_goals=record.home_goals or 0,
        away_goals=record.away_goals or 0,
        winner_id=record.winner_id,
    )


def _to_bet(record: BetModel) -> Bet:
    return Bet(
        id=record.id,
        match_id=record.match_id,
        name=record.name,
        line=record.line or 0.0,
        amount=record.amount,
        odds=record.odds or 0,
        result=BetResult(record.result),
    )


class _SqlRepository:
    """Session handling shared by the SQL repositories."""

    def __init__(self, db_service: DatabaseService):
        self.db_service = db_service

    def _unavailable(self, action: str, error: Exception) -> DataUnavailableError:
        logger.error(f"Failed to {action}: {error}")
        return DataUnavailableError(f"Failed to {action}")


class SqlLeagueRepository(_SqlRepository, LeagueRepository):

    def get_all_leagues(self) -> list[League]:
        session = self.db_service.get_session()
        try:
            records = session.query(LeagueModel).order_by(LeagueModel.name).all()
            return [_to_league(r) for r in records]
        except SQLAlchemyError as e:
            raise self._unavailable("query leagues", e) from e
        finally:
            session.close()

    def get_league_by_id(self, league_id: int) -> Optional[League]:
        session = self.db_service.get_session()
        try:
            record = session.get(LeagueModel, league_id)
            return _to_league(record) if record else None
        except SQLAlchemyError as e:
            raise self._unavailable(f"load league {league_id}", e) from e
        finally:
            session.close()

    def save_league(self, league: League) -> League:
        session = self.db_service.get_session()
        try:
            session.merge(LeagueModel(id=league.id, name=league.name, code=league.code))
            session.commit()
            return league
        except SQLAlchemyError as e:
            session.rollback()
            raise self._unavailable(f"save league {league.id}", e) from e
        finally:
            session.close()


class SqlMatchRepository(_SqlRepository, MatchRepository):

    def get_match_by_id(self, match_id: int) -> Optional[Match]:
        session = self.db_service.get_session()
        try:
            record = session.get(MatchModel, match_id)
            return _to_match(record) if record else None
        except SQLAlchemyError as e:
            raise self._unavailable(f"load match {match_id}", e) from e
        finally:
            session.close()

    def get_matches_by_league(self, league_id: int) -> list[Match]:
        session = self.db_service.get_session()
        try:
            records = (
                session.query(MatchModel)
                .filter(MatchModel.league_id == league_id)
                .order_by(MatchModel.date.desc(), MatchModel.id)
                .all()
            )
            return [_to_match(r) for r in records]
        except SQLAlchemyError as e:
            raise self._unavailable(f"query matches for league {league_id}", e) from e
        finally:
            session.close()

    def get_finished_matches_for_team(self, team_id: int) -> list[Match]:
        session = self.db_service.get_session()
        try:
            records = (
                session.query(MatchModel)
                .filter(
                    or_(MatchModel.home_team_id == team_id, MatchModel.away_team_id == team_id),
                    MatchModel.status == STATUS_FULL_TIME,
                )
                .order_by(MatchModel.date, MatchModel.id)
                .all()
            )
            return [_to_match(r) for r in records]
        except SQLAlchemyError as e:
            raise self._unavailable(f"query finished matches for team {team_id}", e) from e
        finally:
            session.close()

    def save_matches(self, matches: list[Match]) -> int:
        session = self.db_service.get_session()
        try:
            for match in matches:
                session.merge(MatchModel(
                    id=match.id,
                    date=match.match_date,
                    league_id=match.league_id,
                    status=match.status,
                    home_team_id=match.home_team_id,
                    away_team_id=match.away_team_id,
                    home_team_name=match.home_team_name,
                    away_team_name=match.away_team_name,
                    home_goals=match.home_goals,
                    away_goals=match.away_goals,
                    winner_id=match.winner_id,
                ))
            session.commit()
            return len(matches)
        except SQLAlchemyError as e:
            session.rollback()
            raise self._unavailable(f"save {len(matches)} matches", e) from e
        finally:
            session.close()


class SqlBetRepository(_SqlRepository, BetRepository):

    def get_bet_by_id(self, bet_id: int) -> Optional[Bet]:
        session = self.db_service.get_session()
        try:
            record = session.get(BetModel, bet_id)
            return _to_bet(record) if record else None
        except SQLAlchemyError as e:
            raise self._unavailable(f"load bet {bet_id}", e) from e
        finally:
            session.close()

    def get_all_bets(self) -> list[Bet]:
        session = self.db_service.get_session()
        try:
            records = session.query(BetModel).order_by(BetModel.id.desc()).all()
            return [_to_bet(r) for r in records]
        except SQLAlchemyError as e:
            raise self._unavailable("load bets", e) from e
        finally:
            session.close()

    def get_bets_by_match(self, match_id: int) -> list[Bet]:
        session = self.db_service.get_session()
        try:
            records = (
                session.query(BetModel)
                .filter(BetModel.match_id == match_id)
                .order_by(BetModel.id)
                .all()
            )
            return [_to_bet(r) for r in records]
        except SQLAlchemyError as e:
            raise self._unavailable(f"load bets for match {match_id}", e) from e
        finally:
            session.close()

    def add_bet(self, bet: Bet) -> Bet:
        session = self.db_service.get_session()
        try:
            record = BetModel(
                match_id=bet.match_id,
                name=bet.name,
                line=bet.line,
                amount=bet.amount,
                odds=bet.odds,
                result=bet.result.value,
            )
            session.add(record)
            session.commit()
            return _to_bet(record)
        except SQLAlchemyError as e:
            session.rollback()
            raise self._unavailable("save bet", e) from e
        finally:
            session.close()

    def update_bet_result(self, bet_id: int, result: BetResult) -> Optional[Bet]:
        session = self.db_service.get_session()
        try:
            record = session.get(BetModel, bet_id)
            if record is None:
                return None
            record.result = result.value
            session.commit()
            return _to_bet(record)
        except SQLAlchemyError as e:
            session.rollback()
            raise self._unavailable(f"update result of bet {bet_id}", e) from e
        finally:
            session.close()

    def delete_bet(self, bet_id: int) -> bool:
        session = self.db_service.get_session()
        try:
            record = session.get(BetModel, bet_id)
            if record is None:
                return False
            session.delete(record)
            session.commit()
            return True
        except SQLAlchemyError as e:
            session.rollback()
            raise self._unavailable(f"delete bet {bet_id}", e) from e
        finally:
            session.close()
