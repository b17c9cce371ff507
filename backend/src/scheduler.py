import logging
import os
from datetime import timedelta
from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from src.application.use_cases.use_cases import ImportFixturesUseCase
from src.domain.exceptions import DataUnavailableError
from src.infrastructure.data_sources.api_football import APIFootballSource
from src.infrastructure.database.database_service import DatabaseService
from src.infrastructure.repositories.sql_repositories import SqlLeagueRepository, SqlMatchRepository
from src.utils.time_utils import get_current_time, get_timezone

logger = logging.getLogger(__name__)

JOB_ID = "daily_fixture_import"


def parse_league_ids(raw: Optional[str]) -> list[int]:
    """Parse a comma separated list of league ids, e.g. "39,140"."""
    league_ids = []
    for part in (raw or "").split(","):
        part = part.strip()
        if not part:
            continue
        try:
            league_ids.append(int(part))
        except ValueError:
            logger.warning(f"Ignoring invalid league id in FIXTURE_IMPORT_LEAGUES: {part!r}")
    return league_ids


def parse_season(raw: Optional[str]) -> Optional[int]:
    """Parse a season year, e.g. "2024". Blank or invalid values mean "derive from the date"."""
    raw = (raw or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid FIXTURE_IMPORT_SEASON: {raw!r}")
        return None


class FixtureImportScheduler:
    """Imports the configured leagues' fixtures for yesterday and today once a day."""

    def __init__(
        self,
        db_service: DatabaseService,
        api_football: APIFootballSource,
        league_ids: Optional[list[int]] = None,
        season: Optional[int] = None,
        hour: int = 6,
    ):
        self.db_service = db_service
        self.api_football = api_football
        self.league_ids = league_ids if league_ids is not None else parse_league_ids(os.getenv("FIXTURE_IMPORT_LEAGUES"))
        self.season = season or parse_season(os.getenv("FIXTURE_IMPORT_SEASON"))
        self.hour = hour
        self.scheduler = AsyncIOScheduler(timezone=get_timezone())
        self._job_in_progress = False

    async def run_fixture_import_job(self) -> int:
        """
        Import yesterday's and today's fixtures for every configured league.

        Yesterday is fetched again so its fixtures are stored with final
        scores and winners. A failing league and day is logged and
        skipped. Returns the number of fixtures written.
        """
        if self._job_in_progress:
            logger.warning("Fixture import already in progress, skipping scheduled run")
            return 0

        total = 0
        try:
            self._job_in_progress = True
            today = get_current_time().date()
            fixture_dates = [today - timedelta(days=1), today]
            logger.info(f"Starting fixture import for {len(self.league_ids)} leagues on {fixture_dates[0]} and {today}")

            use_case = ImportFixturesUseCase(
                self.api_football,
                SqlLeagueRepository(self.db_service),
                SqlMatchRepository(self.db_service),
            )
            for league_id in self.league_ids:
                for fixture_date in fixture_dates:
                    try:
                        result = await use_case.execute(league_id, fixture_date, self.season)
                        total += result.imported
                    except DataUnavailableError as e:
                        logger.error(f"Fixture import failed for league {league_id} on {fixture_date}: {e}")

            logger.info(f"Fixture import finished. {total} fixtures stored.")
            return total
        finally:
            self._job_in_progress = False

    def start(self):
        """Start the scheduler with the daily import job."""
        if not self.league_ids:
            logger.warning("FIXTURE_IMPORT_LEAGUES not set, daily fixture import disabled")
            return
        if not self.api_football.is_configured:
            logger.warning("API-Football not configured, daily fixture import disabled")
            return

        self.scheduler.add_job(
            self.run_fixture_import_job,
            trigger=CronTrigger(hour=self.hour, minute=0, timezone=get_timezone()),
            id=JOB_ID,
            name=f"Daily fixture import at {self.hour:02d}:00",
            replace_existing=True,
            max_instances=1,
        )
        self.scheduler.start()

        job = self.scheduler.get_job(JOB_ID)
        if job:
            logger.info(f"Fixture import scheduled. Next run: {job.next_run_time}")

    def shutdown(self):
        """Shutdown the scheduler gracefully."""
        if not self.scheduler.running:
            return
        self.scheduler.shutdown(wait=False)
        logger.info("Scheduler shutdown successfully")
