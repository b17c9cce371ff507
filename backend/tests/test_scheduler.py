"""
Tests for the daily fixture import scheduler.
"""

import asyncio
from datetime import date, datetime
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from src.domain.entities.entities import STATUS_NOT_STARTED
from src.domain.exceptions import DataUnavailableError
from src.infrastructure.data_sources.api_football import APIFootballConfig, APIFootballSource
from src.scheduler import FixtureImportScheduler, JOB_ID, parse_league_ids, parse_season

from conftest import ARSENAL, CHELSEA, PREMIER_LEAGUE, make_match


NOW = datetime(2025, 3, 2, 6, 0)
YESTERDAY = date(2025, 3, 1)
TODAY = date(2025, 3, 2)


def make_api(api_key="test-key", transport=None):
    return APIFootballSource(APIFootballConfig(api_key=api_key), transport=transport)


def fixture_payload(fixture_id, fixture_date, status, home_goals=None, away_goals=None):
    return {
        "fixture": {"id": fixture_id, "date": f"{fixture_date.isoformat()}T15:00:00+00:00", "status": {"short": status}},
        "league": {"id": PREMIER_LEAGUE, "name": "Premier League"},
        "teams": {
            "home": {"id": ARSENAL, "name": "Arsenal", "winner": status == "FT" and home_goals > away_goals},
            "away": {"id": CHELSEA, "name": "Chelsea", "winner": status == "FT" and away_goals > home_goals},
        },
        "goals": {"home": home_goals, "away": away_goals},
    }


class TestParseLeagueIds:

    def test_parses_comma_separated_ids(self):
        assert parse_league_ids("39, 140,78") == [39, 140, 78]

    def test_ignores_blank_and_invalid(self):
        assert parse_league_ids("39,,abc, ") == [39]
        assert parse_league_ids(None) == []


class TestParseSeason:

    def test_valid_season(self):
        assert parse_season(" 2024 ") == 2024

    def test_blank_or_invalid_season(self):
        assert parse_season(None) is None
        assert parse_season("") is None
        assert parse_season("24/25") is None


class TestFixtureImportJob:

    @pytest.fixture(autouse=True)
    def fixed_clock(self):
        with patch("src.scheduler.get_current_time", return_value=NOW):
            yield

    def test_imports_yesterday_and_today(self, db_service, match_repository, league_repository):
        api = make_api()
        fixtures = [make_match(200, ARSENAL, CHELSEA, match_date=TODAY)]
        scheduler = FixtureImportScheduler(db_service, api, league_ids=[PREMIER_LEAGUE], season=2024)

        with patch.object(api, "get_league", AsyncMock(return_value=None)), \
                patch.object(api, "get_fixtures", AsyncMock(return_value=fixtures)) as get_fixtures:
            total = asyncio.run(scheduler.run_fixture_import_job())

        assert [c.args for c in get_fixtures.await_args_list] == [
            (PREMIER_LEAGUE, YESTERDAY, 2024),
            (PREMIER_LEAGUE, TODAY, 2024),
        ]
        assert total == 2
        assert match_repository.get_match_by_id(200) is not None
        assert league_repository.get_league_by_id(PREMIER_LEAGUE).name == f"League {PREMIER_LEAGUE}"

    def test_yesterdays_fixture_gets_final_score(self, db_service, match_repository):
        requested_dates = []

        def handler(request):
            if request.url.path == "/leagues":
                return httpx.Response(200, json={"errors": [], "response": []})
            fixture_date = date.fromisoformat(request.url.params["date"])
            requested_dates.append(fixture_date)
            if fixture_date == YESTERDAY:
                fixture = fixture_payload(500, YESTERDAY, "FT", 2, 1)
            else:
                fixture = fixture_payload(501, TODAY, "NS")
            return httpx.Response(200, json={"errors": [], "response": [fixture]})

        match_repository.save_matches([
            make_match(500, ARSENAL, CHELSEA, status=STATUS_NOT_STARTED, match_date=YESTERDAY),
        ])
        scheduler = FixtureImportScheduler(
            db_service,
            make_api(transport=httpx.MockTransport(handler)),
            league_ids=[PREMIER_LEAGUE],
        )

        asyncio.run(scheduler.run_fixture_import_job())

        assert requested_dates == [YESTERDAY, TODAY]
        played = match_repository.get_match_by_id(500)
        assert played.is_finished
        assert played.score == "2 - 1"
        assert played.winner_id == ARSENAL
        assert match_repository.get_match_by_id(501).is_finished is False

    def test_failing_league_is_skipped(self, db_service, match_repository):
        api = make_api()
        fixtures = [make_match(300, ARSENAL, CHELSEA)]
        scheduler = FixtureImportScheduler(db_service, api, league_ids=[140, PREMIER_LEAGUE], season=2024)

        async def get_fixtures(league_id, fixture_date=None, season=None):
            if league_id == 140:
                raise DataUnavailableError("API error: rate limit")
            return fixtures

        with patch.object(api, "get_league", AsyncMock(return_value=None)), \
                patch.object(api, "get_fixtures", side_effect=get_fixtures):
            total = asyncio.run(scheduler.run_fixture_import_job())

        assert total == 2
        assert match_repository.get_match_by_id(300) is not None

    def test_overlapping_run_is_skipped(self, db_service):
        scheduler = FixtureImportScheduler(db_service, make_api(), league_ids=[PREMIER_LEAGUE])
        scheduler._job_in_progress = True

        assert asyncio.run(scheduler.run_fixture_import_job()) == 0


class TestSchedulerLifecycle:

    def test_disabled_without_leagues(self, db_service):
        scheduler = FixtureImportScheduler(db_service, make_api(), league_ids=[])

        scheduler.start()

        assert scheduler.scheduler.running is False
        scheduler.shutdown()

    def test_disabled_without_api_key(self, db_service):
        scheduler = FixtureImportScheduler(db_service, make_api(api_key=""), league_ids=[PREMIER_LEAGUE])

        scheduler.start()

        assert scheduler.scheduler.get_job(JOB_ID) is None
        assert scheduler.scheduler.running is False

    def test_reads_leagues_from_environment(self, db_service, monkeypatch):
        monkeypatch.setenv("FIXTURE_IMPORT_LEAGUES", "39,140")
        monkeypatch.setenv("FIXTURE_IMPORT_SEASON", "2024")

        scheduler = FixtureImportScheduler(db_service, make_api())

        assert scheduler.league_ids == [39, 140]
        assert scheduler.season == 2024

    def test_invalid_season_in_environment_falls_back(self, db_service, monkeypatch):
        monkeypatch.setenv("FIXTURE_IMPORT_SEASON", "2024-25")

        scheduler = FixtureImportScheduler(db_service, make_api(), league_ids=[PREMIER_LEAGUE])

        assert scheduler.season is None
