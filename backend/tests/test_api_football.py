"""
Tests for the API-Football data source using a mocked HTTP transport.
"""

import asyncio
from datetime import date

import httpx
import pytest

from src.domain.exceptions import DataUnavailableError
from src.infrastructure.data_sources.api_football import (
    APIFootballConfig,
    APIFootballSource,
    current_season,
)


FIXTURE = {
    "fixture": {"id": 1035037, "date": "2024-08-17T14:00:00+00:00", "status": {"short": "FT"}},
    "league": {"id": 39, "name": "Premier League"},
    "teams": {
        "home": {"id": 42, "name": "Arsenal", "winner": True},
        "away": {"id": 39, "name": "Wolves", "winner": False},
    },
    "goals": {"home": 2, "away": 0},
}

UPCOMING = {
    "fixture": {"id": 1035100, "date": "2024-08-24T11:30:00+00:00", "status": {"short": "NS"}},
    "league": {"id": 39, "name": "Premier League"},
    "teams": {
        "home": {"id": 35, "name": "Bournemouth", "winner": None},
        "away": {"id": 49, "name": "Chelsea", "winner": None},
    },
    "goals": {"home": None, "away": None},
}


def make_source(handler, api_key="test-key"):
    return APIFootballSource(
        config=APIFootballConfig(api_key=api_key),
        transport=httpx.MockTransport(handler),
    )


class TestCurrentSeason:

    def test_first_half_of_year(self):
        assert current_season(date(2025, 3, 1)) == 2024

    def test_second_half_of_year(self):
        assert current_season(date(2025, 8, 1)) == 2025


class TestGetFixtures:

    def test_parses_fixtures(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={"errors": [], "response": [FIXTURE, UPCOMING]})

        source = make_source(handler)
        matches = asyncio.run(source.get_fixtures(39, date(2024, 8, 17), 2024))

        assert len(matches) == 2
        played, upcoming = matches
        assert played.id == 1035037
        assert played.match_date == date(2024, 8, 17)
        assert played.is_finished
        assert played.winner_id == 42
        assert played.score == "2 - 0"
        assert upcoming.status == "NS"
        assert upcoming.home_goals == 0
        assert upcoming.winner_id is None

        request = requests[0]
        assert request.url.path == "/fixtures"
        assert request.url.params["league"] == "39"
        assert request.url.params["season"] == "2024"
        assert request.url.params["date"] == "2024-08-17"
        assert request.headers["x-apisports-key"] == "test-key"

    def test_skips_malformed_fixtures(self):
        def handler(request):
            return httpx.Response(200, json={"errors": [], "response": [{"fixture": {}}, FIXTURE]})

        matches = asyncio.run(make_source(handler).get_fixtures(39, date(2024, 8, 17), 2024))

        assert [m.id for m in matches] == [1035037]


class TestFailures:

    def test_not_configured(self):
        source = make_source(lambda request: httpx.Response(200, json={}), api_key="")

        assert source.is_configured is False
        with pytest.raises(DataUnavailableError, match="not configured"):
            asyncio.run(source.get_fixtures(39, date(2024, 8, 17)))

    def test_http_error_status(self):
        source = make_source(lambda request: httpx.Response(500, json={}))

        with pytest.raises(DataUnavailableError, match="status 500"):
            asyncio.run(source.get_fixtures(39, date(2024, 8, 17)))

    def test_api_errors_dict(self):
        def handler(request):
            return httpx.Response(200, json={"errors": {"token": "Error/Missing application key"}, "response": []})

        with pytest.raises(DataUnavailableError, match="token: Error/Missing application key"):
            asyncio.run(make_source(handler).get_fixtures(39, date(2024, 8, 17)))

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused")

        with pytest.raises(DataUnavailableError, match="request failed"):
            asyncio.run(make_source(handler).get_fixtures(39, date(2024, 8, 17)))

    @pytest.mark.parametrize("payload", [[{"fixture": {}}], "maintenance", 42])
    def test_payload_that_is_not_an_object(self, payload):
        source = make_source(lambda request: httpx.Response(200, json=payload))

        with pytest.raises(DataUnavailableError, match="unexpected response"):
            asyncio.run(source.get_fixtures(39, date(2024, 8, 17)))
        with pytest.raises(DataUnavailableError, match="unexpected response"):
            asyncio.run(source.get_league(39))

    def test_format_errors_list(self):
        errors = [{"date": "Invalid date"}, {"season": "Required"}]
        assert APIFootballSource._format_errors(errors) == "date: Invalid date; season: Required"


class TestLeagueAndAdvice:

    def test_get_league(self):
        def handler(request):
            return httpx.Response(200, json={
                "errors": [],
                "response": [{"league": {"id": 39, "name": "Premier League"}, "country": {"code": "GB"}}],
            })

        league = asyncio.run(make_source(handler).get_league(39))

        assert league.name == "Premier League"
        assert league.code == "GB"

    def test_get_league_unknown(self):
        source = make_source(lambda request: httpx.Response(200, json={"errors": [], "response": []}))
        assert asyncio.run(source.get_league(12345)) is None

    def test_get_prediction_advice(self):
        def handler(request):
            assert request.url.params["fixture"] == "1035100"
            return httpx.Response(200, json={
                "errors": [],
                "response": [{"predictions": {"advice": "Double chance : draw or Chelsea"}}],
            })

        advice = asyncio.run(make_source(handler).get_prediction_advice(1035100))

        assert advice == "Double chance : draw or Chelsea"
