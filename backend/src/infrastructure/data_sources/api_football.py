"""
API-Football Data Source

This module integrates with API-Football (api-football.com) to import
fixtures into the local store and to read fixture prediction advice.
Free tier: 100 requests/day.

API Documentation: https://www.api-football.com/documentation-v3
"""

import os
from datetime import date
from typing import Optional
from dataclasses import dataclass
import logging

import httpx

from src.domain.entities.entities import Match, League
from src.domain.exceptions import DataUnavailableError
from src.utils.time_utils import get_current_time


logger = logging.getLogger(__name__)


DAILY_REQUEST_LIMIT = 100


@dataclass
class APIFootballConfig:
    """Configuration for API-Football."""
    api_key: Optional[str] = None
    base_url: str = "https://v3.football.api-sports.io"
    timeout: int = 10

    def __post_init__(self):
        # Try to get API key from environment if not provided
        if self.api_key is None:
            self.api_key = os.getenv("API_FOOTBALL_KEY")


def current_season(today: Optional[date] = None) -> int:
    """
    Season year for a date.

    Matches in the first half of the year belong to the season that
    started the previous year.
    """
    today = today or get_current_time().date()
    if today.month < 7:
        return today.year - 1
    return today.year


class APIFootballSource:
    """
    Data source for API-Football.

    Provides fixtures for the import job and per-fixture prediction advice.
    Requires API key (free tier: 100 requests/day).
    """

    SOURCE_NAME = "API-Football"

    def __init__(
        self,
        config: Optional[APIFootballConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the data source."""
        self.config = config or APIFootballConfig()
        self._transport = transport
        self._request_count = 0
        self._last_reset = get_current_time().date()

    @property
    def is_configured(self) -> bool:
        """Check if API key is configured."""
        return bool(self.config.api_key)

    def _check_rate_limit(self) -> bool:
        """Check if we're within rate limits (100/day for free tier)."""
        today = get_current_time().date()
        if today > self._last_reset:
            self._request_count = 0
            self._last_reset = today
        return self._request_count < DAILY_REQUEST_LIMIT

    async def _make_request(
        self,
        endpoint: str,
        params: Optional[dict] = None,
    ) -> dict:
        """
        Make authenticated request to API-Football.

        Args:
            endpoint: API endpoint (e.g., "/fixtures")
            params: Query parameters

        Returns:
            JSON response

        Raises:
            DataUnavailableError: When unconfigured, rate limited, or the
                request or the API reports a failure.
        """
        if not self.is_configured:
            logger.warning("API-Football not configured (no API key)")
            raise DataUnavailableError("API-Football is not configured")

        if not self._check_rate_limit():
            logger.warning(f"API-Football rate limit reached ({DAILY_REQUEST_LIMIT}/day)")
            raise DataUnavailableError("API-Football daily request limit reached")

        url = f"{self.config.base_url}{endpoint}"
        headers = {
            "x-apisports-key": self.config.api_key,
            "Accept": "application/json",
        }

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    url,
                    headers=headers,
                    params=params,
                    timeout=self.config.timeout,
                )
                response.raise_for_status()
                self._request_count += 1
                data = response.json()

        except httpx.HTTPStatusError as e:
            logger.error(f"API-Football HTTP error: {e}")
            raise DataUnavailableError(f"API-Football returned status {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"API-Football request error: {e}")
            raise DataUnavailableError(f"API-Football request failed: {e}") from e

        if not isinstance(data, dict):
            logger.error(f"API-Football returned an unexpected payload: {type(data).__name__}")
            raise DataUnavailableError("API-Football returned an unexpected response")

        errors = data.get("errors")
        if errors:
            message = self._format_errors(errors)
            logger.error(f"API-Football error: {message}")
            raise DataUnavailableError(f"API error: {message}")

        return data

    @staticmethod
    def _format_errors(errors) -> str:
        """Join API errors as "field: message" pairs."""
        # The API sends a dict on most failures and a list of dicts on some
        if isinstance(errors, dict):
            return "; ".join(f"{field}: {message}" for field, message in errors.items())
        parts = []
        for error in errors:
            if isinstance(error, dict):
                parts.extend(f"{field}: {message}" for field, message in error.items())
            else:
                parts.append(str(error))
        return "; ".join(parts)

    async def get_fixtures(
        self,
        league_id: int,
        fixture_date: Optional[date] = None,
        season: Optional[int] = None,
    ) -> list[Match]:
        """
        Get all fixtures of a league on a given day.

        Args:
            league_id: API-Football league id (also our league id)
            fixture_date: Day to fetch, defaults to today
            season: Season year, derived from the date when omitted

        Returns:
            List of Match entities
        """
        fixture_date = fixture_date or get_current_time().date()
        season = season or current_season(fixture_date)

        data = await self._make_request("/fixtures", {
            "league": league_id,
            "season": season,
            "date": fixture_date.isoformat(),
        })

        matches = []
        for fixture in data.get("response", []):
            try:
                matches.append(self._parse_fixture(fixture))
            except (KeyError, TypeError, ValueError) as e:
                logger.debug(f"Error parsing fixture: {e}")
                continue

        logger.info(f"API-Football returned {len(matches)} fixtures for league {league_id} on {fixture_date}")
        return matches

    async def get_league(self, league_id: int) -> Optional[League]:
        """Get league metadata (name and country code) by id."""
        data = await self._make_request("/leagues", {"id": league_id})
        response = data.get("response") or []
        if not response:
            return None
        entry = response[0]
        return League(
            id=entry["league"]["id"],
            name=entry["league"]["name"],
            code=(entry.get("country") or {}).get("code") or "",
        )

    async def get_prediction_advice(self, fixture_id: int) -> Optional[str]:
        """
        Get the provider's betting advice for a fixture.

        Returns:
            Advice text (e.g. "Double chance : draw or Arsenal") or None
            when the provider has no prediction for the fixture.
        """
        data = await self._make_request("/predictions", {"fixture": fixture_id})
        response = data.get("response") or []
        if not response:
            return None
        return (response[0].get("predictions") or {}).get("advice")

    def _parse_fixture(self, fixture: dict) -> Match:
        """Parse API-Football fixture into Match entity."""
        info = fixture["fixture"]
        teams = fixture["teams"]
        goals = fixture.get("goals") or {}

        home = teams["home"]
        away = teams["away"]

        winner_id = None
        if home.get("winner"):
            winner_id = home["id"]
        elif away.get("winner"):
            winner_id = away["id"]

        return Match(
            id=info["id"],
            match_date=date.fromisoformat(info["date"][:10]),
            league_id=fixture["league"]["id"],
            status=info["status"]["short"],
            home_team_id=home["id"],
            away_team_id=away["id"],
            home_team_name=home["name"],
            away_team_name=away["name"],
            # Unplayed fixtures report null goals
            home_goals=goals.get("home") or 0,
            away_goals=goals.get("away") or 0,
            winner_id=winner_id,
        )
