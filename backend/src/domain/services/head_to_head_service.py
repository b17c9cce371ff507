"""
Head-to-Head Domain Service

Reduces the finished-match history of two teams into comparative form metrics.
"""

from typing import Iterable

from src.domain.entities.entities import Match, TeamSnapshot, HeadToHeadStats


class HeadToHeadService:
    @staticmethod
    def calculate_team_snapshot(
        team_id: int,
        team_name: str,
        matches: Iterable[Match],
    ) -> TeamSnapshot:
        """
        Calculate form metrics for a team from match history.

        Only finished matches involving the team are counted. Whether the
        team played at home or away is decided per fixture.

        Args:
            team_id: Team identifier
            team_name: Team display name
            matches: Historical matches (any team, any status)

        Returns:
            TeamSnapshot for the team
        """
        games_played = 0
        wins = 0
        draws = 0
        goals_for = 0
        goals_against = 0
        clean_sheets = 0
        one_conceded = 0
        two_plus_conceded = 0
        # Outcome breakdown per goals-conceded bucket, keyed by (bucket, outcome)
        breakdown = {}

        for match in matches:
            if not match.is_finished or not match.involves(team_id):
                continue

            games_played += 1

            is_home = match.home_team_id == team_id
            scored = match.home_goals if is_home else match.away_goals
            conceded = match.away_goals if is_home else match.home_goals

            goals_for += scored
            goals_against += conceded

            if conceded == 0:
                clean_sheets += 1
                bucket = "clean_sheet"
            elif conceded == 1:
                one_conceded += 1
                bucket = "one_conceded"
            else:
                two_plus_conceded += 1
                bucket = "two_plus_conceded"

            if match.winner_id is None:
                draws += 1
                outcome = "draws"
            elif match.winner_id == team_id:
                wins += 1
                outcome = "wins"
            else:
                outcome = "losses"
            breakdown[(bucket, outcome)] = breakdown.get((bucket, outcome), 0) + 1

        return TeamSnapshot(
            team_id=team_id,
            team_name=team_name,
            games_played=games_played,
            wins=wins,
            draws=draws,
            goals_for=goals_for,
            goals_against=goals_against,
            clean_sheets=clean_sheets,
            one_conceded=one_conceded,
            two_plus_conceded=two_plus_conceded,
            clean_sheet_wins=breakdown.get(("clean_sheet", "wins"), 0),
            clean_sheet_draws=breakdown.get(("clean_sheet", "draws"), 0),
            one_conceded_wins=breakdown.get(("one_conceded", "wins"), 0),
            one_conceded_draws=breakdown.get(("one_conceded", "draws"), 0),
            one_conceded_losses=breakdown.get(("one_conceded", "losses"), 0),
            two_plus_conceded_wins=breakdown.get(("two_plus_conceded", "wins"), 0),
            two_plus_conceded_draws=breakdown.get(("two_plus_conceded", "draws"), 0),
            two_plus_conceded_losses=breakdown.get(("two_plus_conceded", "losses"), 0),
        )

    @staticmethod
    def compute_head_to_head(
        home_team_id: int,
        away_team_id: int,
        home_team_name: str,
        away_team_name: str,
        matches: Iterable[Match],
    ) -> HeadToHeadStats:
        """
        Build the head-to-head snapshot for a fixture.

        Each side is evaluated independently against the same match
        collection, so the collection may hold the union of both teams'
        histories.
        """
        matches = list(matches)
        return HeadToHeadStats(
            home=HeadToHeadService.calculate_team_snapshot(home_team_id, home_team_name, matches),
            away=HeadToHeadService.calculate_team_snapshot(away_team_id, away_team_name, matches),
        )
