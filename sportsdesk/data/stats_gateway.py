"""Uncached, single-attempt access to player statistics"""

import logging
from typing import List

from sportsdesk.api_clients.source import RawDataSource
from sportsdesk.models import PlayerStatRecord, validate_sport
from sportsdesk.utils.errors import as_fetch_error

logger = logging.getLogger(__name__)


def filter_players_by_name(players: List[PlayerStatRecord], player_name: str) -> List[PlayerStatRecord]:
    """Case-insensitive substring match on player name; a blank name matches nothing."""
    needle = (player_name or '').strip().lower()
    if not needle:
        return []
    return [p for p in players if needle in p.name.lower()]


def filter_players_by_team(players: List[PlayerStatRecord], team_name: str) -> List[PlayerStatRecord]:
    needle = (team_name or '').strip().lower()
    if not needle:
        return []
    return [p for p in players if needle in p.team.lower()]


class StatsGateway:
    """
    Pass-through to the source's stat lines.

    No retry and no cache: errors from the source (including
    MalformedResponseError for error-tagged payloads) reach the caller
    unchanged, except that errors outside FETCH_ERRORS arrive wrapped in
    DataUnavailableError. Name and team lookups are client-side substring filters.
    """

    def __init__(self, source: RawDataSource):
        self.source = source

    async def get_player_stats(self, sport: str) -> List[PlayerStatRecord]:
        sport = validate_sport(sport)
        try:
            players = await self.source.fetch_stats(sport)
        except Exception as e:
            logger.error(f"[{sport}] Error fetching player stats: {e}")
            raise as_fetch_error(e, sport, "fetch stats")
        return list(players or [])

    async def get_player_stats_by_sport(self, sport: str) -> List[PlayerStatRecord]:
        return await self.get_player_stats(sport)

    async def get_player_stats_by_team(self, sport: str, team_name: str) -> List[PlayerStatRecord]:
        return filter_players_by_team(await self.get_player_stats(sport), team_name)

    async def get_player_stats_by_name(self, sport: str, player_name: str) -> List[PlayerStatRecord]:
        return filter_players_by_name(await self.get_player_stats(sport), player_name)
