"""Boundary contract for anything that can supply raw games and stats"""

from typing import List, Protocol, runtime_checkable

from sportsdesk.models import GameRecord, PlayerStatRecord


@runtime_checkable
class RawDataSource(Protocol):
    """
    Fallible, possibly slow supplier of per-sport records.

    Implementations raise a SportsDataError subclass (or let transport
    errors escape) instead of returning an error-tagged payload.
    """

    async def fetch_games(self, sport: str) -> List[GameRecord]:
        ...

    async def fetch_stats(self, sport: str) -> List[PlayerStatRecord]:
        ...
