from unittest.mock import AsyncMock

import pytest

from sportsdesk.data import GameCache, StatsGateway
from sportsdesk.models import GameRecord, PlayerStatRecord


class FakeSource:
    """Scripted RawDataSource: each sport replays its outcomes, repeating the last one."""

    def __init__(self):
        self._games = {}
        self._stats = {}
        self.game_calls = []
        self.stats_calls = []

    def script_games(self, sport, *outcomes):
        self._games[sport] = list(outcomes)

    def script_stats(self, sport, *outcomes):
        self._stats[sport] = list(outcomes)

    @staticmethod
    def _next(queue):
        if not queue:
            return []
        outcome = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return list(outcome)

    async def fetch_games(self, sport):
        self.game_calls.append(sport)
        return self._next(self._games.get(sport, []))

    async def fetch_stats(self, sport):
        self.stats_calls.append(sport)
        return self._next(self._stats.get(sport, []))


class FakeClock:
    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_game(sport="nba", away="Lakers", home="Celtics", time="7:30 PM", odds=None):
    return GameRecord(sport=sport, teams=(away, home), time=time, odds=odds)


def make_player(name, team="LAL", position=None, **stats):
    return PlayerStatRecord(name=name, team=team, position=position, stats=stats)


@pytest.fixture
def source():
    return FakeSource()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sleeper():
    return AsyncMock()


@pytest.fixture
def cache(source, clock, sleeper):
    return GameCache(source, clock=clock, sleep=sleeper)


@pytest.fixture
def gateway(source):
    return StatsGateway(source)
