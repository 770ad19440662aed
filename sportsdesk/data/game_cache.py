"""Per-sport game cache with retry, stale fallback and cross-sport fan-out"""

from __future__ import annotations

import asyncio
import logging
import re
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Awaitable, Callable, Dict, List, Optional

from sportsdesk.api_clients.source import RawDataSource
from sportsdesk.config import CacheConfig
from sportsdesk.models import GameRecord, SUPPORTED_SPORTS, validate_sport
from sportsdesk.utils.errors import FETCH_ERRORS, as_fetch_error
from .normalizer import TeamIdentityNormalizer

logger = logging.getLogger(__name__)

FRESHNESS_THRESHOLD_SECONDS = 300.0
DEFAULT_MAX_ATTEMPTS = 2
DEFAULT_RETRY_DELAY_SECONDS = 2.0

_TIME_TOKEN_RE = re.compile(r'\d{1,2}:\d{2}')
_CLOCK_RE = re.compile(r'(\d{1,2}):(\d{2})\s*([AaPp][Mm])?')

# "99:99 PM" under the same conversion rule, so untimed games sort last.
_MISSING_TIME_MINUTES = (99 + 12) * 60 + 99


# ============================================================================
# POST-PROCESSING
# ============================================================================

def has_scheduled_time(game: GameRecord) -> bool:
    """True when the game's time carries an H:MM token (TBD rows do not)."""
    return bool(game.time and _TIME_TOKEN_RE.search(game.time))


def time_to_minutes(time_str: Optional[str]) -> int:
    """
    Minutes after midnight for an "H:MM AM/PM" string.

    Composite "<date> <time>" strings use their first clock token. PM adds
    12 hours except at 12 PM; 12 AM subtracts 12 hours.
    """
    match = _CLOCK_RE.search(time_str or '')
    if not match:
        return _MISSING_TIME_MINUTES

    hours, minutes = int(match.group(1)), int(match.group(2))
    period = (match.group(3) or '').upper()
    total = hours * 60 + minutes
    if period == 'PM' and hours != 12:
        total += 12 * 60
    if period == 'AM' and hours == 12:
        total -= 12 * 60
    return total


def dedupe_games(
    games: List[GameRecord],
    normalizer: Optional[TeamIdentityNormalizer] = None,
) -> List[GameRecord]:
    """Keep the first game for each normalized team set, in input order."""
    normalizer = normalizer or TeamIdentityNormalizer()
    seen = set()
    unique: List[GameRecord] = []
    for game in games:
        key = normalizer.key(game.teams)
        if key in seen:
            continue
        seen.add(key)
        unique.append(game)
    return unique


def sort_games(games: List[GameRecord]) -> List[GameRecord]:
    """Stable ascending sort by time of day."""
    return sorted(games, key=lambda g: time_to_minutes(g.time))


def post_process_games(
    games: List[GameRecord],
    normalizer: Optional[TeamIdentityNormalizer] = None,
) -> List[GameRecord]:
    """filter -> dedup -> sort, in that order."""
    timed = [g for g in games if has_scheduled_time(g)]
    return sort_games(dedupe_games(timed, normalizer))


# ============================================================================
# CACHE TYPES
# ============================================================================

@dataclass
class CacheEntry:
    """Games for one sport plus the clock reading of their last refresh."""

    games: List[GameRecord]
    last_updated_at: float


class ListingStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    UNAVAILABLE = "unavailable"


@dataclass
class GameListing:
    """
    Typed outcome of a games lookup

    EMPTY means the source answered with nothing; UNAVAILABLE means the
    fetch failed and no cached data could stand in.
    """

    sport: Optional[str]
    status: ListingStatus
    games: List[GameRecord] = field(default_factory=list)
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.status == ListingStatus.OK


# ============================================================================
# GAME CACHE
# ============================================================================

class GameCache:
    """
    Process-lifetime cache of post-processed games, one entry per sport

    Concurrent refreshes of the same sport are not serialized; the last
    successful writer replaces the entry.
    """

    def __init__(
        self,
        source: RawDataSource,
        ttl_seconds: float = FRESHNESS_THRESHOLD_SECONDS,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        retry_delay: float = DEFAULT_RETRY_DELAY_SECONDS,
        normalizer: Optional[TeamIdentityNormalizer] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Args:
            source: Supplier of raw games
            ttl_seconds: Age below which an entry is served without fetching
            max_attempts: Fetch attempts per refresh before giving up
            retry_delay: Seconds to wait between attempts
            normalizer: Team-name normalizer used for dedup
            clock: Monotonic seconds source
            sleep: Coroutine used for the retry delay
        """
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self.source = source
        self.ttl_seconds = ttl_seconds
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self.normalizer = normalizer or TeamIdentityNormalizer()
        self._clock = clock
        self._sleep = sleep
        self._entries: Dict[str, CacheEntry] = {}

    @classmethod
    def from_config(cls, source: RawDataSource, config: CacheConfig, **kwargs) -> "GameCache":
        return cls(
            source,
            ttl_seconds=config.ttl_seconds,
            max_attempts=config.max_attempts,
            retry_delay=config.retry_delay_seconds,
            **kwargs,
        )

    # ========================================================================
    # INSPECTION
    # ========================================================================

    def cached_games(self, sport: str) -> List[GameRecord]:
        entry = self._entries.get(validate_sport(sport))
        return list(entry.games) if entry else []

    def is_fresh(self, sport: str) -> bool:
        entry = self._entries.get(validate_sport(sport))
        if not entry or not entry.games:
            return False
        return self._clock() - entry.last_updated_at < self.ttl_seconds

    def invalidate(self, sport: Optional[str] = None) -> None:
        """Drop one sport's entry, or every entry when sport is None."""
        if sport is None:
            self._entries.clear()
        else:
            self._entries.pop(validate_sport(sport), None)

    # ========================================================================
    # FETCHING
    # ========================================================================

    async def get_games(self, sport: str) -> List[GameRecord]:
        """
        Games for one sport, fresh from cache or fetched with retry

        Returns:
            Post-processed games (possibly empty)

        Raises:
            The last fetch error, when every attempt failed and nothing is
            cached for the sport. Source errors outside FETCH_ERRORS are
            wrapped in DataUnavailableError.
        """
        sport = validate_sport(sport)
        if self.is_fresh(sport):
            logger.debug(f"[{sport}] Serving {len(self._entries[sport].games)} cached games")
            return list(self._entries[sport].games)

        attempts_left = self.max_attempts
        while True:
            try:
                raw_games = await self.source.fetch_games(sport)
            except Exception as source_error:
                e = as_fetch_error(source_error, sport, "fetch games")
                attempts_left -= 1
                if attempts_left > 0:
                    logger.warning(
                        f"[{sport}] Fetching games failed: {e}. "
                        f"Retrying in {self.retry_delay:.1f}s ({attempts_left} attempts left)"
                    )
                    await self._sleep(self.retry_delay)
                    continue

                logger.error(f"[{sport}] Fetching games failed after {self.max_attempts} attempts: {e}")
                stale = self._entries.get(sport)
                if stale and stale.games:
                    logger.warning(f"[{sport}] Returning {len(stale.games)} stale cached games")
                    return list(stale.games)
                raise e

            games = post_process_games(list(raw_games or []), self.normalizer)
            if games:
                self._entries[sport] = CacheEntry(games=games, last_updated_at=self._clock())
            logger.info(f"[{sport}] Fetched {len(games)} games")
            return list(games)

    async def get_games_by_sport(self, sport: str) -> List[GameRecord]:
        return await self.get_games(sport)

    async def get_games_for_all_sports(self) -> List[GameRecord]:
        """
        Fan out get_games over every supported sport

        Partial success is not an error. With no games at all, the first
        failure (in sport order) is raised; with no failures either, the
        result is empty.
        """
        results = await asyncio.gather(
            *(self.get_games(sport) for sport in SUPPORTED_SPORTS),
            return_exceptions=True,
        )

        all_games: List[GameRecord] = []
        errors: List[Exception] = []
        for sport, result in zip(SUPPORTED_SPORTS, results):
            if isinstance(result, Exception):
                logger.error(f"Error fetching {sport} games: {result}")
                errors.append(as_fetch_error(result, sport, "fetch games"))
            elif isinstance(result, BaseException):
                # Cancellation and interpreter exits are not per-sport failures
                raise result
            else:
                all_games.extend(result)

        if all_games:
            return all_games
        if errors:
            raise errors[0]
        return all_games

    async def get_games_by_team(self, team_name: str) -> List[GameRecord]:
        """Games across all sports where either team contains team_name."""
        needle = (team_name or '').strip().lower()
        if not needle:
            return []
        all_games = await self.get_games_for_all_sports()
        return [g for g in all_games if any(needle in team.lower() for team in g.teams)]

    async def get_odds_by_sport(self, sport: str) -> List[str]:
        games = await self.get_games(sport)
        return [g.odds for g in games if g.odds]

    # ========================================================================
    # TYPED LISTINGS
    # ========================================================================

    async def get_listing(self, sport: str) -> GameListing:
        """get_games, with failure and emptiness reported as a status."""
        sport = validate_sport(sport)
        try:
            games = await self.get_games(sport)
        except FETCH_ERRORS as e:
            logger.warning(f"[{sport}] Listing unavailable: {e}")
            return GameListing(sport=sport, status=ListingStatus.UNAVAILABLE, error=e)
        status = ListingStatus.OK if games else ListingStatus.EMPTY
        return GameListing(sport=sport, status=status, games=games)

    async def get_all_sports_listing(self) -> GameListing:
        try:
            games = await self.get_games_for_all_sports()
        except FETCH_ERRORS as e:
            logger.warning(f"All-sports listing unavailable: {e}")
            return GameListing(sport=None, status=ListingStatus.UNAVAILABLE, error=e)
        status = ListingStatus.OK if games else ListingStatus.EMPTY
        return GameListing(sport=None, status=status, games=games)
