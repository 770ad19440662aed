"""Scoreboard client for per-sport game schedules and player stats"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List

import aiohttp

from sportsdesk.config import SourceConfig
from sportsdesk.models import GameRecord, PlayerStatRecord, validate_sport
from sportsdesk.utils.errors import (
    APIError,
    DataUnavailableError,
    MalformedResponseError,
)
from .base_client import BaseAPIClient

logger = logging.getLogger(__name__)


def _check_payload(payload: Any, sport: str, operation: str) -> Dict[str, Any]:
    """Reject non-object payloads and payloads tagged with an ``error`` key."""
    if not isinstance(payload, dict):
        raise MalformedResponseError(sport, operation, "payload was not a JSON object", payload=payload)
    if payload.get('error'):
        message = str(payload.get('message') or payload['error'])
        raise MalformedResponseError(sport, operation, message, payload=payload)
    return payload


def parse_games_payload(payload: Any, sport: str) -> List[GameRecord]:
    """
    Turn a ``{"games": [...]}`` payload into GameRecords

    Entries with fewer than two team names are skipped with a debug log;
    they are scoreboard placeholders, not errors.
    """
    data = _check_payload(payload, sport, "fetch games")
    entries = data.get('games') or []
    if not isinstance(entries, list):
        raise MalformedResponseError(sport, "fetch games", "'games' was not a list", payload=payload)

    games: List[GameRecord] = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        try:
            games.append(GameRecord.from_dict(sport, entry))
        except ValueError as e:
            logger.debug(f"[{sport}] Skipping game entry: {e}")
    return games


def parse_stats_payload(payload: Any, sport: str) -> List[PlayerStatRecord]:
    """Turn a ``{"stats": [...]}`` payload into PlayerStatRecords"""
    data = _check_payload(payload, sport, "fetch stats")
    entries = data.get('stats') or []
    if not isinstance(entries, list):
        raise MalformedResponseError(sport, "fetch stats", "'stats' was not a list", payload=payload)

    players: List[PlayerStatRecord] = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        try:
            players.append(PlayerStatRecord.from_dict(entry))
        except ValueError as e:
            logger.debug(f"[{sport}] Skipping stats entry: {e}")
    return players


class ScoreboardClient(BaseAPIClient):
    """
    Client for the scoreboard service that scrapes league sites

    Endpoints:
        GET /espn?sport=<sport>             -> {"sport", "gamesCount", "games": [...]}
        GET /espn?sport=<sport>&type=stats  -> {"stats": [...]}

    Every call is a single attempt. Transport failures surface as
    DataUnavailableError, error-tagged payloads as MalformedResponseError.
    """

    def __init__(self, config: SourceConfig):
        super().__init__(
            platform_name="scoreboard",
            api_key=config.api_key,
            base_url=config.base_url.rstrip("/"),
            timeout=config.timeout_seconds,
        )
        self.config = config

    async def _fetch(self, sport: str, operation: str, params: Dict[str, str]) -> Any:
        url = f"{self.base_url}/espn"
        try:
            return await self._get_json(url, params=params, sport=sport)
        except APIError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise DataUnavailableError(sport, operation, str(e) or type(e).__name__) from e
        except ValueError as e:
            # Body was not JSON
            raise MalformedResponseError(sport, operation, str(e)) from e

    async def fetch_games(self, sport: str) -> List[GameRecord]:
        """Fetch today's scheduled games for one sport."""
        sport = validate_sport(sport)
        payload = await self._fetch(sport, "fetch games", {"sport": sport})
        games = parse_games_payload(payload, sport)
        logger.debug(f"[{sport}] Source returned {len(games)} games")
        return games

    async def fetch_stats(self, sport: str) -> List[PlayerStatRecord]:
        """Fetch the current player stat lines for one sport."""
        sport = validate_sport(sport)
        payload = await self._fetch(sport, "fetch stats", {"sport": sport, "type": "stats"})
        players = parse_stats_payload(payload, sport)
        logger.debug(f"[{sport}] Source returned {len(players)} player stat lines")
        return players
