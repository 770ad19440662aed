import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from sportsdesk.api_clients import (
    ScoreboardClient,
    parse_games_payload,
    parse_stats_payload,
)
from sportsdesk.config import SourceConfig
from sportsdesk.models import GameRecord, PlayerStatRecord
from sportsdesk.utils.errors import (
    DataUnavailableError,
    MalformedResponseError,
    RateLimitError,
    ServerError,
)


def test_parse_games_payload_builds_records():
    payload = {
        "sport": "nba",
        "gamesCount": 2,
        "games": [
            {"sport": "nba", "teams": ["Lakers", "Celtics", "extra"], "time": "7:30 PM", "odds": "LAL -3"},
            {"sport": "nba", "teams": ["Knicks"], "time": "8:00 PM"},
        ],
    }

    games = parse_games_payload(payload, "nba")

    assert games == [GameRecord(sport="nba", teams=("Lakers", "Celtics"), time="7:30 PM", odds="LAL -3")]


def test_error_tagged_payload_is_malformed():
    with pytest.raises(MalformedResponseError) as excinfo:
        parse_games_payload({"error": "Internal server error", "message": "Failed to scrape ESPN"}, "nfl")
    assert "Failed to scrape ESPN" in str(excinfo.value)

    with pytest.raises(MalformedResponseError):
        parse_stats_payload(["not", "an", "object"], "nba")


def test_parse_stats_payload_nested_and_flat_rows():
    payload = {
        "stats": [
            {"name": "LeBron James", "team": "LAL", "position": "SF", "stats": {"pts": 25.7}},
            {"name": "Jayson Tatum", "team": "BOS", "pointsPerGame": 26.9, "reboundsPerGame": 8.1},
            {"team": "nameless"},
        ]
    }

    players = parse_stats_payload(payload, "nba")

    assert players[0] == PlayerStatRecord("LeBron James", "LAL", "SF", {"pts": 25.7})
    assert players[1].stats == {"pointsPerGame": 26.9, "reboundsPerGame": 8.1}
    assert len(players) == 2


@pytest.mark.asyncio
async def test_fetch_games_uses_sport_query():
    client = ScoreboardClient(SourceConfig(base_url="http://scores.test/api/"))
    client._get_json = AsyncMock(return_value={"games": [{"teams": ["Bruins", "Rangers"], "time": "7:00 PM"}]})

    games = await client.fetch_games("NHL")

    client._get_json.assert_awaited_once_with(
        "http://scores.test/api/espn", params={"sport": "nhl"}, sport="nhl"
    )
    assert games[0].sport == "nhl"


@pytest.mark.asyncio
async def test_fetch_stats_uses_stats_type():
    client = ScoreboardClient(SourceConfig(base_url="http://scores.test/api"))
    client._get_json = AsyncMock(return_value={"stats": []})

    assert await client.fetch_stats("mlb") == []
    client._get_json.assert_awaited_once_with(
        "http://scores.test/api/espn", params={"sport": "mlb", "type": "stats"}, sport="mlb"
    )


@pytest.mark.asyncio
async def test_transport_errors_become_data_unavailable():
    client = ScoreboardClient(SourceConfig())
    client._get_json = AsyncMock(side_effect=aiohttp.ClientConnectionError("refused"))

    with pytest.raises(DataUnavailableError) as excinfo:
        await client.fetch_games("nba")
    assert excinfo.value.sport == "nba"

    client._get_json = AsyncMock(side_effect=asyncio.TimeoutError())
    with pytest.raises(DataUnavailableError):
        await client.fetch_stats("nba")


@pytest.mark.asyncio
async def test_http_errors_pass_through():
    client = ScoreboardClient(SourceConfig())
    client._get_json = AsyncMock(side_effect=ServerError("scoreboard", 500, "boom", sport="nba"))

    with pytest.raises(ServerError) as excinfo:
        await client.fetch_games("nba")
    assert isinstance(excinfo.value, DataUnavailableError)


@pytest.mark.asyncio
async def test_requests_need_an_open_session():
    client = ScoreboardClient(SourceConfig())
    with pytest.raises(RuntimeError):
        await client.fetch_games("nba")


def test_client_built_from_source_config():
    client = ScoreboardClient(SourceConfig(base_url="http://scores.test/api/", timeout_seconds=15, api_key="k3y"))

    assert client.base_url == "http://scores.test/api"
    assert client.timeout_seconds == 15
    assert client._build_headers() == {"Accept": "application/json", "Authorization": "Bearer k3y"}
    assert ScoreboardClient(SourceConfig())._build_headers() == {"Accept": "application/json"}


@pytest.mark.asyncio
async def test_status_mapping():
    client = ScoreboardClient(SourceConfig())

    with pytest.raises(RateLimitError) as excinfo:
        await client._handle_response_status(MagicMock(status=429), sport="nba")
    assert excinfo.value.status_code == 429
    assert isinstance(excinfo.value, DataUnavailableError)

    server_down = MagicMock(status=503)
    server_down.text = AsyncMock(return_value="maintenance")
    with pytest.raises(ServerError):
        await client._handle_response_status(server_down, sport="nba")

    await client._handle_response_status(MagicMock(status=200))
