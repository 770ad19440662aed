from .base_client import BaseAPIClient
from .scoreboard_client import (
    ScoreboardClient,
    parse_games_payload,
    parse_stats_payload,
)
from .source import RawDataSource

__all__ = [
    'BaseAPIClient',
    'ScoreboardClient',
    'parse_games_payload',
    'parse_stats_payload',
    'RawDataSource',
]
