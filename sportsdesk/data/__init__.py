from .normalizer import TeamIdentityNormalizer, normalize_team_name, team_key
from .game_cache import (
    CacheEntry,
    GameCache,
    GameListing,
    ListingStatus,
    FRESHNESS_THRESHOLD_SECONDS,
    dedupe_games,
    has_scheduled_time,
    post_process_games,
    sort_games,
    time_to_minutes,
)
from .stats_gateway import StatsGateway, filter_players_by_name, filter_players_by_team

__all__ = [
    'TeamIdentityNormalizer',
    'normalize_team_name',
    'team_key',
    'CacheEntry',
    'GameCache',
    'GameListing',
    'ListingStatus',
    'FRESHNESS_THRESHOLD_SECONDS',
    'dedupe_games',
    'has_scheduled_time',
    'post_process_games',
    'sort_games',
    'time_to_minutes',
    'StatsGateway',
    'filter_players_by_name',
    'filter_players_by_team',
]
