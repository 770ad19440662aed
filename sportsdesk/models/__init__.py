from .game import GameRecord, SUPPORTED_SPORTS, validate_sport
from .player_stats import PlayerStatRecord

__all__ = [
    'GameRecord',
    'SUPPORTED_SPORTS',
    'validate_sport',
    'PlayerStatRecord',
]
