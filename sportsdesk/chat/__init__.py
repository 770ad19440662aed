from .formatter import ResponseFormatter, insight_for
from .intents import (
    DEFAULT_RULES,
    IntentClassifier,
    IntentKind,
    IntentMatch,
    IntentRule,
    extract_player_name,
    infer_stat_sport,
    resolve_sport_name,
)
from .replies import FALLBACK_MESSAGE, GREETINGS, WELCOME_MESSAGE

__all__ = [
    'ResponseFormatter',
    'insight_for',
    'DEFAULT_RULES',
    'IntentClassifier',
    'IntentKind',
    'IntentMatch',
    'IntentRule',
    'extract_player_name',
    'infer_stat_sport',
    'resolve_sport_name',
    'FALLBACK_MESSAGE',
    'GREETINGS',
    'WELCOME_MESSAGE',
]
