"""Per-sport stat display fields and the candidate keys each one reads from"""

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

SPORT_FAMILIES: Dict[str, str] = {
    'nba': 'basketball',
    'ncaab': 'basketball',
    'nfl': 'football',
    'ncaaf': 'football',
    'mlb': 'baseball',
    'nhl': 'hockey',
}


@dataclass(frozen=True)
class StatField:
    """A displayed stat: its label, the keys to try in order, and the default."""

    label: str
    keys: Tuple[str, ...]
    default: str = '0'
    short_label: Optional[str] = None


STAT_FIELDS: Dict[str, List[StatField]] = {
    'basketball': [
        StatField('Points', ('pts', 'points', 'avg', 'pointsPerGame'), '0.00', 'PTS'),
        StatField('Rebounds', ('reb', 'rebounds', 'trb', 'reboundsPerGame'), '0.00'),
        StatField('Assists', ('ast', 'assists', 'assistsPerGame'), '0.00'),
        StatField('Steals', ('stl', 'steals', 'stealsPerGame'), '0.00'),
        StatField('Blocks', ('blk', 'blocks', 'blocksPerGame'), '0.00'),
        StatField('FG%', ('fg_pct', 'fgPct', 'fieldGoalPercentage'), '0.00'),
        StatField('3P%', ('fg3_pct', 'threePtPct', 'threePtPercentage'), '0.00'),
        StatField('Games', ('gp', 'games', 'gamesPlayed'), '0'),
    ],
    'football': [
        StatField('Passing Yards', ('pass_yds', 'passingYards', 'passYds'), '0'),
        StatField('Rushing Yards', ('rush_yds', 'rushingYards', 'rushYds'), '0'),
        StatField('Receiving Yards', ('rec_yds', 'receivingYards', 'recYds'), '0'),
        StatField('Touchdowns', ('td', 'tds', 'touchdowns'), '0', 'TD'),
        StatField('Receptions', ('rec', 'receptions'), '0'),
        StatField('Interceptions', ('int', 'ints', 'interceptions'), '0'),
    ],
    'baseball': [
        StatField('Batting Avg', ('avg', 'ba', 'battingAverage'), '0.00', 'AVG'),
        StatField('Home Runs', ('hr', 'homeRuns'), '0'),
        StatField('RBI', ('rbi', 'rbis', 'runsBattedIn'), '0'),
        StatField('Hits', ('h', 'hits'), '0'),
        StatField('OPS', ('ops',), '0.00'),
    ],
    'hockey': [
        StatField('Goals', ('g', 'goals'), '0', 'G'),
        StatField('Assists', ('a', 'ast', 'assists'), '0'),
        StatField('Points', ('pts', 'points'), '0'),
        StatField('+/-', ('plusMinus', 'pm', '+/-'), '0'),
        StatField('Games', ('gp', 'games', 'gamesPlayed'), '0'),
    ],
}

# Ranking metric for "who is the best ..." questions.
PRIMARY_METRIC: Dict[str, StatField] = {
    'basketball': STAT_FIELDS['basketball'][0],
    'football': STAT_FIELDS['football'][3],
    'baseball': STAT_FIELDS['baseball'][0],
    'hockey': STAT_FIELDS['hockey'][0],
}

_NUMBER_RE = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)$')


def sport_family(sport: str) -> str:
    """Map a league key to its stat family; unknown keys read as basketball."""
    return SPORT_FAMILIES.get((sport or '').lower(), 'basketball')


def resolve_stat(stats: Mapping[str, Any], keys: Tuple[str, ...], default: str = '0') -> Any:
    """First key present with a non-empty value wins."""
    for key in keys:
        value = stats.get(key)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return default


def metric_value(raw: Any) -> float:
    """
    Numeric value for ranking.

    Handles ints, floats and strings like "25.4", ".312" or "1,204".
    Anything unparseable counts as 0.
    """
    if isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        return float(raw) if math.isfinite(raw) else 0.0
    text = str(raw or '').strip().replace(',', '')
    if not _NUMBER_RE.match(text):
        return 0.0
    return float(text)


def stat_fields_for(sport: str) -> List[StatField]:
    return STAT_FIELDS[sport_family(sport)]


def primary_metric_for(sport: str) -> StatField:
    return PRIMARY_METRIC[sport_family(sport)]
