"""Team-name canonicalization used to spot the same matchup listed twice"""

import re
from typing import FrozenSet, Iterable

# Multi-word cities come first so "kansas city" wins over a bare "kansas".
CITY_PREFIXES = (
    'los angeles', 'new york', 'golden state', 'oklahoma city', 'tampa bay',
    'green bay', 'new england', 'new orleans', 'san francisco', 'san diego',
    'san antonio', 'kansas city', 'las vegas', 'st louis', 'st. louis',
    'salt lake', 'new jersey',
    'arizona', 'atlanta', 'baltimore', 'boston', 'brooklyn', 'buffalo',
    'calgary', 'carolina', 'charlotte', 'chicago', 'cincinnati', 'cleveland',
    'colorado', 'columbus', 'dallas', 'denver', 'detroit', 'edmonton',
    'florida', 'houston', 'indiana', 'indianapolis', 'jacksonville',
    'memphis', 'miami', 'milwaukee', 'minnesota', 'montreal', 'nashville',
    'oakland', 'orlando', 'ottawa', 'philadelphia', 'phoenix', 'pittsburgh',
    'portland', 'sacramento', 'seattle', 'tennessee', 'texas', 'toronto',
    'utah', 'vancouver', 'washington', 'winnipeg',
)

SHORT_PREFIXES = ('la', 'ny', 'gs', 'okc', 'tb', 'gb', 'ne', 'no', 'sf', 'sd', 'sa', 'kc')

SUFFIXES = ('united', 'fc', 'city', 'town')

# Prefixes only count as prefixes when something follows them.
_CITY_RE = re.compile(r'^(?:' + '|'.join(re.escape(c) for c in CITY_PREFIXES) + r')\s+(?=\S)')
_SHORT_RE = re.compile(r'^(?:' + '|'.join(SHORT_PREFIXES) + r')\.?\s+(?=\S)')
_SUFFIX_RE = re.compile(r'(?<=\S)\s+(?:' + '|'.join(SUFFIXES) + r')$')
_NON_LETTERS_RE = re.compile(r'[^a-z]')


def normalize_team_name(raw_name: str) -> str:
    """
    Canonicalize a team name for equality checks.

    lowercase -> strip city prefix -> strip short prefix -> strip suffix ->
    drop non-letters. Never raises; may return an empty string.
    """
    name = ' '.join(str(raw_name or '').lower().split())
    name = _CITY_RE.sub('', name, count=1)
    name = _SHORT_RE.sub('', name, count=1)
    name = _SUFFIX_RE.sub('', name, count=1)
    return _NON_LETTERS_RE.sub('', name).strip()


def team_key(teams: Iterable[str]) -> FrozenSet[str]:
    """Order-independent identity of a matchup."""
    return frozenset(normalize_team_name(t) for t in teams)


class TeamIdentityNormalizer:
    """Callable wrapper so the cache can take a custom normalizer in tests."""

    def normalize(self, raw_name: str) -> str:
        return normalize_team_name(raw_name)

    def key(self, teams: Iterable[str]) -> FrozenSet[str]:
        return frozenset(self.normalize(t) for t in teams)

    def same_game(self, teams_a: Iterable[str], teams_b: Iterable[str]) -> bool:
        return self.key(teams_a) == self.key(teams_b)
