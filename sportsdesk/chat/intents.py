"""
Intent classification and response dispatch for the betting chat

Free text is matched against an ordered list of rules; the first rule that
fires decides the intent. Matching is pure and synchronous. Answering an
intent may fetch games or stats, and any fetch failure becomes a reply
instead of an exception.
"""

from __future__ import annotations

import logging
import random
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, Optional, Sequence

from sportsdesk.data.game_cache import GameCache, ListingStatus
from sportsdesk.data.stats_gateway import StatsGateway, filter_players_by_name
from sportsdesk.utils.errors import FETCH_ERRORS
from .formatter import ResponseFormatter
from .replies import (
    BETTING_RESPONSES,
    BETTING_TERM_GROUPS,
    CLARIFY_MESSAGES,
    FALLBACK_MESSAGE,
    GREETINGS,
)
from .stat_tables import metric_value, primary_metric_for, resolve_stat

logger = logging.getLogger(__name__)


# ============================================================================
# INTENT TYPES
# ============================================================================

class IntentKind(str, Enum):
    PLAYER_STATS = "player_stats"
    TOP_PERFORMERS = "top_performers"
    SPORT_GAMES = "sport_games"
    CLARIFY_SPORT = "clarify_sport"
    ALL_GAMES = "all_games"
    BETTING_TERM = "betting_term"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class IntentMatch:
    """Result of matching one message; fields beyond ``kind`` depend on it."""

    kind: IntentKind
    sport: Optional[str] = None
    player_name: Optional[str] = None
    term_group: Optional[str] = None
    rule: str = ""


Matcher = Callable[[str], Optional[IntentMatch]]


@dataclass(frozen=True)
class IntentRule:
    name: str
    matcher: Matcher


# ============================================================================
# SPORT VOCABULARY
# ============================================================================

SPORT_NAME_MAP: Dict[str, str] = {
    'football': 'nfl',
    'nfl': 'nfl',
    'basketball': 'nba',
    'nba': 'nba',
    'baseball': 'mlb',
    'mlb': 'mlb',
    'hockey': 'nhl',
    'nhl': 'nhl',
    'college football': 'ncaaf',
    'ncaa football': 'ncaaf',
    'ncaaf': 'ncaaf',
    'college basketball': 'ncaab',
    'ncaa basketball': 'ncaab',
    'ncaab': 'ncaab',
}


def resolve_sport_name(name: str) -> Optional[str]:
    """Map a sport or league name to its league key, or None."""
    return SPORT_NAME_MAP.get(' '.join((name or '').lower().split()))


# Bare sport names that have a single league.
GENERIC_SPORTS = (('hockey', 'nhl'), ('baseball', 'mlb'))

# (sport word, college league, pro league, college qualifier, pro qualifier)
AMBIGUOUS_SPORTS = (
    ('football', 'ncaaf', 'nfl', r"\b(college|ncaa|ncaaf)\b", r"\b(nfl|pro|professional)\b"),
    ('basketball', 'ncaab', 'nba', r"\b(college|ncaa|ncaab)\b", r"\b(nba|pro|professional)\b"),
)

LEAGUE_PATTERNS = (
    ('nfl', re.compile(r"\b(nfl|national football league)\b", re.I)),
    ('nba', re.compile(r"\b(nba|national basketball association)\b", re.I)),
    ('mlb', re.compile(r"\b(mlb|major league baseball)\b", re.I)),
    ('nhl', re.compile(r"\b(nhl|national hockey league|hockey)\b", re.I)),
    ('ncaaf', re.compile(r"\b(ncaaf|college football|ncaa football)\b", re.I)),
    ('ncaab', re.compile(r"\b(ncaab|college basketball|ncaa basketball)\b", re.I)),
)

AGGREGATE_TERMS = ('game', 'play', 'bet', 'odds')

_COMPILED_BETTING_GROUPS = tuple(
    (name, re.compile(pattern, re.I)) for name, pattern, _ in BETTING_TERM_GROUPS
)


# ============================================================================
# PLAYER QUESTIONS
# ============================================================================

_PLAYER_NAME_PATTERNS = (
    re.compile(r"\bwhat(?:'s|\s+is|\s+are)\s+(?P<name>.+?)\s+averag(?:ing|e)\b", re.I),
    re.compile(r"\bhow(?:'s|\s+is|\s+has|\s+are)\s+(?P<name>.+?)\s+(?:doing|playing|performing|been\s+playing)\b", re.I),
    re.compile(r"\bhow(?:'s|\s+is|\s+are)\s+(?P<name>.+?)(?:'s|s')?\s+(?:stats|numbers)\b", re.I),
)
_LEADERS_RE = re.compile(r"\bwho(?:'s|\s+is|\s+are)\s+(?:the\s+)?(?:best|top|leading)\b", re.I)

_NAME_TAIL_RE = re.compile(
    r"\s+(?:(?:in|for|on|with)\s+(?:the\s+)?"
    r"(?:nba|nfl|mlb|nhl|ncaaf|ncaab|ncaa|college|league|basketball|football|baseball|hockey)"
    r"|(?:this|last)\s+(?:season|year|week|month)|lately|so\s+far)\b.*$",
    re.I,
)

# (pattern, league, league when a college qualifier is present), tried in order.
_STAT_SPORT_RULES = (
    (re.compile(r"\b(football|nfl)\b"), 'nfl', 'ncaaf'),
    (re.compile(r"\b(baseball|mlb)\b"), 'mlb', 'mlb'),
    (re.compile(r"\b(hockey|nhl)\b"), 'nhl', 'nhl'),
    (re.compile(r"\b(college football|ncaa football|ncaaf)\b"), 'ncaaf', 'ncaaf'),
    (re.compile(r"\b(college basketball|ncaa basketball|ncaab)\b"), 'ncaab', 'ncaab'),
)
_COLLEGE_RE = re.compile(r"\b(college|ncaa)\b")
DEFAULT_STAT_SPORT = 'nba'


def infer_stat_sport(text: str) -> str:
    """League for a player question; basketball when nothing else is named."""
    lower = (text or '').lower()
    college = bool(_COLLEGE_RE.search(lower))
    for pattern, league, college_league in _STAT_SPORT_RULES:
        if pattern.search(lower):
            return college_league if college else league
    return DEFAULT_STAT_SPORT


def extract_player_name(text: str) -> Optional[str]:
    for pattern in _PLAYER_NAME_PATTERNS:
        match = pattern.search(text or '')
        if not match:
            continue
        name = _NAME_TAIL_RE.sub('', match.group('name'))
        name = name.strip(" \t?!.,'\"")
        if name:
            return name
    return None


# ============================================================================
# RULE MATCHERS (highest priority first)
# ============================================================================

def match_player_question(text: str) -> Optional[IntentMatch]:
    name = extract_player_name(text)
    if name:
        return IntentMatch(IntentKind.PLAYER_STATS, sport=infer_stat_sport(text), player_name=name)
    if _LEADERS_RE.search(text or ''):
        return IntentMatch(IntentKind.TOP_PERFORMERS, sport=infer_stat_sport(text))
    return None


def match_generic_sport(text: str) -> Optional[IntentMatch]:
    lower = (text or '').lower()
    for generic_name, league in GENERIC_SPORTS:
        if generic_name in lower:
            return IntentMatch(IntentKind.SPORT_GAMES, sport=league)
    return None


def match_ambiguous_sport(text: str) -> Optional[IntentMatch]:
    lower = (text or '').lower()
    for word, college_league, pro_league, college_re, pro_re in AMBIGUOUS_SPORTS:
        if not re.search(rf"\b{word}\b", lower):
            continue
        if re.search(college_re, lower):
            return IntentMatch(IntentKind.SPORT_GAMES, sport=college_league)
        if re.search(pro_re, lower):
            return IntentMatch(IntentKind.SPORT_GAMES, sport=pro_league)
        return IntentMatch(IntentKind.CLARIFY_SPORT, sport=word)
    return None


def match_league(text: str) -> Optional[IntentMatch]:
    for league, pattern in LEAGUE_PATTERNS:
        if pattern.search(text or ''):
            return IntentMatch(IntentKind.SPORT_GAMES, sport=league)
    return None


def match_aggregate_question(text: str) -> Optional[IntentMatch]:
    lower = (text or '').lower()
    if any(term in lower for term in AGGREGATE_TERMS):
        return IntentMatch(IntentKind.ALL_GAMES)
    return None


def match_betting_term(text: str) -> Optional[IntentMatch]:
    for group, pattern in _COMPILED_BETTING_GROUPS:
        if pattern.search(text or ''):
            return IntentMatch(IntentKind.BETTING_TERM, term_group=group)
    return None


DEFAULT_RULES: Sequence[IntentRule] = (
    IntentRule('player_question', match_player_question),
    IntentRule('generic_sport', match_generic_sport),
    IntentRule('ambiguous_sport', match_ambiguous_sport),
    IntentRule('league', match_league),
    IntentRule('aggregate_question', match_aggregate_question),
    IntentRule('betting_term', match_betting_term),
)


# ============================================================================
# CLASSIFIER
# ============================================================================

class IntentClassifier:
    """
    Answers chat messages about games, odds and players

    The cache and gateway are injected so one GameCache can be shared by
    every conversation in the process, and so tests can pass fakes.
    """

    def __init__(
        self,
        game_cache: GameCache,
        stats_gateway: StatsGateway,
        formatter: Optional[ResponseFormatter] = None,
        rng: Optional[random.Random] = None,
        rules: Sequence[IntentRule] = DEFAULT_RULES,
        top_performers_limit: int = 5,
    ):
        self.game_cache = game_cache
        self.stats_gateway = stats_gateway
        self.formatter = formatter or ResponseFormatter()
        self.rng = rng or random.Random()
        self.rules = tuple(rules)
        self.top_performers_limit = top_performers_limit

        self._handlers = {
            IntentKind.PLAYER_STATS: self._answer_player_stats,
            IntentKind.TOP_PERFORMERS: self._answer_top_performers,
            IntentKind.SPORT_GAMES: self._answer_sport_games,
            IntentKind.CLARIFY_SPORT: self._answer_clarify,
            IntentKind.ALL_GAMES: self._answer_all_games,
            IntentKind.BETTING_TERM: self._answer_betting_term,
            IntentKind.FALLBACK: self._answer_fallback,
        }

    def match(self, text: str) -> IntentMatch:
        """First matching rule wins; no match means FALLBACK."""
        for rule in self.rules:
            result = rule.matcher(text or '')
            if result is not None:
                return replace(result, rule=rule.name)
        return IntentMatch(IntentKind.FALLBACK, rule='fallback')

    async def classify(self, text: str) -> str:
        """Reply to one user message. Fetch failures come back as text."""
        intent = self.match(text)
        logger.debug(f"Matched intent {intent.kind.value} via {intent.rule} (sport={intent.sport})")
        return await self._handlers[intent.kind](intent)

    def greeting(self) -> str:
        return self.rng.choice(GREETINGS)

    # ========================================================================
    # HANDLERS
    # ========================================================================

    async def _answer_player_stats(self, intent: IntentMatch) -> str:
        sport = intent.sport or DEFAULT_STAT_SPORT
        try:
            players = await self.stats_gateway.get_player_stats(sport)
        except FETCH_ERRORS as e:
            logger.warning(f"[player_stats] Stats unavailable for {sport}: {e}")
            return self.formatter.stats_trouble(sport)
        if not players:
            logger.warning(f"[player_stats] Source returned no {sport} stats")
            return self.formatter.stats_trouble(sport)

        matches = filter_players_by_name(players, intent.player_name or '')
        if not matches:
            return self.formatter.format_player_not_found(intent.player_name or '', sport)
        return self.formatter.format_player_stats(matches[0], sport)

    async def _answer_top_performers(self, intent: IntentMatch) -> str:
        sport = intent.sport or DEFAULT_STAT_SPORT
        try:
            players = await self.stats_gateway.get_player_stats(sport)
        except FETCH_ERRORS as e:
            logger.warning(f"[top_performers] Stats unavailable for {sport}: {e}")
            return self.formatter.stats_trouble(sport)
        if not players:
            logger.warning(f"[top_performers] Source returned no {sport} stats")
            return self.formatter.stats_trouble(sport)

        metric = primary_metric_for(sport)
        ranked = sorted(
            players,
            key=lambda p: metric_value(resolve_stat(p.stats, metric.keys, metric.default)),
            reverse=True,
        )
        return self.formatter.format_top_performers(ranked[:self.top_performers_limit], sport)

    async def _answer_sport_games(self, intent: IntentMatch) -> str:
        sport = intent.sport
        listing = await self.game_cache.get_listing(sport)
        if listing.status == ListingStatus.UNAVAILABLE:
            return self.formatter.listing_unavailable(sport)
        if listing.status == ListingStatus.EMPTY:
            return self.formatter.listing_empty(sport)
        return self.formatter.format_sport_listing(sport, listing.games)

    async def _answer_clarify(self, intent: IntentMatch) -> str:
        return CLARIFY_MESSAGES[intent.sport]

    async def _answer_all_games(self, intent: IntentMatch) -> str:
        listing = await self.game_cache.get_all_sports_listing()
        if listing.status == ListingStatus.UNAVAILABLE:
            return self.formatter.all_games_unavailable()
        if listing.status == ListingStatus.EMPTY:
            return self.formatter.all_games_empty()
        return self.formatter.format_all_games(listing.games)

    async def _answer_betting_term(self, intent: IntentMatch) -> str:
        return self.rng.choice(BETTING_RESPONSES[intent.term_group])

    async def _answer_fallback(self, intent: IntentMatch) -> str:
        return FALLBACK_MESSAGE
