"""Game record model representing one scheduled matchup"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

SUPPORTED_SPORTS: Tuple[str, ...] = ('nfl', 'nba', 'mlb', 'nhl', 'ncaaf', 'ncaab')


def validate_sport(sport: str) -> str:
    """Lowercase a sport key and reject anything outside SUPPORTED_SPORTS"""
    sport_norm = str(sport or "").strip().lower()
    if sport_norm not in SUPPORTED_SPORTS:
        raise ValueError(f"sport must be one of {SUPPORTED_SPORTS}, got {sport!r}")
    return sport_norm


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass
class GameRecord:
    """
    A single game as reported by the scoreboard source

    ``time`` is either a bare "H:MM AM/PM" string or a composite
    "<date> <time>" string from schedule pages. ``odds`` is an opaque
    display string.
    """

    sport: str  # one of SUPPORTED_SPORTS
    teams: Tuple[str, str]  # (away/first listed, home/second listed)
    time: Optional[str] = None
    odds: Optional[str] = None

    def __post_init__(self):
        """Validate game data after initialization"""
        self.sport = validate_sport(self.sport)
        teams = tuple(self.teams)
        if len(teams) != 2:
            raise ValueError(f"teams must have exactly 2 entries, got {len(teams)}: {teams!r}")
        self.teams = (str(teams[0]), str(teams[1]))

    def __str__(self) -> str:
        return f"{self.teams[0]} vs {self.teams[1]} [{self.sport}]"

    @classmethod
    def from_dict(cls, sport: str, raw: Dict[str, Any]) -> "GameRecord":
        """
        Build a record from one entry of a source payload

        Extra team names beyond the first two are dropped, matching how the
        scoreboard pages list a matchup.
        """
        teams = [str(t).strip() for t in (raw.get('teams') or []) if str(t).strip()]
        if len(teams) < 2:
            raise ValueError(f"game entry needs at least 2 teams, got {teams!r}")

        return cls(
            sport=raw.get('sport') or sport,
            teams=(teams[0], teams[1]),
            time=_clean(raw.get('time')),
            odds=_clean(raw.get('odds')),
        )
