"""Player statistics model"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

StatValue = Union[str, int, float]

_IDENTITY_KEYS = {'name', 'team', 'position', 'stats'}


@dataclass
class PlayerStatRecord:
    """
    One player's line from a stats source

    Stat keys are whatever the source uses (``pts``, ``pointsPerGame``,
    ``avg`` ...). Readers resolve them through candidate-key chains.
    """

    name: str
    team: str
    position: Optional[str] = None
    stats: Dict[str, StatValue] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.name} ({self.team})"

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "PlayerStatRecord":
        """
        Build a record from either a nested or a flat source row

        Nested: ``{"name", "team", "position", "stats": {...}}``.
        Flat: every key besides name/team/position is treated as a stat.
        """
        name = str(raw.get('name') or '').strip()
        if not name:
            raise ValueError("player entry is missing a name")

        nested = raw.get('stats')
        if isinstance(nested, dict):
            stats = dict(nested)
        else:
            stats = {k: v for k, v in raw.items() if k not in _IDENTITY_KEYS}

        position = raw.get('position')
        return cls(
            name=name,
            team=str(raw.get('team') or '').strip(),
            position=str(position).strip() or None if position is not None else None,
            stats=stats,
        )
