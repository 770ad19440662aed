"""Sports betting chat desk: cached game schedules, player stats and a rule-based responder."""

__version__ = "0.1.0"
