"""Text rendering for game listings and player stat replies"""

from typing import Dict, List, Optional

from sportsdesk.models import GameRecord, PlayerStatRecord
from .stat_tables import primary_metric_for, resolve_stat, stat_fields_for

SPORT_INSIGHTS: Dict[str, str] = {
    'nfl': "Prime time games have been trending under lately. I'm also seeing value in player props! 🎯",
    'nba': "First quarter trends are strong in these matchups. Live betting has been profitable! 💰",
    'mlb': "Weather conditions are perfect for some totals plays. Also watching those F5 lines! ⚾",
    'nhl': "Puck line value is looking prime. I've analyzed all the goalie matchups! 🏒",
    'ncaaf': "Home dogs have been crushing it. Conference games are where the value is! 🏈",
    'ncaab': "Early lines have some gaps. Sharp money is moving fast on these! 🏀",
}
GENERIC_INSIGHT = "I'm seeing some great betting opportunities in these matchups! 🎯"

ALL_GAMES_EMPTY_MESSAGE = (
    "I couldn't find any games scheduled right now. "
    "Try asking about a specific sport like 'What NBA games are on tonight?'"
)
ALL_GAMES_UNAVAILABLE_MESSAGE = (
    "Yo degen! I'm having trouble accessing the latest sports data. "
    "Try asking about a specific sport like 'What NBA games are on tonight?' 🎯"
)


def insight_for(sport: str) -> str:
    return SPORT_INSIGHTS.get((sport or '').lower(), GENERIC_INSIGHT)


class ResponseFormatter:
    """Renders fetched data into chat replies. Holds no state."""

    # ========================================================================
    # GAMES
    # ========================================================================

    @staticmethod
    def format_game_line(game: GameRecord) -> str:
        """``"TeamA vs TeamB (time) [odds]"`` with absent parts left out."""
        line = ' vs '.join(game.teams)
        if game.time:
            line += f" ({game.time})"
        if game.odds:
            line += f" [{game.odds}]"
        return line

    def format_sport_listing(self, sport: str, games: List[GameRecord]) -> str:
        lines = '\n'.join(self.format_game_line(g) for g in games)
        return (
            f"Yo degen! Here are the {sport.upper()} games you can bet on today:\n\n"
            f"{lines}\n\n{insight_for(sport)}"
        )

    def format_all_games(self, games: List[GameRecord]) -> str:
        """One labeled block per sport, sports in order of first appearance."""
        by_sport: Dict[str, List[str]] = {}
        for game in games:
            by_sport.setdefault(game.sport, []).append(self.format_game_line(game))

        blocks = '\n\n'.join(
            f"{sport.upper()} Games:\n" + '\n'.join(lines)
            for sport, lines in by_sport.items()
        )
        return (
            f"Yo degen! Here's all the action we've got today! 🔥\n\n{blocks}\n\n"
            "Which games are you eyeing? Let me know and I'll give you my best picks! 💰"
        )

    @staticmethod
    def listing_empty(sport: str) -> str:
        return f"I couldn't find any {sport.upper()} games scheduled for today. Try checking another sport!"

    @staticmethod
    def listing_unavailable(sport: str) -> str:
        return (
            f"Yo degen! I'm having trouble accessing the latest {sport.upper()} data right now. "
            "Try again in a moment or check out another sport! 🎯"
        )

    @staticmethod
    def all_games_empty() -> str:
        return ALL_GAMES_EMPTY_MESSAGE

    @staticmethod
    def all_games_unavailable() -> str:
        return ALL_GAMES_UNAVAILABLE_MESSAGE

    # ========================================================================
    # PLAYER STATS
    # ========================================================================

    def format_player_stats(self, player: PlayerStatRecord, sport: str) -> str:
        header = f"📊 {player.name}"
        details = ', '.join(part for part in (player.team, player.position) if part)
        if details:
            header += f" ({details})"

        lines = [f"{header} - {sport.upper()} stats:"]
        for stat_field in stat_fields_for(sport):
            value = resolve_stat(player.stats, stat_field.keys, stat_field.default)
            lines.append(f"{stat_field.label}: {value}")
        return '\n'.join(lines)

    def format_top_performers(self, players: List[PlayerStatRecord], sport: str) -> str:
        metric = primary_metric_for(sport)
        unit = metric.short_label or metric.label
        lines = [f"🔥 Top {sport.upper()} performers by {metric.label.lower()}:"]
        for rank, player in enumerate(players, start=1):
            value = resolve_stat(player.stats, metric.keys, metric.default)
            team = f" ({player.team})" if player.team else ""
            lines.append(f"{rank}. {player.name}{team} - {value} {unit}")
        return '\n'.join(lines)

    @staticmethod
    def format_player_not_found(query: str, sport: str) -> str:
        return (
            f"I couldn't find any {sport.upper()} stats for \"{query}\". "
            "Double-check the spelling or try their full name! 🔍"
        )

    @staticmethod
    def stats_trouble(sport: Optional[str] = None) -> str:
        label = f"{sport.upper()} " if sport else ""
        return (
            f"Yo degen! I'm having trouble pulling the latest {label}player stats right now. "
            "Try again in a moment! 📊"
        )
