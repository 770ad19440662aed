import pytest

from conftest import make_game, make_player
from sportsdesk.chat import ResponseFormatter, insight_for
from sportsdesk.chat.formatter import GENERIC_INSIGHT
from sportsdesk.chat.stat_tables import metric_value, primary_metric_for, resolve_stat, sport_family


@pytest.fixture
def formatter():
    return ResponseFormatter()


def test_game_line_omits_missing_parts(formatter):
    assert formatter.format_game_line(make_game(time=None)) == "Lakers vs Celtics"
    assert formatter.format_game_line(make_game()) == "Lakers vs Celtics (7:30 PM)"
    assert formatter.format_game_line(make_game(odds="BOS -4")) == "Lakers vs Celtics (7:30 PM) [BOS -4]"
    assert formatter.format_game_line(make_game(time=None, odds="BOS -4")) == "Lakers vs Celtics [BOS -4]"


def test_insight_falls_back_to_generic():
    assert insight_for("NHL").startswith("Puck line value")
    assert insight_for("cricket") == GENERIC_INSIGHT


def test_sport_listing_layout(formatter):
    reply = formatter.format_sport_listing("ncaaf", [make_game("ncaaf", "Ohio State", "Michigan", "12:00 PM")])
    assert reply == (
        "Yo degen! Here are the NCAAF games you can bet on today:\n\n"
        "Ohio State vs Michigan (12:00 PM)\n\n"
        "Home dogs have been crushing it. Conference games are where the value is! 🏈"
    )


def test_all_games_groups_in_first_seen_order(formatter):
    games = [
        make_game("nhl", "Bruins", "Rangers", "7:00 PM"),
        make_game("nba", "Lakers", "Celtics", "7:30 PM"),
        make_game("nhl", "Oilers", "Flames", "9:00 PM"),
    ]
    reply = formatter.format_all_games(games)
    assert "NHL Games:\nBruins vs Rangers (7:00 PM)\nOilers vs Flames (9:00 PM)\n\nNBA Games:" in reply


def test_player_stats_uses_defaults_for_missing_keys(formatter):
    player = make_player("Nikola Jokic", team="DEN", points="26.4", trb=12.4)
    reply = formatter.format_player_stats(player, "nba")
    lines = reply.splitlines()
    assert lines[0] == "📊 Nikola Jokic (DEN) - NBA stats:"
    assert "Points: 26.4" in lines
    assert "Rebounds: 12.4" in lines
    assert "Blocks: 0.00" in lines
    assert "Games: 0" in lines


def test_player_stats_per_family(formatter):
    reply = formatter.format_player_stats(make_player("Connor McDavid", team="EDM", g=32, a=68), "nhl")
    assert "Goals: 32" in reply
    assert "Assists: 68" in reply
    assert "+/-: 0" in reply


def test_top_performers_lines(formatter):
    players = [make_player("Josh Allen", team="BUF", td=40), make_player("No Team", team="", tds=3)]
    reply = formatter.format_top_performers(players, "nfl")
    assert reply.splitlines() == [
        "🔥 Top NFL performers by touchdowns:",
        "1. Josh Allen (BUF) - 40 TD",
        "2. No Team - 3 TD",
    ]


def test_trouble_messages(formatter):
    assert "latest MLB player stats" in formatter.stats_trouble("mlb")
    assert "latest player stats" in formatter.stats_trouble()
    assert '"Zion"' in formatter.format_player_not_found("Zion", "nba")


# ============================================================================
# STAT TABLES
# ============================================================================

def test_resolve_stat_skips_blank_values():
    assert resolve_stat({"pts": "", "points": None, "avg": 21.5}, ("pts", "points", "avg")) == 21.5
    assert resolve_stat({}, ("pts",), "0.00") == "0.00"


@pytest.mark.parametrize("raw,expected", [
    (25.4, 25.4),
    ("25.4", 25.4),
    (".312", 0.312),
    ("1,204", 1204.0),
    ("--", 0.0),
    (None, 0.0),
    (True, 0.0),
    (float("nan"), 0.0),
])
def test_metric_value(raw, expected):
    assert metric_value(raw) == pytest.approx(expected)


def test_families_and_primary_metrics():
    assert sport_family("NCAAB") == "basketball"
    assert sport_family("ncaaf") == "football"
    assert sport_family("unknown") == "basketball"
    assert primary_metric_for("mlb").short_label == "AVG"
    assert primary_metric_for("nhl").label == "Goals"
