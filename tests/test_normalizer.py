from sportsdesk.data.normalizer import TeamIdentityNormalizer, normalize_team_name, team_key


def test_short_prefix_needs_a_following_word():
    assert normalize_team_name("LA Lakers") == "lakers"
    assert normalize_team_name("Lakers") == "lakers"
    assert normalize_team_name("NY Knicks") == "knicks"
    assert normalize_team_name("Nets") == "nets"


def test_city_prefixes_multi_and_single_word():
    assert normalize_team_name("Los Angeles Lakers") == "lakers"
    assert normalize_team_name("Kansas City Chiefs") == "chiefs"
    assert normalize_team_name("Oklahoma City Thunder") == "thunder"
    assert normalize_team_name("Boston Celtics") == "celtics"
    assert normalize_team_name("Golden State Warriors") == "warriors"


def test_suffix_and_non_letters_removed():
    assert normalize_team_name("Atlanta United") == "united"
    assert normalize_team_name("Manchester City") == "manchester"
    assert normalize_team_name("San Francisco 49ers") == "ers"
    assert normalize_team_name("  Trail-Blazers ") == "trailblazers"


def test_city_alone_is_not_stripped():
    assert normalize_team_name("Boston") == "boston"
    assert normalize_team_name("Kansas City") == "kansas"


def test_never_raises_on_odd_input():
    assert normalize_team_name("") == ""
    assert normalize_team_name(None) == ""
    assert normalize_team_name("123") == ""


def test_team_key_is_order_independent():
    assert team_key(["Lakers", "Celtics"]) == team_key(["Boston Celtics", "LA Lakers"])


def test_same_game_compares_sets():
    normalizer = TeamIdentityNormalizer()
    assert normalizer.same_game(("Lakers", "Celtics"), ("LA Lakers", "Boston Celtics"))
    assert not normalizer.same_game(("Lakers", "Celtics"), ("Lakers", "Knicks"))
