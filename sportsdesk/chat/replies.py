"""Canned chat replies that do not depend on fetched data"""

from typing import Dict, List, Tuple

WELCOME_MESSAGE = (
    "What's up degens! Ready to make some money? Tell me what sports you're looking at "
    "today and I'll give you my best picks! 🎯"
)

GREETINGS: List[str] = [
    "Ready to make some money today? What sports are you looking at?",
    "Let's find you a winning parlay today. What games caught your eye?",
    "The odds are looking juicy today. What sport should we analyze?",
    "Time to beat the bookies! What markets are you interested in?",
    "I'm seeing some great value bets today. What sport are you betting on?",
]

FALLBACK_MESSAGE = (
    "Yo degen! I'm your go-to for all things sports betting! 🎯 I can hook you up with games "
    "and picks for NBA, NFL, MLB, NHL, NCAAF, or NCAAB. Just let me know which sport you want "
    "to crush today! 💰"
)

CLARIFY_MESSAGES: Dict[str, str] = {
    'football': (
        "Are you interested in NFL or College Football games? Let me know which one and "
        "I'll hook you up with the latest odds! 🏈"
    ),
    'basketball': (
        "Are you looking for NBA or College Basketball games? Let me know which one and "
        "I'll show you what's available! 🏀"
    ),
}

# (group name, regex, responses), tried in this order.
BETTING_TERM_GROUPS: List[Tuple[str, str, List[str]]] = [
    ('parlay', r"parlay|accumulator", [
        "Want a fire parlay? Let me know which sports and I'll give you my best picks! 🔥",
        "Parlays are tough but I've got a system. Keep it to 2-3 legs max for best value. 💰",
        "I'm seeing some correlated parlay opportunities today. Want my picks? 🎯",
    ]),
    ('totals', r"over|under", [
        "Sharp money loves the unders! Let me know which game you're looking at. 🎯",
        "Totals are my specialty. I analyze pace stats, weather, everything! Want my picks? 💰",
        "Over/under betting is all about timing. I'm seeing some great spots today! 🎲",
    ]),
    ('spread', r"spread|line", [
        "Line shopping is key for spreads. I track movement across all books. Want my insights? 🎯",
        "Sharp money is moving some lines today. Let me know which games you're eyeing! 💰",
        "I've got some key injury info that's gonna move these spreads. Want the intel? 🔥",
    ]),
    ('props', r"prop|props", [
        "Props are where the real money's at! Books struggle with these lines. Want my picks? 💰",
        "I've got some fire prop bets today! Let me know which sport you're betting! 🔥",
        "Player props are my bread and butter. Which sport should we attack today? 🎯",
    ]),
]

BETTING_RESPONSES: Dict[str, List[str]] = {name: responses for name, _, responses in BETTING_TERM_GROUPS}
