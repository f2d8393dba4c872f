"""Poker Hands - five-card hand classification and showdown.

Parses hand strings such as "4S 5S 6S 8D JH", classifies them into the
nine standard categories, and picks the winning hands.
"""

__version__ = "0.1.0"
__author__ = "Poker Hands Team"

from poker_hands.rules import HandCategory, MalformedCard, MalformedHand, parse_hand
from poker_hands.showdown import winning_hands
from poker_hands.utils.seeding import set_seed

__all__ = [
    "__version__",
    "HandCategory",
    "MalformedCard",
    "MalformedHand",
    "parse_hand",
    "winning_hands",
    "set_seed",
]
