"""Poker rules implementations.

This module provides:
- Card and rank definitions (ranks.py)
- Hand profiling, classification and comparison (hands.py)
- Batched scoring with PyTorch (batch_eval.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    HandError,
    MalformedCard,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    WHEEL_RANKS,
    parse_card,
    are_consecutive,
    get_rank_counts,
    create_standard_deck,
    sort_cards,
)

from .hands import (
    HAND_SIZE,
    HandCategory,
    HandProfile,
    Hand,
    MalformedHand,
    profile_cards,
    is_straight_ranks,
    straight_high_card,
    of_a_kind_tiebreak,
    classify,
    make_hand,
    parse_hand,
    compare_hands,
    describe_categories,
    make_cards_from_string,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "HandError",
    "MalformedCard",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "WHEEL_RANKS",
    "parse_card",
    "are_consecutive",
    "get_rank_counts",
    "create_standard_deck",
    "sort_cards",
    # Hands
    "HAND_SIZE",
    "HandCategory",
    "HandProfile",
    "Hand",
    "MalformedHand",
    "profile_cards",
    "is_straight_ranks",
    "straight_high_card",
    "of_a_kind_tiebreak",
    "classify",
    "make_hand",
    "parse_hand",
    "compare_hands",
    "describe_categories",
    "make_cards_from_string",
]
