"""Hand profiling, classification, and parsing.

Categories (low to high):
- High card
- One pair
- Two pair
- Three of a kind
- Straight: five consecutive ranks, or the wheel A-2-3-4-5
- Flush: five cards of one suit
- Full house
- Four of a kind
- Straight flush

Comparison rules:
- Category first; any higher category beats any lower one
- Within a category, the tie-breaker is compared element by element,
  higher first. Group ranks come first, then kickers descending.
- The wheel counts as a 5-high straight
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, FrozenSet, Iterable, List, Sequence, Tuple

from .ranks import (
    Card,
    HandError,
    Rank,
    Suit,
    WHEEL_RANKS,
    are_consecutive,
    get_rank_counts,
)

HAND_SIZE = 5


class HandCategory(IntEnum):
    """Hand categories ordered by strength (higher value = stronger hand)."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8


class MalformedHand(HandError):
    """Raised when hand text or a card list does not hold exactly five cards."""

    def __init__(self, hand, reason: str = "expected exactly 5 cards"):
        self.hand = hand
        self.reason = reason
        super().__init__(f"Malformed hand {hand!r}: {reason}")


@dataclass(frozen=True)
class HandProfile:
    """Raw signals extracted from five cards before classification.

    Attributes:
        suits: Distinct suits present (one suit means a flush candidate)
        rank_counts: Number of cards per rank value
        is_straight: True for five consecutive ranks or the wheel
    """

    suits: FrozenSet[Suit]
    rank_counts: Dict[int, int]
    is_straight: bool

    def ranks_with_count(self, count: int) -> List[int]:
        """Ranks appearing exactly `count` times, highest first."""
        return sorted((r for r, c in self.rank_counts.items() if c == count), reverse=True)

    @property
    def max_count(self) -> int:
        return max(self.rank_counts.values())


@dataclass(frozen=True)
class Hand:
    """A classified five-card hand.

    Attributes:
        cards: The five cards, sorted by rank ascending
        category: The hand category
        tie_breaker: Ranks compared after the category, most significant first
        source: The original hand text, the same object the caller passed in
    """

    cards: Tuple[Card, ...]
    category: HandCategory
    tie_breaker: Tuple[int, ...]
    source: str

    @property
    def key(self) -> Tuple[int, Tuple[int, ...]]:
        """Total ordering key: (category, tie_breaker)."""
        return (int(self.category), self.tie_breaker)

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.cards)
        return f"{self.category.name}({cards_str})"


def _check_cards(cards: Sequence[Card]) -> None:
    if len(cards) != HAND_SIZE:
        raise MalformedHand(list(cards), f"expected {HAND_SIZE} cards, got {len(cards)}")
    # single deck: a card can appear only once
    if len(set(cards)) != len(cards):
        raise MalformedHand(list(cards), "duplicate card")


def is_straight_ranks(ranks: Iterable[int]) -> bool:
    """Check five ranks for a straight, counting the wheel.

    Duplicated ranks never form a straight.
    """
    ranks = sorted(int(r) for r in ranks)
    if len(set(ranks)) != len(ranks):
        return False
    if tuple(ranks) == tuple(int(r) for r in WHEEL_RANKS):
        return True
    return are_consecutive(ranks)


def profile_cards(cards: Sequence[Card]) -> HandProfile:
    """Scan five cards and extract suits, rank counts and straightness.

    Raises:
        MalformedHand: If there are not exactly five distinct cards
    """
    _check_cards(cards)
    return HandProfile(
        suits=frozenset(card.suit for card in cards),
        rank_counts=get_rank_counts(list(cards)),
        is_straight=is_straight_ranks(card.rank for card in cards),
    )


def straight_high_card(ranks: Iterable[int]) -> int:
    """High card of a straight; the wheel plays as 5-high."""
    ranks = sorted(int(r) for r in ranks)
    if tuple(ranks) == tuple(int(r) for r in WHEEL_RANKS):
        return int(Rank.FIVE)
    return ranks[-1]


def of_a_kind_tiebreak(group_rank: int, kicker_ranks: Iterable[int]) -> Tuple[int, ...]:
    """Tie-breaker for pairs, trips and quads: group rank, then kickers descending."""
    return (int(group_rank),) + tuple(sorted((int(r) for r in kicker_ranks), reverse=True))


def classify(cards: Sequence[Card], profile: HandProfile) -> Tuple[HandCategory, Tuple[int, ...]]:
    """Map five cards and their profile to a category and tie-breaker.

    Strongest categories are checked first; the first match wins.
    """
    ranks = [int(card.rank) for card in cards]
    ranks_desc = tuple(sorted(ranks, reverse=True))
    is_flush = len(profile.suits) == 1
    max_count = profile.max_count

    def kickers(*grouped: int) -> List[int]:
        return [r for r in ranks if r not in grouped]

    if profile.is_straight and is_flush:
        return HandCategory.STRAIGHT_FLUSH, (straight_high_card(ranks),)

    if max_count == 4:
        quad = profile.ranks_with_count(4)[0]
        return HandCategory.FOUR_OF_A_KIND, of_a_kind_tiebreak(quad, kickers(quad))

    if max_count == 3 and len(profile.rank_counts) == 2:
        triple = profile.ranks_with_count(3)[0]
        pair = profile.ranks_with_count(2)[0]
        return HandCategory.FULL_HOUSE, (triple, pair)

    if is_flush:
        return HandCategory.FLUSH, ranks_desc

    if profile.is_straight:
        return HandCategory.STRAIGHT, (straight_high_card(ranks),)

    if max_count == 3:
        triple = profile.ranks_with_count(3)[0]
        return HandCategory.THREE_OF_A_KIND, of_a_kind_tiebreak(triple, kickers(triple))

    pairs = profile.ranks_with_count(2)
    if len(pairs) == 2:
        high, low = pairs
        return HandCategory.TWO_PAIR, (high, low) + tuple(sorted(kickers(high, low), reverse=True))

    if len(pairs) == 1:
        return HandCategory.ONE_PAIR, of_a_kind_tiebreak(pairs[0], kickers(pairs[0]))

    return HandCategory.HIGH_CARD, ranks_desc


def make_hand(cards: Sequence[Card], source: str) -> Hand:
    """Profile and classify five cards into an immutable Hand.

    Args:
        cards: Exactly five cards
        source: The text the cards came from, kept by reference

    Raises:
        MalformedHand: If there are not exactly five cards
    """
    profile = profile_cards(cards)
    category, tie_breaker = classify(cards, profile)
    return Hand(
        cards=tuple(sorted(cards)),
        category=category,
        tie_breaker=tie_breaker,
        source=source,
    )


def parse_hand(hand_str: str) -> Hand:
    """Parse a hand string like "4S 5S 6S 8D JH" into a classified Hand.

    The string must hold exactly five whitespace-separated card tokens with
    no leading or trailing whitespace.

    Raises:
        MalformedHand: Wrong card count or padded text
        MalformedCard: A token is not a valid card
    """
    if not isinstance(hand_str, str):
        raise MalformedHand(hand_str, "hand must be a string")
    if hand_str != hand_str.strip():
        raise MalformedHand(hand_str, "leading or trailing whitespace")

    tokens = hand_str.split()
    if len(tokens) != HAND_SIZE:
        raise MalformedHand(hand_str, f"expected {HAND_SIZE} cards, got {len(tokens)}")

    cards = [Card.from_string(token) for token in tokens]
    return make_hand(cards, hand_str)


def compare_hands(hand1: Hand, hand2: Hand) -> int:
    """Compare two hands.

    Returns:
        Positive if hand1 > hand2
        Negative if hand1 < hand2
        Zero if they tie
    """
    if hand1.key == hand2.key:
        return 0
    return 1 if hand1.key > hand2.key else -1


def describe_categories() -> dict:
    """Get a description of each hand category.

    Returns:
        Dict mapping HandCategory to description string
    """
    return {
        HandCategory.HIGH_CARD: "No other combination; highest cards win",
        HandCategory.ONE_PAIR: "Two cards of the same rank",
        HandCategory.TWO_PAIR: "Two different pairs",
        HandCategory.THREE_OF_A_KIND: "Three cards of the same rank",
        HandCategory.STRAIGHT: "Five consecutive ranks (A-2-3-4-5 plays 5-high)",
        HandCategory.FLUSH: "Five cards of the same suit",
        HandCategory.FULL_HOUSE: "Three of a kind plus a pair",
        HandCategory.FOUR_OF_A_KIND: "Four cards of the same rank",
        HandCategory.STRAIGHT_FLUSH: "A straight with all cards of one suit",
    }


# Helper functions for creating hands for testing


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "3H 4D 5C 6S 7H" without classifying them."""
    return [Card.from_string(cs) for cs in s.split()]
