"""Card rank definitions and parsing.

Rank order (high to low): A > K > Q > J > 10 > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

The Ace is stored as 14. It only plays low inside the wheel straight
(A-2-3-4-5), which is handled by the hand classifier, not here.

This module provides:
- Rank and suit definitions
- Card representation and token parsing
- Small helpers shared by the classifier and the batch evaluator
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List


class Rank(IntEnum):
    """Card ranks; the value is the rank's numeric strength."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(IntEnum):
    """Card suits. Suits never order hands, they only matter for flushes."""

    SPADE = 0
    CLUB = 1
    HEART = 2
    DIAMOND = 3


# Rank tokens as they appear in hand strings
RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

SUIT_SYMBOLS = {
    Suit.SPADE: "S",
    Suit.CLUB: "C",
    Suit.HEART: "H",
    Suit.DIAMOND: "D",
}

# Symbol to enum mappings (for parsing)
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}

# The wheel: A-2-3-4-5 with the Ace playing low
WHEEL_RANKS = (Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.ACE)


class HandError(ValueError):
    """Base class for errors raised while reading hand text."""


class MalformedCard(HandError):
    """Raised when a card token is not a valid rank followed by a suit letter."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Malformed card: {token!r}")


@dataclass(frozen=True, order=True)
class Card:
    """A playing card with rank and suit.

    Cards are ordered by rank first (for sorting hands), then by suit.
    Immutable and hashable for use in sets.
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({self})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a token like '4S', '10H' or 'AC'.

        Args:
            s: Card token in format "RANK+SUIT"

        Returns:
            Card object

        Raises:
            MalformedCard: If the token cannot be parsed
        """
        if not isinstance(s, str) or len(s) not in (2, 3):
            raise MalformedCard(s)

        rank = SYMBOL_TO_RANK.get(s[:-1])
        suit = SYMBOL_TO_SUIT.get(s[-1])
        if rank is None or suit is None:
            raise MalformedCard(s)

        return cls(rank=rank, suit=suit)


def parse_card(token: str) -> Card:
    """Parse a single card token. See Card.from_string."""
    return Card.from_string(token)


def are_consecutive(ranks: List[int]) -> bool:
    """Check if a sorted list of unique ranks are consecutive.

    Args:
        ranks: List of ranks (should be sorted and unique)

    Returns:
        True if all ranks are consecutive
    """
    for i in range(1, len(ranks)):
        if int(ranks[i]) - int(ranks[i - 1]) != 1:
            return False
    return True


def get_rank_counts(cards: List[Card]) -> Dict[int, int]:
    """Count occurrences of each rank in a list of cards.

    Args:
        cards: List of Card objects

    Returns:
        Dict mapping rank value to count
    """
    counts: Dict[int, int] = {}
    for card in cards:
        counts[int(card.rank)] = counts.get(int(card.rank), 0) + 1
    return counts


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck.

    Returns:
        List of 52 Card objects (13 ranks × 4 suits)
    """
    deck = []
    for rank in Rank:
        for suit in Suit:
            deck.append(Card(rank=rank, suit=suit))
    return deck


def sort_cards(cards: List[Card]) -> List[Card]:
    """Return a new list of cards sorted by rank (ascending), then suit."""
    return sorted(cards)
