"""Winner selection across several hands.

Given hand strings, parse each one, order them by (category, tie_breaker)
and return every hand tied for first place. Winners are the very string
objects the caller passed in, kept in input order.
"""

import logging
from typing import List, Optional, Sequence

from poker_hands.rules.hands import Hand, HandCategory, parse_hand
from poker_hands.rules.ranks import HandError

logger = logging.getLogger(__name__)


def parse_hands(hands: Sequence[str]) -> List[Hand]:
    """Parse every hand string, failing on the first malformed one.

    Raises:
        MalformedHand: A hand has the wrong number of cards
        MalformedCard: A card token is invalid
    """
    parsed = []
    for index, hand_str in enumerate(hands):
        try:
            parsed.append(parse_hand(hand_str))
        except HandError as e:
            logger.debug("Rejecting hand %d (%r): %s", index, hand_str, e)
            raise
    return parsed


def rank_hands(hands: Sequence[str]) -> List[Hand]:
    """Parse hands and sort them strongest first.

    The sort is stable, so tied hands keep their input order.
    """
    return sorted(parse_hands(hands), key=lambda hand: hand.key, reverse=True)


def winning_hands(hands: Sequence[str]) -> Optional[List[str]]:
    """Given a list of poker hands, return the hands which win.

    Args:
        hands: Hand strings like "4S 5S 6S 8D JH"

    Returns:
        None for an empty input, otherwise the winning hand strings in input
        order. Each winner is the same object that was passed in.

    Raises:
        MalformedHand, MalformedCard: Any hand is malformed; nothing is returned
    """
    if not hands:
        return None

    parsed = parse_hands(hands)
    best = max(hand.key for hand in parsed)
    winners = [hand.source for hand in parsed if hand.key == best]

    logger.debug(
        "%d of %d hands win with %s %s",
        len(winners),
        len(parsed),
        HandCategory(best[0]).name,
        best[1],
    )
    return winners
