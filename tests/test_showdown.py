"""Tests for winner selection.

Test coverage:
- Single hand, empty input
- Winners are the caller's own string objects, in input order
- Ties return every tied hand
- Category ordering across the whole table
- Fail-fast on malformed hands
"""

import logging

import pytest

from poker_hands import MalformedCard, MalformedHand, winning_hands
from poker_hands.showdown import parse_hands, rank_hands


def _fresh(s: str) -> str:
    """Build an equal string that is a distinct object."""
    return "".join(list(s))


class TestWinningHands:
    """Test the winner selection entry point."""

    def test_empty_input_returns_none(self):
        assert winning_hands([]) is None

    def test_single_hand_always_wins(self):
        hands = ["4S 5S 7H 8D JC"]
        assert winning_hands(hands) == hands

    def test_flush_beats_high_card_by_identity(self):
        flush = _fresh("4S 5S 6S 8S JS")
        high = _fresh("2S 4C 7S 9H 10H")
        hands = [flush, high]

        winners = winning_hands(hands)

        assert winners == [flush]
        assert winners[0] is hands[0]

    def test_high_card_winner(self):
        hands = ["4S 5S 6S 8D 3C", "2S 4C 7S 9H 10H", "3S 4S 5D 6H JH"]
        assert winning_hands(hands) == ["3S 4S 5D 6H JH"]

    def test_tie_returns_all_in_input_order(self):
        first = _fresh("4H 4S 4D 9C 9D")
        second = _fresh("4C 4S 4H 9H 9S")
        loser = "2S 3S 4S 5S 7D"
        hands = [first, loser, second]

        winners = winning_hands(hands)

        assert len(winners) == 2
        assert winners[0] is first
        assert winners[1] is second

    def test_identical_strings_both_returned(self):
        hand = "4H 4S 4D 9C 9D"
        other = _fresh(hand)
        winners = winning_hands([hand, other])
        assert winners[0] is hand
        assert winners[1] is other

    def test_wheel_loses_to_seven_high_straight(self):
        hands = ["2H 3D 4C 5S AH", "3H 4D 5C 6S 7H"]
        assert winning_hands(hands) == ["3H 4D 5C 6S 7H"]

    def test_full_house_beats_flush(self):
        hands = ["2H 5H 7H 9H JH", "2H 2D 2C 5H 5D"]
        assert winning_hands(hands) == ["2H 2D 2C 5H 5D"]

    def test_two_pair_tie_broken_by_kicker(self):
        hands = ["JD QH JH QD 2C", "JS QS JC QC 4D"]
        assert winning_hands(hands) == ["JS QS JC QC 4D"]

    def test_higher_second_pair_wins(self):
        hands = ["2S 8H 2D 8D 3H", "4S 5H 4C 8S 5D"]
        assert winning_hands(hands) == ["2S 8H 2D 8D 3H"]

    def test_one_category_over_another_regardless_of_ranks(self):
        # One hand per category, weakest first, each with high ranks
        ladder = [
            "AS KH QD JC 9S",
            "AS AH KD QC JS",
            "AS AH KD KC QS",
            "AS AH AD KC QS",
            "10S JH QD KC AS",
            "2H 3H 4H 5H 7H",
            "2S 2H 2D 3C 3S",
            "2S 2H 2D 2C 3S",
            "AS 2S 3S 4S 5S",
        ]
        for i in range(1, len(ladder)):
            assert winning_hands([ladder[i - 1], ladder[i]]) == [ladder[i]]
            assert winning_hands([ladder[i], ladder[i - 1]]) == [ladder[i]]
        assert winning_hands(ladder) == [ladder[-1]]


class TestRankHands:
    """Test full ordering of parsed hands."""

    def test_rank_hands_strongest_first(self):
        hands = ["2S 4C 7S 9H 10H", "4S 5S 6S 8S JS", "3S 3H 2S 3D 3C"]
        ranked = rank_hands(hands)
        assert [h.source for h in ranked] == [hands[2], hands[1], hands[0]]

    def test_rank_hands_stable_for_ties(self):
        a = _fresh("4H 4S 4D 9C 9D")
        b = _fresh("4C 4S 4H 9H 9S")
        ranked = rank_hands([a, b])
        assert ranked[0].source is a
        assert ranked[1].source is b

    def test_parse_hands_preserves_order(self):
        hands = ["2S 4C 7S 9H 10H", "4S 5S 6S 8S JS"]
        assert [h.source for h in parse_hands(hands)] == hands


class TestMalformedInput:
    """Malformed hands abort the whole call."""

    def test_bad_card_aborts(self):
        with pytest.raises(MalformedCard):
            winning_hands(["4S 5S 6S 8D JH", "4S 5S 6S 8D 1X"])

    def test_wrong_card_count_aborts(self):
        with pytest.raises(MalformedHand):
            winning_hands(["4S 5S 6S 8D JH", "4S 5S 6S 8D"])

    def test_padded_hand_aborts(self):
        with pytest.raises(MalformedHand):
            winning_hands(["4S 5S 6S 8D JH "])

    def test_rejection_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="poker_hands.showdown"):
            with pytest.raises(MalformedCard):
                winning_hands(["4S 5S 6S 8D ZZ"])
        assert "Rejecting hand 0" in caplog.text
