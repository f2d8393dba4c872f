"""Batched hand scoring with PyTorch.

This module provides:
- A single integer score per hand that orders hands exactly like
  (category, tie_breaker) tuples
- Vectorised scoring of a whole batch of five-card hands
- Helpers to move parsed hands into tensors

Score encoding (base 15, every rank fits in one digit):
    score = category * 15**5 + tb[0] * 15**4 + ... + tb[4] * 15**0
where tb is the tie-breaker right-padded with zeros. Tie-breakers within a
category always have the same length, so padding never changes the order.
"""

from typing import List, Sequence, Tuple

import torch

from .hands import HAND_SIZE, Hand, HandCategory
from .ranks import Rank, WHEEL_RANKS

SCORE_BASE = 15
NUM_RANK_SLOTS = 15  # index = rank value, slots 0 and 1 unused


def hand_score(hand: Hand) -> int:
    """Scalar score of a parsed hand, equal to the batch evaluator's output."""
    digits = list(hand.tie_breaker) + [0] * (HAND_SIZE - len(hand.tie_breaker))
    score = int(hand.category)
    for digit in digits:
        score = score * SCORE_BASE + int(digit)
    return score


def cards_to_tensors(
    hands: Sequence[Hand], device: torch.device = torch.device("cpu")
) -> Tuple[torch.Tensor, torch.Tensor]:
    """Convert parsed hands to rank and suit tensors.

    Returns:
        (ranks, suits), both int64 tensors of shape [batch, 5]
    """
    ranks = torch.tensor(
        [[int(c.rank) for c in hand.cards] for hand in hands], dtype=torch.long, device=device
    ).reshape(-1, HAND_SIZE)
    suits = torch.tensor(
        [[int(c.suit) for c in hand.cards] for hand in hands], dtype=torch.long, device=device
    ).reshape(-1, HAND_SIZE)
    return ranks, suits


class BatchHandEvaluator:
    """Scores many five-card hands at once.

    Cards must be distinct within a hand; run them through the parser first
    if they come from text.
    """

    def __init__(self, device: torch.device = torch.device("cpu")):
        self.device = device
        self._rank_idx = torch.arange(NUM_RANK_SLOTS, dtype=torch.long, device=device)
        self._wheel = torch.tensor([int(r) for r in WHEEL_RANKS], dtype=torch.long, device=device)
        self._weights = torch.tensor(
            [SCORE_BASE ** (HAND_SIZE - 1 - i) for i in range(HAND_SIZE)],
            dtype=torch.long,
            device=device,
        )

    def classify_batched(
        self, ranks: torch.Tensor, suits: torch.Tensor
    ) -> Tuple[torch.Tensor, torch.Tensor]:
        """Compute category and padded tie-breaker for each hand.

        Args:
            ranks: [batch, 5] int tensor of rank values 2..14
            suits: [batch, 5] int tensor of Suit values

        Returns:
            category: [batch] int64
            tie_breaker: [batch, 5] int64, zero padded
        """
        ranks = ranks.to(self.device, torch.long)
        suits = suits.to(self.device, torch.long)
        batch = ranks.shape[0]

        # Cards per rank: [batch, 15]
        counts = torch.nn.functional.one_hot(ranks, NUM_RANK_SLOTS).sum(dim=1)
        max_count = counts.max(dim=1).values
        n_distinct = (counts > 0).sum(dim=1)

        is_flush = (suits == suits[:, :1]).all(dim=1)

        sorted_ranks = ranks.sort(dim=1).values
        is_wheel = (sorted_ranks == self._wheel).all(dim=1)
        is_run = (sorted_ranks[:, -1] - sorted_ranks[:, 0]) == HAND_SIZE - 1
        is_straight = (n_distinct == HAND_SIZE) & (is_run | is_wheel)
        high_card = torch.where(is_wheel, torch.full_like(sorted_ranks[:, -1], int(Rank.FIVE)), sorted_ranks[:, -1])

        # Distinct ranks ordered by (count, rank) descending: group ranks first,
        # then kickers high to low. Covers every non-straight category.
        group_key = torch.where(counts > 0, counts * NUM_RANK_SLOTS + self._rank_idx, -1)
        top_keys, top_slots = group_key.sort(dim=1, descending=True)
        grouped = torch.where(top_keys[:, :HAND_SIZE] >= 0, top_slots[:, :HAND_SIZE], 0)

        # Later assignments override earlier ones, weakest category first
        category = torch.full((batch,), int(HandCategory.HIGH_CARD), dtype=torch.long, device=self.device)
        rules = [
            (n_distinct == 4, HandCategory.ONE_PAIR),
            ((max_count == 2) & (n_distinct == 3), HandCategory.TWO_PAIR),
            ((max_count == 3) & (n_distinct == 3), HandCategory.THREE_OF_A_KIND),
            (is_straight, HandCategory.STRAIGHT),
            (is_flush, HandCategory.FLUSH),
            ((max_count == 3) & (n_distinct == 2), HandCategory.FULL_HOUSE),
            (max_count == 4, HandCategory.FOUR_OF_A_KIND),
            (is_straight & is_flush, HandCategory.STRAIGHT_FLUSH),
        ]
        for mask, cat in rules:
            category = torch.where(mask, torch.full_like(category, int(cat)), category)

        straight_tb = torch.zeros_like(grouped)
        straight_tb[:, 0] = high_card
        uses_high_card = (category == int(HandCategory.STRAIGHT)) | (
            category == int(HandCategory.STRAIGHT_FLUSH)
        )
        tie_breaker = torch.where(uses_high_card.unsqueeze(1), straight_tb, grouped)

        return category, tie_breaker

    def score_batched(self, ranks: torch.Tensor, suits: torch.Tensor) -> torch.Tensor:
        """Score each hand; higher scores win, equal scores tie.

        Returns:
            [batch] int64 tensor
        """
        category, tie_breaker = self.classify_batched(ranks, suits)
        return category * SCORE_BASE**HAND_SIZE + (tie_breaker * self._weights).sum(dim=1)

    def score_hands(self, hands: Sequence[Hand]) -> torch.Tensor:
        """Score already-parsed hands."""
        ranks, suits = cards_to_tensors(hands, self.device)
        return self.score_batched(ranks, suits)


def winning_indices(scores: torch.Tensor) -> List[int]:
    """Indices of every hand holding the maximum score, ascending."""
    if scores.numel() == 0:
        return []
    return torch.nonzero(scores == scores.max()).flatten().tolist()
