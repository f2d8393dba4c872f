#!/usr/bin/env python3
"""Smoke test: batched scoring agrees with the scalar classifier.

Deals random five-card hands from shuffled decks, classifies each one with
the scalar rules and scores the whole batch with BatchHandEvaluator, then
checks that both give the same category, tie-breaker and ordering.

Usage:
    python -m poker_hands.scripts.smoke_parity --num-hands 10000
    python -m poker_hands.scripts.smoke_parity --num-hands 500 --seed 42 --verbose
"""

import argparse
import logging
import sys
import time
from collections import Counter
from dataclasses import dataclass
from typing import List, Optional

import numpy as np
import torch

from poker_hands.rules import HAND_SIZE, Hand, HandCategory, create_standard_deck, make_hand
from poker_hands.rules.batch_eval import BatchHandEvaluator, cards_to_tensors, hand_score
from poker_hands.utils.seeding import set_seed

logger = logging.getLogger(__name__)


@dataclass
class SmokeConfig:
    """Smoke run configuration."""

    num_hands: int = 10_000
    seed: Optional[int] = 42
    device: str = "cpu"
    verbose: bool = False


def deal_hands(num_hands: int, rng: np.random.Generator) -> List[Hand]:
    """Deal each hand from its own freshly shuffled deck."""
    deck = create_standard_deck()
    hands = []
    for _ in range(num_hands):
        picks = rng.choice(len(deck), size=HAND_SIZE, replace=False)
        cards = [deck[int(i)] for i in picks]
        hands.append(make_hand(cards, " ".join(str(c) for c in cards)))
    return hands


def run_smoke(config: SmokeConfig) -> dict:
    """Compare batch and scalar evaluation on random deals.

    Returns:
        Dict with the number of mismatches, a category histogram and timing
    """
    seed = set_seed(config.seed)
    rng = np.random.default_rng(seed)
    device = torch.device(config.device)

    hands = deal_hands(config.num_hands, rng)
    evaluator = BatchHandEvaluator(device)

    start = time.time()
    ranks, suits = cards_to_tensors(hands, device)
    categories, _ = evaluator.classify_batched(ranks, suits)
    scores = evaluator.score_batched(ranks, suits).cpu().tolist()
    elapsed = time.time() - start

    mismatches = 0
    for hand, category, score in zip(hands, categories.cpu().tolist(), scores):
        if category != int(hand.category) or score != hand_score(hand):
            mismatches += 1
            logger.warning(
                "Mismatch for %s: scalar=%s/%d batch=%s/%d",
                hand.source,
                hand.category.name,
                hand_score(hand),
                HandCategory(category).name,
                score,
            )

    histogram = Counter(hand.category.name for hand in hands)
    return {
        "seed": seed,
        "num_hands": len(hands),
        "mismatches": mismatches,
        "histogram": dict(histogram),
        "batch_seconds": elapsed,
    }


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Batch vs scalar hand evaluation smoke test")
    parser.add_argument("--num-hands", type=int, default=SmokeConfig.num_hands)
    parser.add_argument("--seed", type=int, default=SmokeConfig.seed)
    parser.add_argument("--device", type=str, default=SmokeConfig.device)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    config = SmokeConfig(
        num_hands=args.num_hands,
        seed=args.seed,
        device=args.device,
        verbose=args.verbose,
    )
    logging.basicConfig(level=logging.DEBUG if config.verbose else logging.INFO)

    stats = run_smoke(config)

    print(f"Seed: {stats['seed']}")
    print(f"Hands: {stats['num_hands']}  ({stats['batch_seconds'] * 1000:.1f} ms batched)")
    for category in reversed(list(HandCategory)):
        print(f"  {category.name:<16} {stats['histogram'].get(category.name, 0)}")
    print(f"Mismatches: {stats['mismatches']}")

    return 1 if stats["mismatches"] else 0


if __name__ == "__main__":
    sys.exit(main())
