#!/usr/bin/env python3
"""Print the winning hands among those given on the command line.

Usage:
    python -m poker_hands.scripts.showdown "4S 5S 6S 8D JH" "2S 4C 7S 9H 10H"
    python -m poker_hands.scripts.showdown --verbose "2H 3D 4C 5S AH" "3H 4D 5C 6S 7H"
"""

import argparse
import logging
import sys
from typing import List, Optional

from poker_hands.rules import HandError, describe_categories, parse_hand
from poker_hands.showdown import winning_hands


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pick the winning five-card poker hands")
    parser.add_argument("hands", nargs="*", help='Hands such as "4S 5S 6S 8D JH"')
    parser.add_argument("--explain", action="store_true", help="Show the category of each winner")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        winners = winning_hands(args.hands)
    except HandError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if winners is None:
        print("No hands given", file=sys.stderr)
        return 1

    descriptions = describe_categories()
    for hand_str in winners:
        if args.explain:
            category = parse_hand(hand_str).category
            print(f"{hand_str}\t{category.name}\t{descriptions[category]}")
        else:
            print(hand_str)
    return 0


if __name__ == "__main__":
    sys.exit(main())
