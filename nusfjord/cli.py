from __future__ import annotations

import argparse
from typing import List, Optional

from .core.building import DECK_NAMES
from .core.selection import DEFAULT_PLAYERS, MAX_PLAYERS, MIN_PLAYERS

VERSION = "0.1.0"
PLAYER_CHOICES = list(range(MIN_PLAYERS, MAX_PLAYERS + 1))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nusfjord-setup",
        description="Random setup for the Nusfjord board game",
    )
    parser.add_argument("deck", choices=DECK_NAMES, help="which deck to use")
    parser.add_argument(
        "-p", "--players", type=int, choices=PLAYER_CHOICES, default=DEFAULT_PLAYERS,
        help="number of players (default: %(default)s)",
    )

    extra = parser.add_mutually_exclusive_group()
    extra.add_argument(
        "-a", "--add", nargs="+", choices=DECK_NAMES, metavar="DECK",
        help="add a deck to the initial setup; per page 15 of the rules, cards "
             "from add-in decks are only used in the initial setup, never in "
             "the cards drawn in rounds 3-6",
    )
    extra.add_argument(
        "--all-base-decks", action="store_true",
        help="add all three decks from the base game to the initial setup",
    )
    extra.add_argument(
        "--all-decks", action="store_true",
        help="add all decks (base and expansions) to the initial setup",
    )

    parser.add_argument("--seed", type=int, default=None,
                        help="seed the shuffle to repeat a setup")
    parser.add_argument("--no-color", action="store_true",
                        help="plain text output; round cards are no longer hidden")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
