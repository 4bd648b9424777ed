from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Sequence

from .building import Building
from .filters import ingame_pools, setup_pools
from .pile import Pile
from .selection import Selection

logger = logging.getLogger(__name__)

Row = List[Building]

# ── layout of the initial board ──────────────────────────────────────────────
INITIAL_ROWS     = 3
B_CARDS_PER_ROW  = 2
A_CARDS_PER_ROW  = 3

# ── cards drawn during the game, by player count ─────────────────────────────
ROUND_4_C_CARDS = {2: 4, 3: 3, 4: 2, 5: 2}   # per player
ROUND_5_B_CARDS = {3: 2, 4: 2, 5: 3}


def round_3_a_cards(players: int) -> int:
    return players if players > 2 else 0


def round_4_c_cards(players: int) -> int:
    return ROUND_4_C_CARDS.get(players, 0)


def round_5_b_cards(players: int) -> int:
    return ROUND_5_B_CARDS.get(players, 0)


@dataclass
class Layout:
    """Everything dealt for one game."""
    selection: Selection
    initial_rows: List[Row] = field(default_factory=list)
    round_3: Row = field(default_factory=list)
    round_4: List[Row] = field(default_factory=list)   # one row per player
    round_5: Row = field(default_factory=list)
    dealt: FrozenSet[str] = frozenset()

    def all_cards(self) -> List[Building]:
        out = [b for row in self.initial_rows for b in row]
        out.extend(self.round_3)
        for row in self.round_4:
            out.extend(row)
        out.extend(self.round_5)
        return out

    def ingame_cards(self) -> List[Building]:
        return self.round_3 + [b for row in self.round_4 for b in row] + self.round_5


def deal(buildings: Sequence[Building], selection: Selection,
         rng: Optional[random.Random] = None) -> Layout:
    """
    Lay out the initial board and draw the round 3, 4 and 5 cards.

    The initial rows come from every selected deck; the round cards only
    from the main deck, minus any of its A/B cards already on the board.
    """
    rng = rng or random.Random()
    main_deck = selection.main_deck
    layout = Layout(selection=selection)

    setup_a, setup_b = setup_pools(buildings, selection.decks)
    a_pile = Pile.shuffled(setup_a, rng, label="setup A pile")
    b_pile = Pile.shuffled(setup_b, rng, label="setup B pile")
    logger.debug("setup piles for %s: %d A, %d B",
                 selection, a_pile.remaining(), b_pile.remaining())

    dealt: set[str] = set()
    # 3 rows, each 2 B cards followed by 3 A cards
    for _ in range(INITIAL_ROWS):
        row = b_pile.draw_many(B_CARDS_PER_ROW) + a_pile.draw_many(A_CARDS_PER_ROW)
        dealt.update(b.number for b in row if b.deck is main_deck)
        layout.initial_rows.append(row)
    layout.dealt = frozenset(dealt)
    logger.debug("main deck cards on the board: %s", sorted(dealt))

    own_a, own_b, own_c = ingame_pools(buildings, main_deck, dealt)
    a_pile = Pile.shuffled(own_a, rng, label=f"{main_deck} A pile")
    b_pile = Pile.shuffled(own_b, rng, label=f"{main_deck} B pile")
    c_pile = Pile.shuffled(own_c, rng, label=f"{main_deck} C pile")
    logger.debug("round piles: %d A, %d B, %d C",
                 a_pile.remaining(), b_pile.remaining(), c_pile.remaining())

    players = selection.players
    layout.round_3 = a_pile.draw_many(round_3_a_cards(players))

    per_player = round_4_c_cards(players)
    if per_player:
        layout.round_4 = [c_pile.draw_many(per_player) for _ in range(players)]

    layout.round_5 = b_pile.draw_many(round_5_b_cards(players))
    logger.debug("dealt %d cards, %d of them for rounds 3-5; left over: %d A, %d B, %d C",
                 len(layout.all_cards()), len(layout.ingame_cards()),
                 a_pile.remaining(), b_pile.remaining(), c_pile.remaining())
    return layout
