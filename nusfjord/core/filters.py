from __future__ import annotations

from typing import AbstractSet, Iterable, List, Tuple

from .building import Building, Deck, Section


def in_section(buildings: Iterable[Building], section: Section,
               decks: AbstractSet[Deck]) -> List[Building]:
    return [b for b in buildings if b.section is section and b.in_decks(decks)]


def setup_pools(buildings: Iterable[Building],
                decks: AbstractSet[Deck]) -> Tuple[List[Building], List[Building]]:
    """A and B buildings from every selected deck, for the initial rows."""
    buildings = list(buildings)
    return (in_section(buildings, Section.A, decks),
            in_section(buildings, Section.B, decks))


def ingame_pools(buildings: Iterable[Building], main_deck: Deck,
                 dealt: AbstractSet[str]) -> Tuple[List[Building], List[Building], List[Building]]:
    """
    A, B and C buildings of the main deck only, for rounds 3-5.

    A and B cards already laid out in the initial rows are left out. C cards
    never appear in the initial setup, so nothing is excluded from them.
    """
    own = [b for b in buildings if b.deck is main_deck]
    a = [x for x in own if x.section is Section.A and x.number not in dealt]
    b = [x for x in own if x.section is Section.B and x.number not in dealt]
    c = [x for x in own if x.section is Section.C]
    return a, b, c
