from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Deck(Enum):
    CODFISH  = "Codfish"
    MACKEREL = "Mackerel"
    HERRING  = "Herring"
    PLAICE   = "Plaice"
    SALMON   = "Salmon"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> Deck:
        """Look a deck up by its printed name, e.g. ``"Codfish"``."""
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"unknown deck: {name!r}") from None


class Section(Enum):
    A = "A"
    B = "B"
    C = "C"

    def __str__(self) -> str:
        return self.value


DECK_NAMES = [d.value for d in Deck]

# The three decks in the base box; Plaice and Salmon are expansions.
BASE_DECKS = frozenset({Deck.CODFISH, Deck.HERRING, Deck.MACKEREL})
ALL_DECKS  = frozenset(Deck)


@dataclass(frozen=True, slots=True)
class Building:
    name: str
    number: str     # printed card id, unique per deck and section
    deck: Deck
    section: Section
    category: str   # display only, picks the text colour

    def in_decks(self, decks: Iterable[Deck]) -> bool:
        return self.deck in decks

    def __str__(self) -> str:
        return f"{self.number} {self.name}"

    def __repr__(self) -> str:
        return f"Building({self.deck}/{self.section} {self.number} {self.name!r})"
