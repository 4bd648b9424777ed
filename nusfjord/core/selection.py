from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable

from .building import ALL_DECKS, BASE_DECKS, Deck

MIN_PLAYERS = 1
MAX_PLAYERS = 5
DEFAULT_PLAYERS = 2


def decks_to_use(main_deck: Deck, add: Iterable[Deck] = (),
                 all_base: bool = False, all_decks: bool = False) -> FrozenSet[Deck]:
    """
    Decks that feed the initial setup. The main deck is always in.

    Add-in decks only ever reach the initial rows; rounds 3-6 draw from the
    main deck alone (rule book, page 15).
    """
    decks = {main_deck}
    add = list(add)
    if add:
        decks.update(add)
    elif all_base:
        decks |= BASE_DECKS
    elif all_decks:
        decks |= ALL_DECKS
    return frozenset(decks)


@dataclass(frozen=True, slots=True)
class Selection:
    players: int
    main_deck: Deck
    decks: FrozenSet[Deck]

    def __post_init__(self) -> None:
        if not MIN_PLAYERS <= self.players <= MAX_PLAYERS:
            raise ValueError(f"players must be {MIN_PLAYERS}-{MAX_PLAYERS}, got {self.players}")
        if self.main_deck not in self.decks:
            raise ValueError(f"main deck {self.main_deck} missing from {sorted(map(str, self.decks))}")

    @classmethod
    def build(cls, main_deck: Deck, players: int = DEFAULT_PLAYERS, **options) -> Selection:
        return cls(players=players, main_deck=main_deck,
                   decks=decks_to_use(main_deck, **options))

    @classmethod
    def from_args(cls, args) -> Selection:
        """Build a selection from the parsed command line (see cli.py)."""
        return cls.build(
            Deck.from_name(args.deck),
            players=args.players,
            add=[Deck.from_name(d) for d in args.add or ()],
            all_base=args.all_base_decks,
            all_decks=args.all_decks,
        )

    def __str__(self) -> str:
        extra = sorted(str(d) for d in self.decks if d is not self.main_deck)
        text = f"{self.main_deck}, {self.players} player(s)"
        if extra:
            text += " + " + ", ".join(extra)
        return text
