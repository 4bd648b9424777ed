from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .building import Building


class PileExhaustedError(IndexError):
    """Raised when a pile runs out of cards mid-deal."""


@dataclass(slots=True)
class Pile:
    cards: List[Building]
    label: str = "pile"

    @classmethod
    def shuffled(cls, cards: Iterable[Building], rng: Optional[random.Random] = None,
                 *, label: str = "pile") -> Pile:
        rng = rng or random.Random()
        pile = list(cards)
        rng.shuffle(pile)
        return cls(cards=pile, label=label)

    def draw(self) -> Building:
        if not self.cards:
            raise PileExhaustedError(f"Cannot draw: {self.label} is empty")
        return self.cards.pop(0)

    def draw_many(self, count: int) -> List[Building]:
        return [self.draw() for _ in range(count)]

    def remaining(self) -> int:
        return len(self.cards)
