"""
render.py — Prints buildings as little ASCII cards.

Each card is five lines tall and laid side by side with the rest of its row:

    /----------------------\\
    | Smokehouse           |
    |                      |
    | A01                  |
    \\----------------------/

Text is coloured by category label. Spoiler rows (cards for later rounds)
are printed in black so they stay hidden until someone looks closely.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from rich.console import Console
from rich.text import Text

from ..core.building import Building
from ..core.setup import Layout
from .constants import (
    BLANK, BOTTOM, CATEGORY_STYLES, DEFAULT_STYLE, PLAYER_HEADER,
    ROUND_3_HEADER, ROUND_4_HEADER, ROUND_5_HEADER, SEPARATOR,
    SEPARATOR_AFTER, SPOILER_STYLE, TEXT_W, TOP,
)


def make_console(color: bool = True, **kwargs) -> Console:
    """Console that never re-wraps card rows or auto-highlights card numbers."""
    kwargs.setdefault("highlight", False)
    kwargs.setdefault("soft_wrap", True)
    if not color:
        kwargs["no_color"] = True
    return Console(**kwargs)


def card_style(card: Building, spoiler: bool = False) -> str:
    if spoiler:
        return SPOILER_STYLE
    return CATEGORY_STYLES.get(card.category, DEFAULT_STYLE)


def _field(value: str, style: str) -> Text:
    line = Text("| ")
    line.append(f"{value:<{TEXT_W}.{TEXT_W}}", style=style)
    line.append(" |")
    return line


def card_row_lines(cards: Sequence[Building], separator: bool = False,
                   spoiler: bool = False) -> List[Text]:
    """Build the five lines of a row of cards."""
    lines = [Text() for _ in range(5)]
    for i, card in enumerate(cards):
        style = card_style(card, spoiler)
        parts = [
            Text(TOP),
            _field(card.name, style),
            Text(BLANK),
            _field(card.number, style),
            Text(BOTTOM),
        ]
        for line, part in zip(lines, parts):
            line.append_text(part)
            if separator and i == SEPARATOR_AFTER:
                line.append(SEPARATOR)
    return lines


def print_card_row(console: Console, cards: Sequence[Building],
                   separator: bool = False, spoiler: bool = False) -> None:
    for line in card_row_lines(cards, separator, spoiler):
        console.print(line)


def print_layout(layout: Layout, console: Optional[Console] = None) -> None:
    """Print the initial rows, then each round that draws any cards."""
    console = console or make_console()

    for row in layout.initial_rows:
        print_card_row(console, row, separator=True)

    if layout.round_3:
        console.print(ROUND_3_HEADER)
        print_card_row(console, layout.round_3, spoiler=True)

    if layout.round_4:
        console.print(ROUND_4_HEADER)
        for n, row in enumerate(layout.round_4, start=1):
            console.print(PLAYER_HEADER.format(n=n))
            print_card_row(console, row, spoiler=True)

    if layout.round_5:
        console.print(ROUND_5_HEADER)
        print_card_row(console, layout.round_5, spoiler=True)
