"""
dataset.py — Loads the bundled building list.

The list ships as a tab-separated file next to this module. Its header row
names the columns, so order in the file does not matter:

    name    number    deck    abc    color

Rows that don't parse (short rows, unknown deck or section) are dropped
and only reported in the debug log.
"""
from __future__ import annotations

import csv
import logging
import os
from typing import Mapping, Optional, Tuple

from .building import Building, Deck, Section

logger = logging.getLogger(__name__)

DATA_PATH = os.path.join(os.path.dirname(__file__), "data", "buildings.tsv")

# header column -> Building field
_COLUMNS = {
    "name":   "name",
    "number": "number",
    "deck":   "deck",
    "abc":    "section",
    "color":  "category",
}


def parse_row(row: Mapping[str, Optional[str]]) -> Building:
    """Turn one header-keyed row into a Building. Raises ValueError on bad input."""
    if row.get(None):
        raise ValueError(f"too many columns: {row[None]!r}")
    values = {}
    for column, field_name in _COLUMNS.items():
        raw = row.get(column)
        if raw is None or not raw.strip():
            raise ValueError(f"missing {column!r}")
        values[field_name] = raw.strip()

    values["deck"] = Deck.from_name(values["deck"])
    try:
        values["section"] = Section(values["section"])
    except ValueError:
        raise ValueError(f"unknown section: {values['section']!r}") from None
    return Building(**values)


def load_buildings(path: Optional[str] = None) -> Tuple[Building, ...]:
    """Read every well-formed building from ``path`` (default: the bundled list)."""
    path = path or DATA_PATH
    buildings = []
    skipped = 0
    with open(path, newline="", encoding="utf-8") as fh:
        reader = csv.DictReader(fh, delimiter="\t", quoting=csv.QUOTE_NONE)
        for line_no, row in enumerate(reader, start=2):
            try:
                buildings.append(parse_row(row))
            except ValueError as exc:
                skipped += 1
                logger.debug("skipping %s line %d: %s", os.path.basename(path), line_no, exc)

    logger.debug("loaded %d buildings (%d rows skipped)", len(buildings), skipped)
    return tuple(buildings)
