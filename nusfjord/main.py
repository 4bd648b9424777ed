from __future__ import annotations

import logging
import random
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install

from nusfjord.cli import parse_args
from nusfjord.core.dataset import load_buildings
from nusfjord.core.selection import Selection
from nusfjord.core.setup import deal
from nusfjord.ui.render import make_console, print_layout

logger = logging.getLogger("nusfjord")


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    install(show_locals=False)
    configure_logging(args.verbose)

    selection = Selection.from_args(args)
    logger.debug("selection: %s (decks: %s)", selection,
                 ", ".join(sorted(str(d) for d in selection.decks)))

    layout = deal(load_buildings(), selection, random.Random(args.seed))
    print_layout(layout, make_console(color=not args.no_color))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
