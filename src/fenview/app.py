"""Command-line entry point: ``fen "<FEN>" [-i] [-w]``."""

from __future__ import annotations

import argparse
import logging
import sys

from fenview.config import BOARD_THEMES, ViewSettings
from fenview.core.errors import FenError, FieldCountError
from fenview.core.notation import STARTING_FEN, position_from_fen
from fenview.render.terminal import TerminalRenderer

_LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="fen", description="Parse a Forsyth–Edwards Notation (FEN) string"
    )
    ap.add_argument("fen", help="input FEN string")
    ap.add_argument(
        "-w", "--window", action="store_true", help="spawn a graphical window containing the board"
    )
    ap.add_argument(
        "-i", "--info", action="store_true", help="show information extracted from the fen"
    )
    ap.add_argument("-d", "--debug", action="store_true", help="enable debug logging")
    ap.add_argument("--theme", choices=BOARD_THEMES, default="Classic", help="window board theme")
    ap.add_argument(
        "--ascii", action="store_true", help="print FEN letters instead of chess glyphs"
    )
    ap.add_argument(
        "--no-coordinates", action="store_true", help="hide rank and file labels"
    )
    return ap


def _settings_from_args(args: argparse.Namespace) -> ViewSettings:
    return ViewSettings(
        board_theme=args.theme,
        show_coordinates=not args.no_coordinates,
        unicode_pieces=not args.ascii,
        show_info=args.info,
    )


def main(argv: list[str] | None = None) -> int:
    """Parse the FEN given on the command line and display it."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        position = position_from_fen(args.fen)
    except FenError as exc:
        _LOGGER.debug("Rejected FEN %r: %s", args.fen, exc.kind)
        print(f"Error: {exc}", file=sys.stderr)
        if isinstance(exc, FieldCountError):
            print(f"Example FEN: {STARTING_FEN}", file=sys.stderr)
        return 1

    settings = _settings_from_args(args)
    TerminalRenderer(settings).render(position)

    if args.window:
        from fenview.ui.window_renderer import WindowRenderer

        WindowRenderer(settings).render(position)
    return 0


if __name__ == "__main__":
    sys.exit(main())
