"""Application settings and command-line parsing."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

INTERFACES = ("gui", "console")
BOARD_THEMES = ("Classic", "Blue", "Green")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    interface: str = "gui"
    log_level: str = "WARNING"

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True
    tile_size: int = 72  # px per square

    @property
    def use_console(self) -> bool:
        return self.interface == "console"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessgrid",
        description="Two-player chess on one board, in a window or a terminal.",
    )
    front_end = parser.add_mutually_exclusive_group()
    front_end.add_argument(
        "-g",
        "--gui",
        dest="interface",
        action="store_const",
        const="gui",
        help="open the board window (default)",
    )
    front_end.add_argument(
        "-c",
        "--console",
        dest="interface",
        action="store_const",
        const="console",
        help="play in the terminal instead of opening a window",
    )
    parser.set_defaults(interface=AppSettings.interface)
    parser.add_argument(
        "--log-level",
        default=AppSettings.log_level,
        type=str.upper,
        choices=LOG_LEVELS,
        help="logging verbosity (default: %(default)s)",
    )
    parser.add_argument(
        "--theme",
        default=AppSettings.board_theme,
        choices=BOARD_THEMES,
        help="board colour scheme for the window (default: %(default)s)",
    )
    parser.add_argument(
        "--no-coordinates",
        action="store_true",
        help="hide rank and file labels on the board",
    )
    parser.add_argument(
        "--no-legal-moves",
        action="store_true",
        help="do not mark reachable squares after selecting a piece",
    )
    parser.add_argument(
        "--tile-size",
        default=AppSettings.tile_size,
        type=int,
        help="square size in pixels (default: %(default)s)",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> AppSettings:
    """Build :class:`AppSettings` from command-line arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.tile_size < 16:
        parser.error("--tile-size must be at least 16")
    return AppSettings(
        interface=args.interface,
        log_level=args.log_level,
        board_theme=args.theme,
        show_coordinates=not args.no_coordinates,
        show_legal_moves=not args.no_legal_moves,
        tile_size=args.tile_size,
    )
