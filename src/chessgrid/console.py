"""Interactive terminal front-end.

Reads commands line by line and drives a :class:`GameController`::

    E2 E4      move a piece
    help       list commands
    reset      start a new game
    display    redraw the board
    status     show turn, piece and capture counts
    quit/exit  leave
"""

from __future__ import annotations

import logging
import re
import sys
from typing import TextIO

from chessgrid.core.board import Board
from chessgrid.core.types import BOARD_SIZE
from chessgrid.game.controller import GameController

_LOGGER = logging.getLogger(__name__)

_MOVE_RE = re.compile(r"^([A-Ha-h][1-8])\s+([A-Ha-h][1-8])$")
_FILE_HEADER = "    " + "   ".join("ABCDEFGH")
_SEPARATOR = "  +" + "---+" * BOARD_SIZE

HELP_TEXT = """\
=== CHESS GAME HELP ===
Commands:
  [FROM] [TO] - Make a move (e.g., E2 E4)
  help        - Show this help message
  reset       - Reset the board to starting position
  display     - Redisplay the current board
  status      - Show game status
  quit/exit   - Exit the game

Move Format:
  - Squares are a file A-H followed by a rank 1-8
  - Example: E2 E4 (move piece from E2 to E4)

Piece Labels:
  wP/bP = Pawn    wR/bR = Rook    wN/bN = Knight
  wB/bB = Bishop  wQ/bQ = Queen   wK/bK = King
========================"""


def render_board(board: Board) -> str:
    """ASCII diagram of *board* with rank/file labels and ``wP``-style pieces."""
    lines = [
        f"Current player: {board.current_player.name}",
        "",
        _FILE_HEADER,
        _SEPARATOR,
    ]
    for row, cells in enumerate(board.grid()):
        rank = BOARD_SIZE - row
        body = "|".join(f" {p.label}" if p else "   " for p in cells)
        lines.append(f"{rank} |{body}| {rank}")
        lines.append(_SEPARATOR)
    lines.append(_FILE_HEADER)
    return "\n".join(lines)


class ConsoleGame:
    """Line-oriented game loop over arbitrary text streams."""

    def __init__(
        self,
        controller: GameController | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._controller = controller if controller is not None else GameController()
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._running = False

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        """Play until ``quit``/``exit`` or end of input."""
        self._print("=== WELCOME TO CONSOLE CHESS ===")
        self._print("Enter moves in format: FROM TO (e.g., E2 E4)")
        self._print("Type 'help' for commands, 'quit' to exit")
        self._running = True
        show_board = True

        while self._running:
            if show_board:
                self._print("")
                self._print(render_board(self._controller.board))
            color = self._controller.board.current_player
            self._out.write(f"{color.name}'s turn - Enter move: ")
            self._out.flush()

            line = self._in.readline()
            if not line:
                _LOGGER.debug("Input closed, leaving the game loop")
                break
            show_board = self.handle_command(line)

        self._running = False
        self._print("Thanks for playing!")

    def handle_command(self, line: str) -> bool:
        """Execute one input line; return whether the board should be redrawn."""
        text = line.strip()
        if not text:
            self._print("Please enter a command.")
            return False

        command = text.lower()
        if command in ("quit", "exit"):
            self._running = False
            return False
        if command == "help":
            self._print(HELP_TEXT)
            return False
        if command == "reset":
            self._controller.reset()
            self._print("Board reset to starting position.")
            return True
        if command == "display":
            return True
        if command == "status":
            self._print(self.status_text())
            return False
        return self._handle_move(text)

    def status_text(self) -> str:
        st = self._controller.status()
        return "\n".join(
            [
                "=== GAME STATUS ===",
                f"Current turn: {st.current_player.name}",
                f"White pieces: {st.white_pieces}",
                f"Black pieces: {st.black_pieces}",
                f"White captured: {st.white_captured}",
                f"Black captured: {st.black_captured}",
                "===================",
            ]
        )

    def _handle_move(self, text: str) -> bool:
        match = _MOVE_RE.match(text)
        if match is None:
            self._print("Invalid move format. Use format: FROM TO (e.g., E2 E4)")
            return False
        outcome = self._controller.submit_notation(match.group(1), match.group(2))
        self._print(outcome.message)
        if not outcome.ok:
            self._print("Invalid move. Try again.")
        return outcome.ok

    def _print(self, text: str) -> None:
        self._out.write(text + "\n")


def run_console(stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Run a console game on the given streams (stdio by default)."""
    ConsoleGame(stdin=stdin, stdout=stdout).run()
    return 0
