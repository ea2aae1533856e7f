"""Board - piece placement, turn arbitration and move execution."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessgrid.core.enums import Color, PieceKind
from chessgrid.core.piece import Piece
from chessgrid.core.types import (
    BOARD_SIZE,
    Coordinate,
    OutOfBoardError,
    is_valid_position,
)

_LOGGER = logging.getLogger(__name__)

BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)

# color -> (back row, pawn row)
_HOME_ROWS: dict[Color, tuple[int, int]] = {
    Color.WHITE: (7, 6),
    Color.BLACK: (0, 1),
}

GridSnapshot = tuple[tuple[Piece | None, ...], ...]

MoveCallback = Callable[[Piece, Coordinate, Coordinate], None]  # piece, from, to
CaptureCallback = Callable[[Piece, Piece], None]  # captured, capturer
ResetCallback = Callable[[], None]


@dataclass
class BoardEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_capture: list[CaptureCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


class Board:
    """Mutable 8x8 board holding the pieces and the side to move.

    ``move_piece`` is the only way pieces change squares during play; it
    either applies a move completely or leaves the board untouched.
    """

    __slots__ = ("_squares", "_current_player", "_last_captured", "events")

    def __init__(self) -> None:
        self._squares: list[list[Piece | None]] = _empty_squares()
        self._current_player = Color.WHITE
        self._last_captured: Piece | None = None
        self.events = BoardEvents()
        self.initialize()

    @classmethod
    def empty(cls, current_player: Color = Color.WHITE) -> Board:
        """A board with no pieces, for custom setups."""
        board = cls()
        board.clear()
        board._current_player = current_player
        return board

    # -- Lifecycle ----------------------------------------------------------

    def initialize(self) -> None:
        """Place the standard opening array and give White the move."""
        self.clear()
        for color, (back_row, pawn_row) in _HOME_ROWS.items():
            for col, kind in enumerate(BACK_RANK):
                self.place(kind, color, Coordinate(back_row, col))
            for col in range(BOARD_SIZE):
                self.place(PieceKind.PAWN, color, Coordinate(pawn_row, col))
        self._current_player = Color.WHITE

    def reset(self) -> None:
        self.initialize()
        _LOGGER.debug("Board reset to the starting position")
        for cb in self.events.on_reset:
            cb()

    def clear(self) -> None:
        self._squares = _empty_squares()
        self._last_captured = None

    # -- Element access -----------------------------------------------------

    def get_piece(self, row: int, col: int) -> Piece | None:
        """Occupant of ``(row, col)``; raises :class:`OutOfBoardError` off the grid."""
        if not is_valid_position(row, col):
            raise OutOfBoardError(row, col)
        return self._squares[row][col]

    def __getitem__(self, coord: Coordinate) -> Piece | None:
        return self._squares[coord.row][coord.col]

    def is_empty(self, row: int, col: int) -> bool:
        """Whether ``(row, col)`` is an empty square (False off the grid)."""
        if not is_valid_position(row, col):
            return False
        return self._squares[row][col] is None

    @property
    def current_player(self) -> Color:
        return self._current_player

    def set_current_player(self, color: Color) -> None:
        """Force the side to move (setups and tests only)."""
        self._current_player = Color(color)

    @property
    def last_captured(self) -> Piece | None:
        """Piece removed by the most recent successful move, if any."""
        return self._last_captured

    # -- Query helpers ------------------------------------------------------

    def grid(self) -> GridSnapshot:
        """Read-only snapshot of the grid, indexed ``[row][col]``."""
        return tuple(tuple(row) for row in self._squares)

    def pieces(self, color: Color | None = None) -> list[Piece]:
        """Live pieces in row-major order, optionally filtered by *color*."""
        return [
            piece
            for row in self._squares
            for piece in row
            if piece is not None and (color is None or piece.color == color)
        ]

    def piece_count(self, color: Color | None = None) -> int:
        return len(self.pieces(color))

    def possible_moves(self, row: int, col: int) -> list[Coordinate]:
        """Pseudo-legal destinations of the piece on ``(row, col)``."""
        piece = self.get_piece(row, col)
        if piece is None:
            return []
        return piece.possible_moves(self._squares)

    # -- Setup --------------------------------------------------------------

    def place(self, kind: PieceKind, color: Color, coord: Coordinate) -> Piece:
        """Put a new piece on *coord*, replacing any occupant."""
        piece = Piece(kind, color, coord)
        self._squares[coord.row][coord.col] = piece
        return piece

    def remove(self, coord: Coordinate) -> Piece | None:
        piece = self._squares[coord.row][coord.col]
        self._squares[coord.row][coord.col] = None
        return piece

    # -- Move execution -----------------------------------------------------

    def move_piece(self, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
        """Execute a move if it is legal for the side to move.

        Returns ``False`` (board unchanged) when an endpoint is off the grid,
        the source is empty, the piece belongs to the other side, the
        destination holds a friendly piece, or the piece cannot reach the
        destination.
        """
        if not (
            is_valid_position(from_row, from_col) and is_valid_position(to_row, to_col)
        ):
            _LOGGER.debug(
                "Rejected move (%s, %s) -> (%s, %s): off the board",
                from_row,
                from_col,
                to_row,
                to_col,
            )
            return False

        src = Coordinate(from_row, from_col)
        dst = Coordinate(to_row, to_col)
        piece = self[src]
        if piece is None:
            _LOGGER.debug("Rejected move %s-%s: no piece on %s", src, dst, src)
            return False

        if piece.color != self._current_player:
            _LOGGER.debug(
                "Rejected move %s-%s: it is %s's turn", src, dst, self._current_player
            )
            return False

        target = self[dst]
        if target is not None and target.color == piece.color:
            _LOGGER.debug("Rejected move %s-%s: cannot capture own piece", src, dst)
            return False

        if dst not in piece.possible_moves(self._squares):
            _LOGGER.debug("Rejected move %s-%s: not a %s move", src, dst, piece.kind)
            return False

        self._squares[dst.row][dst.col] = piece
        self._squares[src.row][src.col] = None
        piece.position = dst
        piece.has_moved = True
        self._last_captured = target
        self._current_player = self._current_player.opposite

        if target is not None:
            _LOGGER.info("%s captures %s on %s", piece.name, target.name, dst)
            for cb in self.events.on_capture:
                cb(target, piece)
        for cb in self.events.on_move:
            cb(piece, src, dst)
        return True

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = [p.label if p else ".." for p in self._squares[row]]
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  A  B  C  D  E  F  G  H")
        return "\n".join(rows)


def _empty_squares() -> list[list[Piece | None]]:
    return [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
