"""Board coordinates and file/rank notation helpers.

Board layout (row-major, Black at the top)::

    row 0:  A8 B8 C8 D8 E8 F8 G8 H8
    row 1:  A7 ...
    ...
    row 7:  A1 B1 C1 D1 E1 F1 G1 H1

Columns map to files (``A`` = 0), rows map to ranks (``row = 8 - rank``).
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8

_FILES = "ABCDEFGH"
_RANKS = "12345678"


class OutOfBoardError(IndexError):
    """Raised when a row/column pair lies outside the 8x8 grid."""

    def __init__(self, row: object, col: object) -> None:
        super().__init__(f"Invalid board position: ({row}, {col})")
        self.row = row
        self.col = col


def is_valid_position(row: int, col: int) -> bool:
    """Whether *row* and *col* both lie in ``[0, 7]``."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


@dataclass(frozen=True, slots=True, order=True)
class Coordinate:
    """Validated ``(row, col)`` pair on the board."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not is_valid_position(self.row, self.col):
            raise OutOfBoardError(self.row, self.col)

    @classmethod
    def from_notation(cls, text: str) -> Coordinate:
        """Parse ``"E4"``-style notation, raising ``ValueError`` if malformed."""
        coord = notation_to_coords(text)
        if coord is None:
            raise ValueError(f"Invalid square notation: {text!r}")
        return coord

    @property
    def notation(self) -> str:
        """File/rank name, e.g. ``(7, 0)`` → ``'A1'``."""
        return _FILES[self.col] + str(BOARD_SIZE - self.row)

    def offset(self, drow: int, dcol: int) -> Coordinate | None:
        """The coordinate *drow*/*dcol* away, or ``None`` if it falls off the grid."""
        row, col = self.row + drow, self.col + dcol
        if not is_valid_position(row, col):
            return None
        return Coordinate(row, col)

    def __str__(self) -> str:
        return self.notation


def notation_to_coords(text: object) -> Coordinate | None:
    """Convert ``"E4"`` (case-insensitive file) to a coordinate.

    Returns ``None`` for anything that is not exactly a file letter A–H
    followed by a rank digit 1–8.
    """
    if not isinstance(text, str) or len(text) != 2:
        return None
    file_char = text[0].upper()
    rank_char = text[1]
    if file_char not in _FILES or rank_char not in _RANKS:
        return None
    return Coordinate(BOARD_SIZE - int(rank_char), _FILES.index(file_char))


def coords_to_notation(row: int, col: int) -> str | None:
    """Convert ``(row, col)`` to ``"E4"`` notation, or ``None`` if off the board."""
    if not is_valid_position(row, col):
        return None
    return Coordinate(row, col).notation


def is_valid_notation(text: object) -> bool:
    return notation_to_coords(text) is not None


def all_coordinates() -> list[Coordinate]:
    """All 64 coordinates in row-major order."""
    return [Coordinate(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Coordinate(0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Coordinate(1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Coordinate(2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Coordinate(3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Coordinate(4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Coordinate(5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Coordinate(6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Coordinate(7, c) for c in range(8))
