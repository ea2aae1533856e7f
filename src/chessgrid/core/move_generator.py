"""Pseudo-legal move geometry for every piece kind.

Each generator reads a grid (``grid[row][col] -> Piece | None``) and returns
the coordinates the piece could move to by geometry and occupancy alone.
King safety is never considered.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, TypeAlias

from chessgrid.core.enums import Color, PieceKind
from chessgrid.core.types import Coordinate

if TYPE_CHECKING:
    from chessgrid.core.piece import Piece

Grid: TypeAlias = Sequence[Sequence["Piece | None"]]
GeneratorFn: TypeAlias = Callable[["Piece", Grid], list[Coordinate]]


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
PAWN_PROMOTION_ROW: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}


def _occupant(grid: Grid, coord: Coordinate) -> Piece | None:
    return grid[coord.row][coord.col]


def _step_moves(
    piece: Piece, grid: Grid, offsets: tuple[tuple[int, int], ...]
) -> list[Coordinate]:
    """Single-step targets that are empty or hold an enemy piece."""
    moves: list[Coordinate] = []
    for drow, dcol in offsets:
        target = piece.position.offset(drow, dcol)
        if target is None:
            continue
        occupant = _occupant(grid, target)
        if occupant is None or occupant.color != piece.color:
            moves.append(target)
    return moves


def _sliding_moves(
    piece: Piece, grid: Grid, directions: tuple[tuple[int, int], ...]
) -> list[Coordinate]:
    """Ray-cast along *directions* until the edge, a blocker, or a capture."""
    moves: list[Coordinate] = []
    for drow, dcol in directions:
        target = piece.position.offset(drow, dcol)
        while target is not None:
            occupant = _occupant(grid, target)
            if occupant is not None:
                if occupant.color != piece.color:
                    moves.append(target)
                break
            moves.append(target)
            target = target.offset(drow, dcol)
    return moves


def pawn_moves(piece: Piece, grid: Grid) -> list[Coordinate]:
    moves: list[Coordinate] = []
    direction = PAWN_DIRECTION[piece.color]
    pos = piece.position

    one_step = pos.offset(direction, 0)
    if one_step is not None and _occupant(grid, one_step) is None:
        moves.append(one_step)
        # Double step needs both squares clear and an unmoved pawn on its home row.
        if pos.row == PAWN_START_ROW[piece.color] and not piece.has_moved:
            two_step = pos.offset(2 * direction, 0)
            if two_step is not None and _occupant(grid, two_step) is None:
                moves.append(two_step)

    for dcol in (-1, 1):
        target = pos.offset(direction, dcol)
        if target is None:
            continue
        occupant = _occupant(grid, target)
        if occupant is not None and occupant.color != piece.color:
            moves.append(target)
    return moves


def knight_moves(piece: Piece, grid: Grid) -> list[Coordinate]:
    return _step_moves(piece, grid, KNIGHT_OFFSETS)


def bishop_moves(piece: Piece, grid: Grid) -> list[Coordinate]:
    return _sliding_moves(piece, grid, BISHOP_DIRS)


def rook_moves(piece: Piece, grid: Grid) -> list[Coordinate]:
    return _sliding_moves(piece, grid, ROOK_DIRS)


def queen_moves(piece: Piece, grid: Grid) -> list[Coordinate]:
    return _sliding_moves(piece, grid, QUEEN_DIRS)


def king_moves(piece: Piece, grid: Grid) -> list[Coordinate]:
    return _step_moves(piece, grid, KING_OFFSETS)


_GENERATORS: dict[PieceKind, GeneratorFn] = {
    PieceKind.PAWN: pawn_moves,
    PieceKind.KNIGHT: knight_moves,
    PieceKind.BISHOP: bishop_moves,
    PieceKind.ROOK: rook_moves,
    PieceKind.QUEEN: queen_moves,
    PieceKind.KING: king_moves,
}

_missing = set(PieceKind) - _GENERATORS.keys()
if _missing:
    raise RuntimeError(f"No move generator for: {sorted(_missing)}")


def possible_moves(piece: Piece, grid: Grid) -> list[Coordinate]:
    """Pseudo-legal destinations for *piece* on *grid*."""
    return _GENERATORS[piece.kind](piece, grid)
