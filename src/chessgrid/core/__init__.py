"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessgrid.core import Board, notation_to_coords

    board = Board()
    src, dst = notation_to_coords("E2"), notation_to_coords("E4")
    board.move_piece(src.row, src.col, dst.row, dst.col)
"""

from chessgrid.core.board import Board, BoardEvents
from chessgrid.core.enums import Color, PieceKind
from chessgrid.core.move_generator import possible_moves
from chessgrid.core.piece import Piece
from chessgrid.core.types import (
    Coordinate,
    OutOfBoardError,
    all_coordinates,
    coords_to_notation,
    is_valid_notation,
    is_valid_position,
    notation_to_coords,
)

__all__ = [
    # Enums
    "Color",
    "PieceKind",
    # Types / helpers
    "Coordinate",
    "OutOfBoardError",
    "all_coordinates",
    "coords_to_notation",
    "is_valid_notation",
    "is_valid_position",
    "notation_to_coords",
    # Domain objects
    "Board",
    "BoardEvents",
    "Piece",
    "possible_moves",
]
