"""Per-color bookkeeping derived from the board."""

from __future__ import annotations

from chessgrid.core.board import GridSnapshot
from chessgrid.core.enums import Color
from chessgrid.core.piece import Piece


class Player:
    """One side's live pieces and the enemy pieces it has captured.

    The piece list is a view recomputed from a grid snapshot; the board
    stays the authority on where pieces are.
    """

    __slots__ = ("_color", "_available", "_captured")

    def __init__(self, color: Color) -> None:
        self._color = color
        self._available: list[Piece] = []
        self._captured: list[Piece] = []

    @property
    def color(self) -> Color:
        return self._color

    @property
    def available_pieces(self) -> list[Piece]:
        return list(self._available)

    @property
    def captured_pieces(self) -> list[Piece]:
        return list(self._captured)

    @property
    def available_piece_count(self) -> int:
        return len(self._available)

    @property
    def captured_piece_count(self) -> int:
        return len(self._captured)

    def has_available_pieces(self) -> bool:
        return bool(self._available)

    def add_piece(self, piece: Piece | None) -> None:
        if piece is not None and piece.color == self._color:
            self._available.append(piece)

    def remove_piece(self, piece: Piece) -> None:
        if piece in self._available:
            self._available.remove(piece)

    def add_captured_piece(self, piece: Piece | None) -> None:
        """Record an enemy piece taken by this side; own pieces are ignored."""
        if piece is not None and piece.color != self._color:
            self._captured.append(piece)

    def clear_captured(self) -> None:
        self._captured.clear()

    def update_available_pieces(self, grid: GridSnapshot) -> None:
        """Rebuild the live-piece list from *grid*."""
        self._available = [
            piece
            for row in grid
            for piece in row
            if piece is not None and piece.color == self._color
        ]

    def __str__(self) -> str:
        return f"{self._color.name} Player ({len(self._available)} pieces)"
