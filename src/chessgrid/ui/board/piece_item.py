"""PieceItem — a chess piece glyph on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsSimpleTextItem

from chessgrid.core.enums import PieceKind
from chessgrid.core.piece import Piece
from chessgrid.core.types import Coordinate

# Filled glyphs for both colors; the brush decides white or black.
_SOLID_SYMBOLS: dict[PieceKind, str] = {
    PieceKind.PAWN: "♟",
    PieceKind.KNIGHT: "♞",
    PieceKind.BISHOP: "♝",
    PieceKind.ROOK: "♜",
    PieceKind.QUEEN: "♛",
    PieceKind.KING: "♚",
}


class PieceItem(QGraphicsSimpleTextItem):
    """A single chess piece on the board.

    Stores the piece and the coordinate it is drawn on.
    """

    _FONT_RATIO = 0.75

    def __init__(
        self, piece: Piece, coord: Coordinate, tile_size: int, fill: QColor
    ) -> None:
        super().__init__(_SOLID_SYMBOLS[piece.kind])
        self.piece = piece
        self.coord = coord
        self._tile_size = tile_size

        self.setBrush(QBrush(fill))
        outline = QColor(20, 20, 20) if fill.lightness() > 127 else QColor(235, 235, 235)
        self.setPen(QPen(outline, 1.0))
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)
        self.set_tile_size(tile_size)

    def set_tile_size(self, size: int) -> None:
        """Update tile size and rescale the glyph."""
        self._tile_size = size
        font = QFont()
        font.setPixelSize(max(8, int(size * self._FONT_RATIO)))
        self.setFont(font)

    def place_at(self, x: float, y: float) -> None:
        """Center the glyph in the tile whose top-left corner is (x, y)."""
        bounds = self.boundingRect()
        t = self._tile_size
        self.setPos(x + (t - bounds.width()) / 2, y + (t - bounds.height()) / 2)
