"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessgrid.core.board import Board
from chessgrid.core.enums import Color
from chessgrid.core.types import BOARD_SIZE, Coordinate, all_coordinates
from chessgrid.ui.board.piece_item import PieceItem
from chessgrid.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece items.

    Signals:
        move_made(Coordinate, Coordinate): Emitted when the user clicks one
            of their pieces and then one of its reachable squares.
    """

    move_made = pyqtSignal(object, object)

    DEFAULT_TILE = 72  # px per square

    def __init__(self, parent: QObject | None = None, tile_size: int = DEFAULT_TILE) -> None:
        super().__init__(parent)
        self._tile = tile_size
        self._theme = BoardTheme.default()
        self._board: Board | None = None

        # Interaction state
        self._selected: Coordinate | None = None
        self._targets: list[Coordinate] = []
        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Coordinate, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._last_move_highlights: list[QGraphicsRectItem] = []
        self._target_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Coordinate, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def tile_size(self) -> int:
        return self._tile

    @property
    def selected(self) -> Coordinate | None:
        return self._selected

    def set_board(self, board: Board) -> None:
        """Display *board* (full redraw of pieces)."""
        self._board = board
        self.sync()

    def sync(self) -> None:
        """Re-read the board after it changed."""
        self._clear_selection()
        self._sync_pieces()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece interaction."""
        self._interactive = interactive

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide reachable-square highlights."""
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._target_items)

    def highlight_last_move(self, source: Coordinate | None, target: Coordinate | None) -> None:
        """Highlight origin/destination of the last played move."""
        self._clear_items(self._last_move_highlights)
        if source is None or target is None:
            return
        for coord, color in [
            (source, self._theme.last_move_from),
            (target, self._theme.last_move_to),
        ]:
            rect = self._make_highlight(coord, color)
            rect.setZValue(0.5)
            self._last_move_highlights.append(rect)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self._tile
        font = QFont()
        font.setPixelSize(max(9, t // 6))

        for coord in all_coordinates():
            row, col = coord.row, coord.col
            is_light = (row + col) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(col * t, row * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[coord] = rect

            text_color = self._theme.coord_light if is_light else self._theme.coord_dark

            # Rank numbers (left edge)
            if col == 0:
                self._add_label(str(BOARD_SIZE - row), font, text_color, 2, row * t + 1)

            # File letters (bottom edge)
            if row == BOARD_SIZE - 1:
                self._add_label(
                    coord.notation[0], font, text_color, col * t + t - 12, row * t + t - 16
                )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_label(self, text: str, font: QFont, color: QColor, x: float, y: float) -> None:
        txt = QGraphicsSimpleTextItem(text)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._board is None:
            return

        t = self._tile
        for coord in all_coordinates():
            piece = self._board[coord]
            if piece is None:
                continue
            fill = (
                self._theme.white_piece
                if piece.color == Color.WHITE
                else self._theme.black_piece
            )
            item = PieceItem(piece, coord, t, fill)
            self.addItem(item)
            item.place_at(coord.col * t, coord.row * t)
            self._piece_items[coord] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or self._board is None or event is None:
            return super().mousePressEvent(event)
        self.click(self._pos_to_coord(event.scenePos()))
        super().mousePressEvent(event)

    def click(self, coord: Coordinate | None) -> None:
        """Handle a click on *coord* (``None`` = outside the board)."""
        if coord is None or self._board is None:
            self._clear_selection()
            return

        # Clicking a reachable target → make the move
        if self._selected is not None and coord in self._targets:
            source = self._selected
            self._clear_selection()
            self.move_made.emit(source, coord)
            return

        piece = self._board[coord]
        if piece is not None and piece.color == self._board.current_player:
            self._select(coord)
        else:
            self._clear_selection()

    # ── Selection / highlights ───────────────────────────────────────────

    def _select(self, coord: Coordinate) -> None:
        self._clear_selection()
        if self._board is None:
            return
        self._selected = coord
        self._highlight_items.append(
            self._make_highlight(coord, self._theme.highlight_from)
        )

        self._targets = self._board.possible_moves(coord.row, coord.col)
        if self._show_legal_moves:
            for target in self._targets:
                self._target_items.append(
                    self._make_highlight(target, self._theme.highlight_to)
                )

    def _clear_selection(self) -> None:
        self._selected = None
        self._targets = []
        self._clear_items(self._highlight_items)
        self._clear_items(self._target_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_coord(self, pos: QPointF) -> Coordinate | None:
        """Scene position → board coordinate."""
        t = self._tile
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return Coordinate(row, col)

    def _make_highlight(self, coord: Coordinate, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self._tile
        rect = QGraphicsRectItem(coord.col * t, coord.row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
