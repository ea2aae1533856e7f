from chessgrid.ui.board.board_scene import BoardScene
from chessgrid.ui.board.board_view import BoardView
from chessgrid.ui.board.piece_item import PieceItem

__all__ = ["BoardScene", "BoardView", "PieceItem"]
