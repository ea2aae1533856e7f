"""Tests for MainWindow wiring between the board view and the controller."""

from __future__ import annotations

import pytest

pytest.importorskip("PyQt6.QtWidgets")

from chessgrid.config import AppSettings  # noqa: E402
from chessgrid.core.enums import Color  # noqa: E402
from chessgrid.core.types import D5, D7, E2, E4, E5  # noqa: E402
from chessgrid.game.controller import GameController  # noqa: E402
from chessgrid.ui.main_window import MainWindow  # noqa: E402
from chessgrid.ui.styles.theme import BoardTheme  # noqa: E402


def test_initial_status_labels() -> None:
    window = MainWindow()
    assert window.turn_text == "WHITE to move"
    assert "White: 16 pieces, 0 captured" in window.count_text


def test_board_move_reaches_controller() -> None:
    window = MainWindow()
    window.board_view.move_made.emit(E2, E4)

    board = window.controller.board
    assert board.current_player == Color.BLACK
    assert board[E4] is not None
    assert window.turn_text == "BLACK to move"
    assert E4 in window.board_view.board_scene._piece_items
    assert len(window.board_view.board_scene._last_move_highlights) == 2


def test_rejected_move_shows_message() -> None:
    window = MainWindow()
    window.board_view.move_made.emit(E2, E5)
    assert window.statusBar().currentMessage() == "Invalid move for pawn."
    assert window.turn_text == "WHITE to move"


def test_capture_updates_counts() -> None:
    ctrl = GameController()
    window = MainWindow(controller=ctrl)
    ctrl.submit_move(E2, E4)
    ctrl.submit_move(D7, D5)
    ctrl.submit_move(E4, D5)
    assert "White: 16 pieces, 1 captured" in window.count_text
    assert "Black: 15 pieces, 0 captured" in window.count_text


def test_new_game_action_resets() -> None:
    window = MainWindow()
    window.board_view.move_made.emit(E2, E4)
    window._act_new_game.trigger()
    assert window.controller.board.current_player == Color.WHITE
    assert window.turn_text == "WHITE to move"
    assert window.board_view.board_scene._last_move_highlights == []


def test_settings_applied_to_scene() -> None:
    settings = AppSettings(board_theme="Blue", show_coordinates=False, tile_size=40)
    window = MainWindow(settings=settings)
    scene = window.board_view.board_scene
    assert scene.tile_size == 40
    assert scene._theme == BoardTheme.blue()
    assert all(not item.isVisible() for item in scene._coord_items)
