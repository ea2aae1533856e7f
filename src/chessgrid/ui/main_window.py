"""MainWindow — top-level window assembling the board and status display."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar, QWidget

from chessgrid.config import AppSettings
from chessgrid.core.types import Coordinate
from chessgrid.game.controller import GameController, MoveOutcome
from chessgrid.ui.board.board_view import BoardView
from chessgrid.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)

_STATUS_MESSAGE_MS = 4000


class MainWindow(QMainWindow):
    """Main application window: board in the centre, turn and counts below."""

    def __init__(
        self,
        controller: GameController | None = None,
        settings: AppSettings | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings if settings is not None else AppSettings()
        self._controller = controller if controller is not None else GameController()

        self.setWindowTitle("Chess Game")

        self._board_view = BoardView(tile_size=self._settings.tile_size)
        self.setCentralWidget(self._board_view)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._turn_label = QLabel()
        self._count_label = QLabel()
        self._status.addPermanentWidget(self._turn_label)
        self._status.addPermanentWidget(self._count_label)

        self._build_menu()
        self._apply_settings()

        self._board_view.move_made.connect(self._on_board_move)
        self._controller.events.on_move.append(self._on_move_outcome)
        self._controller.events.on_reset.append(self._on_reset)

        self._board_view.board_scene.set_board(self._controller.board)
        self._refresh_status()

        t = self._settings.tile_size
        self.resize(8 * t + 40, 8 * t + 80)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def turn_text(self) -> str:
        return self._turn_label.text()

    @property
    def count_text(self) -> str:
        return self._count_label.text()

    # ── Setup ────────────────────────────────────────────────────────────

    def _build_menu(self) -> None:
        menu_bar = self.menuBar()
        if menu_bar is None:
            return
        game_menu = menu_bar.addMenu("&Game")
        if game_menu is None:
            return

        self._act_new_game = QAction("&New game", self)
        self._act_new_game.setShortcut(QKeySequence.StandardKey.New)
        self._act_new_game.triggered.connect(self._on_new_game)
        game_menu.addAction(self._act_new_game)

        game_menu.addSeparator()

        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut(QKeySequence.StandardKey.Quit)
        self._act_quit.triggered.connect(self.close)
        game_menu.addAction(self._act_quit)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.by_name(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)

    # ── Slots / listeners ────────────────────────────────────────────────

    def _on_new_game(self) -> None:
        self._controller.reset()

    def _on_board_move(self, source: Coordinate, target: Coordinate) -> None:
        self._controller.submit_move(source, target)

    def _on_move_outcome(self, outcome: MoveOutcome) -> None:
        scene = self._board_view.board_scene
        if outcome.ok:
            scene.sync()
            scene.highlight_last_move(outcome.source, outcome.target)
            self._refresh_status()
        else:
            _LOGGER.debug("Move not played: %s", outcome.message)
        self._status.showMessage(outcome.message, _STATUS_MESSAGE_MS)

    def _on_reset(self) -> None:
        scene = self._board_view.board_scene
        scene.sync()
        scene.highlight_last_move(None, None)
        self._refresh_status()
        self._status.showMessage("Board reset to starting position.", _STATUS_MESSAGE_MS)

    def _refresh_status(self) -> None:
        st = self._controller.status()
        self._turn_label.setText(f"{st.current_player.name} to move")
        self._count_label.setText(
            f"White: {st.white_pieces} pieces, {st.white_captured} captured | "
            f"Black: {st.black_pieces} pieces, {st.black_captured} captured"
        )
