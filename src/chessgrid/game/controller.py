"""GameController — glue between the board and the front-ends.

Coordinates: Board, Players. Translates notation input into board moves,
keeps the per-color bookkeeping fresh and notifies listeners via simple
callbacks so the console / UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from chessgrid.core.board import Board
from chessgrid.core.enums import Color
from chessgrid.core.piece import Piece
from chessgrid.core.types import Coordinate, notation_to_coords
from chessgrid.game.player import Player

_LOGGER = logging.getLogger(__name__)


class MoveStatus(Enum):
    """How a submitted move was handled."""

    MOVED = "moved"
    CAPTURED = "captured"
    BAD_NOTATION = "bad_notation"
    SAME_SQUARE = "same_square"
    REJECTED = "rejected"


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of :meth:`GameController.submit_move`."""

    status: MoveStatus
    message: str
    source: Coordinate | None = None
    target: Coordinate | None = None
    captured: Piece | None = None

    @property
    def ok(self) -> bool:
        return self.status in (MoveStatus.MOVED, MoveStatus.CAPTURED)


@dataclass(frozen=True, slots=True)
class GameStatus:
    """Snapshot used by status displays."""

    current_player: Color
    white_pieces: int
    black_pieces: int
    white_captured: int
    black_captured: int


# ── Event definitions ────────────────────────────────────────────────────────

OutcomeCallback = Callable[[MoveOutcome], None]
ResetCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[OutcomeCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Owns a board and both players' bookkeeping.

    Thread-safety: methods are designed to be called from a single thread
    (the console loop or the Qt main thread).
    """

    __slots__ = ("_board", "_players", "events")

    def __init__(self, board: Board | None = None) -> None:
        self._board = board if board is not None else Board()
        self._players: dict[Color, Player] = {
            Color.WHITE: Player(Color.WHITE),
            Color.BLACK: Player(Color.BLACK),
        }
        self.events = GameEvents()
        self._board.events.on_capture.append(self._on_capture)
        self._refresh_players()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_player(self) -> Player:
        return self._players[self._board.current_player]

    def player(self, color: Color) -> Player:
        return self._players[color]

    # ── Commands ─────────────────────────────────────────────────────────

    def submit_notation(self, source: str, target: str) -> MoveOutcome:
        """Play a move given as two ``"E2"``-style square names."""
        src = notation_to_coords(source)
        dst = notation_to_coords(target)
        if src is None or dst is None:
            return MoveOutcome(
                MoveStatus.BAD_NOTATION, "Invalid square notation. Use A1-H8 format."
            )
        return self.submit_move(src, dst)

    def submit_move(self, source: Coordinate, target: Coordinate) -> MoveOutcome:
        if source == target:
            return MoveOutcome(
                MoveStatus.SAME_SQUARE,
                "Source and destination squares cannot be the same.",
                source,
                target,
            )

        if not self._board.move_piece(source.row, source.col, target.row, target.col):
            outcome = MoveOutcome(
                MoveStatus.REJECTED,
                self._rejection_reason(source, target),
                source,
                target,
            )
        else:
            captured = self._board.last_captured
            self._refresh_players()
            if captured is None:
                outcome = MoveOutcome(
                    MoveStatus.MOVED,
                    f"Move executed: {source} to {target}",
                    source,
                    target,
                )
            else:
                outcome = MoveOutcome(
                    MoveStatus.CAPTURED,
                    f"Move executed: {source} to {target}, captures {captured.name}",
                    source,
                    target,
                    captured,
                )

        for cb in self.events.on_move:
            cb(outcome)
        return outcome

    def reset(self) -> None:
        """Start over from the opening position."""
        self._board.reset()
        for player in self._players.values():
            player.clear_captured()
        self._refresh_players()
        _LOGGER.info("New game started")
        for cb in self.events.on_reset:
            cb()

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_targets(self, source: Coordinate) -> list[Coordinate]:
        """Destinations for the piece on *source* if it belongs to the side to move."""
        piece = self._board[source]
        if piece is None or piece.color != self._board.current_player:
            return []
        return self._board.possible_moves(source.row, source.col)

    def status(self) -> GameStatus:
        white = self._players[Color.WHITE]
        black = self._players[Color.BLACK]
        return GameStatus(
            current_player=self._board.current_player,
            white_pieces=white.available_piece_count,
            black_pieces=black.available_piece_count,
            white_captured=white.captured_piece_count,
            black_captured=black.captured_piece_count,
        )

    # ── Internal ─────────────────────────────────────────────────────────

    def _on_capture(self, captured: Piece, capturer: Piece) -> None:
        self._players[capturer.color].add_captured_piece(captured)

    def _refresh_players(self) -> None:
        grid = self._board.grid()
        for player in self._players.values():
            player.update_available_pieces(grid)

    def _rejection_reason(self, source: Coordinate, target: Coordinate) -> str:
        piece = self._board[source]
        if piece is None:
            return f"No piece on {source}."
        if piece.color != self._board.current_player:
            return f"It's {self._board.current_player}'s turn."
        occupant = self._board[target]
        if occupant is not None and occupant.color == piece.color:
            return "Cannot capture your own piece."
        return f"Invalid move for {piece.kind}."
