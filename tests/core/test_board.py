"""Tests for Board."""

import logging

import pytest

from chessgrid.core.board import BACK_RANK, Board
from chessgrid.core.enums import Color, PieceKind
from chessgrid.core.types import (
    A1, A2, D5, D7, E1, E2, E4, E5, E7, E8,
    Coordinate,
    OutOfBoardError,
)


def _move(board: Board, src: Coordinate, dst: Coordinate) -> bool:
    return board.move_piece(src.row, src.col, dst.row, dst.col)


class TestBoardInitial:
    def test_piece_counts(self) -> None:
        board = Board()
        assert board.piece_count() == 32
        assert board.piece_count(Color.WHITE) == 16
        assert board.piece_count(Color.BLACK) == 16

    def test_white_to_move(self) -> None:
        assert Board().current_player == Color.WHITE

    def test_back_ranks(self) -> None:
        board = Board()
        for col, kind in enumerate(BACK_RANK):
            black = board.get_piece(0, col)
            white = board.get_piece(7, col)
            assert black is not None and white is not None
            assert (black.kind, black.color) == (kind, Color.BLACK)
            assert (white.kind, white.color) == (kind, Color.WHITE)

    def test_back_rank_order(self) -> None:
        letters = "".join(kind.letter for kind in BACK_RANK)
        assert letters == "RNBQKBNR"

    def test_kings(self) -> None:
        board = Board()
        assert board[E1] is not None and board[E1].kind == PieceKind.KING
        assert board[E8] is not None and board[E8].kind == PieceKind.KING

    def test_pawn_ranks(self) -> None:
        board = Board()
        for col in range(8):
            black = board.get_piece(1, col)
            white = board.get_piece(6, col)
            assert black is not None and black.kind == PieceKind.PAWN
            assert black.color == Color.BLACK
            assert white is not None and white.kind == PieceKind.PAWN
            assert white.color == Color.WHITE

    def test_empty_middle(self) -> None:
        board = Board()
        for row in range(2, 6):
            for col in range(8):
                assert board.get_piece(row, col) is None

    def test_positions_match_cells(self) -> None:
        board = Board()
        for row, cells in enumerate(board.grid()):
            for col, piece in enumerate(cells):
                if piece is not None:
                    assert piece.position == Coordinate(row, col)


class TestBoardAccess:
    @pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (8, 0), (0, 8)])
    def test_get_piece_out_of_range(self, row: int, col: int) -> None:
        board = Board()
        with pytest.raises(OutOfBoardError):
            board.get_piece(row, col)

    def test_is_empty(self) -> None:
        board = Board()
        assert board.is_empty(4, 4)
        assert not board.is_empty(6, 4)
        assert not board.is_empty(8, 4)

    def test_grid_snapshot_is_immutable(self) -> None:
        board = Board()
        grid = board.grid()
        assert len(grid) == 8 and all(len(row) == 8 for row in grid)
        with pytest.raises(TypeError):
            grid[0][0] = None  # type: ignore[index]

    def test_grid_snapshot_does_not_follow_moves(self) -> None:
        board = Board()
        before = board.grid()
        assert _move(board, E2, E4)
        assert before[6][4] is not None
        assert board.grid()[6][4] is None

    def test_empty_board(self) -> None:
        board = Board.empty(Color.BLACK)
        assert board.piece_count() == 0
        assert board.current_player == Color.BLACK

    def test_place_and_remove(self) -> None:
        board = Board.empty()
        piece = board.place(PieceKind.QUEEN, Color.WHITE, D5)
        assert board[D5] is piece
        assert board.remove(D5) is piece
        assert board[D5] is None

    def test_repr(self) -> None:
        text = repr(Board())
        assert "wK" in text
        assert "A  B  C" in text


class TestMoveExecution:
    def test_double_step_flips_turn(self) -> None:
        board = Board()
        pawn = board[E2]
        assert _move(board, E2, E4)
        assert board[E4] is pawn
        assert board[E2] is None
        assert pawn is not None and pawn.position == E4
        assert pawn.has_moved
        assert board.current_player == Color.BLACK

    def test_white_cannot_move_twice(self) -> None:
        board = Board()
        assert _move(board, E2, E4)
        assert not _move(board, Coordinate(6, 3), Coordinate(4, 3))  # D2-D4
        assert board.current_player == Color.BLACK

    def test_opening_scenario(self) -> None:
        board = Board()
        assert _move(board, E2, E4)
        assert not _move(board, Coordinate(6, 3), Coordinate(4, 3))
        assert _move(board, E7, E5)
        assert board.current_player == Color.WHITE

    def test_capture_removes_target(self) -> None:
        board = Board()
        assert _move(board, E2, E4)
        assert _move(board, D7, D5)
        victim = board[D5]
        attacker = board[E4]
        assert _move(board, E4, D5)
        assert board[D5] is attacker
        assert board[E4] is None
        assert board.last_captured is victim
        assert victim not in board.pieces()
        assert board.piece_count() == 31
        assert board.piece_count(Color.BLACK) == 15

    def test_last_captured_cleared_by_quiet_move(self) -> None:
        board = Board()
        _move(board, E2, E4)
        _move(board, D7, D5)
        _move(board, E4, D5)
        assert board.last_captured is not None
        assert _move(board, Coordinate(1, 0), Coordinate(2, 0))  # a7-a6
        assert board.last_captured is None

    def test_turn_toggles_once_per_move(self) -> None:
        board = Board()
        seen = [board.current_player]
        for src, dst in [(E2, E4), (E7, E5), (Coordinate(7, 6), Coordinate(5, 5))]:
            assert _move(board, src, dst)
            seen.append(board.current_player)
        assert seen == [Color.WHITE, Color.BLACK, Color.WHITE, Color.BLACK]


class TestMoveRejection:
    def _assert_rejected(self, board: Board, src: Coordinate, dst: Coordinate) -> None:
        before = board.grid()
        player = board.current_player
        assert not _move(board, src, dst)
        assert board.grid() == before
        assert board.current_player == player

    def test_empty_source(self) -> None:
        self._assert_rejected(Board(), E4, E5)

    def test_wrong_turn(self) -> None:
        self._assert_rejected(Board(), E7, E5)

    def test_self_capture(self) -> None:
        self._assert_rejected(Board(), A1, A2)

    def test_illegal_geometry(self) -> None:
        self._assert_rejected(Board(), E2, E5)

    def test_blocked_slider(self) -> None:
        self._assert_rejected(Board(), A1, Coordinate(4, 0))

    def test_positions_untouched_after_rejection(self) -> None:
        board = Board()
        pawn = board[E2]
        assert not _move(board, E2, E5)
        assert pawn is not None and pawn.position == E2
        assert not pawn.has_moved

    @pytest.mark.parametrize(
        "args", [(-1, 0, 0, 0), (6, 4, 8, 4), (6, 8, 5, 4), (0, 0, 0, -1)]
    )
    def test_out_of_range_endpoints(self, args: tuple[int, int, int, int]) -> None:
        board = Board()
        assert board.move_piece(*args) is False
        assert board.current_player == Color.WHITE

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        board = Board()
        with caplog.at_level(logging.DEBUG, logger="chessgrid.core.board"):
            _move(board, E7, E5)
        assert "turn" in caplog.text


class TestBoardEvents:
    def test_capture_and_move_callbacks(self) -> None:
        board = Board()
        captures: list[tuple[str, str]] = []
        moves: list[tuple[Coordinate, Coordinate]] = []
        board.events.on_capture.append(lambda c, by: captures.append((c.label, by.label)))
        board.events.on_move.append(lambda p, s, d: moves.append((s, d)))

        _move(board, E2, E4)
        _move(board, D7, D5)
        _move(board, E4, D5)

        assert captures == [("bP", "wP")]
        assert moves == [(E2, E4), (D7, D5), (E4, D5)]

    def test_no_callbacks_on_rejection(self) -> None:
        board = Board()
        fired: list[object] = []
        board.events.on_move.append(lambda *a: fired.append(a))
        _move(board, E2, E5)
        assert fired == []


class TestReset:
    def test_reset_restores_opening(self) -> None:
        board = Board()
        _move(board, E2, E4)
        _move(board, D7, D5)
        _move(board, E4, D5)
        board.reset()
        assert board.piece_count() == 32
        assert board.current_player == Color.WHITE
        assert board[E2] is not None and board[D5] is None
        assert board.last_captured is None

    def test_reset_notifies(self) -> None:
        board = Board()
        calls: list[bool] = []
        board.events.on_reset.append(lambda: calls.append(True))
        board.reset()
        assert calls == [True]

    def test_set_current_player(self) -> None:
        board = Board()
        board.set_current_player(Color.BLACK)
        assert _move(board, E7, E5)
        assert board.current_player == Color.WHITE
