"""Tests for the console front-end."""

import io

from chessgrid.console import ConsoleGame, render_board, run_console
from chessgrid.core.board import Board
from chessgrid.core.enums import Color


def _run(script: str) -> tuple[ConsoleGame, str]:
    out = io.StringIO()
    game = ConsoleGame(stdin=io.StringIO(script), stdout=out)
    game.run()
    return game, out.getvalue()


class TestRenderBoard:
    def test_labels_and_pieces(self) -> None:
        text = render_board(Board())
        lines = text.splitlines()
        assert lines[0] == "Current player: WHITE"
        assert "    A   B   C   D   E   F   G   H" in lines
        assert "8 | bR| bN| bB| bQ| bK| bB| bN| bR| 8" in lines
        assert "2 | wP| wP| wP| wP| wP| wP| wP| wP| 2" in lines
        assert "5 |   |   |   |   |   |   |   |   | 5" in lines


class TestConsoleGame:
    def test_quit(self) -> None:
        game, out = _run("quit\n")
        assert not game.running
        assert "WELCOME TO CONSOLE CHESS" in out
        assert out.rstrip().endswith("Thanks for playing!")

    def test_eof_ends_loop(self) -> None:
        _, out = _run("")
        assert "Thanks for playing!" in out

    def test_move_and_status(self) -> None:
        game, out = _run("E2 E4\nstatus\nexit\n")
        assert "Move executed: E2 to E4" in out
        assert "Current turn: BLACK" in out
        assert "BLACK's turn - Enter move: " in out
        assert game.controller.board.current_player == Color.BLACK

    def test_lowercase_move(self) -> None:
        game, out = _run("e2   e4\nquit\n")
        assert "Move executed: E2 to E4" in out

    def test_invalid_inputs_keep_looping(self) -> None:
        _, out = _run("\nE2E4\nE2 E5\nE7 E5\nE2 E2\nquit\n")
        assert "Please enter a command." in out
        assert "Invalid move format" in out
        assert "Invalid move for pawn." in out
        assert "It's white's turn." in out
        assert "Source and destination squares cannot be the same." in out
        assert out.count("Invalid move. Try again.") == 3

    def test_help(self) -> None:
        _, out = _run("help\nquit\n")
        assert "=== CHESS GAME HELP ===" in out

    def test_reset(self) -> None:
        game, out = _run("E2 E4\nreset\nquit\n")
        assert "Board reset to starting position." in out
        assert game.controller.board.current_player == Color.WHITE
        assert game.controller.board.get_piece(6, 4) is not None

    def test_capture_shows_in_status(self) -> None:
        _, out = _run("E2 E4\nD7 D5\nE4 D5\nstatus\nquit\n")
        assert "captures black pawn" in out
        assert "White captured: 1" in out
        assert "Black pieces: 15" in out

    def test_handle_command_redraw_flags(self) -> None:
        game = ConsoleGame(stdin=io.StringIO(), stdout=io.StringIO())
        assert game.handle_command("display") is True
        assert game.handle_command("help") is False
        assert game.handle_command("E2 E4") is True
        assert game.handle_command("E2 E4") is False


def test_run_console_returns_zero() -> None:
    out = io.StringIO()
    assert run_console(io.StringIO("quit\n"), out) == 0
