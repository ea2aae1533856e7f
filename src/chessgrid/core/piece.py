"""Piece entity: kind, color, and the square it currently stands on."""

from __future__ import annotations

from dataclasses import dataclass

from chessgrid.core.enums import Color, PieceKind
from chessgrid.core.move_generator import PAWN_PROMOTION_ROW, Grid, possible_moves
from chessgrid.core.types import Coordinate

_COLOR_CHARS: dict[Color, str] = {Color.WHITE: "w", Color.BLACK: "b"}


@dataclass(eq=False, slots=True)
class Piece:
    """A live piece on the board.

    Pieces compare by identity: two white pawns are different pieces.
    ``position`` is owned by :class:`~chessgrid.core.board.Board`, which
    keeps it equal to the cell holding the piece.
    """

    kind: PieceKind
    color: Color
    position: Coordinate
    has_moved: bool = False

    # ── Movement ─────────────────────────────────────────────────────────

    def possible_moves(self, grid: Grid) -> list[Coordinate]:
        """Pseudo-legal destinations on *grid* (no king-safety check)."""
        return possible_moves(self, grid)

    def can_promote(self) -> bool:
        """Whether this is a pawn standing on the far rank."""
        return (
            self.kind == PieceKind.PAWN
            and self.position.row == PAWN_PROMOTION_ROW[self.color]
        )

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def label(self) -> str:
        """Two-character text label, e.g. ``wP`` or ``bN``."""
        return _COLOR_CHARS[self.color] + self.kind.letter

    @property
    def name(self) -> str:
        return f"{self.color} {self.kind}"

    @classmethod
    def from_label(cls, label: str, position: Coordinate) -> Piece:
        """Create a piece from a ``wP``-style label."""
        if len(label) != 2 or label[0] not in ("w", "b"):
            raise ValueError(f"Invalid piece label: {label!r}")
        color = Color.WHITE if label[0] == "w" else Color.BLACK
        try:
            kind = PieceKind.from_letter(label[1])
        except ValueError:
            raise ValueError(f"Invalid piece label: {label!r}") from None
        return cls(kind, color, position)

    def __str__(self) -> str:
        return f"{self.name} at {self.position}"
