"""Game management layer — controller and per-color bookkeeping.

Quick start::

    from chessgrid.game import GameController

    ctrl = GameController()
    outcome = ctrl.submit_notation("E2", "E4")
    print(outcome.message, ctrl.status())
"""

from chessgrid.game.controller import (
    GameController,
    GameEvents,
    GameStatus,
    MoveOutcome,
    MoveStatus,
)
from chessgrid.game.player import Player

__all__ = [
    "GameController",
    "GameEvents",
    "GameStatus",
    "MoveOutcome",
    "MoveStatus",
    "Player",
]
