"""Game management layer — controller, players, match state, snapshots.

Quick start::

    from chessmate.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    ctrl.submit_move("e2", "e4")
"""

from chessmate.game.controller import GameController, GameEvents
from chessmate.game.interfaces import GamePhase, IGameController, IPlayer
from chessmate.game.player import HumanPlayer
from chessmate.game.snapshot import state_from_snapshot, state_to_snapshot
from chessmate.game.state import MatchState, initial_position

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "GameController",
    "GameEvents",
    "HumanPlayer",
    "MatchState",
    "initial_position",
    # Snapshots
    "state_from_snapshot",
    "state_to_snapshot",
]
