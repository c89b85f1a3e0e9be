"""chessmate — a two-player chess rules engine with a terminal front end."""

from chessmate.core import Color, PieceType, PositionStatus, RejectReason, Rules
from chessmate.game import GameController, MatchState, initial_position

__version__ = "0.1.0"

__all__ = [
    "Color",
    "GameController",
    "MatchState",
    "PieceType",
    "PositionStatus",
    "RejectReason",
    "Rules",
    "initial_position",
]
