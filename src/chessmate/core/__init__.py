"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessmate.core import Board, MoveValidator, Rules, Color, parse_square

    board = Board.initial()
    pawn = board[parse_square("e2")]
    MoveValidator([]).is_legal_destination(pawn, "e4", board)  # True
    Rules.classify(Color.WHITE, board)                         # NORMAL
"""

from chessmate.core.board import Board
from chessmate.core.enums import (
    PROMOTION_KINDS,
    Color,
    GameResult,
    PieceType,
    PositionStatus,
    RejectReason,
)
from chessmate.core.executor import MoveExecutor
from chessmate.core.geometry import (
    column_shift,
    row_shift,
    squares_between,
    squares_between_are_empty,
)
from chessmate.core.legality import MoveValidator, is_promotion
from chessmate.core.move import Move
from chessmate.core.piece import Piece
from chessmate.core.rules import Rules
from chessmate.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "PROMOTION_KINDS",
    "Color",
    "GameResult",
    "PieceType",
    "PositionStatus",
    "RejectReason",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    "column_shift",
    "row_shift",
    "squares_between",
    "squares_between_are_empty",
    # Domain objects
    "Board",
    "Move",
    "MoveExecutor",
    "MoveValidator",
    "Piece",
    "Rules",
    "is_promotion",
]
