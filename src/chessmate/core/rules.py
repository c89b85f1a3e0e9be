"""High-level chess rules: check, checkmate, stalemate, draw detection."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from chessmate.core.enums import Color, GameResult, PieceType, PositionStatus
from chessmate.core.legality import MoveValidator

if TYPE_CHECKING:
    from chessmate.core.board import Board
    from chessmate.core.move import Move

_LOGGER = logging.getLogger(__name__)


class Rules:
    """Static rule-checker over a board and the history that produced it."""

    @staticmethod
    def is_attacked(color: Color, board: Board, history: Sequence[Move] = ()) -> bool:
        return MoveValidator(history).is_attacked(color, board)

    @staticmethod
    def has_any_legal_move(
        color: Color, board: Board, history: Sequence[Move] = ()
    ) -> bool:
        validator = MoveValidator(history)
        for piece in board.pieces(color):
            for sq in range(64):
                if validator.check_destination(piece, sq, board) is None:
                    return True
        return False

    @staticmethod
    def is_insufficient_material(board: Board) -> bool:
        """Only kings are left."""
        return all(p.kind == PieceType.KING for p in board.active_pieces())

    @staticmethod
    def is_check(color: Color, board: Board, history: Sequence[Move] = ()) -> bool:
        return Rules.is_attacked(color, board, history) and Rules.has_any_legal_move(
            color, board, history
        )

    @staticmethod
    def is_checkmate(color: Color, board: Board, history: Sequence[Move] = ()) -> bool:
        return Rules.is_attacked(
            color, board, history
        ) and not Rules.has_any_legal_move(color, board, history)

    @staticmethod
    def is_stalemate(color: Color, board: Board, history: Sequence[Move] = ()) -> bool:
        return not Rules.is_attacked(
            color, board, history
        ) and not Rules.has_any_legal_move(color, board, history)

    @staticmethod
    def classify(
        color: Color, board: Board, history: Sequence[Move] = ()
    ) -> PositionStatus:
        """Status of the position *color* is about to move in."""
        if Rules.is_insufficient_material(board):
            _LOGGER.debug("Only kings left on the board")
            return PositionStatus.DRAW_INSUFFICIENT_MATERIAL

        attacked = Rules.is_attacked(color, board, history)
        can_move = Rules.has_any_legal_move(color, board, history)

        if attacked and can_move:
            status = PositionStatus.CHECK
        elif attacked:
            status = PositionStatus.CHECKMATE
        elif not can_move:
            status = PositionStatus.STALEMATE
        else:
            status = PositionStatus.NORMAL

        _LOGGER.debug("Classified %s to move: %s", color, status.name)
        return status

    @staticmethod
    def result_for(status: PositionStatus, color: Color) -> GameResult:
        """Game result once *color*, about to move, is in *status*."""
        if status == PositionStatus.CHECKMATE:
            return GameResult.BLACK_WINS if color == Color.WHITE else GameResult.WHITE_WINS
        if status in (
            PositionStatus.STALEMATE,
            PositionStatus.DRAW_INSUFFICIENT_MATERIAL,
        ):
            return GameResult.DRAW
        return GameResult.IN_PROGRESS
