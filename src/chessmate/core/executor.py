"""Move executor: commits an already-validated move onto a board."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessmate.core.enums import PROMOTION_KINDS, Color, PieceType
from chessmate.core.geometry import column_shift
from chessmate.core.legality import (
    MoveValidator,
    castling_rook_squares,
    is_castling_shape,
    is_promotion,
)
from chessmate.core.move import Move
from chessmate.core.piece import Piece
from chessmate.core.types import Square, offset_square

if TYPE_CHECKING:
    from chessmate.core.board import Board

_LOGGER = logging.getLogger(__name__)


class MoveExecutor:
    """Applies moves to *board* and appends them to *history*.

    ``captured`` is the live match's per-colour list of lost pieces. Leave
    it as None for simulation boards: pieces are still retired there, but
    nothing is recorded.

    Caller is responsible for legality check.
    """

    __slots__ = ("_board", "_history", "_captured")

    def __init__(
        self,
        board: Board,
        history: list[Move],
        captured: dict[Color, list[Piece]] | None = None,
    ) -> None:
        self._board = board
        self._history = history
        self._captured = captured

    # ── Public API ───────────────────────────────────────────────────────

    def commit(
        self,
        piece: Piece,
        destination: Square,
        promotion: PieceType | None = None,
    ) -> list[Move]:
        """Apply the move and return the history entries it produced."""
        origin = piece.position
        assert origin is not None and self._board[origin] is piece, (
            f"{piece!r} is not on the board it is being moved on"
        )

        if MoveValidator(self._history).is_en_passant(piece, destination):
            records = self._record(piece, destination)
            self._en_passant(piece, destination)
        elif is_castling_shape(piece, destination):
            records = self._record_castling(piece, destination)
            self._castle(piece, destination)
        elif is_promotion(piece, destination):
            if promotion not in PROMOTION_KINDS:
                raise ValueError(f"Pawn cannot promote to {promotion!r}")
            records = self._record(piece, destination)
            self.relocate(piece, destination)
            self.promote(piece, destination, promotion)
        else:
            records = self._record(piece, destination)
            self.relocate(piece, destination)

        _LOGGER.debug("Committed %s", ", ".join(str(m) for m in records))
        return records

    def relocate(self, piece: Piece, destination: Square) -> None:
        """Simple move or capture."""
        origin = piece.position
        assert origin is not None
        occupant = self._board[destination]
        if occupant is not None:
            self._capture(occupant)

        self._board[destination] = piece
        piece.position = destination
        self._board[origin] = None

    def promote(self, pawn: Piece, destination: Square, kind: PieceType) -> Piece:
        """Swap the pawn standing on *destination* for a new *kind* piece.

        The pawn record is retired rather than changed in place, so history
        and display code still see it as a pawn.
        """
        if kind not in PROMOTION_KINDS:
            raise ValueError(f"Pawn cannot promote to {kind!r}")
        assert pawn.kind == PieceType.PAWN and pawn.position == destination
        pawn.retire()
        promoted = Piece(kind, pawn.color, destination)
        self._board[destination] = promoted
        return promoted

    # ── Special procedures ───────────────────────────────────────────────

    def _en_passant(self, pawn: Piece, destination: Square) -> None:
        origin = pawn.position
        assert origin is not None
        df = column_shift(origin, destination)
        landing = offset_square(origin, df, pawn.color.forward)
        victim_sq = offset_square(origin, df, 0)
        assert landing is not None and victim_sq is not None

        victim = self._board[victim_sq]
        assert victim is not None and victim.kind == PieceType.PAWN
        self._capture(victim)
        self._board[victim_sq] = None

        self._board[landing] = pawn
        pawn.position = landing
        self._board[origin] = None

    def _castle(self, king: Piece, destination: Square) -> None:
        origin = king.position
        rook_squares = castling_rook_squares(king.color, destination)
        assert origin is not None and rook_squares is not None
        rook_origin, rook_destination = rook_squares
        rook = self._board[rook_origin]
        assert rook is not None and rook.kind == PieceType.ROOK

        self._board[origin] = None
        self._board[rook_origin] = None
        self._board[destination] = king
        self._board[rook_destination] = rook
        king.position = destination
        rook.position = rook_destination

    # ── History bookkeeping ──────────────────────────────────────────────

    def _record(self, piece: Piece, destination: Square) -> list[Move]:
        assert piece.position is not None
        move = Move(piece.kind, piece.color, piece.position, destination)
        self._history.append(move)
        return [move]

    def _record_castling(self, king: Piece, destination: Square) -> list[Move]:
        assert king.position is not None
        rook_squares = castling_rook_squares(king.color, destination)
        assert rook_squares is not None
        records = [
            Move(PieceType.KING, king.color, king.position, destination),
            Move(PieceType.ROOK, king.color, *rook_squares),
        ]
        self._history.extend(records)
        return records

    def _capture(self, victim: Piece) -> None:
        if self._captured is not None:
            self._captured[victim.color].append(victim)
        victim.retire()
