"""Match state: board, history, captured pieces and whose turn it is."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chessmate.core.board import Board
from chessmate.core.enums import Color, GameResult, PieceType, PositionStatus
from chessmate.core.executor import MoveExecutor
from chessmate.core.legality import MoveValidator
from chessmate.core.rules import Rules
from chessmate.game.interfaces import GamePhase

if TYPE_CHECKING:
    from chessmate.core.move import Move
    from chessmate.core.piece import Piece
    from chessmate.core.types import Square


def _empty_captured() -> dict[Color, list[Piece]]:
    return {Color.WHITE: [], Color.BLACK: []}


@dataclass
class MatchState:
    """Everything needed to resume a match.

    ``captured`` is keyed by the colour that lost the pieces. ``status`` is
    the classification of the position for ``turn``.

    This is a pure data/logic class: no I/O, no UI.
    """

    turn: Color = Color.WHITE
    board: Board = field(default_factory=Board.initial)
    history: list[Move] = field(default_factory=list)
    captured: dict[Color, list[Piece]] = field(default_factory=_empty_captured)
    status: PositionStatus = PositionStatus.NORMAL
    phase: GamePhase = GamePhase.AWAITING_MOVE
    result: GameResult = GameResult.IN_PROGRESS

    @classmethod
    def initial(cls) -> MatchState:
        """Standard starting layout, white to move."""
        return cls()

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def validator(self) -> MoveValidator:
        return MoveValidator(self.history)

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played (castling counts once)."""
        return len(self.history) - self.castling_count

    @property
    def castling_count(self) -> int:
        # Castling logs king then rook; a rook entry right after a king entry
        # of the same colour can only come from castling.
        return sum(
            1
            for prev, move in zip(self.history, self.history[1:])
            if prev.kind == PieceType.KING
            and move.kind == PieceType.ROOK
            and prev.color == move.color
        )

    def piece_at(self, square: Square) -> Piece | None:
        return self.board[square]

    def is_legal(
        self, piece: Piece, destination: Square | str, report_errors: bool = False
    ) -> bool:
        return self.validator.is_legal_destination(
            piece, destination, self.board, report_errors=report_errors
        )

    # ── Mutation ─────────────────────────────────────────────────────────

    def commit_move(
        self,
        piece: Piece,
        destination: Square,
        promotion: PieceType | None = None,
    ) -> list[Move]:
        """Apply a validated move to the live board and history.

        Caller is responsible for legality check.
        """
        executor = MoveExecutor(self.board, self.history, self.captured)
        return executor.commit(piece, destination, promotion)

    def promote(self, pawn: Piece, destination: Square, kind: PieceType) -> Piece:
        """Replace the pawn standing on *destination* with a new *kind* piece."""
        executor = MoveExecutor(self.board, self.history, self.captured)
        return executor.promote(pawn, destination, kind)

    def end_turn(self) -> PositionStatus:
        """Classify the position for the opponent and hand the turn over."""
        next_color = self.turn.opposite
        self.status = Rules.classify(next_color, self.board, self.history)
        self.turn = next_color
        if self.status.is_terminal:
            self.result = Rules.result_for(self.status, next_color)
            self.phase = GamePhase.GAME_OVER
        return self.status


def initial_position() -> MatchState:
    """Standard starting position with empty history and captured lists."""
    return MatchState.initial()
