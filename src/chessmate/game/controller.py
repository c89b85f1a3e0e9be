"""GameController — the central orchestrator of a match.

Coordinates: Players, MatchState, MoveValidator, Rules.
Emits events via simple callbacks so front ends and tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessmate.core.enums import Color, GameResult, PieceType, PositionStatus, RejectReason
from chessmate.core.legality import is_promotion
from chessmate.core.move import Move
from chessmate.core.types import Square, parse_square, square_name
from chessmate.errors import ChessmateError, IllegalMoveError
from chessmate.game.interfaces import GamePhase, IGameController, IPlayer
from chessmate.game.player import HumanPlayer
from chessmate.game.state import MatchState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[list[Move], MatchState], None]  # records, state
StatusCallback = Callable[[PositionStatus, Color], None]  # status, side to move
GameOverCallback = Callable[[GameResult, PositionStatus], None]
RejectedCallback = Callable[[RejectReason], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_status: list[StatusCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full match: validates moves, commits them, classifies
    the resulting position, switches turns, notifies listeners.

    Thread-safety: methods are designed to be called from a single thread.
    """

    __slots__ = ("_state", "_players", "last_rejection", "events")

    def __init__(self) -> None:
        self._state = MatchState()
        self._state.phase = GamePhase.NOT_STARTED
        self._players: dict[Color, IPlayer] = {}
        self.last_rejection: RejectReason | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> MatchState:
        return self._state

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.turn)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer | None = None,
        black: IPlayer | None = None,
        state: MatchState | None = None,
    ) -> None:
        """Start from the standard position, or resume *state*."""
        self._players = {
            Color.WHITE: white or HumanPlayer(Color.WHITE, "White"),
            Color.BLACK: black or HumanPlayer(Color.BLACK, "Black"),
        }
        self._state = state if state is not None else MatchState.initial()
        self.last_rejection = None
        if not self._state.is_game_over:
            self._state.phase = GamePhase.AWAITING_MOVE
        self._emit_phase(self._state.phase)

    def submit_move(
        self,
        origin: Square | str,
        destination: Square | str,
        promotion: PieceType | None = None,
    ) -> bool:
        if self._state.phase != GamePhase.AWAITING_MOVE:
            return False

        reason = self.validate(origin, destination)
        if reason is not None:
            self._reject(reason)
            return False

        state = self._state
        src = _as_square(origin)
        dst = _as_square(destination)
        piece = state.board[src]
        assert piece is not None

        if is_promotion(piece, dst) and promotion is None:
            player = self.current_player
            assert player is not None
            promotion = player.choose_promotion(piece, dst)

        records = state.commit_move(piece, dst, promotion)
        self.last_rejection = None
        self._emit_move(records)

        mover = state.turn
        status = state.end_turn()
        _LOGGER.debug("%s moved %s; %s to move: %s", mover, records[0], state.turn, status.name)
        self._emit_status(status)

        if state.is_game_over:
            self._emit_game_over(state.result, status)
        return True

    # ── Extras ───────────────────────────────────────────────────────────

    def validate(
        self, origin: Square | str, destination: Square | str
    ) -> RejectReason | None:
        """First reason the side to move may not play *origin* → *destination*."""
        state = self._state
        validator = state.validator
        reason = validator.check_origin(origin, state.board, state.turn)
        if reason is not None:
            return reason
        piece = state.board[_as_square(origin)]
        assert piece is not None
        return validator.check_destination(piece, destination, state.board)

    def play(
        self,
        origin: Square | str,
        destination: Square | str,
        promotion: PieceType | None = None,
    ) -> None:
        """Like :meth:`submit_move`, but raise instead of returning False."""
        if self._state.phase != GamePhase.AWAITING_MOVE:
            raise ChessmateError(f"Match is not awaiting a move ({self._state.phase.name})")
        if not self.submit_move(origin, destination, promotion):
            assert self.last_rejection is not None
            raise IllegalMoveError(
                self.last_rejection, _name(origin), _name(destination)
            )

    def legal_destinations(self, origin: Square | str) -> list[Square]:
        """Legal targets for the side-to-move piece on *origin* (empty if none)."""
        state = self._state
        if state.validator.check_origin(origin, state.board, state.turn) is not None:
            return []
        piece = state.board[_as_square(origin)]
        assert piece is not None
        return state.validator.legal_destinations(piece, state.board)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _reject(self, reason: RejectReason) -> None:
        self.last_rejection = reason
        _LOGGER.warning("Rejected move for %s: %s", self._state.turn, reason.message)
        for cb in self.events.on_rejected:
            cb(reason)

    def _emit_move(self, records: list[Move]) -> None:
        for cb in self.events.on_move:
            cb(records, self._state)

    def _emit_status(self, status: PositionStatus) -> None:
        for cb in self.events.on_status:
            cb(status, self._state.turn)

    def _emit_game_over(self, result: GameResult, status: PositionStatus) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result, status)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)


def _as_square(square: Square | str) -> Square:
    return parse_square(square) if isinstance(square, str) else square


def _name(square: Square | str) -> str:
    return square if isinstance(square, str) else square_name(square)
