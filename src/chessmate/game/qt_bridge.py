"""Qt bridge exposing :class:`GameController` events as signals.

Requires the ``qt`` extra (PyQt6). The rest of chessmate never imports it.
"""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessmate.core.enums import Color, GameResult, PositionStatus, RejectReason
from chessmate.core.move import Move
from chessmate.game.controller import GameController
from chessmate.game.interfaces import GamePhase
from chessmate.game.state import MatchState


class MatchBridge(QObject):
    """Thread-affine adapter between a controller and Qt widgets.

    Signals carry enum values as ints so they cross queued connections
    without custom metatypes.
    """

    move_committed = pyqtSignal(object)  # list[Move]
    status_changed = pyqtSignal(int, int)  # PositionStatus, Color to move
    game_over = pyqtSignal(int, int)  # GameResult, PositionStatus
    move_rejected = pyqtSignal(str, str)  # RejectReason name, message
    phase_changed = pyqtSignal(int)  # GamePhase

    def __init__(self, controller: GameController | None = None) -> None:
        super().__init__()
        self._controller = controller or GameController()
        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_status.append(self._on_status)
        events.on_game_over.append(self._on_game_over)
        events.on_rejected.append(self._on_rejected)
        events.on_phase_changed.append(self._on_phase)

    @property
    def controller(self) -> GameController:
        return self._controller

    @pyqtSlot()
    def new_game(self) -> None:
        self._controller.new_game()

    @pyqtSlot(str, str, result=bool)
    def submit_move(self, origin: str, destination: str) -> bool:
        """Forward a square-name move; promotions ask the current player."""
        return self._controller.submit_move(origin, destination)

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_move(self, records: list[Move], _state: MatchState) -> None:
        self.move_committed.emit(list(records))

    def _on_status(self, status: PositionStatus, to_move: Color) -> None:
        self.status_changed.emit(int(status), int(to_move))

    def _on_game_over(self, result: GameResult, status: PositionStatus) -> None:
        self.game_over.emit(int(result), int(status))

    def _on_rejected(self, reason: RejectReason) -> None:
        self.move_rejected.emit(reason.name, reason.message)

    def _on_phase(self, phase: GamePhase) -> None:
        self.phase_changed.emit(int(phase))
