"""Abstract interfaces for the game layer.

High-level GameController depends on these ABCs, not on concrete
players or front ends.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chessmate.core.enums import Color, PieceType

if TYPE_CHECKING:
    from chessmate.core.piece import Piece
    from chessmate.core.types import Square
    from chessmate.game.state import MatchState


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a match."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def choose_promotion(self, pawn: Piece, destination: Square) -> PieceType:
        """Pick the kind a pawn reaching *destination* turns into.

        Must return one of bishop, knight, queen or rook.
        """


class IGameController(ABC):
    """Interface for the match orchestrator."""

    @abstractmethod
    def new_game(
        self,
        white: IPlayer | None = None,
        black: IPlayer | None = None,
        state: MatchState | None = None,
    ) -> None:
        """Start from the standard position, or resume *state*."""

    @abstractmethod
    def submit_move(
        self,
        origin: Square | str,
        destination: Square | str,
        promotion: PieceType | None = None,
    ) -> bool:
        """Submit a move. Returns True if legal and applied."""
