"""Concrete player implementations."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessmate.core.enums import Color, PieceType
from chessmate.game.interfaces import IPlayer

if TYPE_CHECKING:
    from chessmate.core.piece import Piece
    from chessmate.core.types import Square

PromotionChooser = Callable[["Piece", "Square"], PieceType]


class HumanPlayer(IPlayer):
    """A human participant whose moves come from the front end.

    Args:
        color: Side the player controls.
        name: Display name.
        on_promotion: ``(pawn, destination) -> PieceType``, asked when one
            of this player's pawns reaches the last rank. Defaults to a
            queen when not given.
    """

    __slots__ = ("_color", "_name", "_on_promotion")

    def __init__(
        self,
        color: Color,
        name: str = "",
        on_promotion: PromotionChooser | None = None,
    ) -> None:
        self._color = color
        self._name = name or f"Player ({color})"
        self._on_promotion = on_promotion

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    def choose_promotion(self, pawn: Piece, destination: Square) -> PieceType:
        if self._on_promotion is None:
            return PieceType.QUEEN
        return self._on_promotion(pawn, destination)
