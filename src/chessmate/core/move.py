"""Move record (one entry of the match history)."""

from __future__ import annotations

from dataclasses import dataclass

from chessmate.core.enums import Color, PieceType
from chessmate.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of a committed relocation.

    Castling produces two of these (king, then rook).
    """

    kind: PieceType
    color: Color
    origin: Square
    destination: Square

    def __str__(self) -> str:
        return f"{square_name(self.origin)}{square_name(self.destination)}"
