"""Piece record."""

from __future__ import annotations

from dataclasses import dataclass

from chessmate.core.enums import Color, PieceType
from chessmate.core.types import Square, square_name

# Letter ↔ (Color, PieceType); uppercase = white, lowercase = black
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_LETTERS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(slots=True)
class Piece:
    """A piece on (or retired from) the board.

    ``active`` and ``position`` move together: an active piece always has a
    square, a retired (captured or promoted-away) piece never does.
    """

    kind: PieceType
    color: Color
    position: Square | None
    active: bool = True

    def __post_init__(self) -> None:
        if self.active != (self.position is not None):
            raise ValueError(
                f"Inconsistent piece: active={self.active}, position={self.position}"
            )

    # ── Lifecycle ────────────────────────────────────────────────────────

    def retire(self) -> None:
        """Take the piece off the board for good."""
        assert self.active, f"{self!r} is already retired"
        self.active = False
        self.position = None

    def clone(self) -> Piece:
        return Piece(self.kind, self.color, self.position, self.active)

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def letter(self) -> str:
        """One-letter code (uppercase = white, lowercase = black)."""
        return _LETTERS[(self.color, self.kind)]

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.kind)]

    @classmethod
    def from_char(cls, char: str, position: Square | None) -> Piece:
        """Create an active piece from its letter, e.g. 'N' → white knight."""
        try:
            color, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(kind, color, position)

    def __str__(self) -> str:
        where = square_name(self.position) if self.position is not None else "captured"
        return f"{self.color} {self.kind} ({where})"
