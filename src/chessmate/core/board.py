"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chessmate.core.enums import Color, PieceType
from chessmate.core.piece import Piece
from chessmate.core.types import Square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board; each slot owns at most one piece."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq] = piece

    def __iter__(self) -> Iterator[tuple[Square, Piece | None]]:
        return iter(enumerate(self._squares))

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    # -- Query helpers ------------------------------------------------------

    def active_pieces(self) -> list[Piece]:
        """Every piece on the board, a1 first."""
        return [p for p in self._squares if p is not None and p.active]

    def pieces(self, color: Color) -> list[Piece]:
        """Active pieces of *color*."""
        return [p for p in self.active_pieces() if p.color == color]

    def king(self, color: Color) -> Piece:
        for piece in self.pieces(color):
            if piece.kind == PieceType.KING:
                return piece
        raise AssertionError(f"No {color} king on board")

    def king_square(self, color: Color) -> Square:
        """Return the king square for *color*."""
        sq = self.king(color).position
        assert sq is not None
        return sq

    # -- Mutation / copying -------------------------------------------------

    def place(self, piece: Piece) -> Piece:
        """Put an active *piece* on its own square."""
        assert piece.position is not None
        self._squares[piece.position] = piece
        return piece

    def clone(self) -> Board:
        """Deep copy: every occupied square gets a fresh piece record."""
        b = Board()
        b._squares = [p.clone() if p is not None else None for p in self._squares]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b.place(Piece(PieceType.PAWN, Color.WHITE, make_square(f, 1)))
            b.place(Piece(PieceType.PAWN, Color.BLACK, make_square(f, 6)))

        for f, kind in enumerate(_BACK_RANK):
            b.place(Piece(kind, Color.WHITE, make_square(f, 0)))
            b.place(Piece(kind, Color.BLACK, make_square(f, 7)))
        return b

    @classmethod
    def from_rows(cls, rows: list[str]) -> Board:
        """Build a board from eight strings, rank 8 first ('.' = empty)."""
        if len(rows) != 8 or any(len(row) != 8 for row in rows):
            raise ValueError("Expected eight rows of eight characters")
        b = cls()
        for i, row in enumerate(rows):
            rank = 7 - i
            for file, char in enumerate(row):
                if char != ".":
                    b.place(Piece.from_char(char, make_square(file, rank)))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(p.letter if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
