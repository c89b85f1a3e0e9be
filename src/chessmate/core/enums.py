"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank direction this side's pawns advance in."""
        return 1 if self == Color.WHITE else -1

    @property
    def home_rank(self) -> int:
        """Rank index of the back rank (0 for white, 7 for black)."""
        return 0 if self == Color.WHITE else 7

    @property
    def pawn_rank(self) -> int:
        """Rank index pawns start on."""
        return 1 if self == Color.WHITE else 6

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()


# Kinds a pawn may become, in the order the console offers them.
PROMOTION_KINDS: tuple[PieceType, ...] = (
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.QUEEN,
    PieceType.ROOK,
)


class PositionStatus(IntEnum):
    """Classification of a position for the side about to move."""

    NORMAL = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3
    DRAW_INSUFFICIENT_MATERIAL = 4

    @property
    def is_terminal(self) -> bool:
        return self in (
            PositionStatus.CHECKMATE,
            PositionStatus.STALEMATE,
            PositionStatus.DRAW_INSUFFICIENT_MATERIAL,
        )


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3


class RejectReason(Enum):
    """Why a candidate origin or destination was refused."""

    MALFORMED_SQUARE = "Invalid choice."
    OUT_OF_BOARD = "Square is off the board."
    EMPTY_ORIGIN = "Position is empty."
    WRONG_COLOR_ORIGIN = "Position has a piece of the other color."
    SAME_AS_ORIGIN = "Destination is the same as origin."
    DESTINATION_OCCUPIED_BY_SAME_COLOR = "Destination already has a piece of your color."
    ILLEGAL_GEOMETRY_FOR_PIECE_KIND = "Invalid move."
    SELF_CHECK_VIOLATION = "Move puts own king in check."

    @property
    def message(self) -> str:
        return self.value
