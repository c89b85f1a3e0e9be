"""File/rank arithmetic shared by every movement rule."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessmate.core.types import Square, file_of, make_square, rank_of

if TYPE_CHECKING:
    from chessmate.core.board import Board


def column_shift(origin: Square, destination: Square) -> int:
    """Signed file delta, e.g. h8 → e5 is -3."""
    return file_of(destination) - file_of(origin)


def row_shift(origin: Square, destination: Square) -> int:
    """Signed rank delta, e.g. a1 → a8 is 7."""
    return rank_of(destination) - rank_of(origin)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def step_towards(origin: Square, destination: Square) -> tuple[int, int]:
    """Unit (file, rank) step from *origin* in the direction of *destination*."""
    return (
        _sign(column_shift(origin, destination)),
        _sign(row_shift(origin, destination)),
    )


def squares_between(origin: Square, destination: Square) -> list[Square]:
    """Squares strictly between two points on a shared line or diagonal."""
    distance = max(
        abs(column_shift(origin, destination)), abs(row_shift(origin, destination))
    )
    df, dr = step_towards(origin, destination)
    f0, r0 = file_of(origin), rank_of(origin)
    return [make_square(f0 + i * df, r0 + i * dr) for i in range(1, distance)]


def squares_between_are_empty(
    origin: Square, destination: Square, board: Board
) -> bool:
    """True when nothing stands strictly between *origin* and *destination*.

    Only meaningful for pairs on a shared rank, file or diagonal. Adjacent
    squares have nothing between them and always pass.
    """
    return all(board.is_empty(sq) for sq in squares_between(origin, destination))
