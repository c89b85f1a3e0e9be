"""Tests for file/rank arithmetic."""

from chessmate.core.board import Board
from chessmate.core.geometry import (
    column_shift,
    row_shift,
    squares_between,
    squares_between_are_empty,
    step_towards,
)
from chessmate.core.piece import Piece
from chessmate.core.types import A1, A2, A4, A8, B2, C3, D1, D4, E1, E5, F1, G1, H1, H8


class TestShifts:
    def test_row_shift(self) -> None:
        assert row_shift(A1, A8) == 7
        assert row_shift(A8, A1) == -7

    def test_column_shift(self) -> None:
        assert column_shift(A1, H8) == 7
        assert column_shift(H8, E5) == -3

    def test_step_towards(self) -> None:
        assert step_towards(A1, H8) == (1, 1)
        assert step_towards(H8, A1) == (-1, -1)
        assert step_towards(A1, A8) == (0, 1)


class TestSquaresBetween:
    def test_diagonal(self) -> None:
        assert squares_between(A1, D4) == [B2, C3]

    def test_adjacent_has_none(self) -> None:
        assert squares_between(A1, B2) == []

    def test_rank(self) -> None:
        assert squares_between(E1, H1) == [F1, G1]

    def test_empty_check(self) -> None:
        board = Board.initial()
        assert not squares_between_are_empty(E1, H1, board)
        assert squares_between_are_empty(E1, D1, board)
        assert squares_between_are_empty(B2, D4, Board.initial()) is True

    def test_single_blocker_on_empty_board(self) -> None:
        for start, blocker, end in ((A1, D1, H1), (A1, A4, A8), (A1, C3, H8)):
            board = Board()
            assert squares_between_are_empty(start, end, board)
            board.place(Piece.from_char("p", blocker))
            assert not squares_between_are_empty(start, end, board)
            assert not squares_between_are_empty(end, start, board)

    def test_adjacent_pair_with_both_occupied(self) -> None:
        board = Board()
        board.place(Piece.from_char("R", A1))
        board.place(Piece.from_char("r", B2))
        board.place(Piece.from_char("n", A2))
        assert squares_between_are_empty(A1, B2, board)
        assert squares_between_are_empty(A1, A2, board)
