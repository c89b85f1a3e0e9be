"""Tests for text rendering."""

from chessmate.core.board import Board
from chessmate.core.enums import Color, PieceType, PositionStatus
from chessmate.core.piece import Piece
from chessmate.ui.render import (
    render_board,
    render_captured,
    render_status,
    render_turn,
    render_warning,
)


class TestRenderBoard:
    def test_rank_order(self) -> None:
        lines = render_board(Board.initial()).splitlines()
        assert len(lines) == 19
        assert "a    b    c" in lines[0]
        assert lines[2].strip().startswith("8")
        assert "♜" in lines[2] and "♚" in lines[2]
        assert lines[16].strip().startswith("1")
        assert "♔" in lines[16]

    def test_empty_board(self) -> None:
        text = render_board(Board())
        for symbol in "♔♕♖♗♘♙♚♛♜♝♞♟":
            assert symbol not in text


class TestRenderStatus:
    def test_normal_is_silent(self) -> None:
        assert render_status(PositionStatus.NORMAL, Color.WHITE) is None

    def test_check(self) -> None:
        text = render_status(PositionStatus.CHECK, Color.BLACK, use_color=False)
        assert text == " CHECK - Black king is under attack!"

    def test_checkmate_names_winner(self) -> None:
        text = render_status(PositionStatus.CHECKMATE, Color.WHITE, use_color=False)
        assert text == " CHECKMATE - Black player wins!"

    def test_draws(self) -> None:
        stalemate = render_status(PositionStatus.STALEMATE, Color.BLACK, use_color=False)
        assert stalemate is not None and stalemate.startswith(" IT'S A DRAW")
        bare = render_status(
            PositionStatus.DRAW_INSUFFICIENT_MATERIAL, Color.WHITE, use_color=False
        )
        assert bare == " IT'S A DRAW - Only kings are left on the board."

    def test_color_codes(self) -> None:
        text = render_status(PositionStatus.CHECK, Color.WHITE)
        assert text is not None and text.startswith("\x1b[") and text.endswith("\x1b[0m")


class TestOtherLines:
    def test_captured(self) -> None:
        pawn = Piece(PieceType.PAWN, Color.BLACK, None, active=False)
        text = render_captured({Color.WHITE: [], Color.BLACK: [pawn]}, use_color=False)
        assert "LOST PIECES" in text
        assert "BLACK ⇨ ♟" in text
        assert text.splitlines()[-1].strip() == "WHITE ⇨"

    def test_turn(self) -> None:
        assert "WHITE PLAYER'S TURN" in render_turn(Color.WHITE, use_color=False)

    def test_warning(self) -> None:
        assert render_warning("Invalid name.", use_color=False) == " Invalid name."
        assert "\x1b[" in render_warning("Invalid name.")
