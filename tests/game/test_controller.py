"""Tests for GameController — the orchestrator."""

import inspect
import logging

import pytest

from chessmate.core.board import Board
from chessmate.core.enums import Color, GameResult, PieceType, PositionStatus, RejectReason
from chessmate.core.move import Move
from chessmate.core.piece import Piece
from chessmate.core.types import E2, E4, parse_square
from chessmate.errors import ChessmateError, IllegalMoveError
from chessmate.game.controller import GameController
from chessmate.game.interfaces import GamePhase, IGameController
from chessmate.game.player import HumanPlayer
from chessmate.game.state import MatchState


def _make_controller(state: MatchState | None = None) -> GameController:
    """Helper: human vs human game."""
    ctrl = GameController()
    ctrl.new_game(
        HumanPlayer(Color.WHITE, "W"),
        HumanPlayer(Color.BLACK, "B"),
        state=state,
    )
    return ctrl


def _promotion_state() -> MatchState:
    return MatchState(
        board=Board.from_rows(
            [
                "....k...",
                "P.......",
                "........",
                "........",
                "........",
                "........",
                "........",
                "....K...",
            ]
        )
    )


class TestNewGame:
    def test_not_started_before_new_game(self) -> None:
        ctrl = GameController()
        assert ctrl.state.phase == GamePhase.NOT_STARTED
        assert not ctrl.submit_move("e2", "e4")

    def test_phase_awaiting(self) -> None:
        ctrl = _make_controller()
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE

    def test_players_assigned(self) -> None:
        ctrl = _make_controller()
        assert ctrl.player(Color.WHITE) is not None
        assert ctrl.player(Color.BLACK) is not None
        cp = ctrl.current_player
        assert cp is not None and cp.color == Color.WHITE

    def test_default_players(self) -> None:
        ctrl = GameController()
        ctrl.new_game()
        white = ctrl.player(Color.WHITE)
        assert isinstance(white, HumanPlayer)

    def test_resume_state(self) -> None:
        state = MatchState.initial()
        state.turn = Color.BLACK
        ctrl = _make_controller(state)
        assert ctrl.state is state
        assert ctrl.state.turn == Color.BLACK


class TestSubmitMove:
    def test_legal_move_accepted(self) -> None:
        ctrl = _make_controller()
        assert ctrl.submit_move("e2", "e4")
        assert ctrl.state.turn == Color.BLACK
        assert ctrl.state.history == [Move(PieceType.PAWN, Color.WHITE, E2, E4)]
        assert ctrl.last_rejection is None

    def test_square_indices_accepted(self) -> None:
        ctrl = _make_controller()
        assert ctrl.submit_move(E2, E4)

    @pytest.mark.parametrize(
        ("origin", "destination", "reason"),
        [
            ("e2", "e5", RejectReason.ILLEGAL_GEOMETRY_FOR_PIECE_KIND),
            ("e4", "e5", RejectReason.EMPTY_ORIGIN),
            ("e7", "e5", RejectReason.WRONG_COLOR_ORIGIN),
            ("e2", "e2", RejectReason.SAME_AS_ORIGIN),
            ("e2", "xx", RejectReason.MALFORMED_SQUARE),
            ("e2", "e9", RejectReason.OUT_OF_BOARD),
            ("d1", "d2", RejectReason.DESTINATION_OCCUPIED_BY_SAME_COLOR),
        ],
    )
    def test_rejections(self, origin: str, destination: str, reason: RejectReason) -> None:
        ctrl = _make_controller()
        before = ctrl.state.board.clone()
        assert not ctrl.submit_move(origin, destination)
        assert ctrl.last_rejection == reason
        assert ctrl.validate(origin, destination) == reason
        assert ctrl.state.board == before
        assert ctrl.state.turn == Color.WHITE
        assert ctrl.state.history == []

    def test_alternating_turns(self) -> None:
        ctrl = _make_controller()
        assert ctrl.submit_move("e2", "e4")
        assert not ctrl.submit_move("d2", "d4")
        assert ctrl.last_rejection == RejectReason.WRONG_COLOR_ORIGIN
        assert ctrl.submit_move("e7", "e5")
        assert ctrl.state.turn == Color.WHITE

    def test_capture_recorded(self) -> None:
        ctrl = _make_controller()
        for origin, dest in (("e2", "e4"), ("d7", "d5"), ("e4", "d5")):
            assert ctrl.submit_move(origin, dest)
        lost = ctrl.state.captured[Color.BLACK]
        assert len(lost) == 1 and lost[0].kind == PieceType.PAWN
        assert ctrl.state.captured[Color.WHITE] == []


class TestPromotion:
    def test_explicit_kind(self) -> None:
        ctrl = _make_controller(_promotion_state())
        assert ctrl.submit_move("a7", "a8", PieceType.KNIGHT)
        piece = ctrl.state.board[parse_square("a8")]
        assert piece is not None and piece.kind == PieceType.KNIGHT

    def test_player_is_asked(self) -> None:
        asked: list[tuple[int | None, int]] = []

        def choose(pawn: Piece, destination: int) -> PieceType:
            asked.append((pawn.position, destination))
            return PieceType.ROOK

        ctrl = GameController()
        ctrl.new_game(
            HumanPlayer(Color.WHITE, on_promotion=choose),
            HumanPlayer(Color.BLACK),
            state=_promotion_state(),
        )
        assert ctrl.submit_move("a7", "a8")
        assert asked == [(parse_square("a7"), parse_square("a8"))]
        piece = ctrl.state.board[parse_square("a8")]
        assert piece is not None and piece.kind == PieceType.ROOK

    def test_default_is_queen(self) -> None:
        ctrl = _make_controller(_promotion_state())
        assert ctrl.submit_move("a7", "a8")
        piece = ctrl.state.board[parse_square("a8")]
        assert piece is not None and piece.kind == PieceType.QUEEN
        # The new queen gives check along the eighth rank.
        assert ctrl.state.status == PositionStatus.CHECK


class TestGameEnd:
    def test_fools_mate(self) -> None:
        ctrl = _make_controller()
        results: list[tuple[GameResult, PositionStatus]] = []
        phases: list[GamePhase] = []
        ctrl.events.on_game_over.append(lambda r, s: results.append((r, s)))
        ctrl.events.on_phase_changed.append(phases.append)

        for origin, dest in (("f2", "f3"), ("e7", "e5"), ("g2", "g4"), ("d8", "h4")):
            assert ctrl.submit_move(origin, dest)

        assert ctrl.state.is_game_over
        assert ctrl.state.result == GameResult.BLACK_WINS
        assert results == [(GameResult.BLACK_WINS, PositionStatus.CHECKMATE)]
        assert phases == [GamePhase.GAME_OVER]
        assert not ctrl.submit_move("e2", "e4")

    def test_play_after_game_over_raises(self) -> None:
        ctrl = _make_controller()
        for origin, dest in (("f2", "f3"), ("e7", "e5"), ("g2", "g4"), ("d8", "h4")):
            ctrl.play(origin, dest)
        with pytest.raises(ChessmateError):
            ctrl.play("e2", "e4")


class TestEvents:
    def test_move_and_status_events(self) -> None:
        ctrl = _make_controller()
        moves: list[list[Move]] = []
        statuses: list[tuple[PositionStatus, Color]] = []
        ctrl.events.on_move.append(lambda records, _state: moves.append(records))
        ctrl.events.on_status.append(lambda s, c: statuses.append((s, c)))

        ctrl.submit_move("e2", "e4")
        assert moves == [[Move(PieceType.PAWN, Color.WHITE, E2, E4)]]
        assert statuses == [(PositionStatus.NORMAL, Color.BLACK)]

    def test_rejected_event(self) -> None:
        ctrl = _make_controller()
        reasons: list[RejectReason] = []
        ctrl.events.on_rejected.append(reasons.append)
        ctrl.submit_move("e2", "e5")
        assert reasons == [RejectReason.ILLEGAL_GEOMETRY_FOR_PIECE_KIND]


class TestExtras:
    def test_play_raises_illegal_move(self) -> None:
        ctrl = _make_controller()
        with pytest.raises(IllegalMoveError) as info:
            ctrl.play("e2", "e5")
        assert info.value.reason == RejectReason.ILLEGAL_GEOMETRY_FOR_PIECE_KIND
        assert "e2-e5" in str(info.value)

    def test_legal_destinations(self) -> None:
        ctrl = _make_controller()
        assert ctrl.legal_destinations("e2") == [parse_square("e3"), E4]
        assert ctrl.legal_destinations("e7") == []
        assert ctrl.legal_destinations("e4") == []

    def test_rejection_logged_as_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = _make_controller()
        with caplog.at_level(logging.WARNING, logger="chessmate"):
            assert not ctrl.submit_move("e2", "e5")
        records = [r for r in caplog.records if r.name == "chessmate.game.controller"]
        assert [r.levelno for r in records] == [logging.WARNING]
        assert RejectReason.ILLEGAL_GEOMETRY_FOR_PIECE_KIND.message in records[0].getMessage()

    def test_new_game_matches_interface(self) -> None:
        expected = inspect.signature(IGameController.new_game)
        assert inspect.signature(GameController.new_game) == expected
        assert list(expected.parameters) == ["self", "white", "black", "state"]
