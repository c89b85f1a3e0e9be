"""Tests for MatchState snapshots."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from chessmate.core.enums import Color, GameResult, PieceType, PositionStatus
from chessmate.core.types import G8
from chessmate.errors import SnapshotError
from chessmate.game.controller import GameController
from chessmate.game.interfaces import GamePhase
from chessmate.game.snapshot import SNAPSHOT_VERSION, state_from_snapshot, state_to_snapshot


def _played(*moves: tuple[str, str]) -> GameController:
    ctrl = GameController()
    ctrl.new_game()
    for origin, dest in moves:
        ctrl.play(origin, dest)
    return ctrl


class TestEncoding:
    def test_initial_shape(self) -> None:
        data = state_to_snapshot(_played().state)
        assert data["version"] == SNAPSHOT_VERSION
        assert data["turn"] == "white"
        assert data["status"] == "normal"
        assert data["result"] == "in_progress"
        assert len(data["board"]) == 32
        assert data["board"]["e1"] == {
            "kind": "king",
            "color": "white",
            "position": "e1",
            "active": True,
        }
        assert data["history"] == []
        assert data["captured"] == {"white": [], "black": []}

    def test_captures_and_history(self) -> None:
        ctrl = _played(("e2", "e4"), ("d7", "d5"), ("e4", "d5"))
        data = state_to_snapshot(ctrl.state)
        assert data["turn"] == "black"
        assert data["history"][-1] == {
            "kind": "pawn",
            "color": "white",
            "origin": "e4",
            "destination": "d5",
        }
        assert data["captured"]["black"] == [
            {"kind": "pawn", "color": "black", "position": None, "active": False}
        ]


class TestDecoding:
    def test_round_trip_continues_play(self) -> None:
        ctrl = _played(("e2", "e4"), ("g8", "f6"), ("e4", "e5"), ("d7", "d5"))
        restored = state_from_snapshot(state_to_snapshot(ctrl.state))

        assert restored.board == ctrl.state.board
        assert restored.history == ctrl.state.history
        assert restored.turn == Color.WHITE
        assert restored.phase == GamePhase.AWAITING_MOVE

        # En passant still depends on the restored history.
        resumed = GameController()
        resumed.new_game(state=restored)
        assert resumed.submit_move("e5", "d6")
        assert len(resumed.state.captured[Color.BLACK]) == 1

    def test_game_over_restored(self) -> None:
        ctrl = _played(("f2", "f3"), ("e7", "e5"), ("g2", "g4"), ("d8", "h4"))
        restored = state_from_snapshot(state_to_snapshot(ctrl.state))
        assert restored.status == PositionStatus.CHECKMATE
        assert restored.result == GameResult.BLACK_WINS
        assert restored.phase == GamePhase.GAME_OVER

    def test_promoted_piece_survives(self) -> None:
        ctrl = _played(
            ("h2", "h4"), ("g7", "g5"), ("h4", "g5"), ("h7", "h6"),
            ("g5", "h6"), ("a7", "a6"), ("h6", "h7"), ("a6", "a5"),
        )
        ctrl.play("h7", "g8", PieceType.KNIGHT)
        restored = state_from_snapshot(state_to_snapshot(ctrl.state))
        knight = restored.board[G8]
        assert knight is not None
        assert knight.kind == PieceType.KNIGHT and knight.color == Color.WHITE


def _valid() -> dict[str, Any]:
    return state_to_snapshot(_played(("e2", "e4")).state)


class TestValidation:
    @pytest.mark.parametrize(
        "mutate",
        [
            lambda d: d.update(version=99),
            lambda d: d.update(turn="green"),
            lambda d: d.update(board=[]),
            lambda d: d["board"].pop("e8"),
            lambda d: d["board"]["e4"].update(position="e5"),
            lambda d: d["board"]["e4"].update(active=False),
            lambda d: d["board"]["e4"].update(kind="wizard"),
            lambda d: d["board"].update(z9=d["board"]["e4"]),
            lambda d: d["history"].append({"kind": "pawn"}),
            lambda d: d.update(history="e2e4"),
            lambda d: d["captured"]["white"].append(
                {"kind": "pawn", "color": "white", "position": "a2", "active": True}
            ),
            lambda d: d["captured"]["black"].append(
                {"kind": "pawn", "color": "white", "position": None, "active": False}
            ),
            lambda d: d.update(status="winning"),
        ],
    )
    def test_rejects_bad_data(self, mutate: Any) -> None:
        data = copy.deepcopy(_valid())
        mutate(data)
        with pytest.raises(SnapshotError):
            state_from_snapshot(data)

    def test_rejects_non_mapping(self) -> None:
        with pytest.raises(SnapshotError):
            state_from_snapshot(["not", "a", "snapshot"])

    def test_second_king(self) -> None:
        data = copy.deepcopy(_valid())
        data["board"]["d4"] = {
            "kind": "king",
            "color": "white",
            "position": "d4",
            "active": True,
        }
        with pytest.raises(SnapshotError, match="one white king"):
            state_from_snapshot(data)
