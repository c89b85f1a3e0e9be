"""Plain-builtin snapshots of a :class:`MatchState`.

The snapshot is a dict of str/int/bool/None/list/dict only, so any
serializer (YAML, JSON) can store it::

    {
        "version": 1,
        "turn": "white",
        "status": "normal",
        "result": "in_progress",
        "board": {"e1": {"kind": "king", "color": "white",
                         "position": "e1", "active": True}, ...},
        "history": [{"kind": "pawn", "color": "white",
                     "origin": "e2", "destination": "e4"}, ...],
        "captured": {"white": [...], "black": [...]},
    }
"""

from __future__ import annotations

from typing import Any

from chessmate.core.board import Board
from chessmate.core.enums import Color, GameResult, PieceType, PositionStatus
from chessmate.core.move import Move
from chessmate.core.piece import Piece
from chessmate.core.types import parse_square, square_name
from chessmate.errors import InvalidSquareError, SnapshotError
from chessmate.game.interfaces import GamePhase
from chessmate.game.state import MatchState

SNAPSHOT_VERSION = 1


# ── Encoding ─────────────────────────────────────────────────────────────────


def _piece_to_dict(piece: Piece) -> dict[str, Any]:
    return {
        "kind": str(piece.kind),
        "color": str(piece.color),
        "position": square_name(piece.position) if piece.position is not None else None,
        "active": piece.active,
    }


def _move_to_dict(move: Move) -> dict[str, Any]:
    return {
        "kind": str(move.kind),
        "color": str(move.color),
        "origin": square_name(move.origin),
        "destination": square_name(move.destination),
    }


def state_to_snapshot(state: MatchState) -> dict[str, Any]:
    """Serialize *state* into plain builtins."""
    return {
        "version": SNAPSHOT_VERSION,
        "turn": str(state.turn),
        "status": state.status.name.lower(),
        "result": state.result.name.lower(),
        "board": {
            square_name(sq): _piece_to_dict(piece)
            for sq, piece in state.board
            if piece is not None
        },
        "history": [_move_to_dict(m) for m in state.history],
        "captured": {
            str(color): [_piece_to_dict(p) for p in pieces]
            for color, pieces in state.captured.items()
        },
    }


# ── Decoding ─────────────────────────────────────────────────────────────────


def _enum(enum_cls: Any, value: Any, what: str) -> Any:
    if not isinstance(value, str):
        raise SnapshotError(f"{what}: expected a string, got {value!r}")
    try:
        return enum_cls[value.upper()]
    except KeyError:
        raise SnapshotError(f"{what}: unknown value {value!r}") from None


def _square(value: Any, what: str) -> int:
    if not isinstance(value, str):
        raise SnapshotError(f"{what}: expected a square name, got {value!r}")
    try:
        return parse_square(value)
    except InvalidSquareError as exc:
        raise SnapshotError(f"{what}: {exc}") from exc


def _mapping(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise SnapshotError(f"{what}: expected a mapping, got {type(value).__name__}")
    return value


def _piece_from_dict(data: Any, what: str) -> Piece:
    data = _mapping(data, what)
    try:
        kind = _enum(PieceType, data["kind"], f"{what}.kind")
        color = _enum(Color, data["color"], f"{what}.color")
        raw_position = data["position"]
        active = data["active"]
    except KeyError as exc:
        raise SnapshotError(f"{what}: missing field {exc.args[0]!r}") from None
    if not isinstance(active, bool):
        raise SnapshotError(f"{what}.active: expected a bool, got {active!r}")
    position = None if raw_position is None else _square(raw_position, f"{what}.position")
    try:
        return Piece(kind, color, position, active)
    except ValueError as exc:
        raise SnapshotError(f"{what}: {exc}") from exc


def _move_from_dict(data: Any, what: str) -> Move:
    data = _mapping(data, what)
    try:
        return Move(
            _enum(PieceType, data["kind"], f"{what}.kind"),
            _enum(Color, data["color"], f"{what}.color"),
            _square(data["origin"], f"{what}.origin"),
            _square(data["destination"], f"{what}.destination"),
        )
    except KeyError as exc:
        raise SnapshotError(f"{what}: missing field {exc.args[0]!r}") from None


def state_from_snapshot(data: Any) -> MatchState:
    """Rebuild a :class:`MatchState`; raise :class:`SnapshotError` on bad data."""
    data = _mapping(data, "snapshot")
    version = data.get("version")
    if version != SNAPSHOT_VERSION:
        raise SnapshotError(f"Unsupported snapshot version: {version!r}")

    board = Board()
    for name, raw in _mapping(data.get("board", {}), "board").items():
        sq = _square(name, "board")
        piece = _piece_from_dict(raw, f"board.{name}")
        if not piece.active or piece.position != sq:
            raise SnapshotError(f"board.{name}: piece must be active and on {name}")
        board[sq] = piece

    for color in Color:
        kings = [p for p in board.pieces(color) if p.kind == PieceType.KING]
        if len(kings) != 1:
            raise SnapshotError(f"Expected exactly one {color} king, found {len(kings)}")

    raw_history = data.get("history", [])
    if not isinstance(raw_history, list):
        raise SnapshotError("history: expected a list")
    history = [_move_from_dict(m, f"history[{i}]") for i, m in enumerate(raw_history)]

    captured: dict[Color, list[Piece]] = {Color.WHITE: [], Color.BLACK: []}
    for name, pieces in _mapping(data.get("captured", {}), "captured").items():
        color = _enum(Color, name, "captured")
        if not isinstance(pieces, list):
            raise SnapshotError(f"captured.{name}: expected a list")
        for i, raw in enumerate(pieces):
            piece = _piece_from_dict(raw, f"captured.{name}[{i}]")
            if piece.active or piece.color != color:
                raise SnapshotError(
                    f"captured.{name}[{i}]: must be a retired {color} piece"
                )
            captured[color].append(piece)

    status = _enum(PositionStatus, data.get("status", "normal"), "status")
    result = _enum(GameResult, data.get("result", "in_progress"), "result")
    return MatchState(
        turn=_enum(Color, data.get("turn"), "turn"),
        board=board,
        history=history,
        captured=captured,
        status=status,
        phase=GamePhase.GAME_OVER if status.is_terminal else GamePhase.AWAITING_MOVE,
        result=result,
    )
