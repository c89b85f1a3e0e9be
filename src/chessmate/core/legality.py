"""Move legality: per-piece predicates, special moves and attack detection."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from chessmate.core.enums import Color, PieceType, RejectReason
from chessmate.core.geometry import (
    column_shift,
    row_shift,
    squares_between_are_empty,
)
from chessmate.core.types import (
    Square,
    is_square_name,
    is_valid_square,
    is_well_formed,
    make_square,
    offset_square,
    parse_square,
    rank_of,
)

if TYPE_CHECKING:
    from chessmate.core.board import Board
    from chessmate.core.move import Move
    from chessmate.core.piece import Piece

_LOGGER = logging.getLogger(__name__)

KNIGHT_OFFSETS: frozenset[tuple[int, int]] = frozenset(
    {(-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1)}
)

_KING_FILE = 4
_KINGSIDE_FILE = 6
_QUEENSIDE_FILE = 2

# king destination file -> (rook corner file, rook destination file)
_CASTLING_ROOK_FILES: dict[int, tuple[int, int]] = {
    _KINGSIDE_FILE: (7, 5),
    _QUEENSIDE_FILE: (0, 3),
}


def castling_rook_squares(
    color: Color, destination: Square
) -> tuple[Square, Square] | None:
    """(rook origin, rook destination) for a castling king landing on *destination*."""
    if rank_of(destination) != color.home_rank:
        return None
    files = _CASTLING_ROOK_FILES.get(destination & 7)
    if files is None:
        return None
    return (
        make_square(files[0], color.home_rank),
        make_square(files[1], color.home_rank),
    )


def is_castling_shape(piece: Piece, destination: Square) -> bool:
    """King stepping two files from its home square along its home rank."""
    assert piece.position is not None
    return (
        piece.kind == PieceType.KING
        and piece.position == make_square(_KING_FILE, piece.color.home_rank)
        and castling_rook_squares(piece.color, destination) is not None
    )


def is_promotion(piece: Piece, destination: Square) -> bool:
    """Pawn reaching the opposing back rank."""
    return (
        piece.kind == PieceType.PAWN
        and rank_of(destination) == piece.color.opposite.home_rank
    )


def _normalize(destination: Square | str) -> Square | RejectReason:
    if isinstance(destination, str):
        if not is_well_formed(destination):
            return RejectReason.MALFORMED_SQUARE
        if not is_square_name(destination):
            return RejectReason.OUT_OF_BOARD
        return parse_square(destination)
    if not is_valid_square(destination):
        return RejectReason.OUT_OF_BOARD
    return destination


class MoveValidator:
    """Decides whether a piece may move to a square, given the match history.

    The validator never mutates the board it is handed; self-check safety
    and castling paths are evaluated on clones.
    """

    __slots__ = ("_history", "last_rejection")

    def __init__(self, history: Sequence[Move]) -> None:
        self._history = history
        self.last_rejection: RejectReason | None = None

    # -- Public API ---------------------------------------------------------

    def is_legal_destination(
        self,
        piece: Piece,
        destination: Square | str,
        board: Board,
        check_own_king_safety: bool = True,
        report_errors: bool = False,
    ) -> bool:
        reason = self.check_destination(
            piece, destination, board, check_own_king_safety
        )
        if report_errors:
            self.last_rejection = reason
            if reason is not None:
                _LOGGER.warning(
                    "Rejected %s to %s: %s", piece, destination, reason.message
                )
        return reason is None

    def check_destination(
        self,
        piece: Piece,
        destination: Square | str,
        board: Board,
        check_own_king_safety: bool = True,
    ) -> RejectReason | None:
        """First failed condition for moving *piece* to *destination*, or None."""
        assert piece.active and piece.position is not None

        target = _normalize(destination)
        if isinstance(target, RejectReason):
            return target
        if target == piece.position:
            return RejectReason.SAME_AS_ORIGIN
        occupant = board[target]
        if occupant is not None and occupant.color == piece.color:
            return RejectReason.DESTINATION_OCCUPIED_BY_SAME_COLOR
        if not self._geometry_allows(piece, target, board):
            return RejectReason.ILLEGAL_GEOMETRY_FOR_PIECE_KIND
        if check_own_king_safety and self._exposes_own_king(piece, target, board):
            return RejectReason.SELF_CHECK_VIOLATION
        return None

    def check_origin(
        self, origin: Square | str, board: Board, turn: Color
    ) -> RejectReason | None:
        """Whether *origin* holds a piece the side to move may pick up."""
        sq = _normalize(origin)
        if isinstance(sq, RejectReason):
            return sq
        piece = board[sq]
        if piece is None:
            return RejectReason.EMPTY_ORIGIN
        if piece.color != turn:
            return RejectReason.WRONG_COLOR_ORIGIN
        return None

    def legal_destinations(self, piece: Piece, board: Board) -> list[Square]:
        """Every square *piece* may legally move to."""
        return [
            sq for sq in range(64) if self.check_destination(piece, sq, board) is None
        ]

    # -- Attack detection ---------------------------------------------------

    def is_attacked(self, color: Color, board: Board) -> bool:
        """Is *color*'s king attacked by any active opponent piece?

        Attackers are checked without self-check safety, otherwise each
        probe would recurse into the attacker's own king.
        """
        king_sq = board.king_square(color)
        return any(
            self.check_destination(p, king_sq, board, check_own_king_safety=False)
            is None
            for p in board.pieces(color.opposite)
        )

    # -- Special moves ------------------------------------------------------

    def is_en_passant(self, piece: Piece, destination: Square) -> bool:
        """Capture of a pawn that just advanced two squares past *piece*."""
        if piece.kind != PieceType.PAWN or not self._history:
            return False
        origin = piece.position
        assert origin is not None
        forward = piece.color.forward
        df = column_shift(origin, destination)
        if abs(df) != 1 or row_shift(origin, destination) != forward:
            return False

        last = self._history[-1]
        return (
            last.kind == PieceType.PAWN
            and last.color == piece.color.opposite
            and column_shift(origin, last.origin) == df
            and row_shift(origin, last.origin) == 2 * forward
            and column_shift(origin, last.destination) == df
            and row_shift(origin, last.destination) == 0
        )

    def is_castling(self, king: Piece, destination: Square, board: Board) -> bool:
        """Full castling precondition check for *king* landing on *destination*."""
        if not is_castling_shape(king, destination):
            return False
        origin = king.position
        assert origin is not None
        rook_squares = castling_rook_squares(king.color, destination)
        assert rook_squares is not None
        rook_origin = rook_squares[0]

        if self._castling_right_lost(king.color, rook_origin):
            return False

        rook = board[rook_origin]
        if rook is None or rook.kind != PieceType.ROOK or rook.color != king.color:
            return False

        if not squares_between_are_empty(origin, rook_origin, board):
            return False

        step = 1 if destination > origin else -1
        for sq in range(origin, destination + step, step):
            sim = board.clone()
            sim_king = sim[origin]
            assert sim_king is not None
            if sq != origin:
                _simulate(sim, sim_king, sq)
            if self.is_attacked(king.color, sim):
                _LOGGER.debug("Castling to %s blocked: square %s attacked", destination, sq)
                return False
        return True

    def _castling_right_lost(self, color: Color, rook_origin: Square) -> bool:
        return any(
            (m.kind == PieceType.KING and m.color == color)
            or (m.kind == PieceType.ROOK and m.origin == rook_origin)
            for m in self._history
        )

    # -- Per-kind geometry (private) ---------------------------------------

    def _geometry_allows(self, piece: Piece, destination: Square, board: Board) -> bool:
        origin = piece.position
        assert origin is not None
        df = column_shift(origin, destination)
        dr = row_shift(origin, destination)

        match piece.kind:
            case PieceType.PAWN:
                return self._pawn_allows(piece, destination, board)
            case PieceType.KNIGHT:
                return (df, dr) in KNIGHT_OFFSETS
            case PieceType.BISHOP:
                return _diagonal_clear(origin, destination, board)
            case PieceType.ROOK:
                return _straight_clear(origin, destination, board)
            case PieceType.QUEEN:
                return _straight_clear(origin, destination, board) or _diagonal_clear(
                    origin, destination, board
                )
            case PieceType.KING:
                if max(abs(df), abs(dr)) == 1:
                    return True
                # Castling never captures: its landing square must be empty.
                return board.is_empty(destination) and self.is_castling(
                    piece, destination, board
                )
        return False

    def _pawn_allows(self, pawn: Piece, destination: Square, board: Board) -> bool:
        origin = pawn.position
        assert origin is not None
        forward = pawn.color.forward
        df = column_shift(origin, destination)
        dr = row_shift(origin, destination)
        occupant = board[destination]

        if df == 0 and dr == forward:
            return occupant is None
        if df == 0 and dr == 2 * forward:
            middle = offset_square(origin, 0, forward)
            return (
                rank_of(origin) == pawn.color.pawn_rank
                and occupant is None
                and middle is not None
                and board.is_empty(middle)
            )
        if abs(df) == 1 and dr == forward:
            if occupant is not None:
                return occupant.color != pawn.color
            return self.is_en_passant(pawn, destination)
        return False

    # -- Simulation ---------------------------------------------------------

    def _exposes_own_king(self, piece: Piece, destination: Square, board: Board) -> bool:
        assert piece.position is not None
        sim = board.clone()
        sim_piece = sim[piece.position]
        assert sim_piece is not None
        _simulate(sim, sim_piece, destination, list(self._history))
        return self.is_attacked(piece.color, sim)


def _simulate(
    board: Board,
    piece: Piece,
    destination: Square,
    history: list[Move] | None = None,
) -> None:
    """Commit a move on a throwaway board (nothing is recorded as captured)."""
    from chessmate.core.executor import MoveExecutor

    executor = MoveExecutor(board, history if history is not None else [])
    if history is None:
        executor.relocate(piece, destination)
    else:
        promotion = PieceType.QUEEN if is_promotion(piece, destination) else None
        executor.commit(piece, destination, promotion=promotion)


def _straight_clear(origin: Square, destination: Square, board: Board) -> bool:
    df = column_shift(origin, destination)
    dr = row_shift(origin, destination)
    if (df == 0) == (dr == 0):
        return False
    return squares_between_are_empty(origin, destination, board)


def _diagonal_clear(origin: Square, destination: Square, board: Board) -> bool:
    df = column_shift(origin, destination)
    dr = row_shift(origin, destination)
    if df == 0 or abs(df) != abs(dr):
        return False
    return squares_between_are_empty(origin, destination, board)
