"""Text rendering of the board, captured pieces and status lines."""

from __future__ import annotations

from chessmate.core.board import Board
from chessmate.core.enums import Color, PositionStatus
from chessmate.core.piece import Piece
from chessmate.core.types import FILES, make_square

_BOLD = "\x1b[1m"
_RED = "\x1b[38;5;196m"
_YELLOW = "\x1b[1;38;5;226m"
_BLUE = "\x1b[1;38;5;27m"
_RESET = "\x1b[0m"

_FILE_LABELS = "             " + "".join(f"{f}    " for f in FILES)
_OVERLINE = "‾" * 4


def _paint(text: str, code: str, use_color: bool) -> str:
    return f"{code}{text}{_RESET}" if use_color else text


def _cell(piece: Piece | None) -> str:
    return piece.symbol if piece is not None else " "


def render_board(board: Board) -> str:
    """Rank 8 at the top, files labelled above and below."""
    lines = [_FILE_LABELS.rstrip()]
    for rank in range(7, -1, -1):
        lines.append("           |" + "|".join([_OVERLINE] * 8) + "|")
        cells = "".join(f"| {_cell(board[make_square(f, rank)])}  " for f in range(8))
        lines.append(f"         {rank + 1} {cells}|")
    lines.append("            " + " ".join([_OVERLINE] * 8))
    lines.append(_FILE_LABELS.rstrip())
    return "\n".join(lines)


def render_captured(captured: dict[Color, list[Piece]], use_color: bool = True) -> str:
    lines = [_paint("         LOST PIECES", _BOLD, use_color)]
    for color in (Color.BLACK, Color.WHITE):
        symbols = " - ".join(p.symbol for p in captured[color])
        lines.append(f"          {str(color).upper()} ⇨ {symbols}".rstrip())
    return "\n".join(lines)


def render_turn(color: Color, use_color: bool = True) -> str:
    bar = "═" * 60
    title = _paint(f"{str(color).upper()} PLAYER'S TURN".center(60), _BOLD, use_color)
    return "\n".join([bar, title, bar])


def render_status(status: PositionStatus, to_move: Color, use_color: bool = True) -> str | None:
    """Banner for the position *to_move* now faces, or None when nothing to say."""
    mover = to_move.opposite
    match status:
        case PositionStatus.CHECK:
            text = f" CHECK - {str(to_move).capitalize()} king is under attack!"
            return _paint(text, _YELLOW, use_color)
        case PositionStatus.CHECKMATE:
            text = f" CHECKMATE - {str(mover).capitalize()} player wins!"
            return _paint(text, _BLUE, use_color)
        case PositionStatus.STALEMATE:
            text = (
                f" IT'S A DRAW - {str(to_move).capitalize()} is not in check"
                " and has no legal move available."
            )
            return _paint(text, _BOLD, use_color)
        case PositionStatus.DRAW_INSUFFICIENT_MATERIAL:
            text = " IT'S A DRAW - Only kings are left on the board."
            return _paint(text, _BOLD, use_color)
    return None


def render_warning(message: str, use_color: bool = True) -> str:
    return _paint(f" {message}", _RED, use_color)
