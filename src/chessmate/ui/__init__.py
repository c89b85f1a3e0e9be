"""Terminal front end."""

from chessmate.ui.console import ConsoleSession
from chessmate.ui.render import render_board, render_captured, render_status

__all__ = ["ConsoleSession", "render_board", "render_captured", "render_status"]
