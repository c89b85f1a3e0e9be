"""Interactive terminal front end: prompts, board display, save/load."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from chessmate.config import AppSettings
from chessmate.core.enums import (
    PROMOTION_KINDS,
    Color,
    GameResult,
    PieceType,
    RejectReason,
)
from chessmate.core.piece import Piece
from chessmate.core.types import Square, square_name
from chessmate.errors import SnapshotError, StorageError
from chessmate.game.controller import GameController
from chessmate.game.player import HumanPlayer
from chessmate.game.state import MatchState
from chessmate.storage import SaveStore
from chessmate.ui.render import (
    render_board,
    render_captured,
    render_status,
    render_turn,
    render_warning,
)

_LOGGER = logging.getLogger(__name__)

SAVE_COMMAND = "save"

_HINTED_REASONS = (
    RejectReason.ILLEGAL_GEOMETRY_FOR_PIECE_KIND,
    RejectReason.SELF_CHECK_VIOLATION,
)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class ConsoleSession:
    """Drives one match over stdin/stdout (or injected I/O callables)."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        store: SaveStore | None = None,
        input_fn: InputFn | None = None,
        output_fn: OutputFn | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._store = store or SaveStore(self._settings.saves_dir)
        self._input = input_fn or input
        self._output = output_fn or print
        self._controller = GameController()

    @property
    def controller(self) -> GameController:
        return self._controller

    # ── Session bootstrap ────────────────────────────────────────────────

    def choose_mode(self) -> MatchState:
        """Ask whether to start a new match or resume a saved one."""
        while True:
            self._say(" Do you want to start a new game or load a saved game?")
            self._say("  [1] Start new game")
            self._say("  [2] Load saved game")
            choice = self._ask("").strip()
            if choice == "1":
                return MatchState.initial()
            if choice == "2":
                if not self._store.list_saves():
                    self._say("\n There are no saved games. Starting new game.")
                    return MatchState.initial()
                return self.choose_save()
            self._warn("Invalid choice.")

    def choose_save(self) -> MatchState:
        while True:
            self._say("\n These are the available games for loading:")
            for name in self._store.list_saves():
                self._say(f"  - {name}")
            name = self._ask("\n What is the name of the game you want to load?\n").strip()
            try:
                state = self._store.load(name)
            except (StorageError, SnapshotError):
                self._warn("Invalid name.")
                continue
            self._say("\n Game successfully loaded!")
            return state

    # ── Main loop ────────────────────────────────────────────────────────

    def run(self, state: MatchState | None = None) -> GameResult | None:
        """Play until the match ends (result) or the player saves (None)."""
        white = HumanPlayer(Color.WHITE, "White", on_promotion=self.ask_promotion)
        black = HumanPlayer(Color.BLACK, "Black", on_promotion=self.ask_promotion)
        self._controller.new_game(white, black, state=state)
        ctrl = self._controller

        while not ctrl.state.is_game_over:
            self._show_position()
            while True:
                origin = self.ask_origin()
                if origin is None:
                    self.save()
                    return None
                destination = self._ask(
                    "\n Where do you want to move the piece to? "
                    "Type a destination (ex: d1):\n"
                ).strip()
                if ctrl.submit_move(origin, destination):
                    break
                self._explain_rejection(origin)

            banner = render_status(ctrl.state.status, ctrl.state.turn, self._color)
            if banner is not None:
                self._say("\n" + banner)

        self._say(render_board(ctrl.state.board))
        return ctrl.state.result

    # ── Prompts ──────────────────────────────────────────────────────────

    def ask_origin(self) -> str | None:
        """Square of a piece to move, or None when the player asks to save."""
        state = self._controller.state
        while True:
            choice = self._ask(
                "\n What piece do you want to move? Type its position (ex: d1). "
                f"Or type '{SAVE_COMMAND}' to save and exit the game.\n"
            ).strip()
            if choice == SAVE_COMMAND:
                return None
            reason = state.validator.check_origin(choice, state.board, state.turn)
            if reason is None:
                return choice
            if reason == RejectReason.WRONG_COLOR_ORIGIN:
                self._warn(
                    f"Position has a {state.turn.opposite} piece. "
                    f"Choose a {state.turn} piece."
                )
            elif reason == RejectReason.EMPTY_ORIGIN:
                self._warn(reason.message)
            else:
                self._warn(RejectReason.MALFORMED_SQUARE.message)

    def ask_promotion(self, pawn: Piece, destination: Square) -> PieceType:
        del pawn
        while True:
            self._say(f"\n What do you want to promote the pawn on {square_name(destination)} to?")
            for i, kind in enumerate(PROMOTION_KINDS, start=1):
                self._say(f"  Type {i} for {kind}")
            choice = self._ask("").strip()
            if re.fullmatch(r"[1-4]", choice):
                return PROMOTION_KINDS[int(choice) - 1]
            self._warn("Invalid choice.")

    def save(self) -> None:
        while True:
            name = self._ask(
                "\n What is the filename you want to use to save the game? "
                "Use only letters and numbers.\n"
            ).strip()
            if not SaveStore.is_valid_name(name):
                self._warn("Invalid name.")
                continue
            overwrite = False
            if self._store.exists(name):
                if not self._confirm(
                    "\n Filename already exists. Overwrite existing file? (y/n)\n"
                ):
                    continue
                overwrite = True
            self._store.save(name, self._controller.state, overwrite=overwrite)
            self._say("\n Game successfully saved.")
            return

    # ── Internal helpers ─────────────────────────────────────────────────

    @property
    def _color(self) -> bool:
        return self._settings.use_color

    def _show_position(self) -> None:
        state = self._controller.state
        self._say(render_board(state.board))
        self._say("\n" + render_captured(state.captured, self._color))
        self._say(render_turn(state.turn, self._color))

    def _explain_rejection(self, origin: str) -> None:
        reason = self._controller.last_rejection
        if reason is None:
            return
        if reason == RejectReason.DESTINATION_OCCUPIED_BY_SAME_COLOR:
            self._warn(f"Destination already has a {self._controller.state.turn} piece.")
        elif reason in (RejectReason.MALFORMED_SQUARE, RejectReason.OUT_OF_BOARD):
            self._warn("Invalid destination.")
        else:
            self._warn(reason.message)

        if self._settings.show_hints and reason in _HINTED_REASONS:
            targets = self._controller.legal_destinations(origin)
            if targets:
                self._say("  Legal destinations: " + ", ".join(square_name(t) for t in targets))
            else:
                self._say("  That piece has no legal move.")

    def _confirm(self, prompt: str) -> bool:
        while True:
            answer = self._ask(prompt).strip()
            if answer in ("y", "n"):
                return answer == "y"
            self._warn("Invalid choice.")

    def _ask(self, prompt: str) -> str:
        return self._input(prompt)

    def _say(self, text: str) -> None:
        self._output(text)

    def _warn(self, message: str) -> None:
        _LOGGER.debug("Console warning: %s", message)
        self._output(render_warning(message, self._color))
