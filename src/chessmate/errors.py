"""Exception hierarchy shared by the engine, the game layer and storage."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessmate.core.enums import RejectReason


class ChessmateError(Exception):
    """Base class for every error raised by chessmate."""


class InvalidSquareError(ChessmateError, ValueError):
    """A square name that is malformed or off the board."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid square name: {name!r}")
        self.name = name


class IllegalMoveError(ChessmateError):
    """Raised by :meth:`GameController.play` for a rejected candidate."""

    def __init__(self, reason: RejectReason, origin: str, destination: str) -> None:
        super().__init__(f"{origin}-{destination}: {reason.message}")
        self.reason = reason
        self.origin = origin
        self.destination = destination


class SnapshotError(ChessmateError):
    """Snapshot data does not describe a valid match."""


class StorageError(ChessmateError):
    """Base class for save-file problems."""


class InvalidSaveNameError(StorageError):
    """Save names may only contain letters and digits."""


class SaveExistsError(StorageError):
    """A save with that name exists and overwrite was not requested."""


class SaveNotFoundError(StorageError):
    """No save with that name exists."""
