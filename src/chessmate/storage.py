"""YAML save files for matches."""

from __future__ import annotations

import logging
import re
from pathlib import Path

import yaml

from chessmate.errors import (
    InvalidSaveNameError,
    SaveExistsError,
    SaveNotFoundError,
    SnapshotError,
)
from chessmate.game.snapshot import state_from_snapshot, state_to_snapshot
from chessmate.game.state import MatchState

_LOGGER = logging.getLogger(__name__)
_NAME_PATTERN = re.compile(r"^[A-Za-z0-9]+$")
_SUFFIX = ".yaml"


class SaveStore:
    """A directory of ``<name>.yaml`` match snapshots."""

    __slots__ = ("_directory",)

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    @staticmethod
    def is_valid_name(name: str) -> bool:
        return bool(_NAME_PATTERN.match(name))

    def path_for(self, name: str) -> Path:
        if not self.is_valid_name(name):
            raise InvalidSaveNameError(
                f"Invalid save name {name!r}: use only letters and numbers"
            )
        return self._directory / f"{name}{_SUFFIX}"

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def list_saves(self) -> list[str]:
        """Names of the saved matches, sorted."""
        if not self._directory.is_dir():
            return []
        return sorted(p.stem for p in self._directory.glob(f"*{_SUFFIX}") if p.is_file())

    def save(self, name: str, state: MatchState, overwrite: bool = False) -> Path:
        path = self.path_for(name)
        if path.exists() and not overwrite:
            raise SaveExistsError(f"Save {name!r} already exists")
        self._directory.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as fh:
            yaml.safe_dump(state_to_snapshot(state), fh, sort_keys=False)
        _LOGGER.info("Saved match to %s", path)
        return path

    def load(self, name: str) -> MatchState:
        path = self.path_for(name)
        if not path.is_file():
            raise SaveNotFoundError(f"No saved match named {name!r}")
        try:
            with path.open(encoding="utf-8") as fh:
                data = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise SnapshotError(f"{path}: not valid YAML ({exc})") from exc
        state = state_from_snapshot(data)
        _LOGGER.info("Loaded match from %s (%d moves)", path, len(state.history))
        return state
