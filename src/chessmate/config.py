"""Application settings: defaults, environment overrides, optional YAML file."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

_ENV_PREFIX = "CHESSMATE_"
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class AppSettings:
    """All user-configurable settings."""

    # Storage
    saves_dir: Path = Path("games")

    # Logging
    log_level: str = "WARNING"
    log_file: Path | None = None

    # Console
    use_color: bool = True
    show_hints: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str], base: AppSettings | None = None) -> AppSettings:
        """Apply ``CHESSMATE_*`` variables on top of *base* (or defaults)."""
        settings = base or cls()
        updates: dict[str, Any] = {}
        if "CHESSMATE_SAVES_DIR" in environ:
            updates["saves_dir"] = Path(environ["CHESSMATE_SAVES_DIR"])
        if "CHESSMATE_LOG_LEVEL" in environ:
            updates["log_level"] = environ["CHESSMATE_LOG_LEVEL"].upper()
        if environ.get("CHESSMATE_LOG_FILE"):
            updates["log_file"] = Path(environ["CHESSMATE_LOG_FILE"])
        if "CHESSMATE_NO_COLOR" in environ:
            no_color = _parse_bool(environ["CHESSMATE_NO_COLOR"], "CHESSMATE_NO_COLOR")
            updates["use_color"] = not no_color
        if "CHESSMATE_HINTS" in environ:
            updates["show_hints"] = _parse_bool(environ["CHESSMATE_HINTS"], "CHESSMATE_HINTS")
        return replace(settings, **updates)

    @classmethod
    def from_yaml(cls, path: str | Path, base: AppSettings | None = None) -> AppSettings:
        """Read settings from a YAML mapping; unknown keys are an error."""
        with Path(path).open(encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping of settings")
        return (base or cls()).merged(data)

    def merged(self, values: Mapping[str, Any]) -> AppSettings:
        known = {f.name for f in fields(self)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(sorted(unknown))}")
        updates: dict[str, Any] = {}
        for key, value in values.items():
            if key == "saves_dir":
                updates[key] = Path(value)
            elif key == "log_file":
                updates[key] = Path(value) if value else None
            elif key == "log_level":
                updates[key] = str(value).upper()
            elif key in ("use_color", "show_hints"):
                updates[key] = value if isinstance(value, bool) else _parse_bool(str(value), key)
        return replace(self, **updates)


def _parse_bool(raw: str, name: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name}: expected a boolean, got {raw!r}")
