"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from chessmate.config import AppSettings
from chessmate.errors import ChessmateError
from chessmate.logging_setup import configure_logging
from chessmate.storage import SaveStore
from chessmate.ui.console import ConsoleSession

_LOGGER = logging.getLogger(__name__)

_BANNER_WIDTH = 60


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessmate",
        description="Play a two-player game of chess in the terminal.",
    )
    parser.add_argument("--config", type=Path, help="YAML settings file")
    parser.add_argument("--saves-dir", type=Path, help="Directory holding saved games")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--log-file", type=Path, help="Also write logs to this file")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("--load", metavar="NAME", help="Resume the saved game NAME")
    return parser


def resolve_settings(args: argparse.Namespace, environ: dict[str, str]) -> AppSettings:
    """Defaults < config file < environment < command line."""
    settings = AppSettings()
    if args.config is not None:
        settings = AppSettings.from_yaml(args.config, settings)
    settings = AppSettings.from_env(environ, settings)

    overrides: dict[str, object] = {}
    if args.saves_dir is not None:
        overrides["saves_dir"] = args.saves_dir
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if args.log_file is not None:
        overrides["log_file"] = args.log_file
    if args.no_color:
        overrides["use_color"] = False
    return settings.merged(overrides) if overrides else settings


def _welcome(use_color: bool) -> str:
    title = "Welcome to CHESS".center(_BANNER_WIDTH)
    if use_color:
        title = f"\x1b[1m{title}\x1b[0m"
    return "\n".join(
        [
            "╔" + "═" * _BANNER_WIDTH + "╗",
            f"║{title}║",
            "╚" + "═" * _BANNER_WIDTH + "╝",
        ]
    )


def main(argv: list[str] | None = None) -> int:
    """Launch a console session; returns the process exit code."""
    args = build_parser().parse_args(argv)
    try:
        settings = resolve_settings(args, dict(os.environ))
    except (OSError, ValueError) as exc:
        print(f"chessmate: {exc}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level, settings.log_file)
    session = ConsoleSession(settings, SaveStore(settings.saves_dir))

    try:
        print(_welcome(settings.use_color))
        if args.load is not None:
            state = SaveStore(settings.saves_dir).load(args.load)
        else:
            state = session.choose_mode()
        session.run(state)
    except ChessmateError as exc:
        _LOGGER.error("%s", exc)
        print(f"chessmate: {exc}", file=sys.stderr)
        return 1
    except (KeyboardInterrupt, EOFError):
        print()
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
