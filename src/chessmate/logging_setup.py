"""One-shot logging configuration for the command-line front end."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_ROOT_NAME = "chessmate"


def configure_logging(level: str = "WARNING", log_file: str | Path | None = None) -> logging.Logger:
    """Attach handlers to the ``chessmate`` logger once; later calls only adjust the level."""
    logger = logging.getLogger(_ROOT_NAME)
    log_level = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(log_level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger
