"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator

import pytest

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal tests."""
    qtcore = pytest.importorskip("PyQt6.QtCore")

    app = qtcore.QCoreApplication.instance()
    if app is None:
        app = qtcore.QCoreApplication([])
    yield app


@pytest.fixture(autouse=True)
def _reset_chessmate_logger() -> Iterator[None]:
    """Undo handlers installed by configure_logging between tests."""
    logger = logging.getLogger("chessmate")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield
    for handler in logger.handlers:
        if handler not in saved[0]:
            handler.close()
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]
