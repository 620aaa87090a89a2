"""Shared pytest fixtures: headless Qt, i18n reset and a manual scheduler."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

# Board and panel tests need a QApplication even on headless Linux runners.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


class ManualScheduler:
    """Stands in for the computer's think timer.

    Deferred callbacks queue up in ``pending`` with their requested delay
    and only run when a test calls :meth:`run_all` (or pops one itself).
    """

    def __init__(self) -> None:
        self.pending: list[tuple[int, Callable[[], None]]] = []

    def __call__(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self.pending.append((delay_ms, callback))

    def run_all(self) -> None:
        while self.pending:
            _delay, callback = self.pending.pop(0)
            callback()


def _in_ui_package(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """One QApplication shared by every board and window test."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    """Coach and panel texts are looked up through the global language."""
    from chessling.i18n import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture(autouse=True)
def _close_windows(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Close any MainWindow or panel a UI test left open."""
    if not _in_ui_package(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()
