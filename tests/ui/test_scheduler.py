"""Tests for the QTimer-backed scheduler."""

from __future__ import annotations

import time

from PyQt6.QtWidgets import QApplication

from chessling.ui.scheduler import QtScheduler


def _pump(app: QApplication, until: float) -> None:
    while time.monotonic() < until:
        app.processEvents()
        time.sleep(0.005)


def test_callback_fires_after_delay(qapp: QApplication) -> None:
    scheduler = QtScheduler()
    fired: list[str] = []
    scheduler(10, lambda: fired.append("done"))
    assert scheduler.pending == 1

    _pump(qapp, time.monotonic() + 0.5)
    assert fired == ["done"]
    assert scheduler.pending == 0


def test_stop_all_cancels_pending(qapp: QApplication) -> None:
    scheduler = QtScheduler()
    fired: list[str] = []
    scheduler(20, lambda: fired.append("late"))
    scheduler.stop_all()

    _pump(qapp, time.monotonic() + 0.2)
    assert fired == []
    assert scheduler.pending == 0
