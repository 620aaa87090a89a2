"""QtScheduler — runs deferred controller work on the Qt event loop."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer


class QtScheduler(QObject):
    """Callable matching ``Scheduler``: ``scheduler(delay_ms, callback)``.

    Every call gets its own single-shot QTimer parented to this object,
    so pending callbacks die with the window.  ``stop_all`` cancels
    whatever has not fired yet.
    """

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._timers: list[QTimer] = []

    def __call__(self, delay_ms: int, callback: Callable[[], None]) -> None:
        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._fire(timer, callback))
        self._timers.append(timer)
        timer.start(max(0, delay_ms))

    @property
    def pending(self) -> int:
        return len(self._timers)

    def stop_all(self) -> None:
        for timer in self._timers:
            timer.stop()
            timer.deleteLater()
        self._timers.clear()

    def _fire(self, timer: QTimer, callback: Callable[[], None]) -> None:
        if timer in self._timers:
            self._timers.remove(timer)
        timer.deleteLater()
        callback()
