"""One-second tick source backed by ``QTimer``."""

from __future__ import annotations

from typing import Callable

from PyQt6.QtCore import QObject, QTimer


TICK_INTERVAL_MS = 1000


class QtClock(QObject):
    """Invokes registered callbacks once per second while armed.

    ``arm()`` and ``disarm()`` are idempotent, so callers never need to
    check ``is_armed`` first.
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._callbacks: list[Callable[[], None]] = []
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(self._fire)

    def on_tick(self, callback: Callable[[], None]) -> None:
        self._callbacks.append(callback)

    def arm(self) -> None:
        if not self._qt_timer.isActive():
            self._qt_timer.start()

    def disarm(self) -> None:
        self._qt_timer.stop()

    @property
    def is_armed(self) -> bool:
        return self._qt_timer.isActive()

    def _fire(self) -> None:
        for callback in list(self._callbacks):
            callback()
