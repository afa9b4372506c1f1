"""Pause watchdog: resets a focus session left paused for too long."""

from __future__ import annotations


DEFAULT_PAUSE_TIMEOUT = 120  # seconds


class PauseWatchdog:
    """Counts whole seconds spent paused.

    The engine arms it when a focus session is paused and feeds it one
    ``tick()`` per clock second.  ``tick()`` returns True exactly once,
    on the tick that reaches the timeout; after that the watchdog is
    inactive until armed again.
    """

    def __init__(self, timeout: int = DEFAULT_PAUSE_TIMEOUT) -> None:
        self.timeout = timeout
        self._active = False
        self._seconds_since_pause = 0

    @property
    def active(self) -> bool:
        return self._active

    @property
    def seconds_since_pause(self) -> int:
        return self._seconds_since_pause

    @property
    def timeout(self) -> int:
        return self._timeout

    @timeout.setter
    def timeout(self, seconds: int) -> None:
        self._timeout = max(1, seconds)

    def arm(self) -> None:
        self._seconds_since_pause = 0
        self._active = True

    def cancel(self) -> None:
        """Stop counting.  Safe to call when already inactive."""
        self._active = False
        self._seconds_since_pause = 0

    def tick(self) -> bool:
        """Advance one second.  True when the timeout has just expired."""
        if not self._active:
            return False
        self._seconds_since_pause += 1
        if self._seconds_since_pause >= self._timeout:
            self.cancel()
            return True
        return False
