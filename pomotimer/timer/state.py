"""Value types shared by the engine and its listeners."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SessionMode(Enum):
    FOCUS = "focus"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"


class RunPhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


MODE_LABELS: dict[SessionMode, str] = {
    SessionMode.FOCUS: "Focus",
    SessionMode.SHORT_BREAK: "Short Break",
    SessionMode.LONG_BREAK: "Long Break",
}


@dataclass(frozen=True)
class TimerSnapshot:
    """Immutable view of the countdown handed to UI listeners."""

    mode: SessionMode
    phase: RunPhase
    total_seconds: int
    remaining_seconds: int

    @property
    def minutes(self) -> int:
        return self.remaining_seconds // 60

    @property
    def seconds(self) -> int:
        return self.remaining_seconds % 60

    @property
    def progress(self) -> float:
        """0.0 → 1.0 progress through the current session."""
        if self.total_seconds <= 0:
            return 0.0
        elapsed = self.total_seconds - self.remaining_seconds
        return max(0.0, min(1.0, elapsed / self.total_seconds))

    @property
    def is_running(self) -> bool:
        return self.phase == RunPhase.RUNNING


@dataclass
class SessionCounters:
    """Completion tallies kept for the lifetime of the process.

    ``focus_streak`` counts every completed focus session since start-up
    and is never reset by switching modes.
    """

    focus_completed: int = 0
    short_break_completed: int = 0
    long_break_completed: int = 0
    focus_streak: int = 0
    unused_long_break_credits: int = 0
    last_session_was_focus: bool = True    # both breaks are offered at start-up

    def copy(self) -> SessionCounters:
        return SessionCounters(**vars(self))
