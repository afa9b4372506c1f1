"""Timer package."""

from .engine import SessionEngine, AUTO_RESET_NOTICE
from .state import (
    SessionMode,
    RunPhase,
    TimerSnapshot,
    SessionCounters,
    MODE_LABELS,
)
from .clock import QtClock
from .watchdog import PauseWatchdog, DEFAULT_PAUSE_TIMEOUT
from .commands import Action, Command, SessionController

__all__ = [
    "SessionEngine",
    "AUTO_RESET_NOTICE",
    "SessionMode",
    "RunPhase",
    "TimerSnapshot",
    "SessionCounters",
    "MODE_LABELS",
    "QtClock",
    "PauseWatchdog",
    "DEFAULT_PAUSE_TIMEOUT",
    "Action",
    "Command",
    "SessionController",
]
