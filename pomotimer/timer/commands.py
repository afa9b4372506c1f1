"""Command messages from the UI to the session engine.

Widgets never call engine methods directly.  They build a ``Command``
and hand it to ``SessionController.submit()``; the engine answers through
its signals.  Submission goes through a Qt signal, so a command sent
from another thread is queued onto the engine's thread and at most one
transition runs at a time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal

from ..errors import SessionError
from .engine import SessionEngine
from .state import SessionMode


logger = logging.getLogger(__name__)


class Action(Enum):
    START = "start"
    PAUSE = "pause"
    RESUME = "resume"
    TOGGLE = "toggle"
    RESET = "reset"
    SWITCH_MODE = "switch_mode"
    APPLY_SETTINGS = "apply_settings"


@dataclass(frozen=True)
class Command:
    action: Action
    mode: SessionMode | None = None
    minutes: tuple[object, object, object] | None = None

    # ── constructors ──────────────────────────────────────────────────

    @classmethod
    def start(cls) -> Command:
        return cls(Action.START)

    @classmethod
    def pause(cls) -> Command:
        return cls(Action.PAUSE)

    @classmethod
    def resume(cls) -> Command:
        return cls(Action.RESUME)

    @classmethod
    def toggle(cls) -> Command:
        return cls(Action.TOGGLE)

    @classmethod
    def reset(cls) -> Command:
        return cls(Action.RESET)

    @classmethod
    def switch_mode(cls, mode: SessionMode) -> Command:
        return cls(Action.SWITCH_MODE, mode=mode)

    @classmethod
    def apply_settings(cls, focus: object, short: object, long: object) -> Command:
        return cls(Action.APPLY_SETTINGS, minutes=(focus, short, long))


class SessionController(QObject):
    """Serialises commands onto a ``SessionEngine``.

    A refused command (``SessionError``) is logged and re-emitted as
    ``engine.rejected`` instead of propagating to the caller.
    """

    _submitted = pyqtSignal(object)

    def __init__(self, engine: SessionEngine, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        # Must live on the engine's thread for queued delivery to land there.
        self._submitted.connect(self._execute)

    @property
    def engine(self) -> SessionEngine:
        return self._engine

    def submit(self, command: Command) -> None:
        """Run *command* now, or on the engine thread if called elsewhere."""
        self._submitted.emit(command)

    def _execute(self, command: Command) -> None:
        engine = self._engine
        try:
            if command.action == Action.START:
                engine.start()
            elif command.action == Action.PAUSE:
                engine.pause()
            elif command.action == Action.RESUME:
                engine.resume()
            elif command.action == Action.TOGGLE:
                engine.toggle()
            elif command.action == Action.RESET:
                engine.reset()
            elif command.action == Action.SWITCH_MODE:
                engine.switch_mode(command.mode)
            elif command.action == Action.APPLY_SETTINGS:
                engine.apply_settings(*command.minutes)
        except SessionError as error:
            logger.info("Rejected %s: %s", command.action.value, error)
            engine.rejected.emit(str(error))
