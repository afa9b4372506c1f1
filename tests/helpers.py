"""Shared test helpers for PomoTimer."""

from pomotimer.timer.engine import SessionEngine
from pomotimer.timer.state import RunPhase


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class ManualClock:
    """Clock stand-in: records arm state, never fires on its own."""

    def __init__(self):
        self.callbacks: list = []
        self.armed = False
        self.arm_calls = 0

    def on_tick(self, callback):
        self.callbacks.append(callback)

    def arm(self):
        self.armed = True
        self.arm_calls += 1

    def disarm(self):
        self.armed = False

    @property
    def is_armed(self):
        return self.armed

    def fire(self, times: int = 1):
        for _ in range(times):
            for cb in self.callbacks:
                cb()


class RecordingNotifier:
    """Notifier stand-in that records calls."""

    def __init__(self):
        self.alerts = 0
        self.messages: list[str] = []

    def play_alert_sound(self):
        self.alerts += 1

    def show_message(self, text: str):
        self.messages.append(text)


class FailingNotifier(RecordingNotifier):
    def play_alert_sound(self):
        super().play_alert_sound()
        raise RuntimeError("audio device unavailable")


def run_ticks(engine: SessionEngine, count: int) -> None:
    for _ in range(count):
        engine.tick()


def complete_session(engine: SessionEngine) -> None:
    """Start (if needed) and fast-complete the current session."""
    if engine.phase != RunPhase.RUNNING:
        engine.start()
    engine._remaining = 1
    engine.tick()


def complete_focus_cycle(engine: SessionEngine) -> None:
    """Complete a focus session and whatever break it routes to."""
    complete_session(engine)
    complete_session(engine)
