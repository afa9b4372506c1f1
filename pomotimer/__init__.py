"""PomoTimer: a Pomodoro desktop timer."""

__version__ = "0.1.0"
