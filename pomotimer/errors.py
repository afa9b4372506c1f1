"""User-facing rejections raised by the session engine.

None of these are fatal.  The command layer catches ``SessionError`` and
turns it into a ``rejected`` signal for the UI to display.
"""


class SessionError(Exception):
    """Base exception for rejected timer commands."""


class InvalidTransition(SessionError):
    """Raised when a mode switch is attempted while running or paused."""


class BreakNotAllowed(SessionError):
    """Raised when a break is requested without being earned."""


class InvalidSettings(SessionError):
    """Raised when duration settings are out of range or not integers."""
