"""Application settings.

Settings live in memory for the lifetime of the process; nothing is
written to disk.

Usage::

    settings = Settings()
    focus, short, long_ = validate_minutes("30", 5, 15)
    settings.focus_duration = focus * 60
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidSettings


MIN_MINUTES = 1
MAX_MINUTES = 99

SETTINGS_ERROR = "All durations must be integers between 1 and 99."


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    focus_duration: int = 25 * 60          # seconds
    short_break_duration: int = 5 * 60
    long_break_duration: int = 15 * 60
    long_break_interval: int = 4           # focus sessions per long break
    pause_timeout: int = 120               # seconds paused before auto-reset

    # ── audio ─────────────────────────────────────────────────────────
    sound_enabled: bool = True
    sound_volume: int = 70                 # 0-100

    # ── window ────────────────────────────────────────────────────────
    window_width: int = 420
    window_height: int = 560

    def minutes(self) -> tuple[int, int, int]:
        """Current durations as whole minutes (focus, short, long)."""
        return (
            self.focus_duration // 60,
            self.short_break_duration // 60,
            self.long_break_duration // 60,
        )


def parse_minutes(value: object) -> int:
    """Coerce one settings field to minutes, or raise ``InvalidSettings``.

    Accepts ``int`` and strings of decimal digits (surrounding whitespace
    is ignored).  Bools, floats and anything else are rejected.
    """
    if isinstance(value, bool):
        raise InvalidSettings(SETTINGS_ERROR)
    if isinstance(value, int):
        minutes = value
    elif isinstance(value, str) and value.strip().isdecimal():
        minutes = int(value.strip())
    else:
        raise InvalidSettings(SETTINGS_ERROR)

    if not MIN_MINUTES <= minutes <= MAX_MINUTES:
        raise InvalidSettings(SETTINGS_ERROR)
    return minutes


def validate_minutes(
    focus: object, short: object, long: object,
) -> tuple[int, int, int]:
    """Validate all three fields before any of them is used."""
    return parse_minutes(focus), parse_minutes(short), parse_minutes(long)
