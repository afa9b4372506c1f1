"""Session state machine for PomoTimer.

Phases
------
IDLE      Not counting; ``remaining == total`` for the current mode.
RUNNING   Countdown advancing once per clock tick.
PAUSED    Countdown frozen.  In focus mode the pause watchdog is armed.

Transitions
-----------
IDLE → RUNNING              (start)
RUNNING → PAUSED            (pause)
PAUSED → RUNNING            (resume / start)
Any → IDLE                  (reset, pause timeout)
RUNNING → IDLE, next mode   (countdown reaches 0)

Mode rules
----------
- Focus → short break, or long break on every fourth completed focus
  session (which also grants a long-break credit).
- Any break → focus.
- Breaks may only be chosen by hand at start-up or right after a focus
  session; a long break off the regular cadence spends a credit.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from ..errors import BreakNotAllowed, InvalidTransition
from ..settings import Settings, validate_minutes
from .clock import QtClock
from .state import RunPhase, SessionCounters, SessionMode, TimerSnapshot
from .watchdog import PauseWatchdog


logger = logging.getLogger(__name__)

SWITCH_WHILE_ACTIVE = "Cannot switch mode while timer is running or paused."
SHORT_BREAK_REFUSED = "Short break not allowed now. Finish a focus session first."
LONG_BREAK_REFUSED = (
    "Long break not allowed now. "
    "Finish four focus sessions or use unused long breaks."
)
AUTO_RESET_NOTICE = (
    "Focus timer was paused for more than 2 minutes "
    "and has been reset automatically."
)


class SessionEngine(QObject):
    """Pomodoro countdown with mode cycling, break rules and a pause
    watchdog.

    The engine never reads the wall clock.  A clock (``QtClock`` unless
    one is injected) calls ``tick()`` once per second while armed; the
    engine arms it only while running, or while paused with the watchdog
    counting.

    Signals
    -------
    display_updated(minutes: int, seconds: int, progress: float)
        Emitted on every tick and on every change to the countdown.
    mode_changed(mode: SessionMode)
        Emitted whenever a mode is (re)applied.
    counters_changed(counters: SessionCounters)
        A copy of the counters after any change.
    state_changed(snapshot: TimerSnapshot)
        Emitted on every phase transition.
    session_completed(mode: SessionMode)
        Emitted after a countdown reaches zero, before the next mode is
        applied.
    rejected(reason: str)
        A command was refused; emitted by ``SessionController``.
    auto_reset_notice(text: str)
        The pause watchdog expired and the session was reset.
    settings_applied(focus: int, short: int, long: int)
        New durations in seconds.
    """

    display_updated = pyqtSignal(int, int, float)
    mode_changed = pyqtSignal(object)
    counters_changed = pyqtSignal(object)
    state_changed = pyqtSignal(object)
    session_completed = pyqtSignal(object)
    rejected = pyqtSignal(str)
    auto_reset_notice = pyqtSignal(str)
    settings_applied = pyqtSignal(int, int, int)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        settings: Settings | None = None,
        notifier=None,
        clock=None,
    ) -> None:
        super().__init__(parent)
        settings = settings or Settings()

        # ── configuration ─────────────────────────────────────────────
        self._durations: dict[SessionMode, int] = {
            SessionMode.FOCUS: settings.focus_duration,
            SessionMode.SHORT_BREAK: settings.short_break_duration,
            SessionMode.LONG_BREAK: settings.long_break_duration,
        }
        self._long_break_interval: int = max(1, settings.long_break_interval)
        self._notifier = notifier

        # ── countdown state ───────────────────────────────────────────
        self._mode: SessionMode = SessionMode.FOCUS
        self._phase: RunPhase = RunPhase.IDLE
        self._total: int = self._durations[SessionMode.FOCUS]
        self._remaining: int = self._total
        self._long_break_prepaid: bool = False

        # ── counters / watchdog ───────────────────────────────────────
        self._counters = SessionCounters()
        self._watchdog = PauseWatchdog(settings.pause_timeout)

        # ── tick source ───────────────────────────────────────────────
        self._clock = clock if clock is not None else QtClock(self)
        self._clock.on_tick(self.tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def mode(self) -> SessionMode:
        """The active mode (or the next one to start, when IDLE)."""
        return self._mode

    @property
    def phase(self) -> RunPhase:
        return self._phase

    @property
    def total_seconds(self) -> int:
        return self._total

    @property
    def remaining_seconds(self) -> int:
        return self._remaining

    @property
    def is_running(self) -> bool:
        return self._phase == RunPhase.RUNNING

    @property
    def counters(self) -> SessionCounters:
        """A copy; mutating it does not affect the engine."""
        return self._counters.copy()

    @property
    def seconds_since_pause(self) -> int:
        return self._watchdog.seconds_since_pause

    @property
    def watchdog_active(self) -> bool:
        return self._watchdog.active

    @property
    def long_break_interval(self) -> int:
        return self._long_break_interval

    def duration_for(self, mode: SessionMode) -> int:
        return self._durations[mode]

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            mode=self._mode,
            phase=self._phase,
            total_seconds=self._total,
            remaining_seconds=self._remaining,
        )

    # ══════════════════════════════════════════════════════════════════
    #  BREAK ELIGIBILITY
    # ══════════════════════════════════════════════════════════════════

    def can_start_short_break(self) -> bool:
        return self._counters.last_session_was_focus

    def can_start_long_break(self) -> bool:
        c = self._counters
        return c.last_session_was_focus and (
            self._on_long_break_cadence() or c.unused_long_break_credits > 0
        )

    def _on_long_break_cadence(self) -> bool:
        return self._counters.focus_streak % self._long_break_interval == 0

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Start from IDLE or continue from PAUSED.  No-op while running."""
        if self._phase == RunPhase.RUNNING:
            return
        resuming = self._phase == RunPhase.PAUSED
        self._watchdog.cancel()
        self._phase = RunPhase.RUNNING
        self._sync_clock()
        logger.info(
            "%s %s: remaining=%ss",
            "Resumed" if resuming else "Started",
            self._mode.value,
            self._remaining,
        )
        self._emit_state()

    def resume(self) -> None:
        """Continue a paused session."""
        if self._phase != RunPhase.PAUSED:
            return
        self.start()

    def pause(self) -> None:
        """Freeze the countdown.  Arms the watchdog in focus mode."""
        if self._phase != RunPhase.RUNNING:
            return
        self._phase = RunPhase.PAUSED
        if self._mode == SessionMode.FOCUS:
            self._watchdog.arm()
        self._sync_clock()
        logger.info(
            "Paused %s: remaining=%ss", self._mode.value, self._remaining,
        )
        self._emit_state()

    def toggle(self) -> None:
        """Start, pause or resume depending on the current phase."""
        if self._phase == RunPhase.RUNNING:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        """Return to IDLE with the full duration of the current mode."""
        self._watchdog.cancel()
        self._phase = RunPhase.IDLE
        self._remaining = self._total
        self._sync_clock()
        logger.info("Reset %s to %ss", self._mode.value, self._total)
        self._emit_state()
        self._emit_display()

    def switch_mode(self, mode: SessionMode) -> None:
        """Select *mode* by hand.  Only allowed while IDLE.

        Raises ``InvalidTransition`` while running or paused and
        ``BreakNotAllowed`` when the break has not been earned.
        """
        if self._phase != RunPhase.IDLE:
            raise InvalidTransition(SWITCH_WHILE_ACTIVE)

        prepaid = False
        if mode == SessionMode.SHORT_BREAK and not self.can_start_short_break():
            raise BreakNotAllowed(SHORT_BREAK_REFUSED)
        if mode == SessionMode.LONG_BREAK:
            if not self.can_start_long_break():
                raise BreakNotAllowed(LONG_BREAK_REFUSED)
            if (
                not self._on_long_break_cadence()
                and self._counters.unused_long_break_credits > 0
            ):
                self._counters.unused_long_break_credits = max(
                    0, self._counters.unused_long_break_credits - 1,
                )
                prepaid = True

        self._counters.last_session_was_focus = False
        self._advance_to(mode)
        self._long_break_prepaid = prepaid
        self._emit_counters()

    def apply_settings(
        self, focus_minutes: object, short_minutes: object, long_minutes: object,
    ) -> None:
        """Replace all three durations, or none of them.

        Raises ``InvalidSettings`` if any value is not an integer in
        1..99.  While IDLE the focus mode is re-applied straight away;
        otherwise the running countdown is left alone.
        """
        focus, short, long_ = validate_minutes(
            focus_minutes, short_minutes, long_minutes,
        )
        self._durations = {
            SessionMode.FOCUS: focus * 60,
            SessionMode.SHORT_BREAK: short * 60,
            SessionMode.LONG_BREAK: long_ * 60,
        }
        logger.info(
            "Durations set: focus=%smin short=%smin long=%smin",
            focus, short, long_,
        )
        self.settings_applied.emit(focus * 60, short * 60, long_ * 60)
        if self._phase == RunPhase.IDLE:
            self._advance_to(SessionMode.FOCUS)

    def set_pause_timeout(self, seconds: int) -> None:
        self._watchdog.timeout = seconds

    # ══════════════════════════════════════════════════════════════════
    #  CLOCK CALLBACK
    # ══════════════════════════════════════════════════════════════════

    def tick(self) -> None:
        """Advance one second.  Called by the clock; never raises."""
        if self._phase == RunPhase.RUNNING:
            self._countdown_tick()
        elif self._phase == RunPhase.PAUSED and self._watchdog.active:
            if self._watchdog.tick():
                self._pause_timed_out()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL: timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _countdown_tick(self) -> None:
        self._remaining = max(0, self._remaining - 1)
        logger.debug("Tick %s: remaining=%ss", self._mode.value, self._remaining)
        self._emit_display()
        if self._remaining <= 0:
            self._finish_session()

    def _finish_session(self) -> None:
        completed = self._mode
        self._phase = RunPhase.IDLE
        self._sync_clock()
        logger.info("Completed %s (%ss)", completed.value, self._total)

        self._play_alert()
        next_mode = self._record_completion(completed)
        self._emit_counters()
        self.session_completed.emit(completed)
        self._advance_to(next_mode)

    def _record_completion(self, completed: SessionMode) -> SessionMode:
        """Update counters for *completed* and return the mode that follows."""
        c = self._counters
        if completed == SessionMode.FOCUS:
            c.focus_streak += 1
            c.focus_completed += 1
            c.last_session_was_focus = True
            if self._on_long_break_cadence():
                c.unused_long_break_credits += 1
                return SessionMode.LONG_BREAK
            return SessionMode.SHORT_BREAK

        if completed == SessionMode.SHORT_BREAK:
            c.short_break_completed += 1
        else:
            c.long_break_completed += 1
            # A long break taken on cadence settles the credit granted for it.
            if not self._long_break_prepaid:
                c.unused_long_break_credits = max(
                    0, c.unused_long_break_credits - 1,
                )
        c.last_session_was_focus = False
        return SessionMode.FOCUS

    def _advance_to(self, mode: SessionMode) -> None:
        """Apply *mode* with its full duration and go IDLE.

        Bypasses the IDLE-only and eligibility guards; only the engine
        itself calls this.
        """
        self._watchdog.cancel()
        self._phase = RunPhase.IDLE
        self._sync_clock()
        self._mode = mode
        self._total = self._durations[mode]
        self._remaining = self._total
        self._long_break_prepaid = False
        self.mode_changed.emit(mode)
        self._emit_state()
        self._emit_display()

    def _pause_timed_out(self) -> None:
        logger.info(
            "Focus paused for %ss; resetting", self._watchdog.timeout,
        )
        self.reset()
        self.auto_reset_notice.emit(AUTO_RESET_NOTICE)

    def _play_alert(self) -> None:
        if self._notifier is None:
            return
        try:
            self._notifier.play_alert_sound()
        except Exception:
            logger.warning("Alert sound failed", exc_info=True)

    def _sync_clock(self) -> None:
        """Arm the clock only while something needs per-second ticks."""
        needs_ticks = self._phase == RunPhase.RUNNING or (
            self._phase == RunPhase.PAUSED and self._watchdog.active
        )
        if needs_ticks:
            self._clock.arm()
        else:
            self._clock.disarm()

    # ── emitters ──────────────────────────────────────────────────────

    def _emit_state(self) -> None:
        self.state_changed.emit(self.snapshot())

    def _emit_display(self) -> None:
        snap = self.snapshot()
        self.display_updated.emit(snap.minutes, snap.seconds, snap.progress)

    def _emit_counters(self) -> None:
        self.counters_changed.emit(self._counters.copy())
