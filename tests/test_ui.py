"""Widget tests: settings dialog, timer widget, main window, clock."""

from __future__ import annotations

import pytest
from PyQt6.QtCore import Qt
from PyQt6.QtTest import QTest

from pomotimer.app import PomoTimerApp
from pomotimer.audio.sounds import SoundManager
from pomotimer.settings import Settings
from pomotimer.timer.clock import QtClock
from pomotimer.timer.commands import Command, SessionController
from pomotimer.timer.engine import SHORT_BREAK_REFUSED, SWITCH_WHILE_ACTIVE
from pomotimer.timer.state import RunPhase, SessionMode
from pomotimer.ui.progress_ring import format_time
from pomotimer.ui.settings_dialog import SettingsDialog
from pomotimer.ui.styles import ring_key
from pomotimer.ui.timer_widget import TimerWidget

from helpers import SignalCollector, complete_focus_cycle, complete_session


# ═══════════════════════════════════════════════════════════════════════
#  SETTINGS DIALOG
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestSettingsDialog:
    def test_create(self):
        dlg = SettingsDialog(Settings())
        assert dlg.windowTitle() == "Settings"

    def test_reflects_settings(self):
        s = Settings(focus_duration=30 * 60, long_break_duration=20 * 60, sound_volume=50)
        dlg = SettingsDialog(s)
        assert dlg.duration_minutes() == (30, 5, 20)
        assert dlg._vol_slider.value() == 50

    def test_durations_not_written_back(self):
        s = Settings()
        dlg = SettingsDialog(s)
        dlg._focus_spin.setValue(45)
        assert dlg.duration_minutes()[0] == 45
        assert s.focus_duration == 25 * 60

    def test_spin_range(self):
        dlg = SettingsDialog(Settings())
        assert dlg._focus_spin.minimum() == 1
        assert dlg._focus_spin.maximum() == 99

    def test_volume_slider_updates_label(self):
        s = Settings()
        dlg = SettingsDialog(s)
        dlg._vol_slider.setValue(85)
        assert dlg._vol_label.text() == "85%"
        assert s.sound_volume == 85

    def test_sound_checkbox(self):
        s = Settings()
        dlg = SettingsDialog(s)
        dlg._sound_cb.setChecked(False)
        assert s.sound_enabled is False

    def test_sound_preview_callback(self):
        calls: list[bool] = []
        dlg = SettingsDialog(Settings(), sound_preview_callback=lambda: calls.append(True))
        dlg._on_volume_released()
        assert len(calls) == 1


# ═══════════════════════════════════════════════════════════════════════
#  TIMER WIDGET
# ═══════════════════════════════════════════════════════════════════════


@pytest.fixture
def widget(engine):
    return TimerWidget(SessionController(engine))


class TestTimerWidget:
    def test_initial_display(self, widget):
        assert widget._ring.time_text == "25 : 00"
        assert widget._ring.label == "FOCUS"
        assert widget._start_btn.text() == "Start"
        assert widget._reset_btn.isEnabled() is False
        assert widget._mode_buttons[SessionMode.FOCUS].isChecked()

    def test_start_button_toggles(self, widget, engine):
        widget._start_btn.click()
        assert engine.phase == RunPhase.RUNNING
        assert widget._start_btn.text() == "Pause"
        assert widget._reset_btn.isEnabled() is True

        widget._start_btn.click()
        assert engine.phase == RunPhase.PAUSED
        assert widget._start_btn.text() == "Resume"

    def test_reset_button(self, widget, engine):
        widget._start_btn.click()
        engine.tick()
        widget._reset_btn.click()
        assert engine.phase == RunPhase.IDLE
        assert widget._ring.time_text == "25 : 00"

    def test_tick_updates_ring(self, widget, engine):
        widget._start_btn.click()
        engine.tick()
        assert widget._ring.time_text == "24 : 59"
        assert widget._ring.percent > 0

    def test_refused_mode_click_restores_buttons(self, widget, engine):
        complete_focus_cycle(engine)
        rejected = SignalCollector()
        engine.rejected.connect(rejected)

        widget._mode_buttons[SessionMode.SHORT_BREAK].click()

        assert rejected.items == [SHORT_BREAK_REFUSED]
        assert widget._mode_buttons[SessionMode.FOCUS].isChecked()
        assert not widget._mode_buttons[SessionMode.SHORT_BREAK].isChecked()

    def test_completion_updates_labels(self, widget, engine):
        complete_session(engine)
        assert widget._focus_count.text() == "Focus Sessions: 1"
        assert widget._short_count.text() == "Short Breaks: 0"
        assert widget._ring.label == "SHORT BREAK"
        assert widget._mode_buttons[SessionMode.SHORT_BREAK].isChecked()


class TestRingHelpers:
    def test_format_time(self):
        assert format_time(5, 7) == "05 : 07"

    def test_ring_key(self, engine):
        assert ring_key(engine.snapshot()) == "idle"
        engine.start()
        assert ring_key(engine.snapshot()) == "focus"
        engine.pause()
        assert ring_key(engine.snapshot()) == "paused"


# ═══════════════════════════════════════════════════════════════════════
#  MAIN WINDOW
# ═══════════════════════════════════════════════════════════════════════


@pytest.fixture
def window(qapp, tmp_path):
    sounds = SoundManager(sounds_dir=tmp_path)
    win = PomoTimerApp(Settings(), sound_manager=sounds, modal_messages=False)
    yield win
    win.engine.reset()


class TestMainWindow:
    def test_title(self, window):
        assert window.windowTitle() == "Pomodoro Timer"

    def test_rejection_reaches_notifier(self, window):
        shown = SignalCollector()
        window.notifier.message_shown.connect(shown)

        window.controller.submit(Command.start())
        window.controller.submit(Command.switch_mode(SessionMode.LONG_BREAK))

        assert shown.items == [SWITCH_WHILE_ACTIVE]

    def test_auto_reset_reaches_notifier(self, window):
        shown = SignalCollector()
        window.notifier.message_shown.connect(shown)
        window.engine.set_pause_timeout(2)

        window.controller.submit(Command.start())
        window.controller.submit(Command.pause())
        window.engine.tick()
        window.engine.tick()

        assert len(shown) == 1
        assert window.engine.phase == RunPhase.IDLE

    def test_applied_settings_are_stored(self, window):
        window.controller.submit(Command.apply_settings(30, 10, 20))
        assert window._settings.focus_duration == 30 * 60
        assert window._settings.short_break_duration == 10 * 60
        assert window._settings.long_break_duration == 20 * 60

    def test_status_bar_follows_state(self, window):
        window.controller.submit(Command.start())
        assert window.statusBar().currentMessage() == "Focus: Running"

    def test_space_toggles(self, window):
        QTest.keyClick(window, Qt.Key.Key_Space)
        assert window.engine.phase == RunPhase.RUNNING
        QTest.keyClick(window, Qt.Key.Key_Space)
        assert window.engine.phase == RunPhase.PAUSED

    def test_escape_resets(self, window):
        window.controller.submit(Command.start())
        QTest.keyClick(window, Qt.Key.Key_Escape)
        assert window.engine.phase == RunPhase.IDLE


# ═══════════════════════════════════════════════════════════════════════
#  QT CLOCK
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestQtClock:
    def test_arm_and_disarm(self):
        clock = QtClock()
        assert clock.is_armed is False
        clock.arm()
        clock.arm()
        assert clock.is_armed is True
        clock.disarm()
        clock.disarm()
        assert clock.is_armed is False

    def test_fires_callbacks(self, qapp):
        clock = QtClock(interval_ms=10)
        calls: list[int] = []
        clock.on_tick(lambda: calls.append(1))
        clock.arm()
        QTest.qWait(100)
        clock.disarm()
        assert len(calls) >= 1

    def test_engine_default_clock_armed_while_running(self):
        from pomotimer.timer.engine import SessionEngine

        eng = SessionEngine()
        eng.start()
        assert eng._clock.is_armed
        eng.pause()
        assert eng._clock.is_armed  # watchdog counting
        eng.reset()
        assert not eng._clock.is_armed
