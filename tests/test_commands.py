"""Tests for Command messages and the SessionController."""

import threading

import pytest

from pomotimer.settings import SETTINGS_ERROR
from pomotimer.timer.commands import Action, Command, SessionController
from pomotimer.timer.engine import (
    LONG_BREAK_REFUSED,
    SHORT_BREAK_REFUSED,
    SWITCH_WHILE_ACTIVE,
)
from pomotimer.timer.state import RunPhase, SessionMode

from helpers import SignalCollector, complete_focus_cycle, complete_session


@pytest.fixture
def controller(engine):
    return SessionController(engine)


class TestCommand:

    def test_simple_constructors(self):
        assert Command.start().action == Action.START
        assert Command.pause().action == Action.PAUSE
        assert Command.resume().action == Action.RESUME
        assert Command.toggle().action == Action.TOGGLE
        assert Command.reset().action == Action.RESET

    def test_switch_mode_carries_mode(self):
        cmd = Command.switch_mode(SessionMode.LONG_BREAK)
        assert cmd.action == Action.SWITCH_MODE
        assert cmd.mode == SessionMode.LONG_BREAK
        assert cmd.minutes is None

    def test_apply_settings_carries_raw_values(self):
        cmd = Command.apply_settings("30", 5, 15)
        assert cmd.action == Action.APPLY_SETTINGS
        assert cmd.minutes == ("30", 5, 15)

    def test_commands_are_frozen(self):
        cmd = Command.start()
        with pytest.raises(AttributeError):
            cmd.action = Action.RESET


class TestDispatch:

    def test_start_pause_resume(self, controller, engine):
        controller.submit(Command.start())
        assert engine.phase == RunPhase.RUNNING
        controller.submit(Command.pause())
        assert engine.phase == RunPhase.PAUSED
        controller.submit(Command.resume())
        assert engine.phase == RunPhase.RUNNING

    def test_toggle_and_reset(self, controller, engine):
        controller.submit(Command.toggle())
        engine.tick()
        controller.submit(Command.reset())
        assert engine.phase == RunPhase.IDLE
        assert engine.remaining_seconds == engine.total_seconds

    def test_switch_mode(self, controller, engine):
        complete_session(engine)
        controller.submit(Command.switch_mode(SessionMode.FOCUS))
        assert engine.mode == SessionMode.FOCUS

    def test_apply_settings(self, controller, engine):
        controller.submit(Command.apply_settings(30, 10, 20))
        assert engine.total_seconds == 30 * 60

    def test_engine_property(self, controller, engine):
        assert controller.engine is engine


class TestRejections:

    def test_switch_while_running(self, controller, engine):
        rejected = SignalCollector()
        engine.rejected.connect(rejected)
        controller.submit(Command.start())

        controller.submit(Command.switch_mode(SessionMode.SHORT_BREAK))

        assert rejected.items == [SWITCH_WHILE_ACTIVE]
        assert engine.phase == RunPhase.RUNNING
        assert engine.mode == SessionMode.FOCUS

    def test_short_break_refused(self, controller, engine):
        complete_focus_cycle(engine)
        rejected = SignalCollector()
        engine.rejected.connect(rejected)
        controller.submit(Command.switch_mode(SessionMode.SHORT_BREAK))
        assert rejected.items == [SHORT_BREAK_REFUSED]

    def test_long_break_refused(self, controller, engine):
        complete_session(engine)
        rejected = SignalCollector()
        engine.rejected.connect(rejected)
        controller.submit(Command.switch_mode(SessionMode.LONG_BREAK))
        assert rejected.items == [LONG_BREAK_REFUSED]

    def test_break_accepted_at_start(self, controller, engine):
        rejected = SignalCollector()
        engine.rejected.connect(rejected)
        controller.submit(Command.switch_mode(SessionMode.SHORT_BREAK))
        assert len(rejected) == 0
        assert engine.mode == SessionMode.SHORT_BREAK

    def test_invalid_settings(self, controller, engine):
        rejected = SignalCollector()
        engine.rejected.connect(rejected)
        controller.submit(Command.apply_settings(0, 5, 15))
        assert rejected.items == [SETTINGS_ERROR]
        assert engine.total_seconds == 25 * 60

    def test_accepted_command_emits_nothing(self, controller, engine):
        rejected = SignalCollector()
        engine.rejected.connect(rejected)
        controller.submit(Command.start())
        controller.submit(Command.pause())
        assert len(rejected) == 0


class TestCrossThread:

    def test_submit_from_worker_is_queued(self, qapp, controller, engine):
        worker = threading.Thread(
            target=controller.submit, args=(Command.start(),),
        )
        worker.start()
        worker.join()

        assert engine.phase == RunPhase.IDLE

        qapp.processEvents()

        assert engine.phase == RunPhase.RUNNING

    def test_queued_commands_run_in_order(self, qapp, controller, engine):
        def send():
            controller.submit(Command.start())
            controller.submit(Command.pause())
            controller.submit(Command.resume())

        worker = threading.Thread(target=send)
        worker.start()
        worker.join()
        qapp.processEvents()

        assert engine.phase == RunPhase.RUNNING
