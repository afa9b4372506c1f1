"""Shared pytest fixtures for PomoTimer tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from pomotimer.settings import Settings
from pomotimer.timer.engine import SessionEngine

from helpers import ManualClock, RecordingNotifier


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def engine(qapp, notifier, clock):
    """Fresh SessionEngine with default durations and a manual clock."""
    return SessionEngine(settings=Settings(), notifier=notifier, clock=clock)


@pytest.fixture
def short_engine(qapp, notifier, clock):
    """SessionEngine with 1-minute durations for quick full countdowns."""
    settings = Settings(
        focus_duration=60, short_break_duration=60, long_break_duration=60,
    )
    return SessionEngine(settings=settings, notifier=notifier, clock=clock)
