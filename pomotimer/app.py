"""Main application window for PomoTimer."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QStatusBar, QPushButton,
)

from .audio.notifier import Notifier
from .audio.sounds import SoundManager
from .settings import Settings
from .timer.commands import Command, SessionController
from .timer.engine import SessionEngine
from .timer.state import MODE_LABELS, RunPhase, SessionMode, TimerSnapshot
from .ui.styles import build_stylesheet
from .ui.timer_widget import TimerWidget


logger = logging.getLogger(__name__)

STATUS_MESSAGES: dict[RunPhase, str] = {
    RunPhase.IDLE:    "Ready",
    RunPhase.RUNNING: "Running",
    RunPhase.PAUSED:  "Paused",
}


class PomoTimerApp(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        sound_manager: SoundManager | None = None,
        modal_messages: bool = True,
    ) -> None:
        super().__init__()
        self._settings = settings or Settings()
        self.setWindowTitle("Pomodoro Timer")
        self.setMinimumSize(380, 520)
        self.resize(self._settings.window_width, self._settings.window_height)

        # ── sound + notifier ──────────────────────────────────────────
        self._sound_manager = sound_manager or SoundManager(parent=self)
        self._sound_manager.set_volume(self._settings.sound_volume)
        self._sound_manager.set_enabled(self._settings.sound_enabled)
        self._notifier = Notifier(
            self._sound_manager, self,
            dialog_parent=self, modal=modal_messages,
        )

        # ── engine + command queue ────────────────────────────────────
        self._engine = SessionEngine(
            self, settings=self._settings, notifier=self._notifier,
        )
        self._controller = SessionController(self._engine, self)

        self.setStyleSheet(build_stylesheet())

        # ── central widget ────────────────────────────────────────────
        central = QWidget()
        self.setCentralWidget(central)
        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(16, 12, 16, 12)
        root_layout.setSpacing(8)

        top_row = QHBoxLayout()
        title = QLabel("Pomodoro Timer", central)
        title.setStyleSheet("font-size: 17px; font-weight: 700; letter-spacing: 1px;")
        self._gear_btn = QPushButton("⚙", central)
        self._gear_btn.setObjectName("secondaryButton")
        self._gear_btn.setFixedSize(32, 32)
        self._gear_btn.setStyleSheet("font-size: 18px; padding: 0; border-radius: 6px;")
        self._gear_btn.setToolTip("Settings")
        self._gear_btn.clicked.connect(self._open_settings)
        top_row.addWidget(title)
        top_row.addStretch()
        top_row.addWidget(self._gear_btn)
        root_layout.addLayout(top_row)

        self._timer_widget = TimerWidget(self._controller, central)
        root_layout.addWidget(self._timer_widget)
        root_layout.addStretch()

        self._status_bar = QStatusBar(self)
        self.setStatusBar(self._status_bar)
        self._status_bar.showMessage("Ready to focus!")

        # ── wire signals ──────────────────────────────────────────────
        self._engine.state_changed.connect(self._on_state_changed)
        self._engine.session_completed.connect(self._on_session_completed)
        self._engine.settings_applied.connect(self._on_settings_applied)
        self._engine.rejected.connect(self._notifier.show_message)
        self._engine.auto_reset_notice.connect(self._notifier.show_message)

    # ══════════════════════════════════════════════════════════════════
    #  ACCESSORS
    # ══════════════════════════════════════════════════════════════════

    @property
    def engine(self) -> SessionEngine:
        return self._engine

    @property
    def controller(self) -> SessionController:
        return self._controller

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    # ══════════════════════════════════════════════════════════════════
    #  ENGINE SIGNALS
    # ══════════════════════════════════════════════════════════════════

    def _on_state_changed(self, snapshot: TimerSnapshot) -> None:
        mode = MODE_LABELS[snapshot.mode]
        self._status_bar.showMessage(f"{mode}: {STATUS_MESSAGES[snapshot.phase]}")

    def _on_session_completed(self, mode: SessionMode) -> None:
        if mode == SessionMode.FOCUS:
            self._status_bar.showMessage("Focus session complete, take a break!")
        else:
            self._status_bar.showMessage("Break over. Ready to focus?")

    def _on_settings_applied(self, focus: int, short: int, long_: int) -> None:
        self._settings.focus_duration = focus
        self._settings.short_break_duration = short
        self._settings.long_break_duration = long_

    # ══════════════════════════════════════════════════════════════════
    #  SETTINGS
    # ══════════════════════════════════════════════════════════════════

    def _open_settings(self) -> None:
        """Open the settings dialog and apply the chosen durations."""
        from .ui.settings_dialog import SettingsDialog

        def _preview_click():
            self._sound_manager.set_volume(self._settings.sound_volume)
            self._sound_manager.set_enabled(self._settings.sound_enabled)
            self._sound_manager.play("click")

        dlg = SettingsDialog(
            self._settings,
            parent=self,
            sound_preview_callback=_preview_click,
        )
        accepted = dlg.exec()

        self._sound_manager.set_volume(self._settings.sound_volume)
        self._sound_manager.set_enabled(self._settings.sound_enabled)
        if accepted:
            self._controller.submit(Command.apply_settings(*dlg.duration_minutes()))

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD
    # ══════════════════════════════════════════════════════════════════

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Space starts/pauses/resumes, Escape resets."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._controller.submit(Command.toggle())
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            if self._engine.phase != RunPhase.IDLE:
                self._controller.submit(Command.reset())
            event.accept()
            return
        super().keyPressEvent(event)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._controller.submit(Command.reset())
        logger.info("Window closed")
        event.accept()
