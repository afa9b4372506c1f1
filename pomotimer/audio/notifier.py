"""Alert sounds and user-facing messages for the session engine."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QTimer, pyqtSignal
from PyQt6.QtWidgets import QMessageBox, QWidget

from .sounds import SoundManager


logger = logging.getLogger(__name__)

MESSAGE_TITLE = "Pomodoro Timer"


class Notifier(QObject):
    """Plays the end-of-session alert and shows informational messages.

    ``show_message`` defers the modal box to the next event-loop turn so
    it is never opened from inside a clock tick or a command handler.
    Pass ``modal=False`` to only emit ``message_shown`` (headless use and
    tests).
    """

    message_shown = pyqtSignal(str)

    def __init__(
        self,
        sound_manager: SoundManager | None = None,
        parent: QObject | None = None,
        *,
        dialog_parent: QWidget | None = None,
        modal: bool = True,
    ) -> None:
        super().__init__(parent)
        self._sounds = sound_manager
        self._dialog_parent = dialog_parent
        self._modal = modal

    def play_alert_sound(self) -> None:
        """Best effort; a failure is logged and never raised."""
        if self._sounds is None:
            return
        try:
            if not self._sounds.play("alert"):
                logger.debug("Alert sound skipped (disabled or not loaded)")
        except Exception:
            logger.warning("Failed to play alert sound", exc_info=True)

    def show_message(self, text: str) -> None:
        logger.info("Notice: %s", text)
        if self._sounds is not None:
            self._sounds.play("notice")
        if self._modal:
            QTimer.singleShot(0, lambda: self._show_box(text))
        self.message_shown.emit(text)

    def _show_box(self, text: str) -> None:
        box = QMessageBox(self._dialog_parent)
        box.setIcon(QMessageBox.Icon.Information)
        box.setWindowTitle(MESSAGE_TITLE)
        box.setText(text)
        box.setStandardButtons(QMessageBox.StandardButton.Ok)
        box.exec()
