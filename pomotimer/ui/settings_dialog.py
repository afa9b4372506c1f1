"""Settings dialog for PomoTimer.

A modal dialog for the three durations plus sound preferences.  Sound
changes update the ``Settings`` object immediately; durations are only
read back by the caller after *Apply*, so they can be validated by the
engine all at once.
"""

from __future__ import annotations

from typing import Callable

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLabel, QSpinBox, QSlider, QCheckBox, QPushButton,
    QFrame, QWidget,
)

from ..settings import MAX_MINUTES, MIN_MINUTES, Settings


class SettingsDialog(QDialog):
    """Modal dialog for durations and sound."""

    def __init__(
        self,
        settings: Settings,
        parent: QWidget | None = None,
        *,
        sound_preview_callback: Callable[[], None] | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setMinimumWidth(380)
        self.setModal(True)

        self._settings = settings
        self._sound_preview = sound_preview_callback

        self._build_ui()
        self._populate()

    # ══════════════════════════════════════════════════════════════════
    #  BUILD UI
    # ══════════════════════════════════════════════════════════════════

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 20, 24, 20)
        root.setSpacing(16)

        # ── Timer section ────────────────────────────────────────────
        root.addWidget(self._section_label("Durations (minutes)"))
        timer_form = QFormLayout()
        timer_form.setHorizontalSpacing(20)
        timer_form.setVerticalSpacing(10)

        self._focus_spin = self._minutes_spin()
        timer_form.addRow("Focus duration:", self._focus_spin)

        self._short_spin = self._minutes_spin()
        timer_form.addRow("Short break duration:", self._short_spin)

        self._long_spin = self._minutes_spin()
        timer_form.addRow("Long break duration:", self._long_spin)

        root.addLayout(timer_form)
        root.addWidget(self._separator())

        # ── Sound section ────────────────────────────────────────────
        root.addWidget(self._section_label("Sound"))
        snd_form = QFormLayout()
        snd_form.setHorizontalSpacing(20)
        snd_form.setVerticalSpacing(10)

        self._sound_cb = QCheckBox("Play alert when a session ends")
        self._sound_cb.toggled.connect(self._on_sound_toggled)
        snd_form.addRow("", self._sound_cb)

        vol_row = QHBoxLayout()
        vol_row.setSpacing(10)
        self._vol_slider = QSlider(Qt.Orientation.Horizontal)
        self._vol_slider.setRange(0, 100)
        self._vol_slider.setTickInterval(10)
        self._vol_label = QLabel("70%")
        self._vol_label.setMinimumWidth(36)
        self._vol_slider.valueChanged.connect(self._on_volume_changed)
        self._vol_slider.sliderReleased.connect(self._on_volume_released)
        vol_row.addWidget(self._vol_slider)
        vol_row.addWidget(self._vol_label)

        vol_wrapper = QWidget()
        vol_wrapper.setLayout(vol_row)
        snd_form.addRow("Volume:", vol_wrapper)

        root.addLayout(snd_form)

        # ── buttons ──────────────────────────────────────────────────
        root.addStretch()
        btn_row = QHBoxLayout()
        btn_row.addStretch()
        cancel_btn = QPushButton("Cancel")
        cancel_btn.setObjectName("secondaryButton")
        cancel_btn.clicked.connect(self.reject)
        apply_btn = QPushButton("Apply")
        apply_btn.setObjectName("primaryButton")
        apply_btn.setDefault(True)
        apply_btn.clicked.connect(self.accept)
        btn_row.addWidget(cancel_btn)
        btn_row.addWidget(apply_btn)
        root.addLayout(btn_row)

    # ── helpers ──────────────────────────────────────────────────────

    @staticmethod
    def _minutes_spin() -> QSpinBox:
        spin = QSpinBox()
        spin.setRange(MIN_MINUTES, MAX_MINUTES)
        spin.setSuffix(" min")
        return spin

    @staticmethod
    def _section_label(text: str) -> QLabel:
        lbl = QLabel(text)
        lbl.setStyleSheet("font-size: 15px; font-weight: 700; margin-top: 4px;")
        return lbl

    @staticmethod
    def _separator() -> QFrame:
        line = QFrame()
        line.setFrameShape(QFrame.Shape.HLine)
        line.setFixedHeight(1)
        line.setStyleSheet("background-color: rgba(255,255,255,0.08);")
        return line

    # ══════════════════════════════════════════════════════════════════
    #  POPULATE / CHANGE HANDLERS
    # ══════════════════════════════════════════════════════════════════

    def _populate(self) -> None:
        focus, short, long_ = self._settings.minutes()
        self._focus_spin.setValue(focus)
        self._short_spin.setValue(short)
        self._long_spin.setValue(long_)
        self._sound_cb.setChecked(self._settings.sound_enabled)
        self._vol_slider.setValue(self._settings.sound_volume)
        self._vol_label.setText(f"{self._settings.sound_volume}%")

    def _on_sound_toggled(self, checked: bool) -> None:
        self._settings.sound_enabled = checked

    def _on_volume_changed(self, value: int) -> None:
        self._vol_label.setText(f"{value}%")
        self._settings.sound_volume = value

    def _on_volume_released(self) -> None:
        """Play a click when the user releases the volume slider."""
        if self._sound_preview:
            self._sound_preview()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    def duration_minutes(self) -> tuple[int, int, int]:
        """The (focus, short, long) minutes currently entered."""
        return (
            self._focus_spin.value(),
            self._short_spin.value(),
            self._long_spin.value(),
        )

    @property
    def settings(self) -> Settings:
        return self._settings
