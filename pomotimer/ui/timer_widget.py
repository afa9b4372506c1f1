"""Main timer card.

Layout (top → bottom):
    - Mode buttons (Focus / Short Break / Long Break)
    - ProgressRing (large, centred)
    - Reset + Start/Pause/Resume buttons
    - Completed-session counters
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QFrame, QSizePolicy,
)

from ..timer.commands import Command, SessionController
from ..timer.state import (
    MODE_LABELS, RunPhase, SessionCounters, SessionMode, TimerSnapshot,
)
from .progress_ring import ProgressRing
from .styles import ring_key


START_LABELS: dict[RunPhase, str] = {
    RunPhase.IDLE:    "Start",
    RunPhase.RUNNING: "Pause",
    RunPhase.PAUSED:  "Resume",
}


class TimerWidget(QWidget):
    """Countdown display and controls.  Talks to the engine only through
    ``SessionController`` commands and engine signals."""

    def __init__(
        self, controller: SessionController, parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._engine = controller.engine
        self._build_ui()
        self._connect_signals()

        snap = self._engine.snapshot()
        self._on_display_updated(snap.minutes, snap.seconds, snap.progress)
        self._on_mode_changed(snap.mode)
        self._on_state_changed(snap)
        self._on_counters_changed(self._engine.counters)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(24, 20, 24, 24)
        layout.setSpacing(0)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        # ── mode buttons ─────────────────────────────────────────────
        mode_row = QHBoxLayout()
        mode_row.setSpacing(8)
        mode_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._mode_buttons: dict[SessionMode, QPushButton] = {}
        for mode in SessionMode:
            btn = QPushButton(MODE_LABELS[mode], card)
            btn.setObjectName("modeButton")
            btn.setCheckable(True)
            btn.clicked.connect(lambda _=False, m=mode: self._on_mode_clicked(m))
            self._mode_buttons[mode] = btn
            mode_row.addWidget(btn)
        layout.addLayout(mode_row)

        layout.addSpacing(12)

        # ── progress ring ────────────────────────────────────────────
        ring_row = QHBoxLayout()
        ring_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._ring = ProgressRing(card)
        self._ring.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self._ring.setFixedSize(300, 300)
        ring_row.addWidget(self._ring)
        layout.addLayout(ring_row)

        layout.addSpacing(12)

        # ── main controls ────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._reset_btn = QPushButton("Reset", card)
        self._reset_btn.setObjectName("dangerButton")

        self._start_btn = QPushButton("Start", card)
        self._start_btn.setObjectName("primaryButton")

        btn_row.addWidget(self._reset_btn)
        btn_row.addWidget(self._start_btn)
        layout.addLayout(btn_row)

        layout.addSpacing(16)

        # ── counters ─────────────────────────────────────────────────
        counter_row = QHBoxLayout()
        counter_row.setSpacing(16)
        counter_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._focus_count = QLabel(card)
        self._short_count = QLabel(card)
        self._long_count = QLabel(card)
        for lbl in (self._focus_count, self._short_count, self._long_count):
            lbl.setObjectName("counterLabel")
            counter_row.addWidget(lbl)
        layout.addLayout(counter_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_btn.clicked.connect(
            lambda: self._controller.submit(Command.toggle())
        )
        self._reset_btn.clicked.connect(
            lambda: self._controller.submit(Command.reset())
        )

        self._engine.display_updated.connect(self._on_display_updated)
        self._engine.mode_changed.connect(self._on_mode_changed)
        self._engine.state_changed.connect(self._on_state_changed)
        self._engine.counters_changed.connect(self._on_counters_changed)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_mode_clicked(self, mode: SessionMode) -> None:
        self._controller.submit(Command.switch_mode(mode))
        # A refused switch leaves the old mode active; restore the check marks.
        self._sync_mode_buttons(self._engine.mode)

    def _on_display_updated(self, minutes: int, seconds: int, progress: float) -> None:
        self._ring.set_display(minutes, seconds, progress)

    def _on_mode_changed(self, mode: SessionMode) -> None:
        self._ring.set_label(MODE_LABELS[mode].upper())
        self._sync_mode_buttons(mode)

    def _on_state_changed(self, snapshot: TimerSnapshot) -> None:
        self._start_btn.setText(START_LABELS[snapshot.phase])
        self._reset_btn.setEnabled(snapshot.phase != RunPhase.IDLE)
        self._ring.set_color_key(ring_key(snapshot))

    def _on_counters_changed(self, counters: SessionCounters) -> None:
        self._focus_count.setText(f"Focus Sessions: {counters.focus_completed}")
        self._short_count.setText(f"Short Breaks: {counters.short_break_completed}")
        self._long_count.setText(f"Long Breaks: {counters.long_break_completed}")

    def _sync_mode_buttons(self, active: SessionMode) -> None:
        for mode, btn in self._mode_buttons.items():
            btn.setChecked(mode == active)
