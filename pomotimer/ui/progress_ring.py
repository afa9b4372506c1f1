"""Circular progress ring widget rendered with QPainter.

- Fills clockwise as the session progresses.
- Colour-coded by mode and phase (focus=coral, breaks=teal/purple).
- Shows ``MM : SS`` at the centre plus a mode label.
- Colour changes animate over half a second.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QRectF, QVariantAnimation, QEasingCurve
from PyQt6.QtGui import QPainter, QPen, QColor, QConicalGradient, QFont
from PyQt6.QtWidgets import QWidget

from .styles import RING_COLORS


def _lerp_color(c1: QColor, c2: QColor, t: float) -> QColor:
    """Linearly interpolate between two QColors."""
    t = max(0.0, min(1.0, t))
    return QColor(
        int(c1.red()   + (c2.red()   - c1.red())   * t),
        int(c1.green() + (c2.green() - c1.green()) * t),
        int(c1.blue()  + (c2.blue()  - c1.blue())  * t),
        int(c1.alpha() + (c2.alpha() - c1.alpha()) * t),
    )


def format_time(minutes: int, seconds: int) -> str:
    return f"{minutes:02d} : {seconds:02d}"


class ProgressRing(QWidget):
    """Custom-painted circular timer ring."""

    RING_DIAMETER = 260
    RING_THICKNESS = 14

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(self.RING_DIAMETER + 40, self.RING_DIAMETER + 40)

        self._percent: float = 0.0
        self._time_text: str = format_time(25, 0)
        self._label: str = "FOCUS"
        self._color_key: str = "idle"

        primary, secondary = RING_COLORS["idle"]
        self._primary_color = QColor(primary)
        self._secondary_color = QColor(secondary)
        self._old_primary = QColor(primary)
        self._old_secondary = QColor(secondary)
        self._target_primary = QColor(primary)
        self._target_secondary = QColor(secondary)
        self._text_color = QColor("#E2E2F0")

        self._color_anim = QVariantAnimation(self)
        self._color_anim.setDuration(500)
        self._color_anim.setStartValue(0.0)
        self._color_anim.setEndValue(1.0)
        self._color_anim.setEasingCurve(QEasingCurve.Type.InOutQuad)
        self._color_anim.valueChanged.connect(self._on_color_anim)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC API
    # ══════════════════════════════════════════════════════════════════

    @property
    def percent(self) -> float:
        return self._percent

    @property
    def time_text(self) -> str:
        return self._time_text

    @property
    def label(self) -> str:
        return self._label

    @property
    def color_key(self) -> str:
        return self._color_key

    def set_display(self, minutes: int, seconds: int, progress: float) -> None:
        self._time_text = format_time(minutes, seconds)
        self._percent = max(0.0, min(1.0, progress))
        self.update()

    def set_label(self, text: str) -> None:
        self._label = text
        self.update()

    def set_color_key(self, key: str) -> None:
        """Fade to the gradient registered under *key* in ``RING_COLORS``."""
        if key == self._color_key or key not in RING_COLORS:
            return
        self._color_key = key
        primary_hex, secondary_hex = RING_COLORS[key]
        self._old_primary = QColor(self._primary_color)
        self._old_secondary = QColor(self._secondary_color)
        self._target_primary = QColor(primary_hex)
        self._target_secondary = QColor(secondary_hex)
        self._color_anim.stop()
        self._color_anim.start()

    # ══════════════════════════════════════════════════════════════════
    #  ANIMATION / PAINTING
    # ══════════════════════════════════════════════════════════════════

    def _on_color_anim(self, value: object) -> None:
        t = float(value)  # type: ignore[arg-type]
        self._primary_color = _lerp_color(self._old_primary, self._target_primary, t)
        self._secondary_color = _lerp_color(self._old_secondary, self._target_secondary, t)
        self.update()

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        w = self.width()
        h = self.height()
        cx, cy = w / 2, h / 2
        diameter = max(100, min(w, h) - 40)
        radius = diameter / 2
        thickness = self.RING_THICKNESS
        ring_rect = QRectF(cx - radius, cy - radius, diameter, diameter)

        # ── background track ─────────────────────────────────────────
        track_color = QColor(self._primary_color)
        track_color.setAlpha(35)
        track_pen = QPen(track_color, thickness, Qt.PenStyle.SolidLine)
        track_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        painter.setPen(track_pen)
        painter.drawEllipse(ring_rect)

        # ── progress arc ─────────────────────────────────────────────
        if self._percent > 0.001:
            gradient = QConicalGradient(cx, cy, 90)
            gradient.setColorAt(0.0, self._primary_color)
            gradient.setColorAt(0.5, self._secondary_color)
            gradient.setColorAt(1.0, self._primary_color)
            arc_pen = QPen(gradient, thickness, Qt.PenStyle.SolidLine)
            arc_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            painter.setPen(arc_pen)
            # Qt arcs: start at 12 o'clock (90*16), go clockwise (negative)
            painter.drawArc(ring_rect, 90 * 16, -int(self._percent * 360 * 16))

        # ── centre text ──────────────────────────────────────────────
        time_font = QFont()
        time_font.setPixelSize(46)
        time_font.setWeight(QFont.Weight.Bold)
        painter.setFont(time_font)
        painter.setPen(self._text_color)
        time_rect = QRectF(ring_rect)
        time_rect.moveTop(time_rect.top() - 12)
        painter.drawText(time_rect, Qt.AlignmentFlag.AlignCenter, self._time_text)

        label_font = QFont()
        label_font.setPixelSize(13)
        label_font.setWeight(QFont.Weight.DemiBold)
        label_font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, 3)
        painter.setFont(label_font)
        label_color = QColor(self._primary_color)
        label_color.setAlpha(200)
        painter.setPen(label_color)
        label_rect = QRectF(ring_rect)
        label_rect.moveTop(label_rect.top() + 34)
        painter.drawText(label_rect, Qt.AlignmentFlag.AlignCenter, self._label)

        painter.end()
