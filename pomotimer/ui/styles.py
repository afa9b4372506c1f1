"""QSS stylesheet and ring colours for PomoTimer."""

from __future__ import annotations

from ..timer.state import RunPhase, TimerSnapshot

# ── ring gradient pairs, keyed by what the ring is showing ─────────────

RING_COLORS: dict[str, tuple[str, str]] = {
    "focus":       ("#FF6B6B", "#FFA07A"),   # warm coral
    "short_break": ("#4ECDC4", "#44B09E"),   # cool teal
    "long_break":  ("#A18CD1", "#7B68EE"),   # calm purple
    "paused":      ("#6C7086", "#585B70"),   # desaturated gray
    "idle":        ("#4A4A5E", "#3A3A4E"),   # neutral dim
}

PALETTE: dict[str, str] = {
    "bg":           "#1A1A2E",
    "bg_secondary": "#232340",
    "surface":      "#2A2A4A",
    "accent":       "#CBA6F7",
    "accent2":      "#89B4FA",
    "text":         "#E2E2F0",
    "text_muted":   "#7A7A9A",
    "danger":       "#F38BA8",
    "border":       "#313154",
}


def ring_key(snapshot: TimerSnapshot) -> str:
    """Colour key for *snapshot*: the mode while running, else the phase."""
    if snapshot.phase == RunPhase.RUNNING:
        return snapshot.mode.value
    return snapshot.phase.value


def build_stylesheet(palette: dict[str, str] = PALETTE) -> str:
    p = palette
    return f"""
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    QPushButton {{
        background-color: {p['bg_secondary']};
        color: {p['text']};
        border: 1px solid {p['border']};
        border-radius: 10px;
        padding: 10px 24px;
        font-size: 14px;
        font-weight: 600;
    }}

    QPushButton:hover {{
        background-color: {p['surface']};
        border-color: {p['accent']};
    }}

    QPushButton:disabled {{
        color: {p['text_muted']};
        border-color: {p['bg_secondary']};
    }}

    QPushButton#primaryButton {{
        background-color: {p['accent']};
        color: {p['bg']};
        border: none;
        font-size: 17px;
        padding: 14px 40px;
        border-radius: 12px;
        font-weight: 700;
    }}

    QPushButton#primaryButton:hover {{
        background-color: {p['accent2']};
    }}

    QPushButton#secondaryButton {{
        background-color: transparent;
        color: {p['text_muted']};
        border: 1px solid {p['border']};
        font-size: 13px;
        padding: 8px 16px;
        border-radius: 8px;
    }}

    QPushButton#secondaryButton:hover {{
        color: {p['text']};
        border-color: {p['text_muted']};
    }}

    QPushButton#modeButton {{
        font-size: 13px;
        padding: 8px 14px;
        border-radius: 8px;
    }}

    QPushButton#modeButton:checked {{
        border-color: {p['accent']};
        color: {p['accent']};
    }}

    QPushButton#dangerButton {{
        background-color: transparent;
        color: {p['danger']};
        border: 1px solid {p['border']};
        font-size: 13px;
        padding: 8px 16px;
        border-radius: 8px;
    }}

    QFrame#card {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 12px;
    }}

    QLabel#counterLabel {{
        font-size: 12px;
        color: {p['text_muted']};
    }}

    QStatusBar {{
        background-color: {p['bg']};
        color: {p['text_muted']};
        font-size: 12px;
        border-top: 1px solid {p['border']};
    }}
    """
