"""QSS stylesheet, state colors and labels for Pomobar."""

from __future__ import annotations

from ..timer.model import TimerState

# ── state colors ─────────────────────────────────────────────────────────
#    The compact strip only distinguishes work / break / idle; the panel
#    dot tells the two break kinds apart.

WORK_COLOR = "#FF453A"
BREAK_COLOR = "#30D158"
LONG_BREAK_COLOR = "#0A84FF"
IDLE_COLOR = "#8E8E93"

COMPACT_ICON_COLORS: dict[TimerState, str] = {
    TimerState.IDLE:        IDLE_COLOR,
    TimerState.WORK:        WORK_COLOR,
    TimerState.SHORT_BREAK: BREAK_COLOR,
    TimerState.LONG_BREAK:  BREAK_COLOR,
}

STATUS_DOT_COLORS: dict[TimerState, str] = {
    TimerState.IDLE:        IDLE_COLOR,
    TimerState.WORK:        WORK_COLOR,
    TimerState.SHORT_BREAK: BREAK_COLOR,
    TimerState.LONG_BREAK:  LONG_BREAK_COLOR,
}

STATE_LABELS: dict[TimerState, str] = {
    TimerState.IDLE:        "Ready",
    TimerState.WORK:        "Working",
    TimerState.SHORT_BREAK: "Short Break",
    TimerState.LONG_BREAK:  "Long Break",
}

# ── palette ──────────────────────────────────────────────────────────────

PALETTE: dict[str, str] = {
    "bg":           "#000000",
    "panel":        "#141414",
    "surface":      "#1F1F1F",
    "accent":       "#0A84FF",
    "text":         "#FFFFFF",
    "text_muted":   "#8E8E93",
    "border":       "rgba(255, 255, 255, 0.1)",
}


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or PALETTE
    return f"""
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "SF Pro", "Helvetica Neue", Arial;
        font-size: 13px;
    }}

    QFrame#panel {{
        border: 2px dashed {p['border']};
        border-radius: 16px;
    }}

    QFrame#settingsCard {{
        background-color: {p['panel']};
        border-radius: 12px;
    }}

    QLabel#timeLabel {{
        font-size: 48px;
        font-weight: 600;
    }}

    QLabel#counterLabel {{
        color: {p['text_muted']};
    }}

    QPushButton {{
        background-color: {p['surface']};
        color: {p['text']};
        border: 1px solid {p['border']};
        border-radius: 8px;
        padding: 8px 16px;
        min-width: 100px;
    }}

    QPushButton#primaryButton {{
        background-color: {p['accent']};
        border: none;
        font-weight: 600;
    }}

    QPushButton#plainButton {{
        background-color: transparent;
        border: none;
        color: {p['text_muted']};
        min-width: 0px;
    }}

    QSpinBox {{
        background-color: {p['surface']};
        border: 1px solid {p['border']};
        border-radius: 6px;
        padding: 2px 6px;
    }}
    """
