"""Host window for Pomobar: notch strip, expanded panel and tray icon."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QIcon, QImage, QPainter, QColor, QPen, QPixmap
from PyQt6.QtWidgets import (
    QApplication, QWidget, QVBoxLayout, QStackedWidget, QSystemTrayIcon, QMenu,
)

from .timer.formatting import format_time
from .timer.model import PomodoroModel, TimerState
from .ui.compact_view import CompactView
from .ui.expanded_view import ExpandedView
from .ui.metrics import NotchMetrics
from .ui.styles import STATE_LABELS, build_stylesheet

logger = logging.getLogger(__name__)

EXPANDED_SIZE = (360, 420)


# ── tray‑icon image generation ────────────────────────────────────────────


def _make_tray_icon(state: TimerState) -> QIcon:
    """Generate a monochrome template icon for the macOS menu bar.

    - IDLE:   thin circle outline
    - WORK:   filled circle
    - BREAK:  thin circle with small dot in centre
    """
    size = 64  # draw at 2× for Retina
    img = QImage(size, size, QImage.Format.Format_ARGB32_Premultiplied)
    img.fill(Qt.GlobalColor.transparent)
    p = QPainter(img)
    p.setRenderHint(QPainter.RenderHint.Antialiasing)
    colour = QColor(0, 0, 0, 220)  # template image: macOS tints automatically
    cx, cy, r = size // 2, size // 2, size // 2 - 4

    if state == TimerState.WORK:
        p.setPen(Qt.PenStyle.NoPen)
        p.setBrush(colour)
        p.drawEllipse(cx - r, cy - r, r * 2, r * 2)
    else:
        p.setPen(QPen(colour, 4))
        p.setBrush(Qt.BrushStyle.NoBrush)
        p.drawEllipse(cx - r, cy - r, r * 2, r * 2)
        if state.is_break:
            p.setPen(Qt.PenStyle.NoPen)
            p.setBrush(colour)
            dot_r = 6
            p.drawEllipse(cx - dot_r, cy - dot_r, dot_r * 2, dot_r * 2)

    p.end()
    img.setDevicePixelRatio(2.0)
    return QIcon(QPixmap.fromImage(img))


class PomobarWindow(QWidget):
    """Frameless always-on-top window that hosts both Pomodoro views."""

    def __init__(
        self,
        model: PomodoroModel | None = None,
        metrics: NotchMetrics | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Pomobar")
        self.setWindowFlags(
            Qt.WindowType.FramelessWindowHint
            | Qt.WindowType.WindowStaysOnTopHint
            | Qt.WindowType.Tool
        )
        self.setStyleSheet(build_stylesheet())

        self._model = model or PomodoroModel(parent=self)
        self._metrics = metrics or NotchMetrics()

        # ── views ─────────────────────────────────────────────────────
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        self._stack = QStackedWidget(self)
        root.addWidget(self._stack)

        self._compact = CompactView(self._model, self._metrics, self._stack)
        self._expanded = ExpandedView(self._model, self._stack)
        self._stack.addWidget(self._compact)
        self._stack.addWidget(self._expanded)
        self._compact.clicked.connect(self.expand)

        # ── system tray icon ──────────────────────────────────────────
        self._tray_icon = QSystemTrayIcon(self)
        self._tray_icon.activated.connect(self._on_tray_activated)
        self._build_tray_menu()
        if QSystemTrayIcon.isSystemTrayAvailable():
            self._tray_icon.show()

        self._model.changed.connect(self._update_tray)
        self._update_tray()
        self.collapse()

    # ══════════════════════════════════════════════════════════════════
    #  EXPAND / COLLAPSE
    # ══════════════════════════════════════════════════════════════════

    @property
    def model(self) -> PomodoroModel:
        return self._model

    @property
    def is_expanded(self) -> bool:
        return self._stack.currentWidget() is self._expanded

    def expand(self) -> None:
        self._stack.setCurrentWidget(self._expanded)
        self.resize(*EXPANDED_SIZE)
        logger.debug("Expanded")

    def collapse(self) -> None:
        self._stack.setCurrentWidget(self._compact)
        self.adjustSize()

    # ══════════════════════════════════════════════════════════════════
    #  SYSTEM TRAY
    # ══════════════════════════════════════════════════════════════════

    def _build_tray_menu(self) -> None:
        menu = QMenu(self)

        self._tray_start_action = menu.addAction("Start")
        self._tray_start_action.triggered.connect(self._toggle_start)

        reset_action = menu.addAction("Reset")
        reset_action.triggered.connect(self._model.reset)

        menu.addSeparator()

        show_action = menu.addAction("Show Pomobar")
        show_action.triggered.connect(self._show_window)

        menu.addSeparator()

        quit_action = menu.addAction("Quit")
        quit_action.triggered.connect(self._quit_app)

        self._tray_icon.setContextMenu(menu)

    def _toggle_start(self) -> None:
        if self._model.is_running:
            self._model.pause()
        else:
            self._model.start()

    def _on_tray_activated(self, reason: QSystemTrayIcon.ActivationReason) -> None:
        """Left-click on tray icon → show the expanded panel."""
        if reason == QSystemTrayIcon.ActivationReason.Trigger:
            self._show_window()
            self.expand()

    def _show_window(self) -> None:
        self.show()
        self.raise_()
        self.activateWindow()

    def _quit_app(self) -> None:
        self._model.pause()
        self._tray_icon.hide()
        QApplication.instance().quit()

    def _update_tray(self) -> None:
        state = self._model.state
        self._tray_icon.setIcon(_make_tray_icon(state))
        self._tray_icon.setToolTip(
            f"Pomobar: {STATE_LABELS[state]} {format_time(self._model.remaining)}"
        )
        self._tray_start_action.setText("Pause" if self._model.is_running else "Start")

    # ══════════════════════════════════════════════════════════════════
    #  EVENTS
    # ══════════════════════════════════════════════════════════════════

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        if event.key() == Qt.Key.Key_Space:
            self._toggle_start()
        elif event.key() == Qt.Key.Key_Escape:
            self.collapse()
        else:
            super().keyPressEvent(event)
