"""Compact "live activity" strip shown around the closed notch.

Layout (left → right):
    - Timer glyph, colored by state class
    - Black spacer the width of the closed notch
    - Remaining time, right-aligned
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QWidget, QHBoxLayout, QLabel, QFrame

from ..timer.formatting import format_time
from ..timer.model import PomodoroModel
from .metrics import NotchMetrics
from .styles import COMPACT_ICON_COLORS, IDLE_COLOR

HOVER_GROWTH = 8  # px


class CompactView(QWidget):
    """Icon + remaining time.  No state beyond the hover flag."""

    clicked = pyqtSignal()

    def __init__(
        self,
        model: PomodoroModel,
        metrics: NotchMetrics | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._model = model
        self._metrics = metrics or NotchMetrics()
        self._hovering = False
        self._build_ui()
        self._apply_metrics()
        self._model.changed.connect(self.refresh)
        self.refresh()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        row = QHBoxLayout(self)
        row.setContentsMargins(0, 0, 0, 0)
        row.setSpacing(0)

        self._icon = QLabel("⏱", self)
        self._icon.setAlignment(Qt.AlignmentFlag.AlignCenter)
        row.addWidget(self._icon)

        self._spacer = QFrame(self)
        self._spacer.setStyleSheet("background-color: black;")
        row.addWidget(self._spacer)

        self._time_label = QLabel(self)
        self._time_label.setAlignment(
            Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
        )
        self._time_label.setStyleSheet("color: white; font-size: 11px;")
        row.addWidget(self._time_label)

    def _apply_metrics(self) -> None:
        m = self._metrics
        self._icon.setFixedSize(m.icon_side, m.icon_side)
        self._spacer.setFixedWidth(m.closed_width)
        self._time_label.setFixedSize(m.time_width, m.icon_side)
        self.setFixedHeight(
            m.effective_closed_height + (HOVER_GROWTH if self._hovering else 0)
        )

    # ── public ────────────────────────────────────────────────────────────

    def set_metrics(self, metrics: NotchMetrics) -> None:
        self._metrics = metrics
        self._apply_metrics()

    def set_hovering(self, hovering: bool) -> None:
        self._hovering = hovering
        self._apply_metrics()

    @property
    def hovering(self) -> bool:
        return self._hovering

    def icon_color(self) -> str:
        return COMPACT_ICON_COLORS.get(self._model.state, IDLE_COLOR)

    def refresh(self) -> None:
        side = self._metrics.icon_side
        self._icon.setStyleSheet(
            f"color: {self.icon_color()}; font-size: {max(1, side - 4)}px;"
        )
        self._time_label.setText(format_time(self._model.remaining))

    # ── events ────────────────────────────────────────────────────────────

    def enterEvent(self, event) -> None:  # type: ignore[override]
        self.set_hovering(True)
        super().enterEvent(event)

    def leaveEvent(self, event) -> None:  # type: ignore[override]
        self.set_hovering(False)
        super().leaveEvent(event)

    def mousePressEvent(self, event) -> None:  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit()
        super().mousePressEvent(event)
