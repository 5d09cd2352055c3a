"""Expanded notch panel with the full Pomodoro controls.

Layout (top → bottom):
    - Status dot + state label
    - Large MM:SS countdown
    - Completed-session counter
    - Start/Pause + Reset buttons
    - Settings toggle, revealing the inline duration editor
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLabel, QPushButton, QSpinBox, QFrame,
)

from ..settings import PomodoroSettings
from ..timer.formatting import format_time
from ..timer.model import PomodoroModel
from .styles import STATE_LABELS, STATUS_DOT_COLORS, IDLE_COLOR

WORK_MINUTES_RANGE = (1, 60)
BREAK_MINUTES_RANGE = (1, 30)


class ExpandedView(QWidget):
    """Controls and inline settings editor bound to a :class:`PomodoroModel`."""

    def __init__(self, model: PomodoroModel, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._model = model
        self._appeared = False
        self._build_ui()
        self._connect_signals()
        self._sync_editor(model.settings)
        self.refresh()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        panel = QFrame(self)
        panel.setObjectName("panel")
        root.addWidget(panel)

        layout = QVBoxLayout(panel)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)
        layout.setAlignment(Qt.AlignmentFlag.AlignHCenter)

        # ── status ───────────────────────────────────────────────────
        status_row = QHBoxLayout()
        status_row.setSpacing(10)
        status_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._status_dot = QLabel(panel)
        self._status_dot.setFixedSize(12, 12)
        self._status_label = QLabel(panel)
        self._status_label.setStyleSheet("font-size: 15px; font-weight: 600;")
        status_row.addWidget(self._status_dot)
        status_row.addWidget(self._status_label)
        layout.addLayout(status_row)

        # ── countdown + counter ──────────────────────────────────────
        self._time_label = QLabel(panel)
        self._time_label.setObjectName("timeLabel")
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._time_label)

        self._counter_label = QLabel(panel)
        self._counter_label.setObjectName("counterLabel")
        self._counter_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._counter_label)

        # ── main controls ────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(24)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._start_pause_btn = QPushButton("Start", panel)
        self._start_pause_btn.setObjectName("primaryButton")
        self._reset_btn = QPushButton("Reset", panel)

        btn_row.addWidget(self._start_pause_btn)
        btn_row.addWidget(self._reset_btn)
        layout.addLayout(btn_row)

        self._settings_btn = QPushButton("⚙ Settings", panel)
        self._settings_btn.setObjectName("plainButton")
        layout.addWidget(self._settings_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        # ── inline settings editor (hidden until toggled) ────────────
        self._settings_card = QFrame(panel)
        self._settings_card.setObjectName("settingsCard")
        form = QFormLayout(self._settings_card)
        form.setContentsMargins(12, 12, 12, 12)
        form.setVerticalSpacing(10)

        self._work_spin = QSpinBox(self._settings_card)
        self._work_spin.setRange(*WORK_MINUTES_RANGE)
        self._work_spin.setSuffix(" min")
        form.addRow("Work:", self._work_spin)

        self._break_spin = QSpinBox(self._settings_card)
        self._break_spin.setRange(*BREAK_MINUTES_RANGE)
        self._break_spin.setSuffix(" min")
        form.addRow("Break:", self._break_spin)

        self._save_btn = QPushButton("Save", self._settings_card)
        self._save_btn.setObjectName("primaryButton")
        form.addRow("", self._save_btn)

        self._settings_card.setVisible(False)
        layout.addWidget(self._settings_card)
        layout.addStretch()

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_pause_btn.clicked.connect(self._on_start_pause)
        self._reset_btn.clicked.connect(self._model.reset)
        self._settings_btn.clicked.connect(self.toggle_settings)
        self._save_btn.clicked.connect(self._on_save)
        self._work_spin.valueChanged.connect(self._on_work_changed)
        self._break_spin.valueChanged.connect(self._on_break_changed)

        self._model.changed.connect(self.refresh)
        self._model.settings_changed.connect(self._sync_editor)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_start_pause(self) -> None:
        if self._model.is_running:
            self._model.pause()
        else:
            self._model.start()

    def _on_work_changed(self, minutes: int) -> None:
        self._model.update_settings(work_duration=minutes * 60)

    def _on_break_changed(self, minutes: int) -> None:
        self._model.update_settings(short_break_duration=minutes * 60)

    def _on_save(self) -> None:
        self._model.save_settings()
        self._settings_card.setVisible(False)

    def _sync_editor(self, settings: PomodoroSettings) -> None:
        """Mirror the record into the steppers without writing it back."""
        for spin, seconds in (
            (self._work_spin, settings.work_duration),
            (self._break_spin, settings.short_break_duration),
        ):
            spin.blockSignals(True)
            spin.setValue(seconds // 60)
            spin.blockSignals(False)

    # ── public ────────────────────────────────────────────────────────────

    def toggle_settings(self) -> None:
        self._settings_card.setVisible(self._settings_card.isHidden())

    @property
    def settings_open(self) -> bool:
        return not self._settings_card.isHidden()

    def refresh(self) -> None:
        state = self._model.state
        color = STATUS_DOT_COLORS.get(state, IDLE_COLOR)
        self._status_dot.setStyleSheet(
            f"background-color: {color}; border-radius: 6px;"
        )
        self._status_label.setText(STATE_LABELS[state])
        self._time_label.setText(format_time(self._model.remaining))
        self._counter_label.setText(f"Pomodoros: {self._model.completed}")
        self._start_pause_btn.setText(
            "⏸ Pause" if self._model.is_running else "▶ Start"
        )

    # ── events ────────────────────────────────────────────────────────────

    def showEvent(self, event) -> None:  # type: ignore[override]
        if not self._appeared:
            self._appeared = True
            self._model.load_settings()
        super().showEvent(event)
