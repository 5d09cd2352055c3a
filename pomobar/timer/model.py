"""Pomodoro timer model.

States
------
IDLE          Nothing counting down.
WORK          Work countdown.
SHORT_BREAK   Short break countdown.
LONG_BREAK    Long break countdown (every Nth completed work session).

Transitions
-----------
IDLE | SHORT_BREAK | LONG_BREAK → WORK       (start)
WORK → WORK                                  (start: restarts the countdown)
WORK → SHORT_BREAK | LONG_BREAK              (countdown hits 0, auto-starts)
SHORT_BREAK | LONG_BREAK → IDLE              (countdown hits 0, waits for start)
Any → IDLE                                   (reset)

Pausing keeps the state and the remaining time; it only cancels the
countdown callback.  There is no resume: ``start()`` always begins a fresh
work countdown.
"""

from __future__ import annotations

import logging
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal
from sqlalchemy.exc import SQLAlchemyError

from ..settings import SETTINGS_KEY, PomodoroSettings, SettingsError
from .scheduler import QtScheduler, ScheduledHandle, Scheduler

logger = logging.getLogger(__name__)

TICK_INTERVAL = 1.0  # seconds


class TimerState(Enum):
    IDLE = "idle"
    WORK = "work"
    SHORT_BREAK = "shortBreak"
    LONG_BREAK = "longBreak"

    @property
    def is_break(self) -> bool:
        return self in (TimerState.SHORT_BREAK, TimerState.LONG_BREAK)


class PomodoroModel(QObject):
    """Observable Pomodoro session.

    Signals
    -------
    changed()
        Emitted after any observed field changes.  Views re-render on it.
    state_changed(new_state: TimerState)
    tick(remaining_seconds: int)
        Emitted whenever the remaining time changes.
    running_changed(is_running: bool)
    completed_changed(completed: int)
    settings_changed(settings: PomodoroSettings)
    """

    changed = pyqtSignal()
    state_changed = pyqtSignal(object)
    tick = pyqtSignal(int)
    running_changed = pyqtSignal(bool)
    completed_changed = pyqtSignal(int)
    settings_changed = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        scheduler: Scheduler | None = None,
        store=None,
        settings: PomodoroSettings | None = None,
    ) -> None:
        super().__init__(parent)

        if store is None:
            from ..database.store import PreferenceStore
            store = PreferenceStore()

        self._scheduler: Scheduler = scheduler or QtScheduler(self)
        self._store = store
        self._settings: PomodoroSettings = settings or PomodoroSettings()

        self._state: TimerState = TimerState.IDLE
        self._remaining: int = 0
        self._completed: int = 0
        self._running: bool = False
        self._handle: ScheduledHandle | None = None

    # ══════════════════════════════════════════════════════════════════
    #  OBSERVED FIELDS
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def remaining(self) -> int:
        """Seconds left on the clock."""
        return self._remaining

    @property
    def completed(self) -> int:
        """Work sessions completed since the last reset."""
        return self._completed

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def settings(self) -> PomodoroSettings:
        return self._settings

    def duration_for(self, state: TimerState) -> int:
        s = self._settings
        if state == TimerState.WORK:
            return s.work_duration
        if state == TimerState.SHORT_BREAK:
            return s.short_break_duration
        if state == TimerState.LONG_BREAK:
            return s.long_break_duration
        return 0

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Begin (or restart) a work countdown."""
        if self._state != TimerState.WORK:
            self._set_state(TimerState.WORK)
        self._set_remaining(self._settings.work_duration)
        self._begin_countdown()

    def pause(self) -> None:
        """Stop ticking.  State and remaining time are kept."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._set_running(False)

    def reset(self) -> None:
        """Pause and clear the whole session, including the completed count."""
        self.pause()
        self._set_state(TimerState.IDLE)
        self._set_remaining(0)
        self._set_completed(0)

    # ══════════════════════════════════════════════════════════════════
    #  SETTINGS
    # ══════════════════════════════════════════════════════════════════

    def update_settings(self, **values: int) -> None:
        """Edit the in-memory record (editor binding).  Not persisted."""
        candidate = self._settings.copy()
        for name, value in values.items():
            if not hasattr(candidate, name):
                raise AttributeError(f"unknown setting {name!r}")
            setattr(candidate, name, value)
        candidate.validate()

        for name, value in values.items():
            setattr(self._settings, name, value)
        self.settings_changed.emit(self._settings)
        self.changed.emit()

    def load_settings(self) -> None:
        """Replace settings with the stored record, if one decodes."""
        try:
            raw = self._store.get(SETTINGS_KEY)
        except SQLAlchemyError:
            logger.warning("Could not read stored settings", exc_info=True)
            return
        if raw is None:
            return
        try:
            loaded = PomodoroSettings.from_json(raw)
        except SettingsError as exc:
            logger.warning("Ignoring stored settings: %s", exc)
            return

        self._settings = loaded
        self.settings_changed.emit(loaded)
        # Only a running work countdown picks up the new duration.
        if self._state == TimerState.WORK:
            self._set_remaining(loaded.work_duration)
        self.changed.emit()
        logger.debug("Loaded settings %s", loaded)

    def save_settings(self) -> None:
        """Persist the current record under the settings key."""
        try:
            encoded = self._settings.to_json()
        except (SettingsError, TypeError) as exc:
            logger.warning("Not saving invalid settings: %s", exc)
            return
        try:
            self._store.set(SETTINGS_KEY, encoded)
        except SQLAlchemyError:
            logger.warning("Could not write settings", exc_info=True)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL: countdown mechanics
    # ══════════════════════════════════════════════════════════════════

    def _begin_countdown(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

        if self._remaining <= 0:
            self._complete()
            return

        self._handle = self._scheduler.schedule(TICK_INTERVAL, self._on_tick)
        self._set_running(True)

    def _on_tick(self) -> None:
        if self._remaining > 0:
            self._set_remaining(self._remaining - 1)
        if self._remaining <= 0:
            self._complete()

    def _complete(self) -> None:
        finished = self._state
        if finished == TimerState.IDLE:
            return
        self.pause()

        if finished == TimerState.WORK:
            self._set_completed(self._completed + 1)
            if self._completed % self._settings.sessions_before_long_break == 0:
                next_state = TimerState.LONG_BREAK
            else:
                next_state = TimerState.SHORT_BREAK
            logger.debug("Work session %d done, next %s", self._completed, next_state.value)
            self._set_state(next_state)
            self._set_remaining(self.duration_for(next_state))
            self._begin_countdown()
        else:
            logger.debug("%s finished", finished.value)
            self._set_state(TimerState.IDLE)
            self._set_remaining(0)

    # ── field setters (emit on change) ────────────────────────────────

    def _set_state(self, new_state: TimerState) -> None:
        if new_state == self._state:
            return
        self._state = new_state
        self.state_changed.emit(new_state)
        self.changed.emit()

    def _set_remaining(self, seconds: int) -> None:
        if seconds == self._remaining:
            return
        self._remaining = seconds
        self.tick.emit(seconds)
        self.changed.emit()

    def _set_completed(self, count: int) -> None:
        if count == self._completed:
            return
        self._completed = count
        self.completed_changed.emit(count)
        self.changed.emit()

    def _set_running(self, running: bool) -> None:
        if running == self._running:
            return
        self._running = running
        self.running_changed.emit(running)
        self.changed.emit()
