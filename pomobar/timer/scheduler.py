"""Repeating-callback scheduler used to drive the countdown.

The model never talks to ``QTimer`` directly; it receives a scheduler with a
single method::

    handle = scheduler.schedule(1.0, callback)
    ...
    handle.cancel()

so tests can swap in a fake that fires callbacks on demand.
"""

from __future__ import annotations

from typing import Callable, Protocol

from PyQt6.QtCore import QObject, QTimer


class ScheduledHandle(Protocol):
    def cancel(self) -> None: ...

    @property
    def active(self) -> bool: ...


class Scheduler(Protocol):
    def schedule(
        self, interval_seconds: float, callback: Callable[[], None]
    ) -> ScheduledHandle: ...


class QtTimerHandle:
    """Cancellation handle wrapping one repeating ``QTimer``."""

    def __init__(self, timer: QTimer) -> None:
        self._timer: QTimer | None = timer

    @property
    def active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def cancel(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._timer.deleteLater()
        self._timer = None


class QtScheduler:
    """Schedules repeating callbacks on the Qt event loop."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def schedule(
        self, interval_seconds: float, callback: Callable[[], None]
    ) -> QtTimerHandle:
        timer = QTimer(self._parent)
        timer.setInterval(int(interval_seconds * 1000))
        timer.timeout.connect(callback)
        timer.start()
        return QtTimerHandle(timer)
