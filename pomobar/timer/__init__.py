"""Timer package."""

from .model import PomodoroModel, TimerState, TICK_INTERVAL
from .formatting import format_time
from .scheduler import QtScheduler, QtTimerHandle

__all__ = [
    "PomodoroModel",
    "TimerState",
    "TICK_INTERVAL",
    "format_time",
    "QtScheduler",
    "QtTimerHandle",
]
