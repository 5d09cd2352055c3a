"""Pomobar: a Pomodoro timer for the menu bar notch."""

__version__ = "0.1.0"
