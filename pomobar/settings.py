"""Timer settings record with JSON encoding.

The record is stored as a single JSON blob in the preference store under
``SETTINGS_KEY``::

    store.set(SETTINGS_KEY, settings.to_json())
    settings = PomodoroSettings.from_json(store.get(SETTINGS_KEY))
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict, fields


SETTINGS_KEY = "pomodoroSettings"

DEFAULT_WORK_SECONDS = 25 * 60
DEFAULT_SHORT_BREAK_SECONDS = 5 * 60
DEFAULT_LONG_BREAK_SECONDS = 15 * 60
DEFAULT_SESSIONS_BEFORE_LONG_BREAK = 4


class SettingsError(ValueError):
    """Raised when a settings record cannot be decoded or is invalid."""


@dataclass
class PomodoroSettings:
    """Durations (seconds) and long-break cadence."""

    work_duration: int = DEFAULT_WORK_SECONDS
    short_break_duration: int = DEFAULT_SHORT_BREAK_SECONDS
    long_break_duration: int = DEFAULT_LONG_BREAK_SECONDS
    sessions_before_long_break: int = DEFAULT_SESSIONS_BEFORE_LONG_BREAK

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise SettingsError(f"{f.name} must be an integer, got {value!r}")
        for name in ("work_duration", "short_break_duration", "long_break_duration"):
            if getattr(self, name) <= 0:
                raise SettingsError(f"{name} must be positive")
        if self.sessions_before_long_break < 1:
            raise SettingsError("sessions_before_long_break must be at least 1")

    # ── encoding ──────────────────────────────────────────────────────────

    def to_json(self) -> str:
        self.validate()
        return json.dumps(asdict(self), sort_keys=True)

    @classmethod
    def from_json(cls, raw: str | bytes) -> PomodoroSettings:
        """Decode a stored record.  All four fields are required."""
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as exc:
            raise SettingsError(f"settings record is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise SettingsError("settings record must be a JSON object")

        names = [f.name for f in fields(cls)]
        missing = [n for n in names if n not in data]
        if missing:
            raise SettingsError(f"settings record missing {', '.join(missing)}")
        # Unknown keys are ignored
        return cls(**{n: data[n] for n in names})

    def copy(self) -> PomodoroSettings:
        return PomodoroSettings(**asdict(self))
