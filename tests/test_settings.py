"""Tests for the settings record, the preference store, and formatting."""

import json

import pytest

from pomobar.database.db import app_support_dir
from pomobar.settings import (
    PomodoroSettings, SettingsError, SETTINGS_KEY,
    DEFAULT_WORK_SECONDS, DEFAULT_SHORT_BREAK_SECONDS,
    DEFAULT_LONG_BREAK_SECONDS, DEFAULT_SESSIONS_BEFORE_LONG_BREAK,
)
from pomobar.timer.formatting import format_time


# ═══════════════════════════════════════════════════════════════════════
#  SETTINGS RECORD
# ═══════════════════════════════════════════════════════════════════════


class TestSettingsRecord:
    def test_defaults(self):
        s = PomodoroSettings()
        assert s.work_duration == DEFAULT_WORK_SECONDS == 1500
        assert s.short_break_duration == DEFAULT_SHORT_BREAK_SECONDS == 300
        assert s.long_break_duration == DEFAULT_LONG_BREAK_SECONDS == 900
        assert s.sessions_before_long_break == DEFAULT_SESSIONS_BEFORE_LONG_BREAK == 4

    def test_json_has_exactly_four_fields(self):
        data = json.loads(PomodoroSettings().to_json())
        assert data == {
            "work_duration": 1500,
            "short_break_duration": 300,
            "long_break_duration": 900,
            "sessions_before_long_break": 4,
        }

    def test_from_json(self):
        raw = json.dumps({
            "work_duration": 10,
            "short_break_duration": 20,
            "long_break_duration": 30,
            "sessions_before_long_break": 2,
        })
        s = PomodoroSettings.from_json(raw)
        assert s == PomodoroSettings(10, 20, 30, 2)

    def test_from_json_ignores_unknown_keys(self):
        data = json.loads(PomodoroSettings().to_json())
        data["theme"] = "dark"
        assert PomodoroSettings.from_json(json.dumps(data)) == PomodoroSettings()

    def test_from_json_accepts_bytes(self):
        raw = PomodoroSettings(work_duration=90).to_json().encode("utf-8")
        assert PomodoroSettings.from_json(raw).work_duration == 90

    @pytest.mark.parametrize("raw", [
        "",
        "not json",
        "[]",
        '{"work_duration": 10}',
        '{"work_duration": "10", "short_break_duration": 300, '
        '"long_break_duration": 900, "sessions_before_long_break": 4}',
        '{"work_duration": true, "short_break_duration": 300, '
        '"long_break_duration": 900, "sessions_before_long_break": 4}',
        '{"work_duration": 1500, "short_break_duration": 300, '
        '"long_break_duration": 900, "sessions_before_long_break": 0}',
    ])
    def test_from_json_rejects(self, raw):
        with pytest.raises(SettingsError):
            PomodoroSettings.from_json(raw)

    @pytest.mark.parametrize("field", [
        "work_duration", "short_break_duration", "long_break_duration",
    ])
    def test_durations_must_be_positive(self, field):
        with pytest.raises(SettingsError):
            PomodoroSettings(**{field: 0})

    def test_settings_error_is_value_error(self):
        assert issubclass(SettingsError, ValueError)

    def test_copy_is_independent(self):
        s = PomodoroSettings()
        c = s.copy()
        c.work_duration = 60
        assert s.work_duration == 1500


# ═══════════════════════════════════════════════════════════════════════
#  PREFERENCE STORE
# ═══════════════════════════════════════════════════════════════════════


class TestPreferenceStore:
    def test_missing_key(self, store):
        assert store.get(SETTINGS_KEY) is None
        assert SETTINGS_KEY not in store

    def test_set_and_get(self, store):
        store.set("a", "1")
        assert store.get("a") == "1"
        assert "a" in store

    def test_overwrite(self, store):
        store.set("a", "1")
        store.set("a", "2")
        assert store.get("a") == "2"

    def test_delete(self, store):
        store.set("a", "1")
        store.delete("a")
        assert store.get("a") is None
        store.delete("a")  # missing key is fine

    def test_data_dir_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("POMOBAR_HOME", str(tmp_path))
        assert app_support_dir() == tmp_path

    def test_data_dir_default(self, monkeypatch):
        monkeypatch.delenv("POMOBAR_HOME", raising=False)
        assert app_support_dir().name == "Pomobar"


# ═══════════════════════════════════════════════════════════════════════
#  FORMATTING
# ═══════════════════════════════════════════════════════════════════════


class TestFormatTime:
    @pytest.mark.parametrize("seconds, expected", [
        (0, "00:00"),
        (5, "00:05"),
        (65, "01:05"),
        (1500, "25:00"),
        (3661, "61:01"),
        (6000, "100:00"),
    ])
    def test_format(self, seconds, expected):
        assert format_time(seconds) == expected
