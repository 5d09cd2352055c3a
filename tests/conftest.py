"""Shared pytest fixtures for Pomobar tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from pomobar.database.db import configure_engine, init_db
from pomobar.database.store import PreferenceStore
from pomobar.timer.model import PomodoroModel

from helpers import ManualScheduler


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def store():
    return PreferenceStore()


@pytest.fixture
def model(qapp, scheduler, store):
    """Fresh PomodoroModel driven by the manual scheduler."""
    return PomodoroModel(parent=None, scheduler=scheduler, store=store)
