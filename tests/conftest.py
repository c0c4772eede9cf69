"""
Pytest configuration and shared fixtures.
"""

import os
import sys
from pathlib import Path

import pytest

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from backend.calendar_event import CalendarEvent
from backend.config import Config
from backend.event_store import EventStore


@pytest.fixture(scope="session")
def qapp():
    """One QApplication shared by every GUI test."""
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def store():
    """Empty in-memory event store."""
    return EventStore()


@pytest.fixture
def config():
    """Built-in default configuration."""
    return Config()


@pytest.fixture
def standup():
    return CalendarEvent(title="Standup", details="", start_time="09:00", end_time="09:30")


@pytest.fixture
def sample_events():
    """Three distinct events for one day."""
    return [
        CalendarEvent(title="Standup", details="", start_time="09:00", end_time="09:30"),
        CalendarEvent(title="Lunch", details="With the team", start_time="12:00", end_time="13:00"),
        CalendarEvent(title="Review", details="Sprint review", start_time="15:00", end_time="16:30"),
    ]
