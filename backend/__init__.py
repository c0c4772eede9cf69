"""
Daybook Calendar Backend Module

This module provides the core functionality for calendar operations:
- Configuration parsing (config.py)
- Event record and date keys (calendar_event.py)
- In-memory event store (event_store.py)
- Month grid model (month.py)
- Error types (errors.py)
"""

from .config import Config
from .calendar_event import CalendarEvent, date_key, make_date_key, parse_date_key
from .event_store import EventStore, EventStoreBase
from .errors import CalendarError, InvalidIndex, InvalidTime, InvalidTimeRange, InvalidDateKey

__all__ = [
    'Config',
    'CalendarEvent',
    'date_key',
    'make_date_key',
    'parse_date_key',
    'EventStore',
    'EventStoreBase',
    'CalendarError',
    'InvalidIndex',
    'InvalidTime',
    'InvalidTimeRange',
    'InvalidDateKey',
]
