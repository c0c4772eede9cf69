"""
In-memory Event Store for Daybook Calendar.

Holds the events of every day, keyed by date key ("YYYY.M.D"). Within a
day, events keep insertion order and an event's position is its identity
for edits. Nothing is persisted; the store lives as long as the process.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .calendar_event import CalendarEvent
from .debug import debug_print
from .errors import InvalidIndex


class EventStoreBase(ABC):
    """
    Interface the GUI programs against.

    Implementations must keep per-day insertion order and replace events
    in place on modify.
    """

    @abstractmethod
    def add_event(self, date_key: str, event: CalendarEvent) -> int:
        """Append an event to a day and return its index."""

    @abstractmethod
    def get_events(self, date_key: str) -> tuple[CalendarEvent, ...]:
        """Events of a day in insertion order; empty if there are none."""

    @abstractmethod
    def modify_event(self, date_key: str, index: int, event: CalendarEvent) -> None:
        """Replace the event at index; raise InvalidIndex if there is none."""

    @abstractmethod
    def event_count(self, date_key: Optional[str] = None) -> int:
        """Number of events on one day, or in the whole store if no day is given."""

    def get_event(self, date_key: str, index: int) -> CalendarEvent:
        events = self.get_events(date_key)
        if not 0 <= index < len(events):
            raise InvalidIndex(date_key, index, len(events))
        return events[index]


class EventStore(EventStoreBase):
    """Dictionary-backed event store."""

    def __init__(self):
        self._events: dict[str, list[CalendarEvent]] = {}

    def add_event(self, date_key: str, event: CalendarEvent) -> int:
        day_events = self._events.setdefault(date_key, [])
        day_events.append(event)
        index = len(day_events) - 1
        debug_print(f"Added event '{event.title}' on {date_key} at index {index}")
        return index

    def get_events(self, date_key: str) -> tuple[CalendarEvent, ...]:
        return tuple(self._events.get(date_key, ()))

    def modify_event(self, date_key: str, index: int, event: CalendarEvent) -> None:
        day_events = self._events.get(date_key, [])
        # Negative indices are rejected rather than counted from the end
        if not 0 <= index < len(day_events):
            raise InvalidIndex(date_key, index, len(day_events))
        day_events[index] = event
        debug_print(f"Modified event {index} on {date_key}: '{event.title}'")

    def event_count(self, date_key: Optional[str] = None) -> int:
        """Number of events on one day, or in the whole store if no day is given."""
        if date_key is not None:
            return len(self._events.get(date_key, ()))
        return sum(len(events) for events in self._events.values())
