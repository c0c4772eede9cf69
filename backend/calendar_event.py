"""
Calendar event record and date key helpers.

A CalendarEvent is immutable: editing an event replaces the whole record
in the store. Events are filed under date keys of the form "YYYY.M.D"
without zero padding, e.g. "2020.5.24".
"""

from dataclasses import dataclass
from datetime import date, time as dt_time

from .errors import InvalidDateKey, InvalidTime, InvalidTimeRange


DEFAULT_TIME = "06:00"


@dataclass(frozen=True)
class CalendarEvent:
    """A single timed entry on one calendar day."""
    title: str
    details: str = ""
    start_time: str = DEFAULT_TIME  # HH:MM
    end_time: str = DEFAULT_TIME    # HH:MM

    @property
    def start(self) -> dt_time:
        return parse_time(self.start_time)

    @property
    def end(self) -> dt_time:
        return parse_time(self.end_time)

    @property
    def time_range(self) -> str:
        """Display form of the time range, e.g. '09:00 - 09:30'."""
        return f"{self.start_time} - {self.end_time}"

    def validate(self) -> "CalendarEvent":
        """
        Check both times parse and the event does not end before it starts.

        Equal start and end times are allowed. Returns self so the call can
        be chained onto construction.

        Raises:
            InvalidTime: a time is not HH:MM
            InvalidTimeRange: end_time is before start_time
        """
        if self.end < self.start:
            raise InvalidTimeRange(self.start_time, self.end_time)
        return self


def parse_time(value: str) -> dt_time:
    """Parse an 'HH:MM' string into a datetime.time."""
    hours, sep, minutes = value.strip().partition(":")
    if not sep or not hours.isdigit() or not minutes.isdigit() or len(minutes) != 2:
        raise InvalidTime(value)
    try:
        return dt_time(int(hours), int(minutes))
    except ValueError:
        raise InvalidTime(value)


def time_slots(first: str = "06:00", last: str = "23:30", step_minutes: int = 30) -> list[str]:
    """
    Build the list of selectable times for the editor dropdowns.

    Args:
        first: first slot, inclusive
        last: last slot, inclusive
        step_minutes: distance between slots

    Returns:
        HH:MM strings from first to last in steps of step_minutes
    """
    if step_minutes <= 0:
        raise ValueError(f"Slot step must be positive, got {step_minutes}")
    start = parse_time(first)
    end = parse_time(last)
    start_minutes = start.hour * 60 + start.minute
    end_minutes = end.hour * 60 + end.minute

    slots = []
    for minutes in range(start_minutes, end_minutes + 1, step_minutes):
        slots.append(f"{minutes // 60:02d}:{minutes % 60:02d}")
    return slots


def date_key(d: date) -> str:
    """Date key for a date: '2020.5.24' for 24 May 2020."""
    return make_date_key(d.year, d.month, d.day)


def make_date_key(year: int, month: int, day: int) -> str:
    return f"{year}.{month}.{day}"


def parse_date_key(key: str) -> date:
    """Turn a 'YYYY.M.D' key back into a date."""
    parts = key.split(".")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        raise InvalidDateKey(key)
    try:
        return date(int(parts[0]), int(parts[1]), int(parts[2]))
    except ValueError:
        raise InvalidDateKey(key)
