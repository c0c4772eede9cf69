"""
Exceptions raised by the Daybook Calendar backend.

The GUI catches CalendarError at the point where a user action fails and
shows it in a message box.
"""


class CalendarError(Exception):
    """Base class for all calendar errors."""


class InvalidIndex(CalendarError, IndexError):
    """An event index does not name an existing event on that date."""

    def __init__(self, date_key: str, index: int, size: int):
        self.date_key = date_key
        self.index = index
        self.size = size
        if size == 0:
            message = f"No events on {date_key} (requested index {index})"
        else:
            message = f"Event index {index} out of range for {date_key} (0..{size - 1})"
        super().__init__(message)


class InvalidTime(CalendarError, ValueError):
    """A time string is not a valid HH:MM value."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid time '{value}', expected HH:MM")


class InvalidTimeRange(CalendarError, ValueError):
    """An event ends before it starts."""

    def __init__(self, start_time: str, end_time: str):
        self.start_time = start_time
        self.end_time = end_time
        super().__init__(f"End time {end_time} is before start time {start_time}")


class InvalidDateKey(CalendarError, ValueError):
    """A date key is not of the form YYYY.M.D or names no real date."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid date key '{value}', expected YYYY.M.D")
