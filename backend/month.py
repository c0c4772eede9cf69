"""
Month grid model.

The month view always shows six weeks of seven days starting on Sunday,
so a month is padded with days from the previous and next month.
"""

from datetime import date, timedelta
from enum import Enum


class DaysOfWeek(Enum):
    """Days of the week in grid order, with their display names."""
    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"

    @property
    def short_name(self) -> str:
        return self.value[:3]

    @staticmethod
    def column_of(d: date) -> int:
        """Grid column of a date, 0 for Sunday."""
        # date.weekday() counts from Monday
        return (d.weekday() + 1) % DAYS_IN_WEEK


DAYS_IN_WEEK = 7
WEEKS_IN_GRID = 6


def grid_start(year: int, month: int) -> date:
    """The Sunday on or before the first day of the month."""
    first_day = date(year, month, 1)
    return first_day - timedelta(days=DaysOfWeek.column_of(first_day))


def month_grid(year: int, month: int) -> list[list[date]]:
    """Six rows of seven dates covering the month, Sunday first."""
    start = grid_start(year, month)
    return [
        [start + timedelta(days=week * DAYS_IN_WEEK + day) for day in range(DAYS_IN_WEEK)]
        for week in range(WEEKS_IN_GRID)
    ]


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move (year, month) by delta months, e.g. (2020, 12) + 1 -> (2021, 1)."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def clamp_day(year: int, month: int, day: int) -> date:
    """Date in the given month, pulling day back to the month's last day if needed."""
    next_year, next_month = shift_month(year, month, 1)
    last_day = (date(next_year, next_month, 1) - timedelta(days=1)).day
    return date(year, month, min(day, last_day))
