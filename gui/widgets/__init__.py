"""
Daybook Calendar GUI Widgets

Custom widgets for displaying calendar data.
"""

from .event_widget import EventWidget, DayEventList
from .calendar_widget import MonthView, MonthDayCell

__all__ = ['EventWidget', 'DayEventList', 'MonthView', 'MonthDayCell']
