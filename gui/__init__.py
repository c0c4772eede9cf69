"""
Daybook Calendar GUI Module

PySide6-based graphical interface for the calendar application.
"""

from .main_window import MainWindow
from .event_editor import EventEditor

__all__ = ['MainWindow', 'EventEditor']
