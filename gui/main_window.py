"""
Main Window for Daybook Calendar.

The primary application window with the month grid, the event list of the
selected day, and month navigation.
"""

from datetime import date
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QToolBar, QPushButton, QLabel,
    QSplitter, QStatusBar, QMessageBox, QApplication, QSizePolicy
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QFont, QKeySequence, QShortcut

from backend.calendar_event import CalendarEvent, date_key, parse_date_key
from backend.config import Config
from backend.debug import debug_print
from backend.errors import CalendarError
from backend.event_store import EventStoreBase
from backend.month import clamp_day, shift_month

from .widgets.calendar_widget import (
    MonthView, set_layout_config, set_localization_config,
    set_colors_config, set_labels_config
)
from .widgets.event_widget import DayEventList
from .event_editor import EventEditor


class MainWindow(QMainWindow):
    """
    Main application window.

    Contains:
    - Toolbar with month navigation and a New Event button
    - Month grid (left)
    - Event list for the selected day (right)

    The event store is created by the caller and only used through the
    EventStoreBase interface.
    """

    def __init__(self, config: Config, event_store: EventStoreBase, parent=None):
        super().__init__(parent)
        self.config = config
        self.event_store = event_store

        # Set configs for the calendar widgets BEFORE creating UI
        set_layout_config(config.layout)
        set_localization_config(config.localization)
        set_colors_config(config.colors)
        set_labels_config(config.labels)

        # Apply text_font as application default
        text_font = QFont(config.layout.text_font, config.layout.text_font_size)
        QApplication.instance().setFont(text_font)

        # Store interface font for explicit use on UI elements
        self._interface_font = QFont(config.layout.interface_font, config.layout.interface_font_size)

        self._selected_date = date.today()
        self._event_editors: list[EventEditor] = []

        self._setup_window()
        self._setup_ui()
        self._setup_toolbar()
        self._setup_shortcuts()
        self._setup_statusbar()

        self.select_date(self._selected_date)

    def _setup_window(self):
        """Configure main window properties."""
        self.setWindowTitle(self.config.labels.window_title)
        self.setMinimumSize(800, 500)
        self.resize(1100, 700)
        self.setStyleSheet(f"QMainWindow {{ background: {self.config.colors.window_background}; }}")

    def _setup_ui(self):
        """Set up the main UI layout."""
        self._splitter = QSplitter(Qt.Horizontal)

        self._month_view = MonthView()
        self._month_view.day_clicked.connect(self._on_day_clicked)
        self._month_view.day_double_clicked.connect(self._on_day_double_clicked)
        self._splitter.addWidget(self._month_view)

        self._day_list = DayEventList(labels=self.config.labels, localization=self.config.localization)
        self._day_list.setMinimumWidth(250)
        self._day_list.event_activated.connect(self._on_event_activated)
        self._day_list.new_event_requested.connect(self.open_new_event)
        self._splitter.addWidget(self._day_list)

        self._splitter.setSizes([750, 350])
        self.setCentralWidget(self._splitter)

    def _setup_toolbar(self):
        """Set up the navigation toolbar."""
        toolbar = QToolBar("Navigation")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        if toolbar.layout():
            toolbar.layout().setContentsMargins(8, 8, 8, 8)

        self._prev_btn = QPushButton(self.config.labels.button_prev)
        self._prev_btn.setFont(self._interface_font)
        self._prev_btn.setToolTip("Previous month")
        self._prev_btn.clicked.connect(self.go_previous)
        toolbar.addWidget(self._prev_btn)

        self._today_btn = QPushButton(self.config.labels.button_today)
        self._today_btn.setFont(self._interface_font)
        self._today_btn.clicked.connect(self.go_today)
        toolbar.addWidget(self._today_btn)

        self._next_btn = QPushButton(self.config.labels.button_next)
        self._next_btn.setFont(self._interface_font)
        self._next_btn.setToolTip("Next month")
        self._next_btn.clicked.connect(self.go_next)
        toolbar.addWidget(self._next_btn)

        toolbar.addSeparator()

        self._month_label = QLabel()
        month_font = QFont(self._interface_font)
        month_font.setBold(True)
        self._month_label.setFont(month_font)
        self._month_label.setMinimumWidth(200)
        toolbar.addWidget(self._month_label)

        spacer = QWidget()
        spacer.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        toolbar.addWidget(spacer)

        self._new_event_btn = QPushButton(self.config.labels.button_new_event)
        self._new_event_btn.setFont(self._interface_font)
        self._new_event_btn.clicked.connect(self._on_new_event)
        toolbar.addWidget(self._new_event_btn)

    def _setup_shortcuts(self):
        """Set up keyboard shortcuts from config bindings."""
        prev_shortcut = QShortcut(QKeySequence(self.config.bindings.prev), self)
        prev_shortcut.activated.connect(self.go_previous)

        next_shortcut = QShortcut(QKeySequence(self.config.bindings.next), self)
        next_shortcut.activated.connect(self.go_next)

        if self.config.bindings.new_event:
            new_event_shortcut = QShortcut(QKeySequence(self.config.bindings.new_event), self)
            new_event_shortcut.activated.connect(self._on_new_event)

    def _setup_statusbar(self):
        """Set up the status bar."""
        self._statusbar = QStatusBar()
        self._statusbar.setFont(self._interface_font)
        self.setStatusBar(self._statusbar)
        self._statusbar.showMessage("Ready")

    # ==================== Navigation ====================

    @property
    def selected_date(self) -> date:
        return self._selected_date

    @property
    def month_view(self) -> MonthView:
        return self._month_view

    @property
    def day_list(self) -> DayEventList:
        return self._day_list

    def select_date(self, d: date):
        """Select a day, switching the grid to its month if needed."""
        self._selected_date = d
        if self._month_view.get_month() != (d.year, d.month):
            self._month_view.set_month(d.year, d.month)
        self._update_month_label()
        self._month_view.set_selected_date(d)
        self._refresh_events()

    def go_previous(self):
        self._go_months(-1)

    def go_next(self):
        self._go_months(1)

    def go_today(self):
        self.select_date(date.today())

    def _go_months(self, delta: int):
        year, month = shift_month(self._selected_date.year, self._selected_date.month, delta)
        self.select_date(clamp_day(year, month, self._selected_date.day))

    def _update_month_label(self):
        year, month = self._month_view.get_month()
        month_name = self.config.localization.get_month_name(month)
        self._month_label.setText(f"{month_name} {year}")

    # ==================== Event display ====================

    def _refresh_events(self):
        """Refresh event counts in the grid and the selected day's list."""
        counts = {}
        for d in self._month_view.get_visible_dates():
            count = self.event_store.event_count(date_key(d))
            if count:
                counts[d] = count
        self._month_view.set_event_counts(counts)

        events = self.event_store.get_events(date_key(self._selected_date))
        self._day_list.set_day(self._selected_date, events)
        self._update_status()

    def _update_status(self):
        day_count = self.event_store.event_count(date_key(self._selected_date))
        total = self.event_store.event_count()
        self._statusbar.showMessage(f"{day_count} events on this day, {total} in total")

    def _on_day_clicked(self, d: date):
        self.select_date(d)

    def _on_day_double_clicked(self, d: date):
        self.select_date(d)
        self.open_new_event(date_key(d))

    def _on_new_event(self):
        self.open_new_event(date_key(self._selected_date))

    def _on_event_activated(self, key: str, index: int):
        self.open_existing_event(key, index)

    # ==================== Event editors ====================

    def _create_event_editor(self) -> EventEditor:
        editor = EventEditor(event_store=self.event_store, config=self.config)
        editor.event_saved.connect(self._on_event_saved)
        editor.closed.connect(lambda e=editor: self._on_event_editor_closed(e))
        self._event_editors.append(editor)
        return editor

    def open_new_event(self, key: str) -> EventEditor:
        """Open an editor for a new event on the day named by key."""
        debug_print(f"Opening editor for new event on {key}")
        editor = self._create_event_editor()
        editor.open_new(key)
        return editor

    def open_existing_event(self, key: str, index: int) -> Optional[EventEditor]:
        """Open an editor on an existing event; returns None if it does not exist."""
        debug_print(f"Opening editor for event {index} on {key}")
        editor = self._create_event_editor()
        try:
            editor.open_existing(key, index)
        except CalendarError as e:
            editor.close()
            QMessageBox.warning(self, "Error", str(e))
            return None
        return editor

    def open_editors(self) -> list[EventEditor]:
        return list(self._event_editors)

    def _on_event_saved(self, key: str, index: int, event: CalendarEvent):
        """Handle event saved: show the day it was saved on."""
        self.select_date(parse_date_key(key))
        self._statusbar.showMessage(f"Event '{event.title}' saved", 3000)

    def _on_event_editor_closed(self, editor: EventEditor):
        if editor in self._event_editors:
            self._event_editors.remove(editor)

    def closeEvent(self, event: QCloseEvent):
        """Handle window close."""
        for editor in self._event_editors[:]:
            editor.close()
        super().closeEvent(event)
