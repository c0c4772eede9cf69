"""
Event Editor window for creating and editing calendar events.

This is an independent window (not a modal dialog). The caller picks the
mode before showing it: open_new() for a new event on a day, or
open_existing() to edit an event already in the store. Results are
reported through the event_saved signal; closing the window without
saving discards the edits.
"""

from typing import Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLineEdit, QTextEdit, QComboBox, QPushButton, QLabel,
    QMessageBox
)
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QCloseEvent, QFont

from backend.calendar_event import CalendarEvent, DEFAULT_TIME
from backend.config import Config
from backend.debug import debug_print
from backend.errors import CalendarError
from backend.event_store import EventStoreBase


class EventEditor(QWidget):
    """Independent window for creating/editing one calendar event."""

    WIDTH = 400
    HEIGHT = 200
    EXPANSION_HEIGHT = 380
    DETAILS_ROWS = 8

    # (date_key, index, event)
    event_saved = Signal(str, int, object)
    closed = Signal()

    def __init__(self, event_store: EventStoreBase, config: Optional[Config] = None, parent=None):
        super().__init__(parent)
        self.event_store = event_store
        self.config = config or Config()
        self._date_key: Optional[str] = None
        self._event_index: Optional[int] = None
        self._time_slots = self.config.editor.get_time_slots()

        self._setup_window()
        self._setup_ui()

    @property
    def is_new(self) -> bool:
        return self._event_index is None

    @property
    def date_key(self) -> Optional[str]:
        return self._date_key

    @property
    def event_index(self) -> Optional[int]:
        return self._event_index

    @property
    def details_expanded(self) -> bool:
        return not self._details_panel.isHidden()

    def _setup_window(self):
        self.setWindowTitle(self.config.labels.editor_title)
        self.setWindowFlags(Qt.Window)
        self.setAttribute(Qt.WA_DeleteOnClose)
        self.setStyleSheet(f"background: {self.config.colors.window_background};")
        self.resize(self.WIDTH, self.HEIGHT)

    def _setup_ui(self):
        labels = self.config.labels
        colors = self.config.colors
        layout_config = self.config.layout

        event_font = QFont(layout_config.text_font, layout_config.text_font_size)
        icon_font = QFont(layout_config.text_font, layout_config.text_font_size * 2)
        time_font = QFont(layout_config.interface_font, layout_config.interface_font_size)
        time_font.setBold(True)

        layout = QVBoxLayout(self)
        layout.setSpacing(8)
        layout.setContentsMargins(8, 8, 8, 8)

        # Icons on the left, title and time rows on the right
        form = QGridLayout()
        form.setHorizontalSpacing(12)

        title_icon = QLabel(labels.editor_title_icon)
        title_icon.setFont(icon_font)
        title_icon.setStyleSheet(f"color: {colors.window_text};")
        form.addWidget(title_icon, 0, 0)

        self._title_edit = QLineEdit()
        self._title_edit.setPlaceholderText(labels.default_title)
        self._title_edit.setFont(event_font)
        self._title_edit.setStyleSheet("background: #ffffff; color: #000000;")
        form.addWidget(self._title_edit, 0, 1)

        clock_icon = QLabel(labels.editor_clock_icon)
        clock_icon.setFont(icon_font)
        clock_icon.setStyleSheet(f"color: {colors.window_text};")
        form.addWidget(clock_icon, 1, 0)

        time_row = QHBoxLayout()
        from_label = QLabel(labels.field_from)
        from_label.setFont(time_font)
        from_label.setStyleSheet(f"color: {colors.window_text};")
        time_row.addWidget(from_label)

        self._from_combo = QComboBox()
        self._from_combo.addItems(self._time_slots)
        self._from_combo.setFont(time_font)
        self._from_combo.setStyleSheet("background: #ffffff; color: #000000;")
        self._from_combo.currentTextChanged.connect(self._on_start_changed)
        time_row.addWidget(self._from_combo)

        to_label = QLabel(labels.field_to)
        to_label.setFont(time_font)
        to_label.setStyleSheet(f"color: {colors.window_text};")
        time_row.addWidget(to_label)

        self._to_combo = QComboBox()
        self._to_combo.addItems(self._time_slots)
        self._to_combo.setFont(time_font)
        self._to_combo.setStyleSheet("background: #ffffff; color: #000000;")
        time_row.addWidget(self._to_combo)
        time_row.addStretch()
        form.addLayout(time_row, 1, 1)

        layout.addLayout(form)

        # Details area, hidden until "Add details" is pressed
        self._details_panel = QWidget()
        details_layout = QVBoxLayout(self._details_panel)
        details_layout.setContentsMargins(0, 0, 0, 0)
        self._details_edit = QTextEdit()
        self._details_edit.setPlaceholderText(labels.default_details)
        self._details_edit.setFont(event_font)
        self._details_edit.setStyleSheet("background: #ffffff; color: #000000;")
        self._details_edit.setMinimumHeight(self._details_edit.fontMetrics().height() * self.DETAILS_ROWS)
        details_layout.addWidget(self._details_edit)
        self._details_panel.hide()
        layout.addWidget(self._details_panel, 1)

        button_layout = QHBoxLayout()
        button_layout.addStretch()

        self._details_btn = QPushButton(labels.button_details)
        self._details_btn.setStyleSheet(
            f"background: {colors.button_details_background}; "
            f"color: {colors.button_details_text};"
        )
        self._details_btn.clicked.connect(self._on_details_clicked)
        button_layout.addWidget(self._details_btn)

        self._save_btn = QPushButton(labels.button_save)
        self._save_btn.setStyleSheet(
            f"background: {colors.button_save_background}; "
            f"color: {colors.button_save_text};"
        )
        self._save_btn.clicked.connect(self._on_save)
        self._save_btn.setDefault(True)
        button_layout.addWidget(self._save_btn)
        button_layout.addStretch()

        layout.addLayout(button_layout)

    def open_new(self, date_key: str):
        """Reset the fields and show the editor for a new event on date_key."""
        self._date_key = date_key
        self._event_index = None

        self._title_edit.clear()
        self._select_time(self._from_combo, self._default_time())
        self._select_time(self._to_combo, self._default_time())
        self._details_edit.clear()
        self._collapse()

        self.setWindowTitle(self.config.labels.editor_title)
        self._present()

    def open_existing(self, date_key: str, index: int):
        """
        Show the editor filled in from the event at (date_key, index).

        Raises:
            InvalidIndex: there is no such event in the store
        """
        event = self.event_store.get_event(date_key, index)
        self._date_key = date_key
        self._event_index = index

        self.set_fields(event.title, event.start_time, event.end_time, event.details)
        self._collapse()

        self.setWindowTitle(f"{self.config.labels.editor_title}: {event.title}")
        self._present()

    def _default_time(self) -> str:
        # Fall back to the first slot when the configured range excludes the default
        if DEFAULT_TIME in self._time_slots or not self._time_slots:
            return DEFAULT_TIME
        return self._time_slots[0]

    def _present(self):
        self.show()
        self.raise_()
        self.activateWindow()

    def _select_time(self, combo: QComboBox, value: str):
        index = combo.findText(value)
        if index < 0:
            # Times outside the configured slots still round-trip unchanged
            combo.addItem(value)
            index = combo.count() - 1
        combo.setCurrentIndex(index)

    def set_fields(self, title: str, start_time: str, end_time: str, details: str = ""):
        """Fill in all fields at once."""
        self._title_edit.setText(title)
        self._select_time(self._from_combo, start_time)
        self._select_time(self._to_combo, end_time)
        self._details_edit.setPlainText(details)

    def current_event(self) -> CalendarEvent:
        """Event built from the current field values."""
        return CalendarEvent(
            title=self._title_edit.text().strip(),
            details=self._details_edit.toPlainText(),
            start_time=self._from_combo.currentText(),
            end_time=self._to_combo.currentText(),
        )

    def _on_start_changed(self, start_time: str):
        # Keep the end from falling before a newly picked start
        end_index = self._to_combo.findText(self._to_combo.currentText())
        start_index = self._to_combo.findText(start_time)
        if start_index >= 0 and end_index < start_index:
            self._to_combo.setCurrentIndex(start_index)

    def _on_details_clicked(self):
        self._details_panel.show()
        self.resize(self.WIDTH, self.EXPANSION_HEIGHT)

    def _collapse(self):
        self._details_panel.hide()
        self.resize(self.WIDTH, self.HEIGHT)

    def _show_warning(self, title: str, message: str):
        QMessageBox.warning(self, title, message)

    def _on_save(self) -> bool:
        if self._date_key is None:
            return False

        event = self.current_event()
        if not event.title:
            self._show_warning("Validation Error", "Please enter an event title.")
            self._title_edit.setFocus()
            return False

        try:
            event.validate()
            if self.is_new:
                index = self.event_store.add_event(self._date_key, event)
            else:
                index = self._event_index
                self.event_store.modify_event(self._date_key, index, event)
        except CalendarError as e:
            debug_print(f"Event editor: save rejected: {e}")
            self._show_warning("Validation Error", str(e))
            return False

        self.event_saved.emit(self._date_key, index, event)
        self.close()
        return True

    def save(self) -> bool:
        """Save the current fields as if the Save button was pressed."""
        return self._on_save()

    def closeEvent(self, close_event: QCloseEvent):
        self._collapse()
        self.closed.emit()
        super().closeEvent(close_event)
