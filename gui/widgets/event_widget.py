"""
Event Widgets for the day event list.

Shows the events of the selected day, one row per event, in the order
they were added. Clicking a row asks for that event to be edited.
"""

from datetime import date
from typing import Sequence

from PySide6.QtWidgets import (
    QWidget, QLabel, QVBoxLayout, QHBoxLayout,
    QFrame, QSizePolicy, QScrollArea, QPushButton
)
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont, QMouseEvent, QFontMetrics

from backend.calendar_event import CalendarEvent, date_key
from backend.config import LayoutConfig, ColorsConfig, LabelsConfig, LocalizationConfig
from backend.month import DaysOfWeek

# Module-level configs (set by MainWindow at startup via calendar_widget)
_layout_config: LayoutConfig = LayoutConfig()
_colors_config: ColorsConfig = ColorsConfig()


def set_event_layout_config(config: LayoutConfig):
    """Set the layout configuration for event widgets."""
    global _layout_config
    _layout_config = config


def set_event_colors_config(config: ColorsConfig):
    """Set the colors configuration for event widgets."""
    global _colors_config
    _colors_config = config


def get_text_font() -> QFont:
    """Get the configured text font for events."""
    return QFont(_layout_config.text_font, _layout_config.text_font_size)


def sanitize_text(text: str) -> str:
    """Convert line breaks to spaces for single-line display."""
    if not text:
        return text
    return ' '.join(text.split())


class EventWidget(QFrame):
    """
    Widget representing a single event in the day list.

    Displays the time range and title on one line; the details are shown
    in the tooltip.
    """

    # Emits the event's index within its day
    clicked = Signal(int)

    def __init__(self, index: int, event_data: CalendarEvent, parent: QWidget = None):
        super().__init__(parent)
        self.index = index
        self.event_data = event_data

        self._setup_ui()
        self._apply_style()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 6, 8, 6)
        layout.setSpacing(12)

        text_font = get_text_font()
        self.setFont(text_font)

        # Fixed-width time column so titles line up
        self._time_label = QLabel(self.event_data.time_range)
        self._time_label.setFont(text_font)
        fm = QFontMetrics(text_font)
        self._time_label.setFixedWidth(fm.horizontalAdvance("00:00 - 00:00") + 8)
        layout.addWidget(self._time_label)

        title_font = QFont(text_font)
        title_font.setBold(True)
        self._title_label = QLabel(sanitize_text(self.event_data.title))
        self._title_label.setFont(title_font)
        self._title_label.setTextFormat(Qt.PlainText)
        self._title_label.setWordWrap(False)
        layout.addWidget(self._title_label, 1)

        self.setFrameStyle(QFrame.StyledPanel | QFrame.Plain)
        self.setCursor(Qt.PointingHandCursor)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Minimum)
        self._setup_tooltip()

    def _setup_tooltip(self) -> None:
        lines = [self.event_data.title, self.event_data.time_range]
        if self.event_data.details:
            details = self.event_data.details
            if len(details) > 200:
                details = details[:200] + "..."
            lines.append("")
            lines.append(details)
        self.setToolTip("\n".join(lines))

    def _apply_style(self) -> None:
        colors = _colors_config
        self.setStyleSheet(f"""
            EventWidget {{
                background-color: {colors.event_background};
                border-radius: 4px;
            }}
            EventWidget:hover {{
                background-color: {colors.event_hover_background};
            }}
            QLabel {{
                color: {colors.event_text};
                background: transparent;
                border: none;
            }}
        """)

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.LeftButton:
            self.clicked.emit(self.index)
        super().mousePressEvent(event)


class DayEventList(QWidget):
    """Panel listing the events of one day, with a button to add another."""

    # (date_key, index)
    event_activated = Signal(str, int)
    # date_key
    new_event_requested = Signal(str)

    def __init__(self, labels: LabelsConfig = None, localization: LocalizationConfig = None, parent=None):
        super().__init__(parent)
        self.labels = labels or LabelsConfig()
        self.localization = localization or LocalizationConfig()
        self._date = date.today()
        self._event_widgets: list[EventWidget] = []
        self._setup_ui()

    @property
    def date_key(self) -> str:
        return date_key(self._date)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)

        self._header = QLabel()
        header_font = QFont(get_text_font())
        header_font.setBold(True)
        self._header.setFont(header_font)
        self._header.setStyleSheet(f"color: {_colors_config.window_text};")
        layout.addWidget(self._header)

        sep = QFrame()
        sep.setFrameStyle(QFrame.HLine | QFrame.Sunken)
        layout.addWidget(sep)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        scroll.setFrameStyle(QFrame.NoFrame)

        list_widget = QWidget()
        self._list_layout = QVBoxLayout(list_widget)
        self._list_layout.setContentsMargins(0, 0, 0, 0)
        self._list_layout.setSpacing(4)

        self._empty_label = QLabel(self.labels.no_events)
        self._empty_label.setStyleSheet(f"color: {_colors_config.secondary_text};")
        self._list_layout.addWidget(self._empty_label)
        self._list_layout.addStretch()

        scroll.setWidget(list_widget)
        layout.addWidget(scroll, 1)

        self._new_event_btn = QPushButton(self.labels.button_new_event)
        self._new_event_btn.clicked.connect(lambda: self.new_event_requested.emit(self.date_key))
        layout.addWidget(self._new_event_btn)

    def _header_text(self) -> str:
        d = self._date
        weekday = self.localization.get_day_name(DaysOfWeek.column_of(d))
        month = self.localization.get_month_name(d.month)
        return self.labels.day_list_header.format(weekday=weekday, day=d.day, month=month, year=d.year)

    def set_day(self, d: date, events: Sequence[CalendarEvent]):
        """Show the given day and its events, replacing whatever was listed."""
        self._date = d
        self._header.setText(self._header_text())

        for widget in self._event_widgets:
            self._list_layout.removeWidget(widget)
            widget.deleteLater()
        self._event_widgets.clear()

        for index, event in enumerate(events):
            widget = EventWidget(index, event)
            widget.clicked.connect(self._on_event_clicked)
            # Insert before the trailing stretch
            self._list_layout.insertWidget(self._list_layout.count() - 1, widget)
            self._event_widgets.append(widget)

        self._empty_label.setVisible(not events)

    def event_widgets(self) -> list[EventWidget]:
        return list(self._event_widgets)

    def _on_event_clicked(self, index: int):
        self.event_activated.emit(self.date_key, index)
