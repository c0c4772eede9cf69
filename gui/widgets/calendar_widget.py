"""
Calendar Widget with the month grid view.
"""

from datetime import date
from typing import Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QFrame
)
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFontMetrics, QMouseEvent

from backend.config import LayoutConfig, LocalizationConfig, ColorsConfig, LabelsConfig
from backend.month import DAYS_IN_WEEK, WEEKS_IN_GRID, month_grid
from .event_widget import set_event_layout_config, set_event_colors_config

# Module-level configs (set by MainWindow at startup)
_layout_config: LayoutConfig = LayoutConfig()
_localization_config: LocalizationConfig = LocalizationConfig()
_colors_config: ColorsConfig = ColorsConfig()
_labels_config: LabelsConfig = LabelsConfig()


def set_layout_config(config: LayoutConfig):
    """Set the layout configuration for this module and event widget."""
    global _layout_config
    _layout_config = config
    # Also set for event widgets
    set_event_layout_config(config)


def set_localization_config(config: LocalizationConfig):
    """Set the localization configuration for this module."""
    global _localization_config
    _localization_config = config


def get_localization_config() -> LocalizationConfig:
    """Get the current localization configuration."""
    return _localization_config


def set_colors_config(config: ColorsConfig):
    """Set the colors configuration for this module and event widget."""
    global _colors_config
    _colors_config = config
    set_event_colors_config(config)


def get_colors_config() -> ColorsConfig:
    """Get the current colors configuration."""
    return _colors_config


def set_labels_config(config: LabelsConfig):
    """Set the labels configuration for this module."""
    global _labels_config
    _labels_config = config


def get_labels_config() -> LabelsConfig:
    """Get the current labels configuration."""
    return _labels_config


def get_interface_font() -> tuple[str, int]:
    """Get the configured interface font name and size."""
    return (_layout_config.interface_font, _layout_config.interface_font_size)


class MonthDayCell(QFrame):
    """Single day cell in month view."""

    clicked = Signal(date)
    double_clicked = Signal(date)

    def __init__(self, d: date, is_current_month: bool = True, parent=None):
        super().__init__(parent)
        self._date = d
        self.is_current_month = is_current_month
        self._selected = False
        self._event_count = 0
        self._setup_ui()

    @property
    def date(self):
        return self._date

    @property
    def event_count(self) -> int:
        return self._event_count

    @property
    def selected(self) -> bool:
        return self._selected

    def _setup_ui(self):
        self.setFrameStyle(QFrame.Box | QFrame.Plain)
        # Minimum: day number + event count line + padding
        fm = QFontMetrics(self.font())
        min_height = 2 * fm.height() + 12
        min_width = fm.horizontalAdvance("00") + 16
        self.setMinimumSize(max(min_width, 60), max(min_height, 50))
        self.setCursor(Qt.PointingHandCursor)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(2)

        self._day_label = QLabel(str(self._date.day))
        self._day_label.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        layout.addWidget(self._day_label)

        self._count_label = QLabel()
        self._count_label.setAlignment(Qt.AlignRight | Qt.AlignBottom)
        layout.addStretch()
        layout.addWidget(self._count_label)

        self._update_style()

    def _update_style(self):
        colors = get_colors_config()
        bg = colors.month_cell_current if self.is_current_month else colors.month_cell_other
        text = colors.month_text_current if self.is_current_month else colors.month_text_other
        border = colors.selected_day_border if self._selected else colors.cell_border
        border_width = 2 if self._selected else 1

        if self._date == date.today():
            self._day_label.setStyleSheet(f"color: {colors.today_highlight_text}; font-weight: bold; background: {colors.today_highlight_background}; border-radius: 10px; padding: 2px 6px; border: none;")
        else:
            self._day_label.setStyleSheet(f"color: {text}; border: none;")
        self._count_label.setStyleSheet(f"color: {colors.event_count_text}; border: none;")

        self.setStyleSheet(f"MonthDayCell {{ background-color: {bg}; border: {border_width}px solid {border}; }}")

    def set_date(self, d: date, is_current_month: bool = True):
        self._date = d
        self.is_current_month = is_current_month
        self._day_label.setText(str(d.day))
        self.set_event_count(0)
        self._update_style()

    def set_event_count(self, count: int):
        self._event_count = count
        labels = get_labels_config()
        if count == 0:
            self._count_label.setText("")
        elif count == 1:
            self._count_label.setText(labels.event_count_one)
        else:
            self._count_label.setText(labels.event_count_many.format(count=count))

    def set_selected(self, selected: bool):
        if selected != self._selected:
            self._selected = selected
            self._update_style()

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.LeftButton:
            self.clicked.emit(self._date)
        super().mousePressEvent(event)

    def mouseDoubleClickEvent(self, event: QMouseEvent):
        if event.button() == Qt.LeftButton:
            self.double_clicked.emit(self._date)
        super().mouseDoubleClickEvent(event)


class MonthView(QWidget):
    """Month view showing a six-week calendar grid starting on Sunday."""

    day_clicked = Signal(date)
    day_double_clicked = Signal(date)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._year = date.today().year
        self._month = date.today().month
        self._selected_date: Optional[date] = None
        self._cells: list[MonthDayCell] = []
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        # Day name headers
        header = QWidget()
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(0, 0, 0, 0)
        header_layout.setSpacing(1)

        self._header_labels = []
        font_name, font_size = get_interface_font()
        localization = get_localization_config()
        colors = get_colors_config()
        for i in range(DAYS_IN_WEEK):
            label = QLabel(localization.get_day_name(i))
            label.setAlignment(Qt.AlignCenter)
            label.setStyleSheet(f"font-family: '{font_name}'; font-size: {font_size}pt; font-weight: bold; padding: 8px; color: {colors.header_text}; background: {colors.header_background};")
            header_layout.addWidget(label, 1)
            self._header_labels.append(label)

        layout.addWidget(header)

        # Grid of day cells
        grid_widget = QWidget()
        self._grid_layout = QGridLayout(grid_widget)
        self._grid_layout.setContentsMargins(0, 0, 0, 0)
        self._grid_layout.setSpacing(1)

        for col in range(DAYS_IN_WEEK):
            self._grid_layout.setColumnStretch(col, 1)

        for row in range(WEEKS_IN_GRID):
            for col in range(DAYS_IN_WEEK):
                cell = MonthDayCell(date.today())
                cell.clicked.connect(self.day_clicked.emit)
                cell.double_clicked.connect(self.day_double_clicked.emit)
                self._grid_layout.addWidget(cell, row, col)
                self._cells.append(cell)

        layout.addWidget(grid_widget, 1)
        self._update_grid()

    def _update_grid(self):
        dates = [d for week in month_grid(self._year, self._month) for d in week]
        for cell, cell_date in zip(self._cells, dates):
            cell.set_date(cell_date, cell_date.month == self._month)
            cell.set_selected(cell_date == self._selected_date)

    def set_month(self, year: int, month: int):
        self._year = year
        self._month = month
        self._update_grid()

    def get_month(self) -> tuple[int, int]:
        return self._year, self._month

    def set_selected_date(self, d: Optional[date]):
        self._selected_date = d
        for cell in self._cells:
            cell.set_selected(cell.date == d)

    def get_visible_dates(self) -> list[date]:
        return [cell.date for cell in self._cells]

    def set_event_counts(self, counts: dict[date, int]):
        """Show the number of events on each visible day; missing days count as zero."""
        for cell in self._cells:
            cell.set_event_count(counts.get(cell.date, 0))

    def cell_for(self, d: date) -> Optional[MonthDayCell]:
        for cell in self._cells:
            if cell.date == d:
                return cell
        return None
