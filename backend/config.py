"""
Configuration parser for Daybook Calendar.

Handles TOML file parsing into dataclasses. Every setting has a default,
so the application also runs without any configuration file.
"""

import tomllib
import os
from pathlib import Path
from dataclasses import dataclass, field, fields
from typing import Optional

from .calendar_event import time_slots
from .debug import debug_print
from .month import DaysOfWeek


@dataclass
class LayoutConfig:
    """Configuration for UI fonts."""
    interface_font: str = "Sans"
    interface_font_size: int = 12
    text_font: str = "Sans Serif"
    text_font_size: int = 14


@dataclass
class EditorConfig:
    """Configuration for the event editor's time dropdowns."""
    first_slot: str = "06:00"
    last_slot: str = "23:30"
    slot_minutes: int = 30

    def get_time_slots(self) -> list[str]:
        return time_slots(self.first_slot, self.last_slot, self.slot_minutes)


@dataclass
class BindingsConfig:
    """Configuration for keyboard bindings."""
    next: str = "Right"  # Key to go to next month
    prev: str = "Left"   # Key to go to previous month
    new_event: str = ""  # Key to create an event on the selected day


@dataclass
class ColorsConfig:
    """Configuration for UI colors."""
    # Window
    window_background: str = "#333333"
    window_text: str = "#ffffff"

    # Month grid
    header_background: str = "#262626"
    header_text: str = "#ffffff"
    cell_border: str = "#4d4d4d"
    month_cell_current: str = "#404040"
    month_cell_other: str = "#2e2e2e"
    month_text_current: str = "#ffffff"
    month_text_other: str = "#7f7f7f"
    today_highlight_background: str = "#990000"
    today_highlight_text: str = "#ffffff"
    selected_day_border: str = "#e6b800"
    event_count_text: str = "#e6b800"

    # Day event list
    event_background: str = "#4d4d4d"
    event_hover_background: str = "#5c5c5c"
    event_text: str = "#ffffff"
    secondary_text: str = "rgba(255, 255, 255, 0.6)"

    # Editor buttons
    button_save_background: str = "#990000"
    button_save_text: str = "#ffffff"
    button_details_background: str = "#808080"
    button_details_text: str = "#ffffff"


@dataclass
class LabelsConfig:
    """Configuration for UI labels."""
    # Main window
    window_title: str = "Daybook Calendar"
    button_prev: str = "◀"
    button_next: str = "▶"
    button_today: str = "Today"
    button_new_event: str = "New Event"
    day_list_header: str = "{weekday}, {day} {month} {year}"
    no_events: str = "No events"
    event_count_one: str = "1 event"
    event_count_many: str = "{count} events"

    # Event editor
    editor_title: str = "Event Editor"
    editor_title_icon: str = "✍"
    editor_clock_icon: str = "⏱"
    field_from: str = "From"
    field_to: str = "to"
    default_title: str = "Add an event"
    default_details: str = "Add more details"
    button_save: str = "Save"
    button_details: str = "Add details"


@dataclass
class LocalizationConfig:
    """Configuration for localized day and month names."""
    # Sunday first, matching the grid
    day_names: list[str] = None
    month_names: list[str] = None

    def __post_init__(self):
        if self.day_names is None:
            self.day_names = [day.short_name for day in DaysOfWeek]
        if self.month_names is None:
            self.month_names = [
                "January", "February", "March", "April", "May", "June",
                "July", "August", "September", "October", "November", "December"
            ]

    def get_day_name(self, column: int) -> str:
        """Get localized day name for a grid column (0=Sunday, 6=Saturday)."""
        return self.day_names[column] if 0 <= column < len(self.day_names) else ""

    def get_month_name(self, month: int) -> str:
        """Get localized month name (1=January, 12=December)."""
        return self.month_names[month - 1] if 1 <= month <= len(self.month_names) else ""


@dataclass
class Config:
    """Main configuration container for Daybook Calendar."""

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    editor: EditorConfig = field(default_factory=EditorConfig)
    bindings: BindingsConfig = field(default_factory=BindingsConfig)
    localization: LocalizationConfig = field(default_factory=LocalizationConfig)
    colors: ColorsConfig = field(default_factory=ColorsConfig)
    labels: LabelsConfig = field(default_factory=LabelsConfig)
    source_path: Optional[Path] = None

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get the default configuration file path."""
        xdg_config = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(xdg_config) / 'daybook-calendar' / 'daybook-calendar.toml'

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'Config':
        """
        Load configuration from a TOML file.

        Without an explicit path the default location is tried, and built-in
        defaults are used if nothing is there. An explicit path must exist.
        """
        if config_path is None:
            config_path = cls.get_default_config_path()
            if not config_path.exists():
                debug_print(f"No config file at {config_path}, using defaults")
                return cls()
        elif not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'rb') as f:
            data = tomllib.load(f)
        debug_print(f"TOML data keys: {list(data.keys())}")

        layout = _section(LayoutConfig, data.get('Layout', {}))
        editor = _section(EditorConfig, data.get('Editor', {}))
        bindings = _section(BindingsConfig, data.get('Bindings', {}))
        colors = _section(ColorsConfig, data.get('Colors', {}))
        labels = _section(LabelsConfig, data.get('Labels', {}))

        # Parse Localization section (space-separated names)
        localization_data = data.get('Localization', {})
        day_names_str = localization_data.get('day_names', '')
        month_names_str = localization_data.get('month_names', '')
        localization = LocalizationConfig(
            day_names=day_names_str.split() if day_names_str else None,
            month_names=month_names_str.split() if month_names_str else None
        )

        # Fail at load time rather than when the editor first opens
        editor.get_time_slots()

        return cls(
            layout=layout,
            editor=editor,
            bindings=bindings,
            localization=localization,
            colors=colors,
            labels=labels,
            source_path=config_path
        )


def _section(section_cls, values: dict):
    """Build a config section from a TOML table, ignoring unknown keys."""
    known = {f.name for f in fields(section_cls)}
    for key in values:
        if key not in known:
            debug_print(f"Ignoring unknown setting '{key}' for {section_cls.__name__}")
    return section_cls(**{k: v for k, v in values.items() if k in known})
