#!/usr/bin/env python3
"""
Daybook Calendar - A PySide6 desktop calendar with a month grid and per-day events.

This is the main entry point for the application.
"""

import sys
import argparse
from pathlib import Path

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt

from backend.config import Config
from backend.debug import set_debug, debug_print
from backend.event_store import EventStore
from gui.main_window import MainWindow


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Daybook Calendar - A desktop calendar with a month grid and per-day events"
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Path to configuration file (default: auto-detect)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output"
    )
    return parser.parse_args(argv)


def main():
    """Main entry point."""
    args = parse_args()
    set_debug(args.debug)

    # Enable high DPI scaling
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    # Create application
    app = QApplication(sys.argv)
    app.setApplicationName("Daybook Calendar")
    app.setApplicationVersion("0.1")

    # Set application style
    app.setStyle("Fusion")

    # Load configuration
    try:
        config = Config.load(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        print(f"\nThe default location is {Config.get_default_config_path()}")
        print("\nExample configuration:")
        print("""
[Layout]
text_font = "Sans Serif"
text_font_size = 14

[Editor]
first_slot = "06:00"
last_slot = "23:30"
slot_minutes = 30
""")
        sys.exit(1)
    except Exception as e:
        print(f"Error loading configuration: {e}")
        sys.exit(1)

    debug_print(f"Loaded configuration from: {config.source_path or 'built-in defaults'}")

    # One store for the whole process, handed to the window
    event_store = EventStore()

    window = MainWindow(config, event_store)
    window.show()

    # Run event loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
