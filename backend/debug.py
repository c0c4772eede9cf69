"""
Debug output for Daybook Calendar.

Messages are timestamped and written to stderr, only when debug output has
been switched on (``--debug`` on the command line).
"""

import sys
from datetime import datetime

_debug_enabled = False


def set_debug(enabled: bool) -> None:
    global _debug_enabled
    _debug_enabled = enabled


def debug_print(message: str) -> None:
    """Print a timestamped debug line to stderr if debugging is enabled."""
    if not _debug_enabled:
        return
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}", file=sys.stderr)
