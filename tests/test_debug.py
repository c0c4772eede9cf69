"""Tests for timestamped debug output."""
import re

import pytest

from backend.debug import debug_print, set_debug


@pytest.fixture
def debug_on():
    set_debug(True)
    yield
    set_debug(False)


class TestDebugPrint:

    def test_silent_by_default(self, capsys):
        set_debug(False)
        debug_print("Added event")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_enabled_writes_timestamped_line_to_stderr(self, debug_on, capsys):
        debug_print("Added event 'Standup' on 2020.5.24 at index 0")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert re.fullmatch(r"\[\d{2}:\d{2}:\d{2}\] Added event 'Standup' on 2020\.5\.24 at index 0\n", captured.err)

    def test_store_reports_mutations(self, debug_on, capsys, store, standup):
        store.add_event("2020.5.24", standup)
        store.modify_event("2020.5.24", 0, standup)

        lines = capsys.readouterr().err.splitlines()
        assert len(lines) == 2
        assert lines[0].endswith("Added event 'Standup' on 2020.5.24 at index 0")
        assert lines[1].endswith("Modified event 0 on 2020.5.24: 'Standup'")
