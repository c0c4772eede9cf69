"""Tests for the EventEditor window's new/edit flows."""
import pytest

from backend.calendar_event import CalendarEvent
from backend.config import Config, EditorConfig
from backend.errors import InvalidIndex
from gui.event_editor import EventEditor


@pytest.fixture
def editor(qapp, store, config):
    return EventEditor(store, config)


@pytest.fixture
def saved(editor):
    """Arguments of every event_saved emission."""
    calls = []
    editor.event_saved.connect(lambda key, index, event: calls.append((key, index, event)))
    return calls


@pytest.fixture
def warnings(editor, monkeypatch):
    """Capture warnings instead of opening message boxes."""
    shown = []
    monkeypatch.setattr(editor, "_show_warning", lambda title, message: shown.append(message))
    return shown


class TestNewEvent:

    def test_fields_are_reset(self, editor):
        editor.open_new("2020.5.24")

        assert editor.is_new
        assert editor.date_key == "2020.5.24"
        assert editor.current_event() == CalendarEvent(title="", details="", start_time="06:00", end_time="06:00")
        assert not editor.details_expanded

    def test_save_appends_and_notifies(self, editor, store, saved, standup):
        editor.open_new("2020.5.24")
        editor.set_fields("Standup", "09:00", "09:30")

        assert editor.save()

        assert store.get_events("2020.5.24") == (standup,)
        assert saved == [("2020.5.24", 0, standup)]

    def test_save_appends_after_existing(self, editor, store, saved, sample_events):
        store.add_event("2020.5.24", sample_events[0])
        editor.open_new("2020.5.24")
        editor.set_fields("Lunch", "12:00", "13:00", "With the team")

        editor.save()

        assert store.get_events("2020.5.24") == (sample_events[0], sample_events[1])
        assert saved[0][1] == 1

    def test_close_discards(self, editor, store, saved):
        editor.open_new("2020.5.24")
        editor.set_fields("Never saved", "09:00", "10:00")

        editor.close()

        assert store.get_events("2020.5.24") == ()
        assert saved == []

    def test_empty_title_is_rejected(self, editor, store, saved, warnings):
        editor.open_new("2020.5.24")
        editor.set_fields("   ", "09:00", "10:00")

        assert not editor.save()

        assert store.get_events("2020.5.24") == ()
        assert saved == []
        assert len(warnings) == 1

    def test_end_before_start_is_rejected(self, editor, store, saved, warnings):
        editor.open_new("2020.5.24")
        editor.set_fields("Backwards", "10:00", "09:00")

        assert not editor.save()

        assert store.get_events("2020.5.24") == ()
        assert saved == []
        assert "before start time" in warnings[0]

    def test_default_time_follows_configured_slots(self, qapp, store):
        config = Config(editor=EditorConfig(first_slot="08:00", last_slot="18:00", slot_minutes=60))
        editor = EventEditor(store, config)
        editor.open_new("2020.5.24")

        assert editor.current_event().start_time == "08:00"
        assert editor.current_event().end_time == "08:00"
        assert editor._from_combo.findText("06:00") < 0

        editor._title_edit.setText("Planning")
        editor._from_combo.setCurrentText("09:00")

        assert editor.save()
        assert store.get_events("2020.5.24") == (
            CalendarEvent(title="Planning", details="", start_time="09:00", end_time="09:00"),
        )


class TestEditEvent:

    def test_fields_are_prepopulated(self, editor, store, sample_events):
        for event in sample_events:
            store.add_event("2020.5.24", event)

        editor.open_existing("2020.5.24", 1)

        assert not editor.is_new
        assert editor.event_index == 1
        assert editor.current_event() == sample_events[1]

    def test_save_replaces_slot(self, editor, store, saved, sample_events):
        e0, e1, e2 = sample_events
        store.add_event("2020.5.24", e0)
        store.add_event("2020.5.24", e1)

        editor.open_existing("2020.5.24", 1)
        editor.set_fields(e2.title, e2.start_time, e2.end_time, e2.details)
        editor.save()

        assert store.get_events("2020.5.24") == (e0, e2)
        assert saved == [("2020.5.24", 1, e2)]

    def test_close_discards_edits(self, editor, store, saved, sample_events):
        store.add_event("2020.5.24", sample_events[0])

        editor.open_existing("2020.5.24", 0)
        editor.set_fields("Changed", "20:00", "21:00", "changed")
        editor.close()

        assert store.get_events("2020.5.24") == (sample_events[0],)
        assert saved == []

    def test_unknown_index_raises(self, editor):
        with pytest.raises(InvalidIndex):
            editor.open_existing("2020.5.24", 0)

    def test_time_outside_slots_round_trips(self, editor, store):
        early = CalendarEvent(title="Run", details="", start_time="05:15", end_time="05:45")
        store.add_event("2020.5.24", early)

        editor.open_existing("2020.5.24", 0)

        assert editor.current_event() == early


class TestEditorWidgets:

    def test_details_button_expands(self, editor):
        editor.open_new("2020.5.24")
        editor._details_btn.click()
        assert editor.details_expanded

        editor.open_new("2020.5.25")
        assert not editor.details_expanded

    def test_start_change_moves_end_forward(self, editor):
        editor.open_new("2020.5.24")
        editor._from_combo.setCurrentText("10:00")
        assert editor.current_event().end_time == "10:00"

    def test_start_change_keeps_later_end(self, editor):
        editor.open_new("2020.5.24")
        editor._to_combo.setCurrentText("12:00")
        editor._from_combo.setCurrentText("10:00")
        assert editor.current_event().end_time == "12:00"
