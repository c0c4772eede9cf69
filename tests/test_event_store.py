"""Unit tests for the in-memory EventStore."""
import pytest

from backend.calendar_event import CalendarEvent
from backend.errors import InvalidIndex
from backend.event_store import EventStore, EventStoreBase


class TestAddAndGet:
    """Appending events and reading them back."""

    def test_fresh_store_is_empty(self, store):
        assert store.get_events("2020.5.24") == ()
        assert store.get_events("1999.12.31") == ()
        assert store.event_count() == 0

    def test_single_event_round_trip(self, store, standup):
        store.add_event("2020.5.24", standup)

        events = store.get_events("2020.5.24")
        assert len(events) == 1
        assert events[0] == CalendarEvent(title="Standup", details="", start_time="09:00", end_time="09:30")

    def test_events_keep_call_order(self, store, sample_events):
        for event in sample_events:
            store.add_event("2020.5.24", event)

        assert list(store.get_events("2020.5.24")) == sample_events

    def test_add_returns_index(self, store, sample_events):
        indices = [store.add_event("2020.5.24", event) for event in sample_events]
        assert indices == [0, 1, 2]

    def test_duplicates_are_kept(self, store, standup):
        store.add_event("2020.5.24", standup)
        store.add_event("2020.5.24", standup)
        assert store.get_events("2020.5.24") == (standup, standup)

    def test_days_are_independent(self, store, sample_events):
        store.add_event("2020.5.24", sample_events[0])
        store.add_event("2020.5.25", sample_events[1])

        assert store.get_events("2020.5.24") == (sample_events[0],)
        assert store.get_events("2020.5.25") == (sample_events[1],)
        assert store.get_events("2020.5.26") == ()

    def test_returned_sequence_is_a_snapshot(self, store, standup, sample_events):
        store.add_event("2020.5.24", standup)
        events = store.get_events("2020.5.24")

        store.add_event("2020.5.24", sample_events[1])

        assert events == (standup,)
        assert len(store.get_events("2020.5.24")) == 2


class TestModify:
    """Replacing events by index."""

    def test_modify_replaces_only_that_slot(self, store, sample_events):
        for event in sample_events:
            store.add_event("2020.5.24", event)
        replacement = CalendarEvent(title="Demo", details="", start_time="10:00", end_time="11:00")

        store.modify_event("2020.5.24", 1, replacement)

        assert store.get_events("2020.5.24") == (sample_events[0], replacement, sample_events[2])

    def test_modify_second_of_two(self, store, sample_events):
        e0, e1, e2 = sample_events
        store.add_event("2020.5.24", e0)
        store.add_event("2020.5.24", e1)

        store.modify_event("2020.5.24", 1, e2)

        assert list(store.get_events("2020.5.24")) == [e0, e2]

    @pytest.mark.parametrize("index", [2, 5, -1])
    def test_modify_out_of_range_raises(self, store, sample_events, index):
        store.add_event("2020.5.24", sample_events[0])
        store.add_event("2020.5.24", sample_events[1])

        with pytest.raises(InvalidIndex) as exc_info:
            store.modify_event("2020.5.24", index, sample_events[2])

        assert exc_info.value.date_key == "2020.5.24"
        assert exc_info.value.index == index
        assert exc_info.value.size == 2
        assert store.get_events("2020.5.24") == (sample_events[0], sample_events[1])

    def test_modify_on_empty_day_raises(self, store, standup):
        with pytest.raises(InvalidIndex):
            store.modify_event("2020.5.24", 0, standup)
        assert store.get_events("2020.5.24") == ()

    def test_invalid_index_is_an_index_error(self, store, standup):
        with pytest.raises(IndexError):
            store.modify_event("2020.5.24", 0, standup)


class TestQueries:
    """Lookups and counts."""

    def test_get_event(self, store, sample_events):
        for event in sample_events:
            store.add_event("2020.5.24", event)
        assert store.get_event("2020.5.24", 2) == sample_events[2]

    def test_get_event_bad_index(self, store):
        with pytest.raises(InvalidIndex):
            store.get_event("2020.5.24", 0)

    def test_event_count(self, store, sample_events):
        store.add_event("2020.5.24", sample_events[0])
        store.add_event("2020.5.24", sample_events[1])
        store.add_event("2020.6.1", sample_events[2])

        assert store.event_count("2020.5.24") == 2
        assert store.event_count("2020.6.1") == 1
        assert store.event_count("2020.6.2") == 0
        assert store.event_count() == 3


def test_store_implements_interface():
    assert isinstance(EventStore(), EventStoreBase)


def test_interface_cannot_be_instantiated():
    with pytest.raises(TypeError):
        EventStoreBase()
