"""Tests for the in-memory EventStore.

Each test builds its own store, so there is no shared state.
"""

import threading
from datetime import datetime, timezone
from itertools import count

import pytest

from event_finder.core.errors import EventFullError, EventNotFoundError
from event_finder.shell.event_store import EventStore


FIXED_NOW = datetime(2025, 10, 1, 8, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def store():
    """Store with a fixed clock and predictable ids."""
    ids = count(1)
    return EventStore(now=lambda: FIXED_NOW, id_factory=lambda: f"evt-{next(ids)}")


@pytest.fixture
def payload():
    """A valid creation payload."""
    return {
        "title": "Cooking Class",
        "description": "Indian cuisine",
        "location": "Indiranagar, Bangalore",
        "date": "2025-11-11T16:00:00Z",
        "maxParticipants": 2,
        "latitude": 12.9719,
        "longitude": 77.6412,
        "category": "Food",
    }


class TestCreateEvent:
    """Tests for create_event()."""

    def test_assigns_id_and_timestamp(self, store, payload):
        event = store.create_event(payload)

        assert event.id == "evt-1"
        assert event.created_at == "2025-10-01T08:00:00.000Z"
        assert event.current_participants == 0

    def test_copies_fields_verbatim(self, store, payload):
        event = store.create_event(payload)

        assert event.title == "Cooking Class"
        assert event.date == "2025-11-11T16:00:00Z"
        assert event.max_participants == 2
        assert event.latitude == 12.9719
        assert event.category == "Food"

    def test_ignores_supplied_participant_count(self, store, payload):
        payload["currentParticipants"] = 2
        assert store.create_event(payload).current_participants == 0

    def test_ignores_supplied_id(self, store, payload):
        payload["id"] = "hijack"
        assert store.create_event(payload).id == "evt-1"

    def test_ids_are_unique(self, payload):
        """Default uuid4 ids never repeat."""
        store = EventStore()
        ids = {store.create_event(payload).id for _ in range(50)}
        assert len(ids) == 50

    def test_regenerates_colliding_id(self, payload):
        generated = iter(["dup", "dup", "fresh"])
        store = EventStore(id_factory=lambda: next(generated))

        first = store.create_event(payload)
        second = store.create_event(payload)

        assert (first.id, second.id) == ("dup", "fresh")

    def test_increments_size(self, store, payload):
        store.create_event(payload)
        store.create_event(payload)
        assert len(store) == 2


class TestReadEvents:
    """Tests for list_events() and get_event()."""

    def test_list_is_snapshot(self, store, payload):
        store.create_event(payload)
        snapshot = store.list_events()

        store.create_event(payload)

        assert len(snapshot) == 1
        assert len(store.list_events()) == 2

    def test_snapshot_records_are_not_mutated_by_join(self, store, payload):
        event = store.create_event(payload)
        before = store.list_events()[0]

        store.join_event(event.id)

        assert before.current_participants == 0
        assert store.get_event(event.id).current_participants == 1

    def test_get_event(self, store, payload):
        event = store.create_event(payload)
        assert store.get_event(event.id) == event

    def test_get_missing_returns_none(self, store):
        assert store.get_event("nope") is None

    def test_contains(self, store, payload):
        event = store.create_event(payload)
        assert event.id in store
        assert "nope" not in store


class TestUpdateEvent:
    """Tests for update_event()."""

    def test_merges_fields(self, store, payload):
        event = store.create_event(payload)
        updated = store.update_event(event.id, {"title": "Baking Class", "maxParticipants": 8})

        assert updated.title == "Baking Class"
        assert updated.max_participants == 8
        assert updated.location == event.location
        assert store.get_event(event.id) == updated

    def test_keeps_id_and_created_at(self, store, payload):
        event = store.create_event(payload)
        updated = store.update_event(event.id, {"id": "other", "createdAt": "never"})

        assert updated.id == event.id
        assert updated.created_at == event.created_at

    def test_does_not_recheck_invariants(self, store, payload):
        event = store.create_event(payload)
        updated = store.update_event(event.id, {"currentParticipants": 10})

        assert updated.current_participants == 10
        assert updated.max_participants == 2

    def test_missing_raises(self, store):
        with pytest.raises(EventNotFoundError):
            store.update_event("nope", {"title": "x"})


class TestDeleteEvent:
    """Tests for delete_event()."""

    def test_delete_existing(self, store, payload):
        event = store.create_event(payload)
        store.create_event(payload)

        assert store.delete_event(event.id) is True
        assert len(store) == 1
        assert store.get_event(event.id) is None
        assert event.id not in [e.id for e in store.list_events()]

    def test_delete_missing(self, store, payload):
        store.create_event(payload)

        assert store.delete_event("nope") is False
        assert len(store) == 1


class TestJoinLeave:
    """Tests for join_event() and leave_event()."""

    def test_join_increments(self, store, payload):
        event = store.create_event(payload)
        joined = store.join_event(event.id)

        assert joined.current_participants == 1

    def test_join_full_raises_without_change(self, store, payload):
        event = store.create_event(payload)
        store.join_event(event.id)
        store.join_event(event.id)

        with pytest.raises(EventFullError) as exc_info:
            store.join_event(event.id)

        assert exc_info.value.event_id == event.id
        assert store.get_event(event.id).current_participants == 2

    def test_join_missing_raises(self, store):
        with pytest.raises(EventNotFoundError):
            store.join_event("nope")

    def test_leave_decrements(self, store, payload):
        event = store.create_event(payload)
        store.join_event(event.id)

        assert store.leave_event(event.id).current_participants == 0

    def test_leave_at_zero_is_noop(self, store, payload):
        event = store.create_event(payload)
        left = store.leave_event(event.id)

        assert left.current_participants == 0
        assert left == event

    def test_leave_missing_raises(self, store):
        with pytest.raises(EventNotFoundError):
            store.leave_event("nope")

    def test_concurrent_joins_respect_capacity(self, payload):
        """Parallel joins never push the count past capacity."""
        store = EventStore()
        payload["maxParticipants"] = 25
        event = store.create_event(payload)
        outcomes = []

        def join():
            try:
                store.join_event(event.id)
                outcomes.append("joined")
            except EventFullError:
                outcomes.append("full")

        threads = [threading.Thread(target=join) for _ in range(60)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert outcomes.count("joined") == 25
        assert outcomes.count("full") == 35
        assert store.get_event(event.id).current_participants == 25
