"""In-memory Event Store - Imperative Shell.

Owns the canonical set of events for one service instance. State lives on
the instance (no module globals), so tests can build isolated stores.

Events are frozen dataclasses; every mutation swaps in a new record, so
callers holding an Event from a read never see it change underneath them.
All mutations run under one lock to keep the participant count within
bounds when handlers run concurrently.
"""

import dataclasses
import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Callable

from event_finder.core.errors import EventFullError, EventNotFoundError
from event_finder.core.event import Event, format_timestamp, payload_to_fields


logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


class EventStore:
    """Process-lifetime store of events, keyed by id in insertion order."""

    def __init__(
        self,
        now: Callable[[], datetime] | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        """Initialize an empty store.

        Args:
            now: Clock used for createdAt (defaults to UTC now)
            id_factory: Generator for new ids (defaults to uuid4)
        """
        self._events: dict[str, Event] = {}
        self._order: list[str] = []
        self._lock = threading.Lock()
        self._now = now or _utc_now
        self._new_id = id_factory or _new_id

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, event_id: str) -> bool:
        return event_id in self._events

    def create_event(self, data: dict[str, Any]) -> Event:
        """Create and store a new event.

        The payload is expected to be validated already. Any supplied
        currentParticipants is ignored; new events start empty.

        Args:
            data: Creation payload with camelCase keys

        Returns:
            The stored Event
        """
        fields = payload_to_fields(data)
        fields.pop("current_participants", None)

        with self._lock:
            event_id = self._new_id()
            while event_id in self._events:
                event_id = self._new_id()

            event = Event(
                id=event_id,
                current_participants=0,
                created_at=format_timestamp(self._now()),
                **fields,
            )
            self._events[event_id] = event
            self._order.append(event_id)

        logger.info("Created event %s (%s)", event.id, event.title)
        return event

    def list_events(self) -> list[Event]:
        """Return a snapshot of all events."""
        with self._lock:
            return [self._events[event_id] for event_id in self._order]

    def get_event(self, event_id: str) -> Event | None:
        """Return the event with this id, or None."""
        return self._events.get(event_id)

    def _require(self, event_id: str) -> Event:
        """Get an event or raise. Caller must hold the lock."""
        event = self._events.get(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def update_event(self, event_id: str, data: dict[str, Any]) -> Event:
        """Merge supplied fields into an existing event.

        id and createdAt are never overwritten. Cross-field invariants
        are not re-checked.

        Args:
            event_id: Event to update
            data: Partial payload with camelCase keys

        Returns:
            The updated Event

        Raises:
            EventNotFoundError: If no event has this id
        """
        fields = payload_to_fields(data)

        with self._lock:
            event = dataclasses.replace(self._require(event_id), **fields)
            self._events[event_id] = event

        logger.info("Updated event %s: %s", event_id, sorted(fields))
        return event

    def delete_event(self, event_id: str) -> bool:
        """Remove an event.

        Returns:
            True if an event was found and removed
        """
        with self._lock:
            if event_id not in self._events:
                return False
            del self._events[event_id]
            self._order.remove(event_id)

        logger.info("Deleted event %s", event_id)
        return True

    def join_event(self, event_id: str) -> Event:
        """Add one participant.

        Raises:
            EventNotFoundError: If no event has this id
            EventFullError: If the event is at capacity (count unchanged)
        """
        with self._lock:
            event = self._require(event_id)
            if event.is_full:
                raise EventFullError(event_id, event.max_participants)

            event = dataclasses.replace(
                event,
                current_participants=event.current_participants + 1,
            )
            self._events[event_id] = event

        logger.info(
            "Joined event %s (%d/%d)",
            event_id,
            event.current_participants,
            event.max_participants,
        )
        return event

    def leave_event(self, event_id: str) -> Event:
        """Remove one participant, never going below zero.

        Raises:
            EventNotFoundError: If no event has this id
        """
        with self._lock:
            event = self._require(event_id)
            if event.current_participants > 0:
                event = dataclasses.replace(
                    event,
                    current_participants=event.current_participants - 1,
                )
                self._events[event_id] = event

        logger.info(
            "Left event %s (%d/%d)",
            event_id,
            event.current_participants,
            event.max_participants,
        )
        return event
