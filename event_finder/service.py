"""Event Service - Wires Functional Core and Imperative Shell.

This module coordinates validation and querying (pure core) with the
event store (stateful shell). The HTTP layer talks only to this class.
"""

import logging
from typing import Any

from event_finder.core.errors import EventNotFoundError, EventValidationError
from event_finder.core.event import Event
from event_finder.core.query import EventMatch, EventQuery, query_events
from event_finder.core.validation import (
    ValidationResult,
    parse_query_params,
    validate_event_data,
    validate_event_update,
)
from event_finder.shell.event_store import EventStore


logger = logging.getLogger(__name__)


def _raise_if_invalid(result: ValidationResult) -> None:
    if not result.valid:
        raise EventValidationError(result.errors, result.message)


class EventService:
    """Validates requests and runs them against an EventStore."""

    def __init__(self, store: EventStore | None = None) -> None:
        """Initialize service.

        Args:
            store: Event store (a new empty store if not provided)
        """
        self.store = store if store is not None else EventStore()

    def seed(self, payloads: list[dict[str, Any]]) -> list[Event]:
        """Create events from payloads, skipping invalid ones.

        Args:
            payloads: Creation payloads

        Returns:
            The created events
        """
        created = []
        for payload in payloads:
            result = validate_event_data(payload)
            if not result.valid:
                logger.warning("Skipping seed event %r: %s", payload.get("title"), result.message)
                continue
            created.append(self.store.create_event(payload))

        logger.info("Seeded %d events", len(created))
        return created

    def create_event(self, data: dict[str, Any]) -> Event:
        """Validate and create an event.

        Raises:
            EventValidationError: If the payload is invalid
        """
        _raise_if_invalid(validate_event_data(data))
        return self.store.create_event(data)

    def list_events(
        self,
        location: str | None = None,
        category: str | None = None,
        date: str | None = None,
        latitude: str | None = None,
        longitude: str | None = None,
        radius: str | None = None,
    ) -> list[EventMatch]:
        """List events matching raw query-string filters.

        Raises:
            EventValidationError: If the geo parameters are incomplete or invalid
        """
        query, result = parse_query_params(
            location=location,
            category=category,
            date=date,
            latitude=latitude,
            longitude=longitude,
            radius=radius,
        )
        _raise_if_invalid(result)
        return self.query(query)

    def query(self, query: EventQuery | None = None) -> list[EventMatch]:
        """Run an already-built query against the current snapshot."""
        matches = query_events(self.store.list_events(), query)
        logger.debug("Query %s matched %d events", query, len(matches))
        return matches

    def get_event(self, event_id: str) -> Event:
        """Fetch one event.

        Raises:
            EventNotFoundError: If no event has this id
        """
        event = self.store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def update_event(self, event_id: str, data: dict[str, Any]) -> Event:
        """Validate a partial payload and merge it into an event.

        Raises:
            EventValidationError: If the payload is invalid
            EventNotFoundError: If no event has this id
        """
        _raise_if_invalid(validate_event_update(data))
        return self.store.update_event(event_id, data)

    def delete_event(self, event_id: str) -> None:
        """Delete an event.

        Raises:
            EventNotFoundError: If no event has this id
        """
        if not self.store.delete_event(event_id):
            raise EventNotFoundError(event_id)

    def join_event(self, event_id: str) -> Event:
        """Join an event (see EventStore.join_event)."""
        return self.store.join_event(event_id)

    def leave_event(self, event_id: str) -> Event:
        """Leave an event (see EventStore.leave_event)."""
        return self.store.leave_event(event_id)
