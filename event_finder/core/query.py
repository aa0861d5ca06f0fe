"""Event query engine - Pure functions.

Turns a snapshot of events plus an EventQuery into an ordered result list.
Steps run in a fixed order: location, category, date prefix, radius
(with distance annotation and distance sort), then a final date sort.

The final date sort always wins, so results are chronological even when
the radius step ran. Distance stays on each result for display.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from event_finder.core.event import Event, parse_event_time
from event_finder.core.geo import distance_to_event, is_valid_coordinates


# Events whose date can't be parsed sort after everything else
_LATEST = datetime.max.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class EventQuery:
    """Optional filters for listing events.

    Attributes:
        location: Case-insensitive substring of the location name
        category: Case-insensitive exact category
        date: Prefix of the event's date text (e.g. '2025-11-15')
        latitude: Query point latitude
        longitude: Query point longitude
        radius_km: Search radius in kilometers
    """
    location: str | None = None
    category: str | None = None
    date: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    radius_km: float | None = None

    @property
    def has_geo(self) -> bool:
        """Return True if the radius filter applies."""
        return (
            self.latitude is not None
            and self.longitude is not None
            and self.radius_km is not None
            and is_valid_coordinates(self.latitude, self.longitude)
        )


@dataclass(frozen=True)
class EventMatch:
    """A query result: the event plus its transient distance.

    Attributes:
        event: Matching event
        distance_km: Distance from the query point (radius queries only)
    """
    event: Event
    distance_km: float | None = None


def filter_by_location(matches: list[EventMatch], location: str) -> list[EventMatch]:
    """Keep events whose location contains the text, ignoring case."""
    needle = location.lower()
    return [m for m in matches if needle in m.event.location.lower()]


def filter_by_category(matches: list[EventMatch], category: str) -> list[EventMatch]:
    """Keep events whose category equals the text, ignoring case."""
    wanted = category.lower()
    return [
        m for m in matches
        if m.event.category is not None and m.event.category.lower() == wanted
    ]


def filter_by_date_prefix(matches: list[EventMatch], prefix: str) -> list[EventMatch]:
    """Keep events whose date text starts with the prefix."""
    return [m for m in matches if m.event.date.startswith(prefix)]


def filter_by_radius(
    matches: list[EventMatch],
    latitude: float,
    longitude: float,
    radius_km: float,
) -> list[EventMatch]:
    """Keep events within the radius, annotated and sorted by distance.

    Pure function. Events without coordinates are dropped.

    Args:
        matches: Candidate results
        latitude: Query point latitude
        longitude: Query point longitude
        radius_km: Search radius in kilometers (inclusive)

    Returns:
        Results within radius, nearest first
    """
    annotated = []
    for match in matches:
        distance = distance_to_event(match.event, latitude, longitude)
        if distance is not None and distance <= radius_km:
            annotated.append(EventMatch(event=match.event, distance_km=distance))

    return sorted(
        annotated,
        key=lambda m: (m.distance_km is None, m.distance_km or 0.0),
    )


def sort_by_date(matches: list[EventMatch]) -> list[EventMatch]:
    """Sort results by event date, earliest first.

    Pure function. The sort is stable, so events with equal dates keep
    their incoming order.
    """
    def key(match: EventMatch) -> datetime:
        return parse_event_time(match.event.date) or _LATEST

    return sorted(matches, key=key)


def query_events(events: list[Event], query: EventQuery | None = None) -> list[EventMatch]:
    """Filter and order events.

    Pure function: the input list and events are not modified.

    Args:
        events: Snapshot of stored events
        query: Filters to apply (None for no filters)

    Returns:
        Matching events in ascending date order
    """
    query = query or EventQuery()
    matches = [EventMatch(event=e) for e in events]

    if query.location:
        matches = filter_by_location(matches, query.location)

    if query.category:
        matches = filter_by_category(matches, query.category)

    if query.date:
        matches = filter_by_date_prefix(matches, query.date)

    if query.has_geo:
        matches = filter_by_radius(
            matches,
            query.latitude,
            query.longitude,
            query.radius_km,
        )

    return sort_by_date(matches)
