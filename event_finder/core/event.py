"""Event data model and conversion - Pure functions.

This module defines the immutable Event record and converts between the
wire format (camelCase JSON keys) and typed Event objects.
All functions are pure with no side effects.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


# Wire name -> attribute name for fields a client may supply
WIRE_TO_ATTR = {
    "title": "title",
    "description": "description",
    "location": "location",
    "date": "date",
    "maxParticipants": "max_participants",
    "currentParticipants": "current_participants",
    "latitude": "latitude",
    "longitude": "longitude",
    "category": "category",
}

# Set once at creation, never overwritten
IMMUTABLE_FIELDS = ("id", "createdAt")


@dataclass(frozen=True)
class Event:
    """Immutable event record.

    Attributes:
        id: Unique identifier (uuid4 string)
        title: Short event title
        description: Free-text description
        location: Free-text location name
        date: Event start as ISO-8601 text, kept exactly as supplied
        max_participants: Capacity (>= 1)
        current_participants: Number of joined participants
        latitude: Optional latitude of the venue
        longitude: Optional longitude of the venue
        category: Optional free-text category label
        created_at: Creation instant as ISO-8601 text (UTC)
    """
    id: str
    title: str
    description: str
    location: str
    date: str
    max_participants: int
    current_participants: int = 0
    latitude: float | None = None
    longitude: float | None = None
    category: str | None = None
    created_at: str = ""

    @property
    def has_coordinates(self) -> bool:
        """Return True if both latitude and longitude are set."""
        return self.latitude is not None and self.longitude is not None

    @property
    def is_full(self) -> bool:
        """Return True if the event is at capacity."""
        return self.current_participants >= self.max_participants


def parse_event_time(value: Any) -> datetime | None:
    """Parse ISO-8601 text into an aware datetime.

    Pure function. A trailing 'Z' is read as UTC and naive values
    are assumed to be UTC.

    Args:
        value: ISO-8601 text (e.g. '2025-11-15T18:00:00Z' or '2025-11-15')

    Returns:
        Timezone-aware datetime, or None if the value can't be parsed
    """
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(moment: datetime) -> str:
    """Format an instant the way createdAt is stored ('...T...sssZ')."""
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def payload_to_fields(data: dict[str, Any]) -> dict[str, Any]:
    """Translate a wire payload into Event attribute names.

    Pure function. Unknown keys and immutable keys are dropped.

    Args:
        data: Request payload using camelCase keys

    Returns:
        Dict of Event attribute name -> value
    """
    fields = {}
    for wire_name, attr in WIRE_TO_ATTR.items():
        if wire_name in data:
            value = data[wire_name]
            if attr in ("max_participants", "current_participants") and value is not None:
                value = int(value)
            elif attr in ("latitude", "longitude") and value is not None:
                value = float(value)
            fields[attr] = value
    return fields


def event_to_dict(event: Event, distance_km: float | None = None) -> dict[str, Any]:
    """Convert an Event to its JSON wire format.

    Pure function. Optional fields are omitted when unset; distance is
    only present on geo query results.

    Args:
        event: Event to convert
        distance_km: Distance from the query point, if computed

    Returns:
        JSON-serializable dict
    """
    result: dict[str, Any] = {
        "id": event.id,
        "title": event.title,
        "description": event.description,
        "location": event.location,
        "date": event.date,
        "maxParticipants": event.max_participants,
        "currentParticipants": event.current_participants,
    }

    if event.latitude is not None:
        result["latitude"] = event.latitude
    if event.longitude is not None:
        result["longitude"] = event.longitude
    if event.category is not None:
        result["category"] = event.category

    result["createdAt"] = event.created_at

    if distance_km is not None:
        result["distance"] = distance_km

    return result
