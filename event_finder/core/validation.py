"""Request validation - Pure functions.

Checks event payloads and list-query parameters before they reach the
store or the query engine. Validation never raises; it collects
ValidationError records into a ValidationResult.
"""

import math
from dataclasses import dataclass, field
from typing import Any

from event_finder.core.event import IMMUTABLE_FIELDS, parse_event_time
from event_finder.core.query import EventQuery


REQUIRED_FIELDS = ("title", "description", "location", "date", "maxParticipants")

MISSING_FIELDS_MESSAGE = "Missing required fields"
INVALID_DATE_MESSAGE = "Invalid date format. Use ISO 8601 format (e.g., 2025-11-15T18:00:00Z)"
MIN_PARTICIPANTS_MESSAGE = "maxParticipants must be at least 1"
GEO_INCOMPLETE_MESSAGE = "latitude, longitude, and radius must all be provided together"
GEO_NOT_NUMERIC_MESSAGE = "latitude, longitude, and radius must be valid numbers"
RADIUS_MESSAGE = "radius must be greater than 0"


@dataclass
class ValidationError:
    """A single validation failure.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        code: 'missing' for absent required fields, else 'invalid'
    """
    field: str
    message: str
    code: str = "invalid"


@dataclass
class ValidationResult:
    """Result of validating a request.

    Attributes:
        valid: True if no errors
        errors: List of validation errors
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def missing_fields(self) -> list[str]:
        """Names of required fields that were absent."""
        return [e.field for e in self.errors if e.code == "missing"]

    @property
    def message(self) -> str | None:
        """Headline message for the first problem found."""
        if self.missing_fields:
            return MISSING_FIELDS_MESSAGE
        if self.errors:
            return self.errors[0].message
        return None


def _result(errors: list[ValidationError]) -> ValidationResult:
    return ValidationResult(valid=not errors, errors=errors)


def _is_number(value: Any) -> bool:
    """True for finite ints/floats (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _validate_text(data: dict[str, Any], name: str) -> list[ValidationError]:
    if data.get(name) is not None and not isinstance(data[name], str):
        return [ValidationError(field=name, message=f"{name} must be a string")]
    return []


def _validate_max_participants(value: Any) -> list[ValidationError]:
    if not _is_number(value) or int(value) != value:
        return [ValidationError(
            field="maxParticipants",
            message="maxParticipants must be an integer",
        )]
    if value < 1:
        return [ValidationError(field="maxParticipants", message=MIN_PARTICIPANTS_MESSAGE)]
    return []


def _validate_date(value: Any) -> list[ValidationError]:
    if parse_event_time(value) is None:
        return [ValidationError(field="date", message=INVALID_DATE_MESSAGE)]
    return []


def _validate_coordinates(data: dict[str, Any]) -> list[ValidationError]:
    """Optional latitude/longitude must be numeric, in range, and paired."""
    latitude = data.get("latitude")
    longitude = data.get("longitude")

    if latitude is None and longitude is None:
        return []

    if latitude is None or longitude is None:
        return [ValidationError(
            field="latitude" if latitude is None else "longitude",
            message="latitude and longitude must be provided together",
        )]

    if not _is_number(latitude) or not _is_number(longitude):
        return [ValidationError(
            field="latitude",
            message="latitude and longitude must be valid numbers",
        )]

    errors = []
    if not -90 <= latitude <= 90:
        errors.append(ValidationError(
            field="latitude",
            message=f"Latitude {latitude} out of range [-90, 90]",
        ))
    if not -180 <= longitude <= 180:
        errors.append(ValidationError(
            field="longitude",
            message=f"Longitude {longitude} out of range [-180, 180]",
        ))
    return errors


def validate_event_data(data: dict[str, Any]) -> ValidationResult:
    """Validate a payload for creating an event.

    Pure function.

    Args:
        data: Creation payload with camelCase keys

    Returns:
        ValidationResult with any errors found
    """
    errors = [
        ValidationError(field=name, message=f"{name} is required", code="missing")
        for name in REQUIRED_FIELDS
        if _is_blank(data.get(name))
    ]
    if errors:
        return _result(errors)

    for name in ("title", "description", "location", "date", "category"):
        errors.extend(_validate_text(data, name))

    errors.extend(_validate_max_participants(data["maxParticipants"]))
    if isinstance(data["date"], str):
        errors.extend(_validate_date(data["date"]))
    errors.extend(_validate_coordinates(data))

    return _result(errors)


def validate_event_update(data: dict[str, Any]) -> ValidationResult:
    """Validate a partial payload for updating an event.

    Pure function. Only fields that are present are checked, and no
    cross-field invariant (e.g. currentParticipants <= maxParticipants)
    is enforced.

    Args:
        data: Partial update payload with camelCase keys

    Returns:
        ValidationResult with any errors found
    """
    errors = [
        ValidationError(field=name, message=f"{name} cannot be changed")
        for name in IMMUTABLE_FIELDS
        if name in data
    ]

    for name in ("title", "description", "location", "date"):
        if name in data and _is_blank(data[name]):
            errors.append(ValidationError(field=name, message=f"{name} cannot be empty"))
        else:
            errors.extend(_validate_text(data, name))

    if data.get("category") is not None:
        errors.extend(_validate_text(data, "category"))

    if "maxParticipants" in data:
        errors.extend(_validate_max_participants(data["maxParticipants"]))

    if "currentParticipants" in data:
        value = data["currentParticipants"]
        if not _is_number(value) or int(value) != value or value < 0:
            errors.append(ValidationError(
                field="currentParticipants",
                message="currentParticipants must be a non-negative integer",
            ))

    if isinstance(data.get("date"), str) and data["date"].strip():
        errors.extend(_validate_date(data["date"]))

    # Coordinates are replaced or cleared as a pair
    if ("latitude" in data) != ("longitude" in data):
        errors.append(ValidationError(
            field="longitude" if "latitude" in data else "latitude",
            message="latitude and longitude must be updated together",
        ))
    else:
        errors.extend(_validate_coordinates(data))

    return _result(errors)


def _parse_number(value: str) -> float | None:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def parse_query_params(
    location: str | None = None,
    category: str | None = None,
    date: str | None = None,
    latitude: str | None = None,
    longitude: str | None = None,
    radius: str | None = None,
) -> tuple[EventQuery | None, ValidationResult]:
    """Build an EventQuery from raw query-string values.

    Pure function. Empty strings count as absent. The geo parameters are
    all-or-nothing, must be numbers, and radius must be positive.
    Coordinates outside the valid ranges are accepted here; the query
    engine then skips the radius filter.

    Args:
        location: Location substring
        category: Category name
        date: Date prefix
        latitude: Query latitude as text
        longitude: Query longitude as text
        radius: Radius in kilometers as text

    Returns:
        (EventQuery, result) when valid, (None, result) otherwise
    """
    geo_raw = [latitude or None, longitude or None, radius or None]

    if any(v is not None for v in geo_raw):
        if any(v is None for v in geo_raw):
            return None, _result([ValidationError(field="geo", message=GEO_INCOMPLETE_MESSAGE)])

        numbers = [_parse_number(v) for v in geo_raw]
        if any(n is None for n in numbers):
            return None, _result([ValidationError(field="geo", message=GEO_NOT_NUMERIC_MESSAGE)])

        lat, lon, radius_km = numbers
        if radius_km <= 0:
            return None, _result([ValidationError(field="radius", message=RADIUS_MESSAGE)])
    else:
        lat = lon = radius_km = None

    query = EventQuery(
        location=location or None,
        category=category or None,
        date=date or None,
        latitude=lat,
        longitude=lon,
        radius_km=radius_km,
    )
    return query, _result([])
