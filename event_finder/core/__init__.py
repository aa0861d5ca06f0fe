"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Event model and wire conversion
- Geo/distance calculations
- Event query filtering and ordering
- Request validation

All functions here are deterministic and have no I/O.
"""

from event_finder.core.event import Event, event_to_dict, parse_event_time
from event_finder.core.geo import calculate_distance, is_valid_coordinates, is_within_radius
from event_finder.core.query import EventMatch, EventQuery, query_events
from event_finder.core.validation import (
    ValidationError,
    ValidationResult,
    parse_query_params,
    validate_event_data,
    validate_event_update,
)
from event_finder.core.errors import (
    EventError,
    EventFullError,
    EventNotFoundError,
    EventValidationError,
)

__all__ = [
    # Event
    "Event",
    "event_to_dict",
    "parse_event_time",
    # Geo
    "calculate_distance",
    "is_valid_coordinates",
    "is_within_radius",
    # Query
    "EventMatch",
    "EventQuery",
    "query_events",
    # Validation
    "ValidationError",
    "ValidationResult",
    "parse_query_params",
    "validate_event_data",
    "validate_event_update",
    # Errors
    "EventError",
    "EventFullError",
    "EventNotFoundError",
    "EventValidationError",
]
