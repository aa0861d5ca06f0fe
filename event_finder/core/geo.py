"""Geographic calculations - Pure functions.

This module provides great-circle distance calculations between the
query point and event venues. All functions are pure with no side effects.
"""

import math

from event_finder.core.event import Event


# Earth's mean radius in kilometers
EARTH_RADIUS_KM = 6371.0


def calculate_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> float:
    """Calculate distance between two points using Haversine formula.

    Pure function.

    Args:
        lat1: Latitude of first point
        lon1: Longitude of first point
        lat2: Latitude of second point
        lon2: Longitude of second point

    Returns:
        Distance in kilometers
    """
    # Convert to radians
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    # Haversine formula
    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def is_valid_coordinates(latitude: float, longitude: float) -> bool:
    """Check that a coordinate pair is within the valid ranges."""
    return -90 <= latitude <= 90 and -180 <= longitude <= 180


def distance_to_event(
    event: Event,
    latitude: float,
    longitude: float,
) -> float | None:
    """Calculate distance from a point to an event's venue.

    Pure function.

    Args:
        event: The event
        latitude: Reference point latitude
        longitude: Reference point longitude

    Returns:
        Distance in kilometers, or None if the event has no coordinates
    """
    if not event.has_coordinates:
        return None

    return calculate_distance(
        latitude,
        longitude,
        event.latitude,
        event.longitude,
    )


def is_within_radius(
    event: Event,
    center_lat: float,
    center_lon: float,
    radius_km: float,
) -> bool:
    """Check if an event is within a radius of a point.

    Pure function. Events without coordinates are never within radius.

    Args:
        event: Event to check
        center_lat: Center point latitude
        center_lon: Center point longitude
        radius_km: Radius in kilometers (inclusive)

    Returns:
        True if event is within radius
    """
    distance = distance_to_event(event, center_lat, center_lon)
    return distance is not None and distance <= radius_km
