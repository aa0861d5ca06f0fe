"""Unit tests for request validation.

Pure function tests - no mocks needed.
"""

import pytest

from event_finder.core.query import EventQuery
from event_finder.core.validation import (
    GEO_INCOMPLETE_MESSAGE,
    GEO_NOT_NUMERIC_MESSAGE,
    INVALID_DATE_MESSAGE,
    MIN_PARTICIPANTS_MESSAGE,
    MISSING_FIELDS_MESSAGE,
    RADIUS_MESSAGE,
    parse_query_params,
    validate_event_data,
    validate_event_update,
)


@pytest.fixture
def valid_payload():
    """A complete, valid creation payload."""
    return {
        "title": "Tech Meetup",
        "description": "Talks and networking",
        "location": "Bangalore, India",
        "date": "2025-11-15T18:00:00Z",
        "maxParticipants": 50,
        "latitude": 12.9716,
        "longitude": 77.5946,
        "category": "Technology",
    }


class TestValidateEventData:
    """Tests for validate_event_data()."""

    def test_valid_payload(self, valid_payload):
        result = validate_event_data(valid_payload)
        assert result.valid is True
        assert result.errors == []
        assert result.message is None

    def test_optional_fields_may_be_absent(self, valid_payload):
        for key in ("latitude", "longitude", "category"):
            del valid_payload[key]
        assert validate_event_data(valid_payload).valid is True

    @pytest.mark.parametrize(
        "field", ["title", "description", "location", "date", "maxParticipants"]
    )
    def test_missing_required_field(self, valid_payload, field):
        del valid_payload[field]
        result = validate_event_data(valid_payload)

        assert result.valid is False
        assert result.missing_fields == [field]
        assert result.message == MISSING_FIELDS_MESSAGE

    def test_blank_string_counts_as_missing(self, valid_payload):
        valid_payload["title"] = "   "
        assert validate_event_data(valid_payload).missing_fields == ["title"]

    def test_reports_all_missing_fields(self):
        result = validate_event_data({})
        assert result.missing_fields == [
            "title", "description", "location", "date", "maxParticipants",
        ]

    @pytest.mark.parametrize("value", [0, -3])
    def test_max_participants_at_least_one(self, valid_payload, value):
        valid_payload["maxParticipants"] = value
        result = validate_event_data(valid_payload)

        assert result.valid is False
        assert result.message == MIN_PARTICIPANTS_MESSAGE

    @pytest.mark.parametrize("value", [2.5, "ten", True])
    def test_max_participants_must_be_integer(self, valid_payload, value):
        valid_payload["maxParticipants"] = value
        result = validate_event_data(valid_payload)

        assert result.valid is False
        assert result.errors[0].field == "maxParticipants"

    def test_invalid_date(self, valid_payload):
        valid_payload["date"] = "next tuesday"
        result = validate_event_data(valid_payload)

        assert result.valid is False
        assert result.message == INVALID_DATE_MESSAGE

    def test_coordinates_must_be_paired(self, valid_payload):
        del valid_payload["longitude"]
        result = validate_event_data(valid_payload)

        assert result.valid is False
        assert result.errors[0].field == "longitude"

    def test_coordinates_out_of_range(self, valid_payload):
        valid_payload["latitude"] = 91
        valid_payload["longitude"] = 181
        result = validate_event_data(valid_payload)

        assert {e.field for e in result.errors} == {"latitude", "longitude"}

    def test_non_string_title(self, valid_payload):
        valid_payload["title"] = 42
        result = validate_event_data(valid_payload)

        assert result.valid is False
        assert result.errors[0].field == "title"


class TestValidateEventUpdate:
    """Tests for validate_event_update()."""

    def test_empty_update_is_valid(self):
        assert validate_event_update({}).valid is True

    def test_partial_update(self):
        assert validate_event_update({"title": "New title", "category": "Arts"}).valid is True

    @pytest.mark.parametrize("field", ["id", "createdAt"])
    def test_immutable_fields_rejected(self, field):
        result = validate_event_update({field: "x"})
        assert result.valid is False
        assert result.errors[0].field == field

    def test_blank_title_rejected(self):
        assert validate_event_update({"title": ""}).valid is False

    def test_invalid_date_rejected(self):
        result = validate_event_update({"date": "soon"})
        assert result.message == INVALID_DATE_MESSAGE

    def test_negative_current_participants_rejected(self):
        assert validate_event_update({"currentParticipants": -1}).valid is False

    def test_current_above_max_is_not_checked(self):
        """Cross-field invariants are left to the caller."""
        result = validate_event_update({"maxParticipants": 5, "currentParticipants": 9})
        assert result.valid is True

    def test_clearing_category_allowed(self):
        assert validate_event_update({"category": None}).valid is True

    @pytest.mark.parametrize("field", ["latitude", "longitude"])
    def test_single_null_coordinate_rejected(self, field):
        """Clearing one coordinate would leave the other without its pair."""
        result = validate_event_update({field: None})

        assert result.valid is False
        assert result.errors[0].message == "latitude and longitude must be updated together"

    def test_single_coordinate_value_rejected(self):
        assert validate_event_update({"latitude": 10.0}).valid is False

    def test_clearing_both_coordinates_allowed(self):
        assert validate_event_update({"latitude": None, "longitude": None}).valid is True

    def test_null_paired_with_value_rejected(self):
        assert validate_event_update({"latitude": None, "longitude": 77.6}).valid is False


class TestParseQueryParams:
    """Tests for parse_query_params()."""

    def test_no_params(self):
        query, result = parse_query_params()
        assert result.valid is True
        assert query == EventQuery()

    def test_text_filters(self):
        query, _ = parse_query_params(location="bangalore", category="Sports", date="2025-11-09")
        assert query == EventQuery(location="bangalore", category="Sports", date="2025-11-09")

    def test_empty_strings_are_absent(self):
        query, result = parse_query_params(location="", category="", latitude="", radius="")
        assert result.valid is True
        assert query == EventQuery()

    def test_full_geo(self):
        query, result = parse_query_params(latitude="12.9716", longitude="77.5946", radius="5")

        assert result.valid is True
        assert query.latitude == 12.9716
        assert query.longitude == 77.5946
        assert query.radius_km == 5.0

    @pytest.mark.parametrize(
        "params",
        [
            {"latitude": "12.9"},
            {"latitude": "12.9", "longitude": "77.5"},
            {"radius": "5"},
            {"longitude": "77.5", "radius": "5"},
        ],
    )
    def test_partial_geo_rejected(self, params):
        query, result = parse_query_params(**params)

        assert query is None
        assert result.message == GEO_INCOMPLETE_MESSAGE

    @pytest.mark.parametrize("bad", ["abc", "nan", "inf", "12,5"])
    def test_non_numeric_geo_rejected(self, bad):
        query, result = parse_query_params(latitude=bad, longitude="77.5", radius="5")

        assert query is None
        assert result.message == GEO_NOT_NUMERIC_MESSAGE

    @pytest.mark.parametrize("radius", ["0", "-1"])
    def test_radius_must_be_positive(self, radius):
        query, result = parse_query_params(latitude="12.9", longitude="77.5", radius=radius)

        assert query is None
        assert result.message == RADIUS_MESSAGE

    def test_out_of_range_coordinates_accepted(self):
        """Range problems disable the radius filter instead of failing."""
        query, result = parse_query_params(latitude="100", longitude="77.5", radius="5")

        assert result.valid is True
        assert query.has_geo is False


class TestNullOptionalFields:
    """Explicit nulls for optional fields."""

    def test_null_category_on_create(self, valid_payload):
        valid_payload["category"] = None
        assert validate_event_data(valid_payload).valid is True

    def test_null_coordinates_on_create(self, valid_payload):
        valid_payload["latitude"] = None
        valid_payload["longitude"] = None
        assert validate_event_data(valid_payload).valid is True
