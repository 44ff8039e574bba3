"""Tests for location bounds validation."""

import math

import pytest

from solarday.errors import LocationValidationError
from solarday.models import Location
from solarday.validation import FieldError, ensure_valid, validate_location


class TestValidateLocation:

    @pytest.mark.parametrize(
        "location, expected",
        [
            (Location(-56.3762, +181.26, 0), ["Longitude: greater than max"]),
            (Location(+106.327, -48.5672, 0), ["Latitude: greater than max"]),
            (Location(+36.3737, +25.373181, 0), []),
            (
                Location(-90.5, -180.5, 0),
                ["Latitude: less than min", "Longitude: less than min"],
            ),
            (Location(10, 10, -1), ["Altitude: less than min"]),
            (Location(math.nan, 0, 0), ["Latitude: not a finite number"]),
            (Location(0, math.inf, 0), ["Longitude: not a finite number"]),
        ],
    )
    def test_messages(self, location, expected):
        assert [str(e) for e in validate_location(location)] == expected

    @pytest.mark.parametrize(
        "location",
        [Location(90, 180), Location(-90, -180), Location(0, 0, 8848.86)],
    )
    def test_bounds_are_inclusive(self, location):
        assert validate_location(location) == []

    def test_field_error(self):
        e = FieldError("Longitude", "greater than max")
        assert e.field == "Longitude"
        assert str(e) == "Longitude: greater than max"


class TestEnsureValid:

    def test_returns_location(self):
        location = Location(36.3737, 25.373181)
        assert ensure_valid(location) is location

    def test_raises_with_all_errors(self):
        with pytest.raises(LocationValidationError) as exc_info:
            ensure_valid(Location(106.327, -181.0))
        assert str(exc_info.value) == (
            "Latitude: greater than max, Longitude: less than min"
        )
        assert len(exc_info.value.errors) == 2
        assert isinstance(exc_info.value, ValueError)
