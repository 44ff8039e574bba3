"""Location bounds validation: the collaborator that vets input before it reaches the solar engine."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from solarday.errors import LocationValidationError
from solarday.models import Location

# pydantic error type -> message in the validator's wording
_MESSAGES: dict[str, str] = {
    "greater_than_equal": "less than min",
    "less_than_equal": "greater than max",
    "finite_number": "not a finite number",
}


class _LocationBounds(BaseModel):
    """Coordinate bounds. Both ends inclusive."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)
    altitude: float = Field(default=0.0, ge=0.0)


@dataclass(frozen=True)
class FieldError:
    """A single failed bound on one Location field."""

    field: str  # "Latitude", "Longitude", "Altitude"
    message: str  # "greater than max", "less than min", "not a finite number"

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


def validate_location(location: Location) -> list[FieldError]:
    """Check a Location against coordinate bounds.

    Returns:
        Field-level errors in field order. Empty if the location is valid.
    """
    try:
        _LocationBounds(
            latitude=location.latitude,
            longitude=location.longitude,
            altitude=location.altitude,
        )
    except ValidationError as e:
        return [
            FieldError(
                str(err["loc"][0]).capitalize(),
                _MESSAGES.get(err["type"], err["msg"]),
            )
            for err in e.errors()
        ]
    return []


def ensure_valid(location: Location) -> Location:
    """Return location unchanged, or raise LocationValidationError listing every failed field."""
    errors = validate_location(location)
    if errors:
        raise LocationValidationError(errors)
    return location
