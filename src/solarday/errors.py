"""Exception hierarchy shared by the core and the query layer."""


class SolarDayError(Exception):
    """Base class for all solarday errors."""


class UnsetTimeError(SolarDayError, ValueError):
    """An unset (NaN / empty) time was used where a value is required."""


class NoSunEventError(SolarDayError, ValueError):
    """The sun does not cross the horizon on this day at this location."""

    def __init__(self, message: str, ratio: float) -> None:
        super().__init__(message)
        self.ratio = ratio  # cosine of the hour angle, outside [-1, 1]


class PolarDayError(NoSunEventError):
    """Sun stays above the horizon all day (midnight sun)."""


class PolarNightError(NoSunEventError):
    """Sun stays below the horizon all day."""


class LocationValidationError(SolarDayError, ValueError):
    """Location failed bounds validation. Carries field-level errors."""

    def __init__(self, errors: list) -> None:
        super().__init__(", ".join(str(e) for e in errors))
        self.errors = errors


class QueryError(SolarDayError, ValueError):
    """Raw query input could not be parsed or resolved."""
