"""Data model definitions: explicit boundaries between time scales, the solar engine, and the query layer."""

import enum
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import ClassVar

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class AstroTime:
    """Continuous Julian Date. NaN marks an unset value, never a valid instant."""

    value: float  # Days (and fraction) since the Julian proleptic origin

    UNSET: ClassVar["AstroTime"]

    def __add__(self, days: float) -> "AstroTime":
        if isinstance(days, (AstroTime, AstroDay)):
            return NotImplemented
        return AstroTime(self.value + days)

    def __sub__(self, other):
        if isinstance(other, AstroTime):
            return self.value - other.value
        if isinstance(other, AstroDay):
            return NotImplemented
        return AstroTime(self.value - other)


AstroTime.UNSET = AstroTime(math.nan)


@dataclass(frozen=True)
class AstroDay:
    """Day number selecting which day the solar formulas describe."""

    value: float  # Normally integral; half-integral values are taken as given


@dataclass(frozen=True)
class CivilTime:
    """Gregorian wall-clock timestamp with a fixed UTC offset.

    Wraps a timezone-aware datetime. ``moment=None`` is the distinguished
    empty value (see CivilTime.EMPTY). Equality compares instants, so the
    same moment in two offsets is equal.
    """

    moment: datetime | None

    EMPTY: ClassVar["CivilTime"]

    def __post_init__(self) -> None:
        if self.moment is not None and self.moment.utcoffset() is None:
            raise ValueError("CivilTime requires a timezone-aware datetime")

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
        utc_offset: timedelta = timedelta(0),
    ) -> "CivilTime":
        """Build a CivilTime from wall-clock fields and a fixed offset."""
        tz = timezone.utc if not utc_offset else timezone(utc_offset)
        return cls(datetime(year, month, day, hour, minute, second, microsecond, tz))

    @classmethod
    def from_datetime(cls, dt: datetime) -> "CivilTime":
        """Wrap a datetime. Naive datetimes are treated as UTC."""
        if dt.tzinfo is None or dt.utcoffset() is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return cls(dt)

    @property
    def is_empty(self) -> bool:
        return self.moment is None

    @property
    def year(self) -> int | None:
        return None if self.moment is None else self.moment.year

    @property
    def month(self) -> int | None:
        return None if self.moment is None else self.moment.month

    @property
    def day(self) -> int | None:
        return None if self.moment is None else self.moment.day

    @property
    def hour(self) -> int | None:
        return None if self.moment is None else self.moment.hour

    @property
    def minute(self) -> int | None:
        return None if self.moment is None else self.moment.minute

    @property
    def second(self) -> int | None:
        return None if self.moment is None else self.moment.second

    @property
    def microsecond(self) -> int | None:
        return None if self.moment is None else self.moment.microsecond

    @property
    def utc_offset(self) -> timedelta | None:
        return None if self.moment is None else self.moment.utcoffset()

    def __str__(self) -> str:
        if self.moment is None:
            return NOT_AVAILABLE
        return self.moment.isoformat(timespec="seconds")


CivilTime.EMPTY = CivilTime(None)


@dataclass(frozen=True)
class Location:
    """Point on Earth's surface. Bounds are checked by solarday.validation, not here."""

    latitude: float  # Decimal degrees, north positive
    longitude: float  # Decimal degrees, east positive
    altitude: float = 0.0  # Metres above sea level


class DayCondition(enum.Enum):
    """Whether the sun crosses the horizon on a given day."""

    NORMAL = "normal"
    POLAR_DAY = "polar_day"  # Sun never sets
    POLAR_NIGHT = "polar_night"  # Sun never rises


@dataclass(frozen=True)
class SunEvents:
    """Solar events for one location and day. sunrise/sunset are None unless NORMAL."""

    location: Location
    day: AstroDay
    condition: DayCondition
    transit: AstroTime
    declination: float  # Degrees
    hour_angle: float | None  # Degrees, half the daylight arc
    sunrise: AstroTime | None
    sunset: AstroTime | None

    @property
    def day_length(self) -> float:
        """Hours of daylight: 24 for polar day, 0 for polar night."""
        if self.condition is DayCondition.POLAR_DAY:
            return 24.0
        if self.condition is DayCondition.POLAR_NIGHT:
            return 0.0
        if self.hour_angle is None:
            raise ValueError(f"{self.condition} day without an hour angle")
        return 2 * self.hour_angle / 15


@dataclass(frozen=True)
class QueryInput:
    """Raw user input. Not yet validated."""

    latitude: float
    longitude: float
    when: str  # "YYYY-MM-DD" local calendar date
    altitude: float = 0.0
    tz: str | None = None  # IANA zone name; resolved from coordinates if None


@dataclass(frozen=True)
class ObserverContext:
    """Validated location + resolved timezone. Input to the solar computation."""

    location: Location
    local_date: date
    tz_name: str  # IANA zone name ("Europe/Rome")
    day: AstroDay  # Day number whose solar transit falls on local_date


@dataclass(frozen=True)
class DayReport:
    """The sole output of the query layer. Fully computed state."""

    context: ObserverContext
    events: SunEvents
    transit: CivilTime  # Local wall clock
    sunrise: CivilTime  # EMPTY on polar days/nights
    sunset: CivilTime  # EMPTY on polar days/nights
