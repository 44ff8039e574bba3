"""Time scale conversions: Julian Date (AstroTime) <-> Gregorian civil time (CivilTime).

The calendar formula is valid for 1801-2099. Dates outside that range are
not rejected; their results are unspecified.
"""

import math
from datetime import datetime, timedelta, timezone, tzinfo

from solarday.errors import UnsetTimeError
from solarday.models import NOT_AVAILABLE, AstroDay, AstroTime, CivilTime

J2000_EPOCH = 2451545.0  # January 1, 2000, 12:00 TT
J2000_CORRECTION = 0.0008  # Accumulated leap seconds and TT-UTC, in days

_SECONDS_PER_DAY = 86400
_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def is_unset(t: AstroTime) -> bool:
    """True iff t is the NaN sentinel ("never computed")."""
    return math.isnan(t.value)


def to_j2000(t: AstroTime) -> float:
    """Days elapsed since the J2000 epoch, including the leap second correction."""
    return t.value - J2000_EPOCH + J2000_CORRECTION


def to_astro_day(t: AstroTime) -> AstroDay:
    """Round a Julian Date to its day number.

    Raises:
        UnsetTimeError: If t is the NaN sentinel.
    """
    if is_unset(t):
        raise UnsetTimeError("cannot take the day number of an unset AstroTime")
    return AstroDay(float(round(t.value)))


def fractional_day(civil: CivilTime) -> float:
    """Fraction of the day elapsed at the civil time's own wall clock."""
    if civil.moment is None:
        raise UnsetTimeError("empty CivilTime has no time of day")
    return _fractional_day(civil.moment)


def _fractional_day(dt: datetime) -> float:
    seconds = dt.hour * 3600 + dt.minute * 60 + dt.second + dt.microsecond / 1e6
    return seconds / _SECONDS_PER_DAY


def _julian_date(dt: datetime) -> float:
    """Julian Date of the wall clock fields of dt, taken as UT."""
    year, month = dt.year, dt.month
    # Century term: +1 before March 1900, where the Gregorian 1900 non-leap day bites
    c19 = 1 if 100 * year + month - 190002.5 < 0 else 0
    return (
        367 * year
        - math.floor(7 * (year + math.floor((month + 9) / 12)) / 4)
        + math.floor(275 * month / 9)
        + 1721013.5
        + dt.day
        + _fractional_day(dt)
        + c19
    )


_UNIX_EPOCH_JD = _julian_date(_UNIX_EPOCH)  # 2440587.5


def to_astro_time(civil: CivilTime) -> AstroTime:
    """Convert a civil timestamp to a Julian Date.

    The timestamp is normalised to UTC before the calendar formula is applied,
    so two CivilTimes denoting the same instant give the same AstroTime.

    Args:
        civil: Timezone-aware civil time, years 1801-2099.

    Returns:
        The AstroTime of the same instant.

    Raises:
        UnsetTimeError: If civil is CivilTime.EMPTY.
    """
    if civil.moment is None:
        raise UnsetTimeError("cannot convert an empty CivilTime")
    return AstroTime(_julian_date(civil.moment.astimezone(timezone.utc)))


def to_civil_time(astro: AstroTime, tz: tzinfo | None = None) -> CivilTime:
    """Convert a Julian Date to a civil timestamp.

    Days elapsed since 1970-01-01T00:00Z are added to that instant and the
    result is rounded to the millisecond. The unset sentinel (NaN) and the
    zero value map to CivilTime.EMPTY.

    Args:
        astro: Julian Date to convert.
        tz: Zone for the returned wall clock (datetime.timezone or a pytz zone).
            UTC if None.

    Returns:
        CivilTime of the same instant, or CivilTime.EMPTY.
    """
    if is_unset(astro) or astro.value == 0:
        return CivilTime.EMPTY
    elapsed_days = astro.value - _UNIX_EPOCH_JD
    moment = _UNIX_EPOCH + timedelta(
        milliseconds=round(elapsed_days * _SECONDS_PER_DAY * 1000)
    )
    if tz is not None:
        moment = moment.astimezone(tz)
    return CivilTime(moment)


def format_civil_time(civil: CivilTime, marker: str = NOT_AVAILABLE) -> str:
    """Render as ISO-8601 with a numeric offset ("2007-12-14T21:07:51-07:00").

    An empty CivilTime renders as ``marker``.
    """
    if civil.moment is None:
        return marker
    return str(civil)
