"""Solar position engine: mean solar noon through sunrise and sunset.

Low-precision NOAA / "Sunrise-Sunset" approximation. Every function takes a
Location and an AstroDay and is pure.

Two terms are evaluated with radian sines of degree-valued arguments: the
equation of the centre (including its leading term on the raw longitude)
and the outer sine of the transit correction. This reproduces the published
reference values of this algorithm rather than the textbook form.
"""

import math

from solarday import trig
from solarday.errors import PolarDayError, PolarNightError
from solarday.models import AstroDay, AstroTime, DayCondition, Location, SunEvents
from solarday.timescale import J2000_EPOCH, to_j2000

AXIAL_TILT = 23.439281  # Degrees, fixed; not corrected for precession
PERIHELION = 102.9732  # Argument of perihelion, degrees
HORIZON_ANGLE = -0.83  # Refraction + apparent solar radius, degrees
SEA_LEVEL_CORRECTION = -0.1625  # Degrees, used for altitude <= 0


def mean_solar_noon(location: Location, day: AstroDay) -> float:
    """Mean solar noon in days since J2000, shifted by the observer's longitude."""
    return to_j2000(AstroTime(day.value)) + location.longitude / 360


def solar_mean_anomaly(location: Location, day: AstroDay) -> float:
    """Mean anomaly in degrees, in [0, 360)."""
    return (357.5291 + 0.98560028 * mean_solar_noon(location, day)) % 360


def equation_of_the_centre(location: Location, day: AstroDay) -> float:
    """Orbital eccentricity correction to the mean anomaly, in degrees."""
    anomaly = solar_mean_anomaly(location, day)
    return (
        1.9148 * math.sin(location.longitude)
        + 0.0200 * math.sin(2 * anomaly)
        + 0.0003 * math.sin(3 * anomaly)
    )


def ecliptic_longitude(location: Location, day: AstroDay) -> float:
    """Apparent solar longitude along the ecliptic, degrees in [0, 360)."""
    return (
        solar_mean_anomaly(location, day)
        + equation_of_the_centre(location, day)
        + 180
        + PERIHELION
    ) % 360


def solar_declination(location: Location, day: AstroDay) -> float:
    """Declination of the sun in degrees."""
    return trig.asin(
        trig.sin(ecliptic_longitude(location, day)) * trig.sin(AXIAL_TILT)
    )


def solar_transit(location: Location, day: AstroDay) -> AstroTime:
    """Julian Date at which the sun crosses the local meridian."""
    correction = 0.0053 * math.sin(
        solar_mean_anomaly(location, day)
        - 0.0069 * trig.sin(2 * ecliptic_longitude(location, day))
    )
    return AstroTime(J2000_EPOCH + mean_solar_noon(location, day) + correction)


def altitude_correction(altitude: float) -> float:
    """Horizon dip for an observer ``altitude`` metres above sea level, in degrees."""
    if altitude > 0:
        return -2.076 * math.sqrt(altitude / 60)
    return SEA_LEVEL_CORRECTION


def cosine_of_hour_angle(location: Location, day: AstroDay) -> float:
    """Raw cos(hour angle). Outside [-1, 1] on polar days and nights.

    At an exact pole the denominator vanishes; the ratio is then reported as
    +/-inf by the sign of the numerator.
    """
    declination = solar_declination(location, day)
    numerator = trig.sin(
        HORIZON_ANGLE + altitude_correction(location.altitude)
    ) - trig.sin(location.latitude) * trig.sin(declination)
    denominator = trig.cos(location.latitude) * trig.cos(declination)
    if denominator == 0:
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def hour_angle(location: Location, day: AstroDay) -> float:
    """Half of the daylight arc between transit and sunrise/sunset, in degrees.

    Args:
        location: Observer position.
        day: Day number.

    Returns:
        Hour angle in (0, 180) degrees. NaN inputs give NaN.

    Raises:
        PolarDayError: Sun stays above the horizon (ratio < -1).
        PolarNightError: Sun stays below the horizon (ratio > 1).
    """
    ratio = cosine_of_hour_angle(location, day)
    if ratio < -1:
        raise PolarDayError(
            f"sun does not set at {location.latitude}, {location.longitude} "
            f"on day {day.value}",
            ratio,
        )
    if ratio > 1:
        raise PolarNightError(
            f"sun does not rise at {location.latitude}, {location.longitude} "
            f"on day {day.value}",
            ratio,
        )
    if math.isnan(ratio):
        return math.nan
    return trig.acos(ratio)


def sunrise_time(location: Location, day: AstroDay) -> AstroTime:
    """Julian Date of sunrise. Raises NoSunEventError on polar days/nights."""
    return solar_transit(location, day) - hour_angle(location, day) / 360


def sunset_time(location: Location, day: AstroDay) -> AstroTime:
    """Julian Date of sunset. Raises NoSunEventError on polar days/nights."""
    return solar_transit(location, day) + hour_angle(location, day) / 360


def sun_events(location: Location, day: AstroDay) -> SunEvents:
    """Compute transit, sunrise and sunset for a day without raising on polar days.

    Args:
        location: Observer position.
        day: Day number.

    Returns:
        SunEvents. On polar days/nights ``condition`` says which, and
        sunrise, sunset and hour_angle are None.
    """
    transit = solar_transit(location, day)
    declination = solar_declination(location, day)
    try:
        angle = hour_angle(location, day)
    except PolarDayError:
        condition, angle = DayCondition.POLAR_DAY, None
    except PolarNightError:
        condition, angle = DayCondition.POLAR_NIGHT, None
    else:
        condition = DayCondition.NORMAL

    if angle is None:
        sunrise = sunset = None
    else:
        sunrise = transit - angle / 360
        sunset = transit + angle / 360

    return SunEvents(
        location=location,
        day=day,
        condition=condition,
        transit=transit,
        declination=declination,
        hour_angle=angle,
        sunrise=sunrise,
        sunset=sunset,
    )


def day_length(location: Location, day: AstroDay) -> float:
    """Hours of daylight; 24 on polar days, 0 on polar nights."""
    return sun_events(location, day).day_length
