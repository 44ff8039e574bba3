"""Query layer: input parsing, location validation, timezone lookup, and local-time conversion of solar events."""

import logging
from datetime import date, datetime, time, tzinfo

from pytz import UnknownTimeZoneError, timezone
from timezonefinder import TimezoneFinder

from solarday.errors import QueryError
from solarday.models import (
    AstroDay,
    CivilTime,
    DayReport,
    Location,
    ObserverContext,
    QueryInput,
)
from solarday.solar import solar_transit, sun_events
from solarday.timescale import to_astro_day, to_astro_time, to_civil_time
from solarday.validation import ensure_valid

logger = logging.getLogger(__name__)

_tf = TimezoneFinder()


def _day_with_local_transit(
    location: Location, local_date: date, local_tz: tzinfo, noon_day: AstroDay
) -> AstroDay:
    """Pick the day number, near noon_day, whose solar transit lands on local_date.

    The longitude term of mean solar noon moves transit up to half a day away
    from the day number, so far from Greenwich the neighbouring day can be the
    one that belongs to the local date.
    """
    for offset in (0, 1, -1):
        day = AstroDay(noon_day.value + offset)
        transit = to_civil_time(solar_transit(location, day), local_tz)
        if transit.moment is not None and transit.moment.date() == local_date:
            return day
    logger.warning("no transit on %s near day %s", local_date, noon_day.value)
    return noon_day


def resolve_context(query: QueryInput, default_tz: str = "UTC") -> ObserverContext:
    """Turn a raw query into a validated ObserverContext.

    The time zone comes from ``query.tz`` when given, otherwise from the
    coordinates via timezonefinder, otherwise ``default_tz``.

    Args:
        query: Raw user input.
        default_tz: Zone used when the coordinates resolve to none.

    Returns:
        ObserverContext holding the location, local date, zone name, and the
        day number whose solar transit falls on the local date.

    Raises:
        QueryError: On an unparsable date or an unknown zone name.
        LocationValidationError: On out-of-range coordinates.
    """
    try:
        local_date = datetime.strptime(query.when, "%Y-%m-%d").date()
    except ValueError as e:
        raise QueryError(f"Invalid date: {query.when!r}. Expected YYYY-MM-DD.") from e

    location = ensure_valid(
        Location(
            latitude=query.latitude,
            longitude=query.longitude,
            altitude=query.altitude,
        )
    )

    tz_name = query.tz or _tf.timezone_at(lat=location.latitude, lng=location.longitude)
    if tz_name is None:
        logger.debug(
            "no timezone at lat=%s, lng=%s; using %s",
            location.latitude,
            location.longitude,
            default_tz,
        )
        tz_name = default_tz
    try:
        local_tz = timezone(tz_name)
    except UnknownTimeZoneError as e:
        raise QueryError(f"Unknown timezone: {tz_name}") from e

    local_noon = local_tz.localize(
        datetime.combine(local_date, time(12)), is_dst=None
    )
    noon_day = to_astro_day(to_astro_time(CivilTime.from_datetime(local_noon)))
    day = _day_with_local_transit(location, local_date, local_tz, noon_day)
    logger.debug("resolved %s in %s to day %s", local_date, tz_name, day.value)

    return ObserverContext(
        location=location, local_date=local_date, tz_name=tz_name, day=day
    )


def compute_day(context: ObserverContext) -> DayReport:
    """Compute solar events for the context's day and convert them to local wall clock.

    Args:
        context: Result of resolve_context.

    Returns:
        DayReport. Sunrise and sunset are CivilTime.EMPTY on polar days/nights.
    """
    events = sun_events(context.location, context.day)
    local_tz = timezone(context.tz_name)
    logger.debug("day %s at %s: %s", context.day.value, context.location, events.condition)

    def local(t):
        return CivilTime.EMPTY if t is None else to_civil_time(t, local_tz)

    return DayReport(
        context=context,
        events=events,
        transit=local(events.transit),
        sunrise=local(events.sunrise),
        sunset=local(events.sunset),
    )


def run(query: QueryInput, default_tz: str = "UTC") -> DayReport:
    """Top-level entry point: takes a QueryInput and returns a DayReport.

    Args:
        query: User input (coordinates, date string, optional zone).
        default_tz: Zone used when the coordinates resolve to none.

    Returns:
        Fully computed DayReport.
    """
    context = resolve_context(query, default_tz=default_tz)
    return compute_day(context)
