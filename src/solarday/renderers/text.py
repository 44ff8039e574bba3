"""Plain-text day report renderer."""

from solarday.i18n import t
from solarday.models import NOT_AVAILABLE, DayCondition, DayReport
from solarday.timescale import format_civil_time


def _hours_minutes(hours: float) -> str:
    total = round(hours * 60)
    return f"{total // 60}h {total % 60:02d}m"


def render_text_report(
    report: DayReport, lang: str = "en", na_marker: str = NOT_AVAILABLE
) -> str:
    """Render a DayReport as aligned label/value lines.

    Args:
        report: Fully computed day report.
        lang: Language code ('ko' or 'en') for labels.
        na_marker: Text shown for a missing sunrise/sunset.

    Returns:
        Multi-line string, no trailing newline.
    """
    ctx = report.context
    loc = ctx.location
    rows = [
        (
            t("label_location", lang),
            f"{loc.latitude:.4f}, {loc.longitude:.4f} ({loc.altitude:.0f} m)",
        ),
        (t("label_date", lang), ctx.local_date.isoformat()),
        (t("label_timezone", lang), ctx.tz_name),
        (t("label_sunrise", lang), format_civil_time(report.sunrise, na_marker)),
        (t("label_transit", lang), format_civil_time(report.transit, na_marker)),
        (t("label_sunset", lang), format_civil_time(report.sunset, na_marker)),
        (t("label_day_length", lang), _hours_minutes(report.events.day_length)),
        (t("label_declination", lang), f"{report.events.declination:+.4f}°"),
    ]
    width = max(len(label) for label, _ in rows)
    lines = [f"{label:<{width}}  {value}" for label, value in rows]

    condition = report.events.condition
    if condition is DayCondition.POLAR_DAY:
        lines.append(t("polar_day", lang))
    elif condition is DayCondition.POLAR_NIGHT:
        lines.append(t("polar_night", lang))
    return "\n".join(lines)
