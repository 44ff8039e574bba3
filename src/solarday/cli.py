"""CLI entry point for daily sunrise/sunset reports.

    solarday --lat 45 --lng 10 --date 2024-06-20 [--alt 0] [--tz Europe/Rome] [--lang ko]
"""

import argparse
import logging
import sys

from solarday.compute import run
from solarday.config import load_settings
from solarday.errors import LocationValidationError, QueryError
from solarday.i18n import t
from solarday.models import QueryInput
from solarday.renderers.text import render_text_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solarday",
        description="Sunrise, solar noon and sunset for a location and date.",
    )
    parser.add_argument("--lat", type=float, required=True, help="Latitude in degrees")
    parser.add_argument("--lng", type=float, required=True, help="Longitude in degrees")
    parser.add_argument("--date", required=True, help="Local date, YYYY-MM-DD")
    parser.add_argument("--alt", type=float, default=0.0, help="Altitude in metres")
    parser.add_argument("--tz", default=None, help="IANA zone; looked up if omitted")
    parser.add_argument("--lang", default=None, choices=["en", "ko"])
    return parser


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    args = build_parser().parse_args(argv)
    lang = args.lang or settings.lang

    query = QueryInput(
        latitude=args.lat,
        longitude=args.lng,
        when=args.date,
        altitude=args.alt,
        tz=args.tz,
    )
    try:
        report = run(query, default_tz=settings.default_tz)
    except LocationValidationError as e:
        print(t("error_location", lang).format(error=e), file=sys.stderr)
        return 2
    except QueryError as e:
        print(t("error_query", lang).format(error=e), file=sys.stderr)
        return 2

    logger.info("computed %s for %s", report.context.local_date, report.context.location)
    print(render_text_report(report, lang=lang, na_marker=settings.na_marker))
    return 0


if __name__ == "__main__":
    sys.exit(main())
