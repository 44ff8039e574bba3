"""Environment-driven settings. A .env file, when one is found, is loaded first."""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from solarday.models import NOT_AVAILABLE


@dataclass(frozen=True)
class Settings:
    default_tz: str  # Zone used when the coordinates resolve to none (open ocean)
    lang: str  # Report language, "en" or "ko"
    log_level: str
    na_marker: str  # Rendering of a missing civil time


def _log_level(name: str) -> str:
    """Upper-cased level name, or WARNING when logging does not know it."""
    name = name.upper()
    if not isinstance(logging.getLevelName(name), int):
        return "WARNING"
    return name


def load_settings() -> Settings:
    """Read SOLARDAY_* variables, after loading .env if present."""
    load_dotenv()
    return Settings(
        default_tz=os.environ.get("SOLARDAY_DEFAULT_TZ", "UTC"),
        lang=os.environ.get("SOLARDAY_LANG", "en"),
        log_level=_log_level(os.environ.get("SOLARDAY_LOG_LEVEL", "WARNING")),
        na_marker=os.environ.get("SOLARDAY_NA_MARKER", NOT_AVAILABLE),
    )
