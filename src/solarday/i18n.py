"""Simple two-language (ko/en) translation helper for day reports."""

_STRINGS: dict[str, dict[str, str]] = {
    "label_location": {
        "ko": "위치",
        "en": "Location",
    },
    "label_date": {
        "ko": "날짜",
        "en": "Date",
    },
    "label_timezone": {
        "ko": "시간대",
        "en": "Time zone",
    },
    "label_sunrise": {
        "ko": "일출",
        "en": "Sunrise",
    },
    "label_transit": {
        "ko": "남중",
        "en": "Solar noon",
    },
    "label_sunset": {
        "ko": "일몰",
        "en": "Sunset",
    },
    "label_day_length": {
        "ko": "낮의 길이",
        "en": "Day length",
    },
    "label_declination": {
        "ko": "태양 적위",
        "en": "Declination",
    },
    "polar_day": {
        "ko": "백야: 해가 지지 않아요",
        "en": "Polar day: the sun does not set",
    },
    "polar_night": {
        "ko": "극야: 해가 뜨지 않아요",
        "en": "Polar night: the sun does not rise",
    },
    "error_location": {
        "ko": "위치가 올바르지 않아요. ({error})",
        "en": "Invalid location. ({error})",
    },
    "error_query": {
        "ko": "입력을 해석할 수 없어요. ({error})",
        "en": "Could not read the input. ({error})",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
