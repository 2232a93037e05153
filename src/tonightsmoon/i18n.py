"""Simple two-language (ko/en) translation helper."""

LANGUAGES: tuple[str, ...] = ("en", "ko")

_STRINGS: dict[str, dict[str, str]] = {
    "phase_new_moon": {
        "ko": "삭",
        "en": "New Moon",
    },
    "phase_waxing_crescent": {
        "ko": "초승달",
        "en": "Waxing Crescent Moon",
    },
    "phase_first_quarter": {
        "ko": "상현달",
        "en": "First Quarter Moon",
    },
    "phase_waxing_gibbous": {
        "ko": "차오르는 달",
        "en": "Waxing Gibbous Moon",
    },
    "phase_full_moon": {
        "ko": "보름달",
        "en": "Full Moon",
    },
    "phase_waning_gibbous": {
        "ko": "기우는 달",
        "en": "Waning Gibbous Moon",
    },
    "phase_last_quarter": {
        "ko": "하현달",
        "en": "Last Quarter Moon",
    },
    "phase_waning_crescent": {
        "ko": "그믐달",
        "en": "Waning Crescent Moon",
    },
    "label_tonight": {
        "ko": "오늘 밤의 달",
        "en": "Tonight's moon",
    },
    "label_night_of": {
        "ko": "날짜",
        "en": "Night of",
    },
    "label_icon": {
        "ko": "아이콘",
        "en": "Icon",
    },
    "label_julian_date": {
        "ko": "율리우스일",
        "en": "Julian Date",
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
