"""Lunar phase computation layer — Julian Date conversion, phase bucketing, and the nightly report."""

import logging
import random
from collections.abc import Callable
from datetime import date, datetime, timedelta
from typing import Final

from pytz import utc
from pytz.tzinfo import BaseTzInfo

from tonightsmoon.config import Settings, load_settings
from tonightsmoon.flavor import random_exclamation, random_quote
from tonightsmoon.i18n import t
from tonightsmoon.models import (
    CalendarDateTime,
    InvalidDateError,
    LunarPhase,
    LunarPhaseReport,
    check_date,
    check_time,
)

__all__ = [
    "BASE_NEW_MOON_DATE",
    "JULIAN_LUNAR_CYCLE",
    "InvalidDateError",
    "build_report",
    "julian_date",
    "julian_date_at_time_on_day",
    "julian_date_of",
    "julian_day_number",
    "lunar_phase_from_julian_date",
    "lunar_phase_tonight",
    "night_of",
    "phase_icon_name",
    "phase_name",
    "run",
]

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

# Julian Date of 2000-01-06 00:00 UT, a known new moon.
BASE_NEW_MOON_DATE: Final = 2451549.5

# Mean synodic month, in days.
JULIAN_LUNAR_CYCLE: Final = 29.530588853

# Upper bounds of buckets 0-7 within the cycle; anything later is bucket 8.
# Buckets 0 and 8 are each half a phase wide and together form the New Moon.
_PHASE_THRESHOLDS: Final = (
    1.84566,
    5.53699,
    9.22831,
    12.91963,
    16.61096,
    20.30228,
    23.99361,
    27.86493,
)

_PHASE_KEYS: dict[LunarPhase, str] = {
    LunarPhase.NEW_MOON: "phase_new_moon",
    LunarPhase.WAXING_CRESCENT: "phase_waxing_crescent",
    LunarPhase.FIRST_QUARTER: "phase_first_quarter",
    LunarPhase.WAXING_GIBBOUS: "phase_waxing_gibbous",
    LunarPhase.FULL_MOON: "phase_full_moon",
    LunarPhase.WANING_GIBBOUS: "phase_waning_gibbous",
    LunarPhase.LAST_QUARTER: "phase_last_quarter",
    LunarPhase.WANING_CRESCENT: "phase_waning_crescent",
}

_PHASE_ICONS: dict[LunarPhase, str] = {
    LunarPhase.NEW_MOON: "newMoon.svg",
    LunarPhase.WAXING_CRESCENT: "waxingCrescent.svg",
    LunarPhase.FIRST_QUARTER: "firstQuarter.svg",
    LunarPhase.WAXING_GIBBOUS: "waxingGibbous.svg",
    LunarPhase.FULL_MOON: "fullMoon.svg",
    LunarPhase.WANING_GIBBOUS: "waningGibbous.svg",
    LunarPhase.LAST_QUARTER: "lastQuarter.svg",
    LunarPhase.WANING_CRESCENT: "waningCrescent.svg",
}


def julian_day_number(month: int, day: int, year: int) -> int:
    """Convert a Gregorian calendar date to its Julian Day Number.

    Counts from an anchor of March 1, -4800 so that the leap day falls at the
    end of the counting year: January and February are treated as months 13
    and 14 of the previous year. Every division is floor division.

    Args:
        month: Month, 1-12.
        day: Day of the month.
        year: Gregorian year (proleptic before 1582).

    Returns:
        The integer Julian Day Number (2451545 for 2000-01-01).

    Raises:
        InvalidDateError: If month/day do not name a real day of the year.
    """
    check_date(month, day, year)

    # 1 for January and February, 0 otherwise
    jan_or_feb = (14 - month) // 12
    years_since_anchor = year + 4800 - jan_or_feb
    months_since_march = month + 12 * jan_or_feb - 3

    # Month lengths from March repeat in groups of five (31, 30, 31, 30, 31)
    days_since_march_first = (153 * months_since_march + 2) // 5

    leap_days = years_since_anchor // 4 - years_since_anchor // 100 + years_since_anchor // 400

    # 32045 days lie between the anchor and the Julian Day epoch
    return day + days_since_march_first + 365 * years_since_anchor + leap_days - 32045


def julian_date_at_time_on_day(
    julian_day: int, hour: int, minute: int, second: int
) -> float:
    """Add a time of day to a Julian Day Number as a fractional day.

    Raises:
        InvalidDateError: If hour/minute/second are out of range.
    """
    check_time(hour, minute, second)
    return julian_day + hour / 24 + minute / 1440 + second / 86400


def julian_date(
    month: int, day: int, year: int, hour: int, minute: int, second: int
) -> float:
    """Julian Date of a Gregorian date and time of day."""
    return julian_date_at_time_on_day(
        julian_day_number(month, day, year), hour, minute, second
    )


def julian_date_of(when: CalendarDateTime) -> float:
    """Julian Date of a validated CalendarDateTime."""
    return julian_date(
        when.month, when.day, when.year, when.hour, when.minute, when.second
    )


def lunar_phase_from_julian_date(jd: float) -> int:
    """Bucket a Julian Date into a lunar phase id.

    The position within the current cycle is the time since BASE_NEW_MOON_DATE
    modulo JULIAN_LUNAR_CYCLE. Dates before the base are shifted forward one
    cycle first.

    Args:
        jd: Julian Date.

    Returns:
        Phase id 0-8. Both 0 and 8 mean New Moon; see LunarPhase.from_id.
    """
    difference = jd - BASE_NEW_MOON_DATE
    if difference < 0:
        difference += JULIAN_LUNAR_CYCLE

    phase_date = difference % JULIAN_LUNAR_CYCLE

    for phase_id, threshold in enumerate(_PHASE_THRESHOLDS):
        if phase_date < threshold:
            break
    else:
        phase_id = len(_PHASE_THRESHOLDS)

    logger.debug("jd=%s phase_date=%.5f phase_id=%d", jd, phase_date, phase_id)
    return phase_id


def _now(clock: Clock | None, tz: BaseTzInfo) -> datetime:
    """Current time in tz. Naive clock values are taken to be tz-local."""
    if clock is None:
        return datetime.now(utc).astimezone(tz)
    now = clock()
    if now.tzinfo is None:
        return tz.localize(now)
    return now.astimezone(tz)


def night_of(clock: Clock | None = None, tz: BaseTzInfo | None = None) -> date:
    """Calendar date whose 12:00 GMT Julian Date stands for tonight: tomorrow in tz."""
    try:
        now = _now(clock, tz or utc)
        return now.date() + timedelta(days=1)
    except OverflowError as e:
        raise InvalidDateError("no calendar day follows the clock's date") from e


def lunar_phase_tonight(clock: Clock | None = None, tz: BaseTzInfo | None = None) -> int:
    """Lunar phase id for tonight.

    Args:
        clock: Returns the current datetime. Defaults to the system clock in UTC.
        tz: Zone whose calendar date defines "today". Defaults to UTC.

    Returns:
        Phase id 0-8.
    """
    night = night_of(clock, tz)
    return lunar_phase_from_julian_date(
        julian_date(night.month, night.day, night.year, 12, 0, 0)
    )


def phase_name(phase_id: int, lang: str = "en") -> str:
    """Display name of a phase id. Unknown ids (including 8) are a New Moon."""
    return t(_PHASE_KEYS[LunarPhase.from_id(phase_id)], lang)


def phase_icon_name(phase_id: int) -> str:
    """Icon asset file name of a phase id. Unknown ids (including 8) are a New Moon."""
    return _PHASE_ICONS[LunarPhase.from_id(phase_id)]


def build_report(
    clock: Clock | None = None,
    settings: Settings | None = None,
    rng: random.Random | None = None,
) -> LunarPhaseReport:
    """Assemble tonight's report: exclamation, phase, name, icon, and quote.

    Args:
        clock: Returns the current datetime. Defaults to the system clock.
        settings: Runtime settings. Read from the environment if None.
        rng: Random source for the flavor text.

    Returns:
        LunarPhaseReport for tonight.

    Raises:
        MissingAssetError: If an exclamation or quote file is missing.
    """
    if settings is None:
        settings = load_settings()

    night = night_of(clock, settings.tz)
    jd = julian_date(night.month, night.day, night.year, 12, 0, 0)
    phase_id = lunar_phase_from_julian_date(jd)
    phase = LunarPhase.from_id(phase_id)
    logger.info("Night of %s: %s (phase id %d)", night.isoformat(), phase.name, phase_id)

    return LunarPhaseReport(
        exclamation=random_exclamation(settings.assets_dir, rng),
        phase_id=phase_id,
        phase=phase,
        phase_name=phase_name(phase_id, settings.lang),
        icon_name=phase_icon_name(phase_id),
        quote=random_quote(settings.assets_dir, rng),
        julian_date=jd,
        night_of=night,
    )


def run(settings: Settings | None = None) -> LunarPhaseReport:
    """Top-level entry point: tonight's report from the system clock.

    Args:
        settings: Runtime settings. Read from the environment if None.

    Returns:
        Fully computed LunarPhaseReport.
    """
    return build_report(settings=settings)
