"""Data model definitions — explicit boundaries between input, compute, and report layers."""

import calendar
from dataclasses import dataclass
from datetime import date
from enum import IntEnum


class InvalidDateError(ValueError):
    """Calendar or time-of-day field outside its natural range."""


def check_date(month: int, day: int, year: int) -> None:
    """Raise InvalidDateError unless month/day name a real day of the Gregorian year."""
    if not 1 <= month <= 12:
        raise InvalidDateError(f"month out of range: {month}")
    # monthrange applies the Gregorian leap rule to any year, including <= 0
    days_in_month = calendar.monthrange(year, month)[1]
    if not 1 <= day <= days_in_month:
        raise InvalidDateError(
            f"day out of range for {year:04d}-{month:02d}: {day} (1-{days_in_month})"
        )


def check_time(hour: int, minute: int, second: int) -> None:
    """Raise InvalidDateError unless hour/minute/second form a valid time of day."""
    if not 0 <= hour <= 23:
        raise InvalidDateError(f"hour out of range: {hour}")
    if not 0 <= minute <= 59:
        raise InvalidDateError(f"minute out of range: {minute}")
    if not 0 <= second <= 59:
        raise InvalidDateError(f"second out of range: {second}")


class LunarPhase(IntEnum):
    """The eight named phases. Bucket 8 from the phase calculation is folded into NEW_MOON."""

    NEW_MOON = 0
    WAXING_CRESCENT = 1
    FIRST_QUARTER = 2
    WAXING_GIBBOUS = 3
    FULL_MOON = 4
    WANING_GIBBOUS = 5
    LAST_QUARTER = 6
    WANING_CRESCENT = 7

    @classmethod
    def from_id(cls, phase_id: int) -> "LunarPhase":
        """Map a raw phase bucket (0-8) to a phase. Unknown ids are a New Moon."""
        try:
            return cls(phase_id)
        except ValueError:
            return cls.NEW_MOON


@dataclass(frozen=True)
class CalendarDateTime:
    """A Gregorian date and GMT time of day. Validated on construction."""

    year: int
    month: int  # 1-12
    day: int  # 1-31, bounded by the month
    hour: int = 0  # 0-23
    minute: int = 0  # 0-59
    second: int = 0  # 0-59

    def __post_init__(self) -> None:
        check_date(self.month, self.day, self.year)
        check_time(self.hour, self.minute, self.second)


@dataclass(frozen=True)
class LunarPhaseReport:
    """Everything shown for a night: flavor text, phase, and its icon."""

    exclamation: str | None  # Random line from exclamations.txt
    phase_id: int  # Raw bucket, 0-8
    phase: LunarPhase
    phase_name: str  # Display name in the configured language
    icon_name: str  # Icon asset file name ("fullMoon.svg")
    quote: str | None  # Random line from quotes.txt
    julian_date: float  # Julian Date the phase was computed for
    night_of: date  # Calendar date of the night described
