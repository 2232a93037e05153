"""Tests for the data model."""

import dataclasses

import pytest

from tonightsmoon.models import CalendarDateTime, InvalidDateError, LunarPhase


def test_lunar_phase_from_id():
    assert LunarPhase.from_id(4) is LunarPhase.FULL_MOON
    assert LunarPhase.from_id(8) is LunarPhase.NEW_MOON
    assert LunarPhase.from_id(-1) is LunarPhase.NEW_MOON
    assert len(LunarPhase) == 8


def test_calendar_datetime_defaults_to_midnight():
    when = CalendarDateTime(year=2024, month=2, day=29)
    assert (when.hour, when.minute, when.second) == (0, 0, 0)


def test_calendar_datetime_is_frozen():
    when = CalendarDateTime(year=2024, month=2, day=29)
    with pytest.raises(dataclasses.FrozenInstanceError):
        when.day = 30  # type: ignore[misc]


@pytest.mark.parametrize(
    "fields",
    [
        {"year": 2023, "month": 2, "day": 29},
        {"year": 2024, "month": 13, "day": 1},
        {"year": 2024, "month": 1, "day": 1, "hour": 24},
        {"year": 2024, "month": 1, "day": 1, "second": 60},
    ],
)
def test_calendar_datetime_validates(fields):
    with pytest.raises(InvalidDateError):
        CalendarDateTime(**fields)


def test_invalid_date_error_is_value_error():
    assert issubclass(InvalidDateError, ValueError)
