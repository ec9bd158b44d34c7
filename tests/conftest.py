# tests/conftest.py

import calendar

import pytest

from caljalali import MappingLocale, MappingPreferences, StdlibGregorianService

EN_STRINGS = {
    "am": "am",
    "pm": "pm",
    "am_caps": "AM",
    "pm_caps": "PM",
    "firstdayofweek": "6",
    "strftimedaydatetime": "%A, %d %B %Y, %I:%M %p",
    **{f"month{i}": name for i, name in enumerate(
        ["Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
         "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand"], start=1)},
    **{f"wday{i}": name for i, name in enumerate(["Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"])},
    **{f"weekday{i}": name for i, name in enumerate(
        ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"])},
}


@pytest.fixture
def utc_ts():
    """UTC timestamp builder: utc_ts(2023, 3, 21, 12) -> int."""
    def build(year, month, day, hour=0, minute=0):
        return calendar.timegm((year, month, day, hour, minute, 0))
    return build


@pytest.fixture
def locale():
    return MappingLocale(EN_STRINGS, name="en")


@pytest.fixture
def site():
    return MappingPreferences()


@pytest.fixture
def service():
    return StdlibGregorianService()
