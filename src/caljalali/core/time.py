from __future__ import annotations
import calendar as pycal
from datetime import date


def noon_timestamp(year: int, month: int, day: int) -> int:
    """UTC timestamp of 12:00 on a Gregorian day (keeps weekday lookups clear of midnight)."""
    return pycal.timegm((year, month, day, 12, 0, 0))


def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1
