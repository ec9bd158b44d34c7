"""
caljalali.engines.metadata
--------------------------
Static month tables and leap rules shared by the converter and the queries.
"""

from __future__ import annotations

from typing import Tuple

# Common-year lengths; February and Esfand get their leap day at the use site.
GREGORIAN_MONTH_LENGTHS: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
JALALI_MONTH_LENGTHS: Tuple[int, ...] = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29)

# Range over which Gregorian <-> Jalali round trips are exact.
MIN_YEAR = 1278
MAX_YEAR = 1429

NUM_WEEKDAYS = 7


def is_jalali_leap_year(year: int) -> bool:
    """
    33-year cyclic leap rule (8 leap years per cycle).

    The conversion constants in converter.py assume exactly this rule; it is
    not the astronomical one and must not be swapped for it.
    """
    return (((year + 16) % 33) + 33) % 33 * 8 % 33 < 8


def is_gregorian_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_jalali_month(year: int, month: int) -> int:
    if month <= 6:
        return 31
    if month != 12 or is_jalali_leap_year(year):
        return 30
    return 29
