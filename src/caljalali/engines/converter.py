"""
caljalali.engines.converter
---------------------------
Gregorian <-> Jalali conversion through an internal day number.

Both directions share one epoch alignment:
  Gregorian frame: day 0 = 1600-01-01
  Jalali frame:    day 0 = 979-01-01 (Jalali), 79 days after the Gregorian origin
and resolve the day number with nested leap cycles
  Gregorian: 146097 (400 y), 36524/36525 (100 y), 1461 (4 y)
  Jalali:    12053 (33 y), 1461 (4 y)

The two directions are a matched pair: a constant changed on one side must be
mirrored on the other.

All divisions on day numbers truncate toward zero (idiv/imod). Floor division
differs for the negative intermediates produced by dates before 1600.
"""

from __future__ import annotations

from typing import Tuple

from caljalali.core.types import GregorianDate, JalaliDate
from .metadata import GREGORIAN_MONTH_LENGTHS, JALALI_MONTH_LENGTHS, is_gregorian_leap_year

GREGORIAN_BASE_YEAR = 1600
JALALI_BASE_YEAR = 979
EPOCH_SHIFT = 79          # Gregorian day number of Jalali day 0

DAYS_400Y = 146097        # 365*400 + 400/4 - 400/100 + 400/400
DAYS_100Y_FIRST = 36525   # 365*100 + 100/4 (first century of a 400-year cycle)
DAYS_100Y = 36524         # 365*100 + 100/4 - 100/100
DAYS_4Y = 1461            # 365*4 + 4/4
DAYS_33Y = 12053          # 365*33 + 8


def idiv(a: int, b: int) -> int:
    """Integer division truncating toward zero (exact for unbounded ints)."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def imod(a: int, b: int) -> int:
    """Remainder matching idiv: takes the sign of the dividend."""
    return a - b * idiv(a, b)


# ---------------------------------------------------------
# Gregorian side
# ---------------------------------------------------------

def _gregorian_day_number(gy: int, gm: int, gd: int) -> int:
    """Day number of a shifted Gregorian date (gy = year-1600, gm and gd 0-based)."""
    g_day_no = 365 * gy + idiv(gy + 3, 4) - idiv(gy + 99, 100) + idiv(gy + 399, 400)

    # Months past the end of the table add nothing.
    g_day_no += sum(GREGORIAN_MONTH_LENGTHS[:max(gm, 0)])
    if gm > 1 and is_gregorian_leap_year(gy):
        # leap and after Feb
        g_day_no += 1

    return g_day_no + gd


def _gregorian_from_day_number(g_day_no: int) -> Tuple[int, int, int]:
    gy = GREGORIAN_BASE_YEAR + 400 * idiv(g_day_no, DAYS_400Y)
    g_day_no = imod(g_day_no, DAYS_400Y)

    leap = True
    if g_day_no >= DAYS_100Y_FIRST:
        g_day_no -= 1
        gy += 100 * idiv(g_day_no, DAYS_100Y)
        g_day_no = imod(g_day_no, DAYS_100Y)

        if g_day_no >= 365:
            g_day_no += 1
        else:
            leap = False

    gy += 4 * idiv(g_day_no, DAYS_4Y)
    g_day_no = imod(g_day_no, DAYS_4Y)

    if g_day_no >= 366:
        leap = False

        g_day_no -= 1
        gy += idiv(g_day_no, 365)
        g_day_no = imod(g_day_no, 365)

    i = 0
    while True:
        month_len = GREGORIAN_MONTH_LENGTHS[i] + (1 if i == 1 and leap else 0)
        if g_day_no < month_len:
            break
        g_day_no -= month_len
        i += 1

    return gy, i + 1, g_day_no + 1


# ---------------------------------------------------------
# Jalali side
# ---------------------------------------------------------

def _jalali_day_number(jy: int, jm: int, jd: int) -> int:
    """Day number of a shifted Jalali date (jy = year-979, jm and jd 0-based)."""
    j_day_no = 365 * jy + idiv(jy, 33) * 8 + idiv(imod(jy, 33) + 3, 4)
    j_day_no += sum(JALALI_MONTH_LENGTHS[:max(jm, 0)])
    return j_day_no + jd


def _jalali_from_day_number(j_day_no: int) -> Tuple[int, int, int]:
    j_np = idiv(j_day_no, DAYS_33Y)
    j_day_no = imod(j_day_no, DAYS_33Y)

    jy = JALALI_BASE_YEAR + 33 * j_np + 4 * idiv(j_day_no, DAYS_4Y)
    j_day_no = imod(j_day_no, DAYS_4Y)

    if j_day_no >= 366:
        jy += idiv(j_day_no - 1, 365)
        j_day_no = imod(j_day_no - 1, 365)

    # Esfand (index 11) absorbs whatever is left.
    i = 0
    while i < 11 and j_day_no >= JALALI_MONTH_LENGTHS[i]:
        j_day_no -= JALALI_MONTH_LENGTHS[i]
        i += 1

    return jy, i + 1, j_day_no + 1


# ---------------------------------------------------------
# Public conversions
# ---------------------------------------------------------

def gregorian_to_jalali(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> JalaliDate:
    """
    Convert a Gregorian date to the Jalali calendar.

    Inputs are not validated; out-of-range months or days give deterministic
    but meaningless results. Hour and minute pass through unchanged.
    """
    g_day_no = _gregorian_day_number(year - GREGORIAN_BASE_YEAR, month - 1, day - 1)
    jy, jm, jd = _jalali_from_day_number(g_day_no - EPOCH_SHIFT)
    return JalaliDate(jy, jm, jd, hour, minute)


def jalali_to_gregorian(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> GregorianDate:
    """
    Convert a Jalali date to the Gregorian calendar.

    Exact inverse of gregorian_to_jalali for Jalali years 1278..1429. Outside
    that range the arithmetic still runs but may not normalise (e.g. a
    negative day).
    """
    j_day_no = _jalali_day_number(year - JALALI_BASE_YEAR, month - 1, day - 1)
    gy, gm, gd = _gregorian_from_day_number(j_day_no + EPOCH_SHIFT)
    return GregorianDate(gy, gm, gd, hour, minute)
