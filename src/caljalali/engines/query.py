"""
caljalali.engines.query
-----------------------
Read-only calendar queries used to present and navigate Jalali dates.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional, Tuple

from caljalali.core.errors import InvalidDateError
from caljalali.core.providers import GregorianService, LocaleProvider, PreferenceProvider
from caljalali.core.time import noon_timestamp
from .converter import jalali_to_gregorian
from .gregorian import StdlibGregorianService
from .metadata import MAX_YEAR, MIN_YEAR, NUM_WEEKDAYS, days_in_jalali_month

logger = logging.getLogger(__name__)

SATURDAY = 6


def valid_days() -> Dict[int, int]:
    """Every day number any month can have (1..31), for populating selectors."""
    return {d: d for d in range(1, 32)}


def month_names(locale: LocaleProvider) -> Dict[int, str]:
    return {m: locale.name_for(f"month{m}") for m in range(1, 13)}


def weekday_names(locale: LocaleProvider) -> Dict[int, Dict[str, str]]:
    """Index 0 is Sunday. Each entry carries 'shortname' and 'fullname'."""
    return {
        i: {
            "shortname": locale.name_for(f"wday{i}"),
            "fullname": locale.name_for(f"weekday{i}"),
        }
        for i in range(NUM_WEEKDAYS)
    }


def year_range(min_year: Optional[int] = None, max_year: Optional[int] = None) -> Dict[int, int]:
    if min_year is None:
        min_year = MIN_YEAR
    if max_year is None:
        max_year = MAX_YEAR
    return {y: y for y in range(min_year, max_year + 1)}


def date_order(locale: LocaleProvider, min_year: Optional[int] = None,
               max_year: Optional[int] = None) -> Dict[str, Dict[int, Any]]:
    """Selector contents in display order: day, month, year."""
    return {
        "day": valid_days(),
        "month": month_names(locale),
        "year": year_range(min_year, max_year),
    }


def days_in_month(year: int, month: int) -> int:
    return days_in_jalali_month(year, month)


def previous_month(year: int, month: int) -> Tuple[int, int]:
    """(month, year) of the month before; Farvardin wraps to Esfand of the previous year."""
    if month == 1:
        return 12, year - 1
    return month - 1, year


def next_month(year: int, month: int) -> Tuple[int, int]:
    """(month, year) of the month after; Esfand wraps to Farvardin of the next year."""
    if month == 12:
        return 1, year + 1
    return month + 1, year


def weekday_index(year: int, month: int, day: int,
                  service: Optional[GregorianService] = None) -> int:
    """
    Weekday of a Jalali date, 0=Sunday..6=Saturday.

    The Gregorian day is looked up at noon UTC so the answer cannot slip
    across a day boundary.
    """
    if service is None:
        service = StdlibGregorianService()
    g = jalali_to_gregorian(year, month, day)
    return service.timestamp_to_date_array(noon_timestamp(g.year, g.month, g.day), 0).weekday_index


def _is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    try:
        return math.isfinite(float(str(value).strip()))
    except ValueError:
        return False


def starting_weekday(locale: LocaleProvider, site: PreferenceProvider,
                     user: Optional[PreferenceProvider] = None) -> int:
    """
    First day of the week.

    Site setting 'calendar_startwday', else the locale's 'firstdayofweek';
    a non-numeric value means Saturday. A user 'calendar_startwday' wins
    over both.
    """
    firstday = site.get("calendar_startwday", None)
    if firstday is None:
        firstday = locale.name_for("firstdayofweek")

    if _is_numeric(firstday):
        start = int(float(firstday)) % NUM_WEEKDAYS
    else:
        logger.debug("Non-numeric first day of week %r, using Saturday", firstday)
        start = SATURDAY

    if user is None:
        return start
    return user.get("calendar_startwday", start)


def check_jalali_date(year: int, month: int, day: int) -> None:
    """
    Opt-in validation. The converters accept anything; callers that take
    dates from users can run this first.
    """
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Month {month} is outside 1..12")
    n = days_in_jalali_month(year, month)
    if not 1 <= day <= n:
        raise InvalidDateError(f"Day {day} is outside 1..{n} for {year}-{month:02d}")
