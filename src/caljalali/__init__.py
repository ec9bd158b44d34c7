"""caljalali public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    to_jalali,
    to_gregorian,
    month_bounds,
    first_day_of_month,
    last_day_of_month,
    new_year_day,
    make_calendar,
)
from .core.errors import CaljalaliError, InvalidDateError, MissingTranslation
from .core.providers import MappingLocale, MappingPreferences
from .core.types import GregorianDate, JalaliDate
from .engines.calendar import JalaliCalendar
from .engines.converter import gregorian_to_jalali, jalali_to_gregorian
from .engines.formatter import format_timestamp, timestamp_to_date_array
from .engines.gregorian import StdlibGregorianService
from .engines.metadata import MAX_YEAR, MIN_YEAR, days_in_jalali_month, is_jalali_leap_year
from .engines.query import (
    check_jalali_date,
    date_order,
    days_in_month,
    month_names,
    next_month,
    previous_month,
    starting_weekday,
    valid_days,
    weekday_index,
    weekday_names,
    year_range,
)

format = format_timestamp

__all__ = [
    "gregorian_to_jalali",
    "jalali_to_gregorian",
    "is_jalali_leap_year",
    "days_in_jalali_month",
    "days_in_month",
    "weekday_index",
    "previous_month",
    "next_month",
    "year_range",
    "valid_days",
    "month_names",
    "weekday_names",
    "date_order",
    "starting_weekday",
    "check_jalali_date",
    "format",
    "format_timestamp",
    "timestamp_to_date_array",
    "to_jalali",
    "to_gregorian",
    "month_bounds",
    "first_day_of_month",
    "last_day_of_month",
    "new_year_day",
    "make_calendar",
    "JalaliCalendar",
    "StdlibGregorianService",
    "MappingLocale",
    "MappingPreferences",
    "GregorianDate",
    "JalaliDate",
    "CaljalaliError",
    "InvalidDateError",
    "MissingTranslation",
    "MIN_YEAR",
    "MAX_YEAR",
]
