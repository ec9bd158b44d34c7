"""
caljalali.engines.calendar
--------------------------
The Orchestrator. Binds the locale, site/user preferences and a Gregorian
service to the stateless Jalali arithmetic, exposing the full calendar-type
surface a host application needs (selectors, navigation, formatting).
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from caljalali.core.providers import GregorianService, LocaleProvider, MappingPreferences, PreferenceProvider
from caljalali.core.types import GregorianDate, JalaliDate, JalaliDateArray
from . import formatter, query
from .converter import gregorian_to_jalali, jalali_to_gregorian
from .gregorian import DEFAULT_TIMEZONE, StdlibGregorianService
from .metadata import MAX_YEAR, MIN_YEAR, NUM_WEEKDAYS


class JalaliCalendar:
    name = "jalali"

    def __init__(
        self,
        locale: LocaleProvider,
        site: Optional[PreferenceProvider] = None,
        user: Optional[PreferenceProvider] = None,
        service: Optional[GregorianService] = None,
    ):
        self.locale = locale
        self.site = site if site is not None else MappingPreferences()
        self.user = user
        self.service = service if service is not None else StdlibGregorianService()

    # ---------------------------------------------------------
    # Selectors
    # ---------------------------------------------------------

    @property
    def min_year(self) -> int:
        return MIN_YEAR

    @property
    def max_year(self) -> int:
        return MAX_YEAR

    @property
    def num_weekdays(self) -> int:
        return NUM_WEEKDAYS

    def days(self) -> Dict[int, int]:
        return query.valid_days()

    def months(self) -> Dict[int, str]:
        return query.month_names(self.locale)

    def years(self, min_year: Optional[int] = None, max_year: Optional[int] = None) -> Dict[int, int]:
        return query.year_range(min_year, max_year)

    def date_order(self, min_year: Optional[int] = None, max_year: Optional[int] = None) -> Dict[str, Dict[int, Any]]:
        return query.date_order(self.locale, min_year, max_year)

    def weekdays(self) -> Dict[int, Dict[str, str]]:
        return query.weekday_names(self.locale)

    def starting_weekday(self) -> int:
        return query.starting_weekday(self.locale, self.site, self.user)

    # ---------------------------------------------------------
    # Day and month arithmetic
    # ---------------------------------------------------------

    def weekday(self, year: int, month: int, day: int) -> int:
        return query.weekday_index(year, month, day, self.service)

    def days_in_month(self, year: int, month: int) -> int:
        return query.days_in_month(year, month)

    def prev_month(self, year: int, month: int) -> Tuple[int, int]:
        return query.previous_month(year, month)

    def next_month(self, year: int, month: int) -> Tuple[int, int]:
        return query.next_month(year, month)

    def convert_from_gregorian(self, year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> JalaliDate:
        return gregorian_to_jalali(year, month, day, hour, minute)

    def convert_to_gregorian(self, year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> GregorianDate:
        return jalali_to_gregorian(year, month, day, hour, minute)

    # ---------------------------------------------------------
    # Timestamps
    # ---------------------------------------------------------

    def timestamp_to_date_array(self, time: int, timezone: Any = DEFAULT_TIMEZONE) -> JalaliDateArray:
        return formatter.timestamp_to_date_array(time, timezone, self.locale, self.service)

    def timestamp_to_date_string(self, time: int, template: str, timezone: Any = DEFAULT_TIMEZONE,
                                 fix_day: bool = True, fix_hour: bool = True) -> str:
        return formatter.format_timestamp(
            time, template, timezone, fix_day, fix_hour,
            locale=self.locale, service=self.service, site=self.site,
        )

    def locale_win_charset(self) -> str:
        return "utf-8"

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "min_year": self.min_year,
            "max_year": self.max_year,
            "starting_weekday": self.starting_weekday(),
        }
