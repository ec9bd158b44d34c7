"""
caljalali.engines.gregorian
---------------------------
Default GregorianService on top of datetime/zoneinfo. Callers embedding the
calendar in a larger system usually pass their own service instead.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone as dt_timezone, tzinfo
from typing import Any
from zoneinfo import ZoneInfo

from caljalali.core.types import GregorianDateArray
from caljalali.core.time import day_of_year

# Sentinel meaning "the service's default timezone".
DEFAULT_TIMEZONE = 99


class StdlibGregorianService:
    def __init__(self, default_tz: tzinfo = dt_timezone.utc):
        self.default_tz = default_tz

    def resolve_timezone(self, tz: Any) -> tzinfo:
        """
        Accepts None/99 (default), a tzinfo, an offset in hours (number or
        numeric string) or an IANA zone name.
        """
        if tz is None:
            return self.default_tz
        if isinstance(tz, tzinfo):
            return tz
        try:
            hours = float(tz)
        except ValueError:
            return ZoneInfo(str(tz))
        if hours == DEFAULT_TIMEZONE:
            return self.default_tz
        return dt_timezone(timedelta(hours=hours))

    def _datetime(self, time: int, tz: Any) -> datetime:
        return datetime.fromtimestamp(time, tz=self.resolve_timezone(tz))

    def timestamp_to_date_array(self, time: int, timezone: Any = DEFAULT_TIMEZONE) -> GregorianDateArray:
        dt = self._datetime(time, timezone)
        return GregorianDateArray(
            year=dt.year,
            month=dt.month,
            day=dt.day,
            hour=dt.hour,
            minute=dt.minute,
            second=dt.second,
            weekday_index=(dt.weekday() + 1) % 7,  # Monday=0 -> Sunday=0
            yday=day_of_year(dt.date()),
        )

    def format(self, time: int, template: str, timezone: Any = DEFAULT_TIMEZONE,
               fix_day: bool = True, fix_hour: bool = True) -> str:
        """
        strftime with optional leading-zero removal: fix_day turns %d into the
        bare day number, fix_hour does the same for %I.
        """
        dt = self._datetime(time, timezone)
        if fix_day:
            template = template.replace("%d", str(dt.day))
        if fix_hour:
            template = template.replace("%I", str(dt.hour % 12 or 12))
        return dt.strftime(template)
