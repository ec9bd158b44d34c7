"""
caljalali.engines.formatter
---------------------------
Jalali date strings from UTC timestamps.

The Jalali-specific strftime tokens are substituted here; whatever is left
(hours, minutes, literal text) is handed to the Gregorian service.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from caljalali.core.providers import GregorianService, LocaleProvider, PreferenceProvider
from caljalali.core.types import JalaliDateArray
from .converter import gregorian_to_jalali
from .gregorian import DEFAULT_TIMEZONE, StdlibGregorianService

logger = logging.getLogger(__name__)

# Substitution order matters: replacements are applied one after another.
JALALI_TOKENS = ("%a", "%A", "%b", "%B", "%d", "%m", "%y", "%Y", "%p", "%P")


def jalali_day_of_year(month: int, day: int) -> int:
    return (6 if month > 6 else month - 1) + (month - 1) * 30 + day


def timestamp_to_date_array(time: int, timezone: Any, locale: LocaleProvider,
                            service: Optional[GregorianService] = None) -> JalaliDateArray:
    if service is None:
        service = StdlibGregorianService()

    g = service.timestamp_to_date_array(time, timezone)
    j = gregorian_to_jalali(g.year, g.month, g.day)

    return JalaliDateArray(
        year=j.year,
        month=j.month,
        day=j.day,
        hour=g.hour,
        minute=g.minute,
        second=g.second,
        weekday_index=g.weekday_index,
        yday=jalali_day_of_year(j.month, j.day),
        month_name=locale.name_for(f"month{j.month}"),
        weekday_name=locale.name_for(f"weekday{g.weekday_index}"),
    )


def format_timestamp(
    time: int,
    template: str,
    timezone: Any = DEFAULT_TIMEZONE,
    fix_day: bool = True,
    fix_hour: bool = True,
    *,
    locale: LocaleProvider,
    service: Optional[GregorianService] = None,
    site: Optional[PreferenceProvider] = None,
) -> str:
    """
    Render `time` with a restricted strftime template in the Jalali calendar.

    fix_day drops the leading zero of %d; fix_hour does the same for %I.
    An empty template falls back to the locale's 'strftimedaydatetime', and a
    truthy site setting 'nofixday' forces fix_day off.

    %a/%A both give the full weekday name and %b/%B the full month name.
    """
    if service is None:
        service = StdlibGregorianService()

    am = locale.name_for("am")
    pm = locale.name_for("pm")
    am_caps = locale.name_for("am_caps")
    pm_caps = locale.name_for("pm_caps")

    if not template:
        template = locale.name_for("strftimedaydatetime")
        logger.debug("Empty template, using locale default %r", template)

    if site is not None and site.get("nofixday", False):
        logger.debug("Site setting nofixday forces zero-padded days")
        fix_day = False

    jd = timestamp_to_date_array(time, timezone, locale, service)

    values = (
        jd.weekday_name,
        jd.weekday_name,
        jd.month_name,
        jd.month_name,
        ("0" if jd.day < 10 and not fix_day else "") + str(jd.day),
        f"{jd.month:02d}",
        f"{jd.year % 100:02d}",
        str(jd.year),
        am_caps if jd.hour < 12 else pm_caps,
        am if jd.hour < 12 else pm,
    )
    for token, value in zip(JALALI_TOKENS, values):
        template = template.replace(token, value)

    return service.format(time, template, timezone, fix_day, fix_hour)
