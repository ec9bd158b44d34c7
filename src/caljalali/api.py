from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Dict, Optional

from .core.providers import GregorianService, LocaleProvider, PreferenceProvider
from .core.types import JalaliDate
from .engines.calendar import JalaliCalendar
from .engines.converter import gregorian_to_jalali, jalali_to_gregorian
from .engines.metadata import days_in_jalali_month

# ============================================================
# datetime.date bridges
# ============================================================

def to_jalali(d: date) -> JalaliDate:
    return gregorian_to_jalali(d.year, d.month, d.day)

def to_gregorian(j: JalaliDate) -> date:
    return jalali_to_gregorian(j.year, j.month, j.day).to_date()

# ============================================================
# Month-level helpers
# ============================================================

def month_bounds(year: int, month: int) -> Dict[str, Any]:
    n = days_in_jalali_month(year, month)
    first = jalali_to_gregorian(year, month, 1).to_date()
    return {
        "year": year,
        "month": month,
        "days": n,
        "first_date": first,
        "last_date": first + timedelta(days=n - 1),
    }

def first_day_of_month(year: int, month: int) -> date:
    return month_bounds(year, month)["first_date"]

def last_day_of_month(year: int, month: int) -> date:
    return month_bounds(year, month)["last_date"]

def new_year_day(year: int) -> date:
    """Gregorian date of Nowruz (1 Farvardin) of a Jalali year."""
    return first_day_of_month(year, 1)

def make_calendar(
    locale: LocaleProvider,
    site: Optional[PreferenceProvider] = None,
    user: Optional[PreferenceProvider] = None,
    service: Optional[GregorianService] = None,
) -> JalaliCalendar:
    return JalaliCalendar(locale, site=site, user=user, service=service)
