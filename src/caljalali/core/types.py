from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Tuple

@dataclass(frozen=True)
class CalendarDate:
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0

    @property
    def ymd(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

@dataclass(frozen=True)
class GregorianDate(CalendarDate):
    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

@dataclass(frozen=True)
class JalaliDate(CalendarDate):
    pass

@dataclass(frozen=True)
class GregorianDateArray:
    """Gregorian wall-clock fields of a timestamp, as produced by a GregorianService."""
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday_index: int  # 0=Sun..6=Sat
    yday: int

@dataclass(frozen=True)
class JalaliDateArray:
    """Jalali date of a timestamp with the wall clock and localized names attached."""
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday_index: int
    yday: int
    month_name: str
    weekday_name: str
