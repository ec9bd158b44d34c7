from __future__ import annotations

from datetime import timedelta
import argparse
from typing import Optional

import caljalali

# Index 0 is Sunday, matching weekday_index.
DOW = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")


def dow_header(start: int) -> str:
    return "     ".join(DOW[(start + i) % 7] for i in range(7))


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, header: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(header)
    print("-" * len(header))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def jalali_month_calendar(Y: int, M: int, start: int = 6) -> None:
    b = caljalali.month_bounds(Y, M)
    d0 = b["first_date"]

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = (caljalali.weekday_index(Y, M, 1) - start) % 7
    for _ in range(pad):
        wk.append(cell("", ""))
    for i in range(b["days"]):
        g = d0 + timedelta(days=i)
        wk.append(cell(f"{i + 1:2d}", f"{g.month:02d}-{g.day:02d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    title = f"Jalali month  {Y}-{M:02d}   ({d0} .. {b['last_date']})"
    print_grid(title, dow_header(start), weeks)


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print a Jalali month calendar with the matching Gregorian days.")
    p.add_argument("year", type=int, nargs="?", default=1403)
    p.add_argument("month", type=int, nargs="?", default=1)
    p.add_argument("--start", type=int, default=6, help="First weekday column, 0=Sunday..6=Saturday (default: 6)")
    args = p.parse_args(argv)

    try:
        caljalali.check_jalali_date(args.year, args.month, 1)
    except caljalali.InvalidDateError as e:
        raise SystemExit(str(e))

    jalali_month_calendar(args.year, args.month, start=args.start % 7)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
