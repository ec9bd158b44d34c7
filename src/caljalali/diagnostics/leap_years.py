from __future__ import annotations

import argparse
from typing import List, Optional

import caljalali

CYCLE = 33


def leap_years(start_year: int, end_year: int) -> List[int]:
    return [y for y in range(start_year, end_year + 1) if caljalali.is_jalali_leap_year(y)]


def cycle_position(year: int) -> int:
    """Position of a year inside the 33-year cycle (0 for the cycle's first leap year, 979, 1012, ...)."""
    return (year - 979) % CYCLE


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(description="List Jalali leap years and their place in the 33-year cycle.")
    p.add_argument("--start-year", type=int, default=caljalali.MIN_YEAR)
    p.add_argument("--end-year", type=int, default=caljalali.MAX_YEAR)
    p.add_argument("--gaps", action="store_true", help="Also print the distance to the previous leap year.")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    years = leap_years(args.start_year, args.end_year)
    prev: Optional[int] = None
    for y in years:
        line = f"{y}  pos={cycle_position(y):2d}  nowruz={caljalali.new_year_day(y).isoformat()}"
        if args.gaps and prev is not None:
            line += f"  gap={y - prev}"
        print(line)
        prev = y

    span = args.end_year - args.start_year + 1
    print(f"\n{len(years)} leap years in {span} years")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
