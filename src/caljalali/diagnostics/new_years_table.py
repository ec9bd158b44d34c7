from __future__ import annotations

from datetime import date
import argparse
from collections import Counter
from typing import Optional

import caljalali


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print the Gregorian date of Nowruz (1 Farvardin) for a range of Jalali years.")
    p.add_argument("--from-year", type=int, default=1390)
    p.add_argument("--to-year", type=int, default=1410)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the Nowruz column (default: iso).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    headers = ["Year", "Nowruz", "Leap", "Esfand"]
    colw = [5, 10, 4, 6]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    seen: Counter = Counter()
    for Y in range(Y0, Y1 + 1):
        d = caljalali.new_year_day(Y)
        seen[mmdd(d)] += 1
        leap = "L" if caljalali.is_jalali_leap_year(Y) else ""
        row = [str(Y), fmt(d), leap, str(caljalali.days_in_jalali_month(Y, 12))]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))

    print("\nNowruz by Gregorian month-day:")
    for k in sorted(seen):
        print(f"{k}  {seen[k]}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
