from __future__ import annotations

import argparse
from datetime import date
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    try:
        y, m, d = map(int, s.split("-"))
    except ValueError:
        raise SystemExit(f"Expected YYYY-MM-DD, got {s!r}")
    return y, m, d


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_to_jalali(argv: list[str]) -> int:
    import caljalali

    p = argparse.ArgumentParser(prog="caljalali to-jalali", description="Gregorian -> Jalali date")
    p.add_argument("date", help="YYYY-MM-DD (Gregorian)")
    args = p.parse_args(argv)

    y, m, d = _parse_ymd(args.date)
    try:
        date(y, m, d)
    except ValueError as e:
        raise SystemExit(f"Invalid Gregorian date {args.date}: {e}")

    j = caljalali.gregorian_to_jalali(y, m, d)
    print(j.isoformat())
    return 0


def cmd_to_gregorian(argv: list[str]) -> int:
    import caljalali

    p = argparse.ArgumentParser(prog="caljalali to-gregorian", description="Jalali -> Gregorian date")
    p.add_argument("date", help="YYYY-MM-DD (Jalali)")
    p.add_argument("--weekday", action="store_true", help="Also print the weekday index (0=Sunday)")
    args = p.parse_args(argv)

    y, m, d = _parse_ymd(args.date)
    try:
        caljalali.check_jalali_date(y, m, d)
    except caljalali.InvalidDateError as e:
        raise SystemExit(f"Invalid Jalali date {args.date}: {e}")

    g = caljalali.jalali_to_gregorian(y, m, d)
    if args.weekday:
        print(g.isoformat(), caljalali.weekday_index(y, m, d))
    else:
        print(g.isoformat())
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `caljalali YYYY-MM-DD` converts a Gregorian date
    if argv and _DATE_RE.match(argv[0]):
        return cmd_to_jalali(argv)

    p = argparse.ArgumentParser(prog="caljalali", description="Jalali (Persian) calendar toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-jalali", help="Gregorian -> Jalali date")
    sub.add_parser("to-gregorian", help="Jalali -> Gregorian date")
    sub.add_parser("month", help="Print a Jalali month calendar")
    sub.add_parser("new-years", help="Print the Nowruz table")
    sub.add_parser("leap-years", help="List leap years of the 33-year cycle")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "nowruz-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "to-jalali":
        return cmd_to_jalali(rest)

    if args.cmd == "to-gregorian":
        return cmd_to_gregorian(rest)

    if args.cmd == "month":
        return _run_module_main("caljalali.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("caljalali.diagnostics.new_years_table", rest)

    if args.cmd == "leap-years":
        return _run_module_main("caljalali.diagnostics.leap_years", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "caljalali.diagnostics.round_trip",
            "nowruz-scatter": "caljalali.diagnostics.nowruz_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
