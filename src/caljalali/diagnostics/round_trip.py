from __future__ import annotations

import argparse
import random
from typing import Optional

import caljalali


def roundtrip_test(N: int, start_year: int, end_year: int, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        y = random.randint(start_year, end_year)
        m = random.randint(1, 12)
        d = random.randint(1, caljalali.days_in_jalali_month(y, m))

        g = caljalali.jalali_to_gregorian(y, m, d)
        back = caljalali.gregorian_to_jalali(*g.ymd)
        if back.ymd != (y, m, d):
            failures += 1
            print("\nFAIL")
            print("jalali:", (y, m, d))
            print("gregorian:", g)
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: jalali -> gregorian -> jalali.")
    p.add_argument("--N", type=int, default=20000, help="Number of trials.")
    p.add_argument("--start-year", type=int, default=caljalali.MIN_YEAR)
    p.add_argument("--end-year", type=int, default=caljalali.MAX_YEAR)
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    f = roundtrip_test(args.N, args.start_year, args.end_year, args.seed, max_failures=args.max_failures)
    if f == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {f}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
