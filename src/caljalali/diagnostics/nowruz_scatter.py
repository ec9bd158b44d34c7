#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import caljalali
from caljalali.core.time import day_of_year


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "caljalali[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "caljalali[diagnostics]"') from e


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """Gregorian year, Gregorian day-of-year of Nowruz, and a leap flag per Jalali year."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    x = np.empty_like(years)
    y = np.empty_like(years, dtype=float)
    leap = np.zeros(len(years), dtype=bool)

    for i, Y in enumerate(years):
        d = caljalali.new_year_day(int(Y))
        x[i] = d.year
        y[i] = float(day_of_year(d))
        leap[i] = caljalali.is_jalali_leap_year(int(Y))

    return x, y, leap


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of the Gregorian day-of-year of Nowruz.")
    p.add_argument("--start-year", type=int, default=caljalali.MIN_YEAR)
    p.add_argument("--end-year", type=int, default=caljalali.MAX_YEAR)
    p.add_argument("--outbase", default="nowruz_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    x, y, leap = build_series(np, args.start_year, args.end_year)

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Day-of-year of 1 Farvardin (Jan 1 = 1)")
    ax.set_title("Nowruz under the 33-year leap cycle")

    ax.scatter(x[~leap], y[~leap], s=14, marker="o", c="tab:blue", alpha=0.5, label="common year")
    ax.scatter(x[leap], y[leap], s=22, marker="o", facecolors="none", edgecolors="tab:red",
               linewidths=1.2, label="leap year")

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
