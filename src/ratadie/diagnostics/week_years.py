#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from ratadie.core import rata_die
from ratadie.core.facts import is_leap_year


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "ratadie[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "ratadie[diagnostics]"') from e


def jan1_weekday(y: int) -> int:
    return rata_die.weekday_number(rata_die.days_before_year(y) + 1)


def build_points(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """Arrays of (year, weekday of 1 January, is 53-week year)."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    weekdays = np.array([jan1_weekday(int(y)) for y in years], dtype=int)
    long_years = np.array([rata_die.is_53_week_year(int(y)) for y in years], dtype=bool)
    return years, weekdays, long_years


def summarize(np, years, weekdays, long_years) -> List[str]:
    lines = [f"Years {years[0]}..{years[-1]}: {int(long_years.sum())} of {len(years)} have 53 weeks"]
    for wd in range(1, 8):
        sel = weekdays == wd
        leap = np.array([is_leap_year(int(y)) for y in years[sel]], dtype=bool)
        lines.append(
            f"  1 Jan weekday {wd}: {int(sel.sum()):4d} years, "
            f"{int(long_years[sel].sum()):4d} long ({int((long_years[sel] & leap).sum())} leap)"
        )
    gaps = np.diff(years[long_years])
    if len(gaps):
        values, counts = np.unique(gaps, return_counts=True)
        spacing = ", ".join(f"{int(v)}y x{int(c)}" for v, c in zip(values, counts))
        lines.append(f"  spacing between long years: {spacing}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="53-week ISO years across a span (default: one 400-year Gregorian cycle)."
    )
    p.add_argument("--start-year", type=int, default=2001)
    p.add_argument("--end-year", type=int, default=2400)
    p.add_argument("--out", default="", help="Write a barcode plot to this PNG file.")
    p.add_argument("--title", default="ISO 53-week years")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    years, weekdays, long_years = build_points(np, args.start_year, args.end_year)
    for line in summarize(np, years, weekdays, long_years):
        print(line)

    if not args.out:
        return 0

    plt = _need_matplotlib()
    fig, ax = plt.subplots(figsize=(16, 3.2))
    ax.scatter(years[~long_years], weekdays[~long_years], s=6, c="0.8", linewidths=0.0, label="52 weeks")
    ax.scatter(years[long_years], weekdays[long_years], s=22, c="0.15", linewidths=0.0, label="53 weeks")
    ax.set_xlim(args.start_year - 0.5, args.end_year + 0.5)
    ax.set_ylim(0.5, 7.5)
    ax.set_yticks(list(range(1, 8)))
    ax.set_yticklabels(["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"])
    ax.tick_params(axis="both", which="both", length=0)
    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Weekday of 1 January")
    ax.set_title(args.title)
    ax.legend(loc="upper right", frameon=False, ncol=2)
    fig.tight_layout()
    fig.savefig(args.out, dpi=150)
    print(f"Wrote {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
