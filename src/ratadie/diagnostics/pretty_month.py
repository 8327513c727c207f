from __future__ import annotations

import argparse

from ratadie import interval
from ratadie.core.facts import days_in_month
from ratadie.core.types import Interval
from ratadie.date import Date, from_calendar_date
from ratadie.format import MONTH_NAMES


def dow_header() -> str:
    return "Wk   Mo Tu We Th Fr Sa Su"


def week_row(week_start: Date, first: Date, last: Date) -> str:
    cells = []
    for k in range(7):
        d = interval.add(Interval.DAY, k, week_start)
        cells.append(f"{d.day:2d}" if first <= d <= last else "  ")
    # the week number belongs to the row's Thursday
    thursday = interval.add(Interval.DAY, 3, week_start)
    return f"W{thursday.week_number:02d}  " + " ".join(cells)


def month_grid(y: int, m: int) -> list[str]:
    first = from_calendar_date(y, m, 1)
    last = from_calendar_date(y, m, days_in_month(y, m))
    rows = [f"{MONTH_NAMES[m - 1]} {y}", dow_header(), "-" * len(dow_header())]
    start = interval.floor(Interval.WEEK, first)
    end = interval.add(Interval.DAY, 1, last)
    for week_start in interval.iter_range(Interval.WEEK, 1, start, end):
        rows.append(week_row(week_start, first, last))
    return rows


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Gregorian month calendar with ISO week numbers."
    )
    p.add_argument("year", type=int, nargs="?", default=2009)
    p.add_argument("month", type=int, nargs="?", default=12)
    p.add_argument("--count", type=int, default=1, help="Number of consecutive months to print.")
    args = p.parse_args(argv)

    if not 1 <= args.month <= 12:
        raise SystemExit("month must be in 1..12")

    d = from_calendar_date(args.year, args.month, 1)
    for _ in range(max(1, args.count)):
        for line in month_grid(d.year, d.month):
            print(line)
        print()
        d = interval.add(Interval.MONTH, 1, d)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
