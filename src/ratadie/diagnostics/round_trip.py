from __future__ import annotations

import argparse
import random
from datetime import date, timedelta

from ratadie.core import rata_die
from ratadie.date import to_calendar_date, to_week_date, try_from_calendar_date, try_from_week_date


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def check_one(d0: date) -> list[str]:
    """Compare against the standard library; returns a list of failure descriptions."""
    problems = []
    rd = d0.toordinal()

    res = try_from_calendar_date(d0.year, d0.month, d0.day)
    if not res.is_ok():
        return [f"from_calendar_date rejected a valid date: {res.error}"]
    d = res.value
    if d.rd != rd:
        problems.append(f"from_calendar_date: got rd={d.rd}, expected rd={rd}")

    c = to_calendar_date(d)
    if (c.year, int(c.month), c.day) != (d0.year, d0.month, d0.day):
        problems.append(f"to_calendar_date: got {c!r}")

    iy, iw, iwd = d0.isocalendar()
    w = to_week_date(d)
    if (w.week_year, w.week_number, int(w.weekday)) != (iy, iw, iwd):
        problems.append(f"to_week_date: got {w!r}, expected {(iy, iw, iwd)}")

    back = try_from_week_date(iy, iw, iwd)
    if not back.is_ok() or back.value.rd != rd:
        problems.append(f"from_week_date: got {back!r}")

    if rata_die.from_jdn(rata_die.to_jdn(rd)) != rd:
        problems.append(f"jdn round trip failed for rd={rd}")
    return problems


def roundtrip_test(N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)
        problems = check_one(d0)
        if problems:
            failures += 1
            print("\nFAIL")
            print("d0:", d0)
            for line in problems:
                print("  ", line)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests against datetime.date.")
    p.add_argument("--N", type=int, default=20000, help="Number of trials.")
    p.add_argument("--start", type=str, default="0001-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="9999-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    print(f"Testing {args.N} dates in {start} .. {end} ...")
    failures = roundtrip_test(args.N, start, end, args.seed, max_failures=args.max_failures)

    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
