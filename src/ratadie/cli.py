from __future__ import annotations

import argparse
import importlib
import inspect
import re
import sys

from .core.types import Interval

_DATE_RE = re.compile(r"^(?:\d{4}|[+-]\d{4,})-\d{2}-\d{2}$")


def _parse_date(s: str):
    from . import iso

    res = iso.date_from_iso_string(s)
    if not res.is_ok():
        raise SystemExit(str(res.error))
    return res.value


def _parse_interval(s: str) -> Interval:
    choices = ", ".join(i.value for i in Interval if not i.is_sub_day)
    try:
        iv = Interval[s.upper()]
    except KeyError:
        raise SystemExit(f"Unknown interval '{s}'. Choose from: {choices}") from None
    # dates carry no time of day
    if iv.is_sub_day:
        raise SystemExit(f"Interval '{s}' is finer than a day. Choose from: {choices}")
    return iv


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """Run a diagnostics module's main(), passing argv only if it takes one."""
    mod = importlib.import_module(modpath)
    entry = getattr(mod, "main", None)
    if entry is None:
        raise SystemExit(f"{modpath} is not runnable (no main)")

    takes_argv = bool(inspect.signature(entry).parameters)
    return int((entry(argv) if takes_argv else entry()) or 0)


def cmd_day(argv: list[str]) -> int:
    from .core import rata_die
    from .iso import to_iso_ordinal_string, to_iso_string, to_iso_week_string

    p = argparse.ArgumentParser(prog="ratadie day", description="Show every notation of one date")
    p.add_argument("date", help="YYYY-MM-DD")
    args = p.parse_args(argv)

    d = _parse_date(args.date)
    print(f"Date         : {to_iso_string(d)}")
    print(f"RataDie      : {d.rd}")
    print(f"JDN          : {rata_die.to_jdn(d.rd)}")
    print(f"Ordinal date : {to_iso_ordinal_string(d)}")
    print(f"Week date    : {to_iso_week_string(d)}")
    print(f"Weekday      : {d.weekday.name.capitalize()}")
    print(f"Quarter      : Q{d.quarter}")
    print(f"Week-year has {rata_die.weeks_in_week_year(d.week_year)} weeks")
    return 0


def cmd_range(argv: list[str]) -> int:
    from . import interval
    from .iso import to_iso_string

    p = argparse.ArgumentParser(prog="ratadie range", description="List interval starts in [start, end)")
    p.add_argument("interval", help="day, week, month, quarter, year, monday..sunday")
    p.add_argument("start", help="YYYY-MM-DD")
    p.add_argument("end", help="YYYY-MM-DD")
    p.add_argument("--step", type=int, default=1)
    args = p.parse_args(argv)

    iv = _parse_interval(args.interval)
    for d in interval.iter_range(iv, args.step, _parse_date(args.start), _parse_date(args.end)):
        print(to_iso_string(d))
    return 0


def cmd_diff(argv: list[str]) -> int:
    from . import interval

    p = argparse.ArgumentParser(prog="ratadie diff", description="Whole intervals from A to B")
    p.add_argument("interval")
    p.add_argument("a", help="YYYY-MM-DD")
    p.add_argument("b", help="YYYY-MM-DD")
    args = p.parse_args(argv)

    print(interval.diff(_parse_interval(args.interval), _parse_date(args.a), _parse_date(args.b)))
    return 0


def cmd_add(argv: list[str]) -> int:
    from . import interval
    from .iso import to_iso_string

    p = argparse.ArgumentParser(prog="ratadie add", description="Move a date by N intervals")
    p.add_argument("interval")
    p.add_argument("n", type=int)
    p.add_argument("date", help="YYYY-MM-DD")
    args = p.parse_args(argv)

    print(to_iso_string(interval.add(_parse_interval(args.interval), args.n, _parse_date(args.date))))
    return 0


def cmd_floor(argv: list[str]) -> int:
    from . import interval
    from .iso import to_iso_string

    p = argparse.ArgumentParser(prog="ratadie floor", description="Start of the interval holding a date")
    p.add_argument("interval")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--ceiling", action="store_true", help="round up instead")
    args = p.parse_args(argv)

    iv = _parse_interval(args.interval)
    d = _parse_date(args.date)
    out = interval.ceiling(iv, d) if args.ceiling else interval.floor(iv, d)
    print(to_iso_string(out))
    return 0


def cmd_format(argv: list[str]) -> int:
    from .format import format_date

    p = argparse.ArgumentParser(prog="ratadie format", description="Render a date with a token pattern")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("pattern", help="e.g. \"EEEE, MMMM ddd yyyy\"")
    args = p.parse_args(argv)

    print(format_date(_parse_date(args.date), args.pattern))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `ratadie YYYY-MM-DD`
    if argv and _DATE_RE.match(argv[0]):
        # "--" keeps argparse from reading a signed year as an option
        return cmd_day(["--", *argv])

    p = argparse.ArgumentParser(prog="ratadie", description="Calendar date arithmetic toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Show calendar, ordinal and week date of a day")
    sub.add_parser("range", help="List interval starts between two dates")
    sub.add_parser("diff", help="Whole intervals between two dates")
    sub.add_parser("add", help="Move a date by N intervals")
    sub.add_parser("floor", help="Round a date down (or up) to an interval boundary")
    sub.add_parser("format", help="Render a date with a token pattern")
    sub.add_parser("pretty-month", help="Print a month grid with ISO week numbers")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "week-years"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    commands = {
        "day": cmd_day,
        "range": cmd_range,
        "diff": cmd_diff,
        "add": cmd_add,
        "floor": cmd_floor,
        "format": cmd_format,
    }
    if args.cmd in commands:
        return commands[args.cmd](rest)

    if args.cmd == "pretty-month":
        return _run_module_main("ratadie.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "ratadie.diagnostics.round_trip",
            "week-years": "ratadie.diagnostics.week_years",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
