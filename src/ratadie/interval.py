"""
ratadie.interval
----------------
Interval arithmetic: `equal_by`, `floor`, `ceiling`, `add`, `diff`, `range`.

A point in time is treated as a position inside nested intervals
(year > quarter > month > week > day > hour > minute > second >
millisecond), plus seven week-long intervals anchored on each weekday.

Every operation accepts either a `Moment` (read in `zone`, UTC by default)
or a `Date`. Dates have no time of day, so the sub-day intervals
(MILLISECOND .. HOUR) raise `UnsupportedIntervalError` for them.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Dict, Iterator, List, Tuple, TypeVar, Union

from .core import rata_die as rd_engine
from .core.errors import UnsupportedIntervalError
from .core.facts import days_in_month, month_to_quarter, quarter_to_month
from .core.types import Interval
from .date import Date
from .moment import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    Moment,
    from_rata_die_time,
    to_rata_die_time,
)
from .zone import UTC, Zone

T = TypeVar("T", Date, Moment)
Temporal = Union[Date, Moment]

_UNIT_MS: Dict[Interval, int] = {
    Interval.MILLISECOND: 1,
    Interval.SECOND: MS_PER_SECOND,
    Interval.MINUTE: MS_PER_MINUTE,
    Interval.HOUR: MS_PER_HOUR,
}

# next coarser interval checked by equal_by
_PARENT: Dict[Interval, Interval] = {
    Interval.SECOND: Interval.MINUTE,
    Interval.MINUTE: Interval.HOUR,
    Interval.HOUR: Interval.DAY,
    Interval.DAY: Interval.MONTH,
    Interval.MONTH: Interval.YEAR,
    Interval.QUARTER: Interval.YEAR,
}


def _quot(a: int, b: int) -> int:
    """Integer division truncated toward zero (b > 0)."""
    return -(-a // b) if a < 0 else a // b


def _local(x: Temporal, zone: Zone) -> Tuple[int, int]:
    if isinstance(x, Date):
        return x.rd, 0
    return to_rata_die_time(zone, x)


def _check(interval: Interval, x: Temporal) -> None:
    if isinstance(x, Date) and interval.is_sub_day:
        raise UnsupportedIntervalError(
            f"{interval.name} needs a time of day; {x!r} is a Date"
        )


def _rebuild(x: T, rd: int, time_ms: int, zone: Zone) -> T:
    if isinstance(x, Date):
        return Date(rd)
    return from_rata_die_time(zone, rd, time_ms)


# ---------------------------------------------------------
# Day-count level
# ---------------------------------------------------------

def _floor_rd(interval: Interval, rd: int) -> int:
    if interval is Interval.DAY:
        return rd
    if interval in (Interval.MONTH, Interval.QUARTER, Interval.YEAR):
        y, m, _ = rd_engine.to_calendar_date(rd)
        if interval is Interval.MONTH:
            return rd_engine.from_calendar_date(y, m, 1)
        if interval is Interval.QUARTER:
            return rd_engine.from_calendar_date(y, quarter_to_month(month_to_quarter(m)), 1)
        return rd_engine.from_calendar_date(y, 1, 1)
    anchor = interval.anchor
    if anchor is None:
        raise ValueError(f"No day-level floor for {interval}")
    return rd - (rd_engine.weekday_number(rd) - anchor + 7) % 7


def _ordinal_month(y: int, m: int) -> int:
    return 12 * (y - 1) + m - 1


def _add_months_rd(n: int, rd: int) -> int:
    """Same day of month `n` months on, clamped to the target month's length."""
    y, m, d = rd_engine.to_calendar_date(rd)
    y0, m0 = divmod(_ordinal_month(y, m) + n, 12)
    y2, m2 = y0 + 1, m0 + 1
    return rd_engine.from_calendar_date(y2, m2, min(d, days_in_month(y2, m2)))


def _add_rd(interval: Interval, n: int, rd: int) -> int:
    if interval is Interval.DAY:
        return rd + n
    if interval is Interval.MONTH:
        return _add_months_rd(n, rd)
    if interval is Interval.QUARTER:
        return _add_months_rd(3 * n, rd)
    if interval is Interval.YEAR:
        return _add_months_rd(12 * n, rd)
    # WEEK and the weekday intervals: the anchor is not preserved by addition
    return rd + 7 * n


def _fractional_day(rd: int, time_ms: int) -> Fraction:
    return rd + Fraction(time_ms, MS_PER_DAY)


def _fractional_month(rd: int, time_ms: int) -> Fraction:
    """Ordinal month plus (day - 1 + fraction of day) / 31."""
    y, m, d = rd_engine.to_calendar_date(rd)
    return _ordinal_month(y, m) + (d - 1 + Fraction(time_ms, MS_PER_DAY)) / 31


def _field(interval: Interval, rd: int, time_ms: int) -> Tuple[int, ...]:
    if interval is Interval.SECOND:
        return (time_ms // MS_PER_SECOND % 60,)
    if interval is Interval.MINUTE:
        return (time_ms // MS_PER_MINUTE % 60,)
    if interval is Interval.HOUR:
        return (time_ms // MS_PER_HOUR,)
    if interval is Interval.WEEK:
        return rd_engine.week_number(rd), rd_engine.week_year(rd)
    y, m, d = rd_engine.to_calendar_date(rd)
    if interval is Interval.DAY:
        return (d,)
    if interval is Interval.MONTH:
        return (m,)
    if interval is Interval.QUARTER:
        return (month_to_quarter(m),)
    return (y,)


def _equal_by_local(interval: Interval, a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    if interval is Interval.MILLISECOND:
        return a == b
    if interval.anchor is not None and interval is not Interval.WEEK:
        return _floor_rd(interval, a[0]) == _floor_rd(interval, b[0])
    if _field(interval, *a) != _field(interval, *b):
        return False
    parent = _PARENT.get(interval)
    return parent is None or _equal_by_local(parent, a, b)


# ---------------------------------------------------------
# Public operations
# ---------------------------------------------------------

def equal_by(interval: Interval, a: T, b: T, zone: Zone = UTC) -> bool:
    """True iff `a` and `b` fall in the same `interval` (and every coarser one)."""
    _check(interval, a)
    if interval is Interval.MILLISECOND:
        return a == b
    return _equal_by_local(interval, _local(a, zone), _local(b, zone))


def floor(interval: Interval, x: T, zone: Zone = UTC) -> T:
    """Start of the `interval` containing `x`."""
    _check(interval, x)
    if interval.is_sub_day:
        # subtract the local time past the unit boundary straight from the instant
        unit = _UNIT_MS[interval]
        _, time_ms = _local(x, zone)
        return Moment(x.ms - time_ms % unit)
    rd, _ = _local(x, zone)
    return _rebuild(x, _floor_rd(interval, rd), 0, zone)


def ceiling(interval: Interval, x: T, zone: Zone = UTC) -> T:
    """`x` itself on a boundary, otherwise the start of the next `interval`."""
    floored = floor(interval, x, zone)
    if floored == x:
        return x
    return add(interval, 1, floored, zone)


def add(interval: Interval, n: int, x: T, zone: Zone = UTC) -> T:
    """
    Move `x` by `n` intervals.

    Sub-day units shift the instant itself. Day and longer units shift the
    local date and keep the local time of day; months clamp the day, so
    31 January + 1 month is the last day of February.
    """
    _check(interval, x)
    if interval.is_sub_day:
        return Moment(x.ms + n * _UNIT_MS[interval])
    rd, time_ms = _local(x, zone)
    return _rebuild(x, _add_rd(interval, n, rd), time_ms, zone)


def diff(interval: Interval, a: T, b: T, zone: Zone = UTC) -> int:
    """Whole intervals from `a` to `b`, negative if `b` is earlier, truncated toward zero."""
    _check(interval, a)
    if interval.is_sub_day:
        return _quot(b.ms - a.ms, _UNIT_MS[interval])
    if interval is Interval.DAY:
        return int(_fractional_day(*_local(b, zone)) - _fractional_day(*_local(a, zone)))
    if interval is Interval.MONTH:
        return int(_fractional_month(*_local(b, zone)) - _fractional_month(*_local(a, zone)))
    if interval is Interval.QUARTER:
        return _quot(diff(Interval.MONTH, a, b, zone), 3)
    if interval is Interval.YEAR:
        return _quot(diff(Interval.MONTH, a, b, zone), 12)
    if interval is Interval.WEEK:
        return _quot(diff(Interval.DAY, a, b, zone), 7)
    fa = floor(interval, a, zone)
    fb = floor(interval, b, zone)
    return _quot(diff(Interval.DAY, fa, fb, zone), 7)


def iter_range(interval: Interval, step: int, start: T, end: T, zone: Zone = UTC) -> Iterator[T]:
    """
    Lazily yield `ceiling(interval, start)` and every `step`-th interval after
    it while strictly before `end`. `step` below 1 is treated as 1.

    Each element is computed from the first one, so month-end clamping
    never accumulates.
    """
    step = max(1, step)
    first = ceiling(interval, start, zone)
    k = 0
    current = first
    while current < end:
        yield current
        k += step
        current = add(interval, k, first, zone)


def range(interval: Interval, step: int, start: T, end: T, zone: Zone = UTC) -> List[T]:
    """Materialized `iter_range`."""
    return list(iter_range(interval, step, start, end, zone))
