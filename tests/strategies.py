"""Hypothesis strategies and small builders for dates and moments."""

from __future__ import annotations

from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from ratadie.core import rata_die
from ratadie.core.types import Interval, Parts
from ratadie.date import Date, from_calendar_date
from ratadie.moment import MS_PER_DAY, Moment, from_parts, ms_from_rata_die
from ratadie.zone import UTC

# 1600-01-01 .. 2400-12-31
RD_MIN = rata_die.from_calendar_date(1600, 1, 1)
RD_MAX = rata_die.from_calendar_date(2400, 12, 31)

ALL_INTERVALS = list(Interval)
DATE_INTERVALS = [i for i in Interval if not i.is_sub_day]
ADDITIVE_INTERVALS = [i for i in Interval if i not in (Interval.MONTH, Interval.QUARTER, Interval.YEAR)]


def dates() -> SearchStrategy[Date]:
    return st.integers(min_value=RD_MIN, max_value=RD_MAX).map(Date)


def moments() -> SearchStrategy[Moment]:
    return st.integers(
        min_value=ms_from_rata_die(RD_MIN),
        max_value=ms_from_rata_die(RD_MAX) + MS_PER_DAY - 1,
    ).map(Moment)


def day(y: int, m: int, d: int) -> Date:
    return from_calendar_date(y, m, d)


def at(y: int, m: int, d: int, hh: int = 0, mi: int = 0, ss: int = 0, ms: int = 0, zone=UTC) -> Moment:
    return from_parts(zone, Parts(y, m, d, hh, mi, ss, ms))
