from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ratadie import interval as iv
from ratadie.core.errors import UnsupportedIntervalError
from ratadie.core.types import Interval
from ratadie.moment import MS_PER_DAY, MS_PER_HOUR
from ratadie.zone import TableZone

from strategies import (
    ADDITIVE_INTERVALS,
    ALL_INTERVALS,
    DATE_INTERVALS,
    at,
    dates,
    day,
    moments,
)

# Thursday
X = at(2007, 3, 15, 11, 55, 12, 345)

_SPRING = at(2007, 3, 25, 1).ms
_AUTUMN = at(2007, 10, 28, 1).ms
CET = TableZone(60, ((_SPRING, 120), (_AUTUMN, 60)))


# ---------------------------------------------------------
# floor / ceiling
# ---------------------------------------------------------

@pytest.mark.parametrize("interval, expected", [
    (Interval.MILLISECOND, X),
    (Interval.SECOND, at(2007, 3, 15, 11, 55, 12)),
    (Interval.MINUTE, at(2007, 3, 15, 11, 55)),
    (Interval.HOUR, at(2007, 3, 15, 11)),
    (Interval.DAY, at(2007, 3, 15)),
    (Interval.WEEK, at(2007, 3, 12)),
    (Interval.MONDAY, at(2007, 3, 12)),
    (Interval.TUESDAY, at(2007, 3, 13)),
    (Interval.WEDNESDAY, at(2007, 3, 14)),
    (Interval.THURSDAY, at(2007, 3, 15)),
    (Interval.FRIDAY, at(2007, 3, 9)),
    (Interval.SATURDAY, at(2007, 3, 10)),
    (Interval.SUNDAY, at(2007, 3, 11)),
    (Interval.MONTH, at(2007, 3, 1)),
    (Interval.QUARTER, at(2007, 1, 1)),
    (Interval.YEAR, at(2007, 1, 1)),
])
def test_floor(interval, expected):
    assert iv.floor(interval, X) == expected


@pytest.mark.parametrize("interval, expected", [
    (Interval.MILLISECOND, X),
    (Interval.SECOND, at(2007, 3, 15, 11, 55, 13)),
    (Interval.MINUTE, at(2007, 3, 15, 11, 56)),
    (Interval.HOUR, at(2007, 3, 15, 12)),
    (Interval.DAY, at(2007, 3, 16)),
    (Interval.WEEK, at(2007, 3, 19)),
    (Interval.THURSDAY, at(2007, 3, 22)),
    (Interval.FRIDAY, at(2007, 3, 16)),
    (Interval.MONTH, at(2007, 4, 1)),
    (Interval.QUARTER, at(2007, 4, 1)),
    (Interval.YEAR, at(2008, 1, 1)),
])
def test_ceiling(interval, expected):
    assert iv.ceiling(interval, X) == expected


def test_floor_of_date():
    d = day(2007, 3, 15)
    assert iv.floor(Interval.DAY, d) == d
    assert iv.floor(Interval.WEEK, d) == day(2007, 3, 12)
    assert iv.floor(Interval.QUARTER, day(2007, 8, 20)) == day(2007, 7, 1)
    assert iv.ceiling(Interval.MONTH, day(2007, 3, 1)) == day(2007, 3, 1)
    assert iv.ceiling(Interval.MONTH, d) == day(2007, 4, 1)


def test_sub_day_intervals_reject_dates():
    d = day(2007, 3, 15)
    for interval in (Interval.MILLISECOND, Interval.SECOND, Interval.MINUTE, Interval.HOUR):
        with pytest.raises(UnsupportedIntervalError):
            iv.floor(interval, d)
        with pytest.raises(ValueError):
            iv.add(interval, 1, d)
        with pytest.raises(UnsupportedIntervalError):
            iv.diff(interval, d, d)


def test_floor_day_in_zone():
    # 12:00 local (+02:00) on the day clocks went forward; local midnight was still +01:00
    m = at(2007, 3, 25, 10)
    assert iv.floor(Interval.DAY, m, CET) == at(2007, 3, 24, 23)


@given(st.sampled_from(ALL_INTERVALS), moments())
def test_floor_and_ceiling_bracket_moment(interval, x):
    lo = iv.floor(interval, x)
    hi = iv.ceiling(interval, x)
    assert lo <= x <= hi
    assert iv.floor(interval, lo) == lo
    assert iv.ceiling(interval, hi) == hi
    assert iv.equal_by(interval, x, lo)


@given(st.sampled_from(DATE_INTERVALS), dates())
def test_floor_and_ceiling_bracket_date(interval, d):
    lo = iv.floor(interval, d)
    hi = iv.ceiling(interval, d)
    assert lo <= d <= hi
    assert iv.floor(interval, lo) == lo
    assert iv.equal_by(interval, d, lo)


# ---------------------------------------------------------
# add
# ---------------------------------------------------------

def test_add_month_clamps_day():
    assert iv.add(Interval.MONTH, 1, day(2000, 1, 31)) == day(2000, 2, 29)
    assert iv.add(Interval.MONTH, 14, day(1999, 12, 31)) == day(2001, 2, 28)
    assert iv.add(Interval.MONTH, -1, day(2000, 2, 29)) == day(2000, 1, 29)
    assert iv.add(Interval.YEAR, 1, day(2000, 2, 29)) == day(2001, 2, 28)
    assert iv.add(Interval.QUARTER, -1, day(2000, 5, 31)) == day(2000, 2, 29)


def test_add_keeps_time_of_day():
    assert iv.add(Interval.MONTH, 1, X) == at(2007, 4, 15, 11, 55, 12, 345)
    assert iv.add(Interval.WEEK, -2, X) == at(2007, 3, 1, 11, 55, 12, 345)
    assert iv.add(Interval.HOUR, 13, X) == at(2007, 3, 16, 0, 55, 12, 345)


def test_add_day_across_spring_forward_is_23_hours():
    start = at(2007, 3, 24, 12, zone=CET)
    end = iv.add(Interval.DAY, 1, start, CET)
    assert end == at(2007, 3, 25, 12, zone=CET)
    assert iv.diff(Interval.HOUR, start, end) == 23
    assert iv.diff(Interval.DAY, start, end, CET) == 1


@given(st.sampled_from(ALL_INTERVALS), moments())
def test_add_zero_is_identity(interval, x):
    assert iv.add(interval, 0, x) == x


@given(st.sampled_from(ADDITIVE_INTERVALS), moments(), st.integers(-1000, 1000))
def test_add_is_invertible(interval, x, n):
    assert iv.add(interval, -n, iv.add(interval, n, x)) == x


# ---------------------------------------------------------
# diff
# ---------------------------------------------------------

def test_diff_day():
    a = at(1999, 12, 31, 23, 59, 59, 999)
    b = at(2000, 2, 29, 23, 59, 59, 999)
    assert iv.diff(Interval.DAY, a, b) == 60
    assert iv.diff(Interval.DAY, b, a) == -60
    assert iv.diff(Interval.DAY, a, at(2000, 1, 1, 23, 59, 59, 998)) == 0


@pytest.mark.parametrize("a, b, expected", [
    (day(2000, 1, 15), day(2000, 3, 15), 2),
    (day(2000, 1, 31), day(2000, 2, 29), 0),
    (day(1999, 12, 31), day(2001, 2, 28), 13),
    (day(2000, 3, 15), day(2000, 1, 15), -2),
])
def test_diff_month(a, b, expected):
    assert iv.diff(Interval.MONTH, a, b) == expected


def test_diff_quarter_and_year_follow_months():
    a, b = day(2000, 3, 1), day(2003, 2, 28)
    assert iv.diff(Interval.YEAR, a, b) == 2
    assert iv.diff(Interval.QUARTER, a, b) == 11
    assert iv.diff(Interval.YEAR, b, a) == -2


def test_diff_week_and_weekday():
    assert iv.diff(Interval.WEEK, day(2007, 3, 15), day(2007, 3, 29)) == 2
    assert iv.diff(Interval.WEEK, day(2007, 3, 29), day(2007, 3, 15)) == -2
    # counts Sundays crossed: 18 March only
    assert iv.diff(Interval.SUNDAY, day(2007, 3, 15), day(2007, 3, 24)) == 1


def test_diff_sub_day_truncates_toward_zero():
    a = at(2007, 3, 15, 11, 55)
    b = at(2007, 3, 15, 13, 54, 59)
    assert iv.diff(Interval.HOUR, a, b) == 1
    assert iv.diff(Interval.HOUR, b, a) == -1
    assert iv.diff(Interval.MILLISECOND, a, b) == b.ms - a.ms
    assert b.ms - a.ms < 2 * MS_PER_HOUR


@given(st.sampled_from(ALL_INTERVALS), moments(), moments())
def test_diff_is_antisymmetric(interval, a, b):
    assert iv.diff(interval, a, b) == -iv.diff(interval, b, a)


@given(dates(), st.integers(-5000, 5000))
def test_diff_day_undoes_add(d, n):
    assert iv.diff(Interval.DAY, d, iv.add(Interval.DAY, n, d)) == n


@given(
    st.integers(1700, 2300), st.integers(1, 12), st.integers(1, 28),
    st.integers(0, MS_PER_DAY - 1), st.integers(-100, 100),
)
def test_diff_month_undoes_add_early_in_month(y, m, d, ms, n):
    x = at(y, m, d, ms=ms)
    assert iv.diff(Interval.MONTH, x, iv.add(Interval.MONTH, n, x)) == n


# ---------------------------------------------------------
# equal_by
# ---------------------------------------------------------

def test_equal_by_week_crosses_calendar_years():
    assert iv.equal_by(Interval.WEEK, day(2008, 12, 29), day(2009, 1, 1))
    assert iv.equal_by(Interval.WEEK, day(2009, 12, 31), day(2010, 1, 3))
    assert not iv.equal_by(Interval.WEEK, day(2009, 1, 4), day(2009, 1, 5))


def test_equal_by_checks_coarser_fields():
    assert not iv.equal_by(Interval.DAY, day(2007, 3, 15), day(2008, 3, 15))
    assert not iv.equal_by(Interval.MINUTE, at(2007, 3, 15, 11, 55), at(2007, 3, 15, 12, 55))
    assert iv.equal_by(Interval.QUARTER, day(2007, 4, 1), day(2007, 6, 30))


def test_equal_by_weekday_interval():
    assert not iv.equal_by(Interval.SUNDAY, day(2007, 3, 17), day(2007, 3, 18))
    assert iv.equal_by(Interval.SATURDAY, day(2007, 3, 17), day(2007, 3, 23))


# ---------------------------------------------------------
# range
# ---------------------------------------------------------

def test_range_starts_at_ceiling():
    assert iv.range(Interval.DAY, 2, at(2007, 3, 15, 11, 55), at(2007, 3, 22)) == [
        at(2007, 3, 16), at(2007, 3, 18), at(2007, 3, 20),
    ]


def test_range_of_months_starts_on_the_first():
    got = iv.range(Interval.MONTH, 1, day(2000, 1, 31), day(2000, 6, 1))
    assert got == [day(2000, 2, 1), day(2000, 3, 1), day(2000, 4, 1), day(2000, 5, 1)]


def test_range_step_below_one_is_one():
    assert iv.range(Interval.DAY, 0, day(2007, 3, 1), day(2007, 3, 3)) == [day(2007, 3, 1), day(2007, 3, 2)]


def test_seventy_years_of_days():
    a, b = day(1970, 1, 1), day(2040, 1, 1)
    days = iv.range(Interval.DAY, 1, a, b)
    assert len(days) == 25567 == iv.diff(Interval.DAY, a, b)
    assert days[0] == a and days[-1] == day(2039, 12, 31)


@given(st.sampled_from(ALL_INTERVALS), moments())
def test_empty_range(interval, x):
    assert iv.range(interval, 1, x, x) == []
