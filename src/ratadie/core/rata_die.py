"""
ratadie.core.rata_die
---------------------
Integer day counts (RataDie: day 1 = 1 January of year 1, proleptic
Gregorian) and their conversions to calendar, ordinal and ISO week dates.

Every function here is closed-form integer arithmetic. Floor division is
used throughout, so years <= 0 and far-future years behave like any other.
"""

from __future__ import annotations

from typing import Tuple

from .facts import days_before_month, is_leap_year

# Julian Day Number of RataDie 0 (JDN 2451545 is 2000-01-01)
JDN_OFFSET = 1721425

# Gregorian cycle lengths in days
DAYS_PER_400_YEARS = 146097
DAYS_PER_100_YEARS = 36524
DAYS_PER_4_YEARS = 1461
DAYS_PER_YEAR = 365


def leap_years_in_common_era(y: int) -> int:
    """Number of leap years in years 1..y."""
    return y // 4 - y // 100 + y // 400


def days_before_year(y: int) -> int:
    y1 = y - 1
    return 365 * y1 + leap_years_in_common_era(y1)


def from_calendar_date(y: int, m: int, d: int) -> int:
    """Unchecked; `d` may overflow the month and simply carries on counting."""
    return days_before_year(y) + days_before_month(y, m) + d


def from_ordinal_date(y: int, ordinal_day: int) -> int:
    return days_before_year(y) + ordinal_day


def year(rd: int) -> int:
    """
    Inverse of days_before_year, by peeling off 400/100/4/1-year cycles.

    A zero remainder after the 1-year step means `rd` is the last day of a
    cycle (31 December), which belongs to the year just completed rather
    than the one after it.
    """
    n400, r400 = divmod(rd, DAYS_PER_400_YEARS)
    n100, r100 = divmod(r400, DAYS_PER_100_YEARS)
    n4, r4 = divmod(r100, DAYS_PER_4_YEARS)
    n1, r1 = divmod(r4, DAYS_PER_YEAR)
    n = 0 if r1 == 0 else 1
    return n400 * 400 + n100 * 100 + n4 * 4 + n1 + n


def to_ordinal_date(rd: int) -> Tuple[int, int]:
    y = year(rd)
    return y, rd - days_before_year(y)


def to_calendar_date(rd: int) -> Tuple[int, int, int]:
    y, ordinal_day = to_ordinal_date(rd)
    m = 12
    while m > 1 and days_before_month(y, m) >= ordinal_day:
        m -= 1
    return y, m, ordinal_day - days_before_month(y, m)


def weekday_number(rd: int) -> int:
    """1=Monday .. 7=Sunday (RataDie 1 is a Monday)."""
    r = rd % 7
    return 7 if r == 0 else r


def week_year(rd: int) -> int:
    """The calendar year holding the Thursday of `rd`'s ISO week."""
    return year(rd + (4 - weekday_number(rd)))


def days_before_week_year(wy: int) -> int:
    """RataDie of the Sunday before Monday of week 1 of week-year `wy`."""
    jan4 = days_before_year(wy) + 4
    return jan4 - weekday_number(jan4)


def week_number(rd: int) -> int:
    week1_day0 = days_before_week_year(week_year(rd))
    return (rd - week1_day0 - 1) // 7 + 1


def to_week_date(rd: int) -> Tuple[int, int, int]:
    wy = week_year(rd)
    wn = (rd - days_before_week_year(wy) - 1) // 7 + 1
    return wy, wn, weekday_number(rd)


def from_week_date(wy: int, wn: int, weekday: int) -> int:
    """Unchecked; out-of-range week numbers or weekdays carry over."""
    return days_before_week_year(wy) + (wn - 1) * 7 + weekday


def is_53_week_year(y: int) -> bool:
    """True iff 1 January is a Thursday, or a Wednesday in a leap year."""
    wdn_jan1 = weekday_number(days_before_year(y) + 1)
    return wdn_jan1 == 4 or (wdn_jan1 == 3 and is_leap_year(y))


def weeks_in_week_year(y: int) -> int:
    return 53 if is_53_week_year(y) else 52


def to_jdn(rd: int) -> int:
    """RataDie -> Julian Day Number (the JDN of the noon within that day)."""
    return rd + JDN_OFFSET


def from_jdn(jdn: int) -> int:
    return jdn - JDN_OFFSET
