"""
ratadie.core.facts
------------------
Static Gregorian calendar tables: leap years, month lengths and the
number <-> enum conversions for months and weekdays.
"""

from __future__ import annotations

from .types import Month, Weekday

# 1-indexed; February is patched for leap years
_MONTH_DAYS = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# days before the first of each month in a common year
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def is_leap_year(y: int) -> bool:
    return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)


def days_in_year(y: int) -> int:
    return 366 if is_leap_year(y) else 365


def days_in_month(y: int, m: int) -> int:
    if m == 2 and is_leap_year(y):
        return 29
    return _MONTH_DAYS[m]


def days_before_month(y: int, m: int) -> int:
    """Days in year `y` preceding the first of month `m` (0 for January)."""
    leap_day = 1 if (m > 2 and is_leap_year(y)) else 0
    return _DAYS_BEFORE_MONTH[m] + leap_day


def month_to_number(m: Month) -> int:
    return int(m)


def number_to_month(n: int) -> Month:
    """Clamps, not wraps: 0 -> JANUARY, 15 -> DECEMBER."""
    return Month(max(1, min(12, n)))


def weekday_to_number(wd: Weekday) -> int:
    return int(wd)


def number_to_weekday(n: int) -> Weekday:
    """Clamps, not wraps: 0 -> MONDAY, 9 -> SUNDAY."""
    return Weekday(max(1, min(7, n)))


def month_to_quarter(m: int) -> int:
    return (m + 2) // 3


def quarter_to_month(q: int) -> Month:
    return number_to_month(3 * q - 2)
