"""
ratadie.date
------------
`Date`: an immutable calendar day backed by a single RataDie integer, with
three explicitly named construction policies:

- ``from_calendar_date`` / ``from_ordinal_date`` / ``from_week_date``
  clamp every field into its natural range (Feb 31 -> Feb 28/29).
- ``try_from_*`` validate strictly and return ``Ok(Date)`` or
  ``Err(InvalidDate)``.
- ``from_calendar_date_lenient`` lets month and day overflow and resolves
  them by carrying through the day count (Feb 31 -> Mar 2/3).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date as _pydate

from .core import rata_die as rd_engine
from .core.errors import InvalidDate
from .core.facts import (
    days_in_month,
    days_in_year,
    month_to_quarter,
    number_to_month,
    number_to_weekday,
)
from .core.result import Err, Ok, Result
from .core.types import CalendarDate, Month, OrdinalDate, WeekDate, Weekday


@dataclass(frozen=True, order=True)
class Date:
    rd: int

    @property
    def year(self) -> int:
        return rd_engine.year(self.rd)

    @property
    def month(self) -> Month:
        return Month(rd_engine.to_calendar_date(self.rd)[1])

    @property
    def day(self) -> int:
        return rd_engine.to_calendar_date(self.rd)[2]

    @property
    def ordinal_day(self) -> int:
        return rd_engine.to_ordinal_date(self.rd)[1]

    @property
    def quarter(self) -> int:
        return month_to_quarter(self.month)

    @property
    def week_year(self) -> int:
        return rd_engine.week_year(self.rd)

    @property
    def week_number(self) -> int:
        return rd_engine.week_number(self.rd)

    @property
    def weekday_number(self) -> int:
        return rd_engine.weekday_number(self.rd)

    @property
    def weekday(self) -> Weekday:
        return Weekday(self.weekday_number)

    def __str__(self) -> str:
        from .iso import to_iso_string
        return to_iso_string(self)


# ---------------------------------------------------------
# Clamping constructors
# ---------------------------------------------------------

def from_rata_die(rd: int) -> Date:
    return Date(rd)


def from_calendar_date(y: int, m: int, d: int) -> Date:
    month = number_to_month(m)
    day = max(1, min(d, days_in_month(y, month)))
    return Date(rd_engine.from_calendar_date(y, month, day))


def from_ordinal_date(y: int, ordinal_day: int) -> Date:
    day = max(1, min(ordinal_day, days_in_year(y)))
    return Date(rd_engine.from_ordinal_date(y, day))


def from_week_date(wy: int, wn: int, weekday: int) -> Date:
    week = max(1, min(wn, rd_engine.weeks_in_week_year(wy)))
    wd = number_to_weekday(weekday)
    return Date(rd_engine.from_week_date(wy, week, wd))


# ---------------------------------------------------------
# Lenient constructor
# ---------------------------------------------------------

def from_calendar_date_lenient(y: int, m: int, d: int) -> Date:
    """Month 13 is January of the next year; day 0 is the last day of the previous month."""
    carry, m0 = divmod(m - 1, 12)
    y2 = y + carry
    return Date(rd_engine.from_calendar_date(y2, m0 + 1, 1) + (d - 1))


# ---------------------------------------------------------
# Strict constructors
# ---------------------------------------------------------

def try_from_calendar_date(y: int, m: int, d: int) -> Result[Date, InvalidDate]:
    if not 1 <= m <= 12:
        return Err(InvalidDate("month", m, "must be in 1..12"))
    dim = days_in_month(y, m)
    if not 1 <= d <= dim:
        return Err(InvalidDate("day", d, f"must be in 1..{dim} for {y}-{m:02d}"))
    return Ok(Date(rd_engine.from_calendar_date(y, m, d)))


def try_from_ordinal_date(y: int, ordinal_day: int) -> Result[Date, InvalidDate]:
    diy = days_in_year(y)
    if not 1 <= ordinal_day <= diy:
        return Err(InvalidDate("ordinal_day", ordinal_day, f"must be in 1..{diy} for {y}"))
    return Ok(Date(rd_engine.from_ordinal_date(y, ordinal_day)))


def try_from_week_date(wy: int, wn: int, weekday: int) -> Result[Date, InvalidDate]:
    wiy = rd_engine.weeks_in_week_year(wy)
    if not 1 <= wn <= wiy:
        return Err(InvalidDate("week_number", wn, f"must be in 1..{wiy} for week-year {wy}"))
    if not 1 <= weekday <= 7:
        return Err(InvalidDate("weekday", weekday, "must be in 1..7"))
    return Ok(Date(rd_engine.from_week_date(wy, wn, weekday)))


# ---------------------------------------------------------
# Extractions
# ---------------------------------------------------------

def to_calendar_date(d: Date) -> CalendarDate:
    y, m, day = rd_engine.to_calendar_date(d.rd)
    return CalendarDate(y, Month(m), day)


def to_ordinal_date(d: Date) -> OrdinalDate:
    y, od = rd_engine.to_ordinal_date(d.rd)
    return OrdinalDate(y, od)


def to_week_date(d: Date) -> WeekDate:
    wy, wn, wd = rd_engine.to_week_date(d.rd)
    return WeekDate(wy, wn, Weekday(wd))


def from_pydate(d: _pydate) -> Date:
    """`datetime.date.toordinal()` already counts RataDie."""
    return Date(d.toordinal())


def to_pydate(d: Date) -> _pydate:
    """Raises ValueError outside years 1..9999, like `datetime.date`."""
    return _pydate.fromordinal(d.rd)
