from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class Weekday(IntEnum):
    """ISO weekday numbering: Monday=1 .. Sunday=7."""
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


class Interval(Enum):
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @property
    def anchor(self) -> Weekday | None:
        """Weekday a week-like interval floors to (WEEK -> Monday), else None."""
        if self is Interval.WEEK:
            return Weekday.MONDAY
        return _WEEKDAY_ANCHORS.get(self)

    @property
    def is_sub_day(self) -> bool:
        return self in (Interval.MILLISECOND, Interval.SECOND, Interval.MINUTE, Interval.HOUR)


_WEEKDAY_ANCHORS = {
    Interval.MONDAY: Weekday.MONDAY,
    Interval.TUESDAY: Weekday.TUESDAY,
    Interval.WEDNESDAY: Weekday.WEDNESDAY,
    Interval.THURSDAY: Weekday.THURSDAY,
    Interval.FRIDAY: Weekday.FRIDAY,
    Interval.SATURDAY: Weekday.SATURDAY,
    Interval.SUNDAY: Weekday.SUNDAY,
}


class Order(IntEnum):
    LT = -1
    EQ = 0
    GT = 1


@dataclass(frozen=True)
class CalendarDate:
    year: int
    month: Month
    day: int


@dataclass(frozen=True)
class OrdinalDate:
    year: int
    ordinal_day: int


@dataclass(frozen=True)
class WeekDate:
    week_year: int
    week_number: int
    weekday: Weekday


@dataclass(frozen=True)
class Parts:
    """Local wall-clock decomposition of an instant.

    Fields are not range-checked; `moment.from_parts` resolves overflow
    (month 13, hour 25, ...) by carrying into the next larger unit.
    """
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
