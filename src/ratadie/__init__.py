"""ratadie public API.

Keep this surface small: dates and moments, their constructors and
extractions. Interval arithmetic lives in `ratadie.interval`
(``interval.floor``, ``interval.range`` ...) because its names shadow
builtins.
"""

from . import interval
from .compare import clamp, compare, equal, is_between
from .core.errors import InvalidDate, ParseError, RataDieError, UnsupportedIntervalError
from .core.facts import days_in_month, is_leap_year, number_to_month, number_to_weekday
from .core.rata_die import is_53_week_year
from .core.result import Err, Ok
from .core.types import (
    CalendarDate,
    Interval,
    Month,
    Order,
    OrdinalDate,
    Parts,
    WeekDate,
    Weekday,
)
from .date import (
    Date,
    from_calendar_date,
    from_calendar_date_lenient,
    from_ordinal_date,
    from_pydate,
    from_rata_die,
    from_week_date,
    to_calendar_date,
    to_ordinal_date,
    to_pydate,
    to_week_date,
    try_from_calendar_date,
    try_from_ordinal_date,
    try_from_week_date,
)
from .format import format_date, format_moment
from .iso import (
    date_from_iso_string,
    moment_from_iso_string,
    moment_to_iso_string,
    to_iso_string,
    to_iso_week_string,
)
from .moment import (
    Moment,
    from_datetime,
    from_offset_time,
    from_parts,
    moment_from_date,
    to_date,
    to_datetime,
    to_parts,
)
from .zone import UTC, FixedOffset, LocalZone, TableZone, system_zone

__all__ = [
    "interval",
    "Date",
    "Moment",
    "Parts",
    "CalendarDate",
    "OrdinalDate",
    "WeekDate",
    "Month",
    "Weekday",
    "Interval",
    "Order",
    "Ok",
    "Err",
    "InvalidDate",
    "ParseError",
    "RataDieError",
    "UnsupportedIntervalError",
    "is_leap_year",
    "days_in_month",
    "number_to_month",
    "number_to_weekday",
    "is_53_week_year",
    "from_rata_die",
    "from_calendar_date",
    "from_calendar_date_lenient",
    "from_ordinal_date",
    "from_week_date",
    "try_from_calendar_date",
    "try_from_ordinal_date",
    "try_from_week_date",
    "to_calendar_date",
    "to_ordinal_date",
    "to_week_date",
    "from_pydate",
    "to_pydate",
    "from_offset_time",
    "from_parts",
    "to_parts",
    "to_date",
    "moment_from_date",
    "from_datetime",
    "to_datetime",
    "UTC",
    "FixedOffset",
    "LocalZone",
    "TableZone",
    "system_zone",
    "equal",
    "compare",
    "is_between",
    "clamp",
    "to_iso_string",
    "to_iso_week_string",
    "moment_to_iso_string",
    "date_from_iso_string",
    "moment_from_iso_string",
    "format_date",
    "format_moment",
]
