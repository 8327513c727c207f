"""
ratadie.format
--------------
Pattern-based rendering, e.g. ``format_date(d, "EEEE, MMMM ddd yyyy")`` ->
``"Friday, March 16th 2007"``.

Tokens are runs of one letter; the run length picks the style:

  y yy yyyy    year (yy: last two digits)     Y YYYY   ISO week-year
  Q QQ QQQ     quarter (3, 03, Q3)            QQQQ     3rd quarter
  M MM         month number                   MMM MMMM Jan, January  (MMMMM: J)
  d dd         day of month                   ddd      1st, 2nd, ...
  D DD DDD     day of year                    w ww     ISO week number
  E..EEE       Mon                            EEEE     Monday        (EEEEE: M)
  e            weekday number, Monday = 1
  H HH         hour 0-23                      h hh     hour 1-12     a  AM/PM
  m mm         minute                         s ss     second
  S..SSS       fraction of second             X XX XXX Z / +01 / +0100 / +01:00

Text in single quotes is copied verbatim; ``''`` is a literal quote and an
unterminated quote runs to the end of the pattern. Any
other character, including letters without a meaning above, is copied as-is.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, Optional

from .core import rata_die as rd_engine
from .core.facts import month_to_quarter
from .date import Date
from .moment import MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND, Moment, offset_from_utc, to_rata_die_time
from .zone import Zone

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

_TOKEN_RE = re.compile(r"'(?P<quoted>(?:[^']|'')*)(?P<close>')?|(?P<letter>[A-Za-z])(?P=letter)*|.", re.S)


class _Fields:
    def __init__(self, rd: int, time_ms: int, offset: Optional[int]):
        self.rd = rd
        self.time_ms = time_ms
        self.offset = offset
        self.year, self.month, self.day = rd_engine.to_calendar_date(rd)

    @property
    def hour(self) -> int:
        return self.time_ms // MS_PER_HOUR

    @property
    def minute(self) -> int:
        return self.time_ms // MS_PER_MINUTE % 60

    @property
    def second(self) -> int:
        return self.time_ms // MS_PER_SECOND % 60

    @property
    def millisecond(self) -> int:
        return self.time_ms % MS_PER_SECOND


def ordinal_suffix(n: int) -> str:
    if 11 <= n % 100 <= 13:
        return f"{n}th"
    return f"{n}" + {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def _year(y: int, width: int) -> str:
    if width == 2:
        return f"{y % 100:02d}"
    sign = "-" if y < 0 else ""
    return sign + str(abs(y)).rjust(width if width > 1 else 1, "0")


def _num(n: int, width: int) -> str:
    return f"{n:0{width}d}"


def _quarter(f: _Fields, width: int) -> str:
    q = month_to_quarter(f.month)
    if width == 3:
        return f"Q{q}"
    if width >= 4:
        return f"{ordinal_suffix(q)} quarter"
    return _num(q, width)


def _month(f: _Fields, width: int) -> str:
    name = MONTH_NAMES[f.month - 1]
    if width == 3:
        return name[:3]
    if width == 4:
        return name
    if width >= 5:
        return name[0]
    return _num(f.month, width)


def _day(f: _Fields, width: int) -> str:
    if width >= 3:
        return ordinal_suffix(f.day)
    return _num(f.day, width)


def _weekday(f: _Fields, width: int) -> str:
    name = WEEKDAY_NAMES[rd_engine.weekday_number(f.rd) - 1]
    if width == 4:
        return name
    if width >= 5:
        return name[0]
    return name[:3]


def _hour12(f: _Fields, width: int) -> str:
    h = f.hour % 12
    return _num(12 if h == 0 else h, width)


def _fraction(f: _Fields, width: int) -> str:
    return f"{f.millisecond:03d}"[:width].ljust(width, "0")


def _offset(f: _Fields, width: int) -> str:
    if f.offset is None:
        return ""
    if f.offset == 0:
        return "Z"
    sign = "-" if f.offset < 0 else "+"
    hh, mm = divmod(abs(f.offset), 60)
    if width == 1:
        return f"{sign}{hh:02d}" + (f"{mm:02d}" if mm else "")
    if width == 2:
        return f"{sign}{hh:02d}{mm:02d}"
    return f"{sign}{hh:02d}:{mm:02d}"


_FORMATTERS: Dict[str, Callable[[_Fields, int], str]] = {
    "y": lambda f, w: _year(f.year, w),
    "Y": lambda f, w: _year(rd_engine.week_year(f.rd), w),
    "Q": _quarter,
    "M": _month,
    "d": _day,
    "D": lambda f, w: _num(rd_engine.to_ordinal_date(f.rd)[1], w),
    "w": lambda f, w: _num(rd_engine.week_number(f.rd), w),
    "E": _weekday,
    "e": lambda f, w: str(rd_engine.weekday_number(f.rd)),
    "H": lambda f, w: _num(f.hour, w),
    "h": _hour12,
    "a": lambda f, w: "AM" if f.hour < 12 else "PM",
    "m": lambda f, w: _num(f.minute, w),
    "s": lambda f, w: _num(f.second, w),
    "S": _fraction,
    "X": _offset,
}


def _render(fields: _Fields, pattern: str) -> str:
    out = []
    for match in _TOKEN_RE.finditer(pattern):
        token = match.group(0)
        if token.startswith("'"):
            body = match["quoted"]
            out.append("'" if not body and match["close"] else body.replace("''", "'"))
            continue
        fn = _FORMATTERS.get(token[0]) if match["letter"] else None
        out.append(fn(fields, len(token)) if fn else token)
    return "".join(out)


def format_date(d: Date, pattern: str) -> str:
    """Time tokens render as midnight and offset tokens render empty."""
    return _render(_Fields(d.rd, 0, None), pattern)


def format_moment(zone: Zone, m: Moment, pattern: str) -> str:
    rd, time_ms = to_rata_die_time(zone, m)
    return _render(_Fields(rd, time_ms, offset_from_utc(zone, m)), pattern)
