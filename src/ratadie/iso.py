"""
ratadie.iso
-----------
ISO-8601 rendering and parsing.

Parsing produces an `OffsetTime` triple (offset minutes or None, date ms,
time ms) that `moment.from_offset_time` turns into an instant; a missing
offset means "local time in the caller's zone".
"""

from __future__ import annotations

import re
from typing import NamedTuple, Optional

from .core.errors import InvalidDate, ParseError
from .core.result import Err, Ok, Result
from .date import (
    Date,
    to_calendar_date,
    to_ordinal_date,
    to_week_date,
    try_from_calendar_date,
    try_from_ordinal_date,
    try_from_week_date,
)
from .moment import (
    Moment,
    from_offset_time,
    ms_from_rata_die,
    ms_from_time_parts,
    offset_from_utc,
    to_parts,
)
from .zone import UTC, Zone


class OffsetTime(NamedTuple):
    offset: Optional[int]
    date_ms: int
    time_ms: int


# ============================================================
# Rendering
# ============================================================

def pad_year(y: int) -> str:
    """Four digits for years 0..9999, otherwise signed (`+10000`, `-0001`)."""
    if 0 <= y <= 9999:
        return f"{y:04d}"
    sign = "-" if y < 0 else "+"
    return f"{sign}{abs(y):04d}"


def to_iso_string(d: Date) -> str:
    c = to_calendar_date(d)
    return f"{pad_year(c.year)}-{int(c.month):02d}-{c.day:02d}"


def to_iso_ordinal_string(d: Date) -> str:
    o = to_ordinal_date(d)
    return f"{pad_year(o.year)}-{o.ordinal_day:03d}"


def to_iso_week_string(d: Date) -> str:
    w = to_week_date(d)
    return f"{pad_year(w.week_year)}-W{w.week_number:02d}-{int(w.weekday)}"


def offset_string(minutes: int, *, utc_as_z: bool = True) -> str:
    if minutes == 0 and utc_as_z:
        return "Z"
    sign = "-" if minutes < 0 else "+"
    hh, mm = divmod(abs(minutes), 60)
    return f"{sign}{hh:02d}:{mm:02d}"


def moment_to_iso_string(zone: Zone, m: Moment) -> str:
    p = to_parts(zone, m)
    return (
        f"{pad_year(p.year)}-{p.month:02d}-{p.day:02d}"
        f"T{p.hour:02d}:{p.minute:02d}:{p.second:02d}.{p.millisecond:03d}"
        f"{offset_string(offset_from_utc(zone, m))}"
    )


# ============================================================
# Parsing
# ============================================================

# four digits, or signed with four or more as written by pad_year
_YEAR = r"(?P<y>\d{4}|[+-]\d{4,})"

_CALENDAR_RE = re.compile(_YEAR + r"(?:-(?P<m>\d{2})(?:-(?P<d>\d{2}))?|(?P<bm>\d{2})(?P<bd>\d{2}))")
_ORDINAL_RE = re.compile(_YEAR + r"-?(?P<od>\d{3})")
_WEEK_RE = re.compile(_YEAR + r"-?W(?P<w>\d{2})(?:-?(?P<wd>\d))?")

_TIME_RE = re.compile(
    r"(?P<hh>\d{2})"
    r"(?::?(?P<mm>\d{2})(?::?(?P<ss>\d{2})(?:[.,](?P<frac>\d+))?)?)?"
    r"(?P<offset>Z|[+-]\d{2}(?::?\d{2})?)?"
)
_OFFSET_RE = re.compile(r"(?P<sign>[+-])(?P<oh>\d{2}):?(?P<om>\d{2})?")


def _date_rd(text: str, body: str) -> Result[int, ParseError]:
    def invalid(e: InvalidDate) -> ParseError:
        return ParseError(text, e.message)

    m = _CALENDAR_RE.fullmatch(body)
    if m:
        y = int(m["y"])
        if m["bm"] is not None:
            month, day = int(m["bm"]), int(m["bd"])
        else:
            month = int(m["m"]) if m["m"] is not None else 1
            day = int(m["d"]) if m["d"] is not None else 1
        return try_from_calendar_date(y, month, day).map(lambda d: d.rd).map_err(invalid)

    m = _ORDINAL_RE.fullmatch(body)
    if m:
        return try_from_ordinal_date(int(m["y"]), int(m["od"])).map(lambda d: d.rd).map_err(invalid)

    m = _WEEK_RE.fullmatch(body)
    if m:
        wd = int(m["wd"]) if m["wd"] is not None else 1
        return try_from_week_date(int(m["y"]), int(m["w"]), wd).map(lambda d: d.rd).map_err(invalid)

    return Err(ParseError(text, "expected an ISO-8601 date"))


def _time(text: str, body: str) -> Result[tuple, ParseError]:
    m = _TIME_RE.fullmatch(body)
    if not m:
        return Err(ParseError(text, "expected an ISO-8601 time"))

    hh = int(m["hh"])
    mm = int(m["mm"] or 0)
    ss = int(m["ss"] or 0)
    ms = int((m["frac"] or "0")[:3].ljust(3, "0"))
    if hh == 24:
        if mm or ss or ms:
            return Err(ParseError(text, "24:00 is the only valid time in hour 24"))
    elif hh > 23:
        return Err(ParseError(text, f"hour {hh} out of range"))
    if mm > 59:
        return Err(ParseError(text, f"minute {mm} out of range"))
    if ss > 59:
        return Err(ParseError(text, f"second {ss} out of range"))

    offset: Optional[int] = None
    if m["offset"] == "Z":
        offset = 0
    elif m["offset"]:
        om = _OFFSET_RE.fullmatch(m["offset"])
        oh, omin = int(om["oh"]), int(om["om"] or 0)
        if oh > 23 or omin > 59:
            return Err(ParseError(text, f"offset {m['offset']} out of range"))
        offset = (oh * 60 + omin) * (-1 if om["sign"] == "-" else 1)

    return Ok((offset, ms_from_time_parts(hh, mm, ss, ms)))


def parse(text: str) -> Result[OffsetTime, ParseError]:
    """ISO-8601 date with optional `T` time and offset -> OffsetTime."""
    date_part, sep, time_part = text.partition("T")
    rd = _date_rd(text, date_part)
    if isinstance(rd, Err):
        return rd
    date_ms = ms_from_rata_die(rd.value)
    if not sep:
        return Ok(OffsetTime(None, date_ms, 0))

    t = _time(text, time_part)
    if isinstance(t, Err):
        return t
    offset, time_ms = t.value
    return Ok(OffsetTime(offset, date_ms, time_ms))


def date_from_iso_string(text: str) -> Result[Date, ParseError]:
    if "T" in text:
        return Err(ParseError(text, "expected a date without a time"))
    return _date_rd(text, text).map(Date)


def moment_from_iso_string(text: str, zone: Zone = UTC) -> Result[Moment, ParseError]:
    """Text without an offset is read as local time in `zone`."""
    return parse(text).map(lambda p: from_offset_time(p.offset, p.date_ms, p.time_ms, zone))

