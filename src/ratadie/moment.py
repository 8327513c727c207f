"""
ratadie.moment
--------------
`Moment`: a UTC instant in milliseconds since 1970-01-01T00:00:00Z, and the
bridge between it and (RataDie, time-of-day) pairs read in some zone.

Converting a local wall-clock time back to an instant is self-referential:
the offset depends on the instant, which depends on the offset. That is
resolved by `from_offset_time` in at most three offset lookups.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from .core import rata_die as rd_engine
from .core.types import Parts
from .date import Date, from_calendar_date_lenient
from .zone import UTC, Zone

logger = logging.getLogger(__name__)

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

# RataDie of 1970-01-01
EPOCH_RD = 719163

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True, order=True)
class Moment:
    ms: int

    def __str__(self) -> str:
        from .iso import moment_to_iso_string
        return moment_to_iso_string(UTC, self)


def ms_from_time_parts(hh: int, mm: int, ss: int, ms: int) -> int:
    """No range checks: 25:00 is simply one hour past the next midnight."""
    return hh * MS_PER_HOUR + mm * MS_PER_MINUTE + ss * MS_PER_SECOND + ms


def ms_from_rata_die(rd: int) -> int:
    return (rd - EPOCH_RD) * MS_PER_DAY


def from_offset_time(offset: Optional[int], date_ms: int, time_ms: int, zone: Zone = UTC) -> Moment:
    """
    Instant for a local date and time.

    `offset` (minutes ahead of UTC) is used as-is when given. When it is
    None the offset is looked up in `zone`:

      m0 = wall time read as UTC;   o0 = offset(m0)
      m1 = m0 - o0;                 o1 = offset(m1)   -> m1 if o0 == o1
      m2 = m0 - o1;                 o2 = offset(m2)   -> m2 if o1 == o2
      otherwise the wall time was skipped by a transition; return m1.

    At most three lookups, assuming no more than two transitions within a
    day of the requested time.
    """
    local_ms = date_ms + time_ms
    if offset is not None:
        return Moment(local_ms - offset * MS_PER_MINUTE)

    offset0 = zone.offset_at(local_ms)
    candidate1 = local_ms - offset0 * MS_PER_MINUTE
    offset1 = zone.offset_at(candidate1)
    if offset0 == offset1:
        return Moment(candidate1)

    candidate2 = local_ms - offset1 * MS_PER_MINUTE
    offset2 = zone.offset_at(candidate2)
    if offset1 == offset2:
        return Moment(candidate2)

    logger.debug(
        "local time %d falls in a skipped interval (offsets %d/%d/%d); using first candidate",
        local_ms, offset0, offset1, offset2,
    )
    return Moment(candidate1)


# ---------------------------------------------------------
# Moment <-> (RataDie, time of day)
# ---------------------------------------------------------

def offset_from_utc(zone: Zone, m: Moment) -> int:
    return zone.offset_at(m.ms)


def to_rata_die_time(zone: Zone, m: Moment) -> Tuple[int, int]:
    """Local (RataDie, milliseconds since local midnight) of `m` in `zone`."""
    local_ms = m.ms + zone.offset_at(m.ms) * MS_PER_MINUTE
    days, time_ms = divmod(local_ms, MS_PER_DAY)
    return days + EPOCH_RD, time_ms


def from_rata_die_time(zone: Zone, rd: int, time_ms: int) -> Moment:
    return from_offset_time(None, ms_from_rata_die(rd), time_ms, zone)


def to_date(zone: Zone, m: Moment) -> Date:
    return Date(to_rata_die_time(zone, m)[0])


def moment_from_date(zone: Zone, d: Date) -> Moment:
    """Local midnight at the start of `d`."""
    return from_rata_die_time(zone, d.rd, 0)


# ---------------------------------------------------------
# Moment <-> Parts
# ---------------------------------------------------------

def to_parts(zone: Zone, m: Moment) -> Parts:
    rd, time_ms = to_rata_die_time(zone, m)
    y, mo, d = rd_engine.to_calendar_date(rd)
    hh, rem = divmod(time_ms, MS_PER_HOUR)
    mm, rem = divmod(rem, MS_PER_MINUTE)
    ss, ms = divmod(rem, MS_PER_SECOND)
    return Parts(y, mo, d, hh, mm, ss, ms)


def from_parts(zone: Zone, parts: Parts) -> Moment:
    """Lenient: every field may overflow or underflow into the next unit."""
    d = from_calendar_date_lenient(parts.year, parts.month, parts.day)
    time_ms = ms_from_time_parts(parts.hour, parts.minute, parts.second, parts.millisecond)
    return from_rata_die_time(zone, d.rd, time_ms)


# ---------------------------------------------------------
# Host datetime
# ---------------------------------------------------------

def from_datetime(dt: datetime) -> Moment:
    """Naive datetimes are read as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    delta = dt - _EPOCH
    return Moment((delta.days * 86400 + delta.seconds) * 1000 + delta.microseconds // 1000)


def to_datetime(m: Moment) -> datetime:
    """Timezone-aware UTC datetime."""
    return _EPOCH + timedelta(milliseconds=m.ms)

