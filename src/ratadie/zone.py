"""
ratadie.zone
------------
Offset providers. A zone answers one question: how many minutes is local
time ahead of UTC at a given instant (milliseconds since the Unix epoch)?

There are no named zones and no time-zone database here. The host's local
offset is reached through `system_zone()`, which asks the standard library
on every call; tests use `FixedOffset` or a `TableZone` of transitions.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Callable, Protocol, Tuple


class Zone(Protocol):
    def offset_at(self, ms: int) -> int:
        """Local offset from UTC in minutes at instant `ms`."""
        ...


@dataclass(frozen=True)
class FixedOffset:
    minutes: int

    def offset_at(self, ms: int) -> int:
        return self.minutes


UTC = FixedOffset(0)


@dataclass(frozen=True)
class LocalZone:
    """Wraps an injected `ms -> minutes` function. The result is never cached."""
    offset_of: Callable[[int], int]

    def offset_at(self, ms: int) -> int:
        return int(self.offset_of(ms))


@dataclass(frozen=True)
class TableZone:
    """
    Piecewise-constant offsets.

    `transitions` is a sorted sequence of (start_ms, offset_minutes); the
    offset in force before the first transition is `initial`.
    """
    initial: int
    transitions: Tuple[Tuple[int, int], ...] = ()
    _starts: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        starts = tuple(t for t, _ in self.transitions)
        if list(starts) != sorted(starts):
            raise ValueError("transitions must be sorted by start instant")
        object.__setattr__(self, "_starts", starts)

    def offset_at(self, ms: int) -> int:
        i = bisect_right(self._starts, ms)
        if i == 0:
            return self.initial
        return self.transitions[i - 1][1]


_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _host_offset_minutes(ms: int) -> int:
    dt = (_EPOCH + timedelta(milliseconds=ms)).astimezone()
    off = dt.utcoffset()
    return int(off.total_seconds() // 60) if off is not None else 0


def system_zone() -> LocalZone:
    """The host's local offset, as reported by the standard library."""
    return LocalZone(_host_offset_minutes)
