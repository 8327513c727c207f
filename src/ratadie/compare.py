from __future__ import annotations

from typing import TypeVar

from .core.types import Order
from .date import Date
from .moment import Moment

T = TypeVar("T", Date, Moment)


def equal(a: T, b: T) -> bool:
    return a == b


def compare(a: T, b: T) -> Order:
    if a < b:
        return Order.LT
    if a > b:
        return Order.GT
    return Order.EQ


def is_between(lo: T, hi: T, x: T) -> bool:
    """Inclusive at both ends."""
    return lo <= x <= hi


def clamp(lo: T, hi: T, x: T) -> T:
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x
