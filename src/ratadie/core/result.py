"""Ok/Err result values for the strict constructors and the parsers.

Functions that validate user-supplied fields return ``Ok(value)`` or
``Err(error)`` instead of raising; callers pick the branch with
``isinstance`` or use ``map``/``bind``/``unwrap_or``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, List, NoReturn, TypeVar, Union

from .errors import RataDieError

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def map(self, f: Callable[[T], U]) -> "Ok[U]":
        return Ok(f(self.value))

    def bind(self, f: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        return f(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map_err(self, f: Callable[[Any], Any]) -> "Ok[T]":
        return self


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def map(self, f: Callable[[Any], Any]) -> "Err[E]":
        return self

    def bind(self, f: Callable[[Any], Any]) -> "Err[E]":
        return self

    def unwrap(self) -> NoReturn:
        raise RataDieError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def map_err(self, f: Callable[[E], F]) -> "Err[F]":
        return Err(f(self.error))


Result = Union[Ok[T], Err[E]]


def unwrap(result: "Result[T, Any]") -> T:
    """Extract the Ok value or raise RataDieError."""
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, Err):
        raise RataDieError(f"unwrap on Err: {result.error}")
    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")


def sequence(results: Iterable["Result[T, E]"]) -> "Result[List[T], E]":
    """Collect results into one; the first Err short-circuits."""
    values: List[T] = []
    for r in results:
        if isinstance(r, Err):
            return r
        values.append(r.value)
    return Ok(values)
