from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict


class RataDieError(Exception):
    """Base error."""


class UnsupportedIntervalError(RataDieError, ValueError):
    """Raised when a sub-day interval is applied to a date-only value."""


@dataclass(frozen=True)
class InvalidDate:
    """A strict constructor rejected one of its numeric fields."""
    field: str
    value: int
    constraint: str

    @property
    def message(self) -> str:
        return f"Invalid {self.field} {self.value}: {self.constraint}"

    def to_dict(self) -> Dict[str, Any]:
        return {"field": self.field, "value": self.value, "constraint": self.constraint}

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ParseError:
    """Text that could not be read as a date or time."""
    text: str
    reason: str

    @property
    def message(self) -> str:
        return f"Failed to parse {self.text!r}: {self.reason}"

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "reason": self.reason}

    def __str__(self) -> str:
        return self.message
