"""Shared types: YearMonthDay, PrecisionTime and the exception hierarchy."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import NamedTuple

from temporal_primitives.constants import ZERO_DATETIME

_ONE_MILLI = timedelta(milliseconds=1)


class YearMonthDay(NamedTuple):
    """A proleptic Gregorian calendar date as plain integers.

    Year 0 is 1 BCE, -1 is 2 BCE, and so on.
    """

    year: int
    month: int
    day: int


@dataclass(frozen=True)
class PrecisionTime:
    """A parsed date/time literal together with its fractional seconds.

    Invariants:
        - value is timezone-aware and normalised to UTC
        - value already includes the milliseconds taken from fraction
        - len(fraction) == precision
    """

    value: datetime
    fraction: str
    precision: int

    def to_unix_timestamp(self) -> int:
        """Milliseconds since 1970-01-01 00:00:00 UTC."""
        return (self.value - ZERO_DATETIME) // _ONE_MILLI


class TemporalError(Exception):
    """Base class for errors raised by temporal-primitives."""


class DateTimeParseError(TemporalError, ValueError):
    """Raised when a component of a date/time literal is not an integer."""

    def __init__(self, literal: str, component: str) -> None:
        self.literal = literal
        self.component = component
        super().__init__(
            f"Invalid date/time literal {literal!r}: "
            f"component {component!r} is not an integer"
        )


class UnsupportedRangeError(TemporalError, ValueError):
    """Raised when an operation is asked for a range it does not support.

    This is a programming error on the caller's side, not a data error.
    """

    def __init__(self, unit_range: object, operation: str) -> None:
        self.unit_range = unit_range
        self.operation = operation
        super().__init__(f"{operation} does not support range {unit_range!r}")
