"""Boundary: datetime/date/time <-> integer conversion.

Everything inside the library is integers: dates are days since
1970-01-01, times are milliseconds since midnight, timestamps are
milliseconds since 1970-01-01 00:00:00. This module is the only place
Python's datetime types are turned into those integers and back.

A naive datetime is read as a UTC wall clock, so the same naive value
always maps to the same integer regardless of the host zone. An aware
datetime carries its own offset and is normalised to UTC first.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, tzinfo

from temporal_primitives.calendar import floor_div, floor_mod
from temporal_primitives.constants import (
    EPOCH_ORDINAL,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    UTC_ZONE,
    ZERO_DATETIME,
)

_ONE_MILLI = timedelta(milliseconds=1)
_NAIVE_EPOCH = ZERO_DATETIME.replace(tzinfo=None)


def _reject_aware(t: time, name: str) -> None:
    if t.tzinfo is not None:
        raise TypeError(
            f"{name} must be a naive time (no tzinfo), "
            f"got tzinfo={t.tzinfo!r}. "
            f"A time of day has no date to resolve its offset against."
        )


# ---------------------------------------------------------------------------
# Offset-aware values
# ---------------------------------------------------------------------------


def is_offset_date_time(value: object) -> bool:
    """True if value is a datetime that carries a UTC offset."""
    return isinstance(value, datetime) and value.utcoffset() is not None


def offset_date_time_value(value: object) -> str:
    """ISO-8601 text of an offset-aware datetime, offset included.

    >>> from datetime import timezone
    >>> offset_date_time_value(datetime(2020, 5, 1, 12, 0, tzinfo=timezone.utc))
    '2020-05-01T12:00:00+00:00'

    Raises TypeError for anything else, naive datetimes included.
    """
    if not is_offset_date_time(value):
        raise TypeError(
            f"expected a datetime with a UTC offset, got {value!r}"
        )
    return value.isoformat()


# ---------------------------------------------------------------------------
# TIMESTAMP
# ---------------------------------------------------------------------------


def datetime_to_unix_timestamp(dt: datetime) -> int:
    """Milliseconds since the epoch. Sub-millisecond digits are floored."""
    if dt.utcoffset() is not None:
        dt = dt.astimezone(UTC_ZONE).replace(tzinfo=None)
    return (dt - _NAIVE_EPOCH) // _ONE_MILLI


def unix_timestamp_to_datetime(
    timestamp: int, tz: tzinfo | None = None
) -> datetime:
    """Inverse of datetime_to_unix_timestamp.

    Without tz the result is a naive UTC wall clock; with tz it is an
    aware datetime for the same instant, expressed in tz.
    """
    if tz is None:
        return _NAIVE_EPOCH + timestamp * _ONE_MILLI
    return (ZERO_DATETIME + timestamp * _ONE_MILLI).astimezone(tz)


# ---------------------------------------------------------------------------
# DATE
# ---------------------------------------------------------------------------


def date_to_unix_date(d: date) -> int:
    """Days since 1970-01-01. For a datetime, only its date part counts."""
    return d.toordinal() - EPOCH_ORDINAL


def unix_date_to_date(date_: int) -> date:
    """Inverse of date_to_unix_date. Limited to years 1..9999."""
    return date.fromordinal(date_ + EPOCH_ORDINAL)


# ---------------------------------------------------------------------------
# TIME
# ---------------------------------------------------------------------------


def time_to_unix_time(t: time) -> int:
    """Milliseconds since midnight. Raises TypeError for an aware time."""
    _reject_aware(t, "t")
    return (
        t.hour * MILLIS_PER_HOUR
        + t.minute * MILLIS_PER_MINUTE
        + t.second * MILLIS_PER_SECOND
        + t.microsecond // 1000
    )


def unix_time_to_time(time_: int) -> time:
    """Inverse of time_to_unix_time, for 0 <= time_ < MILLIS_PER_DAY."""
    assert 0 <= time_ < MILLIS_PER_DAY
    hour, rest = divmod(time_, MILLIS_PER_HOUR)
    minute, rest = divmod(rest, MILLIS_PER_MINUTE)
    second, millis = divmod(rest, MILLIS_PER_SECOND)
    return time(hour, minute, second, millis * 1000)


def split_timestamp(timestamp: int) -> tuple[int, int]:
    """(date, time) parts of a timestamp, with floor semantics.

    >>> split_timestamp(-1)
    (-1, 86399999)
    """
    return floor_div(timestamp, MILLIS_PER_DAY), floor_mod(timestamp, MILLIS_PER_DAY)
