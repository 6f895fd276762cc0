"""Layer 2: field extraction and FLOOR/CEIL truncation.

A pure dispatch over TimeUnitRange. Calendar fields are read from the
(year, month, day) decomposition of a Julian day number; time-of-day
fields from milliseconds since midnight.
"""

from __future__ import annotations

from temporal_primitives.calendar import (
    floor_div,
    floor_mod,
    julian_to_ymd,
    ymd_to_julian,
    ymd_to_unix_date,
)
from temporal_primitives.constants import (
    EPOCH_JULIAN,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    SECONDS_PER_DAY,
)
from temporal_primitives.types import UnsupportedRangeError
from temporal_primitives.units import TimeUnitRange

_TIME_RANGES = (TimeUnitRange.HOUR, TimeUnitRange.MINUTE, TimeUnitRange.SECOND)

# Ranges FLOOR and CEIL can truncate a date to.
_TRUNCATE_RANGES = frozenset({
    TimeUnitRange.MILLENNIUM,
    TimeUnitRange.CENTURY,
    TimeUnitRange.DECADE,
    TimeUnitRange.YEAR,
    TimeUnitRange.QUARTER,
    TimeUnitRange.MONTH,
    TimeUnitRange.WEEK,
    TimeUnitRange.DAY,
})


def _quot(x: int, y: int) -> int:
    """Divide, truncating towards zero.

    DECADE, CENTURY and MILLENNIUM are defined with truncating division;
    this keeps "no century 0" and the known anomalies around year 0.
    """
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


# ---------------------------------------------------------------------------
# ISO-8601 weeks
# ---------------------------------------------------------------------------


def _first_monday_of_first_week(year: int) -> int:
    """Julian day of the Monday of ISO week 1 of a year.

    That is the Monday of the week containing 4 January, always between
    29 December and 4 January, so sometimes in the previous year.
    """
    jan_first = ymd_to_julian(year, 1, 1)
    jan_first_dow = floor_mod(jan_first + 1, 7)  # sun=0, sat=6
    return jan_first + (11 - jan_first_dow) % 7 - 3


def _iso8601_week_number(julian: int, year: int, month: int, day: int) -> int:
    """ISO-8601 week number (1..53) of a date."""
    isodow = floor_mod(julian, 7) + 1  # mon=1, sun=7
    if month == 12 and day > 28:
        # Late December may already be week 1 of next year.
        if 31 - day + 4 > 7 - isodow and 31 - day + isodow >= 4:
            return (julian - _first_monday_of_first_week(year)) // 7 + 1
        return 1
    if month == 1 and day < 5:
        # Early January may still be week 52/53 of last year.
        if 4 - day <= 7 - isodow and day - isodow >= -3:
            return 1
        return (julian - _first_monday_of_first_week(year - 1)) // 7 + 1
    return (julian - _first_monday_of_first_week(year)) // 7 + 1


# ---------------------------------------------------------------------------
# EXTRACT
# ---------------------------------------------------------------------------


def julian_extract(unit_range: TimeUnitRange, julian: int) -> int:
    """Extract a calendar field from a Julian day number."""
    year, month, day = julian_to_ymd(julian)

    if unit_range is TimeUnitRange.YEAR:
        return year
    if unit_range is TimeUnitRange.ISOYEAR:
        week = _iso8601_week_number(julian, year, month, day)
        if week == 1 and month == 12:
            return year + 1
        if month == 1 and week > 50:
            return year - 1
        return year
    if unit_range is TimeUnitRange.QUARTER:
        return (month + 2) // 3
    if unit_range is TimeUnitRange.MONTH:
        return month
    if unit_range is TimeUnitRange.DAY:
        return day
    if unit_range is TimeUnitRange.DOW:
        return floor_mod(julian + 1, 7) + 1  # sun=1, sat=7
    if unit_range is TimeUnitRange.ISODOW:
        return floor_mod(julian, 7) + 1  # mon=1, sun=7
    if unit_range is TimeUnitRange.WEEK:
        return _iso8601_week_number(julian, year, month, day)
    if unit_range is TimeUnitRange.DOY:
        return julian - ymd_to_julian(year, 1, 1) + 1
    if unit_range is TimeUnitRange.DECADE:
        return _quot(year, 10)
    if unit_range is TimeUnitRange.CENTURY:
        return _quot(year + 99, 100) if year > 0 else _quot(year - 99, 100)
    if unit_range is TimeUnitRange.MILLENNIUM:
        return _quot(year + 999, 1000) if year > 0 else _quot(year - 999, 1000)
    raise UnsupportedRangeError(unit_range, "EXTRACT from DATE")


def unix_date_extract(unit_range: TimeUnitRange, date: int) -> int:
    """Extract a field from a date (days since epoch).

    EPOCH is the number of seconds since 1970-01-01 and needs no
    decomposition.
    """
    if unit_range is TimeUnitRange.EPOCH:
        return date * SECONDS_PER_DAY
    return julian_extract(unit_range, date + EPOCH_JULIAN)


def unix_time_extract(unit_range: TimeUnitRange, time: int) -> int:
    """Extract HOUR, MINUTE or SECOND from a time (ms since midnight)."""
    assert time >= 0
    assert time < MILLIS_PER_DAY
    if unit_range is TimeUnitRange.HOUR:
        return time // MILLIS_PER_HOUR
    if unit_range is TimeUnitRange.MINUTE:
        return time // MILLIS_PER_MINUTE % 60
    if unit_range is TimeUnitRange.SECOND:
        return time // MILLIS_PER_SECOND % 60
    raise UnsupportedRangeError(unit_range, "EXTRACT from TIME")


def unix_timestamp_extract(unit_range: TimeUnitRange, timestamp: int) -> int:
    """Extract a field from a timestamp (ms since epoch).

    Time-of-day fields come from the floor remainder, calendar fields from
    the floor quotient, so timestamps before 1970 decompose correctly.
    """
    if unit_range in _TIME_RANGES:
        return unix_time_extract(unit_range, floor_mod(timestamp, MILLIS_PER_DAY))
    if unit_range is TimeUnitRange.EPOCH:
        return floor_div(timestamp, MILLIS_PER_SECOND)
    return unix_date_extract(unit_range, floor_div(timestamp, MILLIS_PER_DAY))


# ---------------------------------------------------------------------------
# FLOOR / CEIL
# ---------------------------------------------------------------------------


def _julian_date_floor(
    unit_range: TimeUnitRange, julian: int, floor: bool
) -> int:
    """Start of the period containing julian (floor), or of the next one.

    Returns a date (days since epoch). The ceil branch assumes the caller
    has already handled dates that sit exactly on a period start.
    """
    year, month, day = julian_to_ymd(julian)

    if unit_range is TimeUnitRange.MILLENNIUM:
        end = 1000 * _quot(year + 999, 1000)
        return ymd_to_unix_date(end - 999 if floor else end + 1, 1, 1)
    if unit_range is TimeUnitRange.CENTURY:
        end = 100 * _quot(year + 99, 100)
        return ymd_to_unix_date(end - 99 if floor else end + 1, 1, 1)
    if unit_range is TimeUnitRange.DECADE:
        decade = _quot(year, 10)
        return ymd_to_unix_date(10 * decade if floor else 10 * (decade + 1), 1, 1)
    if unit_range is TimeUnitRange.YEAR:
        if not floor and (month > 1 or day > 1):
            year += 1
        return ymd_to_unix_date(year, 1, 1)
    if unit_range is TimeUnitRange.QUARTER:
        q = (month - 1) // 3
        if floor:
            month = q * 3 + 1
        elif month - 1 > q * 3 or day > 1:
            if q == 3:
                year += 1
                month = 1
            else:
                month = q * 3 + 4
        return ymd_to_unix_date(year, month, 1)
    if unit_range is TimeUnitRange.MONTH:
        if not floor and day > 1:
            month += 1
            if month > 12:
                year += 1
                month = 1
        return ymd_to_unix_date(year, month, 1)
    if unit_range is TimeUnitRange.WEEK:
        # Weeks start on Sunday, matching DOW.
        offset = floor_mod(julian + 1, 7)  # sun=0, sat=6
        if not floor and offset > 0:
            offset -= 7
        return julian - EPOCH_JULIAN - offset
    if unit_range is TimeUnitRange.DAY:
        return julian - EPOCH_JULIAN
    raise UnsupportedRangeError(unit_range, "FLOOR" if floor else "CEIL")


def unix_date_floor(unit_range: TimeUnitRange, date: int) -> int:
    """First day of the period containing date."""
    return _julian_date_floor(unit_range, date + EPOCH_JULIAN, True)


def unix_date_ceil(unit_range: TimeUnitRange, date: int) -> int:
    """First day of the next period, or date itself if it starts a period."""
    if unit_range not in _TRUNCATE_RANGES:
        raise UnsupportedRangeError(unit_range, "CEIL")
    if unix_date_floor(unit_range, date) == date:
        return date
    return _julian_date_floor(unit_range, date + EPOCH_JULIAN, False)


def unix_timestamp_floor(unit_range: TimeUnitRange, timestamp: int) -> int:
    """Midnight starting the period containing timestamp."""
    date = floor_div(timestamp, MILLIS_PER_DAY)
    return unix_date_floor(unit_range, date) * MILLIS_PER_DAY


def unix_timestamp_ceil(unit_range: TimeUnitRange, timestamp: int) -> int:
    """Midnight starting the next period, or timestamp if already aligned.

    A timestamp with a non-zero time of day is never aligned, so its ceil
    is found from the following midnight.
    """
    date = floor_div(timestamp, MILLIS_PER_DAY)
    if floor_mod(timestamp, MILLIS_PER_DAY) != 0:
        date += 1
    return unix_date_ceil(unit_range, date) * MILLIS_PER_DAY


def reset_time(timestamp: int) -> int:
    """Zero the time-of-day part of a timestamp."""
    return floor_div(timestamp, MILLIS_PER_DAY) * MILLIS_PER_DAY


def reset_date(timestamp: int) -> int:
    """Move a timestamp onto 1970-01-01, keeping its time of day."""
    return floor_mod(timestamp, MILLIS_PER_DAY)
