"""Layer 1: Julian/Gregorian converter, integer day arithmetic.

Maps proleptic Gregorian (year, month, day) triples to Julian day numbers
and back with closed-form integer formulas. Everything else in the library
is built on these two functions.

No validation is done: an invalid triple, or a year far outside 0..9999,
gives an unspecified result rather than an error.
"""

from __future__ import annotations

from temporal_primitives.constants import (
    EPOCH_JULIAN,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)
from temporal_primitives.types import YearMonthDay

_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def floor_div(x: int, y: int) -> int:
    """Divide, rounding towards negative infinity.

    >>> floor_div(-13, 3)
    -5
    """
    return x // y


def floor_mod(x: int, y: int) -> int:
    """Modulo with the sign of the divisor; in [0, y) for y > 0.

    >>> floor_mod(-13, 3)
    2
    """
    return x - floor_div(x, y) * y


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian leap year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def last_day(year: int, month: int) -> int:
    """Number of days in the given month."""
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def ymd_to_julian(year: int, month: int, day: int) -> int:
    """Julian day number of a proleptic Gregorian date.

    Year 2020 means 2020 CE, 1 means 1 CE, 0 means 1 BCE, -1 means 2 BCE.
    The month is shifted so the year starts in March, which puts the leap
    day at the end of the shifted year.

    >>> ymd_to_julian(1970, 1, 1)
    2440588
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return (
        day
        + (153 * m + 2) // 5
        + 365 * y
        + y // 4
        - y // 100
        + y // 400
        - 32045
    )


def julian_to_ymd(julian: int) -> YearMonthDay:
    """Inverse of ymd_to_julian.

    >>> julian_to_ymd(2451604)
    YearMonthDay(year=2000, month=2, day=29)
    """
    # Shift the epoch back to astronomical year -4800 (1 March 4801 BC),
    # then peel off 400-year, 100-year, 4-year and 1-year cycles.
    j = julian + 32044
    g = j // 146097
    dg = j % 146097
    c = (dg // 36524 + 1) * 3 // 4
    dc = dg - c * 36524
    b = dc // 1461
    db = dc % 1461
    a = (db // 365 + 1) * 3 // 4
    da = db - a * 365

    # Full years elapsed since 1 March 4801 BC
    y = g * 400 + c * 100 + b * 4 + a
    # Full months elapsed since the last 1 March
    m = (da * 5 + 308) // 153 - 2
    # Days elapsed since day 1 of the month
    d = da - (m + 4) * 153 // 5 + 122

    return YearMonthDay(
        year=y - 4800 + (m + 2) // 12,
        month=(m + 2) % 12 + 1,
        day=d + 1,
    )


def julian_to_string(julian: int) -> str:
    """Format a Julian day number as 'YYYY-MM-DD'."""
    year, month, day = julian_to_ymd(julian)
    return f"{year:04d}-{month:02d}-{day:02d}"


def ymd_to_unix_date(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 of a proleptic Gregorian date."""
    return ymd_to_julian(year, month, day) - EPOCH_JULIAN


def unix_date_to_ymd(date: int) -> YearMonthDay:
    """Inverse of ymd_to_unix_date."""
    return julian_to_ymd(date + EPOCH_JULIAN)


def unix_timestamp(
    year: int, month: int, day: int, hour: int, minute: int, second: int
) -> int:
    """Milliseconds since 1970-01-01 00:00:00 of a date and time of day."""
    date = ymd_to_unix_date(year, month, day)
    return (
        date * MILLIS_PER_DAY
        + hour * MILLIS_PER_HOUR
        + minute * MILLIS_PER_MINUTE
        + second * MILLIS_PER_SECOND
    )
