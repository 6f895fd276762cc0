"""SQL literal text: DATE, TIME, TIMESTAMP and INTERVAL encode/decode.

Formats are fixed:

    DATE       YYYY-MM-DD
    TIME       HH:MM:SS[.fff]
    TIMESTAMP  YYYY-MM-DD HH:MM:SS[.fff]   (space, not ISO 'T')

Parsing is deliberately lenient about missing trailing components and
strict about non-numeric ones, which raise DateTimeParseError.
"""

from __future__ import annotations

from temporal_primitives.calendar import (
    floor_div,
    floor_mod,
    julian_to_string,
    ymd_to_unix_date,
)
from temporal_primitives.constants import (
    EPOCH_JULIAN,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)
from temporal_primitives.types import DateTimeParseError, UnsupportedRangeError
from temporal_primitives.units import TimeUnit, TimeUnitRange

# Day-time interval fields, largest first, with their size in milliseconds.
_DAY_TIME_FIELDS: tuple[tuple[TimeUnit, int], ...] = (
    (TimeUnit.DAY, MILLIS_PER_DAY),
    (TimeUnit.HOUR, MILLIS_PER_HOUR),
    (TimeUnit.MINUTE, MILLIS_PER_MINUTE),
    (TimeUnit.SECOND, MILLIS_PER_SECOND),
)
_UNIT_MILLIS: dict[TimeUnit, int] = dict(_DAY_TIME_FIELDS)

_DAY_TIME_RANGES = frozenset({
    TimeUnitRange.DAY,
    TimeUnitRange.DAY_TO_HOUR,
    TimeUnitRange.DAY_TO_MINUTE,
    TimeUnitRange.DAY_TO_SECOND,
    TimeUnitRange.HOUR,
    TimeUnitRange.HOUR_TO_MINUTE,
    TimeUnitRange.HOUR_TO_SECOND,
    TimeUnitRange.MINUTE,
    TimeUnitRange.MINUTE_TO_SECOND,
    TimeUnitRange.SECOND,
})


# ---------------------------------------------------------------------------
# Number helpers
# ---------------------------------------------------------------------------


def digit_count(v: int) -> int:
    """Number of decimal digits in v; 1 for zero."""
    return len(str(abs(v)))


def number(v: int, n: int) -> str:
    """v in decimal, left-padded with zeros to at least n digits."""
    return "0" * (n - digit_count(v)) + str(v)


def power_x(a: int, b: int) -> int:
    """a to the power b, or 1 when b is not positive."""
    return a ** b if b > 0 else 1


def _round_up(dividend: int, divisor: int) -> int:
    """Round a non-negative dividend to the nearest multiple of divisor.

    Halves round up: _round_up(34, 10) == 30, _round_up(35, 10) == 40.
    """
    remainder = dividend % divisor
    dividend -= remainder
    if remainder * 2 >= divisor:
        dividend += divisor
    return dividend


def _fraction_digits(millis: int, precision: int) -> str:
    """First `precision` digits of a millisecond fraction, zero-padded."""
    return f"{millis:03d}"[:precision].ljust(precision, "0")


def _parse_int(literal: str, component: str) -> int:
    # int() also takes "1_999"; digit separators are not part of a literal.
    if "_" in component:
        raise DateTimeParseError(literal, component)
    try:
        return int(component.strip())
    except ValueError:
        raise DateTimeParseError(literal, component) from None


def _parse_fraction(v: str, multiplier: int) -> int:
    """Parse a fraction, first digit times multiplier, next times
    multiplier / 10, and so on, rounding half up at the last digit.

    _parse_fraction("1234", 100) == 123; _parse_fraction("1235", 100) == 124.
    """
    r = 0
    for i, c in enumerate(v):
        r += multiplier * (int(c) if "0" <= c <= "9" else 0)
        if multiplier < 10:
            # Last digit kept; the next one decides rounding.
            if i + 1 < len(v) and "5" <= v[i + 1] <= "9":
                r += 1
            break
        multiplier //= 10
    return r


# ---------------------------------------------------------------------------
# DATE / TIME / TIMESTAMP -> string
# ---------------------------------------------------------------------------


def unix_date_to_string(date: int) -> str:
    """Format a date (days since epoch) as 'YYYY-MM-DD'.

    Years outside 0..9999 are not padded to a fixed width.
    """
    return julian_to_string(date + EPOCH_JULIAN)


def unix_time_to_string(time: int, precision: int = 0) -> str:
    """Format a time (ms since midnight) as 'HH:MM:SS[.fff]'.

    The fraction is truncated, not rounded, to `precision` digits.
    """
    hour, rest = divmod(time, MILLIS_PER_HOUR)
    minute, rest = divmod(rest, MILLIS_PER_MINUTE)
    second, millis = divmod(rest, MILLIS_PER_SECOND)
    text = f"{hour:02d}:{minute:02d}:{second:02d}"
    if precision > 0:
        text += "." + _fraction_digits(millis, precision)
    return text


def unix_timestamp_to_string(timestamp: int, precision: int = 0) -> str:
    """Format a timestamp (ms since epoch) as 'YYYY-MM-DD HH:MM:SS[.fff]'."""
    date = floor_div(timestamp, MILLIS_PER_DAY)
    time = floor_mod(timestamp, MILLIS_PER_DAY)
    return unix_date_to_string(date) + " " + unix_time_to_string(time, precision)


# ---------------------------------------------------------------------------
# string -> DATE / TIME / TIMESTAMP
# ---------------------------------------------------------------------------


def date_string_to_unix_date(s: str) -> int:
    """Parse 'Y[-M[-D]]' into days since epoch.

    Missing month and day default to 1. Values are not range-checked.
    """
    hyphen1 = s.find("-")
    if hyphen1 < 0:
        return ymd_to_unix_date(_parse_int(s, s), 1, 1)

    year = _parse_int(s, s[:hyphen1])
    hyphen2 = s.find("-", hyphen1 + 1)
    if hyphen2 < 0:
        month = _parse_int(s, s[hyphen1 + 1:])
        day = 1
    else:
        month = _parse_int(s, s[hyphen1 + 1:hyphen2])
        day = _parse_int(s, s[hyphen2 + 1:])
    return ymd_to_unix_date(year, month, day)


def time_string_to_unix_date(v: str, start: int = 0) -> int:
    """Parse 'H[:M[:S[.fff]]]', read from index `start`, into ms since midnight.

    Missing components are 0. Fraction digits beyond the third only decide
    the rounding of the third.
    """
    minute = second = milli = 0
    colon1 = v.find(":", start)
    if colon1 < 0:
        hour = _parse_int(v, v[start:])
    else:
        hour = _parse_int(v, v[start:colon1])
        colon2 = v.find(":", colon1 + 1)
        if colon2 < 0:
            minute = _parse_int(v, v[colon1 + 1:])
        else:
            minute = _parse_int(v, v[colon1 + 1:colon2])
            dot = v.find(".", colon2)
            if dot < 0:
                second = _parse_int(v, v[colon2 + 1:])
            else:
                second = _parse_int(v, v[colon2 + 1:dot])
                milli = _parse_fraction(v[dot + 1:].strip(), 100)
    return (
        hour * MILLIS_PER_HOUR
        + minute * MILLIS_PER_MINUTE
        + second * MILLIS_PER_SECOND
        + milli
    )


def timestamp_string_to_unix_date(s: str) -> int:
    """Parse '<date>[ <time>]' into ms since epoch. Missing time is midnight."""
    s = s.strip()
    space = s.find(" ")
    if space < 0:
        return date_string_to_unix_date(s) * MILLIS_PER_DAY
    date = date_string_to_unix_date(s[:space])
    time = time_string_to_unix_date(s, space + 1)
    return date * MILLIS_PER_DAY + time


# ---------------------------------------------------------------------------
# INTERVAL -> string
# ---------------------------------------------------------------------------


def interval_year_month_to_string(v: int, unit_range: TimeUnitRange) -> str:
    """Format a year-month interval, given in months.

    >>> interval_year_month_to_string(-13, TimeUnitRange.YEAR_TO_MONTH)
    '-1-01'
    """
    sign = "+" if v >= 0 else "-"
    v = abs(v)
    if unit_range is TimeUnitRange.YEAR:
        return sign + str(_round_up(v, 12) // 12)
    if unit_range is TimeUnitRange.YEAR_TO_MONTH:
        return sign + str(v // 12) + "-" + number(v % 12, 2)
    if unit_range is TimeUnitRange.MONTH:
        return sign + str(v)
    raise UnsupportedRangeError(unit_range, "interval_year_month_to_string")


def interval_day_time_to_string(
    v: int, unit_range: TimeUnitRange, scale: int
) -> str:
    """Format a day-time interval, given in milliseconds.

    The magnitude is first rounded to the last field of the range (to
    10^-scale seconds when that is SECOND). The leading field is printed
    as is and may exceed its usual limit (e.g. 30 hours in HOUR_TO_MINUTE);
    later fields are two digits. The fraction is omitted when scale is 0.

    >>> interval_day_time_to_string(0, TimeUnitRange.DAY_TO_SECOND, 0)
    '+0 00:00:00'
    """
    if unit_range not in _DAY_TIME_RANGES:
        raise UnsupportedRangeError(unit_range, "interval_day_time_to_string")

    sign = "+" if v >= 0 else "-"
    v = abs(v)
    first = unit_range.start_unit
    last = unit_range.last_unit
    if last is TimeUnit.SECOND:
        v = _round_up(v, power_x(10, 3 - scale))
    else:
        v = _round_up(v, _UNIT_MILLIS[last])

    buf = [sign]
    started = False
    for unit, millis in _DAY_TIME_FIELDS:
        started = started or unit is first
        if not started:
            continue
        value, v = divmod(v, millis)
        if unit is first:
            buf.append(str(value))
        else:
            buf.append(" " if unit is TimeUnit.HOUR else ":")
            buf.append(number(value, 2))
        if unit is last:
            break

    # Past three digits the milliseconds are padded with zeros, so a scale
    # of 6 shows .567000 rather than dropping the known digits.
    if last is TimeUnit.SECOND and scale > 0:
        buf.append("." + _fraction_digits(v, scale))
    return "".join(buf)
