"""Layer 4: month arithmetic on dates and timestamps.

Adding months keeps the day of month where it can. When it cannot (31
January plus one month) the result rolls forward to the 1st of the month
after, never back to the last day of the short month.
"""

from __future__ import annotations

import logging

from temporal_primitives.calendar import (
    floor_div,
    floor_mod,
    last_day,
    ymd_to_unix_date,
)
from temporal_primitives.constants import MILLIS_PER_DAY
from temporal_primitives.extract import unix_date_extract
from temporal_primitives.units import TimeUnitRange

logger = logging.getLogger(__name__)


def add_months(date: int, m: int) -> int:
    """Add m months (possibly negative) to a date, in days since epoch.

    >>> from temporal_primitives.literals import unix_date_to_string
    >>> unix_date_to_string(add_months(ymd_to_unix_date(2016, 1, 31), 1))
    '2016-03-01'
    """
    year = unix_date_extract(TimeUnitRange.YEAR, date)
    month = unix_date_extract(TimeUnitRange.MONTH, date)
    day = unix_date_extract(TimeUnitRange.DAY, date)

    # Count months from year 0, zero-based, so floor div/mod give the
    # target year and month directly.
    total = year * 12 + month - 1 + m
    year = floor_div(total, 12)
    month = floor_mod(total, 12) + 1

    if day > last_day(year, month):
        day = 1
        month += 1
        if month > 12:
            month = 1
            year += 1
    return ymd_to_unix_date(year, month, day)


def add_months_timestamp(timestamp: int, m: int) -> int:
    """Add m months to a timestamp, keeping its time of day."""
    millis = floor_mod(timestamp, MILLIS_PER_DAY)
    date = floor_div(timestamp, MILLIS_PER_DAY)
    return add_months(date, m) * MILLIS_PER_DAY + millis


def subtract_months(date0: int, date1: int) -> int:
    """Number of whole months from date1 to date0.

    Negative when date0 is before date1. Because of end-of-month rollover
    the result is not exactly anti-symmetric, and may be one more than the
    naive count when date1 falls on a day the target month lacks.
    """
    if date0 < date1:
        return -subtract_months(date1, date0)
    # No month is longer than 31 days, so this never overshoots.
    m = (date0 - date1) // 31
    estimate = m
    while True:
        if add_months(date1, m) >= date0:
            break
        if add_months(date1, m + 1) > date0:
            break
        m += 1
    logger.debug(
        "subtract_months(%d, %d): estimate %d, probed to %d",
        date0, date1, estimate, m,
    )
    return m


def subtract_months_timestamp(t0: int, t1: int) -> int:
    """Number of whole months from timestamp t1 to t0.

    A month is only complete once the time of day has also been reached:
    from 1 Jan 12:00 to 1 Feb 11:00 is 0 months.
    """
    millis0 = floor_mod(t0, MILLIS_PER_DAY)
    millis1 = floor_mod(t1, MILLIS_PER_DAY)
    d0 = floor_div(t0, MILLIS_PER_DAY)
    d1 = floor_div(t1, MILLIS_PER_DAY)
    x = subtract_months(d0, d1)
    if add_months(d1, x) == d0 and millis0 < millis1:
        x -= 1
    return x
