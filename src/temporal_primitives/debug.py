"""ASCII visualisation for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

from temporal_primitives.calendar import last_day, ymd_to_unix_date
from temporal_primitives.extract import unix_date_extract
from temporal_primitives.units import TimeUnitRange


def show_month(year: int, month: int) -> str:
    """Print ASCII calendar of one month, one row per ISO week.

    Each row is labelled with its ISO week number and ISO year, so the
    weeks around New Year show which year they belong to. Days outside
    the month are shown as '.'.
    Returns the string and also prints to stdout.

        2021-01
                    Mon Tue Wed Thu Fri Sat Sun
          W53 2020    .   .   .   .   1   2   3
          W01 2021    4   5   6   7   8   9  10
    """
    lines: list[str] = []
    day_names = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

    lines.append(f"{year:04d}-{month:02d}")
    lines.append(f"{'':>10s}  " + " ".join(f"{n:>3s}" for n in day_names))

    first = ymd_to_unix_date(year, month, 1)
    last = first + last_day(year, month) - 1

    # Back up to the Monday starting the first row
    current = first - (unix_date_extract(TimeUnitRange.ISODOW, first) - 1)
    while current <= last:
        week = unix_date_extract(TimeUnitRange.WEEK, current)
        iso_year = unix_date_extract(TimeUnitRange.ISOYEAR, current)
        label = f"W{week:02d} {iso_year:04d}"

        cells = []
        for d in range(current, current + 7):
            if first <= d <= last:
                cells.append(f"{unix_date_extract(TimeUnitRange.DAY, d):>3d}")
            else:
                cells.append(f"{'.':>3s}")

        lines.append(f"{label:>10s}  " + " ".join(cells))
        current += 7

    result = "\n".join(lines)
    print(result)
    return result
