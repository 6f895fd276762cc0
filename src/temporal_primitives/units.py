"""TimeUnit and TimeUnitRange: the closed sets of units and ranges.

Every extraction, truncation and interval formatting operation is keyed by
a TimeUnitRange. Composite ranges (YEAR_TO_MONTH, DAY_TO_SECOND, ...) are
looked up from their (start, end) units through a table built once at import.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

from temporal_primitives.types import UnsupportedRangeError

# Average Gregorian month: 365.2425 days / 12, in seconds.
_MONTH_SECONDS = Decimal(2629746)
_YEAR_SECONDS = 12 * _MONTH_SECONDS
_DAY_SECONDS = Decimal(86400)


class TimeUnit(Enum):
    """Atomic unit of time.

    Each member carries:
        label: lower-case name, as used in SQL (EXTRACT(DOY FROM ...)).
        multiplier: length of one unit in seconds, as a Decimal. MONTH is
            the average Gregorian month; DOW, ISODOW and DOY count days.
        year_month: True for units of the year-month interval family.
        limit: exclusive upper bound of the field when it follows a larger
            field in an interval (MONTH < 12, HOUR < 24, ...), or None.
    """

    YEAR = ("year", _YEAR_SECONDS, True, None)
    MONTH = ("month", _MONTH_SECONDS, True, 12)
    DAY = ("day", _DAY_SECONDS, False, None)
    HOUR = ("hour", Decimal(3600), False, 24)
    MINUTE = ("minute", Decimal(60), False, 60)
    SECOND = ("second", Decimal(1), False, 60)
    QUARTER = ("quarter", 3 * _MONTH_SECONDS, True, 4)
    ISOYEAR = ("isoyear", _YEAR_SECONDS, True, None)
    WEEK = ("week", 7 * _DAY_SECONDS, False, None)
    MILLISECOND = ("millisecond", Decimal("0.001"), False, 1000)
    MICROSECOND = ("microsecond", Decimal("0.000001"), False, 1000_000)
    NANOSECOND = ("nanosecond", Decimal("0.000000001"), False, 1000_000_000)
    DOW = ("dow", _DAY_SECONDS, False, None)
    ISODOW = ("isodow", _DAY_SECONDS, False, None)
    DOY = ("doy", _DAY_SECONDS, False, None)
    EPOCH = ("epoch", Decimal(1), False, None)
    DECADE = ("decade", 10 * _YEAR_SECONDS, True, None)
    CENTURY = ("century", 100 * _YEAR_SECONDS, True, None)
    MILLENNIUM = ("millennium", 1000 * _YEAR_SECONDS, True, None)

    def __init__(
        self,
        label: str,
        multiplier: Decimal,
        year_month: bool,
        limit: int | None,
    ) -> None:
        self.label = label
        self.multiplier = multiplier
        self.year_month = year_month
        self.limit = limit

    def is_valid_value(self, value: int | Decimal) -> bool:
        """Whether value fits this unit as a non-leading interval field."""
        if value < 0:
            return False
        return self.limit is None or value < self.limit


class TimeUnitRange(Enum):
    """A unit, or a contiguous span of units from start_unit to end_unit."""

    YEAR = (TimeUnit.YEAR, None)
    YEAR_TO_MONTH = (TimeUnit.YEAR, TimeUnit.MONTH)
    MONTH = (TimeUnit.MONTH, None)
    DAY = (TimeUnit.DAY, None)
    DAY_TO_HOUR = (TimeUnit.DAY, TimeUnit.HOUR)
    DAY_TO_MINUTE = (TimeUnit.DAY, TimeUnit.MINUTE)
    DAY_TO_SECOND = (TimeUnit.DAY, TimeUnit.SECOND)
    HOUR = (TimeUnit.HOUR, None)
    HOUR_TO_MINUTE = (TimeUnit.HOUR, TimeUnit.MINUTE)
    HOUR_TO_SECOND = (TimeUnit.HOUR, TimeUnit.SECOND)
    MINUTE = (TimeUnit.MINUTE, None)
    MINUTE_TO_SECOND = (TimeUnit.MINUTE, TimeUnit.SECOND)
    SECOND = (TimeUnit.SECOND, None)

    # Non-standard ranges, for EXTRACT and FLOOR/CEIL only.
    ISOYEAR = (TimeUnit.ISOYEAR, None)
    QUARTER = (TimeUnit.QUARTER, None)
    WEEK = (TimeUnit.WEEK, None)
    MILLISECOND = (TimeUnit.MILLISECOND, None)
    MICROSECOND = (TimeUnit.MICROSECOND, None)
    NANOSECOND = (TimeUnit.NANOSECOND, None)
    DOW = (TimeUnit.DOW, None)
    ISODOW = (TimeUnit.ISODOW, None)
    DOY = (TimeUnit.DOY, None)
    EPOCH = (TimeUnit.EPOCH, None)
    DECADE = (TimeUnit.DECADE, None)
    CENTURY = (TimeUnit.CENTURY, None)
    MILLENNIUM = (TimeUnit.MILLENNIUM, None)

    def __init__(self, start_unit: TimeUnit, end_unit: TimeUnit | None) -> None:
        self.start_unit = start_unit
        self.end_unit = end_unit

    @property
    def is_year_month(self) -> bool:
        """YEAR, YEAR_TO_MONTH and MONTH: ranges measured in months."""
        return self.start_unit in (TimeUnit.YEAR, TimeUnit.MONTH)

    @property
    def last_unit(self) -> TimeUnit:
        """The finest unit of the range."""
        return self.end_unit if self.end_unit is not None else self.start_unit

    @classmethod
    def of(
        cls, start_unit: TimeUnit, end_unit: TimeUnit | None = None
    ) -> TimeUnitRange:
        """Return the range for (start_unit, end_unit).

        Always the same member for the same pair. Raises
        UnsupportedRangeError if no range spans those units.
        """
        try:
            return _RANGES_BY_UNITS[(start_unit, end_unit)]
        except KeyError:
            raise UnsupportedRangeError(
                (start_unit, end_unit), "TimeUnitRange.of"
            ) from None


# Built once at import; read-only afterwards.
_RANGES_BY_UNITS: dict[tuple[TimeUnit, TimeUnit | None], TimeUnitRange] = {
    (r.start_unit, r.end_unit): r for r in TimeUnitRange
}


__all__ = ["TimeUnit", "TimeUnitRange"]
