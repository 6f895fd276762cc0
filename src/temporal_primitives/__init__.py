"""temporal-primitives: Integer calendar arithmetic for SQL DATE, TIME, TIMESTAMP and INTERVAL values."""

import logging

from temporal_primitives.boundary import (
    date_to_unix_date,
    datetime_to_unix_timestamp,
    is_offset_date_time,
    offset_date_time_value,
    split_timestamp,
    time_to_unix_time,
    unix_date_to_date,
    unix_time_to_time,
    unix_timestamp_to_datetime,
)
from temporal_primitives.calendar import (
    floor_div,
    floor_mod,
    is_leap_year,
    julian_to_string,
    julian_to_ymd,
    last_day,
    unix_date_to_ymd,
    unix_timestamp,
    ymd_to_julian,
    ymd_to_unix_date,
)
from temporal_primitives.constants import (
    DATE_FORMAT_STRING,
    DEFAULT_ZONE,
    EPOCH_JULIAN,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    SECONDS_PER_DAY,
    TIME_FORMAT_STRING,
    TIMESTAMP_FORMAT_STRING,
    UTC_ZONE,
    ZERO_DATETIME,
)
from temporal_primitives.extract import (
    julian_extract,
    reset_date,
    reset_time,
    unix_date_ceil,
    unix_date_extract,
    unix_date_floor,
    unix_time_extract,
    unix_timestamp_ceil,
    unix_timestamp_extract,
    unix_timestamp_floor,
)
from temporal_primitives.literals import (
    date_string_to_unix_date,
    digit_count,
    interval_day_time_to_string,
    interval_year_month_to_string,
    number,
    power_x,
    time_string_to_unix_date,
    timestamp_string_to_unix_date,
    unix_date_to_string,
    unix_time_to_string,
    unix_timestamp_to_string,
)
from temporal_primitives.months import (
    add_months,
    add_months_timestamp,
    subtract_months,
    subtract_months_timestamp,
)
from temporal_primitives.patterns import (
    DateFormat,
    SimpleDateFormat,
    check_date_format,
    new_date_format,
    parse_date_format,
    parse_precision_date_time_literal,
)
from temporal_primitives.types import (
    DateTimeParseError,
    PrecisionTime,
    TemporalError,
    UnsupportedRangeError,
    YearMonthDay,
)
from temporal_primitives.units import TimeUnit, TimeUnitRange

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DATE_FORMAT_STRING",
    "DEFAULT_ZONE",
    "DateFormat",
    "DateTimeParseError",
    "EPOCH_JULIAN",
    "MILLIS_PER_DAY",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_SECOND",
    "PrecisionTime",
    "SECONDS_PER_DAY",
    "SimpleDateFormat",
    "TIMESTAMP_FORMAT_STRING",
    "TIME_FORMAT_STRING",
    "TemporalError",
    "TimeUnit",
    "TimeUnitRange",
    "UTC_ZONE",
    "UnsupportedRangeError",
    "YearMonthDay",
    "ZERO_DATETIME",
    "add_months",
    "add_months_timestamp",
    "check_date_format",
    "date_string_to_unix_date",
    "date_to_unix_date",
    "datetime_to_unix_timestamp",
    "digit_count",
    "floor_div",
    "floor_mod",
    "interval_day_time_to_string",
    "interval_year_month_to_string",
    "is_leap_year",
    "is_offset_date_time",
    "julian_extract",
    "julian_to_string",
    "julian_to_ymd",
    "last_day",
    "new_date_format",
    "number",
    "offset_date_time_value",
    "parse_date_format",
    "parse_precision_date_time_literal",
    "power_x",
    "reset_date",
    "reset_time",
    "split_timestamp",
    "subtract_months",
    "subtract_months_timestamp",
    "time_string_to_unix_date",
    "time_to_unix_time",
    "timestamp_string_to_unix_date",
    "unix_date_ceil",
    "unix_date_extract",
    "unix_date_floor",
    "unix_date_to_date",
    "unix_date_to_string",
    "unix_date_to_ymd",
    "unix_time_extract",
    "unix_time_to_string",
    "unix_time_to_time",
    "unix_timestamp",
    "unix_timestamp_ceil",
    "unix_timestamp_extract",
    "unix_timestamp_floor",
    "unix_timestamp_to_datetime",
    "unix_timestamp_to_string",
    "ymd_to_julian",
    "ymd_to_unix_date",
]
