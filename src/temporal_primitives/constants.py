"""Read-only configuration: epoch, unit sizes, literal formats and zones.

Evaluated once at import. Nothing here is mutated afterwards; functions
that need a zone take it as a parameter defaulting to these values.
"""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone, tzinfo

# The Julian day number of the epoch, 1970-01-01.
EPOCH_JULIAN: int = 2440588

# Date 1970-01-01 as a proleptic Gregorian ordinal (datetime.date.toordinal).
EPOCH_ORDINAL: int = 719163

MILLIS_PER_SECOND: int = 1000
MILLIS_PER_MINUTE: int = 60000
MILLIS_PER_HOUR: int = 3600000  # 60 * 60 * 1000
# Modulo 'mask' when splitting a TIMESTAMP into DATE and TIME values.
MILLIS_PER_DAY: int = 86400000  # 24 * 60 * 60 * 1000

SECONDS_PER_DAY: int = 86_400

# SimpleDateFormat patterns for the SQL literal forms.
DATE_FORMAT_STRING: str = "yyyy-MM-dd"
TIME_FORMAT_STRING: str = "HH:mm:ss"
TIMESTAMP_FORMAT_STRING: str = DATE_FORMAT_STRING + " " + TIME_FORMAT_STRING

UTC_ZONE = timezone.utc


class _LocalZone(tzinfo):
    """The host's local zone, daylight-saving rules included.

    The offset is looked up from the C library for each wall-clock time,
    so a January date and a July date get their own offsets, and a change
    of TZ followed by time.tzset() takes effect immediately.
    """

    def _local(self, dt: datetime) -> time.struct_time:
        stamp = time.mktime((
            dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second,
            dt.weekday(), 0, -1,
        ))
        return time.localtime(stamp)

    def utcoffset(self, dt: datetime | None) -> timedelta:
        if dt is None:
            return timedelta(seconds=-time.timezone)
        return timedelta(seconds=self._local(dt).tm_gmtoff)

    def dst(self, dt: datetime | None) -> timedelta:
        if dt is None or self._local(dt).tm_isdst <= 0:
            return timedelta(0)
        return self.utcoffset(dt) + timedelta(seconds=time.timezone)

    def tzname(self, dt: datetime | None) -> str:
        if dt is None:
            return time.tzname[0]
        return self._local(dt).tm_zone

    def fromutc(self, dt: datetime) -> datetime:
        seconds = (dt.replace(tzinfo=None) - _NAIVE_EPOCH) // timedelta(seconds=1)
        return dt + timedelta(seconds=time.localtime(seconds).tm_gmtoff)

    def __repr__(self) -> str:
        return "DEFAULT_ZONE"


_NAIVE_EPOCH = datetime(1970, 1, 1)

# Zone of the host process, resolved per instant.
DEFAULT_ZONE: tzinfo = _LocalZone()

# 1970-01-01 00:00:00 UTC. datetimes are immutable, so this is safe to share.
ZERO_DATETIME: datetime = datetime(1970, 1, 1, tzinfo=UTC_ZONE)


__all__ = [
    "DATE_FORMAT_STRING",
    "DEFAULT_ZONE",
    "EPOCH_JULIAN",
    "EPOCH_ORDINAL",
    "MILLIS_PER_DAY",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_SECOND",
    "SECONDS_PER_DAY",
    "TIMESTAMP_FORMAT_STRING",
    "TIME_FORMAT_STRING",
    "UTC_ZONE",
    "ZERO_DATETIME",
]
