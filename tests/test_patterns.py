"""Tests for pattern-based parsing and fractional-seconds literals.

Test data loaded from: data/fixtures/scenarios/parse.json
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timedelta, timezone

import pytest

from conftest import load_scenarios, zone

from temporal_primitives.constants import (
    DATE_FORMAT_STRING,
    DEFAULT_ZONE,
    TIMESTAMP_FORMAT_STRING,
    UTC_ZONE,
)
from temporal_primitives.patterns import (
    SimpleDateFormat,
    check_date_format,
    new_date_format,
    parse_date_format,
    parse_precision_date_time_literal,
)
from temporal_primitives.types import PrecisionTime

_data = load_scenarios("parse")

# POSIX rule string, so no zoneinfo database is needed.
_NEW_YORK = "EST5EDT,M3.2.0,M11.1.0"


@pytest.fixture
def new_york(monkeypatch):
    """Run with the process zone set to US Eastern time."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", _NEW_YORK)
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


class TestParseDateFormat:
    """Whole-string parsing with a pattern."""

    @pytest.mark.parametrize("spec", _data["date_format"], ids=lambda s: s["id"])
    def test_parse(self, spec):
        result = parse_date_format(spec["text"], spec["pattern"], zone(spec["tz"]))
        if spec["expected"] is None:
            assert result is None
        else:
            assert result == datetime.fromisoformat(spec["expected"])
            assert result.utcoffset() == timedelta(0)

    def test_accepts_date_format_instance(self):
        fmt = new_date_format(DATE_FORMAT_STRING)
        result = parse_date_format("1234-04-12", fmt, UTC_ZONE)
        assert (result.year, result.month, result.day) == (1234, 4, 12)

    @pytest.mark.parametrize("text, expected", [
        ("2016-01-15", datetime(2016, 1, 15, 5, tzinfo=UTC_ZONE)),
        ("2016-07-15", datetime(2016, 7, 15, 4, tzinfo=UTC_ZONE)),
    ], ids=["winter", "summer"])
    def test_default_zone_follows_daylight_saving(self, new_york, text, expected):
        assert parse_date_format(text, DATE_FORMAT_STRING) == expected

    def test_default_zone_precision_literal(self, new_york):
        pt = parse_precision_date_time_literal("2016-07-15 12:00:00.25", TIMESTAMP_FORMAT_STRING)
        assert pt.value == datetime(2016, 7, 15, 16, 0, 0, 250000, tzinfo=UTC_ZONE)

    def test_mismatch_is_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="temporal_primitives.patterns"):
            assert parse_date_format("2016-02-29x", DATE_FORMAT_STRING, UTC_ZONE) is None
        assert any("trailing text" in r.getMessage() for r in caplog.records)


class TestDefaultZone:
    """DEFAULT_ZONE resolves the host offset for each instant."""

    def test_offsets(self, new_york):
        assert DEFAULT_ZONE.utcoffset(datetime(2016, 1, 15, 12)) == timedelta(hours=-5)
        assert DEFAULT_ZONE.utcoffset(datetime(2016, 7, 15, 12)) == timedelta(hours=-4)
        assert DEFAULT_ZONE.dst(datetime(2016, 1, 15, 12)) == timedelta(0)
        assert DEFAULT_ZONE.dst(datetime(2016, 7, 15, 12)) == timedelta(hours=1)

    def test_converts_from_utc(self, new_york):
        summer = datetime(2016, 7, 15, 16, tzinfo=UTC_ZONE).astimezone(DEFAULT_ZONE)
        assert (summer.hour, summer.utcoffset()) == (12, timedelta(hours=-4))
        winter = datetime(2016, 1, 15, 17, tzinfo=UTC_ZONE).astimezone(DEFAULT_ZONE)
        assert (winter.hour, winter.utcoffset()) == (12, timedelta(hours=-5))


class TestPrecisionLiteral:
    """Pattern prefix followed by an optional '.digits' suffix."""

    @pytest.mark.parametrize("spec", _data["precision"], ids=lambda s: s["id"])
    def test_parse(self, spec, timestamp_format, utc):
        result = parse_precision_date_time_literal(
            spec["text"], timestamp_format, utc, spec["max_precision"]
        )
        if spec["value"] is None:
            assert result is None
            return
        assert isinstance(result, PrecisionTime)
        assert result.value == datetime.fromisoformat(spec["value"])
        assert result.fraction == spec["fraction"]
        assert result.precision == spec["precision"]
        assert len(result.fraction) == result.precision

    def test_fields_of_unlimited_precision(self):
        pt = parse_precision_date_time_literal(
            "1234-04-12 01:23:45.06789", TIMESTAMP_FORMAT_STRING, UTC_ZONE, -1
        )
        v = pt.value
        assert (v.year, v.month, v.day) == (1234, 4, 12)
        assert (v.hour, v.minute, v.second) == (1, 23, 45)
        assert v.microsecond == 67000

    def test_default_max_precision_is_three(self):
        pt = parse_precision_date_time_literal(
            "2016-02-29 00:00:00.123456", TIMESTAMP_FORMAT_STRING, UTC_ZONE
        )
        assert pt.fraction == "123"
        assert pt.precision == 3

    def test_to_unix_timestamp(self):
        pt = parse_precision_date_time_literal(
            "1969-12-31 23:59:59.999", TIMESTAMP_FORMAT_STRING, UTC_ZONE
        )
        assert pt.to_unix_timestamp() == -1

    def test_value_is_normalised_to_utc(self):
        pt = parse_precision_date_time_literal(
            "2016-02-29 10:00:00.5",
            TIMESTAMP_FORMAT_STRING,
            timezone(timedelta(hours=-2)),
        )
        assert pt.value == datetime(2016, 2, 29, 12, 0, 0, 500000, tzinfo=UTC_ZONE)
        assert pt.value.utcoffset() == timedelta(0)


class TestCollaborator:
    """Any object with a matching parse method can stand in for a pattern."""

    class _EpochSeconds:
        """Parses a run of digits as seconds since the epoch."""

        def parse(self, text, pos, tz):
            end = pos
            while end < len(text) and text[end].isdigit():
                end += 1
            if end == pos:
                return None
            value = datetime(1970, 1, 1, tzinfo=UTC_ZONE) + timedelta(seconds=int(text[pos:end]))
            return value, end

    def test_custom_format(self):
        pt = parse_precision_date_time_literal("86400.25", self._EpochSeconds(), UTC_ZONE)
        assert pt.value == datetime(1970, 1, 2, 0, 0, 0, 250000, tzinfo=UTC_ZONE)
        assert pt.fraction == "25"

    def test_custom_format_whole_string(self):
        assert parse_date_format("60", self._EpochSeconds()) == datetime(
            1970, 1, 1, 0, 1, tzinfo=UTC_ZONE
        )
        assert parse_date_format("60s", self._EpochSeconds()) is None


class TestPatterns:

    @pytest.mark.parametrize("spec", _data["bad_patterns"], ids=lambda s: s["id"])
    def test_check_date_format_rejects(self, spec):
        with pytest.raises(ValueError):
            check_date_format(spec["pattern"])

    @pytest.mark.parametrize("pattern", [
        DATE_FORMAT_STRING,
        TIMESTAMP_FORMAT_STRING,
        "yyyy-MM-dd'T'HH:mm:ss.SSS",
        "HH 'o''clock'",
    ])
    def test_check_date_format_accepts(self, pattern):
        check_date_format(pattern)

    def test_new_date_format(self):
        fmt = new_date_format("yyyy")
        assert isinstance(fmt, SimpleDateFormat)
        assert fmt.pattern == "yyyy"
        assert repr(fmt) == "SimpleDateFormat('yyyy')"

    def test_parse_from_position(self):
        fmt = new_date_format(DATE_FORMAT_STRING)
        value, end = fmt.parse("on 2016-02-29 at noon", 3, UTC_ZONE)
        assert value == datetime(2016, 2, 29, tzinfo=UTC_ZONE)
        assert end == 13
