"""Tests for DATE, TIME and TIMESTAMP literal formatting and parsing.

Test data loaded from: data/fixtures/scenarios/literals.json
"""

from __future__ import annotations

import pytest

from conftest import load_scenarios, unix_date

from temporal_primitives.literals import (
    date_string_to_unix_date,
    digit_count,
    number,
    power_x,
    time_string_to_unix_date,
    timestamp_string_to_unix_date,
    unix_date_to_string,
    unix_time_to_string,
    unix_timestamp_to_string,
)
from temporal_primitives.types import DateTimeParseError

_data = load_scenarios("literals")


class TestDateLiterals:
    """'YYYY-MM-DD' <-> days since epoch."""

    @pytest.mark.parametrize("spec", _data["dates"], ids=lambda s: s["id"])
    def test_to_string(self, spec):
        assert unix_date_to_string(spec["unix_date"]) == spec["text"]

    @pytest.mark.parametrize("spec", _data["dates"], ids=lambda s: s["id"])
    def test_from_string(self, spec):
        assert date_string_to_unix_date(spec["text"]) == spec["unix_date"]

    @pytest.mark.parametrize("spec", _data["lenient_dates"], ids=lambda s: s["id"])
    def test_missing_and_loose_components(self, spec):
        assert date_string_to_unix_date(spec["text"]) == unix_date(spec["expected"])

    @pytest.mark.parametrize("spec", _data["bad_dates"], ids=lambda s: s["id"])
    def test_non_integer_component(self, spec):
        with pytest.raises(DateTimeParseError) as exc_info:
            date_string_to_unix_date(spec["text"])
        assert exc_info.value.component == spec["component"]
        assert exc_info.value.literal == spec["text"]

    def test_parse_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            date_string_to_unix_date("2016-x-01")

    def test_repeated_round_trip_is_stable(self):
        text = "1500-04-30"
        for _ in range(3):
            text = unix_date_to_string(date_string_to_unix_date(text))
        assert text == "1500-04-30"


class TestTimeLiterals:
    """'HH:MM:SS[.fff]' <-> milliseconds since midnight."""

    @pytest.mark.parametrize("spec", _data["times"], ids=lambda s: s["id"])
    def test_from_string(self, spec):
        assert time_string_to_unix_date(spec["text"]) == spec["millis"]

    @pytest.mark.parametrize(
        "spec",
        [s for s in _data["times"] if "formatted" in s],
        ids=lambda s: s["id"],
    )
    def test_to_string(self, spec):
        assert unix_time_to_string(spec["millis"], spec["precision"]) == spec["formatted"]

    @pytest.mark.parametrize("spec", _data["times_from"], ids=lambda s: s["id"])
    def test_from_start_index(self, spec):
        assert time_string_to_unix_date(spec["text"], spec["start"]) == spec["millis"]

    @pytest.mark.parametrize("spec", _data["time_format"], ids=lambda s: s["id"])
    def test_fraction_digits(self, spec):
        assert unix_time_to_string(spec["millis"], spec["precision"]) == spec["expected"]

    def test_default_precision_omits_fraction(self):
        assert unix_time_to_string(45296789) == "12:34:56"

    def test_non_integer_hour(self):
        with pytest.raises(DateTimeParseError) as exc_info:
            time_string_to_unix_date("ab:00:00")
        assert exc_info.value.component == "ab"


class TestTimestampLiterals:
    """'YYYY-MM-DD HH:MM:SS[.fff]' <-> milliseconds since epoch."""

    @pytest.mark.parametrize("spec", _data["timestamps"], ids=lambda s: s["id"])
    def test_to_string(self, spec):
        assert unix_timestamp_to_string(spec["millis"], spec["precision"]) == spec["text"]

    @pytest.mark.parametrize("spec", _data["timestamps"], ids=lambda s: s["id"])
    def test_from_string(self, spec):
        assert timestamp_string_to_unix_date(spec["text"]) == spec["millis"]

    @pytest.mark.parametrize("spec", _data["lenient_timestamps"], ids=lambda s: s["id"])
    def test_lenient(self, spec):
        assert timestamp_string_to_unix_date(spec["text"]) == spec["millis"]

    @pytest.mark.parametrize("spec", _data["bad_timestamps"], ids=lambda s: s["id"])
    def test_non_integer_component(self, spec):
        with pytest.raises(DateTimeParseError) as exc_info:
            timestamp_string_to_unix_date(spec["text"])
        assert exc_info.value.component == spec["component"]

    def test_uses_space_not_iso_t(self):
        assert unix_timestamp_to_string(0) == "1970-01-01 00:00:00"


class TestNumberHelpers:

    @pytest.mark.parametrize("v, expected", _data["digit_count"])
    def test_digit_count(self, v, expected):
        assert digit_count(v) == expected

    @pytest.mark.parametrize("v, n, expected", _data["number"])
    def test_number(self, v, n, expected):
        assert number(v, n) == expected

    @pytest.mark.parametrize("a, b, expected", _data["power_x"])
    def test_power_x(self, a, b, expected):
        assert power_x(a, b) == expected
