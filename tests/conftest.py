"""Shared test fixtures and data loading for temporal-primitives.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Expected dates are written as ISO text in the fixtures and turned into
integers here with the standard datetime module, which gives an
independent check on the library's own calendar arithmetic (years 1..9999).
Years outside that range are written as [year, month, day] lists.
"""

from __future__ import annotations

import json
from datetime import date, datetime, timedelta, tzinfo
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


_reference = _load_json(FIXTURES_DIR / "reference.json")


# ---------------------------------------------------------------------------
# Reference constants derived from reference.json
# ---------------------------------------------------------------------------
EPOCH = date.fromisoformat(_reference["epoch"])
EPOCH_DT = datetime.fromisoformat(_reference["epoch"] + "T00:00:00")
EPOCH_JULIAN = _reference["epoch_julian"]
MILLIS_PER_DAY = _reference["millis_per_day"]

# Named timestamps:  TIMESTAMPS["y2k"] → 951696000000
TIMESTAMPS: dict[str, int] = _reference["timestamps"]

_ONE_MILLI = timedelta(milliseconds=1)


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def unix_date(iso: str) -> int:
    """Days since epoch of an ISO date.

    >>> unix_date("1970-01-02")
    1
    """
    return (date.fromisoformat(iso) - EPOCH).days


def unix_ts(iso: str) -> int:
    """Milliseconds since epoch of a naive ISO datetime ('T' or space).

    >>> unix_ts("1970-01-01 00:00:01")
    1000
    """
    return (datetime.fromisoformat(iso) - EPOCH_DT) // _ONE_MILLI


def zone(offset: str | None) -> tzinfo | None:
    """Fixed-offset tzinfo from "+05:00" style text; None passes through."""
    if offset is None:
        return None
    return datetime.fromisoformat("1970-01-01T00:00:00" + offset).tzinfo


def unit_range(name: str):
    """TimeUnitRange member by name."""
    from temporal_primitives.units import TimeUnitRange

    return TimeUnitRange[name]


def time_unit(name: str):
    """TimeUnit member by name."""
    from temporal_primitives.units import TimeUnit

    return TimeUnit[name]


def ymd_date(ymd: list[int]) -> int:
    """Days since epoch of a [year, month, day] list, any year."""
    from temporal_primitives.calendar import ymd_to_unix_date

    return ymd_to_unix_date(*ymd)


# ---------------------------------------------------------------------------
# Scenario loader
# ---------------------------------------------------------------------------
def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


def scenario_names() -> list[str]:
    """Names of every scenario file, without the .json suffix."""
    return sorted(p.stem for p in SCENARIOS_DIR.glob("*.json"))


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def utc():
    from temporal_primitives.constants import UTC_ZONE

    return UTC_ZONE


@pytest.fixture
def timestamp_format():
    """SimpleDateFormat for 'yyyy-MM-dd HH:mm:ss'."""
    from temporal_primitives.constants import TIMESTAMP_FORMAT_STRING
    from temporal_primitives.patterns import new_date_format

    return new_date_format(TIMESTAMP_FORMAT_STRING)
