#!/usr/bin/env python
"""Visual verification report for temporal-primitives.

Run:  python scripts/verify.py

Produces a formatted report showing:
  1. Reference data (epoch, Julian day, named timestamps)
  2. Layer 1 tests (Julian day numbers, leap years)  -- input/output tables
  3. Layer 2 tests (EXTRACT, FLOOR/CEIL) -- tables + ASCII ISO-week months
  4. Layer 3 tests (DATE/TIME/TIMESTAMP and INTERVAL literals)
  5. Layer 4 tests (add_months, subtract_months)
"""

from __future__ import annotations

import json
import sys
from datetime import date, datetime
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths and data loading
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
FIXTURES = ROOT / "data" / "fixtures"
SCENARIOS = FIXTURES / "scenarios"

sys.path.insert(0, str(ROOT / "src"))

from temporal_primitives.calendar import (
    is_leap_year,
    julian_to_string,
    ymd_to_julian,
    ymd_to_unix_date,
)
from temporal_primitives.debug import show_month
from temporal_primitives.extract import (
    unix_date_ceil,
    unix_date_extract,
    unix_date_floor,
)
from temporal_primitives.literals import (
    date_string_to_unix_date,
    interval_day_time_to_string,
    interval_year_month_to_string,
    timestamp_string_to_unix_date,
    unix_date_to_string,
    unix_timestamp_to_string,
)
from temporal_primitives.months import add_months, subtract_months
from temporal_primitives.units import TimeUnitRange


def _load(path: Path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


_ref = _load(FIXTURES / "reference.json")

EPOCH = date.fromisoformat(_ref["epoch"])

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
WIDTH = 90


def banner(title: str):
    print()
    print("=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def heading(title: str):
    print()
    print(f"  {title}")
    print(f"  {'-' * (len(title) + 2)}")


def table(headers: list[str], rows: list[list[str]], indent: int = 4):
    """Print a formatted table with auto-sized columns."""
    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    pad = " " * indent
    fmt = pad + "  ".join(f"{{:<{w}}}" for w in col_widths)
    sep = pad + "  ".join("-" * w for w in col_widths)

    print(fmt.format(*headers))
    print(sep)
    for row in rows:
        padded = row + [""] * (len(headers) - len(row))
        print(fmt.format(*padded))


def _ok(result, expected) -> str:
    return "OK" if result == expected else "FAIL"


def _unix_date(iso: str) -> int:
    return (date.fromisoformat(iso) - EPOCH).days


# ---------------------------------------------------------------------------
# Section 1: Reference Data
# ---------------------------------------------------------------------------
def section_reference():
    banner("REFERENCE DATA")
    print(f"\n    Epoch:          {EPOCH.strftime('%A %Y-%m-%d')}")
    print(f"    Epoch Julian:   {_ref['epoch_julian']}")
    print(f"    Millis/day:     {_ref['millis_per_day']}")

    heading("Named Timestamps")
    rows = []
    for name, ts in _ref["timestamps"].items():
        rows.append([name, str(ts), unix_timestamp_to_string(ts)])
    table(["Name", "Millis", "Literal"], rows)

    heading("Quick Formulas")
    print("    date      = julian - 2440588")
    print("    timestamp = date * 86400000 + millis_of_day")
    print("    Example: 2000-02-28 = 11015 days = 951696000000 ms")


# ---------------------------------------------------------------------------
# Section 2: Layer 1  -- Julian Day Numbers
# ---------------------------------------------------------------------------
def section_julian():
    banner("LAYER 1: JULIAN DAY NUMBERS")

    data = _load(SCENARIOS / "julian.json")

    heading("Function: ymd_to_julian(year, month, day) -> int")
    rows = []
    for s in data["ymd_to_julian"]:
        result = ymd_to_julian(*s["ymd"])
        rows.append([
            s["id"], julian_to_string(s["expected"]),
            str(s["expected"]), str(result), _ok(result, s["expected"]),
        ])
    table(["ID", "Date", "Expected", "Actual", ""], rows)

    heading("Function: ymd_to_unix_date(year, month, day) -> int")
    rows = []
    for s in data["ymd_to_unix_date"]:
        result = ymd_to_unix_date(*s["ymd"])
        rows.append([
            s["id"], "-".join(str(v) for v in s["ymd"]),
            str(s["expected"]), str(result), _ok(result, s["expected"]),
        ])
    table(["ID", "Y-M-D", "Expected", "Actual", ""], rows)

    heading("Function: is_leap_year(year) -> bool")
    rows = []
    for s in data["leap_years"]:
        result = is_leap_year(s["year"])
        rows.append([str(s["year"]), str(s["expected"]), _ok(result, s["expected"])])
    table(["Year", "Leap?", ""], rows)


# ---------------------------------------------------------------------------
# Section 3: Layer 2  -- EXTRACT and FLOOR/CEIL
# ---------------------------------------------------------------------------
def section_extract():
    banner("LAYER 2: EXTRACT")

    data = _load(SCENARIOS / "extract.json")

    heading("Function: unix_date_extract(range, date) -> int")
    rows = []
    for s in data["date"]:
        d = ymd_to_unix_date(*s["ymd"])
        result = unix_date_extract(TimeUnitRange[s["range"]], d)
        rows.append([
            s["id"], s["range"], unix_date_to_string(d),
            str(s["expected"]), str(result), _ok(result, s["expected"]),
        ])
    table(["ID", "Range", "Date", "Expected", "Actual", ""], rows)

    heading("ISO weeks around New Year")
    print("    Days before week 1 belong to the last week of the previous ISO year.\n")
    for year, month in [(2004, 12), (2005, 1), (2021, 1)]:
        show_month(year, month)
        print()


def section_floor_ceil():
    banner("LAYER 2: FLOOR / CEIL")

    data = _load(SCENARIOS / "floor_ceil.json")

    heading("Function: unix_date_floor / unix_date_ceil(range, date) -> int")
    print("    A date already on a period boundary is its own ceiling.\n")
    rows = []
    for s in data["date"]:
        r = TimeUnitRange[s["range"]]
        d = _unix_date(s["date"])
        floor = unix_date_to_string(unix_date_floor(r, d))
        ceil = unix_date_to_string(unix_date_ceil(r, d))
        match = _ok((floor, ceil), (s["floor"], s["ceil"]))
        rows.append([s["id"], s["range"], s["date"], floor, ceil, match])
    table(["ID", "Range", "Date", "Floor", "Ceil", ""], rows)


# ---------------------------------------------------------------------------
# Section 4: Layer 3  -- Literals
# ---------------------------------------------------------------------------
def section_literals():
    banner("LAYER 3: LITERALS")

    data = _load(SCENARIOS / "literals.json")

    heading("Function: date_string_to_unix_date(text) -> int")
    rows = []
    for s in data["dates"] + data["lenient_dates"]:
        expected = s["unix_date"] if "unix_date" in s else _unix_date(s["expected"])
        result = date_string_to_unix_date(s["text"])
        rows.append([
            s["id"], repr(s["text"]), str(expected), str(result),
            unix_date_to_string(result), _ok(result, expected),
        ])
    table(["ID", "Text", "Expected", "Actual", "Formatted", ""], rows)

    heading("Function: timestamp_string_to_unix_date(text) -> int")
    rows = []
    for s in data["timestamps"] + data["lenient_timestamps"]:
        result = timestamp_string_to_unix_date(s["text"])
        rows.append([
            s["id"], repr(s["text"]), str(s["millis"]), str(result),
            _ok(result, s["millis"]),
        ])
    table(["ID", "Text", "Expected", "Actual", ""], rows)

    intervals = _load(SCENARIOS / "intervals.json")

    heading("Function: interval_year_month_to_string(months, range) -> str")
    rows = []
    for s in intervals["year_month"]:
        result = interval_year_month_to_string(s["months"], TimeUnitRange[s["range"]])
        rows.append([
            s["id"], str(s["months"]), s["range"], result,
            _ok(result, s["expected"]), s.get("notes", ""),
        ])
    table(["ID", "Months", "Range", "Result", "", "Notes"], rows)

    heading("Function: interval_day_time_to_string(millis, range, scale) -> str")
    rows = []
    for s in intervals["day_time"]:
        result = interval_day_time_to_string(
            s["millis"], TimeUnitRange[s["range"]], s["scale"]
        )
        rows.append([
            s["id"], str(s["millis"]), s["range"], str(s["scale"]), result,
            _ok(result, s["expected"]),
        ])
    table(["ID", "Millis", "Range", "Scale", "Result", ""], rows)


# ---------------------------------------------------------------------------
# Section 5: Layer 4  -- Month Arithmetic
# ---------------------------------------------------------------------------
def section_months():
    banner("LAYER 4: MONTH ARITHMETIC")

    data = _load(SCENARIOS / "months.json")

    heading("Function: add_months(date, months) -> int")
    print("    A day the target month lacks rolls to the 1st of the month after.\n")
    rows = []
    for s in data["add_months"]:
        result = unix_date_to_string(add_months(_unix_date(s["date"]), s["months"]))
        rows.append([
            s["id"], s["date"], str(s["months"]), result,
            _ok(result, s["expected"]), s.get("notes", ""),
        ])
    table(["ID", "Date", "Months", "Result", "", "Notes"], rows)

    heading("Function: subtract_months(date0, date1) -> int")
    rows = []
    for s in data["subtract_months"]:
        result = subtract_months(_unix_date(s["date0"]), _unix_date(s["date1"]))
        rows.append([
            s["id"], s["date0"], s["date1"], str(s["expected"]), str(result),
            _ok(result, s["expected"]),
        ])
    table(["ID", "Date0", "Date1", "Expected", "Actual", ""], rows)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    banner("TEMPORAL-PRIMITIVES   --  VISUAL VERIFICATION REPORT")
    print(f"    Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    print(f"    Fixture data: {FIXTURES.relative_to(ROOT)}/")

    section_reference()
    section_julian()
    section_extract()
    section_floor_ceil()
    section_literals()
    section_months()

    banner("END OF REPORT")
    print()


if __name__ == "__main__":
    main()
