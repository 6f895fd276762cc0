"""Pattern-based parsing of date/time text, with a fractional-seconds suffix.

The pattern engine is a collaborator: anything with a ``parse(text, pos,
tz)`` method satisfies DateFormat. SimpleDateFormat is the default one and
understands the usual letters:

    yyyy  year        HH  hour (0-23)     SSS  milliseconds
    MM    month       mm  minute          'x'  quoted literal
    dd    day         ss  second          ''   single quote

Parsing is strict: a field out of range (month 13, 30 February) is a
mismatch. Mismatches return None and are logged at DEBUG.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, tzinfo
from typing import Protocol, Union

from temporal_primitives.constants import DEFAULT_ZONE, UTC_ZONE
from temporal_primitives.types import PrecisionTime

logger = logging.getLogger(__name__)

_FIELDS = {
    "y": "year",
    "M": "month",
    "d": "day",
    "H": "hour",
    "m": "minute",
    "s": "second",
    "S": "millisecond",
}

# Fields absent from a pattern take their value at the epoch.
_DEFAULTS = {
    "year": 1970,
    "month": 1,
    "day": 1,
    "hour": 0,
    "minute": 0,
    "second": 0,
    "millisecond": 0,
}

_TOKEN = re.compile(r"'((?:[^']|'')*)'|([A-Za-z])\2*|([^'])|(')")
_DIGITS = re.compile(r"[0-9]+")


class DateFormat(Protocol):
    """Parses a prefix of text starting at pos.

    Returns the parsed instant as a UTC-aware datetime together with the
    index just past the matched text, or None if the text does not match.
    Wall-clock fields are read in zone tz.
    """

    def parse(
        self, text: str, pos: int, tz: tzinfo
    ) -> tuple[datetime, int] | None: ...


# ---------------------------------------------------------------------------
# SimpleDateFormat
# ---------------------------------------------------------------------------


def _tokenize(pattern: str) -> list[tuple[str | None, str]]:
    """Split a pattern into (field, width) and (None, literal) tokens."""
    tokens: list[tuple[str | None, str]] = []
    for m in _TOKEN.finditer(pattern):
        quoted, letter, char, stray = m.groups()
        if stray is not None:
            raise ValueError(f"Unterminated quote in pattern {pattern!r}")
        if quoted is not None:
            tokens.append((None, quoted.replace("''", "'") or "'"))
        elif letter is not None:
            if letter not in _FIELDS:
                raise ValueError(
                    f"Illegal pattern character {letter!r} in {pattern!r}"
                )
            tokens.append((_FIELDS[letter], m.group(0)))
        else:
            tokens.append((None, char))
    return tokens


def _compile(pattern: str) -> tuple[list[str], re.Pattern[str]]:
    tokens = _tokenize(pattern)
    fields: list[str] = []
    parts: list[str] = []
    for i, (field, text) in enumerate(tokens):
        if field is None:
            parts.append(re.escape(text))
            continue
        fields.append(field)
        abutting = i + 1 < len(tokens) and tokens[i + 1][0] is not None
        # A field directly followed by another field has a fixed width.
        parts.append(f"([0-9]{{{len(text)}}})" if abutting else "([0-9]+)")
    return fields, re.compile("".join(parts))


class SimpleDateFormat:
    """DateFormat for SimpleDateFormat-style patterns.

    Raises ValueError at construction for pattern letters it does not
    support, so a bad pattern fails early rather than at parse time.
    """

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self._fields, self._regex = _compile(pattern)

    def __repr__(self) -> str:
        return f"SimpleDateFormat({self.pattern!r})"

    def parse(
        self, text: str, pos: int, tz: tzinfo
    ) -> tuple[datetime, int] | None:
        m = self._regex.match(text, pos)
        if m is None:
            return None
        values = dict(_DEFAULTS)
        for field, digits in zip(self._fields, m.groups()):
            values[field] = int(digits)
        millis = values.pop("millisecond")
        if millis > 999:
            return None
        try:
            local = datetime(
                microsecond=millis * 1000, tzinfo=tz, **values
            )
            return local.astimezone(UTC_ZONE), m.end()
        except (ValueError, OverflowError, OSError):
            return None


def new_date_format(pattern: str) -> SimpleDateFormat:
    """A fresh DateFormat for pattern."""
    return SimpleDateFormat(pattern)


def check_date_format(pattern: str) -> None:
    """Raise ValueError if pattern is not a valid date format pattern."""
    new_date_format(pattern)


# ---------------------------------------------------------------------------
# Parsing entry points
# ---------------------------------------------------------------------------


def _as_format(fmt: Union[str, DateFormat]) -> DateFormat:
    return new_date_format(fmt) if isinstance(fmt, str) else fmt


def parse_date_format(
    s: str, fmt: Union[str, DateFormat], tz: tzinfo | None = None
) -> datetime | None:
    """Parse s with fmt, requiring the whole string to match.

    Returns a UTC-aware datetime, or None if s does not match.
    """
    date_format = _as_format(fmt)
    parsed = date_format.parse(s, 0, tz or DEFAULT_ZONE)
    if parsed is None:
        logger.debug("%r does not match %r", s, date_format)
        return None
    value, end = parsed
    if end != len(s):
        logger.debug("%r has trailing text %r after %r", s, s[end:], date_format)
        return None
    return value


def parse_precision_date_time_literal(
    s: str,
    fmt: Union[str, DateFormat],
    tz: tzinfo | None = None,
    max_precision: int = 3,
) -> PrecisionTime | None:
    """Parse a date/time literal that may end in fractional seconds.

    The text after the pattern match must be empty or '.' followed by
    digits. At most max_precision digits are kept (all of them when
    max_precision is negative); the first three of those are added to the
    value as milliseconds.

    >>> p = parse_precision_date_time_literal(
    ...     "1234-04-12 01:23:45.06789", "yyyy-MM-dd HH:mm:ss", UTC_ZONE, -1)
    >>> p.fraction, p.precision, p.value.microsecond
    ('06789', 5, 67000)
    """
    date_format = _as_format(fmt)
    parsed = date_format.parse(s, 0, tz or DEFAULT_ZONE)
    if parsed is None:
        logger.debug("%r does not match %r", s, date_format)
        return None
    value, pos = parsed

    fraction = ""
    precision = 0
    if pos < len(s):
        rest = s[pos:]
        if not rest.startswith("."):
            logger.debug("%r has trailing text %r after %r", s, rest, date_format)
            return None
        digits = rest[1:]
        if digits and not _DIGITS.fullmatch(digits):
            logger.debug("%r has a non-numeric fraction %r", s, digits)
            return None
        precision = len(digits)
        if max_precision >= 0:
            precision = min(max_precision, precision)
            digits = digits[:precision]
        fraction = digits
        value += timedelta(milliseconds=int(fraction[:3].ljust(3, "0")))

    return PrecisionTime(value, fraction, precision)
