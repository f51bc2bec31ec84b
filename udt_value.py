"""DateTime value: a Unix timestamp plus the civil fields it resolves to.

Comparison and arithmetic only look at the raw timestamps; the UTC offset
affects rendering and the civil fields, never ordering.
"""

from __future__ import annotations

import functools
import re

from udt_format import DEFAULT_FORMAT, FormatSpec, compile_format
from udt_model import (
    CivilDateTime,
    DateTimeZeroDivisionError,
    InvalidTimestampError,
    Weekday,
    weekday_name,
)
from udt_render import render
from unix_datetime import convert

TIMESTAMP_MIN = -(1 << 63)
TIMESTAMP_MAX = (1 << 63) - 1

_TIMESTAMP_RE = re.compile(r"[+-]?[0-9]+")


def parse_timestamp(text: str) -> int:
    """Signed base-10 integer text -> int, limited to the 64-bit range."""
    if not isinstance(text, str) or not _TIMESTAMP_RE.fullmatch(text.strip()):
        raise InvalidTimestampError(f"Your unix timestamp is invalid: {text!r}")
    return _check_range(int(text.strip()))


def _check_range(value: int) -> int:
    if not (TIMESTAMP_MIN <= value <= TIMESTAMP_MAX):
        raise InvalidTimestampError(f"Unix timestamp out of 64-bit range: {value}")
    return value


def _trunc_div(a: int, b: int) -> int:
    # integer division rounding toward zero
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


@functools.total_ordering
class DateTime:
    """A point in time built from a decimal timestamp string.

    >>> DateTime("0").to_string("DD/MM/YY")
    '01/01/1970'
    """

    __slots__ = ("_text", "_timestamp", "_civil")

    def __init__(self, timestamp: str, utc_offset: float = 0.0) -> None:
        self._timestamp = parse_timestamp(timestamp)
        self._text = timestamp
        self._civil = convert(self._timestamp, utc_offset)

    @classmethod
    def from_timestamp(cls, timestamp: int, utc_offset: float = 0.0) -> DateTime:
        return cls(str(_check_range(int(timestamp))), utc_offset)

    # --- rendering -------------------------------------------------------

    def to_string(self, fmt: str | FormatSpec = DEFAULT_FORMAT) -> str:
        spec = fmt if isinstance(fmt, FormatSpec) else compile_format(fmt)
        return render(self._civil, spec)

    def to_unix(self) -> str:
        """The timestamp text exactly as given to the constructor."""
        return self._text

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"DateTime({self._text!r}, utc_offset={self.utc_offset!r})"

    # --- accessors -------------------------------------------------------

    @property
    def timestamp(self) -> int:
        return self._timestamp

    @property
    def civil(self) -> CivilDateTime:
        return self._civil

    @property
    def year(self) -> int:
        return self._civil.year

    @property
    def month(self) -> int:
        return self._civil.month

    @property
    def day(self) -> int:
        return self._civil.day

    @property
    def hour(self) -> int:
        return self._civil.hour

    @property
    def minute(self) -> int:
        return self._civil.minute

    @property
    def second(self) -> int:
        return self._civil.second

    @property
    def weekday(self) -> Weekday:
        return self._civil.weekday

    def weekday_name(self, full: bool = False) -> str:
        return weekday_name(self._civil.weekday, full=full)

    @property
    def utc_offset(self) -> float:
        return self._civil.utc_offset

    # --- comparison --------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._timestamp == other._timestamp

    def __lt__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._timestamp < other._timestamp

    def __hash__(self) -> int:
        return hash(self._timestamp)

    # --- arithmetic (raw timestamps, result at offset 0) ----------------------

    def __add__(self, other: DateTime) -> DateTime:
        if not isinstance(other, DateTime):
            return NotImplemented
        return DateTime.from_timestamp(self._timestamp + other._timestamp)

    def __sub__(self, other: DateTime) -> DateTime:
        if not isinstance(other, DateTime):
            return NotImplemented
        return DateTime.from_timestamp(self._timestamp - other._timestamp)

    def __mul__(self, other: DateTime) -> DateTime:
        if not isinstance(other, DateTime):
            return NotImplemented
        return DateTime.from_timestamp(self._timestamp * other._timestamp)

    def __truediv__(self, other: DateTime) -> DateTime:
        if not isinstance(other, DateTime):
            return NotImplemented
        if other._timestamp == 0:
            raise DateTimeZeroDivisionError(f"Division by a zero timestamp ({self!r} / {other!r})")
        return DateTime.from_timestamp(_trunc_div(self._timestamp, other._timestamp))


__all__ = ["TIMESTAMP_MIN", "TIMESTAMP_MAX", "parse_timestamp", "DateTime"]
