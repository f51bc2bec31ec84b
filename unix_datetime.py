#!/usr/bin/env python3
"""
unix_datetime.py: Unix timestamp -> proleptic Gregorian civil date/time.

Idea (summary):
- A timestamp is an integer number of seconds relative to 1970-01-01T00:00:00Z.
  It may be negative (instants before the epoch).
- A fixed UTC offset in hours (fractional allowed) shifts the instant before
  conversion; the resulting fields are local wall-clock fields.
- The day count is resolved to a year by walking from 1970 (forward or
  backward), then to a month by walking from January. The weekday is computed
  on its own with Zeller's congruence, so the two can be checked against each
  other.

CLI:
  python3 unix_datetime.py 0
  python3 unix_datetime.py 1700000000 --offset 2 --preset iso
  python3 unix_datetime.py -86400 --format "WW, AA-DD-YY" --fields

Note:
  The offset is converted to whole seconds by truncation toward zero
  (5.5 h -> 19800 s, -0.0001 h -> 0 s). Any finite offset is accepted, even
  one whose product with 3600 overflows a float. Leap seconds are not modelled.
"""

from __future__ import annotations

import fractions
import math

from udt_model import (
    CivilDateTime,
    InvalidCalendarArgumentError,
    Weekday,
    days_in_month,
    days_in_year,
    is_leap_year,
)

# --- Constants ---------------------------------------------------------------

EPOCH_YEAR = 1970
SECONDS_IN_MINUTE = 60
SECONDS_IN_HOUR = 3600
SECONDS_IN_DAY = 86400

YEARS_IN_GREGORIAN_CYCLE = 400
DAYS_IN_GREGORIAN_CYCLE = 146097  # 400 * 365 + 97 leap days


# --- Offsets -----------------------------------------------------------------


def offset_to_seconds(offset_hours: float) -> int:
    """UTC offset in hours -> whole seconds, truncated toward zero."""
    if not math.isfinite(offset_hours):
        raise InvalidCalendarArgumentError(f"UTC offset must be finite (got {offset_hours!r})")
    shift = offset_hours * SECONDS_IN_HOUR
    if math.isinf(shift):
        # finite offset past ~5e304 h: the float product overflows, the rational one cannot
        return int(fractions.Fraction(offset_hours) * SECONDS_IN_HOUR)
    return int(shift)


# --- Weekday (Zeller) --------------------------------------------------------


def weekday_by_date(year: int, month: int, day: int) -> Weekday:
    """
    Day of the week for a 1-based (year, month, day), 0 = Sunday.

    Zeller's congruence: January and February count as months 13 and 14 of
    the previous year. Floor division keeps h in [0, 6] for negative years.
    """
    if not (1 <= month <= 12):
        raise InvalidCalendarArgumentError(f"Month must be 1-12 (got {month})")
    if not (1 <= day <= days_in_month(year, month - 1)):
        raise InvalidCalendarArgumentError(f"Invalid day {day} for {year}-{month:02d}")

    m = month
    y = year
    if m < 3:
        m += 12
        y -= 1

    K = y % 100
    J = y // 100
    h = (day + 13 * (m + 1) // 5 + K + K // 4 + J // 4 + 5 * J) % 7
    # Zeller: h=0 is Saturday
    return Weekday((h - 1 + 7) % 7)


# --- Timestamp -> civil --------------------------------------------------------


def _resolve_year(days: int) -> tuple[int, int]:
    """Walk from EPOCH_YEAR until `days` falls inside one year. Returns (year, day_of_year)."""
    year = EPOCH_YEAR
    if days >= 0:
        # whole 400-year cycles first: every cycle has the same length
        cycles, days = divmod(days, DAYS_IN_GREGORIAN_CYCLE)
        year += cycles * YEARS_IN_GREGORIAN_CYCLE
        while days >= days_in_year(year):
            days -= days_in_year(year)
            year += 1
    else:
        cycles = -days // DAYS_IN_GREGORIAN_CYCLE
        days += cycles * DAYS_IN_GREGORIAN_CYCLE
        year -= cycles * YEARS_IN_GREGORIAN_CYCLE
        while days < 0:
            year -= 1
            days += days_in_year(year)
    return year, days


def _resolve_month(year: int, day_of_year: int) -> tuple[int, int]:
    """0-based day of year -> (0-based month, 0-based day)."""
    month = 0
    while day_of_year >= days_in_month(year, month):
        day_of_year -= days_in_month(year, month)
        month += 1
    return month, day_of_year


def convert(timestamp: int, offset_hours: float = 0.0) -> CivilDateTime:
    """
    Convert a Unix timestamp to civil fields seen at UTC+offset_hours.

    Never fails for an integer timestamp and a finite offset.
    """
    adjusted = int(timestamp) + offset_to_seconds(offset_hours)

    # floor split: the remainder stays in [0, 86400) before the epoch too
    days, secs = divmod(adjusted, SECONDS_IN_DAY)

    year, day_of_year = _resolve_year(days)
    month, day = _resolve_month(year, day_of_year)

    hour, secs = divmod(secs, SECONDS_IN_HOUR)
    minute, second = divmod(secs, SECONDS_IN_MINUTE)

    return CivilDateTime(
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        weekday=weekday_by_date(year, month + 1, day + 1),
        utc_offset=offset_hours,
    )


# --- Civil -> timestamp (inverse) ----------------------------------------------


def _leap_years_through(year: int) -> int:
    """Leap years in (0, year]; differences count leap years in any range."""
    return year // 4 - year // 100 + year // 400


def days_before_year(year: int) -> int:
    """Days from 1970-01-01 to January 1st of `year` (negative before 1970)."""
    return (
        365 * (year - EPOCH_YEAR)
        + _leap_years_through(year - 1)
        - _leap_years_through(EPOCH_YEAR - 1)
    )


def days_from_civil(year: int, month: int, day: int) -> int:
    """Days since the epoch for a 0-based (month, day)."""
    if not (0 <= day < days_in_month(year, month)):
        raise InvalidCalendarArgumentError(f"Invalid day {day} for {year}-{month + 1:02d} (0-based)")
    days = days_before_year(year)
    for m in range(month):
        days += days_in_month(year, m)
    return days + day


def epoch_from_civil(civil: CivilDateTime) -> int:
    """
    Inverse of convert(): back to the UTC timestamp.

    epoch_from_civil(convert(t, off)) == t whenever off*3600 is a whole number.
    """
    local = days_from_civil(civil.year, civil.month, civil.day) * SECONDS_IN_DAY + civil.seconds_of_day()
    return local - offset_to_seconds(civil.utc_offset)


__all__ = [
    "EPOCH_YEAR",
    "SECONDS_IN_DAY",
    "DAYS_IN_GREGORIAN_CYCLE",
    "is_leap_year",
    "days_in_year",
    "days_in_month",
    "offset_to_seconds",
    "weekday_by_date",
    "convert",
    "days_before_year",
    "days_from_civil",
    "epoch_from_civil",
]


if __name__ == "__main__":
    from cli import main

    raise SystemExit(main())
