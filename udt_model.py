"""unix-datetime core data model (format-agnostic).

Name tables, Gregorian month lengths, the Weekday enum, the CivilDateTime
snapshot and the error types shared by the converter, the format compiler
and the renderer. No calendar walking lives here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

#: Length of an abbreviated weekday/month name.
SHORT_NAME_LENGTH = 3


class DateTimeError(ValueError):
    pass


class InvalidTimestampError(DateTimeError):
    pass


class InvalidFormatSpecError(DateTimeError):
    pass


class InvalidCalendarArgumentError(DateTimeError):
    pass


class DateTimeZeroDivisionError(DateTimeError, ZeroDivisionError):
    pass


class Weekday(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


# indexed by ordinal
WEEKDAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


#: Gregorian month-to-days for a common year.
CALENDAR_YEAR: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian leap rule (year 0 and negative years included)."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    """Number of days of a 0-based month (0 = January)."""
    if not (0 <= month <= 11):
        raise InvalidCalendarArgumentError(f"Invalid month (must be 0-11): {month}")
    if month == 1 and is_leap_year(year):
        return 29
    return CALENDAR_YEAR[month]


def weekday_name(weekday: int, full: bool = False) -> str:
    """English weekday name for ordinal 0..6 (0 = Sunday), full or 3-char."""
    if not (0 <= int(weekday) < len(WEEKDAY_NAMES)):
        raise InvalidCalendarArgumentError(f"Invalid day of the week: {weekday}")
    name = WEEKDAY_NAMES[int(weekday)]
    return name if full else name[:SHORT_NAME_LENGTH]


def month_name(month: int, full: bool = False) -> str:
    """English month name for a 0-based month, full or 3-char."""
    if not (0 <= int(month) < len(MONTH_NAMES)):
        raise InvalidCalendarArgumentError(f"Invalid month (must be 0-11): {month}")
    name = MONTH_NAMES[int(month)]
    return name if full else name[:SHORT_NAME_LENGTH]


@dataclass(frozen=True)
class CivilDateTime:
    """Wall-clock fields of one instant, seen at ``utc_offset`` hours.

    ``month`` and ``day`` are 0-based (0 = January, 0 = first day of month);
    use ``display_month``/``display_day`` for the 1-based values.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday: Weekday
    utc_offset: float = 0.0

    def __post_init__(self) -> None:
        if not (0 <= self.month <= 11):
            raise InvalidCalendarArgumentError(f"Invalid month (must be 0-11): {self.month}")
        if not (0 <= self.day < days_in_month(self.year, self.month)):
            raise InvalidCalendarArgumentError(
                f"Invalid day {self.day} for {self.year}-{self.month + 1:02d} (0-based)"
            )
        if not (0 <= self.hour <= 23):
            raise InvalidCalendarArgumentError(f"Invalid hour: {self.hour}")
        if not (0 <= self.minute <= 59):
            raise InvalidCalendarArgumentError(f"Invalid minute: {self.minute}")
        if not (0 <= self.second <= 59):
            raise InvalidCalendarArgumentError(f"Invalid second: {self.second}")
        if not (0 <= int(self.weekday) <= 6):
            raise InvalidCalendarArgumentError(f"Invalid day of the week: {self.weekday}")
        object.__setattr__(self, "weekday", Weekday(self.weekday))

    @property
    def display_month(self) -> int:
        return self.month + 1

    @property
    def display_day(self) -> int:
        return self.day + 1

    def seconds_of_day(self) -> int:
        return self.hour * 3600 + self.minute * 60 + self.second


__all__ = [
    "SHORT_NAME_LENGTH",
    "DateTimeError",
    "InvalidTimestampError",
    "InvalidFormatSpecError",
    "InvalidCalendarArgumentError",
    "DateTimeZeroDivisionError",
    "Weekday",
    "WEEKDAY_NAMES",
    "MONTH_NAMES",
    "CALENDAR_YEAR",
    "is_leap_year",
    "days_in_year",
    "days_in_month",
    "weekday_name",
    "month_name",
    "CivilDateTime",
]
