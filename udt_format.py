"""Format mini-language for unix-datetime.

Compiles a format string into an immutable FormatSpec.

The language is case-insensitive and spaces are removed before scanning.

  W - weekday (WW: full weekday and month names)
  D - day             (DD: zero padding)
  M - numeric month   (MM: zero padding)
  A - alphabetic month
  Y - year            (years are never padded)
  H - hour, I - minute, S - second (any of them shows the time;
      a doubled one turns zero padding on as well)
  O - UTC offset
  _ - 12-hour clock

Zero padding is one shared flag: a single doubled D/M/A/Y/H/I/S anywhere pads
both date and time. Unknown characters are ignored, except that the character
right after a date token may become the delimiter: it is taken after every
date token seen while fewer than three have been collected, so the character
following the second date token wins.

Examples for 1970-01-01T00:00:00Z:

  "DD/MM/YY"                       -> "01/01/1970"
  "MM/DD/YY HH:II:SS _"            -> "01/01/1970 12:00:00 AM"
  "W, DD/MM/YY, HH:II:SS O UTC"    -> "Thu, 01/01/1970 00:00:00 +00 UTC"
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

from udt_model import InvalidFormatSpecError

DAY_TOKEN = "d"
MONTH_TOKEN = "m"
YEAR_TOKEN = "y"
ALPHA_MONTH_TOKEN = "a"
WEEKDAY_TOKEN = "w"
HOUR_TOKEN = "h"
MINUTE_TOKEN = "i"  # 'm' is taken by the month
SECOND_TOKEN = "s"
UTC_OFFSET_TOKEN = "o"
TWELVE_HOUR_TOKEN = "_"

ORDER_TOKENS = frozenset({DAY_TOKEN, MONTH_TOKEN, YEAR_TOKEN, ALPHA_MONTH_TOKEN})
TIME_TOKENS = frozenset({HOUR_TOKEN, MINUTE_TOKEN, SECOND_TOKEN})

DEFAULT_DELIMITER = "/"
DEFAULT_FORMAT = "W, DD/MM/YY, HH:II:SS O UTC"


def _validate_order(order: str) -> None:
    if len(order) != 3 or len(set(order)) != 3:
        raise InvalidFormatSpecError(f"Failed to generate order from format: {order!r} (need 3 distinct tokens)")
    if not set(order) <= ORDER_TOKENS:
        raise InvalidFormatSpecError(f"Unknown order token(s) in {order!r}")
    months = [t for t in order if t in (MONTH_TOKEN, ALPHA_MONTH_TOKEN)]
    if DAY_TOKEN not in order or YEAR_TOKEN not in order or len(months) != 1:
        raise InvalidFormatSpecError(f"Order {order!r} must hold one day, one month (M or A) and one year")


@dataclass(frozen=True)
class FormatSpec:
    """Compiled format: date order, delimiter and rendering flags.

    Defaults describe "Thu, 01/01/1970 00:00:00 +00 UTC" ordered month/day/year.
    """

    delimiter: str = DEFAULT_DELIMITER
    show_weekday: bool = True
    show_time: bool = True
    show_utc_offset: bool = True
    zero_pad: bool = True
    alphabetic_month: bool = False
    twelve_hour: bool = False
    full_weekday_name: bool = False
    full_month_name: bool = False
    order: str = "mdy"

    def __post_init__(self) -> None:
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise InvalidFormatSpecError(f"delimiter must be a single character (got {self.delimiter!r})")
        order = self.order.lower()
        _validate_order(order)
        object.__setattr__(self, "order", order)

    def describe(self) -> str:
        flags = [
            name
            for name in (
                "show_weekday",
                "full_weekday_name",
                "show_time",
                "show_utc_offset",
                "zero_pad",
                "alphabetic_month",
                "twelve_hour",
                "full_month_name",
            )
            if getattr(self, name)
        ]
        return f"order={self.order}  delimiter={self.delimiter!r}  flags={'|'.join(flags) if flags else 'none'}"


def _dedupe(tokens: list[str]) -> str:
    seen: set[str] = set()
    out: list[str] = []
    for t in tokens:
        if t not in seen:
            seen.add(t)
            out.append(t)
    return "".join(out)


@functools.lru_cache(maxsize=128)
def compile_format(text: str) -> FormatSpec:
    """Compile a format string (see module docstring) into a FormatSpec."""
    fmt = text.lower().replace(" ", "")
    n = len(fmt)

    order: list[str] = []
    delimiter = DEFAULT_DELIMITER
    show_weekday = show_time = show_utc_offset = False
    zero_pad = alphabetic_month = twelve_hour = full_names = False

    for i, token in enumerate(fmt):
        nxt = fmt[i + 1] if i + 1 < n else None

        if token == WEEKDAY_TOKEN:
            show_weekday = True
            if nxt == WEEKDAY_TOKEN:
                full_names = True
            continue

        if token in ORDER_TOKENS:
            order.append(token)
            if nxt == token:
                zero_pad = True
            if len(order) < 3 and nxt is not None:
                delimiter = nxt
            if token == ALPHA_MONTH_TOKEN:
                alphabetic_month = True
            continue

        if token in TIME_TOKENS:
            show_time = True
            if nxt == token:
                zero_pad = True
            continue

        if token == TWELVE_HOUR_TOKEN:
            twelve_hour = True
            continue

        if token == UTC_OFFSET_TOKEN:
            show_utc_offset = True

    deduped = _dedupe(order)
    if len(deduped) != 3:
        raise InvalidFormatSpecError(
            f"Failed to generate order from format {text!r}: got {deduped!r}, need day, month and year"
        )

    return FormatSpec(
        delimiter=delimiter,
        show_weekday=show_weekday,
        show_time=show_time,
        show_utc_offset=show_utc_offset,
        zero_pad=zero_pad,
        alphabetic_month=alphabetic_month,
        twelve_hour=twelve_hour,
        full_weekday_name=full_names,
        full_month_name=full_names,
        order=deduped,
    )


DEFAULT_FORMAT_SPEC = compile_format(DEFAULT_FORMAT)

# --- Presets -------------------------------------------------------------------

FORMAT_PRESETS: dict[str, str] = {
    "default": DEFAULT_FORMAT,
    # date only
    "date": "DD/MM/YY",
    "iso": "YY-MM-DD HH:II:SS",
    "us": "MM/DD/YY HH:II:SS _",
    "long": "WW, AA-DD-YY, HH:II:SS _ O UTC",
}


__all__ = [
    "DEFAULT_FORMAT",
    "DEFAULT_FORMAT_SPEC",
    "FORMAT_PRESETS",
    "FormatSpec",
    "compile_format",
]
