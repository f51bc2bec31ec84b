"""Renderer: CivilDateTime + FormatSpec -> text.

Output layout (each block optional except the date):

  [weekday, ][date block] [time block] [AM|PM] [+offset UTC]

The date block emits the three order entries each followed by the format's
delimiter; the last delimiter is replaced by a space. Trailing whitespace of
the whole text is dropped.
"""

from __future__ import annotations

from udt_format import ALPHA_MONTH_TOKEN, DAY_TOKEN, MONTH_TOKEN, YEAR_TOKEN, FormatSpec
from udt_model import CivilDateTime, InvalidFormatSpecError, month_name, weekday_name


def pad_zeros(value: int | float) -> str:
    """Prefix a single '0' to values in [0, 10); anything else is left alone."""
    return ("0" if 0 <= value < 10 else "") + _number_text(value)


def _number_text(value: int | float) -> str:
    # 2.0 -> "2", 5.5 -> "5.5"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_offset(offset: float, zero_pad: bool) -> str:
    sign = "+" if offset >= 0 else ""
    text = pad_zeros(offset) if zero_pad else _number_text(offset)
    return f"{sign}{text} UTC"


def _field(value: int, zero_pad: bool) -> str:
    return pad_zeros(value) if zero_pad else str(value)


def _date_entry(civil: CivilDateTime, token: str, spec: FormatSpec) -> str:
    if token == DAY_TOKEN:
        return _field(civil.display_day, spec.zero_pad)
    if token == MONTH_TOKEN:
        return _field(civil.display_month, spec.zero_pad)
    if token == ALPHA_MONTH_TOKEN:
        return month_name(civil.month, full=spec.full_month_name)
    if token == YEAR_TOKEN:
        return str(civil.year)
    raise InvalidFormatSpecError(f"Unknown order token: {token!r}")


def render(civil: CivilDateTime, spec: FormatSpec) -> str:
    parts: list[str] = []

    if spec.show_weekday:
        parts.append(weekday_name(civil.weekday, full=spec.full_weekday_name) + ", ")

    date = "".join(_date_entry(civil, token, spec) + spec.delimiter for token in spec.order)
    parts.append(date[:-1] + " ")

    if spec.show_time:
        hour = civil.hour
        if spec.twelve_hour:
            hour = civil.hour % 12 or 12
        parts.append(
            f"{_field(hour, spec.zero_pad)}:{_field(civil.minute, spec.zero_pad)}:{_field(civil.second, spec.zero_pad)} "
        )
        if spec.twelve_hour:
            parts.append("AM " if civil.hour < 12 else "PM ")

    if spec.show_utc_offset:
        parts.append(format_offset(civil.utc_offset, spec.zero_pad))

    return "".join(parts).rstrip()


__all__ = ["pad_zeros", "format_offset", "render"]
