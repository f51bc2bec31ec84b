from __future__ import annotations

import pytest

import unix_datetime as udt
from udt_format import DEFAULT_FORMAT_SPEC, FORMAT_PRESETS, FormatSpec, compile_format
from udt_model import InvalidCalendarArgumentError, month_name, weekday_name
from udt_render import format_offset, pad_zeros, render


def _render(ts: int, fmt: str, offset: float = 0.0) -> str:
    return render(udt.convert(ts, offset), compile_format(fmt))


def test_plain_date_at_epoch():
    assert _render(0, "DD/MM/YY") == "01/01/1970"


def test_default_format_at_epoch():
    assert render(udt.convert(0), DEFAULT_FORMAT_SPEC) == "Thu, 01/01/1970 00:00:00 +00 UTC"


def test_default_format_with_offset():
    out = render(udt.convert(1700000000, 2.0), DEFAULT_FORMAT_SPEC)
    assert out == "Wed, 15/11/2023 00:13:20 +02 UTC"
    assert out.endswith("+02 UTC")


def test_shared_zero_padding_from_doubled_hour():
    assert _render(0, "D/M/Y HH:II:SS") == "01/01/1970 00:00:00"
    assert _render(0, "D/M/Y H:I:S") == "1/1/1970 0:0:0"


def test_years_are_never_padded():
    c = udt.convert(udt.days_before_year(5) * udt.SECONDS_IN_DAY)
    assert render(c, compile_format("DD/MM/YY")) == "01/01/5"


def test_negative_year():
    c = udt.convert(udt.days_before_year(-1) * udt.SECONDS_IN_DAY)
    assert render(c, compile_format("DD/MM/YY")) == "01/01/-1"


def test_twelve_hour_clock():
    assert _render(0, "MM/DD/YY HH:II:SS _") == "01/01/1970 12:00:00 AM"
    # 13:05:09
    assert _render(47109, "MM/DD/YY HH:II:SS _") == "01/01/1970 01:05:09 PM"
    assert _render(47109, "M/D/Y H:I:S _") == "1/1/1970 1:5:9 PM"
    assert _render(43200, "M/D/Y H:I:S _") == "1/1/1970 12:0:0 PM"


def test_alphabetic_month_short_and_full():
    assert _render(0, "W, A-D-Y") == "Thu, Jan-1-1970"
    assert _render(0, "WW, AA-DD-YY") == "Thursday, January-01-1970"
    assert _render(-86400, FORMAT_PRESETS["long"]) == "Wednesday, December-31-1969 12:00:00 AM +00 UTC"


def test_explicit_formatspec_defaults():
    assert render(udt.convert(0), FormatSpec()) == "Thu, 01/01/1970 00:00:00 +00 UTC"


def test_explicit_formatspec_mixed_names():
    spec = FormatSpec(
        delimiter=" ",
        show_time=False,
        show_utc_offset=False,
        alphabetic_month=True,
        full_weekday_name=True,
        full_month_name=False,
        order="ady",
    )
    assert render(udt.convert(0), spec) == "Thursday, Jan 01 1970"


def test_fractional_and_negative_offsets():
    assert render(udt.convert(0, 5.5), DEFAULT_FORMAT_SPEC) == "Thu, 01/01/1970 05:30:00 +05.5 UTC"
    assert render(udt.convert(0, -3.5), DEFAULT_FORMAT_SPEC) == "Wed, 31/12/1969 20:30:00 -3.5 UTC"
    assert render(udt.convert(0, -5.0), DEFAULT_FORMAT_SPEC) == "Wed, 31/12/1969 19:00:00 -5 UTC"
    assert render(udt.convert(0, 10.0), DEFAULT_FORMAT_SPEC) == "Thu, 01/01/1970 10:00:00 +10 UTC"


def test_unpadded_offset():
    assert _render(0, "D/M/Y O", 2.0) == "1/1/1970 +2 UTC"


def test_pad_zeros_only_pads_single_digits():
    assert pad_zeros(5) == "05"
    assert pad_zeros(0) == "00"
    assert pad_zeros(10) == "10"
    assert pad_zeros(-3) == "-3"
    assert pad_zeros(5.5) == "05.5"
    assert pad_zeros(2.0) == "02"


def test_format_offset_zero_is_positive():
    assert format_offset(0.0, True) == "+00 UTC"
    assert format_offset(-0.0, False) == "+0 UTC"


def test_name_lookups_reject_out_of_range():
    assert weekday_name(0) == "Sun"
    assert weekday_name(6, full=True) == "Saturday"
    assert month_name(8) == "Sep"
    with pytest.raises(InvalidCalendarArgumentError):
        weekday_name(7)
    with pytest.raises(InvalidCalendarArgumentError):
        month_name(12)
