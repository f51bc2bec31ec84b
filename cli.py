#!/usr/bin/env python3
"""CLI for unix-datetime.

Usage examples:
  - Render with the default format ("W, DD/MM/YY, HH:II:SS O UTC"):
      python3 unix_datetime.py 0

  - Apply a UTC offset and a preset:
      python3 unix_datetime.py 1700000000 --offset 5.5 --preset iso

  - Custom format, plus the compiled format and the civil fields:
      python3 unix_datetime.py -86400 --format "WW, AA-DD-YY" --explain --fields

  - Compare presets quickly:
      python3 unix_datetime.py 1700000000 --preset us
      python3 unix_datetime.py 1700000000 --preset long
"""

from __future__ import annotations

import argparse

from udt_format import FORMAT_PRESETS, compile_format
from udt_model import DateTimeError
from udt_value import DateTime


def resolve_format(*, preset: str | None, fmt: str | None) -> tuple[str, str]:
    """Resolve preset + explicit format string.

    Returns: (preset_effective, format_text). An explicit format always wins;
    preset_effective is then "custom".
    """
    if fmt is not None:
        if not fmt.strip():
            raise ValueError("format must not be empty")
        return "custom", fmt

    preset_eff = "default" if preset is None else preset
    if preset_eff not in FORMAT_PRESETS:
        raise ValueError(f"Unknown preset: {preset_eff!r}")
    return preset_eff, FORMAT_PRESETS[preset_eff]


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="unix-datetime",
        description="Unix timestamp -> proleptic Gregorian date/time text.",
    )
    ap.add_argument("timestamp", help="Unix timestamp in seconds (decimal, may be negative).")
    ap.add_argument(
        "--offset",
        type=float,
        default=0.0,
        help="UTC offset in hours, fractional allowed (default 0).",
    )
    ap.add_argument(
        "--preset",
        choices=sorted(FORMAT_PRESETS),
        default=None,
        help=(
            "Named format: "
            + ", ".join(f"{name} ({text!r})" for name, text in FORMAT_PRESETS.items())
            + ". --format always wins."
        ),
    )
    ap.add_argument("--format", dest="fmt", default=None, help="Explicit format string (overrides --preset).")
    ap.add_argument("--explain", action="store_true", help="Print the compiled format.")
    ap.add_argument("--fields", action="store_true", help="Print the civil fields (1-based month/day).")
    return ap


def _print_fields(dt: DateTime) -> None:
    c = dt.civil
    print(
        f"[cal] year={c.year}  month={c.display_month}  day={c.display_day}  "
        f"hour={c.hour}  minute={c.minute}  second={c.second}  "
        f"weekday={dt.weekday_name(full=True)}  utc_offset={c.utc_offset}"
    )


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    try:
        preset_eff, fmt_text = resolve_format(preset=args.preset, fmt=args.fmt)
        spec = compile_format(fmt_text)
        dt = DateTime(args.timestamp, args.offset)

        if args.explain:
            print(f"[fmt] preset={preset_eff}  format={fmt_text!r}")
            print(f"[fmt] {spec.describe()}")
        if args.fields:
            _print_fields(dt)

        print(dt.to_string(spec))
        return 0
    except (DateTimeError, ValueError) as e:
        print(f"[error] {e}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
