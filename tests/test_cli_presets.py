from __future__ import annotations

import pytest

from cli import resolve_format
from udt_format import FORMAT_PRESETS


def test_default_preset_when_unspecified():
    preset, fmt = resolve_format(preset=None, fmt=None)
    assert preset == "default"
    assert fmt == "W, DD/MM/YY, HH:II:SS O UTC"


def test_preset_us_sets_expected_format():
    preset, fmt = resolve_format(preset="us", fmt=None)
    assert preset == "us"
    assert fmt == FORMAT_PRESETS["us"]


def test_format_override_wins_over_preset():
    preset, fmt = resolve_format(preset="long", fmt="YY.MM.DD")
    assert preset == "custom"
    assert fmt == "YY.MM.DD"


def test_preset_resolution_named():
    assert resolve_format(preset="iso", fmt=None) == ("iso", "YY-MM-DD HH:II:SS")


def test_unknown_preset_and_empty_format_rejected():
    with pytest.raises(ValueError):
        resolve_format(preset="nope", fmt=None)
    with pytest.raises(ValueError):
        resolve_format(preset=None, fmt="   ")
