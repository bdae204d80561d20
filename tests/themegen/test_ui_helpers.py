from __future__ import annotations

import pytest

from themegen import ColorFormat, HarmonyMode, format_color, format_tokens, generate_theme, philosophy_for
from themegen.ui_helpers import HARMONY_MODE_LABEL_MAP, HARMONY_MODE_OPTIONS, PHILOSOPHIES


def test_format_color_variants() -> None:
    assert format_color("#3b82f6", ColorFormat.HEX) == "#3B82F6"
    assert format_color("#3b82f6", "rgb") == "59, 130, 246"
    assert format_color("#3b82f6", "hsl") == "217, 91%, 60%"
    assert format_color("#3b82f6", "oklch") == "62.3% 0.188 259.8"


def test_format_color_grays() -> None:
    assert format_color("#808080", "hsl") == "0, 0%, 50%"
    assert format_color("#000000", "oklch") == "0.0% 0.000 0.0"


@pytest.mark.parametrize(
    "hex_str, expected",
    [("#000508", "203, 100%, 2%"), ("#000738", "233, 100%, 11%")],
)
def test_format_color_hsl_rounds_half_up(hex_str: str, expected: str) -> None:
    # hue lands exactly on .5 for these
    assert format_color(hex_str, "hsl") == expected


def test_format_color_unknown_format() -> None:
    with pytest.raises(ValueError):
        format_color("#3b82f6", "cmyk")


def test_format_tokens_keeps_order() -> None:
    result = generate_theme("analogous", "#3B82F6")
    rendered = format_tokens(result.light, "rgb")
    assert list(rendered) == list(result.light)
    assert rendered["textOnColor"] == "255, 255, 255"


def test_every_mode_has_label_and_philosophy() -> None:
    assert {mode for _, mode in HARMONY_MODE_OPTIONS} == set(HarmonyMode)
    assert set(PHILOSOPHIES) == set(HarmonyMode)
    assert HARMONY_MODE_LABEL_MAP["Triadic Split"] is HarmonyMode.TRIADIC_SPLIT


def test_philosophy_lookup() -> None:
    assert "nature" in philosophy_for("analogous")
    assert "triangle" in philosophy_for(HarmonyMode.TRIADIC)
    assert "contrast" in philosophy_for("complementary")
    assert philosophy_for("unknown") == PHILOSOPHIES[HarmonyMode.RANDOM]
