from __future__ import annotations

"""Helper utilities for integrating themegen into external UIs and services.

This module exposes label/enum pairs for harmony modes, the short
"philosophy" text associated with each mode, and :func:`format_color` /
:func:`format_tokens` to render token values as hex, rgb, hsl or oklch
strings.
"""

import math
from enum import Enum
from typing import Dict, List, Mapping

from .color_types import HarmonyMode
from .engine import parse_hex, to_oklch


class ColorFormat(Enum):
    """Supported string formats for a single color value."""

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    OKLCH = "oklch"

    @classmethod
    def from_value(cls, value: str) -> "ColorFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown color format: {value}")


# Label/Enum pairs for UI choices
HARMONY_MODE_OPTIONS: List[tuple[str, HarmonyMode]] = [
    ("Random", HarmonyMode.RANDOM),
    ("Monochrome", HarmonyMode.MONOCHROME),
    ("Analogous", HarmonyMode.ANALOGOUS),
    ("Complementary", HarmonyMode.COMPLEMENTARY),
    ("Split Complementary", HarmonyMode.SPLIT_COMPLEMENTARY),
    ("Triadic", HarmonyMode.TRIADIC),
    ("Tetradic", HarmonyMode.TETRADIC),
    ("Compound", HarmonyMode.COMPOUND),
    ("Triadic Split", HarmonyMode.TRIADIC_SPLIT),
]
COLOR_FORMAT_OPTIONS: List[tuple[str, ColorFormat]] = [
    ("HEX", ColorFormat.HEX),
    ("RGB", ColorFormat.RGB),
    ("HSL", ColorFormat.HSL),
    ("OKLCH", ColorFormat.OKLCH),
]

HARMONY_MODE_LABEL_MAP: Dict[str, HarmonyMode] = {
    label: value for label, value in HARMONY_MODE_OPTIONS
}

PHILOSOPHIES: Dict[HarmonyMode, str] = {
    HarmonyMode.MONOCHROME: "Unity and simplicity through variations of a single hue.",
    HarmonyMode.ANALOGOUS: "Harmony found in nature by choosing neighboring colors on the wheel.",
    HarmonyMode.COMPLEMENTARY: "High-energy contrast by pairing opposites for maximum impact.",
    HarmonyMode.SPLIT_COMPLEMENTARY: "Visual variety with less tension than a direct complement.",
    HarmonyMode.TRIADIC: "A vibrant, balanced triangle of color for a bold UI.",
    HarmonyMode.TETRADIC: "Rich and complex harmony using four colors in two complementary pairs.",
    HarmonyMode.COMPOUND: "Balanced sophistication using multiple contrasting and adjacent hues.",
    HarmonyMode.TRIADIC_SPLIT: "A wide, dynamic palette for complex design systems.",
    HarmonyMode.RANDOM: "Embracing spontaneity and the natural flow of creative energy.",
}


def philosophy_for(mode: HarmonyMode | str) -> str:
    """Return the description for ``mode``; unknown modes get the random text."""
    try:
        return PHILOSOPHIES[HarmonyMode.from_value(mode)]
    except ValueError:
        return PHILOSOPHIES[HarmonyMode.RANDOM]


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _rgb_to_hsl(r: int, g: int, b: int) -> tuple[int, int, int]:
    rf, gf, bf = r / 255.0, g / 255.0, b / 255.0
    mx, mn = max(rf, gf, bf), min(rf, gf, bf)
    light = (mx + mn) / 2.0
    if mx == mn:
        return (0, 0, _round_half_up(light * 100))
    d = mx - mn
    sat = d / (2.0 - mx - mn) if light > 0.5 else d / (mx + mn)
    if mx == rf:
        hue = (gf - bf) / d + (6.0 if gf < bf else 0.0)
    elif mx == gf:
        hue = (bf - rf) / d + 2.0
    else:
        hue = (rf - gf) / d + 4.0
    return (_round_half_up(hue * 60.0), _round_half_up(sat * 100), _round_half_up(light * 100))


def format_color(hex_str: str, fmt: ColorFormat | str) -> str:
    """Render a hex color in the requested string format."""
    color_fmt = fmt if isinstance(fmt, ColorFormat) else ColorFormat.from_value(fmt)
    if color_fmt == ColorFormat.HEX:
        r, g, b = parse_hex(hex_str)
        return f"#{r:02X}{g:02X}{b:02X}"
    if color_fmt == ColorFormat.RGB:
        r, g, b = parse_hex(hex_str)
        return f"{r}, {g}, {b}"
    if color_fmt == ColorFormat.HSL:
        h, s, l = _rgb_to_hsl(*parse_hex(hex_str))
        return f"{h}, {s}%, {l}%"
    if color_fmt == ColorFormat.OKLCH:
        c = to_oklch(hex_str)
        return f"{c.L * 100:.1f}% {c.C:.3f} {c.H:.1f}"
    raise ValueError(f"Unsupported color format: {fmt}")


def format_tokens(tokens: Mapping[str, str], fmt: ColorFormat | str) -> Dict[str, str]:
    """Apply :func:`format_color` to every token, keeping key order."""
    return {key: format_color(value, fmt) for key, value in tokens.items()}


__all__ = [
    "ColorFormat",
    "HARMONY_MODE_OPTIONS",
    "COLOR_FORMAT_OPTIONS",
    "HARMONY_MODE_LABEL_MAP",
    "PHILOSOPHIES",
    "philosophy_for",
    "format_color",
    "format_tokens",
]
