"""Public entrypoint for the themegen library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``themegen`` instead of individual
submodules.
"""

from .color_types import (
    TOKEN_KEYS,
    GenerationRequest,
    HarmonyMode,
    OklchColor,
    PaletteResult,
    ThemeTokens,
    is_valid_tokens,
)
from .engine import ColorEngine, DefaultColorEngine, parse_hex, to_hex, to_oklch
from .gamut import clamp_to_srgb_gamut
from .seeded import SeededRandom
from .harmony import HUE_OFFSETS, hue_offsets, resolve_hues, resolve_mode
from .contrast import contrast_ratio, relative_luminance, select_foreground
from .composer import Modifiers, compose_theme
from .api import generate, generate_theme
from .ui_helpers import (
    COLOR_FORMAT_OPTIONS,
    HARMONY_MODE_OPTIONS,
    ColorFormat,
    format_color,
    format_tokens,
    philosophy_for,
)

__all__ = [
    "TOKEN_KEYS",
    "GenerationRequest",
    "HarmonyMode",
    "OklchColor",
    "PaletteResult",
    "ThemeTokens",
    "is_valid_tokens",
    "ColorEngine",
    "DefaultColorEngine",
    "parse_hex",
    "to_hex",
    "to_oklch",
    "clamp_to_srgb_gamut",
    "SeededRandom",
    "HUE_OFFSETS",
    "hue_offsets",
    "resolve_hues",
    "resolve_mode",
    "contrast_ratio",
    "relative_luminance",
    "select_foreground",
    "Modifiers",
    "compose_theme",
    "generate",
    "generate_theme",
    "ColorFormat",
    "format_color",
    "format_tokens",
    "philosophy_for",
    "HARMONY_MODE_OPTIONS",
    "COLOR_FORMAT_OPTIONS",
]
