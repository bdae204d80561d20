from __future__ import annotations

"""Single-theme composition from resolved hues and adjustment levels.

This module defines :class:`Modifiers` (the numeric effect of the three
adjustment levels), :class:`ThemeAnchors` (per-variant lightness and
chroma targets), the light/dark anchor tables, and :func:`compose_theme`,
which turns hues + anchors into a complete :class:`ThemeTokens`.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from .color_types import OklchColor, ThemeTokens
from .contrast import WHITE, select_foreground
from .engine import ColorEngine, default_engine
from .gamut import clamp_to_srgb_gamut


SATURATION_STEP = 0.12
BRIGHTNESS_STEP = 0.025
CONTRAST_STEP = 0.02

BASE_CHROMA = 0.14
BASE_CHROMA_MIN = 0.08
BASE_CHROMA_MAX = 0.18

# Status hues stay fixed so meaning survives every harmony mode.
STATUS_HUES: Dict[str, float] = {"good": 145.0, "warn": 85.0, "bad": 25.0}


def _clamp(x: float, lo: float, hi: float) -> float:
    return min(max(x, lo), hi)


@dataclass(frozen=True)
class Modifiers:
    """Numeric modifiers derived from the three adjustment levels."""

    saturation_multiplier: float
    brightness_shift: float
    contrast_shift: float

    @classmethod
    def from_levels(
        cls, saturation_level: int, contrast_level: int, brightness_level: int
    ) -> "Modifiers":
        return cls(
            saturation_multiplier=1.0 + saturation_level * SATURATION_STEP,
            brightness_shift=brightness_level * BRIGHTNESS_STEP,
            contrast_shift=contrast_level * CONTRAST_STEP,
        )

    @property
    def base_chroma(self) -> float:
        """Brand/status chroma shared by both variants."""
        return _clamp(BASE_CHROMA * self.saturation_multiplier, BASE_CHROMA_MIN, BASE_CHROMA_MAX)


@dataclass(frozen=True)
class Tone:
    """Target lightness plus a chroma factor relative to a reference chroma."""

    L: float
    chroma_factor: float = 1.0


@dataclass(frozen=True)
class ThemeAnchors:
    """Lightness/chroma targets for one theme variant.

    Neutral tones scale ``neutral_chroma``; brand and status tones scale
    :attr:`Modifiers.base_chroma`.
    """

    neutral_chroma: float
    bg: Tone
    card: Tone
    card2: Tone
    text: Tone
    text_muted: Tone
    border: Tone
    primary: Tone
    secondary: Tone
    accent: Tone
    good: Tone
    warn: Tone
    bad: Tone


def build_light_anchors(mods: Modifiers) -> ThemeAnchors:
    """Anchors for the light variant: bright surfaces, dark text."""
    b = mods.brightness_shift
    k = mods.contrast_shift
    bg_L = _clamp(0.97 + b, 0.92, 0.99)
    card_L = bg_L - 0.04 - k * 0.5
    return ThemeAnchors(
        neutral_chroma=0.005,
        bg=Tone(bg_L, 1.0),
        card=Tone(card_L, 1.2),
        card2=Tone(card_L - 0.03, 1.4),
        text=Tone(max(0.10, 0.18 - b * 0.5 - k), 2.0),
        text_muted=Tone(0.45, 1.5),
        border=Tone(0.82, 2.0),
        primary=Tone(0.55 + b * 0.5, 1.0),
        secondary=Tone(0.58 + b * 0.4, 0.85),
        accent=Tone(0.52 + b * 0.3, 1.1),
        good=Tone(0.55 + b * 0.3, 0.9),
        warn=Tone(0.65 + b * 0.3, 0.85),
        bad=Tone(0.52 + b * 0.3, 0.95),
    )


def build_dark_anchors(mods: Modifiers) -> ThemeAnchors:
    """Anchors for the dark variant.

    Surfaces sit near black and text near white. Brand and status tones
    reuse the light lightness plus a boost of 0.06-0.10 so they stay vivid
    on dark surfaces; chroma factors are slightly lower.
    """
    light = build_light_anchors(mods)
    b = mods.brightness_shift
    k = mods.contrast_shift
    bg_L = _clamp(0.08 - b * 0.3, 0.05, 0.12)
    card_L = bg_L + 0.05 + k * 0.3
    return ThemeAnchors(
        neutral_chroma=0.008,
        bg=Tone(bg_L, 1.0),
        card=Tone(card_L, 1.3),
        card2=Tone(card_L + 0.03, 1.5),
        text=Tone(min(0.98, 0.92 + b * 0.3), 1.0),
        text_muted=Tone(0.62, 1.2),
        border=Tone(0.25, 2.0),
        primary=Tone(light.primary.L + 0.08, 0.9),
        secondary=Tone(light.secondary.L + 0.06, 0.8),
        accent=Tone(light.accent.L + 0.10, 1.0),
        good=Tone(light.good.L + 0.06, 0.85),
        warn=Tone(light.warn.L + 0.06, 0.8),
        bad=Tone(light.bad.L + 0.08, 0.9),
    )


def compose_theme(
    hues: Sequence[float],
    anchors: ThemeAnchors,
    mods: Modifiers,
    engine: Optional[ColorEngine] = None,
) -> ThemeTokens:
    """Build one 20-token theme.

    Parameters
    ----------
    hues:
        Resolved hues; ``hues[0..2]`` drive primary/secondary/accent and
        ``hues[0]`` tints the neutrals.
    anchors:
        Variant-specific lightness/chroma targets.
    mods:
        Modifiers shared by both variants.
    engine:
        Optional ColorEngine. If None, the default engine is used.
    """
    if engine is None:
        engine = default_engine()
    h0, h1, h2 = hues[0], hues[1], hues[2]
    nc = anchors.neutral_chroma
    bc = mods.base_chroma

    def tone_hex(tone: Tone, chroma: float, hue: float) -> str:
        color = OklchColor(tone.L, chroma * tone.chroma_factor, hue)
        return engine.to_hex(clamp_to_srgb_gamut(color, engine))

    primary = tone_hex(anchors.primary, bc, h0)
    secondary = tone_hex(anchors.secondary, bc, h1)
    accent = tone_hex(anchors.accent, bc, h2)
    good = tone_hex(anchors.good, bc, STATUS_HUES["good"])
    warn = tone_hex(anchors.warn, bc, STATUS_HUES["warn"])
    bad = tone_hex(anchors.bad, bc, STATUS_HUES["bad"])

    return ThemeTokens(
        {
            "bg": tone_hex(anchors.bg, nc, h0),
            "card": tone_hex(anchors.card, nc, h0),
            "card2": tone_hex(anchors.card2, nc, h0),
            "text": tone_hex(anchors.text, nc, h0),
            "textMuted": tone_hex(anchors.text_muted, nc, h0),
            "textOnColor": WHITE,
            "primary": primary,
            "primaryFg": select_foreground(primary),
            "secondary": secondary,
            "secondaryFg": select_foreground(secondary),
            "accent": accent,
            "accentFg": select_foreground(accent),
            "border": tone_hex(anchors.border, nc, h0),
            "ring": primary,
            "good": good,
            "goodFg": select_foreground(good),
            "warn": warn,
            "warnFg": select_foreground(warn),
            "bad": bad,
            "badFg": select_foreground(bad),
        }
    )


__all__ = [
    "Modifiers",
    "Tone",
    "ThemeAnchors",
    "STATUS_HUES",
    "build_light_anchors",
    "build_dark_anchors",
    "compose_theme",
]
