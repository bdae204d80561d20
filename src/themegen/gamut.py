from __future__ import annotations

"""sRGB gamut handling utilities for OKLCH colors.

This module provides a helper that finds the largest chroma, for a fixed
lightness and hue, that survives 8-bit sRGB hex quantization.
"""

import logging
from typing import Optional

from common.settings import get as _get_settings

from .color_types import OklchColor
from .engine import ColorEngine, default_engine


logger = logging.getLogger(__name__)

GAMUT_SEARCH_ITERATIONS = 10
GAMUT_TOLERANCE = 0.02


def clamp_to_srgb_gamut(
    color: OklchColor,
    engine: Optional[ColorEngine] = None,
    iterations: int = GAMUT_SEARCH_ITERATIONS,
    tolerance: float = GAMUT_TOLERANCE,
) -> OklchColor:
    """Binary-search the highest chroma in [0, color.C] that round-trips.

    A probe passes when converting it to hex and back keeps both L and C
    within ``tolerance``. The search always runs exactly ``iterations``
    steps; if no probe passes, the color is returned with C = 0.
    """
    if engine is None:
        engine = default_engine()

    low = 0.0
    high = color.C
    result = color.with_chroma(0.0)
    for _ in range(iterations):
        mid = (low + high) / 2.0
        probe = color.with_chroma(mid)
        back = engine.to_oklch(engine.to_hex(probe))
        if abs(back.L - probe.L) < tolerance and abs(back.C - probe.C) < tolerance:
            low = mid
            result = probe
        else:
            high = mid

    if _get_settings().DEBUG_GAMUT and result.C < color.C:
        logger.debug(
            "gamut clamp L=%.4f H=%.2f C %.4f -> %.4f", color.L, color.H, color.C, result.C
        )
    return result


def in_srgb_gamut(
    color: OklchColor,
    engine: Optional[ColorEngine] = None,
    tolerance: float = GAMUT_TOLERANCE,
) -> bool:
    """True when ``color`` survives a hex round trip within ``tolerance``."""
    if engine is None:
        engine = default_engine()
    back = engine.to_oklch(engine.to_hex(color))
    return abs(back.L - color.L) < tolerance and abs(back.C - color.C) < tolerance
