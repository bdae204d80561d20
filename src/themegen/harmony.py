from __future__ import annotations

"""Harmony hue patterns and mode resolution.

This module maps each concrete :class:`HarmonyMode` to a fixed list of
five hue offsets, resolves the ``random`` pseudo-mode to a concrete one
using a seeded generator, and turns a base hue into the final hue list.
"""

import logging
import math
from typing import Dict, List, Optional, Tuple

from .color_types import HarmonyMode
from .engine import ColorEngine, default_engine
from .seeded import RandomSource


logger = logging.getLogger(__name__)

HueOffsets = Tuple[float, float, float, float, float]

HUE_OFFSETS: Dict[HarmonyMode, HueOffsets] = {
    HarmonyMode.MONOCHROME: (0.0, 0.0, 0.0, 0.0, 0.0),
    HarmonyMode.ANALOGOUS: (0.0, 30.0, -30.0, 15.0, -15.0),
    HarmonyMode.COMPLEMENTARY: (0.0, 180.0, 30.0, 210.0, -30.0),
    HarmonyMode.SPLIT_COMPLEMENTARY: (0.0, 150.0, 210.0, 30.0, 180.0),
    HarmonyMode.TRIADIC: (0.0, 120.0, 240.0, 60.0, 180.0),
    HarmonyMode.TETRADIC: (0.0, 90.0, 180.0, 270.0, 45.0),
    HarmonyMode.COMPOUND: (0.0, 165.0, 180.0, 195.0, 30.0),
    HarmonyMode.TRIADIC_SPLIT: (0.0, 120.0, 150.0, 240.0, 270.0),
}

# Order matters: the seeded draw indexes into this tuple.
RANDOM_CANDIDATES: Tuple[HarmonyMode, ...] = (
    HarmonyMode.ANALOGOUS,
    HarmonyMode.COMPLEMENTARY,
    HarmonyMode.SPLIT_COMPLEMENTARY,
    HarmonyMode.TRIADIC,
    HarmonyMode.TETRADIC,
    HarmonyMode.COMPOUND,
    HarmonyMode.TRIADIC_SPLIT,
)

_missing = [m for m in HarmonyMode if m is not HarmonyMode.RANDOM and m not in HUE_OFFSETS]
if _missing:  # pragma: no cover - import-time table check
    raise RuntimeError(f"hue offsets missing for: {_missing}")


def hue_offsets(mode: HarmonyMode) -> HueOffsets:
    """Return the hue offsets (degrees) for a concrete harmony mode."""
    if mode is HarmonyMode.RANDOM:
        raise ValueError("RANDOM has no offsets; resolve it to a concrete mode first.")
    try:
        return HUE_OFFSETS[mode]
    except KeyError:
        raise ValueError(f"Unsupported HarmonyMode: {mode}") from None


def resolve_mode(mode: HarmonyMode, rng: RandomSource) -> HarmonyMode:
    """Resolve ``RANDOM`` to a concrete mode; other modes pass through.

    Only ``RANDOM`` consumes a value from ``rng``.
    """
    if mode is not HarmonyMode.RANDOM:
        return mode
    n = len(RANDOM_CANDIDATES)
    index = min(n - 1, int(math.floor(rng.next() * n)))
    return RANDOM_CANDIDATES[index]


def resolve_base_hue(
    base_color: Optional[str],
    rng: RandomSource,
    engine: Optional[ColorEngine] = None,
) -> float:
    """Hue of ``base_color`` if given, else a seeded draw in [0, 360)."""
    if base_color:
        if engine is None:
            engine = default_engine()
        return engine.to_oklch(base_color).H
    return rng.next_float(0.0, 360.0)


def _wrap_hue(h: float) -> float:
    w = h % 360.0
    # float modulo of a tiny negative rounds up to 360.0
    return 0.0 if w >= 360.0 else w


def resolve_hues(base_hue: float, mode: HarmonyMode) -> List[float]:
    """Apply ``mode``'s offsets to ``base_hue`` and wrap into [0, 360)."""
    return [_wrap_hue(base_hue + o) for o in hue_offsets(mode)]


def coerce_mode(mode: HarmonyMode | str) -> HarmonyMode:
    """Accept enum or string; unknown strings fall back to ANALOGOUS."""
    try:
        return HarmonyMode.from_value(mode)
    except ValueError:
        logger.warning("unknown harmony mode %r; using analogous", mode)
        return HarmonyMode.ANALOGOUS


__all__ = [
    "HUE_OFFSETS",
    "RANDOM_CANDIDATES",
    "hue_offsets",
    "resolve_mode",
    "resolve_base_hue",
    "resolve_hues",
    "coerce_mode",
]
