from __future__ import annotations

"""High-level public API for generating light/dark theme pairs.

This module provides :func:`generate_theme`, which coordinates harmony
resolution, seeded randomness, theme composition and gamut mapping to
produce a :class:`themegen.PaletteResult`.
"""

import logging
import random
import time
from typing import Optional

from .color_types import GenerationRequest, HarmonyMode, OklchColor, PaletteResult
from .composer import Modifiers, build_dark_anchors, build_light_anchors, compose_theme
from .engine import ColorEngine, default_engine
from .gamut import clamp_to_srgb_gamut
from .harmony import coerce_mode, resolve_base_hue, resolve_hues, resolve_mode
from .seeded import Seed, SeededRandom


logger = logging.getLogger(__name__)

# Representative L/C used to encode a drawn base hue as the returned seed.
SEED_LIGHTNESS = 0.5
SEED_CHROMA = 0.15


def generate_theme(
    mode: HarmonyMode | str = HarmonyMode.RANDOM,
    base_color: Optional[str] = None,
    saturation_level: int = 0,
    contrast_level: int = 0,
    brightness_level: int = 0,
    *,
    engine: Optional[ColorEngine] = None,
    entropy: Optional[Seed] = None,
) -> PaletteResult:
    """Generate a light/dark token pair.

    Parameters
    ----------
    mode:
        Harmony mode (enum or its string value). ``RANDOM`` is resolved to
        a concrete mode with the seeded generator.
    base_color:
        Optional ``#RRGGBB`` seed color. When given it seeds the generator
        and supplies the base hue, so the output is fully reproducible.
    saturation_level, contrast_level, brightness_level:
        Adjustment levels in [-5, 5]. Not re-validated here.
    engine:
        Optional ColorEngine. If None, the default engine is used.
    entropy:
        Seed used when ``base_color`` is absent. If None, a fresh
        time-based value is drawn and the result is not reproducible.

    Returns
    -------
    PaletteResult
        Light and dark tokens built from the same hues and chroma, plus the
        seed and the resolved mode.
    """
    if engine is None:
        engine = default_engine()

    if base_color:
        rng_seed: Seed = base_color
    elif entropy is not None:
        rng_seed = entropy
    else:
        rng_seed = f"{int(time.time() * 1000)}-{random.random()}"
    rng = SeededRandom(rng_seed)

    # Draw order is fixed: mode first (RANDOM only), then base hue.
    harmony = resolve_mode(coerce_mode(mode), rng)
    base_hue = resolve_base_hue(base_color, rng, engine)
    hues = resolve_hues(base_hue, harmony)
    logger.debug("resolved mode=%s base_hue=%.3f hues=%s", harmony.value, base_hue, hues)

    mods = Modifiers.from_levels(saturation_level, contrast_level, brightness_level)
    light = compose_theme(hues, build_light_anchors(mods), mods, engine)
    dark = compose_theme(hues, build_dark_anchors(mods), mods, engine)

    if base_color:
        seed = base_color
    else:
        seed_color = clamp_to_srgb_gamut(OklchColor(SEED_LIGHTNESS, SEED_CHROMA, base_hue), engine)
        seed = engine.to_hex(seed_color)

    return PaletteResult(light=light, dark=dark, seed=seed, mode=harmony)


def generate(
    request: GenerationRequest,
    engine: Optional[ColorEngine] = None,
    entropy: Optional[Seed] = None,
) -> PaletteResult:
    """Generate from an already-validated :class:`GenerationRequest`."""
    return generate_theme(
        request.mode,
        request.base_color,
        request.saturation_level,
        request.contrast_level,
        request.brightness_level,
        engine=engine,
        entropy=entropy,
    )


__all__ = ["generate_theme", "generate", "SEED_LIGHTNESS", "SEED_CHROMA"]
