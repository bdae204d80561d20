from __future__ import annotations

"""Color conversion engine for OKLCH and 8-bit sRGB hex.

This module defines the :class:`ColorEngine` protocol and a default
implementation that converts between ``#rrggbb`` strings (sRGB, D65) and
OKLCH via OKLab, using the published OKLab matrices.
"""

import math
import re
from typing import Protocol, Tuple

from .color_types import OklchColor


RGB8 = Tuple[int, int, int]

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


class ColorEngine(Protocol):
    """Protocol abstracting color space conversions."""

    def to_oklch(self, hex_str: str) -> OklchColor: ...

    def to_hex(self, color: OklchColor) -> str: ...

    def normalize_hue(self, h: float) -> float: ...


class DefaultColorEngine:
    """Default implementation based on OKLab/OKLCH and sRGB (D65)."""

    def normalize_hue(self, h: float) -> float:
        """Normalize hue angle into [0, 360)."""
        return (h % 360.0 + 360.0) % 360.0

    def to_oklch(self, hex_str: str) -> OklchColor:
        """Convert a hex string to OKLCH with L in [0, 1].

        Malformed input is read as black rather than raising.
        """
        r, g, b = parse_hex(hex_str)
        rl, gl, bl = _srgb_to_linear(r / 255.0), _srgb_to_linear(g / 255.0), _srgb_to_linear(b / 255.0)

        # Linear RGB to LMS (OKLab)
        l = 0.4122214708 * rl + 0.5363325363 * gl + 0.0514459929 * bl
        m = 0.2119034982 * rl + 0.6806995451 * gl + 0.1073969566 * bl
        s = 0.0883024619 * rl + 0.2817188376 * gl + 0.6299787005 * bl

        l_ = _cbrt(l)
        m_ = _cbrt(m)
        s_ = _cbrt(s)

        L_ok = 0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_
        a_ok = 1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_
        b_ok = 0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_

        C = math.sqrt(a_ok * a_ok + b_ok * b_ok)
        h_deg = math.degrees(math.atan2(b_ok, a_ok))
        return OklchColor(L_ok, C, self.normalize_hue(h_deg))

    def to_hex(self, color: OklchColor) -> str:
        """Convert OKLCH (L in [0, 1]) to a ``#rrggbb`` string."""
        L, C, H = color.L, color.C, color.H
        # Extremes are pinned; the inverse matrices degenerate there.
        if L <= 0.0:
            return "#000000"
        if L >= 1.0:
            return "#ffffff"

        h_rad = math.radians(H)
        a = C * math.cos(h_rad)
        b = C * math.sin(h_rad)

        # OKLab to LMS
        l_ = L + 0.3963377774 * a + 0.2158037573 * b
        m_ = L - 0.1055613458 * a - 0.0638541728 * b
        s_ = L - 0.0894841775 * a - 1.2914855480 * b

        l = l_ * l_ * l_
        m = m_ * m_ * m_
        s = s_ * s_ * s_

        rl = 4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s
        gl = -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s
        bl = -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s

        return rgb_to_hex(_linear_to_u8(rl), _linear_to_u8(gl), _linear_to_u8(bl))


def parse_hex(hex_str: str) -> RGB8:
    """Parse ``#rrggbb`` (``#`` optional) into 0-255 ints; black if malformed."""
    match = _HEX_RE.match(hex_str) if isinstance(hex_str, str) else None
    if match is None:
        return (0, 0, 0)
    return (int(match.group(1), 16), int(match.group(2), 16), int(match.group(3), 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    r_i = max(0, min(255, int(round(r))))
    g_i = max(0, min(255, int(round(g))))
    b_i = max(0, min(255, int(round(b))))
    return f"#{r_i:02x}{g_i:02x}{b_i:02x}"


def srgb_to_linear(c: float) -> float:
    """sRGB inverse transfer curve for a channel in [0, 1]."""
    return _srgb_to_linear(c)


def _srgb_to_linear(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _linear_to_u8(c: float) -> int:
    if c <= 0.0031308:
        v = 12.92 * c
    else:
        v = 1.055 * (c ** (1 / 2.4)) - 0.055
    return int(round(max(0.0, min(255.0, v * 255.0))))


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1 / 3), x)


_DEFAULT_ENGINE = DefaultColorEngine()


def default_engine() -> DefaultColorEngine:
    """Return the shared stateless default engine."""
    return _DEFAULT_ENGINE


def to_oklch(hex_str: str) -> OklchColor:
    """Module-level shortcut for :meth:`DefaultColorEngine.to_oklch`."""
    return _DEFAULT_ENGINE.to_oklch(hex_str)


def to_hex(color: OklchColor) -> str:
    """Module-level shortcut for :meth:`DefaultColorEngine.to_hex`."""
    return _DEFAULT_ENGINE.to_hex(color)
