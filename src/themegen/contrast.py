from __future__ import annotations

"""WCAG luminance helpers and black/white foreground selection."""

from .engine import parse_hex, srgb_to_linear


BLACK = "#000000"
WHITE = "#ffffff"

# WCAG midpoint approximation; not a 4.5:1 guarantee.
FOREGROUND_LUMINANCE_THRESHOLD = 0.179


def relative_luminance(hex_str: str) -> float:
    """WCAG relative luminance of a hex color, in [0, 1]."""
    r, g, b = parse_hex(hex_str)
    return (
        0.2126 * srgb_to_linear(r / 255.0)
        + 0.7152 * srgb_to_linear(g / 255.0)
        + 0.0722 * srgb_to_linear(b / 255.0)
    )


def contrast_ratio(hex_a: str, hex_b: str) -> float:
    """WCAG contrast ratio between two colors, in [1, 21]."""
    la = relative_luminance(hex_a)
    lb = relative_luminance(hex_b)
    lighter, darker = max(la, lb), min(la, lb)
    return (lighter + 0.05) / (darker + 0.05)


def select_foreground(bg_hex: str) -> str:
    """Black text over light backgrounds, white over dark ones."""
    if relative_luminance(bg_hex) > FOREGROUND_LUMINANCE_THRESHOLD:
        return BLACK
    return WHITE


__all__ = [
    "BLACK",
    "WHITE",
    "FOREGROUND_LUMINANCE_THRESHOLD",
    "relative_luminance",
    "contrast_ratio",
    "select_foreground",
]
