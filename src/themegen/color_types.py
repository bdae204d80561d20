from __future__ import annotations

"""Core value types used by the theme generator.

This module defines simple, explicit data structures for OKLCH colors,
the 20-token theme mapping, the validated generation request, and the
dual-theme result.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple


_TOKEN_HEX_RE = re.compile(r"^#[0-9a-fA-F]{6}$")

LEVEL_MIN = -5
LEVEL_MAX = 5

TOKEN_KEYS: Tuple[str, ...] = (
    "bg",
    "card",
    "card2",
    "text",
    "textMuted",
    "textOnColor",
    "primary",
    "primaryFg",
    "secondary",
    "secondaryFg",
    "accent",
    "accentFg",
    "border",
    "ring",
    "good",
    "goodFg",
    "warn",
    "warnFg",
    "bad",
    "badFg",
)


class HarmonyMode(Enum):
    """Named harmony rules accepted by the generator."""

    RANDOM = "random"
    MONOCHROME = "monochrome"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    SPLIT_COMPLEMENTARY = "split-complementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    COMPOUND = "compound"
    TRIADIC_SPLIT = "triadic-split"

    @classmethod
    def from_value(cls, value: "HarmonyMode | str") -> "HarmonyMode":
        if isinstance(value, HarmonyMode):
            return value
        for mode in cls:
            if mode.value == value:
                return mode
        raise ValueError(f"Unknown harmony mode: {value!r}")


@dataclass(frozen=True)
class OklchColor:
    """Immutable OKLCH coordinate.

    Attributes
    ----------
    L:
        Lightness in [0, 1].
    C:
        Chroma, non-negative (sRGB colors stay below ~0.4).
    H:
        Hue angle in degrees, [0, 360).
    """

    L: float
    C: float
    H: float

    def with_chroma(self, C: float) -> "OklchColor":
        """Return a copy with a different chroma."""
        return replace(self, C=C)


def is_hex_color(value: object) -> bool:
    """True when ``value`` is a ``#RRGGBB`` string."""
    return isinstance(value, str) and _TOKEN_HEX_RE.match(value) is not None


def is_valid_tokens(tokens: Mapping[str, Any]) -> bool:
    """True when ``tokens`` has exactly the 20 token keys, each a ``#RRGGBB`` string."""
    if set(tokens.keys()) != set(TOKEN_KEYS):
        return False
    return all(is_hex_color(tokens[k]) for k in TOKEN_KEYS)


class ThemeTokens(Mapping):
    """Read-only, ordered mapping of the 20 semantic color tokens.

    Iteration order always follows :data:`TOKEN_KEYS` regardless of the
    order of the input mapping.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str]) -> None:
        missing = [k for k in TOKEN_KEYS if k not in values]
        if missing:
            raise ValueError(f"missing theme tokens: {', '.join(missing)}")
        extra = sorted(set(values) - set(TOKEN_KEYS))
        if extra:
            raise ValueError(f"unknown theme tokens: {', '.join(extra)}")
        for key in TOKEN_KEYS:
            if not is_hex_color(values[key]):
                raise ValueError(f"token '{key}' is not a #RRGGBB color: {values[key]!r}")
        self._values: Tuple[str, ...] = tuple(values[k] for k in TOKEN_KEYS)

    def __getitem__(self, key: str) -> str:
        try:
            return self._values[TOKEN_KEYS.index(key)]
        except ValueError:
            raise KeyError(key) from None

    def __iter__(self) -> Iterator[str]:
        return iter(TOKEN_KEYS)

    def __len__(self) -> int:
        return len(TOKEN_KEYS)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ThemeTokens):
            return self._values == other._values
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"ThemeTokens({self.as_dict()!r})"

    def as_dict(self) -> Dict[str, str]:
        """Return a plain ordered dict copy."""
        return dict(zip(TOKEN_KEYS, self._values))


@dataclass(frozen=True)
class GenerationRequest:
    """Validated generation parameters.

    Build instances with :meth:`create` at the boundary; the engine does
    not re-check them.
    """

    mode: HarmonyMode
    base_color: Optional[str] = None
    saturation_level: int = 0
    contrast_level: int = 0
    brightness_level: int = 0

    @classmethod
    def create(
        cls,
        mode: HarmonyMode | str = HarmonyMode.RANDOM,
        base_color: Optional[str] = None,
        saturation_level: int = 0,
        contrast_level: int = 0,
        brightness_level: int = 0,
    ) -> "GenerationRequest":
        """Validate raw parameters and build a request.

        Raises
        ------
        ValueError
            If the mode is unknown, ``base_color`` is not ``#RRGGBB``, or a
            level is not an integer in [-5, 5].
        """
        harmony = HarmonyMode.from_value(mode)
        if base_color is not None and not is_hex_color(base_color):
            raise ValueError(
                f"Invalid base_color {base_color!r}; must be a hex color (e.g. #FF5733)."
            )
        for name, v in (
            ("saturation_level", saturation_level),
            ("contrast_level", contrast_level),
            ("brightness_level", brightness_level),
        ):
            if isinstance(v, bool) or not isinstance(v, int):
                raise ValueError(f"{name} must be an integer.")
            if not (LEVEL_MIN <= v <= LEVEL_MAX):
                raise ValueError(f"{name} must be in [{LEVEL_MIN}, {LEVEL_MAX}].")
        return cls(
            mode=harmony,
            base_color=base_color,
            saturation_level=saturation_level,
            contrast_level=contrast_level,
            brightness_level=brightness_level,
        )


@dataclass(frozen=True)
class PaletteResult:
    """Generated light/dark token pair.

    Attributes
    ----------
    light, dark:
        Complete token sets for each variant.
    seed:
        The supplied base color, or a hex encoding of the drawn base hue.
    mode:
        Resolved concrete harmony mode (never ``RANDOM``).
    """

    light: ThemeTokens
    dark: ThemeTokens
    seed: str
    mode: HarmonyMode

    def as_dict(self) -> Dict[str, Any]:
        return {
            "light": self.light.as_dict(),
            "dark": self.dark.as_dict(),
            "seed": self.seed,
            "mode": self.mode.value,
        }


__all__ = [
    "TOKEN_KEYS",
    "LEVEL_MIN",
    "LEVEL_MAX",
    "HarmonyMode",
    "OklchColor",
    "ThemeTokens",
    "GenerationRequest",
    "PaletteResult",
    "is_hex_color",
    "is_valid_tokens",
]
