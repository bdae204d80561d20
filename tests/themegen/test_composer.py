from __future__ import annotations

import pytest

from themegen import TOKEN_KEYS, Modifiers, compose_theme, is_valid_tokens, select_foreground, to_oklch
from themegen.composer import STATUS_HUES, build_dark_anchors, build_light_anchors


HUES = [259.8, 289.8, 229.8, 274.8, 244.8]


def test_modifiers_from_levels() -> None:
    mods = Modifiers.from_levels(2, -1, 3)
    assert mods.saturation_multiplier == pytest.approx(1.24)
    assert mods.contrast_shift == pytest.approx(-0.02)
    assert mods.brightness_shift == pytest.approx(0.075)


@pytest.mark.parametrize(
    "level, expected",
    [(0, 0.14), (-5, 0.08), (-2, 0.1064), (2, 0.1736), (5, 0.18)],
)
def test_base_chroma_is_clamped(level: int, expected: float) -> None:
    assert Modifiers.from_levels(level, 0, 0).base_chroma == pytest.approx(expected)


@pytest.mark.parametrize("bri", range(-5, 6))
def test_background_anchors_stay_in_range(bri: int) -> None:
    mods = Modifiers.from_levels(0, 0, bri)
    assert 0.92 <= build_light_anchors(mods).bg.L <= 0.99
    assert 0.05 <= build_dark_anchors(mods).bg.L <= 0.12
    assert build_light_anchors(mods).text.L >= 0.10
    assert build_dark_anchors(mods).text.L <= 0.98


def test_dark_brand_and_status_are_lifted() -> None:
    mods = Modifiers.from_levels(0, 0, 0)
    light = build_light_anchors(mods)
    dark = build_dark_anchors(mods)
    for name in ("primary", "secondary", "accent", "good", "warn", "bad"):
        boost = getattr(dark, name).L - getattr(light, name).L
        assert 0.06 - 1e-9 <= boost <= 0.10 + 1e-9, name


def test_compose_theme_structure() -> None:
    mods = Modifiers.from_levels(0, 0, 0)
    tokens = compose_theme(HUES, build_light_anchors(mods), mods)
    assert list(tokens) == list(TOKEN_KEYS)
    assert is_valid_tokens(tokens)
    assert tokens["textOnColor"] == "#ffffff"
    assert tokens["ring"] == tokens["primary"]
    for key in ("primary", "secondary", "accent", "good", "warn", "bad"):
        assert tokens[f"{key}Fg"] == select_foreground(tokens[key])


def test_neutrals_are_nearly_gray() -> None:
    mods = Modifiers.from_levels(5, 0, 0)
    tokens = compose_theme(HUES, build_light_anchors(mods), mods)
    for key in ("bg", "card", "card2", "text", "textMuted", "border"):
        assert to_oklch(tokens[key]).C < 0.03, key


def test_status_hues_ignore_harmony() -> None:
    mods = Modifiers.from_levels(0, 0, 0)
    a = compose_theme([10.0, 20.0, 30.0, 40.0, 50.0], build_light_anchors(mods), mods)
    b = compose_theme([200.0, 210.0, 220.0, 230.0, 240.0], build_light_anchors(mods), mods)
    for key in STATUS_HUES:
        assert a[key] == b[key]
        assert a[key] != a["primary"]
