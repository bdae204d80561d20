from __future__ import annotations

import pytest

from themegen import contrast_ratio, relative_luminance, select_foreground
from themegen.contrast import BLACK, FOREGROUND_LUMINANCE_THRESHOLD, WHITE


def test_extremes() -> None:
    assert select_foreground("#000000") == WHITE
    assert select_foreground("#FFFFFF") == BLACK
    assert relative_luminance("#000000") == 0.0
    assert relative_luminance("#ffffff") == pytest.approx(1.0)


def test_midtone_boundary() -> None:
    # #808080 ≈ 0.216 > 0.179, #757575 ≈ 0.178 < 0.179
    assert select_foreground("#808080") == BLACK
    assert select_foreground("#767676") == BLACK
    assert select_foreground("#757575") == WHITE


@pytest.mark.parametrize("level", range(0, 256, 5))
def test_gray_ramp_matches_threshold(level: int) -> None:
    hex_str = f"#{level:02x}{level:02x}{level:02x}"
    expected = BLACK if relative_luminance(hex_str) > FOREGROUND_LUMINANCE_THRESHOLD else WHITE
    assert select_foreground(hex_str) == expected


def test_contrast_ratio_bounds() -> None:
    assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)
    assert contrast_ratio("#ffffff", "#000000") == pytest.approx(21.0)
    assert contrast_ratio("#3b82f6", "#3b82f6") == pytest.approx(1.0)


def test_malformed_hex_treated_as_black() -> None:
    assert relative_luminance("oops") == 0.0
    assert select_foreground("oops") == WHITE
