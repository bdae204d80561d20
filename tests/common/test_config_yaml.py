from __future__ import annotations

from pathlib import Path

from util.utils import generation_defaults, load_config


def test_load_config_merges_top_level(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text(
        "generation:\n  mode: analogous\n  saturation: 1\nother: 1\n", encoding="utf-8"
    )
    (tmp_path / "config.yaml").write_text("generation:\n  mode: triadic\n", encoding="utf-8")
    cfg = load_config(tmp_path)
    # トップレベルのみ上書き（ネストはマージしない）
    assert cfg["generation"] == {"mode": "triadic"}
    assert cfg["other"] == 1


def test_load_config_is_fail_soft(tmp_path: Path) -> None:
    assert load_config(tmp_path) == {}
    (tmp_path / "config.yaml").write_text("generation: [unclosed\n", encoding="utf-8")
    assert load_config(tmp_path) == {}
    (tmp_path / "config.yaml").write_text("- just\n- a list\n", encoding="utf-8")
    assert load_config(tmp_path) == {}


def test_generation_defaults_filters_keys() -> None:
    cfg = {"generation": {"mode": "compound", "brightness": -1, "unknown": 3, "base_color": None}}
    assert generation_defaults(cfg) == {"mode": "compound", "brightness": -1}
    assert generation_defaults({"generation": "oops"}) == {}
    assert generation_defaults({}) == {}


def test_repository_default_config() -> None:
    root = Path(__file__).resolve().parents[2]
    defaults = generation_defaults(load_config(root))
    assert defaults["mode"] == "random"
    assert defaults["format"] == "hex"
