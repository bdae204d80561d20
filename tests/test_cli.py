from __future__ import annotations

"""scripts/generate_theme.py の CLI スモークテスト。"""

import json

import pytest

from scripts.generate_theme import build_payload, main
from themegen import TOKEN_KEYS, generate_theme


def test_cli_prints_json_envelope(capsys: pytest.CaptureFixture[str], clean_env) -> None:
    rc = main(["--mode", "analogous", "--base-color", "#3B82F6"])
    assert rc == 0
    data = json.loads(capsys.readouterr().out)
    assert list(data["light"]) == list(TOKEN_KEYS)
    assert data["light"]["primary"] == "#3D6FC2"
    assert data["metadata"]["style"] == "analogous"
    assert data["metadata"]["seed"] == "#3B82F6"
    assert data["metadata"]["colorSpace"] == "OKLCH"
    assert "nature" in data["metadata"]["philosophy"]


def test_cli_format_and_entropy(capsys: pytest.CaptureFixture[str], clean_env) -> None:
    assert main(["--mode", "random", "--entropy", "demo", "--format", "rgb"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["metadata"]["style"] == "complementary"
    assert data["dark"]["textOnColor"] == "255, 255, 255"


def test_cli_rejects_invalid_arguments(capsys: pytest.CaptureFixture[str], clean_env) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--mode", "analogous", "--base-color", "blue"])
    assert exc.value.code == 2
    assert "base_color" in capsys.readouterr().err
    with pytest.raises(SystemExit):
        main(["--saturation", "9"])
    with pytest.raises(SystemExit):
        main(["--mode", "pastel"])


def test_build_payload_timestamp() -> None:
    payload = build_payload(generate_theme("triadic", "#10B981"), "hex", timestamp_ms=123)
    assert payload["metadata"]["timestamp"] == 123
    assert payload["metadata"]["style"] == "triadic"
