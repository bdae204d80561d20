"""共通フィクスチャ。

- 乱数シード固定
- themegen 関連の環境変数を既定状態に戻す
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from common.settings import reload_from_env

_ENV_VARS = ("THEMEGEN_LOG_LEVEL", "THEMEGEN_DEBUG_GAMUT", "THEMEGEN_DEFAULT_MODE")


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """THEMEGEN_* を消して設定を再読込し、終了後にも再読込する。"""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reload_from_env()
    yield monkeypatch
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reload_from_env()
