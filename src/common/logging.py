"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- 既定では各モジュールが `logging.getLogger(__name__)` でロガーを取得する。
- themegen 本体はハンドラを設定しない（ライブラリとして振る舞う）。
- アプリ/CLI 側で設定が無い場合に、妥当な最小構成を 1 度だけ適用するヘルパーを提供する。
"""

from __future__ import annotations

import logging


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        from .settings import get as _get_settings

        level = _get_settings().LOG_LEVEL
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return int(level)


def setup_default_logging(level: int | str | None = None) -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - `level` 省略時は `common.settings` の LOG_LEVEL（THEMEGEN_LOG_LEVEL）を使う
    - ルートロガーにハンドラが既にあればレベル以外は触らない
    - 上位のランナー/CLI から呼び出す想定
    """
    lvl = _resolve_level(level)
    logging.getLogger("themegen").setLevel(lvl)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
