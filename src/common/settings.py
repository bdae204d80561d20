"""
どこで: `common.settings`
何を: themegen の環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_str

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_MODES = {
    "random",
    "monochrome",
    "analogous",
    "complementary",
    "split-complementary",
    "triadic",
    "tetradic",
    "compound",
    "triadic-split",
}


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str = "WARNING"
    DEBUG_GAMUT: bool = False

    # CLI
    DEFAULT_MODE: str = "random"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 未設定/候補外の値は既定値へフォールバックする。
    """
    level = env_str("THEMEGEN_LOG_LEVEL", "WARNING").upper()
    _settings.LOG_LEVEL = level if level in _LOG_LEVELS else "WARNING"
    _settings.DEBUG_GAMUT = env_bool("THEMEGEN_DEBUG_GAMUT", False)
    _settings.DEFAULT_MODE = env_str("THEMEGEN_DEFAULT_MODE", "random", choices=_MODES)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
