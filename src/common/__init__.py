"""
どこで: `common` パッケージ。
何を: 環境変数パース・設定スナップショット・ロギング初期化の軽量ユーティリティ。
なぜ: themegen 本体と CLI の双方から同じ設定経路を再利用するため。
"""

from .logging import setup_default_logging
from .settings import get, reload_from_env

__all__ = [
    "get",
    "reload_from_env",
    "setup_default_logging",
]
