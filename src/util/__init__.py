"""
どこで: `util` パッケージ。
何を: 設定ファイル（YAML）の読み込みユーティリティ。
"""
