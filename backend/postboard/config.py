# backend/postboard/config.py

"""
アプリケーション本体の設定値をまとめるモジュール。
"""

from dataclasses import dataclass
from functools import lru_cache

from postboard.utils.config import get_env, get_env_int


@dataclass(frozen=True)
class AppSettings:
    """HTTP サーバ起動とログ出力に関する設定値コンテナ。"""

    host: str
    port: int
    log_level: str


@lru_cache()
def get_app_settings() -> AppSettings:
    """
    環境変数からアプリ設定を読み込む。

    任意:
      - POSTBOARD_HOST (デフォルト: 0.0.0.0)
      - POSTBOARD_PORT (デフォルト: 8080)
      - LOG_LEVEL      (デフォルト: INFO)
    """
    host = get_env("POSTBOARD_HOST", default="0.0.0.0", required=False)
    port = get_env_int("POSTBOARD_PORT", default=8080)
    log_level = get_env("LOG_LEVEL", default="INFO", required=False).upper()

    return AppSettings(host=host, port=port, log_level=log_level)
