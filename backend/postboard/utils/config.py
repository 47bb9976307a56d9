# backend/postboard/utils/config.py

"""
環境変数読み取り用のユーティリティ。
アプリ本体の設定だけでなく、通知（Email / LINE）の設定でも共通利用する。
"""

import os
from typing import Optional


class EnvVarMissingError(RuntimeError):
    """必須環境変数が設定されていない場合に投げる例外。"""

    def __init__(self, name: str) -> None:
        super().__init__(f"Required environment variable '{name}' is not set.")
        self.name = name


class EnvVarInvalidError(RuntimeError):
    """環境変数の値が期待する型に変換できない場合に投げる例外。"""

    def __init__(self, name: str, raw: str, expected: str) -> None:
        super().__init__(
            f"Invalid {expected} value for environment variable '{name}': {raw!r}"
        )
        self.name = name
        self.raw = raw


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def get_env(
    name: str,
    default: Optional[str] = None,
    *,
    required: bool = True,
) -> str:
    """
    環境変数を取得するヘルパー。

    :param name: 環境変数名
    :param default: デフォルト値（required=False の場合のみ使用）
    :param required: True の場合、未設定なら例外を投げる
    :return: 文字列値
    """
    value = os.getenv(name)

    if value is None or value == "":
        if required:
            raise EnvVarMissingError(name)
        return default

    return value


def get_env_int(name: str, default: int) -> int:
    """
    整数の環境変数を取得する。未設定なら default、不正値なら EnvVarInvalidError。
    """
    raw = get_env(name, required=False)
    if raw is None:
        return default

    try:
        return int(raw)
    except ValueError as exc:
        raise EnvVarInvalidError(name, raw, "integer") from exc


def get_env_bool(name: str, default: bool = False) -> bool:
    """
    真偽値の環境変数を取得する。

    "1/true/yes/on" を True、"0/false/no/off" を False とみなす（大文字小文字は無視）。
    """
    raw = get_env(name, required=False)
    if raw is None:
        return default

    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise EnvVarInvalidError(name, raw, "boolean")
