# backend/postboard/notifications/config.py

"""
通知（Email / LINE）に必要な設定値をまとめるモジュール。

各チャンネルは NOTIFY_*_ENABLED で明示的に有効化した場合のみ必須項目を要求する。
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from postboard.utils.config import get_env, get_env_bool, get_env_int


@dataclass(frozen=True)
class EmailSettings:
    """Gmail API 経由のメール通知設定。"""

    access_token: str
    api_base_url: str
    sender: str
    recipient: str


@dataclass(frozen=True)
class LineSettings:
    """LINE Messaging API 経由のプッシュ通知設定。"""

    channel_access_token: str
    api_base_url: str
    to: str


@dataclass(frozen=True)
class NotificationSettings:
    """通知全体の設定値コンテナ。無効なチャンネルは None。"""

    email: Optional[EmailSettings]
    line: Optional[LineSettings]
    timeout_seconds: int = 10


def _load_email_settings() -> Optional[EmailSettings]:
    if not get_env_bool("NOTIFY_EMAIL_ENABLED", default=False):
        return None

    return EmailSettings(
        access_token=get_env("GMAIL_ACCESS_TOKEN"),
        api_base_url=get_env(
            "GMAIL_API_BASE_URL",
            default="https://gmail.googleapis.com/gmail/v1",
            required=False,
        ),
        sender=get_env(
            "NOTIFY_EMAIL_SENDER",
            default="noreply@example.com",
            required=False,
        ),
        recipient=get_env("NOTIFY_EMAIL_RECIPIENT"),
    )


def _load_line_settings() -> Optional[LineSettings]:
    if not get_env_bool("NOTIFY_LINE_ENABLED", default=False):
        return None

    return LineSettings(
        channel_access_token=get_env("LINE_CHANNEL_ACCESS_TOKEN"),
        api_base_url=get_env(
            "LINE_API_BASE_URL",
            default="https://api.line.me",
            required=False,
        ),
        to=get_env("NOTIFY_LINE_TO"),
    )


@lru_cache()
def get_notification_settings() -> NotificationSettings:
    """
    環境変数から通知設定を読み込む。

    任意:
      - NOTIFY_EMAIL_ENABLED   (デフォルト: false)
      - NOTIFY_LINE_ENABLED    (デフォルト: false)
      - NOTIFY_TIMEOUT_SECONDS (デフォルト: 10)

    Email 有効時に必須:
      - GMAIL_ACCESS_TOKEN
      - NOTIFY_EMAIL_RECIPIENT

    LINE 有効時に必須:
      - LINE_CHANNEL_ACCESS_TOKEN
      - NOTIFY_LINE_TO
    """
    return NotificationSettings(
        email=_load_email_settings(),
        line=_load_line_settings(),
        timeout_seconds=get_env_int("NOTIFY_TIMEOUT_SECONDS", default=10),
    )
