# backend/postboard/notifications/factory.py

"""
通知ディスパッチャの簡易ファクトリ。

- LoggingNotifier は常に登録する
- NOTIFY_EMAIL_ENABLED / NOTIFY_LINE_ENABLED が有効なら EmailNotifier / LineNotifier を追加する
"""

from __future__ import annotations

import threading
from typing import List, Optional

from .clients import GmailService, LineMessagingService
from .config import NotificationSettings, get_notification_settings
from .service import (
    EmailNotifier,
    LineNotifier,
    LoggingNotifier,
    NotificationDispatcher,
    PostUpdateNotifier,
)

_dispatcher: Optional[NotificationDispatcher] = None
_dispatcher_lock = threading.Lock()


def build_notification_dispatcher(
    settings: Optional[NotificationSettings] = None,
) -> NotificationDispatcher:
    """
    設定値に応じた Notifier 群を持つ NotificationDispatcher を生成する。
    """
    settings = settings or get_notification_settings()
    notifiers: List[PostUpdateNotifier] = [LoggingNotifier()]

    if settings.email is not None:
        gmail = GmailService(settings.email, timeout=settings.timeout_seconds)
        notifiers.append(
            EmailNotifier(
                gmail,
                recipient=settings.email.recipient,
                sender=settings.email.sender,
            )
        )

    if settings.line is not None:
        line = LineMessagingService(settings.line, timeout=settings.timeout_seconds)
        notifiers.append(LineNotifier(line, to=settings.line.to))

    return NotificationDispatcher(notifiers)


def get_notification_dispatcher() -> NotificationDispatcher:
    """
    アプリ全体で共有する NotificationDispatcher を返す。

    初回呼び出し時にのみ生成し、それ以降は同じインスタンスを返す。
    """
    global _dispatcher
    with _dispatcher_lock:
        if _dispatcher is None:
            _dispatcher = build_notification_dispatcher()
        return _dispatcher


def reset_notification_dispatcher() -> None:
    """
    テスト用に共有ディスパッチャと設定キャッシュをリセットする。
    """
    global _dispatcher
    with _dispatcher_lock:
        _dispatcher = None
    get_notification_settings.cache_clear()


__all__ = [
    "NotificationDispatcher",
    "build_notification_dispatcher",
    "get_notification_dispatcher",
    "reset_notification_dispatcher",
]
