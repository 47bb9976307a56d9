# backend/postboard/notifications/schemas.py

"""
通知まわりの共通スキーマ定義。

- 投稿に対する操作種別（create / update / delete）
- 通知チャンネル種別（どこに送るか）
- Notifier ごとの送信結果

※ 通知本文には投稿の title / body 以外の情報（トークン等）を含めないこと。
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class PostAction(str, Enum):
    """投稿に対して行われた操作。"""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class NotificationChannel(str, Enum):
    """
    通知の論理的なチャンネル種別。

    - INTERNAL_LOG: アプリ内部ログ（常に有効）
    - EMAIL: Gmail API 経由のメール
    - LINE: LINE Messaging API 経由のプッシュメッセージ
    """

    INTERNAL_LOG = "internal_log"
    EMAIL = "email"
    LINE = "line"


class NotificationResult(BaseModel):
    """
    Notifier 1 件分の送信結果。

    ok=False の場合は error にエラー内容（例外メッセージ）が入る。
    """

    notifier: str = Field(..., description="Notifier 名")
    ok: bool = Field(..., description="送信に成功したかどうか")
    error: Optional[str] = Field(None, description="失敗時のエラー内容")
    finished_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="送信処理の完了時刻（UTC）",
    )
