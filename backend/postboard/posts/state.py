# backend/postboard/posts/state.py

"""
PostStore / PostService のシンプルな状態管理モジュール。

- アプリ全体で共有するインスタンスを提供（FastAPI の Depends から利用）
- テスト時にリセットできるようにする
"""

from __future__ import annotations

import threading
from typing import Optional

from postboard.notifications.factory import (
    get_notification_dispatcher,
    reset_notification_dispatcher,
)

from .service import PostService
from .store import PostStore

_post_store: Optional[PostStore] = None
_post_service: Optional[PostService] = None
# get_post_service から get_post_store へ再入する
_state_lock = threading.RLock()


def get_post_store() -> PostStore:
    """
    共有の PostStore インスタンスを返す。

    初回呼び出し時にのみ生成し、それ以降は同じインスタンスを返す。
    """
    global _post_store
    with _state_lock:
        if _post_store is None:
            _post_store = PostStore()
        return _post_store


def get_post_service() -> PostService:
    """
    共有の PostService インスタンスを返す。
    """
    global _post_service
    with _state_lock:
        if _post_service is None:
            _post_service = PostService(
                get_post_store(),
                dispatcher=get_notification_dispatcher(),
            )
        return _post_service


def reset_state() -> None:
    """
    テスト用にストア・サービス・通知ディスパッチャのシングルトン状態をリセットする。
    """
    global _post_store, _post_service
    with _state_lock:
        _post_store = None
        _post_service = None
    reset_notification_dispatcher()
