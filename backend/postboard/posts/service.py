# backend/postboard/posts/service.py

"""
PostStore と通知ディスパッチャをつなぐサービス層。

- 投稿の CRUD
- 通知付き更新（更新後に全 Notifier へ PostAction.UPDATE を送る）
"""

from __future__ import annotations

import logging
from typing import List, Optional

from postboard.notifications.schemas import PostAction
from postboard.notifications.service import NotificationDispatcher

from .schemas import Post, PostWriteRequest
from .store import PostStore

logger = logging.getLogger(__name__)


class PostService:
    """
    投稿のユースケースをまとめたサービス。

    ストアの例外（PostNotFoundError）はそのまま呼び出し元へ伝播させ、
    HTTP ステータスへの変換はルーター側で行う。
    """

    def __init__(
        self,
        store: PostStore,
        dispatcher: Optional[NotificationDispatcher] = None,
    ) -> None:
        self._store = store
        self._dispatcher = dispatcher if dispatcher is not None else NotificationDispatcher([])

    @property
    def store(self) -> PostStore:
        return self._store

    def create_post(self, request: PostWriteRequest) -> Post:
        post = self._store.add(request.title, request.body)
        logger.info("Post created: id=%d", post.id)
        return post

    def get_post(self, post_id: int) -> Post:
        return self._store.get(post_id)

    def list_posts(self) -> List[Post]:
        return self._store.list_all()

    def update_post(self, post_id: int, request: PostWriteRequest) -> Post:
        """
        title / body を両方ともリクエストの値で上書きする。
        """
        post = self._store.update(post_id, request.title, request.body)
        logger.info("Post updated: id=%d", post.id)
        return post

    def update_post_and_notify(
        self, post_id: int, request: PostWriteRequest
    ) -> Post:
        """
        投稿を更新し、登録済みの全 Notifier に通知する。

        - 存在しない ID の場合は通知せずに PostNotFoundError を投げる
        - 通知に 1 件でも失敗した場合は NotificationDispatchError を投げる
          （更新自体は取り消さない）
        """
        post = self.update_post(post_id, request)
        self._dispatcher.dispatch_or_raise(post, PostAction.UPDATE)
        return post

    def delete_post(self, post_id: int) -> None:
        self._store.delete(post_id)
        logger.info("Post deleted: id=%d", post_id)
