# backend/postboard/posts/store.py

"""
投稿のインメモリストア。

- id -> Post の dict と連番カウンタを 1 つのロックで保護する
- 取得系・更新系を含むすべての操作がロック下で行われる
- 呼び出し元にはコピーを返し、ストア内部の状態を直接触らせない
"""

from __future__ import annotations

import threading
from typing import Dict, List

from .schemas import Post


class PostNotFoundError(LookupError):
    """指定 ID の投稿が存在しない場合の例外。"""

    def __init__(self, post_id: int) -> None:
        super().__init__(f"post not found: id={post_id}")
        self.post_id = post_id


class PostStore:
    """
    スレッドセーフな投稿ストア。

    ID は単調増加で、削除済みの ID が再利用されることはない。
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._posts: Dict[int, Post] = {}
        self._last_id = 0

    def add(self, title: str, body: str) -> Post:
        """
        新しい投稿を採番して登録し、そのコピーを返す。
        """
        with self._lock:
            self._last_id += 1
            post = Post(id=self._last_id, title=title, body=body)
            self._posts[post.id] = post
            return post.model_copy()

    def get(self, post_id: int) -> Post:
        with self._lock:
            post = self._posts.get(post_id)
            if post is None:
                raise PostNotFoundError(post_id)
            return post.model_copy()

    def list_all(self) -> List[Post]:
        """
        全投稿を ID 昇順で返す。
        """
        with self._lock:
            return [self._posts[post_id].model_copy() for post_id in sorted(self._posts)]

    def update(self, post_id: int, title: str, body: str) -> Post:
        """
        既存投稿の title / body を置き換える。

        存在しない ID の場合は何も変更せずに PostNotFoundError を投げる。
        """
        with self._lock:
            if post_id not in self._posts:
                raise PostNotFoundError(post_id)
            post = Post(id=post_id, title=title, body=body)
            self._posts[post_id] = post
            return post.model_copy()

    def delete(self, post_id: int) -> None:
        with self._lock:
            if post_id not in self._posts:
                raise PostNotFoundError(post_id)
            del self._posts[post_id]

    def clear(self) -> None:
        """
        全投稿を削除し、カウンタも初期化する（テスト用）。
        """
        with self._lock:
            self._posts.clear()
            self._last_id = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._posts)
