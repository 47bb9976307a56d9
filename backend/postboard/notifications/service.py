# backend/postboard/notifications/service.py

"""
投稿更新通知のインターフェースと実装。

- PostUpdateNotifier: すべての Notifier が満たす共通インターフェース
- EmailNotifier / LineNotifier / LoggingNotifier: チャンネル別の実装
- NotificationDispatcher: 登録された全 Notifier に同じ呼び出し方でファンアウトする

Notifier の種類によって呼び出し方を変えることはしない。
ある Notifier が失敗しても残りの Notifier は実行し、失敗はまとめて呼び出し元へ返す。
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Protocol

from postboard.posts.schemas import Post

from .schemas import NotificationChannel, NotificationResult, PostAction

logger = logging.getLogger(__name__)

EMAIL_SUBJECT = "Post Update Notification"


class NotificationDispatchError(RuntimeError):
    """1 つ以上の Notifier が失敗した場合の例外。"""

    def __init__(self, results: Iterable[NotificationResult]) -> None:
        self.results: List[NotificationResult] = list(results)
        self.failures: List[NotificationResult] = [r for r in self.results if not r.ok]
        names = ", ".join(r.notifier for r in self.failures)
        super().__init__(f"{len(self.failures)} notifier(s) failed: {names}")


def build_post_update_text(post: Post, action: PostAction) -> str:
    """
    通知本文（プレーンテキスト）を組み立てる。
    """
    return (
        "The post has been updated with the following details:\n"
        f"Title: {post.title}\n"
        f"Body: {post.body}\n"
        f"Action: {action.value}"
    )


class PostUpdateNotifier(Protocol):
    """
    投稿更新通知の最小インターフェース。

    失敗時は例外を投げること（戻り値で成否を返さない）。
    """

    name: str

    def notify_post_updated(self, post: Post, action: PostAction) -> None:  # pragma: no cover - Protocol
        ...


class EmailService(Protocol):
    """メール送信サービスのインターフェース。"""

    def send_email(self, sender: str, recipient: str, subject: str, body: str) -> None:  # pragma: no cover - Protocol
        ...


class LineService(Protocol):
    """LINE プッシュメッセージ送信サービスのインターフェース。"""

    def push_message(self, to: str, text: str) -> None:  # pragma: no cover - Protocol
        ...


class EmailNotifier:
    """
    EmailService 経由で投稿更新をメール通知する Notifier。
    """

    name = NotificationChannel.EMAIL.value

    def __init__(
        self,
        email_service: EmailService,
        *,
        recipient: str,
        sender: str = "noreply@example.com",
    ) -> None:
        self._email_service = email_service
        self._recipient = recipient
        self._sender = sender

    def notify_post_updated(self, post: Post, action: PostAction) -> None:
        self._email_service.send_email(
            self._sender,
            self._recipient,
            EMAIL_SUBJECT,
            build_post_update_text(post, action),
        )


class LineNotifier:
    """
    LineService 経由で投稿更新を LINE にプッシュ通知する Notifier。
    """

    name = NotificationChannel.LINE.value

    def __init__(self, line_service: LineService, *, to: str) -> None:
        self._line_service = line_service
        self._to = to

    def notify_post_updated(self, post: Post, action: PostAction) -> None:
        self._line_service.push_message(self._to, build_post_update_text(post, action))


class LoggingNotifier:
    """
    投稿更新を Python の logger に記録するだけの Notifier。

    外部サービスへの送信は行わない。デフォルト構成では常に登録される。
    """

    name = NotificationChannel.INTERNAL_LOG.value

    def __init__(self, logger_: logging.Logger | None = None) -> None:
        self._logger = logger_ or logger

    def notify_post_updated(self, post: Post, action: PostAction) -> None:
        self._logger.info(
            "[%s] post id=%d title=%r", action.value, post.id, post.title
        )


class NotificationDispatcher:
    """
    複数の PostUpdateNotifier に通知をファンアウトするサービス。

    - 登録順に 1 つずつ同期的に呼び出す（リトライ・並列化はしない）
    - 失敗した Notifier があっても残りは必ず実行する
    """

    def __init__(self, notifiers: Iterable[PostUpdateNotifier]) -> None:
        self._notifiers: List[PostUpdateNotifier] = list(notifiers)

    @property
    def notifiers(self) -> List[PostUpdateNotifier]:
        return list(self._notifiers)

    def dispatch(self, post: Post, action: PostAction) -> List[NotificationResult]:
        """
        全 Notifier に通知し、Notifier ごとの結果を返す。
        """
        results: List[NotificationResult] = []
        for notifier in self._notifiers:
            name = getattr(notifier, "name", type(notifier).__name__)
            try:
                notifier.notify_post_updated(post, action)
            except Exception as exc:  # noqa: BLE001 - 失敗は結果として集約する
                logger.exception("Notifier '%s' failed. Continuing with others.", name)
                results.append(NotificationResult(notifier=name, ok=False, error=str(exc)))
                continue
            results.append(NotificationResult(notifier=name, ok=True))
        return results

    def dispatch_or_raise(self, post: Post, action: PostAction) -> List[NotificationResult]:
        """
        dispatch() を実行し、1 つでも失敗があれば NotificationDispatchError を投げる。
        """
        results = self.dispatch(post, action)
        if any(not r.ok for r in results):
            raise NotificationDispatchError(results)
        return results
