# backend/tests/test_posts_service.py

from unittest.mock import MagicMock

import pytest

from postboard.notifications.schemas import PostAction
from postboard.notifications.service import (
    NotificationDispatchError,
    NotificationDispatcher,
)
from postboard.posts.schemas import PostWriteRequest
from postboard.posts.service import PostService
from postboard.posts.store import PostNotFoundError, PostStore


def test_crud_flow() -> None:
    service = PostService(PostStore())

    created = service.create_post(PostWriteRequest(title="t", body="b"))
    updated = service.update_post(created.id, PostWriteRequest(title="t2", body="b2"))

    assert service.get_post(created.id) == updated
    assert service.list_posts() == [updated]

    service.delete_post(created.id)
    with pytest.raises(PostNotFoundError):
        service.get_post(created.id)


def test_update_post_and_notify_dispatches_update_action() -> None:
    dispatcher = MagicMock(spec=NotificationDispatcher)
    dispatcher.dispatch_or_raise.return_value = []
    service = PostService(PostStore(), dispatcher=dispatcher)
    created = service.create_post(PostWriteRequest(title="t", body="b"))

    updated = service.update_post_and_notify(created.id, PostWriteRequest(title="n", body="m"))

    assert updated.title == "n"
    assert updated.body == "m"
    dispatcher.dispatch_or_raise.assert_called_once()
    post, action = dispatcher.dispatch_or_raise.call_args.args
    assert post.title == "n"
    assert action == PostAction.UPDATE


def test_update_post_and_notify_unknown_id_skips_notification() -> None:
    dispatcher = MagicMock(spec=NotificationDispatcher)
    service = PostService(PostStore(), dispatcher=dispatcher)

    with pytest.raises(PostNotFoundError):
        service.update_post_and_notify(1, PostWriteRequest(title="x", body="y"))

    dispatcher.dispatch_or_raise.assert_not_called()


def test_update_post_and_notify_propagates_dispatch_error() -> None:
    class Broken:
        name = "line"

        def notify_post_updated(self, post, action) -> None:
            raise ValueError("boom")

    service = PostService(PostStore(), dispatcher=NotificationDispatcher([Broken()]))
    created = service.create_post(PostWriteRequest(title="t", body="b"))

    with pytest.raises(NotificationDispatchError) as excinfo:
        service.update_post_and_notify(created.id, PostWriteRequest(title="n", body="m"))

    assert [r.notifier for r in excinfo.value.failures] == ["line"]
    assert service.get_post(created.id).title == "n"


def test_service_without_dispatcher_notifies_nobody() -> None:
    service = PostService(PostStore())
    created = service.create_post(PostWriteRequest(title="t", body="b"))

    updated = service.update_post_and_notify(created.id, PostWriteRequest())

    assert updated.id == created.id
    assert updated.title == ""
    assert service.get_post(created.id) == updated
