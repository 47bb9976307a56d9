# backend/postboard/posts/router.py

"""
投稿用の FastAPI ルーター定義。

- POST   /posts
- GET    /posts
- GET    /posts/{post_id}
- PATCH  /posts/{post_id}
- PUT    /posts/{post_id}  (更新 + 通知)
- DELETE /posts/{post_id}

リクエストのバリデーションエラー（不正な JSON / 数値でない ID）は
main.py で登録している例外ハンドラにより 400 に変換される。

書き込み系のボディは FastAPI の自動バインドを使わずに生のバイト列で受け取り、
ハンドラ内で PostWriteRequest に変換する。
- Content-Type に関係なく JSON として解釈する
- 更新系では「投稿の存在確認 (404)」を「ボディの検証 (400)」より先に行う
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from postboard.notifications.service import NotificationDispatchError

from .schemas import (
    NotificationFailureDetail,
    NotificationFailureResponse,
    PostResponse,
    PostUpdateStatusResponse,
    PostWriteRequest,
)
from .service import PostService
from .state import get_post_service
from .store import PostNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])

# 64bit 符号付き整数の上限。これを超える ID は数値として不正扱い (400)
MAX_POST_ID = 2**63 - 1

_WRITE_REQUEST_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {"schema": PostWriteRequest.model_json_schema()}
        },
    }
}


async def _raw_body(request: Request) -> bytes:
    """
    リクエストボディを未解釈のまま取得する依存関数。
    """
    return await request.body()


def _parse_write_request(raw: bytes) -> PostWriteRequest:
    """
    生のボディを PostWriteRequest に変換する。

    不正な JSON や型違いは RequestValidationError として投げ、400 に変換させる。
    """
    try:
        return PostWriteRequest.model_validate_json(raw)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False, include_input=False)) from exc


def _not_found(exc: PostNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


def _internal_error(action: str, exc: Exception) -> HTTPException:
    # 詳細はログ側に残し、クライアントには概要のみ返す
    logger.exception("Unexpected error while trying to %s.", action)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}.",
    )


def _ensure_post_exists(service: PostService, post_id: int) -> None:
    try:
        service.get_post(post_id)
    except PostNotFoundError as exc:
        raise _not_found(exc) from exc


@router.post(
    "",
    response_model=PostResponse,
    summary="投稿を作成",
    openapi_extra=_WRITE_REQUEST_BODY,
)
def create_post(
    raw_body: bytes = Depends(_raw_body),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """
    新しい投稿を作成し、採番された ID 付きで返す。
    """
    body = _parse_write_request(raw_body)
    try:
        post = service.create_post(body)
    except Exception as exc:  # noqa: BLE001
        raise _internal_error("create post", exc) from exc

    return PostResponse.from_post(post)


@router.get(
    "",
    response_model=List[PostResponse],
    summary="投稿一覧を取得",
    description="全投稿を ID 昇順で返す。",
)
def list_posts(service: PostService = Depends(get_post_service)) -> List[PostResponse]:
    try:
        posts = service.list_posts()
    except Exception as exc:  # noqa: BLE001
        raise _internal_error("list posts", exc) from exc

    return [PostResponse.from_post(post) for post in posts]


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="投稿を 1 件取得",
)
def get_post(
    post_id: int = Path(..., le=MAX_POST_ID),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    try:
        post = service.get_post(post_id)
    except PostNotFoundError as exc:
        raise _not_found(exc) from exc
    except Exception as exc:  # noqa: BLE001
        raise _internal_error("get post", exc) from exc

    return PostResponse.from_post(post)


@router.patch(
    "/{post_id}",
    response_model=PostResponse,
    summary="投稿を更新",
    description="title / body を両方ともリクエストの値で上書きする。通知は行わない。",
    openapi_extra=_WRITE_REQUEST_BODY,
)
def update_post(
    post_id: int = Path(..., le=MAX_POST_ID),
    raw_body: bytes = Depends(_raw_body),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    _ensure_post_exists(service, post_id)
    body = _parse_write_request(raw_body)

    try:
        post = service.update_post(post_id, body)
    except PostNotFoundError as exc:
        raise _not_found(exc) from exc
    except Exception as exc:  # noqa: BLE001
        raise _internal_error("update post", exc) from exc

    return PostResponse.from_post(post)


@router.put(
    "/{post_id}",
    response_model=PostUpdateStatusResponse,
    summary="投稿を更新して通知",
    description=(
        "投稿を更新したあと、登録済みの全 Notifier（ログ / Email / LINE）に通知する。"
        "1 つでも通知に失敗した場合は 500 を返し、失敗した Notifier の一覧を detail に含める。"
    ),
    openapi_extra=_WRITE_REQUEST_BODY,
)
def update_post_and_notify(
    post_id: int = Path(..., le=MAX_POST_ID),
    raw_body: bytes = Depends(_raw_body),
    service: PostService = Depends(get_post_service),
) -> PostUpdateStatusResponse:
    _ensure_post_exists(service, post_id)
    body = _parse_write_request(raw_body)

    try:
        service.update_post_and_notify(post_id, body)
    except PostNotFoundError as exc:
        raise _not_found(exc) from exc
    except NotificationDispatchError as exc:
        failure = NotificationFailureResponse(
            message=str(exc),
            failures=[
                NotificationFailureDetail(notifier=r.notifier, error=r.error or "")
                for r in exc.failures
            ],
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=failure.model_dump(),
        ) from exc
    except Exception as exc:  # noqa: BLE001
        raise _internal_error("update post", exc) from exc

    return PostUpdateStatusResponse()


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="投稿を削除",
)
def delete_post(
    post_id: int = Path(..., le=MAX_POST_ID),
    service: PostService = Depends(get_post_service),
) -> Response:
    try:
        service.delete_post(post_id)
    except PostNotFoundError as exc:
        raise _not_found(exc) from exc
    except Exception as exc:  # noqa: BLE001
        raise _internal_error("delete post", exc) from exc

    return Response(status_code=status.HTTP_204_NO_CONTENT)
