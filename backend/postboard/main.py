# backend/postboard/main.py

"""
バックエンドアプリケーションのエントリーポイント。

主な責務:
- /posts の CRUD エンドポイントを公開する
- PUT /posts/{id} で更新と通知（ログ / Email / LINE）を行う
- 全リクエストのアクセスログを出力する
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from postboard.config import get_app_settings
from postboard.logging_config import configure_logging
from postboard.posts.router import router as posts_router

logger = logging.getLogger(__name__)


async def _log_request(request: Request, call_next):
    """
    受信したリクエストをログに出力するミドルウェア。
    """
    logger.info("Incoming request: %s %s", request.method, request.url)
    return await call_next(request)


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    リクエストの形式エラー（不正な JSON / 数値でない ID など）を 400 で返す。
    """
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    """
    FastAPI アプリケーションファクトリ。

    - 投稿エンドポイント (/posts)
    - ヘルスチェックエンドポイント (/health)
    """
    configure_logging(get_app_settings().log_level)

    app = FastAPI(title="Postboard Backend")

    app.middleware("http")(_log_request)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    # ルーター登録
    app.include_router(posts_router)

    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        """
        簡易ヘルスチェックエンドポイント。
        モニタリングや動作確認用。
        """
        return {"status": "ok"}

    return app


# uvicorn 実行時のエントリーポイント
app = create_app()
