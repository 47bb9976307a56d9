# backend/postboard/posts/schemas.py

"""
投稿（Post）の内部モデルと /posts 用の入出力スキーマ定義。
"""

from typing import List

from pydantic import BaseModel, Field


class Post(BaseModel):
    """
    投稿 1 件分の内部モデル。

    id はストア側の連番カウンタで採番される。
    """

    id: int = Field(..., ge=1, description="投稿 ID（1 から始まる連番）")
    title: str = Field(..., description="タイトル")
    body: str = Field(..., description="本文")


class PostWriteRequest(BaseModel):
    """
    POST /posts, PATCH /posts/{id}, PUT /posts/{id} のリクエストボディ。

    省略されたフィールドは空文字として扱う（更新時は title / body を両方とも上書きする）。
    """

    title: str = Field("", description="タイトル")
    body: str = Field("", description="本文")


class PostResponse(BaseModel):
    """
    投稿 1 件分のレスポンス。
    """

    id: int = Field(..., description="投稿 ID")
    title: str = Field(..., description="タイトル")
    body: str = Field(..., description="本文")

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        return cls(id=post.id, title=post.title, body=post.body)


class PostUpdateStatusResponse(BaseModel):
    """
    PUT /posts/{id}（通知付き更新）のレスポンス。
    """

    status: str = Field("post updated", description="処理結果")


class NotificationFailureDetail(BaseModel):
    """通知に失敗した Notifier 1 件分の情報。"""

    notifier: str = Field(..., description="Notifier 名（email / line など）")
    error: str = Field(..., description="エラー内容")


class NotificationFailureResponse(BaseModel):
    """
    PUT /posts/{id} で通知に失敗した場合の detail 部分。
    """

    message: str
    failures: List[NotificationFailureDetail]
