# backend/postboard/notifications/clients.py

"""
外部メッセージング API（Gmail / LINE）への HTTP クライアント。

どちらも EmailService / LineService インターフェースを満たし、
Notifier からは具体的な送信先を意識せずに呼び出せる。
"""

from __future__ import annotations

import base64
from email.message import EmailMessage
from typing import Any, Dict, Optional

import httpx

from .config import EmailSettings, LineSettings


class NotificationClientError(Exception):
    """通知クライアント全般の基底例外。"""


class NotificationHTTPError(NotificationClientError):
    """HTTP ステータスコードがエラーだった場合の例外。"""

    def __init__(self, service: str, status_code: int, body: Any | None = None) -> None:
        super().__init__(f"{service} API error: status_code={status_code}")
        self.service = service
        self.status_code = status_code
        self.body = body


class NotificationConnectionError(NotificationClientError):
    """接続エラー・タイムアウト時の例外。"""


def _post_json(
    service: str,
    url: str,
    *,
    payload: Dict[str, Any],
    headers: Dict[str, str],
    timeout: float,
    transport: Optional[httpx.BaseTransport],
) -> httpx.Response:
    """
    JSON を POST し、2xx 以外なら NotificationHTTPError を投げる共通処理。
    """
    try:
        with httpx.Client(timeout=timeout, transport=transport) as client:
            response = client.post(url, json=payload, headers=headers)
    except httpx.RequestError as exc:  # 接続エラー・タイムアウトなど
        raise NotificationConnectionError(f"Failed to call {service} API: {exc}") from exc

    if response.status_code // 100 != 2:
        try:
            body = response.json()
        except ValueError:
            body = response.text
        raise NotificationHTTPError(service, response.status_code, body)

    return response


class GmailService:
    """
    Gmail REST API（users.messages.send）の薄いラッパー。

    NOTE:
      - アクセストークンの取得・更新（OAuth フロー）はこのクラスの責務外。
        GMAIL_ACCESS_TOKEN に有効なトークンが入っている前提。
    """

    service_name = "Gmail"

    def __init__(
        self,
        settings: EmailSettings,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._settings = settings
        self._timeout = timeout
        self._transport = transport

    @property
    def send_url(self) -> str:
        return f"{self._settings.api_base_url.rstrip('/')}/users/me/messages/send"

    def _build_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._settings.access_token}",
            "Content-Type": "application/json",
        }

    @staticmethod
    def build_raw_message(sender: str, recipient: str, subject: str, body: str) -> str:
        """
        RFC 822 形式のメールを組み立て、base64url でエンコードした文字列を返す。
        """
        message = EmailMessage()
        message["From"] = sender
        message["To"] = recipient
        message["Subject"] = subject
        message.set_content(body)
        return base64.urlsafe_b64encode(message.as_bytes()).decode("ascii")

    def send_email(self, sender: str, recipient: str, subject: str, body: str) -> None:
        """
        メールを 1 通送信する。

        :raises NotificationHTTPError: Gmail API が 4xx/5xx を返した場合。
        :raises NotificationConnectionError: 接続エラーやタイムアウト時。
        """
        payload = {"raw": self.build_raw_message(sender, recipient, subject, body)}
        _post_json(
            self.service_name,
            self.send_url,
            payload=payload,
            headers=self._build_headers(),
            timeout=self._timeout,
            transport=self._transport,
        )


class LineMessagingService:
    """
    LINE Messaging API（push message）の薄いラッパー。
    """

    service_name = "LINE"

    def __init__(
        self,
        settings: LineSettings,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._settings = settings
        self._timeout = timeout
        self._transport = transport

    @property
    def push_url(self) -> str:
        return f"{self._settings.api_base_url.rstrip('/')}/v2/bot/message/push"

    def _build_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._settings.channel_access_token}",
            "Content-Type": "application/json",
        }

    def push_message(self, to: str, text: str) -> None:
        """
        テキストメッセージを 1 件プッシュ送信する。

        :raises NotificationHTTPError: LINE API が 4xx/5xx を返した場合。
        :raises NotificationConnectionError: 接続エラーやタイムアウト時。
        """
        payload = {
            "to": to,
            "messages": [{"type": "text", "text": text}],
        }
        _post_json(
            self.service_name,
            self.push_url,
            payload=payload,
            headers=self._build_headers(),
            timeout=self._timeout,
            transport=self._transport,
        )
