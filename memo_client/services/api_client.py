from __future__ import annotations

from typing import Any, Optional

import requests

from memo_client.core.errors import ApiStatusError, TransportFailure
from memo_client.core.models import Note, NoteId
from memo_client.logging_setup import get_logger
from memo_client.settings import DEFAULT_HTTP_TIMEOUT

log = get_logger("api")

VERIFY_PASSWORD_PATH = "/api/verify-password"
MEMOS_PATH = "/api/memos"
UPDATE_SETTINGS_PATH = "/api/update-settings"


class MemoApiClient:
    """
    Thin JSON wrappers over the memo backend. No retry, no caching.

    Every failure except a rejected password surfaces as TransportFailure;
    callers (the state components) catch and log it.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _send(self, method: str, path: str, payload: Optional[dict] = None) -> requests.Response:
        try:
            return self._session.request(
                method,
                self._url(path),
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            log.debug("%s %s failed: %s", method, path, exc)
            raise TransportFailure(f"{method} {path}: {exc}") from exc

    def _request_json(self, method: str, path: str, payload: Optional[dict] = None) -> Any:
        response = self._send(method, path, payload)
        if not response.ok:
            raise ApiStatusError(method, path, response.status_code)
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            raise TransportFailure(f"{method} {path}: invalid JSON response") from exc

    # ---- endpoints ----

    def verify_password(self, password: str) -> bool:
        response = self._send("POST", VERIFY_PASSWORD_PATH, {"password": password})
        log.debug("verify-password -> %s", response.status_code)
        return response.ok

    def list_memos(self) -> list[Note]:
        body = self._request_json("GET", MEMOS_PATH)
        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, list):
            return []
        return [Note.from_payload(item) for item in data if isinstance(item, dict)]

    def create_memo(self, title: str, content: str) -> Any:
        return self._request_json("POST", MEMOS_PATH, {"title": title, "content": content})

    def update_memo(self, note_id: NoteId, title: str, content: str) -> Any:
        return self._request_json(
            "PUT", MEMOS_PATH, {"id": note_id, "title": title, "content": content}
        )

    def delete_memo(self, note_id: NoteId) -> Any:
        return self._request_json("DELETE", MEMOS_PATH, {"id": note_id})

    def update_settings(self, theme: str, password: Optional[str] = None) -> Any:
        payload: dict[str, Any] = {"theme": theme}
        # пустой пароль не отправляем вовсе, чтобы не затереть текущий
        if password:
            payload["password"] = password
        return self._request_json("POST", UPDATE_SETTINGS_PATH, payload)
