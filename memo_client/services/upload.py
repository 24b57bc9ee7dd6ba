from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import requests

from memo_client.logging_setup import get_logger
from memo_client.settings import DEFAULT_HTTP_TIMEOUT

log = get_logger("upload")


@dataclass(frozen=True)
class UploadResult:
    url: Optional[str] = None
    error: Optional[str] = None


class HttpUploadAdapter:
    """Multipart upload of a local file; the service answers {url} or {error}."""

    def __init__(
        self,
        upload_url: str,
        *,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.upload_url = upload_url
        self.timeout = timeout
        self._session = session or requests.Session()

    def upload(self, path: str | Path) -> UploadResult:
        path = Path(path)
        mime = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        try:
            with path.open("rb") as fh:
                response = self._session.post(
                    self.upload_url,
                    files={"file": (path.name, fh, mime)},
                    timeout=self.timeout,
                )
        except OSError as exc:
            log.warning("Cannot read file for upload: %s (%s)", path, exc)
            return UploadResult(error=str(exc))
        except requests.RequestException as exc:
            log.warning("Upload request failed: %s", exc)
            return UploadResult(error=str(exc))

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if not response.ok:
            return UploadResult(error=str(body.get("error") or f"HTTP {response.status_code}"))
        if body.get("error"):
            return UploadResult(error=str(body["error"]))
        url = body.get("url")
        if not url:
            return UploadResult(error="upload response has no url")
        return UploadResult(url=str(url))
