from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

NoteId = Any  # opaque, assigned by the server (int or str)


@dataclass(frozen=True)
class Note:
    id: Optional[NoteId]
    title: str
    content: str

    @classmethod
    def from_payload(cls, payload: dict) -> "Note":
        title = payload.get("title")
        content = payload.get("content")
        return cls(
            id=payload.get("id"),
            title="" if title is None else str(title),
            content="" if content is None else str(content),
        )
