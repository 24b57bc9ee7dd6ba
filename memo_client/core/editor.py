from __future__ import annotations

import uuid
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from memo_client.core.markup import image_markup_line
from memo_client.core.models import Note, NoteId
from memo_client.core.observable import Observable
from memo_client.core.tasks import ImmediateRunner, TaskRunner
from memo_client.logging_setup import get_logger

log = get_logger("editor")


class EditorMode(str, Enum):
    IDLE = "idle"
    CREATING = "creating"
    MODIFYING = "modifying"


class NoteEditor(Observable):
    """
    Черновик заметки и режим редактора (idle | creating | modifying).

    Каждый новый черновик получает свой token: ответы загрузки картинок,
    пришедшие после cancel/save/нового черновика, отбрасываются.
    """

    def __init__(self, api, uploader=None, *, runner: TaskRunner | None = None) -> None:
        super().__init__()
        self._api = api
        self._uploader = uploader
        self._runner = runner or ImmediateRunner()
        self._saved_listeners: list[Callable[[Note], None]] = []

        self.mode = EditorMode.IDLE
        self.note_id: NoteId | None = None
        self.title = ""
        self.content = ""
        self.saving = False
        self.uploading = False
        self._draft_token = uuid.uuid4().hex

    @property
    def is_active(self) -> bool:
        return self.mode is not EditorMode.IDLE

    def on_saved(self, callback: Callable[[Note], None]) -> None:
        self._saved_listeners.append(callback)

    # ---- transitions ----

    def start_create(self) -> None:
        self._reset_draft(EditorMode.CREATING)
        self._notify()

    def start_modify(self, note: Note) -> None:
        if note.id is None:
            raise ValueError("cannot modify a memo that has no id")
        self._reset_draft(EditorMode.MODIFYING, note_id=note.id,
                          title=note.title, content=note.content)
        self._notify()

    def cancel(self) -> None:
        if self.mode is EditorMode.IDLE:
            return
        self._reset_draft(EditorMode.IDLE)
        self._notify()

    def _reset_draft(self, mode: EditorMode, *, note_id: NoteId | None = None,
                     title: str = "", content: str = "") -> None:
        self.mode = mode
        self.note_id = note_id
        self.title = title
        self.content = content
        self.uploading = False
        self._draft_token = uuid.uuid4().hex

    # ---- draft edits ----

    def set_title(self, text: str) -> None:
        self.title = text or ""
        self._notify()

    def set_content(self, text: str) -> None:
        self.content = text or ""
        self._notify()

    def attach_image(self, path: str | Path) -> None:
        if not self.is_active:
            log.debug("attach_image ignored: editor is idle")
            return
        if self._uploader is None:
            log.warning("attach_image ignored: no upload adapter configured")
            return

        token = self._draft_token
        self.uploading = True
        self._notify()
        self._runner.submit(
            lambda: self._uploader.upload(path),
            lambda result: self._image_uploaded(token, result),
            lambda exc: self._image_failed(token, exc),
        )

    def _image_uploaded(self, token: str, result) -> None:
        if token != self._draft_token:
            log.debug("Upload result dropped: draft changed before it arrived")
            return
        self.uploading = False
        if result.error or not result.url:
            log.warning("Image upload failed: %s", result.error or "empty url")
        else:
            self.content = self.content + "\n" + image_markup_line(result.url)
            log.info("Image attached: %s", result.url)
        self._notify()

    def _image_failed(self, token: str, exc: BaseException) -> None:
        if token != self._draft_token:
            return
        self.uploading = False
        log.error("Image upload crashed: %s", exc)
        self._notify()

    # ---- save ----

    def save(self) -> bool:
        """
        creating -> POST без id, modifying -> PUT с исходным id.
        При ошибке черновик остаётся открытым, можно повторить.
        """
        if not self.is_active:
            return False
        if self.saving:
            log.debug("Save ignored: previous save still in flight")
            return False

        mode = self.mode
        note = Note(
            id=self.note_id if mode is EditorMode.MODIFYING else None,
            title=self.title,
            content=self.content,
        )
        token = self._draft_token

        if mode is EditorMode.CREATING:
            job = lambda: self._api.create_memo(note.title, note.content)  # noqa: E731
        else:
            job = lambda: self._api.update_memo(note.id, note.title, note.content)  # noqa: E731

        self.saving = True
        self._notify()
        self._runner.submit(
            job,
            lambda _res: self._saved(token, note),
            self._save_failed,
        )
        return True

    def _saved(self, token: str, note: Note) -> None:
        self.saving = False
        log.info("Memo saved: id=%r new=%s", note.id, note.id is None)
        if token == self._draft_token:
            self._reset_draft(EditorMode.IDLE)
        self._notify()
        for callback in list(self._saved_listeners):
            callback(note)

    def _save_failed(self, exc: BaseException) -> None:
        self.saving = False
        log.error("Failed to save memo: %s", exc)
        self._notify()
