from __future__ import annotations

from collections.abc import Callable, Sequence

from memo_client.core.models import Note, NoteId
from memo_client.core.observable import Observable
from memo_client.core.tasks import ImmediateRunner, TaskRunner
from memo_client.logging_setup import get_logger

log = get_logger("collection")


def filter_notes(notes: Sequence[Note], query: str) -> list[Note]:
    """
    Case-insensitive substring match on title or content.
    Пустой запрос возвращает список как есть, порядок сохраняется.
    """
    q = (query or "").lower()
    if not q:
        return list(notes)
    return [n for n in notes if q in n.title.lower() or q in n.content.lower()]


class NoteCollection(Observable):
    """
    Кэш списка заметок, текущий выбор и строка поиска.

    Инвариант: selected либо None, либо заметка из текущего списка.
    Сервер является источником правды, поэтому список всегда заменяется целиком.
    """

    def __init__(self, api, *, runner: TaskRunner | None = None) -> None:
        super().__init__()
        self._api = api
        self._runner = runner or ImmediateRunner()
        self._refresh_req_id = 0

        self.notes: list[Note] = []
        self.query = ""
        self.selected: Note | None = None
        self.deleting = False

    # ---- list ----

    def refresh(self) -> None:
        self._refresh_req_id += 1
        req_id = self._refresh_req_id
        self._runner.submit(
            self._api.list_memos,
            lambda notes: self._apply_refresh(req_id, notes),
            lambda exc: self._refresh_failed(req_id, exc),
        )

    def _apply_refresh(self, req_id: int, notes: list[Note]) -> None:
        # отбрасываем устаревшие ответы: применяется только последний refresh
        if req_id != self._refresh_req_id:
            log.debug("Stale refresh dropped: req_id=%d latest=%d", req_id, self._refresh_req_id)
            return
        self._replace(list(notes))
        log.info("Memos loaded: count=%d", len(self.notes))

    def _refresh_failed(self, req_id: int, exc: BaseException) -> None:
        if req_id != self._refresh_req_id:
            return
        log.error("Failed to fetch memos: %s", exc)
        self._replace([])

    def _replace(self, notes: list[Note]) -> None:
        self.notes = notes
        if self.selected is not None:
            self.selected = self.find(self.selected.id)
        self._notify()

    def find(self, note_id: NoteId) -> Note | None:
        if note_id is None:
            return None
        for note in self.notes:
            if note.id == note_id:
                return note
        return None

    # ---- filter / selection ----

    def set_query(self, query: str) -> None:
        query = query or ""
        if query == self.query:
            return
        self.query = query
        self._notify()

    def visible(self) -> list[Note]:
        return filter_notes(self.notes, self.query)

    def select(self, note: Note | None) -> None:
        if note is not None:
            present = self.find(note.id)
            if present is None:
                log.warning("Ignoring selection of a memo not in the list: id=%r", note.id)
                return
            note = present
        if note is self.selected:
            return
        self.selected = note
        self._notify()

    # ---- delete ----

    def delete(
        self,
        note_id: NoteId,
        *,
        confirm: Callable[[], bool],
    ) -> bool:
        """
        Удаление с обязательным подтверждением. Возвращает True, если запрос
        отправлен. Повторный вызов, пока предыдущий в полёте, игнорируется.
        """
        if note_id is None:
            return False
        if self.deleting:
            log.debug("Delete ignored: another delete is in flight")
            return False
        if not confirm():
            log.debug("Delete cancelled by user: id=%r", note_id)
            return False

        self.deleting = True
        self._notify()
        self._runner.submit(
            lambda: self._api.delete_memo(note_id),
            lambda _res: self._deleted(note_id),
            lambda exc: self._delete_failed(note_id, exc),
        )
        return True

    def _deleted(self, note_id: NoteId) -> None:
        self.deleting = False
        log.info("Memo deleted: id=%r", note_id)
        self.selected = None
        self._notify()
        self.refresh()

    def _delete_failed(self, note_id: NoteId, exc: BaseException) -> None:
        self.deleting = False
        log.error("Failed to delete memo id=%r: %s", note_id, exc)
        self._notify()
