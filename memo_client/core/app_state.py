from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from memo_client.core.collection import NoteCollection
from memo_client.core.editor import NoteEditor
from memo_client.core.models import Note
from memo_client.core.observable import Observable
from memo_client.core.session import SessionGate
from memo_client.core.settings_panel import SettingsPanel
from memo_client.core.tasks import ImmediateRunner, TaskRunner
from memo_client.logging_setup import get_logger
from memo_client.settings import DEFAULT_THEME, LOGIN_TRANSITION_MS

log = get_logger("app")


class ViewMode(str, Enum):
    LOCKED = "locked"
    BROWSING = "browsing"
    EDITING = "editing"
    SETTINGS = "settings"


class MemoApp(Observable):
    """
    Склеивает четыре компонента состояния и их взаимные реакции:

      - вход -> первый refresh списка
      - сохранение -> refresh + сброс выбора
      - удаление -> refresh + сброс выбора (делает сама коллекция)
      - новый пароль в настройках -> код для следующего входа

    Любое изменение любого компонента пробрасывается подписчикам MemoApp,
    так что view достаточно одной подписки.
    """

    def __init__(
        self,
        api,
        uploader=None,
        *,
        runner: TaskRunner | None = None,
        theme: str = DEFAULT_THEME,
        transition_ms: int = LOGIN_TRANSITION_MS,
    ) -> None:
        super().__init__()
        runner = runner or ImmediateRunner()

        self.session = SessionGate(api, runner=runner, transition_ms=transition_ms)
        self.collection = NoteCollection(api, runner=runner)
        self.editor = NoteEditor(api, uploader, runner=runner)
        self.settings = SettingsPanel(api, runner=runner, theme=theme)

        for part in (self.session, self.collection, self.editor, self.settings):
            part.subscribe(self._notify)

        self.session.on_authenticated(self.collection.refresh)
        self.editor.on_saved(self._after_save)
        self.settings.on_applied(self._after_settings)

    @property
    def view_mode(self) -> ViewMode:
        if not self.session.authenticated:
            return ViewMode.LOCKED
        if self.settings.is_open:
            return ViewMode.SETTINGS
        if self.editor.is_active:
            return ViewMode.EDITING
        return ViewMode.BROWSING

    @property
    def theme(self) -> str:
        return self.settings.theme

    # ---- browsing ----

    def select_note(self, note: Note | None) -> None:
        self.editor.cancel()
        self.collection.select(note)

    def new_note(self) -> None:
        self.collection.select(None)
        self.editor.start_create()

    def edit_selected(self) -> bool:
        note = self.collection.selected
        if note is None:
            return False
        self.editor.start_modify(note)
        return True

    def delete_selected(self, confirm: Callable[[], bool]) -> bool:
        note = self.collection.selected
        if note is None:
            return False
        return self.collection.delete(note.id, confirm=confirm)

    def toggle_settings(self) -> None:
        self.settings.toggle()

    # ---- reactions ----

    def _after_save(self, note: Note) -> None:
        # выбор сбрасывается и после правки существующей заметки
        self.collection.select(None)
        self.collection.refresh()

    def _after_settings(self, new_password: str | None) -> None:
        if new_password:
            self.session.remember_code(new_password)
