from __future__ import annotations

from collections.abc import Callable

from memo_client.core.observable import Observable
from memo_client.core.tasks import ImmediateRunner, TaskRunner
from memo_client.logging_setup import get_logger
from memo_client.settings import DEFAULT_THEME, normalize_theme

log = get_logger("settings")


class SettingsPanel(Observable):
    """Theme + new password, sent together on apply."""

    def __init__(self, api, *, runner: TaskRunner | None = None,
                 theme: str = DEFAULT_THEME) -> None:
        super().__init__()
        self._api = api
        self._runner = runner or ImmediateRunner()
        self._applied_listeners: list[Callable[[str | None], None]] = []

        self.is_open = False
        self.theme = normalize_theme(theme)
        # последняя тема, принятая сервером; theme может быть лишь превью
        self.applied_theme = self.theme
        self.password_draft = ""
        self.applying = False

    def on_applied(self, callback: Callable[[str | None], None]) -> None:
        self._applied_listeners.append(callback)

    def open(self) -> None:
        if not self.is_open:
            self.is_open = True
            self._notify()

    def close(self) -> None:
        self.is_open = False
        self.password_draft = ""
        self._notify()

    def toggle(self) -> None:
        if self.is_open:
            self.close()
        else:
            self.open()

    def choose_theme(self, theme: str) -> None:
        self.theme = normalize_theme(theme)
        self._notify()

    def set_password_draft(self, text: str) -> None:
        self.password_draft = text or ""
        self._notify()

    def apply(self) -> bool:
        if self.applying:
            return False
        new_password = self.password_draft or None
        theme = self.theme

        self.applying = True
        self._notify()
        self._runner.submit(
            lambda: self._api.update_settings(theme, password=new_password),
            lambda _res: self._applied(theme, new_password),
            self._apply_failed,
        )
        return True

    def _applied(self, theme: str, new_password: str | None) -> None:
        self.applying = False
        self.applied_theme = theme
        log.info("Settings updated: theme=%s password_changed=%s", theme, bool(new_password))
        self.is_open = False
        self.password_draft = ""
        self._notify()
        for callback in list(self._applied_listeners):
            callback(new_password)

    def _apply_failed(self, exc: BaseException) -> None:
        self.applying = False
        log.error("Failed to update settings: %s", exc)
        self._notify()
