from __future__ import annotations

from PySide6.QtCore import Qt, QSettings
from PySide6.QtWidgets import QMainWindow, QSplitter, QStackedWidget, QWidget

from memo_client.core.app_state import MemoApp, ViewMode
from memo_client.logging_setup import get_logger
from memo_client.ui.dialogs import confirm_delete, pick_image
from memo_client.ui.lock_screen import LockScreen
from memo_client.ui.memo_list import MemoSidebar
from memo_client.ui.panes import DetailPane, EditorPane, PlaceholderPane, SettingsPane
from memo_client.ui.preferences import SettingsKeys, get_int_list, safe_set_setting
from memo_client.ui.theme import stylesheet_for

log = get_logger("ui")


class MemoWindow(QMainWindow):
    """
    Окно: чистая проекция состояния MemoApp: виджеты пишут в состояние,
    а render() по уведомлениям решает, что показать.
    """

    def __init__(self, app: MemoApp, settings: QSettings):
        super().__init__()
        self.setWindowTitle("Memo")
        self._app = app
        self._settings = settings
        self._shown_theme: str | None = None

        self.lock_screen = LockScreen(app.session)
        self.sidebar = MemoSidebar(app)

        self.placeholder = PlaceholderPane()
        self.detail = DetailPane(app, confirm=lambda: confirm_delete(self))
        self.editor = EditorPane(app, pick_image=lambda: pick_image(self))
        self.settings_pane = SettingsPane(app)

        self.right = QStackedWidget()
        for pane in (self.placeholder, self.detail, self.editor, self.settings_pane):
            self.right.addWidget(pane)

        self.splitter = QSplitter(Qt.Horizontal)
        self.splitter.addWidget(self.sidebar)
        self.splitter.addWidget(self.right)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 3)

        self.pages = QStackedWidget()
        self.pages.setObjectName("root")
        self.pages.addWidget(self.lock_screen)
        self.pages.addWidget(self.splitter)
        self.setCentralWidget(self.pages)

        app.session.subscribe(self.lock_screen.render)
        app.collection.subscribe(self.sidebar.render)
        app.subscribe(self.render)
        app.settings.on_applied(self._persist_theme)

        self._restore_ui_state()
        self.lock_screen.render()
        self.sidebar.render()
        self.render()

    def render(self) -> None:
        self._apply_theme()
        mode = self._app.view_mode
        if mode is ViewMode.LOCKED:
            self.pages.setCurrentWidget(self.lock_screen)
            return
        self.pages.setCurrentWidget(self.splitter)

        if mode is ViewMode.SETTINGS:
            self.settings_pane.render()
            self.right.setCurrentWidget(self.settings_pane)
        elif mode is ViewMode.EDITING:
            self.editor.render()
            self.right.setCurrentWidget(self.editor)
        elif self._app.collection.selected is not None:
            self.detail.render()
            self.right.setCurrentWidget(self.detail)
        else:
            self.right.setCurrentWidget(self.placeholder)

    def _apply_theme(self) -> None:
        theme = self._app.theme
        if theme == self._shown_theme:
            return
        self._shown_theme = theme
        self.setStyleSheet(stylesheet_for(theme))
        log.debug("Theme previewed: %s", theme)

    def _persist_theme(self, _new_password) -> None:
        # на диск попадает только тема, принятая сервером
        safe_set_setting(self._settings, SettingsKeys.UI_THEME, self._app.settings.applied_theme)

    def _restore_ui_state(self) -> None:
        geo = self._settings.value(SettingsKeys.UI_GEOMETRY)
        if geo:
            self.restoreGeometry(geo)
        else:
            self.resize(1100, 700)
        sizes = get_int_list(self._settings, SettingsKeys.UI_SPLITTER)
        if sizes:
            self.splitter.setSizes(sizes)

    def closeEvent(self, event):  # type: ignore[override]
        safe_set_setting(self._settings, SettingsKeys.UI_GEOMETRY, self.saveGeometry())
        safe_set_setting(self._settings, SettingsKeys.UI_SPLITTER, self.splitter.sizes())
        super().closeEvent(event)
