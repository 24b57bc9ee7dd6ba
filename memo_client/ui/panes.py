from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QButtonGroup, QHBoxLayout, QLabel, QLineEdit, QPushButton, QTextEdit,
    QVBoxLayout, QWidget,
)

from memo_client.core.app_state import MemoApp
from memo_client.services.content_renderer import render_detail_page
from memo_client.settings import CODE_LENGTH, THEMES
from memo_client.ui.qt_utils import set_text_if_changed
from memo_client.ui.theme import THEME_LABELS

PLACEHOLDER_TEXT = "メモを選択するか、新規作成してください"


class PlaceholderPane(QLabel):
    def __init__(self, parent: QWidget | None = None):
        super().__init__(PLACEHOLDER_TEXT, parent)
        self.setAlignment(Qt.AlignCenter)
        self.setEnabled(False)


class DetailPane(QWidget):
    def __init__(self, app: MemoApp, *, confirm: Callable[[], bool],
                 parent: QWidget | None = None):
        super().__init__(parent)
        self._app = app
        self._confirm = confirm
        self._shown: tuple | None = None

        self.edit_btn = QPushButton("編集")
        self.delete_btn = QPushButton("削除")
        self.delete_btn.setObjectName("danger")
        self.view = QWebEngineView()

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        buttons.addWidget(self.edit_btn)
        buttons.addWidget(self.delete_btn)

        layout = QVBoxLayout(self)
        layout.addLayout(buttons)
        layout.addWidget(self.view, 1)

        self.edit_btn.clicked.connect(self._app.edit_selected)
        self.delete_btn.clicked.connect(lambda: self._app.delete_selected(self._confirm))

    def render(self) -> None:
        note = self._app.collection.selected
        self.delete_btn.setEnabled(not self._app.collection.deleting)
        if note is None:
            return
        # WebEngine перерисовываем только если реально поменялось содержимое
        key = (note.id, note.title, note.content, self._app.theme)
        if key == self._shown:
            return
        self._shown = key
        self.view.setHtml(render_detail_page(note, self._app.theme))


class EditorPane(QWidget):
    def __init__(self, app: MemoApp, *, pick_image: Callable[[], str | None],
                 parent: QWidget | None = None):
        super().__init__(parent)
        self._app = app
        self._pick_image = pick_image

        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText("タイトルを入力")
        self.content_input = QTextEdit()
        self.content_input.setAcceptRichText(False)
        self.content_input.setPlaceholderText("メモを入力")

        self.image_btn = QPushButton("画像を追加")
        self.uploading_label = QLabel("アップロード中...")
        self.cancel_btn = QPushButton("キャンセル")
        self.save_btn = QPushButton("保存")
        self.save_btn.setObjectName("primary")

        image_row = QHBoxLayout()
        image_row.addWidget(self.image_btn)
        image_row.addWidget(self.uploading_label)
        image_row.addStretch(1)

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        buttons.addWidget(self.cancel_btn)
        buttons.addWidget(self.save_btn)

        layout = QVBoxLayout(self)
        layout.addWidget(self.title_input)
        layout.addWidget(self.content_input, 1)
        layout.addLayout(image_row)
        layout.addLayout(buttons)

        editor = self._app.editor
        self.title_input.textChanged.connect(editor.set_title)
        self.content_input.textChanged.connect(
            lambda: editor.set_content(self.content_input.toPlainText())
        )
        self.image_btn.clicked.connect(self._attach_image)
        self.cancel_btn.clicked.connect(editor.cancel)
        self.save_btn.clicked.connect(editor.save)

    def _attach_image(self) -> None:
        path = self._pick_image()
        if path:
            self._app.editor.attach_image(path)

    def render(self) -> None:
        editor = self._app.editor
        set_text_if_changed(self.title_input, editor.title)
        set_text_if_changed(self.content_input, editor.content)
        self.uploading_label.setVisible(editor.uploading)
        self.save_btn.setEnabled(not editor.saving)


class SettingsPane(QWidget):
    def __init__(self, app: MemoApp, parent: QWidget | None = None):
        super().__init__(parent)
        self._app = app

        heading = QLabel("設定")
        heading.setStyleSheet("font-size: 22px; font-weight: bold;")

        self.password_input = QLineEdit()
        self.password_input.setEchoMode(QLineEdit.Password)
        self.password_input.setMaxLength(CODE_LENGTH)
        self.password_input.setPlaceholderText(f"新しいパスワード ({CODE_LENGTH}桁)")

        self.theme_buttons = QButtonGroup(self)
        self.theme_buttons.setExclusive(True)
        theme_row = QHBoxLayout()
        for theme in THEMES:
            btn = QPushButton(THEME_LABELS[theme])
            btn.setCheckable(True)
            btn.setProperty("theme", theme)
            self.theme_buttons.addButton(btn)
            theme_row.addWidget(btn)
        theme_row.addStretch(1)

        self.cancel_btn = QPushButton("キャンセル")
        self.save_btn = QPushButton("保存")
        buttons = QHBoxLayout()
        buttons.addStretch(1)
        buttons.addWidget(self.cancel_btn)
        buttons.addWidget(self.save_btn)

        layout = QVBoxLayout(self)
        layout.addWidget(heading)
        layout.addWidget(QLabel("パスワード変更"))
        layout.addWidget(self.password_input)
        layout.addWidget(QLabel("カラーテーマ"))
        layout.addLayout(theme_row)
        layout.addStretch(1)
        layout.addLayout(buttons)

        panel = self._app.settings
        self.password_input.textChanged.connect(panel.set_password_draft)
        self.theme_buttons.buttonClicked.connect(
            lambda btn: panel.choose_theme(btn.property("theme"))
        )
        self.cancel_btn.clicked.connect(panel.close)
        self.save_btn.clicked.connect(panel.apply)

    def render(self) -> None:
        panel = self._app.settings
        set_text_if_changed(self.password_input, panel.password_draft)
        for btn in self.theme_buttons.buttons():
            btn.setChecked(btn.property("theme") == panel.theme)
        self.save_btn.setEnabled(not panel.applying)
