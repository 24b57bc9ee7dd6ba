from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout, QListWidget, QListWidgetItem, QLineEdit, QPushButton,
    QVBoxLayout, QWidget,
)

from memo_client.core.app_state import MemoApp
from memo_client.core.markup import preview_text
from memo_client.core.models import Note
from memo_client.ui.qt_utils import blocked_signals, set_text_if_changed

PREVIEW_MAX_CHARS = 80


def _item_text(note: Note) -> str:
    preview = preview_text(note.content)
    if len(preview) > PREVIEW_MAX_CHARS:
        preview = preview[:PREVIEW_MAX_CHARS].rstrip() + "…"
    return f"{note.title}\n{preview}" if preview else note.title


class MemoSidebar(QWidget):
    """Поиск, кнопка настроек, "новая заметка" и сам список."""

    def __init__(self, app: MemoApp, parent: QWidget | None = None):
        super().__init__(parent)
        self._app = app

        self.search = QLineEdit()
        self.search.setPlaceholderText("メモを検索...")
        self.settings_btn = QPushButton("⚙")
        self.settings_btn.setToolTip("設定")
        self.new_btn = QPushButton("＋ 新規メモ作成")
        self.new_btn.setObjectName("primary")
        self.listw = QListWidget()
        self.listw.setWordWrap(True)

        top = QHBoxLayout()
        top.addWidget(self.search, 1)
        top.addWidget(self.settings_btn)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.addLayout(top)
        layout.addWidget(self.new_btn)
        layout.addWidget(self.listw, 1)

        self.search.textChanged.connect(self._app.collection.set_query)
        self.settings_btn.clicked.connect(self._app.toggle_settings)
        self.new_btn.clicked.connect(self._app.new_note)
        self.listw.itemClicked.connect(self._on_item_clicked)

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        note = self._app.collection.find(item.data(Qt.UserRole))
        self._app.select_note(note)

    def render(self) -> None:
        collection = self._app.collection
        set_text_if_changed(self.search, collection.query)

        selected_id = collection.selected.id if collection.selected else None
        with blocked_signals(self.listw):
            self.listw.clear()
            for note in collection.visible():
                item = QListWidgetItem(_item_text(note))
                item.setData(Qt.UserRole, note.id)
                self.listw.addItem(item)
                if selected_id is not None and note.id == selected_id:
                    item.setSelected(True)
                    self.listw.setCurrentItem(item)
