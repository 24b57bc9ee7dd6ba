from __future__ import annotations

from PySide6.QtWidgets import QFileDialog, QMessageBox, QWidget

DELETE_CONFIRM_TEXT = "このメモを削除してもよろしいですか？"


def confirm_delete(parent: QWidget) -> bool:
    answer = QMessageBox.question(
        parent,
        "メモの削除",
        DELETE_CONFIRM_TEXT,
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No,
    )
    return answer == QMessageBox.Yes


def pick_image(parent: QWidget) -> str | None:
    path, _ = QFileDialog.getOpenFileName(
        parent,
        "画像を追加",
        "",
        "Images (*.png *.jpg *.jpeg *.gif *.webp *.bmp)",
    )
    return path or None
