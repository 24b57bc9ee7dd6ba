from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QLineEdit, QVBoxLayout, QWidget

from memo_client.core.session import SessionGate
from memo_client.settings import CODE_LENGTH
from memo_client.ui.qt_utils import set_text_if_changed


class LockScreen(QWidget):
    def __init__(self, session: SessionGate, parent: QWidget | None = None):
        super().__init__(parent)
        self._session = session

        self.code_input = QLineEdit()
        self.code_input.setObjectName("code")
        self.code_input.setEchoMode(QLineEdit.Password)
        self.code_input.setMaxLength(CODE_LENGTH)
        self.code_input.setPlaceholderText("Password")
        self.code_input.setAlignment(Qt.AlignCenter)
        self.code_input.setFixedWidth(320)

        self.error_label = QLabel()
        self.error_label.setObjectName("error")
        self.error_label.setAlignment(Qt.AlignCenter)

        layout = QVBoxLayout(self)
        layout.addStretch(1)
        layout.addWidget(self.code_input, alignment=Qt.AlignHCenter)
        layout.addWidget(self.error_label, alignment=Qt.AlignHCenter)
        layout.addStretch(1)

        self.code_input.textChanged.connect(self._session.input_code)

    def render(self) -> None:
        s = self._session
        set_text_if_changed(self.code_input, s.code)
        self.error_label.setText(s.error)
        self.error_label.setVisible(bool(s.error))
        self.code_input.setEnabled(not (s.verifying or s.transitioning))
        if self.code_input.isEnabled() and self.isVisible():
            self.code_input.setFocus()
