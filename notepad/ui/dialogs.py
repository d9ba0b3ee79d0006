from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from notepad.ui.presenter import EditSession, EditState

EMPTY_CONTENT_MESSAGE = "You have not left a comment."


class AddNoteDialog(QDialog):
    """Modal "add new note" window: Title, Content, Submit, Clear."""

    def __init__(self, parent: QWidget | None, *, on_submit: Callable[[str, str], object]):
        super().__init__(parent)
        self.setWindowTitle("Add a new note")
        self.setModal(True)
        self.setMinimumWidth(300)
        self._on_submit = on_submit

        welcome = QLabel("Add new note.")

        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText("Title:")
        self.content_input = QLineEdit()
        self.content_input.setPlaceholderText("Enter your note.")

        self.submit_button = QPushButton("Submit")
        self.clear_button = QPushButton("Clear")
        self.message = QLabel()

        grid = QGridLayout()
        grid.setContentsMargins(10, 10, 10, 10)
        grid.setHorizontalSpacing(5)
        grid.setVerticalSpacing(5)
        grid.addWidget(self.title_input, 0, 0)
        grid.addWidget(self.submit_button, 0, 1)
        grid.addWidget(self.content_input, 1, 0)
        grid.addWidget(self.clear_button, 1, 1)
        grid.addWidget(self.message, 2, 0, 1, 2)

        layout = QVBoxLayout(self)
        layout.setSpacing(10)
        layout.addWidget(welcome, alignment=Qt.AlignmentFlag.AlignCenter)
        layout.addLayout(grid)

        self.submit_button.clicked.connect(self._submit)
        self.content_input.returnPressed.connect(self._submit)
        self.clear_button.clicked.connect(self._clear)

    def _submit(self) -> None:
        content = self.content_input.text()
        if not content:
            self.message.setText(EMPTY_CONTENT_MESSAGE)
            return
        self._on_submit(self.title_input.text(), content)
        self.accept()

    def _clear(self) -> None:
        self.title_input.clear()
        self.content_input.clear()
        self.message.clear()


class EditNoteDialog(QDialog):
    """
    Non-modal "Edit note" window bound to one EditSession.
    Save -> session.save(), Cancel or closing the window -> session.cancel().
    """

    def __init__(self, parent: QWidget | None, session: EditSession):
        super().__init__(parent)
        self.setWindowTitle("Edit note")
        self.resize(450, 450)
        self.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose, True)
        self._session = session

        self.title_input = QLineEdit()
        self.content_input = QTextEdit()
        self.title_input.setText(session.initial_title)
        self.content_input.setPlainText(session.initial_content)

        save_button = QPushButton("Save")
        cancel_button = QPushButton("Cancel")
        save_button.setDefault(True)

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        buttons.addWidget(save_button)
        buttons.addWidget(cancel_button)

        layout = QVBoxLayout(self)
        layout.addWidget(self.title_input)
        layout.addWidget(self.content_input)
        layout.addLayout(buttons)

        save_button.clicked.connect(self.accept)
        cancel_button.clicked.connect(self.reject)
        # reject() также вызывается при закрытии окна крестиком / Esc
        self.accepted.connect(self._save)
        self.rejected.connect(self._cancel)

    def _save(self) -> None:
        if self._session.state is EditState.OPEN:
            self._session.save(self.title_input.text(), self.content_input.toPlainText())

    def _cancel(self) -> None:
        if self._session.state is EditState.OPEN:
            self._session.cancel()
