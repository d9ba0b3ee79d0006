from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QMenu,
    QMessageBox,
    QScrollArea,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from notepad.core.note import Note
from notepad.ui.dialogs import EditNoteDialog
from notepad.ui.presenter import EditSession, NoteBlock

log = logging.getLogger(__name__)


class NoteBox(QFrame):
    """Title + "..." actions menu on top, content below, separator at the end."""

    editRequested = Signal(object)
    deleteRequested = Signal(object)

    def __init__(self, block: NoteBlock, parent: QWidget | None = None):
        super().__init__(parent)
        self.note = block.note

        self.title_label = QLabel()
        title_font = QFont("Arial", 16)
        title_font.setBold(True)
        self.title_label.setFont(title_font)

        self.menu_button = QToolButton()
        self.menu_button.setText("...")
        self.menu_button.setPopupMode(QToolButton.ToolButtonPopupMode.InstantPopup)
        menu = QMenu(self.menu_button)
        for action_name in block.actions:
            action = menu.addAction(action_name)
            action.triggered.connect(lambda _=False, name=action_name: self._on_action(name))
        self.menu_button.setMenu(menu)

        header = QHBoxLayout()
        header.setContentsMargins(0, 0, 0, 0)
        header.addWidget(self.title_label, 1, Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        header.addWidget(self.menu_button, 0, Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignTop)

        self.content_label = QLabel()
        self.content_label.setWordWrap(True)
        self.content_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)

        separator = QFrame()
        separator.setFrameShape(QFrame.Shape.HLine)
        separator.setFrameShadow(QFrame.Shadow.Sunken)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(10)
        layout.addLayout(header)
        layout.addWidget(self.content_label)
        layout.addWidget(separator)

        self.set_block(block)

    def set_block(self, block: NoteBlock) -> None:
        # plain text: note contents are not markup
        self.title_label.setTextFormat(Qt.TextFormat.PlainText)
        self.content_label.setTextFormat(Qt.TextFormat.PlainText)
        self.title_label.setText(block.title)
        self.content_label.setText(block.content)

    def _on_action(self, name: str) -> None:
        if name == "Edit":
            self.editRequested.emit(self.note)
        elif name == "Delete":
            self.deleteRequested.emit(self.note)


class NoteListWidget(QWidget):
    """
    "Your notes" header + scrollable list of NoteBox.
    Implements the view side of NotePresenter.
    """

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.presenter = None
        self._boxes: dict[Note, NoteBox] = {}
        self._edit_dialogs: set[EditNoteDialog] = set()

        welcome = QLabel("Your notes")
        header_font = QFont("Arial", 20)
        header_font.setBold(True)
        welcome.setFont(header_font)

        underline = QFrame()
        underline.setFrameShape(QFrame.Shape.HLine)
        underline.setFixedWidth(200)

        header = QVBoxLayout()
        header.setContentsMargins(10, 30, 15, 0)
        header.addWidget(welcome)
        header.addWidget(underline)

        self._notes_box = QWidget()
        self._notes_box.setObjectName("notesBox")
        self._notes_box.setStyleSheet("#notesBox { background-color: #E4E8F0; }")
        self._notes_layout = QVBoxLayout(self._notes_box)
        self._notes_layout.setContentsMargins(10, 10, 20, 20)
        self._notes_layout.setSpacing(20)
        self._notes_layout.addStretch(1)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self._notes_box)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addLayout(header)
        layout.addWidget(scroll, 1)

    def bind(self, presenter) -> None:
        self.presenter = presenter

    # ---- view interface ----

    def show_blocks(self, blocks: list[NoteBlock]) -> None:
        for box in self._boxes.values():
            self._notes_layout.removeWidget(box)
            box.deleteLater()
        self._boxes.clear()
        for block in blocks:
            self.append_block(block)

    def append_block(self, block: NoteBlock) -> None:
        box = NoteBox(block, self._notes_box)
        box.editRequested.connect(self._on_edit_requested)
        box.deleteRequested.connect(self._on_delete_requested)
        # before the trailing stretch
        self._notes_layout.insertWidget(self._notes_layout.count() - 1, box)
        self._boxes[block.note] = box

    def update_block(self, block: NoteBlock) -> None:
        box = self._boxes.get(block.note)
        if box is None:
            log.warning("update_block: no box for note")
            return
        box.set_block(block)

    def remove_block(self, note: Note) -> None:
        box = self._boxes.pop(note, None)
        if box is None:
            return
        self._notes_layout.removeWidget(box)
        box.deleteLater()

    def open_edit_surface(self, session: EditSession) -> None:
        dlg = EditNoteDialog(self.window(), session)
        self._edit_dialogs.add(dlg)
        dlg.finished.connect(lambda _=0, d=dlg: self._edit_dialogs.discard(d))
        dlg.show()

    def show_warning(self, message: str) -> None:
        QMessageBox.warning(self, "Notes", message)

    # ---- box signals ----

    def _on_edit_requested(self, note: Note) -> None:
        if self.presenter is not None:
            self.presenter.on_edit_requested(note)

    def _on_delete_requested(self, note: Note) -> None:
        if self.presenter is not None:
            self.presenter.on_delete_requested(note)
