from __future__ import annotations

import logging

from PySide6.QtCore import QSettings
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QMainWindow

from notepad.settings import SettingsKeys, safe_set_setting
from notepad.store.note_store import NoteStore
from notepad.ui.dialogs import AddNoteDialog
from notepad.ui.note_list import NoteListWidget
from notepad.ui.presenter import NotePresenter

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: NoteStore, settings: QSettings):
        super().__init__()
        self.setWindowTitle("Notepad")
        self._settings = settings

        self.note_list = NoteListWidget()
        self.presenter = NotePresenter(store, self.note_list)
        self.note_list.bind(self.presenter)
        self.setCentralWidget(self.note_list)

        self._build_menu()
        self._restore_geometry()

        self.presenter.start()
        self.statusBar().showMessage(str(store.path))
        log.info("Main window ready: notes=%d", len(store.notes))

    def _build_menu(self) -> None:
        menu = self.menuBar().addMenu("&Notes")

        act_new = QAction("New note…", self)
        act_new.setShortcut(QKeySequence.StandardKey.New)
        act_new.triggered.connect(self.show_add_dialog)
        menu.addAction(act_new)

        menu.addSeparator()

        act_quit = QAction("Quit", self)
        act_quit.setShortcut(QKeySequence.StandardKey.Quit)
        act_quit.triggered.connect(self.close)
        menu.addAction(act_quit)

    def show_add_dialog(self) -> None:
        dlg = AddNoteDialog(self, on_submit=self.presenter.on_add_requested)
        dlg.exec()

    def _restore_geometry(self) -> None:
        geo = self._settings.value(SettingsKeys.UI_GEOMETRY)
        restored = False
        if geo:
            try:
                restored = bool(self.restoreGeometry(geo))
            except Exception:
                log.exception("Failed to restore window geometry")
        if not restored:
            self.resize(450, 600)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        safe_set_setting(self._settings, SettingsKeys.UI_GEOMETRY, self.saveGeometry())
        super().closeEvent(event)
