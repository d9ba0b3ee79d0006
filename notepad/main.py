"""App entrypoint: `notepad [--notes-file PATH]`."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QApplication

from notepad.logging_setup import SESSION_ID, install_global_exception_hooks, setup_logging
from notepad.settings import APP_NAME, SettingsKeys, get_str, resolve_notes_path, safe_set_setting
from notepad.store.note_store import NoteStore
from notepad.ui.main_window import MainWindow


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog=APP_NAME, description="Small desktop notes widget")
    p.add_argument(
        "--notes-file",
        type=Path,
        default=None,
        help="Text file with one note per line (remembered for next start)",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    log = setup_logging()
    install_global_exception_hooks(log)

    app = QApplication(sys.argv[:1])
    app.setApplicationName(APP_NAME)

    # QSettings сам выберет корректное место под конкретную ОС.
    settings = QSettings(APP_NAME, APP_NAME)
    notes_path = resolve_notes_path(args.notes_file, get_str(settings, SettingsKeys.NOTES_FILE, ""))
    safe_set_setting(settings, SettingsKeys.NOTES_FILE, str(notes_path))

    store = NoteStore(notes_path)
    win = MainWindow(store, settings)
    win.show()
    log.info("Application started, SID=%s", SESSION_ID)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
