from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PySide6.QtCore import QSettings

APP_NAME = "notepad"
DATA_DIR = Path.home() / f".{APP_NAME}"
LOG_DIR = DATA_DIR / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"
RECOVERY_DIR = DATA_DIR / "recovery"
DEFAULT_NOTES_FILE = DATA_DIR / "Overview.txt"


@dataclass(frozen=True)
class SettingsKeys:
    UI_GEOMETRY: str = "ui/geometry"
    NOTES_FILE: str = "notes/file"


def get_str(settings: QSettings, key: str, default: str) -> str:
    try:
        val = settings.value(key, default)
        return str(val) if val is not None else default
    except Exception:
        return default


def safe_set_setting(settings: QSettings, key: str, value) -> None:
    """Best-effort запись в QSettings без падений UI."""
    try:
        settings.setValue(key, value)
    except Exception:
        pass


def resolve_notes_path(cli_value: Path | str | None, stored_value: str | None) -> Path:
    """
    Where the notes live:
      - explicit --notes-file wins
      - then the path remembered in QSettings
      - then ~/.notepad/Overview.txt
    """
    if cli_value:
        return Path(cli_value).expanduser()
    stored = (stored_value or "").strip()
    if stored:
        return Path(stored).expanduser()
    return DEFAULT_NOTES_FILE
