import os
import uuid
from datetime import datetime
from pathlib import Path


def atomic_write_text(path: Path, text: str, encoding: str = "utf-8") -> None:
    """
    Atomic-ish file write:
      - write to temp file in same directory
      - fsync
      - replace() into final path
    A crash mid-write leaves the previous file intact instead of a truncated one.
    """
    path = Path(path)
    parent = path.parent
    parent.mkdir(parents=True, exist_ok=True)

    tmp_path = parent / f".{path.name}.tmp-{uuid.uuid4().hex}"

    try:
        with open(tmp_path, "w", encoding=encoding, newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    finally:
        try:
            if tmp_path.exists():
                tmp_path.unlink()
        except OSError:
            pass


def write_recovery_copy(notes_path: Path, text: str, recovery_dir: Path) -> Path:
    """
    Best-effort emergency save when normal persist fails.
    Writes a timestamped copy into recovery_dir.
    """
    notes_path = Path(notes_path)
    stem = notes_path.stem or "notes"
    ts = datetime.now().strftime("%Y%m%d-%H%M%S")
    rec_path = Path(recovery_dir) / f"{stem}.recovery.{ts}.txt"
    atomic_write_text(rec_path, text, encoding="utf-8")
    return rec_path
