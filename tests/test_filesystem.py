import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from notepad.store.filesystem import atomic_write_text, write_recovery_copy


def test_atomic_write_creates_parent(tmp_path):
    target = tmp_path / "nested" / "notes.txt"
    atomic_write_text(target, "A: b\n")
    assert target.read_text(encoding="utf-8") == "A: b\n"


def test_atomic_write_overwrites_and_leaves_no_temp(tmp_path):
    target = tmp_path / "notes.txt"
    target.write_text("old contents that are longer\n", encoding="utf-8")
    atomic_write_text(target, "new\n")
    assert target.read_text(encoding="utf-8") == "new\n"
    assert [p.name for p in tmp_path.iterdir()] == ["notes.txt"]


def test_atomic_write_keeps_line_endings(tmp_path):
    target = tmp_path / "notes.txt"
    atomic_write_text(target, "a\r\nb\n")
    assert target.read_bytes() == b"a\r\nb\n"


def test_recovery_copy(tmp_path):
    rec_dir = tmp_path / "recovery"
    rec = write_recovery_copy(tmp_path / "Overview.txt", "A: b\n", rec_dir)
    assert rec.parent == rec_dir
    assert rec.name.startswith("Overview.recovery.")
    assert rec.suffix == ".txt"
    assert rec.read_text(encoding="utf-8") == "A: b\n"
