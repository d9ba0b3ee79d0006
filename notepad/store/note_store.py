from __future__ import annotations

import logging
from pathlib import Path

from notepad.core.note import Note, is_round_trippable, parse_note_line, serialize_note
from notepad.settings import RECOVERY_DIR
from notepad.store.filesystem import atomic_write_text, write_recovery_copy

log = logging.getLogger(__name__)


class NoteNotFoundError(LookupError):
    """The given note object is not (or no longer) in the store."""


class NoteStore:
    """
    Owns the list of notes and the file behind it.

    The file is read once, on construction, and rewritten in full after
    every add/edit/delete. Note counts are small, so there is no index and
    no incremental update.
    """

    def __init__(self, path: Path, *, recovery_dir: Path | None = None):
        self.path = Path(path)
        self._recovery_dir = Path(recovery_dir) if recovery_dir is not None else RECOVERY_DIR
        self._synced = True
        self._notes: list[Note] = self.load()
        log.info("Note store opened: path=%s notes=%d", self.path, len(self._notes))

    @property
    def notes(self) -> tuple[Note, ...]:
        return tuple(self._notes)

    @property
    def is_synced(self) -> bool:
        """False when the last persist() failed and disk is stale."""
        return self._synced

    def load(self) -> list[Note]:
        """
        Read the notes file, one note per non-empty line, in file order.
        A missing or unreadable file means "no notes yet", never an error.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            log.info("Notes file not found, starting empty: %s", self.path)
            return []
        except (OSError, UnicodeDecodeError):
            log.exception("Failed to read notes file: %s", self.path)
            return []

        # read_text() already folds \r\n and \r into \n; split on that alone,
        # str.splitlines() would also break on form feed, NEL, U+2028 and others
        return [parse_note_line(line) for line in text.split("\n") if line]

    def add(self, title: str, content: str) -> Note:
        note = Note(title=title, content=content)
        self._notes.append(note)
        log.debug("Note added: index=%d", len(self._notes) - 1)
        self.persist()
        return note

    def edit(self, note: Note, title: str, content: str) -> Note:
        idx = self._index_of(note)
        note.title = title
        note.content = content
        log.debug("Note edited: index=%d", idx)
        self.persist()
        return note

    def delete(self, note: Note) -> Note:
        idx = self._index_of(note)
        del self._notes[idx]
        log.debug("Note deleted: index=%d", idx)
        self.persist()
        return note

    def persist(self) -> bool:
        """
        Rewrite the whole file from the in-memory list.
        Returns False (and keeps memory as-is) if the write failed.
        """
        for i, note in enumerate(self._notes):
            if not is_round_trippable(note):
                log.warning(
                    "Note %d contains the delimiter or a line break; it will not reload as-is", i
                )

        text = "".join(serialize_note(n) for n in self._notes)
        try:
            atomic_write_text(self.path, text, encoding="utf-8")
        except OSError:
            log.exception("Failed to write notes file: %s", self.path)
            self._synced = False
            self._save_recovery_copy(text)
            return False

        self._synced = True
        return True

    def _index_of(self, note: Note) -> int:
        # identity, not equality: duplicates are separate notes
        for i, candidate in enumerate(self._notes):
            if candidate is note:
                return i
        raise NoteNotFoundError(f"note not in store: {note.title!r}")

    def _save_recovery_copy(self, text: str) -> None:
        try:
            rec = write_recovery_copy(self.path, text, self._recovery_dir)
            log.warning("Recovery copy written: %s", rec)
        except OSError:
            log.exception("Failed to write recovery copy")
