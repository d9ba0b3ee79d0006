"""
Toolkit-free glue between NoteStore and the note list view.

The view is anything with:
    show_blocks(blocks), append_block(block), update_block(block),
    remove_block(note), open_edit_surface(session), show_warning(message)
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterable

from notepad.core.note import Note
from notepad.store.note_store import NoteNotFoundError, NoteStore

log = logging.getLogger(__name__)

NOTE_ACTIONS = ("Edit", "Delete")

PERSIST_FAILED_MESSAGE = (
    "Your notes could not be saved to disk. Changes are kept in memory "
    "and a recovery copy was attempted; see the log for details."
)


@dataclass(frozen=True)
class NoteBlock:
    """What the view draws for one note."""
    note: Note
    title: str
    content: str
    actions: tuple[str, ...] = NOTE_ACTIONS

    @classmethod
    def of(cls, note: Note) -> "NoteBlock":
        return cls(note=note, title=note.title, content=note.content)


def render(notes: Iterable[Note]) -> list[NoteBlock]:
    return [NoteBlock.of(n) for n in notes]


class EditState(enum.Enum):
    CLOSED = "closed"
    OPEN = "open"


class EditOutcome(enum.Enum):
    SAVED = "saved"
    CANCELLED = "cancelled"


class EditSession:
    """
    One edit surface for one note: CLOSED -> OPEN -> CLOSED.
    Ends either saved or cancelled; both can happen only once.
    """

    def __init__(self, presenter: "NotePresenter", note: Note):
        self._presenter = presenter
        self.note = note
        self.initial_title = note.title
        self.initial_content = note.content
        self.state = EditState.CLOSED
        self.outcome: EditOutcome | None = None

    def open(self) -> None:
        if self.state is not EditState.CLOSED or self.outcome is not None:
            raise RuntimeError("edit session already used")
        self.state = EditState.OPEN

    def save(self, title: str, content: str) -> None:
        self._require_open()
        self.state = EditState.CLOSED
        self.outcome = EditOutcome.SAVED
        self._presenter._commit_edit(self.note, title, content)

    def cancel(self) -> None:
        self._require_open()
        self.state = EditState.CLOSED
        self.outcome = EditOutcome.CANCELLED
        log.debug("Edit cancelled")

    def _require_open(self) -> None:
        if self.state is not EditState.OPEN:
            raise RuntimeError(f"edit session is {self.state.value}")


class NotePresenter:
    def __init__(self, store: NoteStore, view):
        self.store = store
        self.view = view

    def start(self) -> None:
        self.view.show_blocks(render(self.store.notes))

    def on_add_requested(self, title: str, content: str) -> Note:
        note = self.store.add(title, content)
        self.view.append_block(NoteBlock.of(note))
        self._warn_if_unsynced()
        return note

    def on_edit_requested(self, note: Note) -> EditSession:
        session = EditSession(self, note)
        session.open()
        self.view.open_edit_surface(session)
        return session

    def on_delete_requested(self, note: Note) -> None:
        try:
            self.store.delete(note)
        except NoteNotFoundError:
            log.warning("Delete requested for a note that is not in the store")
            self.view.show_warning("This note no longer exists.")
            return
        self.view.remove_block(note)
        self._warn_if_unsynced()

    def _commit_edit(self, note: Note, title: str, content: str) -> None:
        try:
            self.store.edit(note, title, content)
        except NoteNotFoundError:
            log.warning("Edit saved for a note that is not in the store")
            self.view.show_warning("This note no longer exists.")
            return
        self.view.update_block(NoteBlock.of(note))
        self._warn_if_unsynced()

    def _warn_if_unsynced(self) -> None:
        if not self.store.is_synced:
            self.view.show_warning(PERSIST_FAILED_MESSAGE)
