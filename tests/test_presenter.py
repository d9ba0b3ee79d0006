import sys
import os

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import notepad.store.note_store as note_store_mod
from notepad.core.note import Note
from notepad.store.note_store import NoteStore
from notepad.ui.presenter import (
    NOTE_ACTIONS,
    PERSIST_FAILED_MESSAGE,
    EditOutcome,
    EditState,
    NotePresenter,
    render,
)


class FakeView:
    def __init__(self):
        self.blocks = []
        self.sessions = []
        self.warnings = []
        self.calls = []

    def show_blocks(self, blocks):
        self.calls.append("show")
        self.blocks = list(blocks)

    def append_block(self, block):
        self.calls.append("append")
        self.blocks.append(block)

    def update_block(self, block):
        self.calls.append("update")
        self.blocks = [block if b.note is block.note else b for b in self.blocks]

    def remove_block(self, note):
        self.calls.append("remove")
        self.blocks = [b for b in self.blocks if b.note is not note]

    def open_edit_surface(self, session):
        self.calls.append("edit")
        self.sessions.append(session)

    def show_warning(self, message):
        self.warnings.append(message)

    def shown(self):
        return [(b.title, b.content) for b in self.blocks]


@pytest.fixture
def store(tmp_path):
    path = tmp_path / "Overview.txt"
    path.write_text("A: 1\nB: 2\n", encoding="utf-8")
    return NoteStore(path, recovery_dir=tmp_path / "recovery")


@pytest.fixture
def view():
    return FakeView()


@pytest.fixture
def presenter(store, view):
    p = NotePresenter(store, view)
    p.start()
    return p


def test_render_is_projection():
    notes = [Note("A", "1"), Note("B", "2")]
    blocks = render(notes)
    assert [(b.title, b.content) for b in blocks] == [("A", "1"), ("B", "2")]
    assert all(b.actions == NOTE_ACTIONS for b in blocks)
    assert blocks[0].note is notes[0]
    assert (notes[0].title, notes[0].content) == ("A", "1")


def test_start_renders_all(presenter, view):
    assert view.calls == ["show"]
    assert view.shown() == [("A", "1"), ("B", "2")]


def test_add_appends_only_new_block(presenter, view, store):
    note = presenter.on_add_requested("C", "3")
    assert view.calls == ["show", "append"]
    assert view.blocks[-1].note is note
    assert [(n.title, n.content) for n in store.load()] == [("A", "1"), ("B", "2"), ("C", "3")]
    assert view.warnings == []


def test_edit_save(presenter, view, store):
    target = store.notes[1]
    session = presenter.on_edit_requested(target)
    assert view.sessions == [session]
    assert session.state is EditState.OPEN
    assert (session.initial_title, session.initial_content) == ("B", "2")

    session.save("B2", "two")

    assert session.state is EditState.CLOSED
    assert session.outcome is EditOutcome.SAVED
    assert view.shown() == [("A", "1"), ("B2", "two")]
    assert [(n.title, n.content) for n in store.load()] == [("A", "1"), ("B2", "two")]


def test_edit_cancel_does_not_touch_store(presenter, view, store):
    before = store.path.read_bytes()
    session = presenter.on_edit_requested(store.notes[0])
    session.cancel()
    assert session.outcome is EditOutcome.CANCELLED
    assert session.state is EditState.CLOSED
    assert "update" not in view.calls
    assert store.path.read_bytes() == before


def test_closed_session_cannot_be_reused(presenter, store):
    session = presenter.on_edit_requested(store.notes[0])
    session.save("X", "Y")
    with pytest.raises(RuntimeError):
        session.save("again", "no")
    with pytest.raises(RuntimeError):
        session.cancel()
    with pytest.raises(RuntimeError):
        session.open()


def test_delete_removes_block(presenter, view, store):
    target = store.notes[0]
    presenter.on_delete_requested(target)
    assert view.shown() == [("B", "2")]
    assert [(n.title, n.content) for n in store.load()] == [("B", "2")]


def test_delete_stale_note_warns(presenter, view, store):
    target = store.notes[0]
    presenter.on_delete_requested(target)
    presenter.on_delete_requested(target)
    assert view.calls.count("remove") == 1
    assert len(view.warnings) == 1


def test_edit_of_deleted_note_warns(presenter, view, store):
    target = store.notes[0]
    session = presenter.on_edit_requested(target)
    presenter.on_delete_requested(target)
    session.save("X", "Y")
    assert "update" not in view.calls
    assert len(view.warnings) == 1
    assert [(n.title, n.content) for n in store.notes] == [("B", "2")]


def test_persist_failure_is_surfaced(presenter, view, store, monkeypatch):
    def failing(path, text, encoding="utf-8"):
        raise OSError("disk full")

    monkeypatch.setattr(note_store_mod, "atomic_write_text", failing)
    presenter.on_add_requested("C", "3")
    assert view.warnings == [PERSIST_FAILED_MESSAGE]
    # memory and view still show the new note
    assert view.shown()[-1] == ("C", "3")
