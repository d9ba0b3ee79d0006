import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from notepad.core.note import Note, is_round_trippable, parse_note_line, serialize_note


def test_serialize():
    assert serialize_note(Note("Shopping", "milk, eggs")) == "Shopping: milk, eggs" + os.linesep


def test_parse_basic():
    note = parse_note_line("Shopping: milk, eggs\n")
    assert (note.title, note.content) == ("Shopping", "milk, eggs")


def test_parse_crlf():
    note = parse_note_line("A: b\r\n")
    assert (note.title, note.content) == ("A", "b")


def test_parse_splits_on_first_delimiter():
    note = parse_note_line("Time: 10: 30")
    assert note.title == "Time"
    assert note.content == "10: 30"


def test_parse_without_delimiter_is_all_title():
    note = parse_note_line("just a line")
    assert note.title == "just a line"
    assert note.content == ""


def test_empty_fields():
    note = parse_note_line(serialize_note(Note("", "")))
    assert (note.title, note.content) == ("", "")


def test_identity_not_equality():
    a = Note("A", "1")
    b = Note("A", "1")
    assert a != b
    assert [a, b].index(b) == 1


def test_round_trippable():
    assert is_round_trippable(Note("A", "has: colon in content"))
    assert not is_round_trippable(Note("A: B", "x"))
    assert not is_round_trippable(Note("A", "line\nbreak"))
    assert not is_round_trippable(Note("A\r", "x"))
