from __future__ import annotations

import os
from dataclasses import dataclass

DELIMITER = ": "


@dataclass(eq=False)
class Note:
    """
    A single note. No id: a note is identified by the object itself,
    so two notes with the same title/content are still different entries.
    """
    title: str = ""
    content: str = ""


def serialize_note(note: Note) -> str:
    """One note -> one line of the notes file (with line terminator)."""
    return f"{note.title}{DELIMITER}{note.content}{os.linesep}"


def parse_note_line(line: str) -> Note:
    """
    Reverse of serialize_note(). Splits on the first delimiter only;
    a line without a delimiter is all title.
    """
    line = line.rstrip("\r\n")
    title, sep, content = line.partition(DELIMITER)
    if not sep:
        return Note(title=line, content="")
    return Note(title=title, content=content)


def is_round_trippable(note: Note) -> bool:
    # The format has no escaping: a delimiter in the title or any line
    # break will be read back as something else.
    if DELIMITER in note.title:
        return False
    return not any(ch in field for field in (note.title, note.content) for ch in "\r\n")
