from .note import DELIMITER, Note, is_round_trippable, parse_note_line, serialize_note

__all__ = [
    "DELIMITER",
    "Note",
    "is_round_trippable",
    "parse_note_line",
    "serialize_note",
]
