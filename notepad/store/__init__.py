from .note_store import NoteNotFoundError, NoteStore

__all__ = ["NoteNotFoundError", "NoteStore"]
