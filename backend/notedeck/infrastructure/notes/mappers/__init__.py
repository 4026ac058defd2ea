from .note_mapper import NoteMapper

__all__ = ["NoteMapper"]
