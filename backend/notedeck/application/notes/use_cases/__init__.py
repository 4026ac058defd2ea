from .note_use_case import NoteUseCase

__all__ = ["NoteUseCase"]
