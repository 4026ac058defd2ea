from .note_repository import NoteRepositoryProtocol

__all__ = ["NoteRepositoryProtocol"]
