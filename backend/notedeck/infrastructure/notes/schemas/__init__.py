"""Notes context schemas."""

from notedeck.infrastructure.notes.schemas.note_schemas import (
    FlashcardSuggestionsResponse,
    GeneratedFlashcard,
    Note,
    NoteCreateRequest,
    NoteSearchResponse,
    NoteSearchResult,
    NotesListResponse,
)

__all__ = [
    "FlashcardSuggestionsResponse",
    "GeneratedFlashcard",
    "Note",
    "NoteCreateRequest",
    "NoteSearchResponse",
    "NoteSearchResult",
    "NotesListResponse",
]
