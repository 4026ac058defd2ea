"""Learning context schemas."""

from notedeck.infrastructure.learning.schemas.flashcard_set_schemas import (
    Card,
    CardCreateRequest,
    FlashcardSet,
    FlashcardSetCreateRequest,
    FlashcardSetSearchResponse,
    FlashcardSetSearchResult,
    FlashcardSetsListResponse,
)

__all__ = [
    "Card",
    "CardCreateRequest",
    "FlashcardSet",
    "FlashcardSetCreateRequest",
    "FlashcardSetSearchResponse",
    "FlashcardSetSearchResult",
    "FlashcardSetsListResponse",
]
