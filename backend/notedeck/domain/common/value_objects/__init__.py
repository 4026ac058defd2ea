"""Common value objects shared across all domain modules."""

from .ids import CardId, FlashcardSetId, NoteId, OwnerId
from .search_query import SearchQuery

__all__ = [
    # IDs
    "CardId",
    "FlashcardSetId",
    "NoteId",
    "OwnerId",
    # Search
    "SearchQuery",
]
