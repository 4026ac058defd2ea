from .card import Card, CardDraft
from .flashcard_set import FlashcardSet

__all__ = ["Card", "CardDraft", "FlashcardSet"]
