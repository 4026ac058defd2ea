"""Protocol for FlashcardSet repository in learning context."""

from typing import Protocol

from notedeck.application.common.protocols import ContentSetRepositoryProtocol
from notedeck.domain.common.value_objects import CardId, FlashcardSetId
from notedeck.domain.learning.entities import Card, FlashcardSet


class FlashcardSetRepositoryProtocol(ContentSetRepositoryProtocol[FlashcardSet], Protocol):
    """Flashcard set persistence including card-level mutation."""

    def add_card(self, flashcard_set_id: FlashcardSetId, card: Card) -> Card:
        """
        Append a card to a flashcard set.

        Args:
            flashcard_set_id: Set receiving the card
            card: New card with a placeholder id

        Returns:
            Saved card with its database-generated id
        """
        ...

    def remove_card(self, flashcard_set_id: FlashcardSetId, card_id: CardId) -> bool:
        """
        Remove a single card from a flashcard set.

        Returns:
            True if removed, False if the card is not in the set
        """
        ...
