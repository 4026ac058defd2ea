"""Use case for flashcard set and card management."""

import structlog

from notedeck.application.common.result import Failure, Result, Success
from notedeck.application.common.use_cases import ContentSetUseCase
from notedeck.application.learning.protocols import FlashcardSetRepositoryProtocol
from notedeck.domain.common.errors import StoreError
from notedeck.domain.common.value_objects import CardId, OwnerId
from notedeck.domain.learning.entities import Card, CardDraft, FlashcardSet

logger = structlog.get_logger(__name__)


class FlashcardSetUseCase(ContentSetUseCase[FlashcardSet, list[CardDraft]]):
    """Flashcard sets plus card-level add and remove."""

    content_type = FlashcardSet.content_type

    def __init__(self, flashcard_set_repository: FlashcardSetRepositoryProtocol) -> None:
        super().__init__(flashcard_set_repository)
        self.flashcard_set_repository = flashcard_set_repository

    def _build(self, owner: OwnerId, name: str, payload: list[CardDraft]) -> FlashcardSet:
        return FlashcardSet.create(owner=owner, name=name, cards=payload)

    def add_card(
        self, owner: str, name: str, question: str, answer: str
    ) -> Result[Card, StoreError]:
        """
        Append a card to a flashcard set.

        Manually entered cards are stored as given; only generated cards are
        content-validated.

        Args:
            owner: Owner of the set
            name: Name of the set
            question: Question text
            answer: Answer text

        Returns:
            Success with the new card (fresh id), or Failure if the set is missing
        """
        owner_id = OwnerId(owner)
        flashcard_set = self.flashcard_set_repository.find_by_owner_and_name(owner_id, name)
        if flashcard_set is None:
            return Failure(StoreError.set_not_found(self.content_type, owner_id, name))

        card = self.flashcard_set_repository.add_card(
            flashcard_set.id, Card.create(question=question, answer=answer)
        )

        logger.info(
            "card_added",
            flashcard_set_id=flashcard_set.id.value,
            card_id=card.id.value,
        )
        return Success(card)

    def remove_card(self, owner: str, name: str, card_id: int) -> Result[Card, StoreError]:
        """
        Remove a card from a flashcard set.

        Args:
            owner: Owner of the set
            name: Name of the set
            card_id: Id of the card to remove

        Returns:
            Success with the removed card, or Failure if the set or card is missing
        """
        owner_id = OwnerId(owner)
        flashcard_set = self.flashcard_set_repository.find_by_owner_and_name(owner_id, name)
        if flashcard_set is None:
            return Failure(StoreError.set_not_found(self.content_type, owner_id, name))

        card = flashcard_set.find_card(CardId(card_id)) if card_id > 0 else None
        if card is None or not self.flashcard_set_repository.remove_card(
            flashcard_set.id, card.id
        ):
            return Failure(StoreError.card_not_found(card_id, name))

        logger.info(
            "card_removed",
            flashcard_set_id=flashcard_set.id.value,
            card_id=card_id,
        )
        return Success(card)
