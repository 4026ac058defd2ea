"""Repository for FlashcardSet domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.sql.base import ExecutableOption

from notedeck.domain.common.value_objects import CardId, FlashcardSetId
from notedeck.domain.learning.entities import Card, FlashcardSet
from notedeck.infrastructure.common.repositories import ContentSetRepository
from notedeck.infrastructure.learning.mappers import FlashcardSetMapper
from notedeck.models import Card as CardORM
from notedeck.models import FlashcardSet as FlashcardSetORM


class FlashcardSetRepository(ContentSetRepository[FlashcardSetORM, FlashcardSet]):
    """Repository for FlashcardSet aggregates and their cards."""

    orm_model = FlashcardSetORM

    def __init__(self, db: Session) -> None:
        self.flashcard_set_mapper = FlashcardSetMapper()
        super().__init__(db, self.flashcard_set_mapper)

    def _load_options(self) -> list[ExecutableOption]:
        return [selectinload(FlashcardSetORM.cards)]

    def add_card(self, flashcard_set_id: FlashcardSetId, card: Card) -> Card:
        """
        Append a card to a flashcard set.

        Args:
            flashcard_set_id: Set receiving the card
            card: New card (placeholder id)

        Returns:
            Saved card with its database-generated id
        """
        orm_model = self.flashcard_set_mapper.card_to_orm(
            card, flashcard_set_id=flashcard_set_id.value
        )
        self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.flashcard_set_mapper.card_to_domain(orm_model)

    def remove_card(self, flashcard_set_id: FlashcardSetId, card_id: CardId) -> bool:
        """
        Remove a card from a flashcard set.

        Returns:
            True if removed, False if the card is not in that set
        """
        stmt = select(CardORM).where(
            CardORM.id == card_id.value,
            CardORM.flashcard_set_id == flashcard_set_id.value,
        )
        card_orm = self.db.execute(stmt).scalar_one_or_none()
        if not card_orm:
            return False

        self.db.delete(card_orm)
        self.db.commit()
        return True
