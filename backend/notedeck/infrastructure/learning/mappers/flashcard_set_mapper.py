"""Mapper for FlashcardSet and Card ORM ↔ Domain conversion."""

from notedeck.domain.common.value_objects import CardId, FlashcardSetId, OwnerId
from notedeck.domain.learning.entities import Card, FlashcardSet
from notedeck.models import Card as CardORM
from notedeck.models import FlashcardSet as FlashcardSetORM


class FlashcardSetMapper:
    """Mapper for FlashcardSet ORM ↔ Domain conversion."""

    def card_to_domain(self, orm_model: CardORM) -> Card:
        return Card(
            id=CardId(orm_model.id),
            question=orm_model.question,
            answer=orm_model.answer,
        )

    def card_to_orm(self, domain_entity: Card, flashcard_set_id: int | None = None) -> CardORM:
        orm_model = CardORM(question=domain_entity.question, answer=domain_entity.answer)
        if domain_entity.id.is_persisted:
            orm_model.id = domain_entity.id.value
        if flashcard_set_id is not None:
            orm_model.flashcard_set_id = flashcard_set_id
        return orm_model

    def to_domain(self, orm_model: FlashcardSetORM) -> FlashcardSet:
        return FlashcardSet(
            id=FlashcardSetId(orm_model.id),
            owner=OwnerId(orm_model.owner),
            name=orm_model.name,
            cards=[self.card_to_domain(card) for card in orm_model.cards],
        )

    def to_orm(self, domain_entity: FlashcardSet) -> FlashcardSetORM:
        return FlashcardSetORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted else None,
            owner=domain_entity.owner.value,
            name=domain_entity.name,
            cards=[self.card_to_orm(card) for card in domain_entity.cards],
        )
