"""
FlashcardSet aggregate.
"""

from dataclasses import dataclass, field

from notedeck.domain.common.content_set import ContentSet
from notedeck.domain.common.value_objects import CardId, FlashcardSetId, OwnerId

from .card import Card, CardDraft


@dataclass(eq=False)
class FlashcardSet(ContentSet[FlashcardSetId]):
    """
    Named collection of cards on one topic.

    Business Rules:
    - Card ids are unique within the set
    - Cards keep their insertion order
    """

    content_type = "Flashcard set"

    cards: list[Card] = field(default_factory=list)

    def find_card(self, card_id: CardId) -> Card | None:
        return next((card for card in self.cards if card.id == card_id), None)

    @property
    def card_count(self) -> int:
        return len(self.cards)

    @classmethod
    def create(
        cls, owner: OwnerId, name: str, cards: list[CardDraft] | None = None
    ) -> "FlashcardSet":
        """Create a new flashcard set (IDs will be 0 until persisted)."""
        return cls(
            id=FlashcardSetId.generate(),
            owner=owner,
            name=name,
            cards=[Card.from_draft(draft) for draft in cards or []],
        )
