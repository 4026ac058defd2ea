"""
Card entity embedded in a flashcard set.
"""

from dataclasses import dataclass

from notedeck.domain.common.entity import Entity
from notedeck.domain.common.value_objects import CardId


@dataclass(frozen=True)
class CardDraft:
    """Question/answer pair that has not been given an id yet."""

    question: str
    answer: str


@dataclass(eq=False)
class Card(Entity[CardId]):
    """
    Single question/answer card.

    Cards are never edited in place: they are added with a fresh id and
    removed individually. Manually entered cards are stored as given.
    """

    id: CardId
    question: str
    answer: str

    @classmethod
    def create(cls, question: str, answer: str) -> "Card":
        """Create a new card (ID will be 0 until persisted)."""
        return cls(id=CardId.generate(), question=question, answer=answer)

    @classmethod
    def from_draft(cls, draft: CardDraft) -> "Card":
        return cls.create(question=draft.question, answer=draft.answer)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return False
        return (self.id, self.question, self.answer) == (other.id, other.question, other.answer)

    def __hash__(self) -> int:
        return hash(self.id)
