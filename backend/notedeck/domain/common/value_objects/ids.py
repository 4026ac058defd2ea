from dataclasses import dataclass

from ..entity import EntityId
from ..value_object import ValueObject


@dataclass(frozen=True)
class OwnerId(ValueObject):
    """
    Opaque owner identifier.

    Supplied by the upstream gateway after authentication and trusted as-is.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("OwnerId cannot be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NoteId(EntityId):
    """Strongly-typed note identifier."""


@dataclass(frozen=True)
class FlashcardSetId(EntityId):
    """Strongly-typed flashcard set identifier."""


@dataclass(frozen=True)
class CardId(EntityId):
    """Strongly-typed card identifier."""
