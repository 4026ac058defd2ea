"""Pydantic schemas for FlashcardSet API request/response validation."""

from pydantic import BaseModel, Field, field_validator

from notedeck.infrastructure.common.schemas import validate_addressable_name


class CardCreateRequest(BaseModel):
    """
    Schema for adding a card.

    Manually entered cards are stored as given.
    """

    question: str = Field(..., description="Question text for the card")
    answer: str = Field(..., description="Answer text for the card")


class Card(BaseModel):
    """Schema for Card response."""

    id: int
    question: str
    answer: str


class FlashcardSetCreateRequest(BaseModel):
    """Schema for creating a flashcard set."""

    name: str = Field(..., min_length=1, max_length=500, description="Name, unique per owner")
    cards: list[CardCreateRequest] = Field(default_factory=list, description="Initial cards")

    @field_validator("name", mode="after")
    @classmethod
    def check_name_addressable(cls, value: str) -> str:
        """Names become a path segment, so slashes and static route names are refused."""
        return validate_addressable_name(value)


class FlashcardSet(BaseModel):
    """Schema for FlashcardSet response with its cards in insertion order."""

    id: int
    owner: str
    name: str
    cards: list[Card] = Field(default_factory=list)


class FlashcardSetsListResponse(BaseModel):
    """Schema for a list of flashcard sets."""

    flashcard_sets: list[FlashcardSet] = Field(default_factory=list)


class FlashcardSetSearchResult(BaseModel):
    """A flashcard set matched by search, with its relevance score."""

    flashcard_set: FlashcardSet
    score: float = Field(..., ge=0, description="Relevance score, higher is better")


class FlashcardSetSearchResponse(BaseModel):
    """Schema for flashcard set search results, best match first."""

    results: list[FlashcardSetSearchResult] = Field(default_factory=list)
