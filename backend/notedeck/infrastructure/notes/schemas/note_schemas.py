"""Pydantic schemas for Note API request/response validation."""

from pydantic import BaseModel, Field, field_validator

from notedeck.infrastructure.common.schemas import validate_addressable_name


class NoteCreateRequest(BaseModel):
    """Schema for creating a note."""

    name: str = Field(..., min_length=1, max_length=500, description="Name, unique per owner")
    body: str = Field("", description="Free-text body of the note")

    @field_validator("name", mode="after")
    @classmethod
    def check_name_addressable(cls, value: str) -> str:
        return validate_addressable_name(value)


class Note(BaseModel):
    """Schema for Note response."""

    id: int
    owner: str
    name: str
    body: str


class NotesListResponse(BaseModel):
    """Schema for a list of notes."""

    notes: list[Note] = Field(default_factory=list)


class NoteSearchResult(BaseModel):
    """A note matched by search, with its relevance score."""

    note: Note
    score: float = Field(..., ge=0, description="Relevance score, higher is better")


class NoteSearchResponse(BaseModel):
    """Schema for note search results, best match first."""

    results: list[NoteSearchResult] = Field(default_factory=list)


class GeneratedFlashcard(BaseModel):
    """Flashcard suggested from a note's content."""

    question: str
    answer: str


class FlashcardSuggestionsResponse(BaseModel):
    """Schema for AI-generated flashcard suggestions."""

    suggestions: list[GeneratedFlashcard] = Field(default_factory=list)
