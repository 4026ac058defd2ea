"""Note management, search and flashcard suggestion endpoints."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Query, status

from notedeck.application.learning.use_cases import FlashcardGenerationUseCase
from notedeck.application.notes.use_cases import NoteUseCase
from notedeck.application.search.use_cases import ContentSearchUseCase
from notedeck.core import container
from notedeck.domain.notes.entities import Note as NoteEntity
from notedeck.infrastructure.common.dependencies import require_ai_enabled
from notedeck.infrastructure.common.di import inject_use_case
from notedeck.infrastructure.common.errors import to_http_exception
from notedeck.infrastructure.identity import get_current_owner
from notedeck.infrastructure.notes.schemas import (
    FlashcardSuggestionsResponse,
    GeneratedFlashcard,
    Note,
    NoteCreateRequest,
    NoteSearchResponse,
    NoteSearchResult,
    NotesListResponse,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/notes", tags=["notes"], dependencies=[Depends(get_current_owner)])


def _to_schema(note: NoteEntity) -> Note:
    return Note(id=note.id.value, owner=note.owner.value, name=note.name, body=note.body)


@router.post("", response_model=Note, status_code=status.HTTP_201_CREATED)
def create_note(
    request: NoteCreateRequest,
    owner: Annotated[str, Depends(get_current_owner)],
    use_case: NoteUseCase = Depends(inject_use_case(container.note_use_case)),
) -> Note:
    """
    Create a note.

    Raises:
        HTTPException: 409 if the owner already has a note with this name
    """
    result = use_case.create(owner, request.name, request.body)
    if result.is_failure:
        raise to_http_exception(result.unwrap_error())
    return _to_schema(result.unwrap())


@router.get("", response_model=NotesListResponse, status_code=status.HTTP_200_OK)
def list_notes(
    owner: Annotated[str, Depends(get_current_owner)],
    use_case: NoteUseCase = Depends(inject_use_case(container.note_use_case)),
) -> NotesListResponse:
    """List the owner's notes ordered by name."""
    return NotesListResponse(notes=[_to_schema(note) for note in use_case.list_by_owner(owner)])


@router.get("/search", response_model=NoteSearchResponse, status_code=status.HTTP_200_OK)
def search_notes(
    q: Annotated[str, Query(description="Search term; quote phrases, prefix '-' to exclude")] = "",
    use_case: ContentSearchUseCase = Depends(inject_use_case(container.note_search_use_case)),
) -> NoteSearchResponse:
    """
    Search notes of every owner by name, best match first.

    Raises:
        HTTPException: 503 if the search index could not be built
    """
    result = use_case.search(q)
    if result.is_failure:
        raise to_http_exception(result.unwrap_error())
    return NoteSearchResponse(
        results=[
            NoteSearchResult(note=_to_schema(hit.item), score=hit.score)
            for hit in result.unwrap()
        ]
    )


@router.get("/by-ids", response_model=NotesListResponse, status_code=status.HTTP_200_OK)
def get_notes_by_ids(
    ids: Annotated[list[int], Query()] = [],  # noqa: B006
    use_case: NoteUseCase = Depends(inject_use_case(container.note_use_case)),
) -> NotesListResponse:
    """Fetch notes by id; unknown ids are left out."""
    return NotesListResponse(notes=[_to_schema(note) for note in use_case.get_by_ids(ids)])


@router.get("/{name}", response_model=Note, status_code=status.HTTP_200_OK)
def get_note(
    name: str,
    owner: Annotated[str, Depends(get_current_owner)],
    use_case: NoteUseCase = Depends(inject_use_case(container.note_use_case)),
) -> Note:
    result = use_case.get(owner, name)
    if result.is_failure:
        raise to_http_exception(result.unwrap_error())
    return _to_schema(result.unwrap())


@router.delete("/{name}", status_code=status.HTTP_204_NO_CONTENT)
def delete_note(
    name: str,
    owner: Annotated[str, Depends(get_current_owner)],
    use_case: NoteUseCase = Depends(inject_use_case(container.note_use_case)),
) -> None:
    """
    Delete a note.

    Raises:
        HTTPException: 404 if the owner has no note with this name
    """
    result = use_case.remove(owner, name)
    if result.is_failure:
        raise to_http_exception(result.unwrap_error())


@router.post(
    "/{name}/flashcard_suggestions",
    response_model=FlashcardSuggestionsResponse,
    status_code=status.HTTP_200_OK,
)
@require_ai_enabled
async def get_note_flashcard_suggestions(
    name: str,
    owner: Annotated[str, Depends(get_current_owner)],
    use_case: FlashcardGenerationUseCase = Depends(
        inject_use_case(container.flashcard_generation_use_case)
    ),
) -> FlashcardSuggestionsResponse:
    """
    Generate flashcard suggestions from a note's body.

    Suggestions are not saved; add the ones worth keeping to a flashcard set.

    Raises:
        HTTPException: 404 if the note is missing, 502 if the generated output
            was rejected, 503 if the generation service failed
    """
    result = await use_case.generate(owner, name)
    if result.is_failure:
        raise to_http_exception(result.unwrap_error())

    return FlashcardSuggestionsResponse(
        suggestions=[
            GeneratedFlashcard(question=card.question, answer=card.answer)
            for card in result.unwrap()
        ]
    )
