"""Flashcard set and card management endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from notedeck.application.learning.use_cases import FlashcardSetUseCase
from notedeck.application.search.use_cases import ContentSearchUseCase
from notedeck.core import container
from notedeck.domain.learning.entities import Card as CardEntity
from notedeck.domain.learning.entities import CardDraft
from notedeck.domain.learning.entities import FlashcardSet as FlashcardSetEntity
from notedeck.infrastructure.common.di import inject_use_case
from notedeck.infrastructure.common.errors import to_http_exception
from notedeck.infrastructure.identity import get_current_owner
from notedeck.infrastructure.learning.schemas import (
    Card,
    CardCreateRequest,
    FlashcardSet,
    FlashcardSetCreateRequest,
    FlashcardSetSearchResponse,
    FlashcardSetSearchResult,
    FlashcardSetsListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/flashcard-sets",
    tags=["flashcards"],
    dependencies=[Depends(get_current_owner)],
)


def _card_to_schema(card: CardEntity) -> Card:
    return Card(id=card.id.value, question=card.question, answer=card.answer)


def _to_schema(flashcard_set: FlashcardSetEntity) -> FlashcardSet:
    return FlashcardSet(
        id=flashcard_set.id.value,
        owner=flashcard_set.owner.value,
        name=flashcard_set.name,
        cards=[_card_to_schema(card) for card in flashcard_set.cards],
    )


@router.post("", response_model=FlashcardSet, status_code=status.HTTP_201_CREATED)
def create_flashcard_set(
    request: FlashcardSetCreateRequest,
    owner: Annotated[str, Depends(get_current_owner)],
    use_case: FlashcardSetUseCase = Depends(inject_use_case(container.flashcard_set_use_case)),
) -> FlashcardSet:
    """
    Create a flashcard set, optionally with initial cards.

    Raises:
        HTTPException: 409 if the owner already has a set with this name
    """
    drafts = [CardDraft(question=card.question, answer=card.answer) for card in request.cards]
    result = use_case.create(owner, request.name, drafts)
    if result.is_failure:
        raise to_http_exception(result.unwrap_error())
    return _to_schema(result.unwrap())


@router.get("", response_model=FlashcardSetsListResponse, status_code=status.HTTP_200_OK)
def list_flashcard_sets(
    owner: Annotated[str, Depends(get_current_owner)],
    use_case: FlashcardSetUseCase = Depends(inject_use_case(container.flashcard_set_use_case)),
) -> FlashcardSetsListResponse:
    """List the owner's flashcard sets ordered by name."""
    return FlashcardSetsListResponse(
        flashcard_sets=[_to_schema(fs) for fs in use_case.list_by_owner(owner)]
    )


@router.get("/search", response_model=FlashcardSetSearchResponse, status_code=status.HTTP_200_OK)
def search_flashcard_sets(
    q: Annotated[str, Query(description="Search term; quote phrases, prefix '-' to exclude")] = "",
    use_case: ContentSearchUseCase = Depends(
        inject_use_case(container.flashcard_set_search_use_case)
    ),
) -> FlashcardSetSearchResponse:
    """
    Search flashcard sets of every owner by name, best match first.

    Raises:
        HTTPException: 503 if the search index could not be built
    """
    result = use_case.search(q)
    if result.is_failure:
        raise to_http_exception(result.unwrap_error())
    return FlashcardSetSearchResponse(
        results=[
            FlashcardSetSearchResult(flashcard_set=_to_schema(hit.item), score=hit.score)
            for hit in result.unwrap()
        ]
    )


@router.get("/by-ids", response_model=FlashcardSetsListResponse, status_code=status.HTTP_200_OK)
def get_flashcard_sets_by_ids(
    ids: Annotated[list[int], Query()] = [],  # noqa: B006
    use_case: FlashcardSetUseCase = Depends(inject_use_case(container.flashcard_set_use_case)),
) -> FlashcardSetsListResponse:
    """Fetch flashcard sets by id; unknown ids are left out."""
    return FlashcardSetsListResponse(
        flashcard_sets=[_to_schema(fs) for fs in use_case.get_by_ids(ids)]
    )


@router.get("/{name}", response_model=FlashcardSet, status_code=status.HTTP_200_OK)
def get_flashcard_set(
    name: str,
    owner: Annotated[str, Depends(get_current_owner)],
    use_case: FlashcardSetUseCase = Depends(inject_use_case(container.flashcard_set_use_case)),
) -> FlashcardSet:
    result = use_case.get(owner, name)
    if result.is_failure:
        raise to_http_exception(result.unwrap_error())
    return _to_schema(result.unwrap())


@router.delete("/{name}", status_code=status.HTTP_204_NO_CONTENT)
def delete_flashcard_set(
    name: str,
    owner: Annotated[str, Depends(get_current_owner)],
    use_case: FlashcardSetUseCase = Depends(inject_use_case(container.flashcard_set_use_case)),
) -> None:
    """
    Delete a flashcard set and all of its cards.

    Raises:
        HTTPException: 404 if the owner has no set with this name
    """
    result = use_case.remove(owner, name)
    if result.is_failure:
        raise to_http_exception(result.unwrap_error())


@router.post("/{name}/cards", response_model=Card, status_code=status.HTTP_201_CREATED)
def add_card(
    name: str,
    request: CardCreateRequest,
    owner: Annotated[str, Depends(get_current_owner)],
    use_case: FlashcardSetUseCase = Depends(inject_use_case(container.flashcard_set_use_case)),
) -> Card:
    """
    Append a card to a flashcard set.

    Args:
        name: Name of the flashcard set
        request: Question and answer, stored as given

    Returns:
        The new card with its id

    Raises:
        HTTPException: 404 if the set does not exist
    """
    result = use_case.add_card(owner, name, request.question, request.answer)
    if result.is_failure:
        raise to_http_exception(result.unwrap_error())
    return _card_to_schema(result.unwrap())


@router.delete("/{name}/cards/{card_id}", response_model=Card, status_code=status.HTTP_200_OK)
def remove_card(
    name: str,
    card_id: int,
    owner: Annotated[str, Depends(get_current_owner)],
    use_case: FlashcardSetUseCase = Depends(inject_use_case(container.flashcard_set_use_case)),
) -> Card:
    """
    Remove a card from a flashcard set.

    Returns:
        The removed card

    Raises:
        HTTPException: 404 if the set or the card does not exist
    """
    result = use_case.remove_card(owner, name, card_id)
    if result.is_failure:
        logger.info(f"Card {card_id} not removed from flashcard set '{name}'")
        raise to_http_exception(result.unwrap_error())
    return _card_to_schema(result.unwrap())
