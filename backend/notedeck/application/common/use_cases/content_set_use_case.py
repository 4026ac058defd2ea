"""
Create/read/delete operations shared by every content set type.

Subclasses only decide how a new entity is built from its initial payload.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

import structlog

from notedeck.application.common.exceptions import DuplicateContentSetError
from notedeck.application.common.protocols import ContentSetRepositoryProtocol
from notedeck.application.common.result import Failure, Result, Success
from notedeck.domain.common.content_set import ContentSet
from notedeck.domain.common.errors import StoreError
from notedeck.domain.common.value_objects import OwnerId

logger = structlog.get_logger(__name__)

SetT = TypeVar("SetT", bound=ContentSet)
PayloadT = TypeVar("PayloadT")


class ContentSetUseCase(ABC, Generic[SetT, PayloadT]):
    """Owner-scoped content store for one content type."""

    content_type: str = "Content set"

    def __init__(self, repository: ContentSetRepositoryProtocol[SetT]) -> None:
        self.repository = repository

    @abstractmethod
    def _build(self, owner: OwnerId, name: str, payload: PayloadT) -> SetT:
        """Build a new, unsaved entity from its initial payload."""

    def create(self, owner: str, name: str, payload: PayloadT) -> Result[SetT, StoreError]:
        """
        Create a content set.

        Args:
            owner: Owner of the new set
            name: Name, unique per owner for this content type
            payload: Initial content

        Returns:
            Success with the saved entity, or Failure if the name is taken
        """
        owner_id = OwnerId(owner)
        duplicate = StoreError.duplicate_name(self.content_type, owner_id, name)

        if self.repository.find_by_owner_and_name(owner_id, name) is not None:
            return Failure(duplicate)

        entity = self._build(owner_id, name, payload)
        try:
            saved = self.repository.add(entity)
        except DuplicateContentSetError:
            # Lost a race against a concurrent insert of the same name
            return Failure(duplicate)

        logger.info(
            "content_set_created",
            content_type=self.content_type,
            owner=owner,
            content_set_id=saved.id.value,
        )
        return Success(saved)

    def remove(self, owner: str, name: str) -> Result[None, StoreError]:
        """
        Delete a content set and everything embedded in it.

        Returns:
            Success(None), or Failure if no such set exists
        """
        owner_id = OwnerId(owner)
        if not self.repository.delete(owner_id, name):
            return Failure(StoreError.set_not_found(self.content_type, owner_id, name))

        logger.info("content_set_removed", content_type=self.content_type, owner=owner, name=name)
        return Success(None)

    def get(self, owner: str, name: str) -> Result[SetT, StoreError]:
        owner_id = OwnerId(owner)
        entity = self.repository.find_by_owner_and_name(owner_id, name)
        if entity is None:
            return Failure(StoreError.set_not_found(self.content_type, owner_id, name))
        return Success(entity)

    def list_by_owner(self, owner: str) -> list[SetT]:
        return self.repository.find_by_owner(OwnerId(owner))

    def get_by_ids(self, ids: list[int]) -> list[SetT]:
        """Ids that do not exist are left out of the result."""
        if not ids:
            return []
        return self.repository.find_by_ids(ids)
