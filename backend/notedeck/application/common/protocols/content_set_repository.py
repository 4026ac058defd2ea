"""Protocol shared by the note and flashcard set repositories."""

from typing import Protocol, TypeVar

from notedeck.domain.common.value_objects import OwnerId

SetT = TypeVar("SetT")


class ContentSetRepositoryProtocol(Protocol[SetT]):
    """Persistence port for one content set type."""

    def find_by_owner_and_name(self, owner: OwnerId, name: str) -> SetT | None:
        """
        Find a content set by its owner-scoped name.

        Args:
            owner: Owner of the set
            name: Name of the set

        Returns:
            Entity if found, None otherwise
        """
        ...

    def find_by_owner(self, owner: OwnerId) -> list[SetT]:
        """
        Get all content sets of an owner.

        Returns:
            Entities ordered by name
        """
        ...

    def find_by_ids(self, ids: list[int]) -> list[SetT]:
        """
        Get content sets by id, across owners.

        Missing ids are skipped silently.

        Returns:
            Entities ordered by id
        """
        ...

    def add(self, content_set: SetT) -> SetT:
        """
        Insert a new content set.

        Returns:
            Saved entity with database-generated ids

        Raises:
            DuplicateContentSetError: If (owner, name) is already taken
        """
        ...

    def delete(self, owner: OwnerId, name: str) -> bool:
        """
        Delete a content set and everything embedded in it.

        Returns:
            True if deleted, False if not found
        """
        ...
