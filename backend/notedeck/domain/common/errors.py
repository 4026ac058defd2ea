"""
Error values returned by the content store and the search index.

These are not exceptions: use cases hand them back inside a ``Failure`` so
callers always receive a structured success-or-error result.
"""

from dataclasses import dataclass
from enum import StrEnum


class StoreErrorKind(StrEnum):
    DUPLICATE_NAME = "duplicate_name"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class StoreError:
    """Expected failure of a content store operation."""

    kind: StoreErrorKind
    message: str

    @classmethod
    def duplicate_name(cls, content_type: str, owner: object, name: str) -> "StoreError":
        return cls(
            StoreErrorKind.DUPLICATE_NAME,
            f"{content_type} named '{name}' already exists for owner {owner}.",
        )

    @classmethod
    def set_not_found(cls, content_type: str, owner: object, name: str) -> "StoreError":
        return cls(
            StoreErrorKind.NOT_FOUND,
            f"{content_type} named '{name}' not found for owner {owner}.",
        )

    @classmethod
    def card_not_found(cls, card_id: object, name: str) -> "StoreError":
        return cls(
            StoreErrorKind.NOT_FOUND,
            f"Card with id {card_id} not found in flashcard set '{name}'.",
        )


class SearchErrorKind(StrEnum):
    INDEX_UNAVAILABLE = "index_unavailable"


@dataclass(frozen=True)
class SearchError:
    """The full-text index could not be prepared for querying."""

    kind: SearchErrorKind
    message: str
