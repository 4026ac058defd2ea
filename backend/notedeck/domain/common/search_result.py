"""Ranked search hit."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class SearchResult(Generic[T]):
    """
    Content set matched by a search, with its relevance score.

    ``item`` is the full entity so callers never need a second lookup.
    ``score`` is non-negative; higher means a stronger textual match.
    """

    item: T
    score: float
