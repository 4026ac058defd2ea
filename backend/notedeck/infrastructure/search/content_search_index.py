"""Request-scoped search index that resolves index hits to domain entities."""

from typing import Generic, Protocol, TypeVar

from sqlalchemy.orm import Session

from notedeck.domain.common.search_result import SearchResult
from notedeck.domain.common.value_objects import SearchQuery
from notedeck.infrastructure.search.full_text_index import FullTextIndex

T = TypeVar("T")


class _ContentSetLookup(Protocol[T]):
    def find_by_ids(self, ids: list[int]) -> list[T]: ...


class ContentSearchIndex(Generic[T]):
    """Search index over one content type, bound to the current session."""

    def __init__(
        self, db: Session, full_text_index: FullTextIndex, repository: _ContentSetLookup[T]
    ) -> None:
        self.db = db
        self.full_text_index = full_text_index
        self.repository = repository

    def ensure_ready(self) -> None:
        self.full_text_index.ensure_ready(self.db)

    def query(self, term: str) -> list[SearchResult[T]]:
        hits = self.full_text_index.match(self.db, SearchQuery.parse(term))
        if not hits:
            return []

        entities = {
            entity.id.value: entity
            for entity in self.repository.find_by_ids([hit.id for hit in hits])
        }
        # A row deleted between the match and the lookup is dropped
        return [
            SearchResult(item=entities[hit.id], score=hit.score)
            for hit in hits
            if hit.id in entities
        ]
