"""
Ranked search over content set names.

One instance per content type; notes and flashcard sets are searched the
same way.
"""

from typing import Generic, TypeVar

import structlog

from notedeck.application.common.exceptions import IndexBuildError
from notedeck.application.common.result import Failure, Result, Success
from notedeck.application.search.protocols import SearchIndexProtocol
from notedeck.domain.common.errors import SearchError, SearchErrorKind
from notedeck.domain.common.search_result import SearchResult

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class ContentSearchUseCase(Generic[T]):
    def __init__(self, search_index: SearchIndexProtocol[T]) -> None:
        self.search_index = search_index

    def search(self, term: str) -> Result[list[SearchResult[T]], SearchError]:
        """
        Search content sets of every owner by name.

        Args:
            term: Free-text term; quoted phrases match exactly, ``-word`` excludes

        Returns:
            Success with results ranked by relevance (empty for an empty term),
            or Failure if the index could not be built
        """
        try:
            self.search_index.ensure_ready()
        except IndexBuildError as e:
            logger.error("search_index_unavailable", error=str(e))
            return Failure(SearchError(SearchErrorKind.INDEX_UNAVAILABLE, str(e)))

        results = self.search_index.query(term)
        logger.debug("content_search_completed", term=term, result_count=len(results))
        return Success(results)
