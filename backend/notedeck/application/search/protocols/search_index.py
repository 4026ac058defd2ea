"""Protocol for the full-text index over content set names."""

from typing import Protocol, TypeVar

from notedeck.domain.common.search_result import SearchResult

T_co = TypeVar("T_co", covariant=True)


class SearchIndexProtocol(Protocol[T_co]):
    def ensure_ready(self) -> None:
        """
        Build the index on first use.

        Idempotent. Concurrent first callers share a single build and all
        observe its outcome.

        Raises:
            IndexBuildError: If the build failed; a later call retries it
        """
        ...

    def query(self, term: str) -> list[SearchResult[T_co]]:
        """
        Rank content sets whose name matches ``term``.

        An empty term matches nothing.

        Returns:
            Results sorted by score descending, then id ascending
        """
        ...
