"""
Translation of use case error values into HTTP errors.

Error bodies share one shape: ``{"detail": {"kind": ..., "message": ...}}``.
"""

from enum import StrEnum

from fastapi import HTTPException, status

from notedeck.domain.common.errors import SearchError, SearchErrorKind, StoreError, StoreErrorKind
from notedeck.domain.learning.errors import GenerationError, GenerationErrorKind

_STORE_STATUS = {
    StoreErrorKind.DUPLICATE_NAME: status.HTTP_409_CONFLICT,
    StoreErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

_SEARCH_STATUS = {
    SearchErrorKind.INDEX_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}

# Output that breaks the generation contract is an upstream fault
_GENERATION_STATUS = {
    GenerationErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    GenerationErrorKind.PARSE_ERROR: status.HTTP_502_BAD_GATEWAY,
    GenerationErrorKind.SCHEMA_ERROR: status.HTTP_502_BAD_GATEWAY,
    GenerationErrorKind.LIMIT_EXCEEDED: status.HTTP_502_BAD_GATEWAY,
    GenerationErrorKind.EMPTY_FIELD: status.HTTP_502_BAD_GATEWAY,
    GenerationErrorKind.FIELD_TOO_LONG: status.HTTP_502_BAD_GATEWAY,
    GenerationErrorKind.SERVICE_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _status_for(error: StoreError | SearchError | GenerationError) -> int:
    table: dict[StrEnum, int]
    if isinstance(error, StoreError):
        table = _STORE_STATUS
    elif isinstance(error, SearchError):
        table = _SEARCH_STATUS
    else:
        table = _GENERATION_STATUS
    return table.get(error.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def to_http_exception(error: StoreError | SearchError | GenerationError) -> HTTPException:
    return HTTPException(
        status_code=_status_for(error),
        detail={"kind": error.kind.value, "message": error.message},
    )
