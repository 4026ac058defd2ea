"""
Error values produced while turning a note into flashcards.

Every kind is terminal for the request: there is no partial success and no
attempt to repair the generated output.
"""

from dataclasses import dataclass
from enum import StrEnum


class GenerationErrorKind(StrEnum):
    NOT_FOUND = "not_found"
    PARSE_ERROR = "parse_error"
    SCHEMA_ERROR = "schema_error"
    LIMIT_EXCEEDED = "limit_exceeded"
    EMPTY_FIELD = "empty_field"
    FIELD_TOO_LONG = "field_too_long"
    SERVICE_ERROR = "service_error"


@dataclass(frozen=True)
class GenerationError:
    kind: GenerationErrorKind
    message: str
