"""Protocol for Note repository."""

from typing import Protocol

from notedeck.application.common.protocols import ContentSetRepositoryProtocol
from notedeck.domain.notes.entities import Note


class NoteRepositoryProtocol(ContentSetRepositoryProtocol[Note], Protocol):
    """Note persistence; no operations beyond the shared content set port."""
