"""
Note entity.
"""

from dataclasses import dataclass

from notedeck.domain.common.content_set import ContentSet
from notedeck.domain.common.value_objects import NoteId, OwnerId


@dataclass(eq=False)
class Note(ContentSet[NoteId]):
    """
    Free-text note.

    The body may be empty; an empty note simply yields no flashcards.
    """

    content_type = "Note"

    body: str = ""

    @classmethod
    def create(cls, owner: OwnerId, name: str, body: str) -> "Note":
        """Create a new note (ID will be 0 until persisted)."""
        return cls(id=NoteId.generate(), owner=owner, name=name, body=body)
