"""Use case for note management."""

from notedeck.application.common.use_cases import ContentSetUseCase
from notedeck.application.notes.protocols import NoteRepositoryProtocol
from notedeck.domain.common.value_objects import OwnerId
from notedeck.domain.notes.entities import Note


class NoteUseCase(ContentSetUseCase[Note, str]):
    """Create, read and delete notes; the payload is the note body."""

    content_type = Note.content_type

    def __init__(self, note_repository: NoteRepositoryProtocol) -> None:
        super().__init__(note_repository)

    def _build(self, owner: OwnerId, name: str, payload: str) -> Note:
        return Note.create(owner=owner, name=name, body=payload)
