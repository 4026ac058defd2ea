"""Repository for Note domain entities."""

from sqlalchemy.orm import Session

from notedeck.domain.notes.entities import Note
from notedeck.infrastructure.common.repositories import ContentSetRepository
from notedeck.infrastructure.notes.mappers import NoteMapper
from notedeck.models import Note as NoteORM


class NoteRepository(ContentSetRepository[NoteORM, Note]):
    """Repository for Note domain entities."""

    orm_model = NoteORM

    def __init__(self, db: Session) -> None:
        super().__init__(db, NoteMapper())
