"""Mapper for Note ORM ↔ Domain conversion."""

from notedeck.domain.common.value_objects import NoteId, OwnerId
from notedeck.domain.notes.entities import Note
from notedeck.models import Note as NoteORM


class NoteMapper:
    """Mapper for Note ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: NoteORM) -> Note:
        return Note(
            id=NoteId(orm_model.id),
            owner=OwnerId(orm_model.owner),
            name=orm_model.name,
            body=orm_model.body,
        )

    def to_orm(self, domain_entity: Note) -> NoteORM:
        return NoteORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted else None,
            owner=domain_entity.owner.value,
            name=domain_entity.name,
            body=domain_entity.body,
        )
