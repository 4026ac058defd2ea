"""
Base repository for owner-scoped named content sets.

Each concrete repository binds one ORM model and one mapper; all queries and
mutations below work on a single content set row (plus its embedded rows) and
commit once.
"""

import logging
from typing import Any, ClassVar, Generic, Protocol, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.sql.base import ExecutableOption

from notedeck.application.common.exceptions import DuplicateContentSetError
from notedeck.domain.common.value_objects import OwnerId

logger = logging.getLogger(__name__)

OrmT = TypeVar("OrmT")
SetT = TypeVar("SetT")


class ContentSetMapper(Protocol[OrmT, SetT]):
    def to_domain(self, orm_model: OrmT) -> SetT: ...

    def to_orm(self, domain_entity: SetT) -> OrmT: ...


class ContentSetRepository(Generic[OrmT, SetT]):
    """Repository for one content set type (domain-centric)."""

    orm_model: ClassVar[Any]

    def __init__(self, db: Session, mapper: ContentSetMapper[OrmT, SetT]) -> None:
        """
        Initialize repository.

        Args:
            db: SQLAlchemy database session
            mapper: ORM <-> domain mapper for this content type
        """
        self.db = db
        self.mapper = mapper

    def _load_options(self) -> list[ExecutableOption]:
        """Eager-loading options applied to every read."""
        return []

    def _find_orm(self, owner: OwnerId, name: str) -> OrmT | None:
        stmt = (
            select(self.orm_model)
            .options(*self._load_options())
            .where(self.orm_model.owner == owner.value)
            .where(self.orm_model.name == name)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def find_by_owner_and_name(self, owner: OwnerId, name: str) -> SetT | None:
        orm_model = self._find_orm(owner, name)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_owner(self, owner: OwnerId) -> list[SetT]:
        stmt = (
            select(self.orm_model)
            .options(*self._load_options())
            .where(self.orm_model.owner == owner.value)
            .order_by(self.orm_model.name)
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_by_ids(self, ids: list[int]) -> list[SetT]:
        if not ids:
            return []
        stmt = (
            select(self.orm_model)
            .options(*self._load_options())
            .where(self.orm_model.id.in_(ids))
            .order_by(self.orm_model.id)
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def add(self, content_set: SetT) -> SetT:
        """
        Insert a new content set.

        Raises:
            DuplicateContentSetError: If the (owner, name) constraint rejects the row
        """
        orm_model = self.mapper.to_orm(content_set)
        self.db.add(orm_model)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info(f"Rejected duplicate {self.orm_model.__tablename__} row: {e.orig}")
            raise DuplicateContentSetError(orm_model.owner, orm_model.name) from e
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, owner: OwnerId, name: str) -> bool:
        orm_model = self._find_orm(owner, name)
        if orm_model is None:
            return False

        self.db.delete(orm_model)
        self.db.commit()
        return True
