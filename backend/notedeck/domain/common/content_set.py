"""
Owner-scoped named content set.

Notes and flashcard sets share this shape: an id, the owner, and a name that
is unique per owner within its content type.
"""

from dataclasses import dataclass
from typing import ClassVar, Generic

from .entity import Entity, IdType
from .exceptions import ValidationError
from .value_objects import OwnerId


@dataclass(eq=False)
class ContentSet(Entity[IdType], Generic[IdType]):
    """
    Base entity for named content sets.

    Business Rules:
    - Name cannot be empty
    - (owner, name) is unique per content type (enforced by the store)
    """

    content_type: ClassVar[str] = "Content set"

    id: IdType
    owner: OwnerId
    name: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError(f"{self.content_type} name cannot be empty", field="name")
