"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
- ContentSet: Owner-scoped named container shared by notes and flashcard sets
"""

from .content_set import ContentSet
from .entity import Entity, EntityId
from .exceptions import DomainError, ValidationError
from .value_object import ValueObject

__all__ = [
    "ContentSet",
    "DomainError",
    "Entity",
    "EntityId",
    "ValidationError",
    "ValueObject",
]
