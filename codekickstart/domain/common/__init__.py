"""
Domain common module.

Base classes shared by every domain module:
- ValueObject: immutable objects defined by their attributes
- Entity: objects with identity and lifecycle
- Caller: the resolved identity of a request
"""

from .caller import ANONYMOUS, Anonymous, Authenticated, Caller, require_user_id
from .entity import Entity, EntityId
from .exceptions import (
    AuthenticationRequiredError,
    DomainError,
    EntityNotFoundError,
    ValidationError,
)
from .value_object import ValueObject

__all__ = [
    "ANONYMOUS",
    "Anonymous",
    "Authenticated",
    "AuthenticationRequiredError",
    "Caller",
    "DomainError",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "ValidationError",
    "ValueObject",
    "require_user_id",
]
