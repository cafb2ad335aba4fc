"""Shared domain building blocks."""

from .entity import Entity, EntityId
from .exceptions import ConflictError, DomainError, EntityNotFoundError, ValidationError

__all__ = [
    "ConflictError",
    "DomainError",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "ValidationError",
]
