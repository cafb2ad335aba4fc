"""
Identity primitives shared by domain entities.

An entity keeps its identity while its fields change. Ids are issued by
the repository, so a freshly built entity carries the placeholder id 0
until it is saved.
"""

from abc import ABC
from dataclasses import dataclass
from typing import ClassVar, Generic, Self, TypeVar


@dataclass(frozen=True)
class EntityId:
    """Integer identifier; 0 marks an entity that has not been saved yet."""

    # Largest key a 32-bit INTEGER primary key column can hold
    MAX_VALUE: ClassVar[int] = 2**31 - 1

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Placeholder id for an unsaved entity."""
        return cls(0)

    @property
    def is_assigned(self) -> bool:
        return self.value != 0


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base for objects compared by identity rather than by field values.

    Two saved entities of the same type are equal when their ids match.
    Unsaved entities share the placeholder id, so they are only equal
    to themselves.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        if not self.id.is_assigned:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
