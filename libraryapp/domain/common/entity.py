"""
Base class for Entities.

An entity keeps its identity while its attributes change. Books, users and
loan histories are all entities: a user renamed is still the same user.

Example:
    @dataclass
    class User(Entity[UserId]):
        id: UserId
        name: str

        def update_name(self, new_name: str) -> None:
            self.name = new_name
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Wrapping the raw integer keeps a BookId from being passed where a
    UserId is expected. The value 0 marks an entity that storage has not
    assigned an id to yet.
    """

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
        """Placeholder id, replaced by the database on insert."""
        return cls(0)

    @property
    def is_assigned(self) -> bool:
        """Whether storage has assigned a real id."""
        return self.value != 0

    def to_primitive(self) -> int:
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must declare an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
