from dataclasses import dataclass

from libraryapp.domain.common.entity import Entity
from libraryapp.domain.common.exceptions import ValidationError
from libraryapp.domain.common.value_objects.ids import BookId
from libraryapp.domain.library.entities.book_type import BookType

# Domain constraints
MAX_BOOK_NAME_LENGTH = 255


@dataclass
class Book(Entity[BookId]):
    """
    Book entity.

    Represents one physical copy on the shelf. Several copies may share a
    name; whether a title is available is decided by loan history, not here.
    """

    id: BookId
    name: str
    type: BookType

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise ValidationError("Book name cannot be empty", field="name", value=self.name)
        if len(self.name) > MAX_BOOK_NAME_LENGTH:
            raise ValidationError(
                f"Book name cannot exceed {MAX_BOOK_NAME_LENGTH} characters",
                field="name",
                value=self.name,
            )
        if not isinstance(self.type, BookType):
            raise ValidationError("Unknown book type", field="type", value=self.type)

    # Factory methods
    @classmethod
    def create(cls, name: str, type: BookType) -> "Book":
        """Factory for registering a new book."""
        return cls(
            id=BookId.generate(),
            name=name.strip() if name else name,
            type=type,
        )

    @classmethod
    def create_with_id(cls, id: BookId, name: str, type: BookType) -> "Book":
        """Factory for reconstituting a book from persistence."""
        return cls(id=id, name=name, type=type)
