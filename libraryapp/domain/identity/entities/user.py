"""User entity for library members."""

from dataclasses import dataclass

from libraryapp.domain.common.entity import Entity
from libraryapp.domain.common.exceptions import ValidationError
from libraryapp.domain.common.value_objects.ids import UserId
from libraryapp.domain.identity.entities.user_loan_history import UserLoanHistory

# Domain constraints
MAX_NAME_LENGTH = 255


def _validate_name(name: str | None) -> None:
    if not name or not name.strip():
        raise ValidationError("Name cannot be empty", field="name", value=name)
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"Name cannot exceed {MAX_NAME_LENGTH} characters", field="name", value=name
        )


@dataclass
class User(Entity[UserId]):
    """
    User entity representing a registered library member.

    Business Rules:
    - Name must be non-empty; it is not unique
    - Age is optional but never negative
    - Loan histories are created through the user that borrows
    """

    id: UserId
    name: str
    age: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _validate_name(self.name)
        if self.age is not None and self.age < 0:
            raise ValidationError("Age cannot be negative", field="age", value=self.age)

    def update_name(self, new_name: str) -> None:
        """
        Rename the user.

        Raises:
            ValidationError: If the new name is empty
        """
        _validate_name(new_name)
        self.name = new_name

    def loan_book(self, book_name: str) -> UserLoanHistory:
        """
        Start a loan of the given title for this user.

        The caller is responsible for checking that the title is not
        already out on loan.

        Raises:
            ValidationError: If the book name is empty
        """
        return UserLoanHistory.create(user_id=self.id, book_name=book_name)

    @classmethod
    def create(cls, name: str, age: int | None = None) -> "User":
        """
        Register a new user.

        Raises:
            ValidationError: If the name is empty or the age negative
        """
        return cls(id=UserId.generate(), name=name, age=age)

    @classmethod
    def create_with_id(cls, id: UserId, name: str, age: int | None) -> "User":
        """Reconstitute a user from persistence."""
        return cls(id=id, name=name, age=age)
