"""Loan history entity and its status state machine."""

from dataclasses import dataclass
from enum import StrEnum

from libraryapp.domain.common.entity import Entity
from libraryapp.domain.common.exceptions import ValidationError
from libraryapp.domain.common.value_objects.ids import UserId, UserLoanHistoryId
from libraryapp.domain.identity.exceptions import LoanAlreadyReturnedError


class UserLoanStatus(StrEnum):
    """Where a loan stands. RETURNED is terminal."""

    LOANED = "LOANED"
    RETURNED = "RETURNED"

    def can_transition_to(self, target: "UserLoanStatus") -> bool:
        """Check whether moving from this status to target is legal."""
        return target in _ALLOWED_TRANSITIONS[self]


_ALLOWED_TRANSITIONS: dict[UserLoanStatus, frozenset[UserLoanStatus]] = {
    UserLoanStatus.LOANED: frozenset({UserLoanStatus.RETURNED}),
    UserLoanStatus.RETURNED: frozenset(),
}


@dataclass
class UserLoanHistory(Entity[UserLoanHistoryId]):
    """
    One borrowing event of a named book by a user.

    Business Rules:
    - Starts out LOANED and may move to RETURNED exactly once
    - Refers to the book by name only; two copies sharing a name are the
      same title as far as lending is concerned
    - At most one LOANED history per book name (enforced by the loan
      operation, not by this entity)
    """

    id: UserLoanHistoryId
    user_id: UserId
    book_name: str
    status: UserLoanStatus = UserLoanStatus.LOANED

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.book_name or not self.book_name.strip():
            raise ValidationError(
                "Book name cannot be empty", field="book_name", value=self.book_name
            )

    # Query methods
    @property
    def is_returned(self) -> bool:
        return self.status == UserLoanStatus.RETURNED

    # Command methods
    def do_return(self) -> None:
        """
        Mark the loan as returned.

        Raises:
            LoanAlreadyReturnedError: If the loan was already returned
        """
        if not self.status.can_transition_to(UserLoanStatus.RETURNED):
            raise LoanAlreadyReturnedError(self.book_name)
        self.status = UserLoanStatus.RETURNED

    # Factory methods
    @classmethod
    def create(cls, user_id: UserId, book_name: str) -> "UserLoanHistory":
        """Factory for a freshly granted loan."""
        return cls(
            id=UserLoanHistoryId.generate(),
            user_id=user_id,
            book_name=book_name,
            status=UserLoanStatus.LOANED,
        )

    @classmethod
    def create_with_id(
        cls,
        id: UserLoanHistoryId,
        user_id: UserId,
        book_name: str,
        status: UserLoanStatus,
    ) -> "UserLoanHistory":
        """Factory for reconstituting a loan history from persistence."""
        return cls(id=id, user_id=user_id, book_name=book_name, status=status)
