"""Identity domain exceptions."""

from libraryapp.domain.common.exceptions import EntityNotFoundError, InvariantViolationError


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user cannot be found by id or name."""

    def __init__(self, user_ref: int | str) -> None:
        super().__init__("User", user_ref)


class LoanHistoryNotFoundError(EntityNotFoundError):
    """Raised when no open loan matches a return request."""

    def __init__(self, user_name: str, book_name: str) -> None:
        super().__init__("Loan history", f"'{book_name}' loaned by '{user_name}'")
        self.user_name = user_name
        self.book_name = book_name


class LoanAlreadyReturnedError(InvariantViolationError):
    """Raised when a returned loan is returned again."""

    def __init__(self, book_name: str) -> None:
        super().__init__("UserLoanHistory", f"loan of '{book_name}' is already returned")
        self.book_name = book_name
