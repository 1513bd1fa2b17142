"""Library module domain exceptions."""

from libraryapp.domain.common.exceptions import BusinessRuleViolationError


class BookAlreadyLoanedError(BusinessRuleViolationError):
    """Raised when a title is requested while another loan of it is still open."""

    def __init__(self, book_name: str) -> None:
        super().__init__("single_active_loan", f"Book '{book_name}' is already loaned")
        self.book_name = book_name
