"""Application service for book registration, lending and statistics."""

import structlog

from libraryapp.application.common.unit_of_work import UnitOfWork
from libraryapp.application.identity.protocols.user_loan_history_repository import (
    UserLoanHistoryRepositoryProtocol,
)
from libraryapp.application.identity.protocols.user_repository import UserRepositoryProtocol
from libraryapp.application.library.protocols.book_repository import BookRepositoryProtocol
from libraryapp.domain.identity.entities.user_loan_history import UserLoanHistory, UserLoanStatus
from libraryapp.domain.identity.exceptions import LoanHistoryNotFoundError, UserNotFoundError
from libraryapp.domain.library.entities.book import Book
from libraryapp.domain.library.entities.book_type import BookType
from libraryapp.domain.library.exceptions import BookAlreadyLoanedError
from libraryapp.domain.library.services.book_statistics_service import (
    BookStatisticsService,
    BookTypeCount,
)

logger = structlog.get_logger(__name__)


class BookService:
    """Application service for book operations."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        user_repository: UserRepositoryProtocol,
        user_loan_history_repository: UserLoanHistoryRepositoryProtocol,
        unit_of_work: UnitOfWork,
        book_statistics_service: BookStatisticsService | None = None,
    ) -> None:
        """Initialize service with dependencies."""
        self.book_repository = book_repository
        self.user_repository = user_repository
        self.user_loan_history_repository = user_loan_history_repository
        self.unit_of_work = unit_of_work
        self.book_statistics_service = book_statistics_service or BookStatisticsService()

    def register_book(self, name: str, type: BookType) -> Book:
        """
        Register a new book.

        Args:
            name: Book title
            type: Category the book is shelved under

        Returns:
            Persisted book entity

        Raises:
            ValidationError: If name is empty
        """
        book = Book.create(name=name, type=type)

        with self.unit_of_work:
            book = self.book_repository.save(book)
            self.unit_of_work.commit()

        logger.info("book_registered", book_id=book.id.value, name=book.name, type=book.type)
        return book

    def loan_book(self, user_name: str, book_name: str) -> UserLoanHistory:
        """
        Loan a book title to a user.

        The active-loan check and the insert run in the same unit of work,
        with the active-loan rows locked where the database supports it.

        Args:
            user_name: Name of the borrowing user (first match by id)
            book_name: Title to loan

        Returns:
            The newly created loan history

        Raises:
            UserNotFoundError: If no user has this name
            BookAlreadyLoanedError: If the title is currently loaned
            ValidationError: If book_name is empty
        """
        with self.unit_of_work:
            user = self.user_repository.find_by_name(user_name)
            if not user:
                raise UserNotFoundError(user_name)

            active_loan = self.user_loan_history_repository.find_by_book_name_and_status(
                book_name, UserLoanStatus.LOANED, for_update=True
            )
            if active_loan:
                logger.info(
                    "book_loan_rejected",
                    book_name=book_name,
                    user_id=user.id.value,
                    holder_id=active_loan.user_id.value,
                )
                raise BookAlreadyLoanedError(book_name)

            history = self.user_loan_history_repository.save(user.loan_book(book_name))
            self.unit_of_work.commit()

        logger.info("book_loaned", user_id=user.id.value, book_name=book_name)
        return history

    def return_book(self, user_name: str, book_name: str) -> UserLoanHistory:
        """
        Return a loaned book.

        Args:
            user_name: Name of the user returning the book (first match by id)
            book_name: Title being returned

        Returns:
            The loan history, now RETURNED

        Raises:
            UserNotFoundError: If no user has this name
            LoanHistoryNotFoundError: If the user has no open loan of this title
        """
        with self.unit_of_work:
            user = self.user_repository.find_by_name(user_name)
            if not user:
                raise UserNotFoundError(user_name)

            history = self.user_loan_history_repository.find_by_user_and_book_name_and_status(
                user.id, book_name, UserLoanStatus.LOANED
            )
            if not history:
                raise LoanHistoryNotFoundError(user_name, book_name)

            history.do_return()
            history = self.user_loan_history_repository.save(history)
            self.unit_of_work.commit()

        logger.info("book_returned", user_id=user.id.value, book_name=book_name)
        return history

    def count_loaned_books(self) -> int:
        """Count loans that have not been returned yet, across all users."""
        return self.user_loan_history_repository.count_by_status(UserLoanStatus.LOANED)

    def get_book_statistics(self) -> list[BookTypeCount]:
        """Count registered books per category, omitting empty categories."""
        books = self.book_repository.find_all()
        return self.book_statistics_service.count_by_type(books)
