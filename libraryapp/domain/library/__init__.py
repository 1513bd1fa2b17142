"""Library domain layer."""

from libraryapp.domain.library.entities import Book, BookType
from libraryapp.domain.library.exceptions import BookAlreadyLoanedError
from libraryapp.domain.library.services import BookStatisticsService, BookTypeCount

__all__ = [
    "Book",
    "BookAlreadyLoanedError",
    "BookStatisticsService",
    "BookType",
    "BookTypeCount",
]
