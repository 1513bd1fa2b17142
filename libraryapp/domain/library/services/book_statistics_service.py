"""Domain service for per-category book counts."""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from libraryapp.domain.library.entities.book import Book
from libraryapp.domain.library.entities.book_type import BookType


@dataclass(frozen=True)
class BookTypeCount:
    """Number of books registered under one category."""

    type: BookType
    count: int


class BookStatisticsService:
    """Stateless domain service for aggregating books by category."""

    @staticmethod
    def count_by_type(books: Iterable[Book]) -> list[BookTypeCount]:
        """
        Count books per category.

        Only categories that have at least one book are returned, in
        enumeration order.

        Args:
            books: Books to aggregate

        Returns:
            One BookTypeCount per category present
        """
        counts = Counter(book.type for book in books)
        return [
            BookTypeCount(type=book_type, count=counts[book_type])
            for book_type in BookType
            if counts[book_type] > 0
        ]
