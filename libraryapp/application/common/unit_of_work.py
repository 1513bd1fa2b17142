"""
Unit of Work interface.

A unit of work brackets one service operation. The lookups, checks and
writes inside it either all commit together or are all rolled back.

Example:
    class BookService:
        def register_book(self, name: str, type: BookType) -> Book:
            with self.unit_of_work:
                book = self.book_repository.save(Book.create(name, type))
                self.unit_of_work.commit()
                return book
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    Infrastructure provides the concrete transaction handling
    (see SQLAlchemyUnitOfWork).
    """

    @abstractmethod
    def commit(self) -> None:
        """Persist everything done inside the unit of work."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Discard everything done inside the unit of work."""
        raise NotImplementedError

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Roll back if the block raised.

        A clean exit does not commit; commit must be called explicitly.
        """
        if exc_type is not None:
            self.rollback()
