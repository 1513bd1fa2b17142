"""Repository for Book domain entities."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from libraryapp.domain.common.value_objects.ids import BookId
from libraryapp.domain.library.entities.book import Book
from libraryapp.infrastructure.library.mappers.book_mapper import BookMapper
from libraryapp.models import Book as BookORM

logger = logging.getLogger(__name__)


class BookRepository:
    """Repository for Book domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = BookMapper()

    def find_all(self) -> list[Book]:
        stmt = select(BookORM).order_by(BookORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_id(self, book_id: BookId) -> Book | None:
        """
        Find a book by ID.

        Args:
            book_id: The book ID

        Returns:
            Book entity if found, None otherwise
        """
        stmt = select(BookORM).where(BookORM.id == book_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, book: Book) -> Book:
        """
        Save a book entity.

        Books never change after registration, so saving an already
        persisted book only checks that it still exists.

        Args:
            book: The book entity to save

        Returns:
            Saved book entity with its database id
        """
        if book.id.is_assigned:
            existing = self.find_by_id(book.id)
            if not existing:
                raise ValueError(f"Book with id {book.id.value} not found")
            return existing

        orm_model = self.mapper.to_orm(book)
        self.db.add(orm_model)
        self.db.flush()
        logger.debug(f"Created book '{orm_model.name}' (id={orm_model.id})")
        return self.mapper.to_domain(orm_model)

    def save_all(self, books: list[Book]) -> list[Book]:
        return [self.save(book) for book in books]

    def delete_all(self) -> None:
        self.db.execute(delete(BookORM))
        self.db.flush()
