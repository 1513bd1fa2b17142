"""Mapper for Book ORM ↔ Domain conversion."""

from libraryapp.domain.common.value_objects.ids import BookId
from libraryapp.domain.library.entities.book import Book
from libraryapp.models import Book as BookORM


class BookMapper:
    """Mapper for Book ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: BookORM) -> Book:
        """Convert ORM model to domain entity."""
        return Book.create_with_id(
            id=BookId(orm_model.id),
            name=orm_model.name,
            type=orm_model.type,
        )

    def to_orm(self, domain_entity: Book) -> BookORM:
        """Convert a new domain entity to an ORM model."""
        return BookORM(
            id=domain_entity.id.value if domain_entity.id.is_assigned else None,
            name=domain_entity.name,
            type=domain_entity.type,
        )
