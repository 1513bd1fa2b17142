from libraryapp.infrastructure.library.mappers.book_mapper import BookMapper

__all__ = ["BookMapper"]
