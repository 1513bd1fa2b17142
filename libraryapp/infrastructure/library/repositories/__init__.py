from libraryapp.infrastructure.library.repositories.book_repository import BookRepository

__all__ = ["BookRepository"]
