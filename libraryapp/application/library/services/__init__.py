from libraryapp.application.library.services.book_service import BookService

__all__ = ["BookService"]
