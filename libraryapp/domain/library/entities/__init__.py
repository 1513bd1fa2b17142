from libraryapp.domain.library.entities.book import Book
from libraryapp.domain.library.entities.book_type import BookType

__all__ = ["Book", "BookType"]
