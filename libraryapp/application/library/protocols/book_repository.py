from typing import Protocol

from libraryapp.domain.common.value_objects.ids import BookId
from libraryapp.domain.library.entities.book import Book


class BookRepositoryProtocol(Protocol):
    def find_all(self) -> list[Book]: ...

    def find_by_id(self, book_id: BookId) -> Book | None: ...

    def save(self, book: Book) -> Book: ...

    def save_all(self, books: list[Book]) -> list[Book]: ...

    def delete_all(self) -> None: ...
