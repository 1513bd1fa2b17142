from libraryapp.application.library.protocols.book_repository import BookRepositoryProtocol

__all__ = ["BookRepositoryProtocol"]
