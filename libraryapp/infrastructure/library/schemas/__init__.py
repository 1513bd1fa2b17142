"""Library context schemas."""

from libraryapp.infrastructure.library.schemas.book_schemas import (
    BookCreateRequest,
    BookLoanRequest,
    BookReturnRequest,
    BookStatResponse,
)

__all__ = [
    "BookCreateRequest",
    "BookLoanRequest",
    "BookReturnRequest",
    "BookStatResponse",
]
