import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from starlette import status

from libraryapp.application.library.services.book_service import BookService
from libraryapp.core import container
from libraryapp.domain.common import DomainError
from libraryapp.infrastructure.common.di import inject_service
from libraryapp.infrastructure.library.schemas import (
    BookCreateRequest,
    BookLoanRequest,
    BookReturnRequest,
    BookStatResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/books", tags=["books"])

_UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


@router.post("", status_code=status.HTTP_201_CREATED)
def register_book(
    request: BookCreateRequest,
    service: BookService = Depends(inject_service(container.book_service)),
) -> None:
    """Register a new book."""
    try:
        service.register_book(request.name, request.type)
    except DomainError:
        # Translated by the application exception handlers
        raise
    except Exception as e:
        logger.error(f"Failed to register book '{request.name}': {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_UNEXPECTED_ERROR
        ) from e


@router.post("/loan", status_code=status.HTTP_201_CREATED)
def loan_book(
    request: BookLoanRequest,
    service: BookService = Depends(inject_service(container.book_service)),
) -> None:
    """
    Loan a book title to a user.

    Fails with 404 if the user does not exist and 409 if the title is
    already out on loan.
    """
    try:
        service.loan_book(request.user_name, request.book_name)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to loan book '{request.book_name}': {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_UNEXPECTED_ERROR
        ) from e


@router.put("/return", status_code=status.HTTP_204_NO_CONTENT)
def return_book(
    request: BookReturnRequest,
    service: BookService = Depends(inject_service(container.book_service)),
) -> Response:
    """
    Return a loaned book.

    Fails with 404 if the user has no open loan of the title.
    """
    try:
        service.return_book(request.user_name, request.book_name)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to return book '{request.book_name}': {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_UNEXPECTED_ERROR
        ) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/loan", status_code=status.HTTP_200_OK)
def count_loaned_books(
    service: BookService = Depends(inject_service(container.book_service)),
) -> int:
    """Number of books currently out on loan."""
    return service.count_loaned_books()


@router.get("/stat", status_code=status.HTTP_200_OK)
def get_book_statistics(
    service: BookService = Depends(inject_service(container.book_service)),
) -> list[BookStatResponse]:
    """Number of registered books per category."""
    return [
        BookStatResponse(type=stat.type, count=stat.count)
        for stat in service.get_book_statistics()
    ]
