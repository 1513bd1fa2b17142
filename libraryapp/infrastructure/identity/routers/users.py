import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from starlette import status

from libraryapp.application.identity.services.user_service import UserService
from libraryapp.core import container
from libraryapp.domain.common import DomainError
from libraryapp.infrastructure.common.di import inject_service
from libraryapp.infrastructure.identity.schemas import (
    BookHistoryResponse,
    UserCreateRequest,
    UserLoanHistoryResponse,
    UserResponse,
    UserUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

_UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


@router.post("", status_code=status.HTTP_201_CREATED)
def register_user(
    request: UserCreateRequest,
    service: UserService = Depends(inject_service(container.user_service)),
) -> None:
    """Register a new user."""
    try:
        service.register_user(request.name, request.age)
    except DomainError:
        # Translated by the application exception handlers
        raise
    except Exception as e:
        logger.error(f"Failed to register user: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_UNEXPECTED_ERROR
        ) from e


@router.get("", status_code=status.HTTP_200_OK)
def get_users(
    service: UserService = Depends(inject_service(container.user_service)),
) -> list[UserResponse]:
    """List all registered users."""
    return [
        UserResponse(id=user.id.value, name=user.name, age=user.age)
        for user in service.get_users()
    ]


@router.put("", status_code=status.HTTP_204_NO_CONTENT)
def update_user_name(
    request: UserUpdateRequest,
    service: UserService = Depends(inject_service(container.user_service)),
) -> Response:
    """Rename a user."""
    try:
        service.update_user_name(request.id, request.name)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to update user {request.id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_UNEXPECTED_ERROR
        ) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    name: str = Query(..., min_length=1, description="Name of the user to delete"),
    service: UserService = Depends(inject_service(container.user_service)),
) -> Response:
    """
    Delete a user by name.

    When several users share the name, the earliest registered one is deleted.
    """
    try:
        service.delete_user(name)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to delete user '{name}': {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_UNEXPECTED_ERROR
        ) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/loan", status_code=status.HTTP_200_OK)
def get_user_loan_histories(
    service: UserService = Depends(inject_service(container.user_service)),
) -> list[UserLoanHistoryResponse]:
    """List every user with the books they have borrowed."""
    return [
        UserLoanHistoryResponse(
            name=entry.user.name,
            books=[
                BookHistoryResponse(name=history.book_name, is_returned=history.is_returned)
                for history in entry.histories
            ],
        )
        for entry in service.get_user_loan_histories()
    ]
