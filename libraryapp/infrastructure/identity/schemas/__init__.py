"""Identity context schemas."""

from libraryapp.infrastructure.identity.schemas.user_schemas import (
    BookHistoryResponse,
    UserCreateRequest,
    UserLoanHistoryResponse,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "BookHistoryResponse",
    "UserCreateRequest",
    "UserLoanHistoryResponse",
    "UserResponse",
    "UserUpdateRequest",
]
