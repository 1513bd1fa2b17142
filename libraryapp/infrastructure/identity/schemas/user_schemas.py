"""Pydantic schemas for User API request/response validation."""

from pydantic import BaseModel, Field


class UserCreateRequest(BaseModel):
    """Schema for registering a User."""

    name: str = Field(..., min_length=1, max_length=255)
    age: int | None = Field(None, ge=0)


class UserUpdateRequest(BaseModel):
    """Schema for renaming a User."""

    id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1, max_length=255)


class UserResponse(BaseModel):
    """Schema for User response."""

    id: int
    name: str
    age: int | None = None


class BookHistoryResponse(BaseModel):
    """One loan in a user's history."""

    name: str
    is_returned: bool


class UserLoanHistoryResponse(BaseModel):
    """A user with every book they have borrowed."""

    name: str
    books: list[BookHistoryResponse]
