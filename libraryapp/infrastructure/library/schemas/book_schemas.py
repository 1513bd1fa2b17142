"""Pydantic schemas for Book API request/response validation."""

from pydantic import BaseModel, Field

from libraryapp.domain.library.entities.book_type import BookType


class BookCreateRequest(BaseModel):
    """Schema for registering a Book."""

    name: str = Field(..., min_length=1, max_length=255, description="Book title")
    type: BookType = Field(..., description="Category the book is shelved under")


class BookLoanRequest(BaseModel):
    """Schema for loaning a book to a user."""

    user_name: str = Field(..., min_length=1, max_length=255, description="Borrower's name")
    book_name: str = Field(..., min_length=1, max_length=255, description="Title to loan")


class BookReturnRequest(BaseModel):
    """Schema for returning a loaned book."""

    user_name: str = Field(..., min_length=1, max_length=255, description="Borrower's name")
    book_name: str = Field(..., min_length=1, max_length=255, description="Title to return")


class BookStatResponse(BaseModel):
    """Number of books in one category."""

    type: BookType
    count: int = Field(..., ge=0)
