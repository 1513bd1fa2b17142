"""Database models."""

from sqlalchemy import Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from libraryapp.database import Base
from libraryapp.domain.identity.entities.user_loan_history import UserLoanStatus
from libraryapp.domain.library.entities.book_type import BookType


class Book(Base):
    """A registered copy of a book."""

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[BookType] = mapped_column(
        Enum(BookType, native_enum=False, length=20), nullable=False
    )

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, name='{self.name}', type={self.type})>"


class User(Base):
    """A registered library member."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    age: Mapped[int | None] = mapped_column(nullable=True)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, name='{self.name}')>"


class UserLoanHistory(Base):
    """One borrowing event, linked to its book by name only."""

    __tablename__ = "user_loan_histories"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    # No foreign key: histories outlive deleted users
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    book_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    status: Mapped[UserLoanStatus] = mapped_column(
        Enum(UserLoanStatus, native_enum=False, length=20), nullable=False
    )

    def __repr__(self) -> str:
        return (
            f"<UserLoanHistory(id={self.id}, user_id={self.user_id}, "
            f"book_name='{self.book_name}', status={self.status})>"
        )
