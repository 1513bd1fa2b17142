"""Pytest configuration and fixtures."""

import os

# Must be set before the application settings are first read
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from libraryapp import models  # noqa: E402, F401
from libraryapp.application.identity.services.user_service import UserService  # noqa: E402
from libraryapp.application.library.services.book_service import BookService  # noqa: E402
from libraryapp.config import Settings  # noqa: E402
from libraryapp.database import Base, create_database_engine, get_db  # noqa: E402
from libraryapp.infrastructure.common.unit_of_work import SQLAlchemyUnitOfWork  # noqa: E402
from libraryapp.infrastructure.identity.repositories import (  # noqa: E402
    UserLoanHistoryRepository,
    UserRepository,
)
from libraryapp.infrastructure.library.repositories import BookRepository  # noqa: E402
from libraryapp.main import app  # noqa: E402

# Test database URL (in-memory SQLite shared across threads)
TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_database_engine(Settings(DATABASE_URL=TEST_DATABASE_URL))

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def book_repository(db_session: Session) -> BookRepository:
    return BookRepository(db_session)


@pytest.fixture
def user_repository(db_session: Session) -> UserRepository:
    return UserRepository(db_session)


@pytest.fixture
def user_loan_history_repository(db_session: Session) -> UserLoanHistoryRepository:
    return UserLoanHistoryRepository(db_session)


@pytest.fixture
def book_service(
    db_session: Session,
    book_repository: BookRepository,
    user_repository: UserRepository,
    user_loan_history_repository: UserLoanHistoryRepository,
) -> BookService:
    return BookService(
        book_repository=book_repository,
        user_repository=user_repository,
        user_loan_history_repository=user_loan_history_repository,
        unit_of_work=SQLAlchemyUnitOfWork(db_session),
    )


@pytest.fixture
def user_service(
    db_session: Session,
    user_repository: UserRepository,
    user_loan_history_repository: UserLoanHistoryRepository,
) -> UserService:
    return UserService(
        user_repository=user_repository,
        user_loan_history_repository=user_loan_history_repository,
        unit_of_work=SQLAlchemyUnitOfWork(db_session),
    )


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
