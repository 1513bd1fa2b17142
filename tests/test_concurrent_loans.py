"""Tests for loans racing each other on a file-backed database."""

import threading
import time
from collections.abc import Generator
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest
from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from libraryapp import models
from libraryapp.application.library.services.book_service import BookService
from libraryapp.config import Settings
from libraryapp.database import Base, create_database_engine
from libraryapp.domain.identity.entities.user import User
from libraryapp.domain.identity.entities.user_loan_history import UserLoanHistory, UserLoanStatus
from libraryapp.domain.library.exceptions import BookAlreadyLoanedError
from libraryapp.infrastructure.common.unit_of_work import SQLAlchemyUnitOfWork
from libraryapp.infrastructure.identity.repositories import (
    UserLoanHistoryRepository,
    UserRepository,
)
from libraryapp.infrastructure.library.repositories import BookRepository


class SlowCheckLoanHistoryRepository(UserLoanHistoryRepository):
    """Pauses after the active-loan lookup so a competing loan can run in between."""

    def find_by_book_name_and_status(
        self, book_name: str, status: UserLoanStatus, *, for_update: bool = False
    ) -> UserLoanHistory | None:
        found = super().find_by_book_name_and_status(book_name, status, for_update=for_update)
        time.sleep(0.2)
        return found


@pytest.fixture
def file_engine(tmp_path: Path) -> Generator[Engine, None, None]:
    engine = create_database_engine(
        Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'library.db'}")
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


def _book_service(session: Session) -> BookService:
    return BookService(
        book_repository=BookRepository(session),
        user_repository=UserRepository(session),
        user_loan_history_repository=SlowCheckLoanHistoryRepository(session),
        unit_of_work=SQLAlchemyUnitOfWork(session),
    )


class TestConcurrentLoans:
    def test_only_one_of_two_simultaneous_loans_succeeds(self, file_engine: Engine) -> None:
        session_factory = sessionmaker(autoflush=False, bind=file_engine)
        with session_factory() as session:
            UserRepository(session).save_all([User.create("Alice"), User.create("Bob")])
            session.commit()

        start = threading.Barrier(2)

        def loan(user_name: str) -> str:
            start.wait()
            with session_factory() as session:
                try:
                    _book_service(session).loan_book(user_name, "Book A")
                except BookAlreadyLoanedError:
                    return "rejected"
                return "ok"

        with ThreadPoolExecutor(max_workers=2) as executor:
            outcomes = dict(zip(["Alice", "Bob"], executor.map(loan, ["Alice", "Bob"]), strict=True))

        assert sorted(outcomes.values()) == ["ok", "rejected"]

        with session_factory() as session:
            active = session.execute(
                select(func.count())
                .select_from(models.UserLoanHistory)
                .where(
                    models.UserLoanHistory.book_name == "Book A",
                    models.UserLoanHistory.status == UserLoanStatus.LOANED,
                )
            ).scalar_one()
        assert active == 1


class TestEngineSelection:
    def test_file_sqlite_uses_a_connection_per_session(self, file_engine: Engine) -> None:
        assert not isinstance(file_engine.pool, StaticPool)

        with file_engine.connect() as first, file_engine.connect() as second:
            assert first.connection.dbapi_connection is not second.connection.dbapi_connection

    def test_memory_sqlite_shares_one_connection(self) -> None:
        engine = create_database_engine(Settings(DATABASE_URL="sqlite:///:memory:"))

        assert isinstance(engine.pool, StaticPool)
        engine.dispose()
