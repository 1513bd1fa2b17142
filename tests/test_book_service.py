"""Tests for book registration, lending and statistics."""

import pytest
from sqlalchemy.orm import Session

from libraryapp.application.library.services.book_service import BookService
from libraryapp.domain.common.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)
from libraryapp.domain.identity.entities.user import User
from libraryapp.domain.identity.entities.user_loan_history import UserLoanStatus
from libraryapp.domain.identity.exceptions import LoanHistoryNotFoundError, UserNotFoundError
from libraryapp.domain.library.entities.book_type import BookType
from libraryapp.domain.library.exceptions import BookAlreadyLoanedError
from libraryapp.domain.library.services.book_statistics_service import BookTypeCount
from libraryapp.infrastructure.identity.repositories import (
    UserLoanHistoryRepository,
    UserRepository,
)
from libraryapp.infrastructure.library.repositories import BookRepository
from tests.factories import book_fixture, loan_history_fixture


class TestRegisterBook:
    def test_register_book_persists_exactly_one_book(
        self, book_service: BookService, book_repository: BookRepository
    ) -> None:
        book_service.register_book("Clean Code", BookType.COMPUTER)

        books = book_repository.find_all()
        assert len(books) == 1
        assert books[0].name == "Clean Code"
        assert books[0].type == BookType.COMPUTER
        assert books[0].id.is_assigned

    def test_register_book_allows_duplicate_names(
        self, book_service: BookService, book_repository: BookRepository
    ) -> None:
        book_service.register_book("Dune", BookType.ETC)
        book_service.register_book("Dune", BookType.ETC)

        assert len(book_repository.find_all()) == 2

    @pytest.mark.parametrize("name", ["", "   "])
    def test_register_book_with_empty_name_fails(
        self, book_service: BookService, book_repository: BookRepository, name: str
    ) -> None:
        with pytest.raises(ValidationError):
            book_service.register_book(name, BookType.ART)

        assert book_repository.find_all() == []


class TestLoanBook:
    def test_loan_book_creates_loaned_history(
        self,
        db_session: Session,
        book_service: BookService,
        book_repository: BookRepository,
        user_repository: UserRepository,
        user_loan_history_repository: UserLoanHistoryRepository,
    ) -> None:
        # given
        book_repository.save(book_fixture("Book A"))
        user = user_repository.save(User.create("Alice"))
        db_session.commit()

        # when
        book_service.loan_book("Alice", "Book A")

        # then
        results = user_loan_history_repository.find_all()
        assert len(results) == 1
        assert results[0].book_name == "Book A"
        assert results[0].user_id == user.id
        assert results[0].status == UserLoanStatus.LOANED

    def test_loan_already_loaned_book_fails(
        self,
        db_session: Session,
        book_service: BookService,
        book_repository: BookRepository,
        user_repository: UserRepository,
        user_loan_history_repository: UserLoanHistoryRepository,
    ) -> None:
        # given
        book_repository.save(book_fixture("Book A"))
        user = user_repository.save(User.create("Alice"))
        user_loan_history_repository.save(loan_history_fixture(user, "Book A"))
        db_session.commit()

        # when & then
        with pytest.raises(BookAlreadyLoanedError) as exc_info:
            book_service.loan_book("Alice", "Book A")

        assert isinstance(exc_info.value, BusinessRuleViolationError)
        assert exc_info.value.book_name == "Book A"

    def test_second_borrower_is_rejected_and_active_count_stays_one(
        self,
        db_session: Session,
        book_service: BookService,
        user_repository: UserRepository,
        user_loan_history_repository: UserLoanHistoryRepository,
    ) -> None:
        user_repository.save_all([User.create("Alice"), User.create("Bob")])
        db_session.commit()

        book_service.loan_book("Alice", "Book A")
        with pytest.raises(BookAlreadyLoanedError):
            book_service.loan_book("Bob", "Book A")

        active = [
            h
            for h in user_loan_history_repository.find_all()
            if h.book_name == "Book A" and h.status == UserLoanStatus.LOANED
        ]
        assert len(active) == 1

    def test_loan_book_for_unknown_user_fails(
        self,
        book_service: BookService,
        user_loan_history_repository: UserLoanHistoryRepository,
    ) -> None:
        with pytest.raises(UserNotFoundError):
            book_service.loan_book("Nobody", "Book A")

        assert user_loan_history_repository.find_all() == []

    def test_loan_does_not_require_registered_book(
        self,
        db_session: Session,
        book_service: BookService,
        user_repository: UserRepository,
    ) -> None:
        user_repository.save(User.create("Alice"))
        db_session.commit()

        history = book_service.loan_book("Alice", "Unregistered title")

        assert history.status == UserLoanStatus.LOANED

    def test_book_can_be_loaned_again_after_return(
        self,
        db_session: Session,
        book_service: BookService,
        user_repository: UserRepository,
        user_loan_history_repository: UserLoanHistoryRepository,
    ) -> None:
        user_repository.save_all([User.create("Alice"), User.create("Bob")])
        db_session.commit()

        book_service.loan_book("Alice", "Book A")
        book_service.return_book("Alice", "Book A")
        book_service.loan_book("Bob", "Book A")

        statuses = [h.status for h in user_loan_history_repository.find_all()]
        assert statuses == [UserLoanStatus.RETURNED, UserLoanStatus.LOANED]

    def test_loan_matches_book_names_exactly(
        self,
        db_session: Session,
        book_service: BookService,
        user_repository: UserRepository,
    ) -> None:
        user_repository.save(User.create("Alice"))
        db_session.commit()

        book_service.loan_book("Alice", "Book A")
        book_service.loan_book("Alice", "book a")

        assert book_service.count_loaned_books() == 2


class TestReturnBook:
    def test_return_book_marks_history_returned(
        self,
        db_session: Session,
        book_service: BookService,
        book_repository: BookRepository,
        user_repository: UserRepository,
        user_loan_history_repository: UserLoanHistoryRepository,
    ) -> None:
        # given
        book_repository.save(book_fixture("Book A"))
        user = user_repository.save(User.create("Alice"))
        user_loan_history_repository.save(loan_history_fixture(user, "Book A"))
        db_session.commit()

        # when
        book_service.return_book("Alice", "Book A")

        # then
        results = user_loan_history_repository.find_all()
        assert len(results) == 1
        assert results[0].status == UserLoanStatus.RETURNED

    def test_return_decreases_loaned_count_by_one(
        self,
        db_session: Session,
        book_service: BookService,
        user_repository: UserRepository,
        user_loan_history_repository: UserLoanHistoryRepository,
    ) -> None:
        user = user_repository.save(User.create("Alice"))
        user_loan_history_repository.save_all(
            [loan_history_fixture(user, "Book A"), loan_history_fixture(user, "Book B")]
        )
        db_session.commit()
        before = book_service.count_loaned_books()

        book_service.return_book("Alice", "Book A")

        assert book_service.count_loaned_books() == before - 1

    def test_returning_twice_fails(
        self,
        db_session: Session,
        book_service: BookService,
        user_repository: UserRepository,
        user_loan_history_repository: UserLoanHistoryRepository,
    ) -> None:
        user = user_repository.save(User.create("Alice"))
        user_loan_history_repository.save(loan_history_fixture(user, "Book A"))
        db_session.commit()

        book_service.return_book("Alice", "Book A")
        with pytest.raises(LoanHistoryNotFoundError) as exc_info:
            book_service.return_book("Alice", "Book A")

        assert isinstance(exc_info.value, EntityNotFoundError)
        assert user_loan_history_repository.find_all()[0].status == UserLoanStatus.RETURNED

    def test_return_by_other_user_fails(
        self,
        db_session: Session,
        book_service: BookService,
        user_repository: UserRepository,
        user_loan_history_repository: UserLoanHistoryRepository,
    ) -> None:
        alice = user_repository.save(User.create("Alice"))
        user_repository.save(User.create("Bob"))
        user_loan_history_repository.save(loan_history_fixture(alice, "Book A"))
        db_session.commit()

        with pytest.raises(LoanHistoryNotFoundError):
            book_service.return_book("Bob", "Book A")

        assert book_service.count_loaned_books() == 1

    def test_return_for_unknown_user_fails(self, book_service: BookService) -> None:
        with pytest.raises(UserNotFoundError):
            book_service.return_book("Nobody", "Book A")


class TestCountLoanedBooks:
    def test_count_loaned_books(
        self,
        db_session: Session,
        book_service: BookService,
        user_repository: UserRepository,
        user_loan_history_repository: UserLoanHistoryRepository,
    ) -> None:
        # given
        user = user_repository.save(User.create("Alice"))
        user_loan_history_repository.save_all(
            [
                loan_history_fixture(user, "Book A"),
                loan_history_fixture(user, "Book B", UserLoanStatus.RETURNED),
            ]
        )
        db_session.commit()

        # when
        result = book_service.count_loaned_books()

        # then
        assert result == 1

    def test_count_loaned_books_with_no_history(self, book_service: BookService) -> None:
        assert book_service.count_loaned_books() == 0


class TestBookStatistics:
    def test_get_book_statistics(
        self,
        db_session: Session,
        book_service: BookService,
        book_repository: BookRepository,
    ) -> None:
        # given
        book_repository.save_all(
            [
                book_fixture("Book A", BookType.COMPUTER),
                book_fixture("Book B", BookType.COMPUTER),
                book_fixture("Book C", BookType.SCIENCE),
            ]
        )
        db_session.commit()

        # when
        results = book_service.get_book_statistics()

        # then
        assert set(results) == {
            BookTypeCount(type=BookType.COMPUTER, count=2),
            BookTypeCount(type=BookType.SCIENCE, count=1),
        }

    def test_get_book_statistics_without_books(self, book_service: BookService) -> None:
        assert book_service.get_book_statistics() == []
