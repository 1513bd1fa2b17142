from typing import Protocol

from libraryapp.domain.common.value_objects.ids import UserId
from libraryapp.domain.identity.entities.user_loan_history import UserLoanHistory, UserLoanStatus


class UserLoanHistoryRepositoryProtocol(Protocol):
    def find_all(self) -> list[UserLoanHistory]: ...

    def find_by_book_name_and_status(
        self, book_name: str, status: UserLoanStatus, *, for_update: bool = False
    ) -> UserLoanHistory | None:
        """
        Find a history of `book_name` in `status`.

        With for_update, matching rows stay locked until the unit of work ends.
        """
        ...

    def find_by_user_and_book_name_and_status(
        self, user_id: UserId, book_name: str, status: UserLoanStatus
    ) -> UserLoanHistory | None:
        """Find the most recent matching history."""
        ...

    def find_by_user(self, user_id: UserId) -> list[UserLoanHistory]: ...

    def find_by_users(self, user_ids: list[UserId]) -> list[UserLoanHistory]: ...

    def count_by_status(self, status: UserLoanStatus) -> int: ...

    def save(self, history: UserLoanHistory) -> UserLoanHistory: ...

    def save_all(self, histories: list[UserLoanHistory]) -> list[UserLoanHistory]: ...

    def delete_all(self) -> None: ...
