"""Domain service for grouping loan histories by user."""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from libraryapp.domain.identity.entities.user import User
from libraryapp.domain.identity.entities.user_loan_history import UserLoanHistory


@dataclass
class UserWithLoanHistories:
    """A user together with every loan they have taken."""

    user: User
    histories: list[UserLoanHistory]


class LoanHistoryGroupingService:
    """Stateless domain service for attaching loan histories to their users."""

    @staticmethod
    def group_by_user(
        users: Iterable[User], histories: Iterable[UserLoanHistory]
    ) -> list[UserWithLoanHistories]:
        """
        Group histories under the user that owns them.

        Every user appears exactly once, in input order, even without any
        history. Histories of users not in the list are dropped.

        Args:
            users: Users to report on
            histories: Loan histories to distribute

        Returns:
            One UserWithLoanHistories per user
        """
        grouped: dict[int, list[UserLoanHistory]] = defaultdict(list)
        for history in histories:
            grouped[history.user_id.value].append(history)

        return [
            UserWithLoanHistories(user=user, histories=grouped.get(user.id.value, []))
            for user in users
        ]
