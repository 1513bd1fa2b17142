"""Application service for user management and loan history views."""

import structlog

from libraryapp.application.common.unit_of_work import UnitOfWork
from libraryapp.application.identity.protocols.user_loan_history_repository import (
    UserLoanHistoryRepositoryProtocol,
)
from libraryapp.application.identity.protocols.user_repository import UserRepositoryProtocol
from libraryapp.domain.common.value_objects.ids import UserId
from libraryapp.domain.identity.entities.user import User
from libraryapp.domain.identity.exceptions import UserNotFoundError
from libraryapp.domain.identity.services.loan_history_grouping_service import (
    LoanHistoryGroupingService,
    UserWithLoanHistories,
)

logger = structlog.get_logger(__name__)


class UserService:
    """Application service for user operations."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        user_loan_history_repository: UserLoanHistoryRepositoryProtocol,
        unit_of_work: UnitOfWork,
        loan_history_grouping_service: LoanHistoryGroupingService | None = None,
    ) -> None:
        """Initialize service with dependencies."""
        self.user_repository = user_repository
        self.user_loan_history_repository = user_loan_history_repository
        self.unit_of_work = unit_of_work
        self.loan_history_grouping_service = (
            loan_history_grouping_service or LoanHistoryGroupingService()
        )

    def register_user(self, name: str, age: int | None = None) -> User:
        """
        Register a new user.

        Raises:
            ValidationError: If name is empty or age is negative
        """
        user = User.create(name=name, age=age)

        with self.unit_of_work:
            user = self.user_repository.save(user)
            self.unit_of_work.commit()

        logger.info("user_registered", user_id=user.id.value)
        return user

    def get_users(self) -> list[User]:
        return self.user_repository.find_all()

    def update_user_name(self, user_id: int, name: str) -> User:
        """
        Rename a user.

        Args:
            user_id: ID of the user to rename
            name: New name

        Returns:
            Updated user entity

        Raises:
            UserNotFoundError: If user is not found
            ValidationError: If name is empty
        """
        # Storage never assigns ids below 1
        if user_id < 1:
            raise UserNotFoundError(user_id)

        with self.unit_of_work:
            user = self.user_repository.find_by_id(UserId(user_id))
            if not user:
                raise UserNotFoundError(user_id)

            user.update_name(name)
            user = self.user_repository.save(user)
            self.unit_of_work.commit()

        logger.info("user_name_updated", user_id=user_id)
        return user

    def delete_user(self, name: str) -> None:
        """
        Delete the first user (lowest id) registered under `name`.

        Loan histories of the user are kept.

        Raises:
            UserNotFoundError: If no user has this name
        """
        with self.unit_of_work:
            user = self.user_repository.find_by_name(name)
            if not user:
                raise UserNotFoundError(name)

            self.user_repository.delete(user)
            self.unit_of_work.commit()

        logger.info("user_deleted", user_id=user.id.value)

    def get_user_loan_histories(self) -> list[UserWithLoanHistories]:
        """
        List every user with their loan histories.

        Users who never borrowed anything are included with an empty list.
        """
        users = self.user_repository.find_all()
        if not users:
            return []

        histories = self.user_loan_history_repository.find_by_users([user.id for user in users])
        return self.loan_history_grouping_service.group_by_user(users, histories)
