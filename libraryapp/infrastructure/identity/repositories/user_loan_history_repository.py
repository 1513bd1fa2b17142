"""Repository for UserLoanHistory domain entities."""

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from libraryapp.domain.common.value_objects.ids import UserId
from libraryapp.domain.identity.entities.user_loan_history import UserLoanHistory, UserLoanStatus
from libraryapp.infrastructure.identity.mappers.user_loan_history_mapper import (
    UserLoanHistoryMapper,
)
from libraryapp.models import UserLoanHistory as UserLoanHistoryORM

logger = logging.getLogger(__name__)


class UserLoanHistoryRepository:
    """Repository for UserLoanHistory domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserLoanHistoryMapper()

    def find_all(self) -> list[UserLoanHistory]:
        stmt = select(UserLoanHistoryORM).order_by(UserLoanHistoryORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_book_name_and_status(
        self, book_name: str, status: UserLoanStatus, *, for_update: bool = False
    ) -> UserLoanHistory | None:
        """
        Find a history of a title in the given status.

        Args:
            book_name: Exact book name to match
            status: Status to match
            for_update: Lock matching rows until the transaction ends
                (ignored by SQLite, which serializes writers itself)

        Returns:
            UserLoanHistory entity if found, None otherwise
        """
        stmt = (
            select(UserLoanHistoryORM)
            .where(
                UserLoanHistoryORM.book_name == book_name,
                UserLoanHistoryORM.status == status,
            )
            .order_by(UserLoanHistoryORM.id.desc())
        )
        if for_update:
            stmt = stmt.with_for_update()
        orm_model = self.db.execute(stmt).scalars().first()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user_and_book_name_and_status(
        self, user_id: UserId, book_name: str, status: UserLoanStatus
    ) -> UserLoanHistory | None:
        """
        Find the most recent history of a title for one user in the given status.

        Args:
            user_id: Owner of the history
            book_name: Exact book name to match
            status: Status to match

        Returns:
            UserLoanHistory entity if found, None otherwise
        """
        stmt = (
            select(UserLoanHistoryORM)
            .where(
                UserLoanHistoryORM.user_id == user_id.value,
                UserLoanHistoryORM.book_name == book_name,
                UserLoanHistoryORM.status == status,
            )
            .order_by(UserLoanHistoryORM.id.desc())
            .limit(1)
        )
        orm_model = self.db.execute(stmt).scalars().first()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user(self, user_id: UserId) -> list[UserLoanHistory]:
        return self.find_by_users([user_id])

    def find_by_users(self, user_ids: list[UserId]) -> list[UserLoanHistory]:
        """
        Get the histories of several users in a single query.

        Args:
            user_ids: Owners to fetch histories for

        Returns:
            List of UserLoanHistory entities, oldest first
        """
        if not user_ids:
            return []

        stmt = (
            select(UserLoanHistoryORM)
            .where(UserLoanHistoryORM.user_id.in_([uid.value for uid in user_ids]))
            .order_by(UserLoanHistoryORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def count_by_status(self, status: UserLoanStatus) -> int:
        stmt = (
            select(func.count())
            .select_from(UserLoanHistoryORM)
            .where(UserLoanHistoryORM.status == status)
        )
        return self.db.execute(stmt).scalar_one()

    def save(self, history: UserLoanHistory) -> UserLoanHistory:
        """
        Save a loan history entity.

        Args:
            history: The loan history to save

        Returns:
            Saved entity with database-generated values
        """
        if not history.id.is_assigned:
            orm_model = self.mapper.to_orm(history)
            self.db.add(orm_model)
            self.db.flush()
            logger.debug(
                f"Created loan history for '{orm_model.book_name}' "
                f"(id={orm_model.id}, user_id={orm_model.user_id})"
            )
            return self.mapper.to_domain(orm_model)

        stmt = select(UserLoanHistoryORM).where(UserLoanHistoryORM.id == history.id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        if not orm_model:
            raise ValueError(f"Loan history with id {history.id.value} not found")

        orm_model = self.mapper.to_orm(history, orm_model)
        self.db.flush()
        logger.debug(f"Updated loan history {history.id.value} to {history.status}")
        return self.mapper.to_domain(orm_model)

    def save_all(self, histories: list[UserLoanHistory]) -> list[UserLoanHistory]:
        return [self.save(history) for history in histories]

    def delete_all(self) -> None:
        self.db.execute(delete(UserLoanHistoryORM))
        self.db.flush()
