"""Mapper for UserLoanHistory ORM ↔ Domain conversion."""

from libraryapp.domain.common.value_objects.ids import UserId, UserLoanHistoryId
from libraryapp.domain.identity.entities.user_loan_history import UserLoanHistory
from libraryapp.models import UserLoanHistory as UserLoanHistoryORM


class UserLoanHistoryMapper:
    """Mapper for UserLoanHistory ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserLoanHistoryORM) -> UserLoanHistory:
        """Convert ORM model to domain entity."""
        return UserLoanHistory.create_with_id(
            id=UserLoanHistoryId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            book_name=orm_model.book_name,
            status=orm_model.status,
        )

    def to_orm(
        self, domain_entity: UserLoanHistory, orm_model: UserLoanHistoryORM | None = None
    ) -> UserLoanHistoryORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Only the status ever changes after creation
            orm_model.status = domain_entity.status
            return orm_model

        return UserLoanHistoryORM(
            id=domain_entity.id.value if domain_entity.id.is_assigned else None,
            user_id=domain_entity.user_id.value,
            book_name=domain_entity.book_name,
            status=domain_entity.status,
        )
