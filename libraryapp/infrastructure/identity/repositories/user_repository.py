"""Repository for User domain entities."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from libraryapp.domain.common.value_objects.ids import UserId
from libraryapp.domain.identity.entities.user import User
from libraryapp.infrastructure.identity.mappers.user_mapper import UserMapper
from libraryapp.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_all(self) -> list[User]:
        stmt = select(UserORM).order_by(UserORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Args:
            user_id: The user ID

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserORM).where(UserORM.id == user_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_name(self, name: str) -> User | None:
        """
        Find a user by name.

        Names are not unique; the user with the lowest id wins.

        Args:
            name: The user's name

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserORM).where(UserORM.name == name).order_by(UserORM.id).limit(1)
        orm_model = self.db.execute(stmt).scalars().first()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, user: User) -> User:
        """
        Save a user entity.

        Args:
            user: The user entity to save

        Returns:
            Saved user entity with database-generated values
        """
        if not user.id.is_assigned:
            orm_model = self.mapper.to_orm(user)
            self.db.add(orm_model)
            self.db.flush()
            logger.debug(f"Created user '{orm_model.name}' (id={orm_model.id})")
            return self.mapper.to_domain(orm_model)

        stmt = select(UserORM).where(UserORM.id == user.id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        if not orm_model:
            raise ValueError(f"User with id {user.id.value} not found")

        orm_model = self.mapper.to_orm(user, orm_model)
        self.db.flush()
        logger.debug(f"Updated user {user.id.value}")
        return self.mapper.to_domain(orm_model)

    def save_all(self, users: list[User]) -> list[User]:
        return [self.save(user) for user in users]

    def delete(self, user: User) -> None:
        """
        Delete a user.

        Loan histories referencing the user are left untouched.
        """
        self.db.execute(delete(UserORM).where(UserORM.id == user.id.value))
        self.db.flush()
        logger.debug(f"Deleted user {user.id.value}")

    def delete_all(self) -> None:
        self.db.execute(delete(UserORM))
        self.db.flush()
