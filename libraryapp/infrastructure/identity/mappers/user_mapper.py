"""Mapper for User ORM ↔ Domain conversion."""

from libraryapp.domain.common.value_objects.ids import UserId
from libraryapp.domain.identity.entities.user import User
from libraryapp.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User.create_with_id(
            id=UserId(orm_model.id),
            name=orm_model.name,
            age=orm_model.age,
        )

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.name = domain_entity.name
            orm_model.age = domain_entity.age
            return orm_model

        return UserORM(
            id=domain_entity.id.value if domain_entity.id.is_assigned else None,
            name=domain_entity.name,
            age=domain_entity.age,
        )
