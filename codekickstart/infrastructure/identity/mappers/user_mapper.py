"""Mapper for User ORM ↔ Domain conversion."""

from codekickstart.domain.common.value_objects.ids import UserId
from codekickstart.domain.identity.entities.user import User
from codekickstart.models import User as UserORM


class UserMapper:
    def to_domain(self, orm_model: UserORM) -> User:
        return User.create_with_id(
            id=UserId(orm_model.id),
            email=orm_model.email,
            hashed_password=orm_model.hashed_password,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: User) -> UserORM:
        """Build a new ORM row; accounts are never updated through the mapper."""
        return UserORM(email=domain_entity.email, hashed_password=domain_entity.hashed_password)
