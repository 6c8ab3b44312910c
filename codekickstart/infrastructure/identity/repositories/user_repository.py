"""Repository for learner accounts."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from codekickstart.domain.common.value_objects.ids import UserId
from codekickstart.domain.identity.entities.user import User
from codekickstart.domain.identity.exceptions import EmailAlreadyExistsError
from codekickstart.infrastructure.identity.mappers.user_mapper import UserMapper
from codekickstart.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    """Lookups by id or email, and account creation."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def _find_one(self, *criteria: object) -> User | None:
        orm_model = self.db.execute(select(UserORM).where(*criteria)).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_id(self, user_id: UserId) -> User | None:
        return self._find_one(UserORM.id == user_id.value)

    def find_by_email(self, email: str) -> User | None:
        return self._find_one(UserORM.email == email)

    def add(self, user: User) -> User:
        """
        Insert a new account.

        Returns:
            The user with its database id and timestamps

        Raises:
            EmailAlreadyExistsError: If another account uses the same email
        """
        if user.id.is_persisted():
            raise ValueError(f"User {user.id.value} already exists")

        orm_model = self.mapper.to_orm(user)
        self.db.add(orm_model)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            # users.email is the only unique column besides the primary key
            raise EmailAlreadyExistsError(user.email) from e

        self.db.refresh(orm_model)
        logger.info(f"Created user id={orm_model.id}")
        return self.mapper.to_domain(orm_model)
