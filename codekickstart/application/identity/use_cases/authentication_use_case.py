"""Sign-in, token refresh and caller lookup."""

import structlog

from codekickstart.application.identity.protocols.password_service import (
    PasswordServiceProtocol,
)
from codekickstart.application.identity.protocols.token_service import TokenServiceProtocol
from codekickstart.application.identity.protocols.user_repository import UserRepositoryProtocol
from codekickstart.domain.common.value_objects.ids import UserId
from codekickstart.domain.identity.entities.user import User
from codekickstart.domain.identity.exceptions import InvalidCredentialsError, UserNotFoundError
from codekickstart.infrastructure.identity.auth.token_service import TokenWithRefresh

logger = structlog.get_logger(__name__)


class AuthenticationUseCase:
    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        token_service: TokenServiceProtocol,
    ) -> None:
        self.user_repository = user_repository
        self.password_service = password_service
        self.token_service = token_service

    def _password_matches(self, user: User | None, password: str) -> bool:
        # Unknown emails still pay for one hash verification
        hashed = user.hashed_password if user else None
        if hashed is None:
            self.password_service.verify_password(password, self.password_service.get_dummy_hash())
            return False
        return self.password_service.verify_password(password, hashed)

    def authenticate_user(self, email: str, password: str) -> tuple[User, TokenWithRefresh]:
        """
        Check an email/password pair and issue tokens.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        user = self.user_repository.find_by_email(email)
        matches = self._password_matches(user, password)
        if user is None or not matches:
            logger.info("login_failed")
            raise InvalidCredentialsError

        logger.info("user_authenticated", user_id=user.id.value)
        return user, self.token_service.create_token_pair(user.id.value)

    def refresh_access_token(self, refresh_token: str) -> tuple[User, TokenWithRefresh]:
        """
        Trade a refresh token for a new token pair.

        Raises:
            InvalidCredentialsError: If the token is invalid or its user is gone
        """
        user_id = self.token_service.verify_refresh_token(refresh_token)
        user = self.user_repository.find_by_id(UserId(user_id)) if user_id is not None else None
        if user is None:
            raise InvalidCredentialsError

        logger.info("access_token_refreshed", user_id=user.id.value)
        return user, self.token_service.create_token_pair(user.id.value)

    def get_user_by_id(self, user_id: int) -> User:
        """
        Load the user behind an access token.

        Raises:
            UserNotFoundError: If the account no longer exists
        """
        user = self.user_repository.find_by_id(UserId(user_id))
        if user is None:
            raise UserNotFoundError(user_id)
        return user
