"""Identity domain layer."""

from codekickstart.domain.identity.entities.user import User
from codekickstart.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    RegistrationDisabledError,
    UserNotFoundError,
)

__all__ = [
    "EmailAlreadyExistsError",
    "InvalidCredentialsError",
    "RegistrationDisabledError",
    "User",
    "UserNotFoundError",
]
