"""Identity module domain exceptions."""

from codekickstart.domain.common.exceptions import DomainError, EntityNotFoundError


class UserNotFoundError(EntityNotFoundError):
    def __init__(self, user_id: int) -> None:
        super().__init__("User", user_id)


class EmailAlreadyExistsError(DomainError):
    """Registration used an email that already has an account."""

    def __init__(self, email: str) -> None:
        super().__init__("An account with this email already exists", {"email": email})
        self.email = email


class InvalidCredentialsError(DomainError):
    """Unknown email, wrong password, or an invalid refresh token."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class RegistrationDisabledError(DomainError):
    """Sign-up is switched off by ALLOW_USER_REGISTRATIONS."""

    def __init__(self) -> None:
        super().__init__("User registration is currently disabled")
