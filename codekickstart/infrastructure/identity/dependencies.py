"""FastAPI dependencies resolving the request caller."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from codekickstart.application.identity.use_cases.authentication_use_case import (
    AuthenticationUseCase,
)
from codekickstart.core import container
from codekickstart.domain.common.caller import ANONYMOUS, Authenticated, Caller
from codekickstart.domain.identity.entities.user import User
from codekickstart.domain.identity.exceptions import UserNotFoundError
from codekickstart.exceptions import CredentialsException
from codekickstart.infrastructure.common.di import inject_use_case
from codekickstart.infrastructure.identity.auth.token_service import verify_access_token

# auto_error=False: a missing Authorization header resolves to an anonymous caller
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/v1/auth/login", auto_error=False)


def _resolve_user(token: str, use_case: AuthenticationUseCase) -> User:
    user_id = verify_access_token(token)
    if user_id is None:
        raise CredentialsException

    try:
        return use_case.get_user_by_id(user_id)
    except UserNotFoundError:
        raise CredentialsException from None


def get_caller(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    use_case: AuthenticationUseCase = Depends(
        inject_use_case(container.authentication_use_case)
    ),
) -> Caller:
    """
    Resolve who is calling.

    No bearer token means an anonymous caller. A token that is present but
    invalid, expired, or for a deleted user is rejected with 401 rather than
    silently downgraded.
    """
    if not token:
        return ANONYMOUS
    return Authenticated(user_id=_resolve_user(token, use_case).id)


def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    use_case: AuthenticationUseCase = Depends(
        inject_use_case(container.authentication_use_case)
    ),
) -> User:
    """
    Get the current authenticated user from the access token.

    Raises:
        CredentialsException: If the token is missing or invalid, or the user no longer exists
    """
    if not token:
        raise CredentialsException
    return _resolve_user(token, use_case)


CurrentCaller = Annotated[Caller, Depends(get_caller)]
