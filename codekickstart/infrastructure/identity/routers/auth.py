import logging
from typing import Annotated

from fastapi import APIRouter, Cookie, Depends, HTTPException, Response
from fastapi.security import OAuth2PasswordRequestForm
from starlette import status

from codekickstart.application.identity.use_cases.authentication_use_case import (
    AuthenticationUseCase,
)
from codekickstart.config import get_settings
from codekickstart.core import container
from codekickstart.domain.identity.exceptions import InvalidCredentialsError
from codekickstart.infrastructure.common.di import inject_use_case
from codekickstart.infrastructure.identity.auth.token_service import TokenWithRefresh
from codekickstart.infrastructure.identity.schemas import RefreshTokenRequest

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])

REFRESH_COOKIE_PATH = "/api/v1/auth"


def set_refresh_cookie(response: Response, refresh_token: str) -> None:
    """Set the refresh token as an httpOnly cookie."""
    settings = get_settings()
    response.set_cookie(
        key="refresh_token",
        value=refresh_token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="strict",
        path=REFRESH_COOKIE_PATH,
        max_age=settings.REFRESH_TOKEN_EXPIRE_DAYS * 24 * 60 * 60,
    )


def _clear_refresh_cookie(response: Response) -> None:
    response.delete_cookie(
        key="refresh_token",
        httponly=True,
        secure=get_settings().COOKIE_SECURE,
        samesite="strict",
        path=REFRESH_COOKIE_PATH,
    )


@router.post("/login")
def login(
    response: Response,
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    use_case: AuthenticationUseCase = Depends(inject_use_case(container.authentication_use_case)),
) -> TokenWithRefresh:
    # OAuth2PasswordRequestForm uses 'username' field, but we use it for email
    try:
        _, token_pair = use_case.authenticate_user(form_data.username, form_data.password)
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        ) from None

    set_refresh_cookie(response, token_pair.refresh_token)
    return token_pair


@router.post("/refresh")
def refresh(
    response: Response,
    body: RefreshTokenRequest | None = None,
    refresh_token: Annotated[str | None, Cookie()] = None,
    use_case: AuthenticationUseCase = Depends(inject_use_case(container.authentication_use_case)),
) -> TokenWithRefresh:
    """
    Refresh the access token using a refresh token.

    The refresh token is read from the httpOnly cookie (web clients) or,
    failing that, from the request body.
    """
    token = refresh_token
    if not token and body and body.refresh_token:
        token = body.refresh_token

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Refresh token required",
        )

    try:
        _, token_pair = use_case.refresh_access_token(token)
    except InvalidCredentialsError:
        _clear_refresh_cookie(response)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired refresh token",
        ) from None

    set_refresh_cookie(response, token_pair.refresh_token)
    return token_pair


@router.post("/logout")
def logout(response: Response) -> dict[str, str]:
    """
    Log out by clearing the refresh token cookie.

    The access token stays valid until it expires.
    """
    _clear_refresh_cookie(response)
    return {"message": "Logged out successfully"}
