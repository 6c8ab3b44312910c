import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from codekickstart.application.identity.use_cases.register_user_use_case import (
    RegisterUserUseCase,
)
from codekickstart.core import container
from codekickstart.domain.common.exceptions import DomainError
from codekickstart.domain.identity.entities.user import User
from codekickstart.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    RegistrationDisabledError,
)
from codekickstart.exceptions import CodeKickstartError
from codekickstart.infrastructure.common.di import inject_use_case
from codekickstart.infrastructure.identity.auth.token_service import TokenWithRefresh
from codekickstart.infrastructure.identity.dependencies import get_current_user
from codekickstart.infrastructure.identity.routers.auth import set_refresh_cookie
from codekickstart.infrastructure.identity.schemas import (
    UserDetailsResponse,
    UserRegisterRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    response: Response,
    register_data: UserRegisterRequest,
    use_case: RegisterUserUseCase = Depends(inject_use_case(container.register_user_use_case)),
) -> TokenWithRefresh:
    """
    Register a new user account.

    Returns a token pair so the user is signed in right away.
    """
    try:
        _, token_pair = use_case.register_user(register_data.email, register_data.password)
    except RegistrationDisabledError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User registration is currently disabled",
        ) from None
    except EmailAlreadyExistsError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        ) from None
    except (CodeKickstartError, DomainError):
        # Handled by exception handlers
        raise
    except Exception as e:
        logger.error(f"Failed to register user: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e

    set_refresh_cookie(response, token_pair.refresh_token)
    return token_pair


@router.get("/me")
def get_me(current_user: Annotated[User, Depends(get_current_user)]) -> UserDetailsResponse:
    """Get the current user's profile information."""
    return UserDetailsResponse(id=current_user.id.value, email=current_user.email)
