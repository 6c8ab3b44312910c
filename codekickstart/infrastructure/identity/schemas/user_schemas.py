from pydantic import BaseModel, Field


class UserRegisterRequest(BaseModel):
    """Schema for user registration."""

    email: str = Field(..., min_length=3, max_length=100, description="Email for the new account")
    password: str = Field(..., min_length=8, description="Password (min 8 characters)")


class UserDetailsResponse(BaseModel):
    """Schema for returning user details."""

    id: int = Field(..., description="User id")
    email: str = Field(..., description="User email")


class RefreshTokenRequest(BaseModel):
    """Request body for refresh token (used by non-browser clients)."""

    refresh_token: str | None = None
