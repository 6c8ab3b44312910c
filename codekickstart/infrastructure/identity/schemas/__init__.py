from .user_schemas import RefreshTokenRequest, UserDetailsResponse, UserRegisterRequest

__all__ = ["RefreshTokenRequest", "UserDetailsResponse", "UserRegisterRequest"]
