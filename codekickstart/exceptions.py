"""Custom exception hierarchy for the CodeKickstart application."""

from fastapi import HTTPException
from starlette import status


class CodeKickstartError(Exception):
    """Base exception for all CodeKickstart errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
