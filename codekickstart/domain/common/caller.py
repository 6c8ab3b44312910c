"""
Request caller identity.

Every use case receives the caller explicitly instead of looking it up from
ambient request state. Operations that need a signed-in user call
``require_user_id``; read operations check ``isinstance(caller, Anonymous)``
and return an empty result.
"""

from dataclasses import dataclass

from .exceptions import AuthenticationRequiredError
from .value_object import ValueObject
from .value_objects.ids import UserId


@dataclass(frozen=True)
class Anonymous(ValueObject):
    """Caller without a (valid) identity."""


@dataclass(frozen=True)
class Authenticated(ValueObject):
    """Caller resolved to a persisted user."""

    user_id: UserId


Caller = Anonymous | Authenticated

ANONYMOUS = Anonymous()


def require_user_id(caller: Caller, operation: str) -> UserId:
    """
    Return the caller's user id or fail for anonymous callers.

    Raises:
        AuthenticationRequiredError: If the caller is anonymous
    """
    if isinstance(caller, Authenticated):
        return caller.user_id
    raise AuthenticationRequiredError(operation)
