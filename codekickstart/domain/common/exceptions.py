"""
Domain layer exceptions.

Raised when business rules are violated or a lookup that must succeed fails.
The infrastructure layer translates them into HTTP responses.
"""


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: an empty slug or a blank chat prompt.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """Raised when an entity that an operation depends on cannot be found."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id


class AuthenticationRequiredError(DomainError):
    """
    Raised when an operation that needs a signed-in user is called anonymously.

    Read operations never raise this; they return an empty result instead.
    """

    def __init__(self, operation: str) -> None:
        super().__init__("User must be authenticated", {"operation": operation})
        self.operation = operation
