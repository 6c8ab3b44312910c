"""Chat message entity: one persisted exchange with the AI tutor."""

from dataclasses import dataclass
from datetime import datetime

from codekickstart.domain.common.entity import Entity
from codekickstart.domain.common.exceptions import ValidationError
from codekickstart.domain.common.value_objects.ids import ChatMessageId, UserId


@dataclass
class ChatMessage(Entity[ChatMessageId]):
    """
    A prompt written by a user and the tutor's response to it.

    Business Rules:
    - Created only after the tutor answered; failed calls leave no message
    - Append-only: never edited or deleted
    - Optionally tagged with the catalog slug the user was viewing
    """

    id: ChatMessageId
    user_id: UserId
    message: str
    response: str
    language_slug: str | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.message.strip():
            raise ValidationError("Message cannot be empty", field="message")

    @classmethod
    def create(
        cls,
        user_id: UserId,
        message: str,
        response: str,
        language_slug: str | None = None,
    ) -> "ChatMessage":
        """Create a new, not yet persisted chat message."""
        return cls(
            id=ChatMessageId.generate(),
            user_id=user_id,
            message=message,
            response=response,
            language_slug=language_slug,
        )

    @classmethod
    def create_with_id(
        cls,
        id: ChatMessageId,
        user_id: UserId,
        message: str,
        response: str,
        language_slug: str | None,
        created_at: datetime,
    ) -> "ChatMessage":
        """Reconstitute a chat message from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            message=message,
            response=response,
            language_slug=language_slug,
            created_at=created_at,
        )
