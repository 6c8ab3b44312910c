"""Mapper for ChatMessage ORM ↔ Domain conversion."""

from codekickstart.domain.common.value_objects.ids import ChatMessageId, UserId
from codekickstart.domain.tutor.entities.chat_message import ChatMessage
from codekickstart.models import ChatMessage as ChatMessageORM


class ChatMessageMapper:
    """Mapper for ChatMessage ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: ChatMessageORM) -> ChatMessage:
        """Convert ORM model to domain entity."""
        return ChatMessage.create_with_id(
            id=ChatMessageId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            message=orm_model.message,
            response=orm_model.response,
            language_slug=orm_model.language_slug,
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: ChatMessage) -> ChatMessageORM:
        """Convert domain entity to a new ORM model. Chat messages are append-only."""
        return ChatMessageORM(
            user_id=domain_entity.user_id.value,
            message=domain_entity.message,
            response=domain_entity.response,
            language_slug=domain_entity.language_slug,
        )
