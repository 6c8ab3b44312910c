"""Repository for the append-only chat transcript."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from codekickstart.domain.common.value_objects.ids import UserId
from codekickstart.domain.tutor.entities.chat_message import ChatMessage
from codekickstart.infrastructure.tutor.mappers.chat_message_mapper import ChatMessageMapper
from codekickstart.models import ChatMessage as ChatMessageORM


class ChatMessageRepository:
    """Repository for ChatMessage domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ChatMessageMapper()

    def find_by_user(self, user_id: UserId, language_slug: str | None = None) -> list[ChatMessage]:
        """
        Get a user's chat messages.

        Args:
            user_id: Owner of the messages
            language_slug: If given, only messages tagged with exactly this slug

        Returns:
            List of chat message entities, oldest first
        """
        stmt = select(ChatMessageORM).where(ChatMessageORM.user_id == user_id.value)
        if language_slug is not None:
            stmt = stmt.where(ChatMessageORM.language_slug == language_slug)
        stmt = stmt.order_by(ChatMessageORM.id)

        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def append(self, message: ChatMessage) -> ChatMessage:
        """
        Persist a new chat message.

        Returns:
            Saved entity with database-generated id and timestamp
        """
        if message.id.is_persisted():
            raise ValueError("Chat messages cannot be updated")

        orm_model = self.mapper.to_orm(message)
        self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
