"""Pydantic schemas for AI tutor chat API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from codekickstart.domain.tutor.entities.chat_message import ChatMessage


class ChatMessageSchema(BaseModel):
    """Schema for one stored prompt/response pair."""

    id: int
    message: str = Field(..., description="What the user asked")
    response: str = Field(..., description="What the tutor answered")
    language_slug: str | None = Field(None, description="Language the user was viewing, if any")
    created_at: datetime | None = None

    @classmethod
    def from_entity(cls, chat_message: ChatMessage) -> "ChatMessageSchema":
        return cls(
            id=chat_message.id.value,
            message=chat_message.message,
            response=chat_message.response,
            language_slug=chat_message.language_slug,
            created_at=chat_message.created_at,
        )


class ChatHistoryResponse(BaseModel):
    """Schema for the caller's chat history."""

    messages: list[ChatMessageSchema] = Field(..., description="Messages, oldest first")


class SendChatMessageRequest(BaseModel):
    """Schema for asking the tutor a question."""

    message: str = Field(..., min_length=1, max_length=4000, description="Question for the tutor")
    language_slug: str | None = Field(
        None, max_length=50, description="Slug of the language the user is viewing"
    )


class SendChatMessageResponse(BaseModel):
    """Schema for the tutor's answer."""

    response: str
