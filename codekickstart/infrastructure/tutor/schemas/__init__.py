from .chat_schemas import (
    ChatHistoryResponse,
    ChatMessageSchema,
    SendChatMessageRequest,
    SendChatMessageResponse,
)

__all__ = [
    "ChatHistoryResponse",
    "ChatMessageSchema",
    "SendChatMessageRequest",
    "SendChatMessageResponse",
]
