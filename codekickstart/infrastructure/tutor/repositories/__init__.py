from .chat_message_repository import ChatMessageRepository

__all__ = ["ChatMessageRepository"]
