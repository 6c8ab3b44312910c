from .chat_message_mapper import ChatMessageMapper

__all__ = ["ChatMessageMapper"]
