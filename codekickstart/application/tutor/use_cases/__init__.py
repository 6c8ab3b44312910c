from .chat_use_case import ChatUseCase

__all__ = ["ChatUseCase"]
