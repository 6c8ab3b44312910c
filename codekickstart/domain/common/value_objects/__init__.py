"""Common value objects shared across all domain modules."""

from .ids import BookmarkId, ChatMessageId, LanguageId, UserId

__all__ = [
    "BookmarkId",
    "ChatMessageId",
    "LanguageId",
    "UserId",
]
