from .bookmark_repository import BookmarkRepository

__all__ = ["BookmarkRepository"]
