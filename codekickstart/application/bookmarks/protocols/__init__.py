from .bookmark_repository import BookmarkRepositoryProtocol

__all__ = ["BookmarkRepositoryProtocol"]
