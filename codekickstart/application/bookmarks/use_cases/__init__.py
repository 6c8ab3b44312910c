from .bookmark_use_case import BookmarkUseCase

__all__ = ["BookmarkUseCase"]
