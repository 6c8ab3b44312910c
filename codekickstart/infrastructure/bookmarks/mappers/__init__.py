from .bookmark_mapper import BookmarkMapper

__all__ = ["BookmarkMapper"]
