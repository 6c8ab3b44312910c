from .bookmark_schemas import BookmarksResponse, BookmarkStatusResponse

__all__ = ["BookmarkStatusResponse", "BookmarksResponse"]
