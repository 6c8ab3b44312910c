"""Bookmarks domain layer."""

from codekickstart.domain.bookmarks.entities import LanguageBookmark
from codekickstart.domain.bookmarks.exceptions import BookmarkToggleConflictError

__all__ = ["BookmarkToggleConflictError", "LanguageBookmark"]
