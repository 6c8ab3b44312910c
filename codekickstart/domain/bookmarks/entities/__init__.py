from .bookmark import LanguageBookmark

__all__ = ["LanguageBookmark"]
