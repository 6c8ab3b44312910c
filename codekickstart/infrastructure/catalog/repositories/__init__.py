from .language_repository import LanguageRepository

__all__ = ["LanguageRepository"]
