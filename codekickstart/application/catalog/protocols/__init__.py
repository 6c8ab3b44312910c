from .language_repository import LanguageRepositoryProtocol

__all__ = ["LanguageRepositoryProtocol"]
