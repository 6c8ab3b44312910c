from .language_mapper import LanguageMapper

__all__ = ["LanguageMapper"]
