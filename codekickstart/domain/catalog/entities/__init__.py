from .language import BookResource, Concept, LanguageEntry, Resources, WebResource

__all__ = [
    "BookResource",
    "Concept",
    "LanguageEntry",
    "Resources",
    "WebResource",
]
