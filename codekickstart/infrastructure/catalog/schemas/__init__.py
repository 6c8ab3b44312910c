from .language_schemas import (
    BookResourceSchema,
    ConceptSchema,
    LanguageSchema,
    LanguagesResponse,
    ResourcesSchema,
    SeedLanguagesResponse,
    WebResourceSchema,
)

__all__ = [
    "BookResourceSchema",
    "ConceptSchema",
    "LanguageSchema",
    "LanguagesResponse",
    "ResourcesSchema",
    "SeedLanguagesResponse",
    "WebResourceSchema",
]
