"""Catalog domain layer."""

from codekickstart.domain.catalog.entities import (
    BookResource,
    Concept,
    LanguageEntry,
    Resources,
    WebResource,
)
from codekickstart.domain.catalog.exceptions import LanguageNotFoundError
from codekickstart.domain.catalog.seed_status import SeedStatus

__all__ = [
    "BookResource",
    "Concept",
    "LanguageEntry",
    "LanguageNotFoundError",
    "Resources",
    "SeedStatus",
    "WebResource",
]
