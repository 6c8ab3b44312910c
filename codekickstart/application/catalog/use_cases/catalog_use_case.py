"""Use case for reading and seeding the language catalog."""

import structlog

from codekickstart.application.catalog.protocols.language_repository import (
    LanguageRepositoryProtocol,
)
from codekickstart.domain.catalog.entities.language import LanguageEntry
from codekickstart.domain.catalog.reference_languages import get_reference_languages
from codekickstart.domain.catalog.seed_status import SeedStatus

logger = structlog.get_logger(__name__)


class CatalogUseCase:
    """Catalog reads and the one-time seed of the built-in reference set."""

    def __init__(self, language_repository: LanguageRepositoryProtocol) -> None:
        self.language_repository = language_repository

    def list_languages(self) -> list[LanguageEntry]:
        """Get every catalog entry in insertion order."""
        return self.language_repository.list_all()

    def get_language(self, slug: str) -> LanguageEntry | None:
        """
        Get a catalog entry by slug.

        Returns:
            The entry, or None when no entry has this slug
        """
        return self.language_repository.find_by_slug(slug)

    def seed_languages(self) -> SeedStatus:
        """
        Insert the built-in reference languages if the catalog is empty.

        Safe to call any number of times, including concurrently: only the
        first call on an empty catalog inserts anything.

        Returns:
            SeedStatus.SEEDED if this call inserted the entries,
            SeedStatus.ALREADY_SEEDED otherwise
        """
        entries = get_reference_languages()
        if self.language_repository.seed_if_empty(entries):
            logger.info("languages_seeded", count=len(entries))
            return SeedStatus.SEEDED

        logger.info("languages_already_seeded")
        return SeedStatus.ALREADY_SEEDED
