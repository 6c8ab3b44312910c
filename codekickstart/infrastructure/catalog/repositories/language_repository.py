"""Repository for catalog LanguageEntry domain entities."""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from codekickstart.domain.catalog.entities.language import LanguageEntry
from codekickstart.infrastructure.catalog.mappers.language_mapper import LanguageMapper
from codekickstart.models import Language as LanguageORM

logger = logging.getLogger(__name__)


class LanguageRepository:
    """Repository for catalog LanguageEntry domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = LanguageMapper()

    def list_all(self) -> list[LanguageEntry]:
        """
        Get all catalog entries.

        Returns:
            List of language entities in insertion order
        """
        stmt = select(LanguageORM).order_by(LanguageORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_slug(self, slug: str) -> LanguageEntry | None:
        """
        Find a catalog entry by slug.

        Returns:
            Language entity if found, None otherwise
        """
        stmt = select(LanguageORM).where(LanguageORM.slug == slug)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def count(self) -> int:
        stmt = select(func.count()).select_from(LanguageORM)
        return self.db.execute(stmt).scalar_one()

    def seed_if_empty(self, entries: list[LanguageEntry]) -> bool:
        """
        Insert entries only if the catalog holds no rows.

        The emptiness check and all inserts are committed as one transaction.
        If a concurrent seeder commits first, the unique slug constraint
        rejects this batch and it is rolled back as a whole.

        Args:
            entries: New (unpersisted) language entities

        Returns:
            True if the entries were inserted, False if the catalog was already seeded
        """
        if self.count() > 0:
            return False

        try:
            self.db.add_all([self.mapper.to_orm(entry) for entry in entries])
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.info("Catalog seed lost a race with a concurrent seed, keeping existing rows")
            return False

        logger.info(f"Seeded catalog with {len(entries)} languages")
        return True
