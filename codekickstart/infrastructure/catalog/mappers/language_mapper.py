"""Mapper for Language ORM ↔ Domain conversion."""

from typing import Any

from codekickstart.domain.catalog.entities.language import (
    BookResource,
    Concept,
    LanguageEntry,
    Resources,
    WebResource,
)
from codekickstart.domain.common.value_objects.ids import LanguageId
from codekickstart.models import Language as LanguageORM


class LanguageMapper:
    """Mapper for Language ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: LanguageORM) -> LanguageEntry:
        """Convert ORM model to domain entity."""
        resources = orm_model.resources or {}
        return LanguageEntry.create_with_id(
            id=LanguageId(orm_model.id),
            slug=orm_model.slug,
            name=orm_model.name,
            icon=orm_model.icon,
            description=orm_model.description,
            purpose=orm_model.purpose,
            concepts=tuple(Concept(**c) for c in orm_model.concepts or []),
            resources=Resources(
                websites=tuple(WebResource(**w) for w in resources.get("websites", [])),
                videos=tuple(WebResource(**v) for v in resources.get("videos", [])),
                books=tuple(BookResource(**b) for b in resources.get("books", [])),
            ),
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: LanguageEntry) -> LanguageORM:
        """Convert domain entity to a new ORM model. Catalog entries are never updated."""
        return LanguageORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted() else None,
            slug=domain_entity.slug,
            name=domain_entity.name,
            icon=domain_entity.icon,
            description=domain_entity.description,
            purpose=domain_entity.purpose,
            concepts=[self._concept_to_json(c) for c in domain_entity.concepts],
            resources=self._resources_to_json(domain_entity.resources),
        )

    @staticmethod
    def _concept_to_json(concept: Concept) -> dict[str, Any]:
        return {
            "title": concept.title,
            "description": concept.description,
            "example": concept.example,
        }

    @staticmethod
    def _resources_to_json(resources: Resources) -> dict[str, Any]:
        return {
            "websites": [
                {"name": w.name, "url": w.url, "description": w.description}
                for w in resources.websites
            ],
            "videos": [
                {"name": v.name, "url": v.url, "description": v.description}
                for v in resources.videos
            ],
            "books": [
                {"name": b.name, "author": b.author, "description": b.description}
                for b in resources.books
            ],
        }
