"""Language entry entity for the learning catalog."""

from dataclasses import dataclass, field
from datetime import datetime

from codekickstart.domain.common.entity import Entity
from codekickstart.domain.common.exceptions import ValidationError
from codekickstart.domain.common.value_object import ValueObject
from codekickstart.domain.common.value_objects.ids import LanguageId

MAX_SLUG_LENGTH = 50


@dataclass(frozen=True)
class Concept(ValueObject):
    """A core concept of a language with a short code example."""

    title: str
    description: str
    example: str


@dataclass(frozen=True)
class WebResource(ValueObject):
    """A website or video link."""

    name: str
    url: str
    description: str


@dataclass(frozen=True)
class BookResource(ValueObject):
    """A recommended book."""

    name: str
    author: str
    description: str


@dataclass(frozen=True)
class Resources(ValueObject):
    """Curated learning resources, each list in display order."""

    websites: tuple[WebResource, ...] = ()
    videos: tuple[WebResource, ...] = ()
    books: tuple[BookResource, ...] = ()


@dataclass
class LanguageEntry(Entity[LanguageId]):
    """
    Reference entry for one programming language.

    Business Rules:
    - Slug is unique, lowercase and never changes once created
    - Entries are created only by the catalog seed and never updated
    """

    id: LanguageId
    slug: str
    name: str
    icon: str
    description: str
    purpose: str
    concepts: tuple[Concept, ...] = ()
    resources: Resources = field(default_factory=Resources)
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.slug:
            raise ValidationError("Slug cannot be empty", field="slug", value=self.slug)
        if len(self.slug) > MAX_SLUG_LENGTH or self.slug != self.slug.strip().lower():
            raise ValidationError(
                "Slug must be lowercase, without surrounding whitespace and at most "
                f"{MAX_SLUG_LENGTH} characters",
                field="slug",
                value=self.slug,
            )
        if not self.name:
            raise ValidationError("Name cannot be empty", field="name", value=self.name)

    @classmethod
    def create(
        cls,
        slug: str,
        name: str,
        icon: str,
        description: str,
        purpose: str,
        concepts: tuple[Concept, ...] = (),
        resources: Resources | None = None,
    ) -> "LanguageEntry":
        """Create a new, not yet persisted catalog entry."""
        return cls(
            id=LanguageId.generate(),
            slug=slug,
            name=name,
            icon=icon,
            description=description,
            purpose=purpose,
            concepts=concepts,
            resources=resources or Resources(),
        )

    @classmethod
    def create_with_id(
        cls,
        id: LanguageId,
        slug: str,
        name: str,
        icon: str,
        description: str,
        purpose: str,
        concepts: tuple[Concept, ...],
        resources: Resources,
        created_at: datetime,
    ) -> "LanguageEntry":
        """Reconstitute an entry from persistence."""
        return cls(
            id=id,
            slug=slug,
            name=name,
            icon=icon,
            description=description,
            purpose=purpose,
            concepts=concepts,
            resources=resources,
            created_at=created_at,
        )
