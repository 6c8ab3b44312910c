"""Pydantic schemas for language catalog API responses."""

from datetime import datetime

from pydantic import BaseModel, Field

from codekickstart.domain.catalog.entities.language import LanguageEntry


class ConceptSchema(BaseModel):
    """A core concept with a code example."""

    title: str
    description: str
    example: str


class WebResourceSchema(BaseModel):
    """A website or video link."""

    name: str
    url: str
    description: str


class BookResourceSchema(BaseModel):
    """A recommended book."""

    name: str
    author: str
    description: str


class ResourcesSchema(BaseModel):
    """Curated learning resources for a language."""

    websites: list[WebResourceSchema] = Field(default_factory=list)
    videos: list[WebResourceSchema] = Field(default_factory=list)
    books: list[BookResourceSchema] = Field(default_factory=list)


class LanguageSchema(BaseModel):
    """Schema for a catalog entry response."""

    id: int
    slug: str = Field(..., description="Stable identifier used in URLs and bookmarks")
    name: str
    icon: str
    description: str
    purpose: str
    concepts: list[ConceptSchema]
    resources: ResourcesSchema
    created_at: datetime | None = None

    @classmethod
    def from_entity(cls, language: LanguageEntry) -> "LanguageSchema":
        resources = language.resources
        return cls(
            id=language.id.value,
            slug=language.slug,
            name=language.name,
            icon=language.icon,
            description=language.description,
            purpose=language.purpose,
            concepts=[
                ConceptSchema(title=c.title, description=c.description, example=c.example)
                for c in language.concepts
            ],
            resources=ResourcesSchema(
                websites=[
                    WebResourceSchema(name=r.name, url=r.url, description=r.description)
                    for r in resources.websites
                ],
                videos=[
                    WebResourceSchema(name=r.name, url=r.url, description=r.description)
                    for r in resources.videos
                ],
                books=[
                    BookResourceSchema(name=b.name, author=b.author, description=b.description)
                    for b in resources.books
                ],
            ),
            created_at=language.created_at,
        )


class LanguagesResponse(BaseModel):
    """Schema for the catalog listing."""

    languages: list[LanguageSchema] = Field(..., description="Catalog entries in insertion order")


class SeedLanguagesResponse(BaseModel):
    """Schema for the seed endpoint response."""

    status: str = Field(..., description="'seeded' or 'already_seeded'")
    message: str
