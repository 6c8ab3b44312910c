"""Pydantic schemas for bookmark API responses."""

from pydantic import BaseModel, Field


class BookmarksResponse(BaseModel):
    """Schema for the caller's bookmarked languages."""

    language_slugs: list[str] = Field(
        ..., description="Bookmarked slugs in the order they were added"
    )


class BookmarkStatusResponse(BaseModel):
    """Schema for the bookmark state of a single language."""

    language_slug: str
    bookmarked: bool = Field(..., description="Whether the caller has bookmarked this language")
