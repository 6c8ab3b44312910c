"""Bookmark entity marking a catalog language as saved by a user."""

from dataclasses import dataclass
from datetime import datetime

from codekickstart.domain.common.entity import Entity
from codekickstart.domain.common.value_objects.ids import BookmarkId, UserId


@dataclass
class LanguageBookmark(Entity[BookmarkId]):
    """
    A user's saved language.

    Business Rules:
    - At most one bookmark per (user, language slug), enforced by a unique constraint
    - Never updated; toggling either creates or deletes it
    """

    id: BookmarkId
    user_id: UserId
    language_slug: str
    created_at: datetime | None = None

    @classmethod
    def create_with_id(
        cls,
        id: BookmarkId,
        user_id: UserId,
        language_slug: str,
        created_at: datetime,
    ) -> "LanguageBookmark":
        """Reconstitute a bookmark from persistence."""
        return cls(id=id, user_id=user_id, language_slug=language_slug, created_at=created_at)
