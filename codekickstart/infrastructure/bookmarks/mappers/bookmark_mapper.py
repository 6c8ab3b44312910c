"""Mapper for LanguageBookmark ORM ↔ Domain conversion."""

from codekickstart.domain.bookmarks.entities.bookmark import LanguageBookmark
from codekickstart.domain.common.value_objects.ids import BookmarkId, UserId
from codekickstart.models import LanguageBookmark as LanguageBookmarkORM


class BookmarkMapper:
    """Mapper for LanguageBookmark ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: LanguageBookmarkORM) -> LanguageBookmark:
        """Convert ORM model to domain entity."""
        return LanguageBookmark.create_with_id(
            id=BookmarkId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            language_slug=orm_model.language_slug,
            created_at=orm_model.created_at,
        )
