"""Repository for language bookmarks."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from codekickstart.domain.bookmarks.entities.bookmark import LanguageBookmark
from codekickstart.domain.bookmarks.exceptions import BookmarkToggleConflictError
from codekickstart.domain.common.value_objects.ids import UserId
from codekickstart.infrastructure.bookmarks.mappers.bookmark_mapper import BookmarkMapper
from codekickstart.models import LanguageBookmark as LanguageBookmarkORM

logger = logging.getLogger(__name__)

# Each lost race means another toggle of the same pair committed in between
MAX_TOGGLE_ATTEMPTS = 3


class BookmarkRepository:
    """Repository for language bookmarks, always scoped to one user."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = BookmarkMapper()

    def find_by_user(self, user_id: UserId) -> list[LanguageBookmark]:
        """
        Get all bookmarks of a user.

        Returns:
            List of bookmark entities in creation order
        """
        stmt = (
            select(LanguageBookmarkORM)
            .where(LanguageBookmarkORM.user_id == user_id.value)
            .order_by(LanguageBookmarkORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_slugs_by_user(self, user_id: UserId) -> list[str]:
        return [bookmark.language_slug for bookmark in self.find_by_user(user_id)]

    def exists(self, user_id: UserId, language_slug: str) -> bool:
        """Check whether the user has bookmarked the language."""
        stmt = select(LanguageBookmarkORM.id).where(
            LanguageBookmarkORM.user_id == user_id.value,
            LanguageBookmarkORM.language_slug == language_slug,
        )
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def toggle(self, user_id: UserId, language_slug: str) -> bool:
        """
        Flip the bookmark for (user, language) in a single transaction.

        The existing row is deleted if there is one; otherwise a row is
        inserted. When the insert hits the unique constraint, a concurrent
        toggle added the pair after our delete found nothing, so the
        transaction is rolled back and the flip is retried against the new state.

        Args:
            user_id: Owner of the bookmark
            language_slug: Catalog slug to flip

        Returns:
            True if the bookmark was added, False if it was removed

        Raises:
            BookmarkToggleConflictError: If every attempt lost a race
        """
        for attempt in range(1, MAX_TOGGLE_ATTEMPTS + 1):
            if self._delete_pair(user_id, language_slug):
                self.db.commit()
                return False

            self.db.add(LanguageBookmarkORM(user_id=user_id.value, language_slug=language_slug))
            try:
                self.db.commit()
            except IntegrityError:
                self.db.rollback()
                logger.info(
                    f"Bookmark insert for user {user_id.value} and '{language_slug}' conflicted "
                    f"(attempt {attempt}/{MAX_TOGGLE_ATTEMPTS})"
                )
                continue
            return True

        raise BookmarkToggleConflictError(user_id.value, language_slug)

    def _delete_pair(self, user_id: UserId, language_slug: str) -> bool:
        stmt = delete(LanguageBookmarkORM).where(
            LanguageBookmarkORM.user_id == user_id.value,
            LanguageBookmarkORM.language_slug == language_slug,
        )
        result = self.db.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]
