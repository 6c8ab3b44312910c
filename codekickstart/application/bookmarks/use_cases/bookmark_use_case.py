"""Use case for language bookmarks."""

import structlog

from codekickstart.application.bookmarks.protocols.bookmark_repository import (
    BookmarkRepositoryProtocol,
)
from codekickstart.application.catalog.protocols.language_repository import (
    LanguageRepositoryProtocol,
)
from codekickstart.domain.catalog.exceptions import LanguageNotFoundError
from codekickstart.domain.common.caller import Anonymous, Caller, require_user_id

logger = structlog.get_logger(__name__)


class BookmarkUseCase:
    def __init__(
        self,
        bookmark_repository: BookmarkRepositoryProtocol,
        language_repository: LanguageRepositoryProtocol,
    ) -> None:
        self.bookmark_repository = bookmark_repository
        self.language_repository = language_repository

    def list_bookmarks(self, caller: Caller) -> list[str]:
        """
        Get the slugs the caller has bookmarked.

        Anonymous callers have no bookmarks, so they get an empty list.
        """
        if isinstance(caller, Anonymous):
            return []
        return self.bookmark_repository.find_slugs_by_user(caller.user_id)

    def is_bookmarked(self, caller: Caller, language_slug: str) -> bool:
        """Check whether the caller bookmarked a language. Always False when anonymous."""
        if isinstance(caller, Anonymous):
            return False
        return self.bookmark_repository.exists(caller.user_id, language_slug)

    def toggle_bookmark(self, caller: Caller, language_slug: str) -> bool:
        """
        Add the bookmark if it is missing, remove it if it exists.

        Args:
            caller: The requesting caller; must be authenticated
            language_slug: Slug of a catalog language

        Returns:
            True if the bookmark was added, False if it was removed

        Raises:
            AuthenticationRequiredError: If the caller is anonymous
            LanguageNotFoundError: If the slug is not in the catalog
            BookmarkToggleConflictError: If concurrent toggles kept conflicting
        """
        user_id = require_user_id(caller, "toggle_bookmark")

        if self.language_repository.find_by_slug(language_slug) is None:
            raise LanguageNotFoundError(language_slug)

        added = self.bookmark_repository.toggle(user_id, language_slug)
        logger.info(
            "bookmark_added" if added else "bookmark_removed",
            user_id=user_id.value,
            language_slug=language_slug,
        )
        return added
