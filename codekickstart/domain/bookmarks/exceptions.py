"""Bookmark module domain exceptions."""

from codekickstart.domain.common.exceptions import DomainError


class BookmarkToggleConflictError(DomainError):
    """Raised when a toggle keeps losing races against concurrent toggles of the same pair."""

    def __init__(self, user_id: int, language_slug: str) -> None:
        super().__init__(
            f"Could not toggle bookmark for '{language_slug}', please retry",
            {"user_id": user_id, "language_slug": language_slug},
        )
        self.user_id = user_id
        self.language_slug = language_slug
