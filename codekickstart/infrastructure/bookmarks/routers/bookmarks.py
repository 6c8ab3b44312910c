import logging

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from codekickstart.application.bookmarks.use_cases.bookmark_use_case import BookmarkUseCase
from codekickstart.core import container
from codekickstart.domain.common.exceptions import DomainError
from codekickstart.exceptions import CodeKickstartError
from codekickstart.infrastructure.bookmarks.schemas import (
    BookmarksResponse,
    BookmarkStatusResponse,
)
from codekickstart.infrastructure.common.di import inject_use_case
from codekickstart.infrastructure.identity.dependencies import CurrentCaller

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


@router.get("", response_model=BookmarksResponse, status_code=status.HTTP_200_OK)
def list_bookmarks(
    caller: CurrentCaller,
    use_case: BookmarkUseCase = Depends(inject_use_case(container.bookmark_use_case)),
) -> BookmarksResponse:
    """
    Get the slugs of every language the caller has bookmarked.

    Anonymous callers get an empty list.
    """
    return BookmarksResponse(language_slugs=use_case.list_bookmarks(caller))


@router.get(
    "/{language_slug}", response_model=BookmarkStatusResponse, status_code=status.HTTP_200_OK
)
def get_bookmark_status(
    language_slug: str,
    caller: CurrentCaller,
    use_case: BookmarkUseCase = Depends(inject_use_case(container.bookmark_use_case)),
) -> BookmarkStatusResponse:
    """Check whether the caller has bookmarked a language. Always false when anonymous."""
    return BookmarkStatusResponse(
        language_slug=language_slug,
        bookmarked=use_case.is_bookmarked(caller, language_slug),
    )


@router.post(
    "/{language_slug}/toggle",
    response_model=BookmarkStatusResponse,
    status_code=status.HTTP_200_OK,
)
def toggle_bookmark(
    language_slug: str,
    caller: CurrentCaller,
    use_case: BookmarkUseCase = Depends(inject_use_case(container.bookmark_use_case)),
) -> BookmarkStatusResponse:
    """
    Bookmark a language, or remove the bookmark if it already exists.

    Args:
        language_slug: Slug of a catalog language

    Returns:
        The new state: bookmarked is true if the bookmark was added

    Raises:
        AuthenticationRequiredError: If the caller is anonymous (401)
        LanguageNotFoundError: If the slug is not in the catalog (404)
        BookmarkToggleConflictError: If concurrent toggles kept conflicting (409)
    """
    try:
        added = use_case.toggle_bookmark(caller, language_slug)
        return BookmarkStatusResponse(language_slug=language_slug, bookmarked=added)
    except (CodeKickstartError, DomainError):
        # Re-raise custom exceptions - handled by exception handlers
        raise
    except Exception as e:
        logger.error(f"Failed to toggle bookmark for {language_slug}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
