import logging

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from codekickstart.application.catalog.use_cases.catalog_use_case import CatalogUseCase
from codekickstart.core import container
from codekickstart.domain.catalog.exceptions import LanguageNotFoundError
from codekickstart.domain.common.exceptions import DomainError
from codekickstart.exceptions import CodeKickstartError
from codekickstart.infrastructure.catalog.schemas import (
    LanguageSchema,
    LanguagesResponse,
    SeedLanguagesResponse,
)
from codekickstart.infrastructure.common.di import inject_use_case

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/languages", tags=["languages"])


@router.get("", response_model=LanguagesResponse, status_code=status.HTTP_200_OK)
def list_languages(
    use_case: CatalogUseCase = Depends(inject_use_case(container.catalog_use_case)),
) -> LanguagesResponse:
    """
    Get every language in the catalog.

    Public endpoint. Entries are returned in the order they were seeded.
    """
    try:
        languages = use_case.list_languages()
        return LanguagesResponse(languages=[LanguageSchema.from_entity(lang) for lang in languages])
    except (CodeKickstartError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list languages: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("/seed", response_model=SeedLanguagesResponse, status_code=status.HTTP_200_OK)
def seed_languages(
    use_case: CatalogUseCase = Depends(inject_use_case(container.catalog_use_case)),
) -> SeedLanguagesResponse:
    """
    Seed the catalog with the built-in reference languages.

    Does nothing when the catalog already has entries, so it is safe to call
    repeatedly.
    """
    try:
        seed_status = use_case.seed_languages()
        return SeedLanguagesResponse(status=seed_status.value, message=seed_status.message)
    except (CodeKickstartError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to seed languages: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{slug}", response_model=LanguageSchema, status_code=status.HTTP_200_OK)
def get_language(
    slug: str,
    use_case: CatalogUseCase = Depends(inject_use_case(container.catalog_use_case)),
) -> LanguageSchema:
    """
    Get one catalog entry by slug.

    Raises:
        LanguageNotFoundError: If no entry has this slug (404)
    """
    language = use_case.get_language(slug)
    if language is None:
        raise LanguageNotFoundError(slug)
    return LanguageSchema.from_entity(language)
