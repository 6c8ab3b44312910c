"""Catalog module domain exceptions."""

from codekickstart.domain.common.exceptions import EntityNotFoundError


class LanguageNotFoundError(EntityNotFoundError):
    """Raised when an operation references a slug that is not in the catalog."""

    def __init__(self, slug: str) -> None:
        super().__init__("Language", slug)
        self.slug = slug
